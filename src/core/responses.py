from typing import Any, List, Optional

from rest_framework.response import Response


def error_response(message: str, status: int, errors: Optional[List[Any]] = None) -> Response:
    """Единый формат ошибки API: {"message": ..., "errors": [...]}."""
    payload = {"message": str(message)}
    if errors is not None:
        payload["errors"] = errors
    return Response(payload, status=status)
