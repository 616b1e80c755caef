"""
Единый формат ошибок DRF: {"message": ..., "errors"?: [...]}.
"""

from rest_framework import exceptions
from rest_framework.views import exception_handler

MESSAGES = {
    exceptions.ParseError: "Invalid JSON body",
    exceptions.NotAuthenticated: "Unauthorized",
    exceptions.AuthenticationFailed: "Unauthorized",
    exceptions.PermissionDenied: "Forbidden",
    exceptions.NotFound: "Not found",
    exceptions.MethodNotAllowed: "Method not allowed",
    exceptions.UnsupportedMediaType: "Unsupported media type",
}


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    message = None
    for exc_class, text in MESSAGES.items():
        if isinstance(exc, exc_class):
            message = text
            break

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"message": "Invalid request data", "errors": [exc.detail]}
    else:
        response.data = {"message": message or str(exc.detail)}
    return response
