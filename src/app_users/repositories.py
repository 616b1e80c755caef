from typing import Optional

from django.db.models import Q, QuerySet

from app_users.exceptions import UserNotFoundError
from app_users.models import User
from core.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    def get_by_id_or_raise(self, user_id: int) -> User:
        user = self.get_by_id(user_id) if user_id else None
        if user is None:
            raise UserNotFoundError()
        return user

    def filtered(
        self,
        search: Optional[str] = None,
        role: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> QuerySet[User]:
        qs = self.get_queryset(order_by=["-date_joined", "-id"])
        if search:
            qs = qs.filter(
                Q(first_name__icontains=search)
                | Q(email__icontains=search)
                | Q(username__icontains=search)
            )
        if role:
            qs = qs.filter(role=role)
        if is_active is not None:
            qs = qs.filter(is_active=is_active)
        return qs
