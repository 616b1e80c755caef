import logging
from typing import Any, Dict

from django.db import IntegrityError, transaction

from app_users.models import User
from app_users.repositories import UserRepository

from .exceptions import EmailTakenException, UserValidationException

logger = logging.getLogger(__name__)


class UserService:
    """Создание и изменение учётных записей"""

    def __init__(self):
        self.repo = UserRepository()

    def create(self, data: Dict[str, Any]) -> User:
        email = (data.get("email") or "").strip().lower()
        password = data.get("password") or ""
        if not email or not password:
            raise UserValidationException("Email & password required")

        # Вход по email: username совпадает с адресом
        if self.repo.model.objects.filter(email__iexact=email).exists():
            raise EmailTakenException()
        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=email,
                    email=email,
                    password=password,
                    first_name=(data.get("name") or "").strip(),
                    role=data["role"],
                    is_active=data["status"],
                )
        except IntegrityError:
            raise EmailTakenException()

        logger.info("Created user %s (%s)", user.id, user.role)
        return user

    def update(self, user_id: int, data: Dict[str, Any]) -> User:
        fields = {}
        if "name" in data:
            fields["first_name"] = data["name"].strip()
        if "role" in data:
            fields["role"] = data["role"]
        if "status" in data:
            fields["is_active"] = data["status"]
        if not fields:
            raise UserValidationException("Nothing to update")

        user = self.repo.get_by_id_or_raise(user_id)
        for attr, value in fields.items():
            setattr(user, attr, value)
        user.save(update_fields=list(fields))

        logger.info("Updated user %s: %s", user.id, ", ".join(sorted(fields)))
        return user
