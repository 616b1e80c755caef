from rest_framework import serializers

from app_users.roles import Role, permissions_for


class UserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField(source="first_name")
    email = serializers.EmailField()
    role = serializers.CharField()
    status = serializers.BooleanField(source="is_active")
    lastLogin = serializers.DateTimeField(source="last_login", allow_null=True)
    createdAt = serializers.DateTimeField(source="date_joined")


class CurrentUserSerializer(UserSerializer):
    permissions = serializers.SerializerMethodField()

    def get_permissions(self, obj) -> list:
        return sorted(permissions_for(obj))


class UserPageSerializer(serializers.Serializer):
    items = UserSerializer(many=True)
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    pageSize = serializers.IntegerField()


class UserCreateSerializer(serializers.Serializer):
    """Обязательность email/password проверяет сервис"""

    name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    email = serializers.EmailField(required=False, allow_blank=True, max_length=150)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)
    role = serializers.ChoiceField(choices=Role.choices, default=Role.USER)
    status = serializers.BooleanField(default=True)


class UserUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    role = serializers.ChoiceField(choices=Role.choices, required=False)
    status = serializers.BooleanField(required=False)
