class UserApiException(Exception):
    """Базовое исключение для API пользователей"""

    pass


class UserValidationException(UserApiException):
    """Нет email/пароля или нечего менять"""

    pass


class EmailTakenException(UserApiException):
    def __init__(self):
        super().__init__("Email already exists")
