class MemberException(Exception):
    """Базовое исключение для участников проекта"""

    pass


class UserIdRequiredException(MemberException):
    def __init__(self):
        super().__init__("userId required")


class AlreadyMemberException(MemberException):
    def __init__(self):
        super().__init__("User already a member")


class ProjectOrUserNotFoundException(MemberException):
    def __init__(self):
        super().__init__("Project or user not found")


class MembershipNotFoundException(MemberException):
    def __init__(self):
        super().__init__("Membership not found")
