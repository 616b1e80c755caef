class ProjectWriteException(Exception):
    """Базовое исключение для создания и изменения проектов"""

    pass


class ProjectValidationException(ProjectWriteException):
    """Обязательное поле пустое или изменять нечего"""

    pass


class ProjectNameTakenException(ProjectWriteException):
    def __init__(self):
        super().__init__("Project name already exists")


class DesignImageTypeException(ProjectWriteException):
    def __init__(self):
        super().__init__("Design image must be an image")


class DesignImageTooLargeException(ProjectWriteException):
    def __init__(self):
        super().__init__("Design image too large (max 20MB)")


class DesignImageStorageException(ProjectWriteException):
    def __init__(self):
        super().__init__("Failed to save design image")
