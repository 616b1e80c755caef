class ProjectFileException(Exception):
    """Базовое исключение для файлов проекта"""

    pass


class FileTooLargeException(ProjectFileException):
    def __init__(self):
        super().__init__("File too large")


class UnsupportedFileTypeException(ProjectFileException):
    def __init__(self):
        super().__init__("File type not allowed")


class FileStorageException(ProjectFileException):
    """Не удалось записать файл на диск"""

    def __init__(self):
        super().__init__("Failed to save file")


class ProjectFileNotFoundError(ProjectFileException):
    def __init__(self):
        super().__init__("File not found")


class StoredFileMissingException(ProjectFileException):
    """Запись есть в БД, а файла на диске нет"""

    def __init__(self):
        super().__init__("File missing on disk")
