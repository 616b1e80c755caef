class CrackImportException(Exception):
    """Базовое исключение для импорта трещин"""

    pass


class InvalidFileFormatException(CrackImportException):
    """Неверный формат файла"""

    pass


class InvalidFileStructureException(CrackImportException):
    """Неверная структура листа (нет листов, пусто, мало колонок)"""

    pass


class FileProcessingException(CrackImportException):
    """Ошибка при обработке файла"""

    pass


class NoValidRowsException(CrackImportException):
    """В листе не нашлось ни одной пригодной строки"""

    def __init__(self, errors: list = None):
        super().__init__("No valid data rows")
        self.errors = errors or []
