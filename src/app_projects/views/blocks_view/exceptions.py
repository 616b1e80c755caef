class BlockException(Exception):
    """Базовое исключение для API блоков"""

    pass


class BlockAlreadyExistsException(BlockException):
    def __init__(self):
        super().__init__("Block name already exists in project")
