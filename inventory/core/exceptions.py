from typing import Any, Optional


class NotFoundError(Exception):
    """
    Exception raised when a requested entity id does not resolve
    """
    status_code = 404

    def __init__(self, message: str = "Not found"):
        self.message = message
        super().__init__(self.message)


class DuplicateEntityError(Exception):
    """
    Exception raised when the store rejects a write that would give two
    entities the same natural key
    """
    def __init__(self, existing: Optional[Any] = None, message: str = "Entity already exists"):
        self.existing = existing
        self.message = message
        super().__init__(self.message)
