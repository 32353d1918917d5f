# errors.py

from typing import Any


class NotFound(Exception):
    """Raised when an identifier-based lookup matches no record.

    Attributes:
        resource: Name of the record type that was looked up.
        identifier: The id or key that matched nothing.
    """

    resource = "Record"

    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"{self.resource} {identifier!r} not found")


class PostNotFound(NotFound):
    resource = "Post"


class CategoryNotFound(NotFound):
    resource = "Category"
