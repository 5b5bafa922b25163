"""Catalog errors.

Raised by the store and the service when an input is rejected or an id does
not resolve. Both are recoverable: callers catch them and show the message.
"""


class CatalogError(Exception):
    """Base class for every error the catalog raises."""


class ValidationError(CatalogError):
    """A field value is empty, out of range or not one of the allowed values."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class NotFoundError(CatalogError):
    """An identifier does not resolve to a live entity."""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} {entity_id!r} not found")
