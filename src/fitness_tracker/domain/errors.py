"""Domain exceptions."""


class FileFormatError(ValueError):
    """Raised when an imported document cannot be understood."""


class InvalidBackupError(FileFormatError):
    """Raised when a backup document is malformed."""


class InvalidImportError(FileFormatError):
    """Raised when a food import document is malformed."""


class RecordNotFoundError(LookupError):
    """Raised when a mutation targets an id that is not in its collection."""

    def __init__(self, collection: str, record_id: str) -> None:
        super().__init__(f"{collection} record not found: {record_id}")
        self.collection = collection
        self.record_id = record_id


class InvalidRecordError(ValueError):
    """Raised when a new record is missing a required field."""
