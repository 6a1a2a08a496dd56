
class DocumentStoreError(RuntimeError):
    """Raised when the document store cannot be read or written."""
    pass


class MissingFieldsError(ValueError):
    """Raised when user-supplied parameters are missing required fields."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"Missing required fields: {', '.join(fields)}")
        self.fields = fields


class MalformedPayloadError(ValueError):
    """Raised when a dress list carried in session parameters cannot be read as-is."""
    pass
