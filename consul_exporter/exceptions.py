"""Exceptions raised while resolving exporter parameters."""


class ValidationError(ValueError):
    """Declared parameters cannot be resolved into an install descriptor.

    Raised for unsupported or malformed exporter versions. The run that
    declared the parameters is expected to abort; no partial descriptor
    is ever produced.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
