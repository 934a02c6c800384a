class RegistryError(Exception):
    """Base class for failures raised by the class/activity registry."""


class ValidationError(RegistryError):
    """A required field is missing, out of range or malformed."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class ClassReferenceError(RegistryError):
    """An operation referenced a class that does not exist."""

    def __init__(self, class_id: str) -> None:
        self.class_id = class_id
        super().__init__(f"no such class: {class_id}")


class StoreError(RegistryError):
    """The backing store failed; the underlying exception is chained as __cause__."""

    def __init__(self, message: str = "backing store failure") -> None:
        self.message = message
        super().__init__(message)
