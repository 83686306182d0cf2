"""Error taxonomy shared by services and routes."""


class VocabCompanionError(Exception):
    """Base exception; carries the HTTP status the API maps it to."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidInput(VocabCompanionError):
    """A required field is missing or empty."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} is required", status_code=400)


class StorageUnavailable(VocabCompanionError):
    """The database could not be reached or the statement failed."""

    def __init__(self, message: str = "Storage unavailable") -> None:
        super().__init__(message, status_code=500)


class TranslationUnavailable(VocabCompanionError):
    """The translation provider failed; message is the provider's."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=500)


class TranslatorNotConfigured(TranslationUnavailable):
    def __init__(self) -> None:
        super().__init__("API key not configured")
