"""Error taxonomy shared by services, adapters and the HTTP layer."""


class TalentManagerError(Exception):
    """Base error carrying the HTTP status it should be rendered with."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Convert the error to an API response body."""
        return {"error": self.message}


class ValidationError(TalentManagerError):
    """Raised when a required field is missing or malformed."""

    status_code = 400


class AuthenticationError(TalentManagerError):
    """Raised when a request has no valid session or credentials are wrong."""

    status_code = 401


class NotFoundError(TalentManagerError):
    """Raised when a requested record does not exist."""

    status_code = 404


class IdentityProviderError(TalentManagerError):
    """Raised when the identity provider rejects a call."""


class IdentityCreationError(IdentityProviderError):
    """Raised when the identity provider refuses to create a user."""


class StoreError(TalentManagerError):
    """Raised when a table query fails."""


class RecordInsertError(StoreError):
    """Raised when inserting a row fails."""


class ObjectStoreError(TalentManagerError):
    """Raised when a storage upload fails."""


class NotificationError(TalentManagerError):
    """Raised when an email cannot be delivered."""
