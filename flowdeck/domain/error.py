"""Domain layer errors."""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class UpstreamError(DomainError):
    """An external system behind a domain port failed or was unreachable.

    Adapters raise subclasses of this; services translate it into an
    OAuthFlowError.
    """

    pass


class OAuthErrorKind(str, Enum):
    """Stable failure kinds of the OAuth and calendar flows.

    The interface layer maps each kind to exactly one HTTP status.
    """

    CONFIGURATION = "configuration_error"
    INVALID_REQUEST = "invalid_request"
    INVALID_STATE = "invalid_state"
    INVALID_USER_ID = "invalid_user_id"
    MISSING_ID_TOKEN = "missing_id_token"
    MISSING_EMAIL = "missing_email"
    MISSING_REFRESH_TOKEN = "missing_refresh_token"
    NOT_LINKED = "not_linked"
    AUDIENCE_MISMATCH = "audience_mismatch"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    USER_NOT_FOUND = "user_not_found"
    UPSTREAM_FAILURE = "upstream_failure"


class OAuthFlowError(DomainError):
    """A Google OAuth or calendar operation failed.

    Attributes:
        kind: Which failure occurred
        message: Human-readable detail, safe to return to the client
    """

    def __init__(self, kind: OAuthErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(f"{kind.value}: {message}")
