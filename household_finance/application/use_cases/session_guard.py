"""Session checks shared by use cases."""

from household_finance.domain.errors import AuthenticationError
from household_finance.domain.models import UserSession


def require_user_id(session: UserSession | None) -> str:
    """Return the session's user id.

    Raises:
        AuthenticationError: If there is no authenticated session.
    """
    if session is None or not session.user_id:
        raise AuthenticationError("An authenticated session is required")
    return session.user_id


__all__ = ["require_user_id"]
