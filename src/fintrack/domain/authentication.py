"""Caller identity providers."""

from abc import ABC, abstractmethod
from typing import Optional

from fintrack.domain.errors import UnauthenticatedError


class Authenticator(ABC):
    """Supplies a verified caller identity."""

    @abstractmethod
    def authenticate(self) -> str:
        """Return the caller's user identifier.

        Raises:
            UnauthenticatedError: If no valid identity is available
        """
        pass


class StaticAuthenticator(Authenticator):
    """Authenticator backed by a configured user identifier.

    Used by the CLI, where the identity comes from ``--user`` or the
    FINTRACK_USER environment variable.
    """

    def __init__(self, user_id: Optional[str]):
        self.user_id = user_id

    def authenticate(self) -> str:
        if self.user_id is None or not str(self.user_id).strip():
            raise UnauthenticatedError(
                "Not authorized, no user identity (use --user or FINTRACK_USER)"
            )
        return str(self.user_id).strip()
