"""Admin session guard."""

import hmac
from collections.abc import MutableMapping
from dataclasses import dataclass

ADMIN_SESSION_KEY = "is_admin"


@dataclass
class SessionGuard:
    """Decides whether a browser session is signed in as the admin.

    The guard only reads and writes the ``is_admin`` flag of the session
    mapping it is handed. Cookie signing, storage and expiry belong to the
    session middleware.
    """

    admin_password: str

    def __post_init__(self) -> None:
        if not self.admin_password:
            raise ValueError("Admin password must be configured")

    def is_authorized_admin(self, session: MutableMapping[str, object]) -> bool:
        """Return true when the session carries the admin flag."""
        return session.get(ADMIN_SESSION_KEY) is True

    def authenticate(self, session: MutableMapping[str, object], password: str) -> bool:
        """Mark the session as admin when the password matches."""
        if not hmac.compare_digest(
            password.encode("utf-8", errors="surrogatepass"),
            self.admin_password.encode("utf-8", errors="surrogatepass"),
        ):
            return False
        session[ADMIN_SESSION_KEY] = True
        return True

    def revoke(self, session: MutableMapping[str, object]) -> None:
        """Clear the admin flag along with the rest of the session."""
        session.clear()
