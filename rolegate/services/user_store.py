"""Volatile in-process user store. Records live only as long as the process."""

import logging
import threading

from rolegate.models.user import UserRecord

logger = logging.getLogger(__name__)


class UserStore:
    """
    Ordered list of UserRecord owned by one application instance.

    Usernames are not checked for uniqueness: registering the same name twice
    stores two records and find_by_username returns the first one.
    """

    def __init__(self) -> None:
        self._users: list[UserRecord] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def create(self, username: str, password_hash: str, role: str) -> UserRecord:
        """Append a new record and return it."""
        user = UserRecord(username=username, password_hash=password_hash, role=role)
        with self._lock:
            if any(u.username == username for u in self._users):
                logger.warning("Duplicate username registered: %s", username)
            self._users.append(user)
        return user

    def find_by_username(self, username: str) -> UserRecord | None:
        """First record with an exactly matching username, in insertion order."""
        return next((u for u in self._users if u.username == username), None)

    def list_users(self) -> list[UserRecord]:
        """All records in insertion order."""
        with self._lock:
            return list(self._users)
