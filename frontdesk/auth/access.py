from collections.abc import Iterable, Mapping
from types import MappingProxyType

from loguru import logger

from frontdesk.domain.models import Role
from frontdesk.domain.seeds import CredentialSeed


class AccessControl:
    """Fixed credential table mapping usernames to passwords and roles.

    The table is loaded once at construction and never changes afterwards.
    Failed logins don't say whether the username or the password was wrong,
    and nothing here tracks lockouts.
    """

    def __init__(self, credentials: Iterable[CredentialSeed]) -> None:
        self._passwords: dict[str, str] = {}
        self._roles: dict[str, Role] = {}
        for username, password, role in credentials:
            self._passwords[username] = password
            self._roles[username] = role

    def login(self, username: str, password: str) -> Role | None:
        """Return the account's role, or None if the credentials don't match."""
        expected = self._passwords.get(username)
        if expected is None or expected != password:
            logger.warning("Failed login attempt for username={}", username)
            return None

        role = self._roles[username]
        logger.info("User {} logged in as {}", username, role.value)
        return role

    def all_roles(self) -> Mapping[str, Role]:
        return MappingProxyType(self._roles)

    @staticmethod
    def is_admin(role: Role | str | None) -> bool:
        return role == Role.ADMIN
