from collections.abc import Mapping

from frontdesk.domain.models import EntityKind

DEFAULT_PREFIXES: dict[EntityKind, str] = {
    EntityKind.PATIENT: "P",
    EntityKind.APPOINTMENT: "A",
}


class IdentifierAllocator:
    """Hands out ``<prefix><n>`` identifiers, one counter per entity kind.

    Counters start at 1 and only move when :meth:`next` is called, so callers
    must finish validating before they allocate. Not thread-safe.
    """

    def __init__(self, prefixes: Mapping[EntityKind, str] | None = None) -> None:
        self._prefixes = dict(prefixes or DEFAULT_PREFIXES)
        self._counters: dict[EntityKind, int] = {kind: 0 for kind in self._prefixes}

    def next(self, kind: EntityKind) -> str:
        self._counters[kind] += 1
        return f"{self._prefixes[kind]}{self._counters[kind]}"

    def allocated(self, kind: EntityKind) -> int:
        """Number of identifiers handed out so far for ``kind``."""
        return self._counters[kind]
