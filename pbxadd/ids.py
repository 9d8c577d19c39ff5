"""Generation and bookkeeping of 24-digit project object identifiers."""

from __future__ import annotations

import functools
import secrets
from dataclasses import dataclass, field

__all__ = ["UuidRegistry", "random_id", "get_registry"]

ID_BYTES = 12


def random_id() -> str:
    """Return a fresh identifier: 12 random bytes as upper-case hex."""
    return secrets.token_hex(ID_BYTES).upper()


@dataclass
class UuidRegistry:
    """Identifiers seen in a project and identifiers assigned to paths."""

    uuid_store: list[str] = field(default_factory=list)
    by_path: dict[str, str] = field(default_factory=dict)

    def generate_for(self, path: str) -> str:
        """Return the identifier for ``path``, creating it on first use."""
        uuid = self.by_path.get(path, "")
        if not uuid:
            uuid = self.new_id()
            self.by_path[path] = uuid
        return uuid

    def new_id(self) -> str:
        """Return a fresh identifier not tied to any path."""
        return random_id()


@functools.lru_cache(maxsize=None)
def get_registry() -> UuidRegistry:
    """Return the process-wide registry."""
    return UuidRegistry()