"""A list of Facebook permissions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# Longest single permission name the parser accepts.
_MAX_PERMISSION_LENGTH = 63


@dataclass(frozen=True)
class Permissions:
    """An ordered, immutable list of permission names."""

    values: tuple[str, ...]

    def __init__(self, values: Iterable[str] = ()) -> None:
        object.__setattr__(self, "values", tuple(values))

    def __str__(self) -> str:
        """Comma separated form, suitable for a request URL."""
        return ",".join(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    @classmethod
    def from_string(cls, permissions: str) -> Permissions:
        """Parse a comma separated list of permissions."""
        tokens = permissions.split(",")
        for token in tokens:
            if len(token) > _MAX_PERMISSION_LENGTH:
                raise ValueError(
                    f"permission longer than {_MAX_PERMISSION_LENGTH} characters: {token!r}"
                )
        return cls(tokens)

    @staticmethod
    def difference(minuend: Permissions, subtrahend: Permissions) -> Permissions:
        """Permissions in ``minuend`` left after removing those in ``subtrahend``.

        Each entry of ``subtrahend`` removes at most one matching entry.
        """
        remaining = list(minuend.values)
        for perm in subtrahend.values:
            if perm in remaining:
                remaining.remove(perm)
        return Permissions(remaining)