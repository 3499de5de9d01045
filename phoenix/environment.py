"""An ordered set of shell variables, some of them without a value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


class Environment:
    """Shell variables kept in the order they were first defined.

    A variable may exist without a value (declared but not assigned);
    such variables are listed by ``export_lines`` but not by ``env_lines``.
    """

    def __init__(
        self,
        entries: Mapping[str, str | None] | Iterable[str] | None = None,
    ) -> None:
        self._vars: dict[str, str | None] = {}
        if entries is None:
            return
        if isinstance(entries, Mapping):
            for key, value in entries.items():
                self._vars[key] = value
            return
        for entry in entries:
            key, equals, value = entry.partition("=")
            self._vars[key] = value if equals else None

    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or None if unset or without value."""
        return self._vars.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Assign ``value`` to ``key``, appending the key if it is new.

        Setting an existing key to None leaves its value unchanged.
        """
        if key in self._vars:
            if value is not None:
                self._vars[key] = value
            return
        self._vars[key] = value

    def declare(self, key: str) -> None:
        """Declare ``key`` without a value.

        An existing key keeps its value, unless ``key`` ends with ``=``,
        in which case the variable's value is cleared.
        """
        if key.endswith("="):
            name = key[:-1]
            self._vars[name] = None
            return
        self._vars.setdefault(key, None)

    def remove(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        return self._vars.pop(key, _MISSING) is not _MISSING

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def env_lines(self) -> list[str]:
        """Return ``KEY=VALUE`` lines for every variable that has a value."""
        return [
            f"{key}={value}" for key, value in self._vars.items()
            if value is not None
        ]

    def export_lines(self) -> list[str]:
        """Return ``declare -x`` lines for every variable."""
        return [
            f'declare -x {key}="{value if value is not None else ""}"'
            for key, value in self._vars.items()
        ]


_MISSING = object()