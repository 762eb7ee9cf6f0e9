"""The shell's own copy of the environment."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def format_entry(key: str, value: str) -> str:
    """Build a KEY=VALUE environment entry."""
    return f"{key}={value}"


class Environment:
    """An ordered list of KEY=VALUE entries, edited in place."""

    def __init__(self, entries: Iterable[str] | Mapping[str, str] = ()) -> None:
        if isinstance(entries, Mapping):
            self._entries = [format_entry(k, v) for k, v in entries.items()]
        else:
            self._entries = list(entries)

    def _index(self, key: str) -> int | None:
        prefix = key + "="
        for index, entry in enumerate(self._entries):
            if entry.startswith(prefix):
                return index
        return None

    def get(self, key: str) -> str | None:
        """Return the value of *key*, or None when it is not set."""
        index = self._index(key)
        if index is None:
            return None
        return self._entries[index][len(key) + 1:]

    def set(self, key: str, value: str) -> None:
        """Replace the entry for *key* in place, or append a new one."""
        entry = format_entry(key, value)
        index = self._index(key)
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def unset(self, key: str) -> None:
        """Remove the entry for *key*; raise KeyError if there is none."""
        index = self._index(key)
        if index is None:
            raise KeyError(key)
        del self._entries[index]

    def lines(self) -> list[str]:
        """Return a copy of the entries in order."""
        return list(self._entries)

    def as_dict(self) -> dict[str, str]:
        """Return the entries as a mapping; the first entry for a key wins."""
        result: dict[str, str] = {}
        for entry in self._entries:
            key, sep, value = entry.partition("=")
            if sep:
                result.setdefault(key, value)
        return result

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._index(key) is not None

    def __len__(self) -> int:
        return len(self._entries)