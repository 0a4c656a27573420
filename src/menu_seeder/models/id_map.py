"""Name to store ID lookup built up during a seed run."""

from collections.abc import Iterator


class IdMap:
    """
    Maps human readable names to the IDs the store generated for them.

    Lookups of unknown names return None instead of raising: a menu item
    whose category failed to be created is still written, just without a
    category reference.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._ids: dict[str, str] = {}

    def register(self, name: str, document_id: str) -> None:
        self._ids[name] = document_id

    def resolve(self, name: str) -> str | None:
        return self._ids.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __repr__(self) -> str:
        return f"IdMap(kind={self.kind!r}, size={len(self._ids)})"
