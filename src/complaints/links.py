"""Ordered, capped list of complaint links entered by the user."""

from __future__ import annotations

from typing import Iterable, Iterator

MAX_LINKS = 100


class LinkList:
    """Mutable list of URL strings that always holds at least one entry.

    Entries are not validated; blank ones are dropped later by the client.
    """

    def __init__(self, links: Iterable[str] | None = None, *, max_links: int = MAX_LINKS) -> None:
        self._max_links = max_links
        self._links: list[str] = [""]
        if links is not None:
            self.extend(links)

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[str]:
        return iter(self._links)

    def __getitem__(self, index: int) -> str:
        return self._links[index]

    def __repr__(self) -> str:
        return f"LinkList({self._links!r})"

    @property
    def links(self) -> list[str]:
        return list(self._links)

    @property
    def can_add(self) -> bool:
        return len(self._links) < self._max_links

    @property
    def first_is_blank(self) -> bool:
        return not self._links[0].strip()

    def add(self) -> bool:
        """Append an empty entry. Returns ``False`` when already at the cap."""
        if not self.can_add:
            return False
        self._links.append("")
        return True

    def remove(self, index: int) -> None:
        """Delete the entry at *index*; an emptied list resets to ``[""]``."""
        del self._links[index]
        if not self._links:
            self._links = [""]

    def update(self, index: int, value: str) -> None:
        self._links[index] = value

    def extend(self, values: Iterable[str]) -> int:
        """Append *values*, reusing the slot of a fresh ``[""]`` list.

        Stops silently at the cap. Returns the number of values stored.
        """
        stored = 0
        fill_first = self._links == [""]
        for value in values:
            if fill_first:
                self._links[0] = value
                fill_first = False
            elif self.add():
                self._links[-1] = value
            else:
                break
            stored += 1
        return stored

    def non_blank(self) -> list[str]:
        """Entries with visible content, stripped, in order."""
        return [link.strip() for link in self._links if link.strip()]
