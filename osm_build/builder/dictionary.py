"""String interning for the map's name tables."""
from typing import Dict, Iterator, List, Optional


class Dictionary:
    """Append-only string table; equal strings share one index."""

    def __init__(self, name: str):
        self.name = name
        self._strings: List[str] = []
        self._index: Dict[str, int] = {}

    def add(self, text: Optional[str]) -> int:
        """Intern a string.

        Args:
            text: String to add; None is stored as the empty string

        Returns:
            Index of the string in this dictionary
        """
        if text is None:
            text = ''
        index = self._index.get(text)
        if index is None:
            index = len(self._strings)
            self._strings.append(text)
            self._index[text] = index
        return index

    def get(self, index: int) -> str:
        """Get the string stored at an index."""
        return self._strings[index]

    def find(self, text: str) -> Optional[int]:
        """Get the index of a string without adding it."""
        return self._index.get(text)

    def __len__(self) -> int:
        return len(self._strings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._strings)

    def __contains__(self, text: object) -> bool:
        return text in self._index

    def __repr__(self) -> str:
        return f"Dictionary({self.name!r}, {len(self)} strings)"
