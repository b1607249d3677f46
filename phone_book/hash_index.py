from .utils import SEPARATOR, extract_key


class HashIndex:
    """
    Set of directory keys for constant-time exact membership checks.

    Unlike the linear scan, a query only matches when it equals an extracted key
    exactly: "oe" is not found in an index built from "1 Doe".
    """
    def __init__(self, keys=()):
        self._keys = set(keys)

    @classmethod
    def from_entries(cls, entries: list[str], separator: str = SEPARATOR) -> "HashIndex":
        return cls(extract_key(entry, separator) for entry in entries)

    def contains(self, key: str) -> bool:
        return key in self._keys

    def __contains__(self, key) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return len(self._keys)
