# --- Comparators and Key Extraction ---

from typing import Callable

Comparator = Callable[[object, object], bool]

SEPARATOR = " "


class MalformedEntryError(ValueError):
    """Raised when a directory entry has no separator between identifier and key."""


def natural_order(a, b) -> bool:
    """Default comparator: True when `a` precedes `b` in natural ordering."""
    return a < b


def reverse_order(a, b) -> bool:
    return b < a


def is_equal(a, b, cmp: Comparator = natural_order) -> bool:
    """
    Equality under a comparator: neither element precedes the other.
    This is the notion of a match used by the sorted search routines.
    """
    return not cmp(a, b) and not cmp(b, a)


def split_entry(entry: str, separator: str = SEPARATOR) -> tuple[str, str]:
    """
    Splits a directory entry into (identifier, key) on the first separator.
    Everything after the first separator is the key, so "12 John Smith" gives
    ("12", "John Smith").
    """
    identifier, found, key = entry.partition(separator)
    if not found:
        raise MalformedEntryError(f"No separator {separator!r} in directory entry: {entry!r}")
    return identifier, key


def extract_key(entry: str, separator: str = SEPARATOR) -> str:
    return split_entry(entry, separator)[1]


def extract_keys(entries: list[str], separator: str = SEPARATOR) -> list[str]:
    return [extract_key(entry, separator) for entry in entries]
