import math

from .utils import Comparator, natural_order, is_equal

# --- Search Algorithms over Directory Data ---

def search_linear(entries: list[str], query: str) -> int:
    """
    Scans the unsorted entries in their original order.
    An entry matches when its raw text contains the query as a substring.
    Returns the index of the first matching entry, or -1.
    """
    for i, entry in enumerate(entries):
        if query in entry:
            return i
    return -1

def search_jump(data: list, target, cmp: Comparator = natural_order) -> int:
    """
    Jump search over data sorted by `cmp`.
    Jumps ahead in blocks of floor(sqrt(n)) while the current element precedes
    the target, then steps back one element at a time while the target precedes
    the current element. The landing element is only reported when it is equal
    to the target under `cmp`.
    Returns the index of the match, or -1.
    """
    n = len(data)
    if n == 0:
        return -1

    last = n - 1
    block = math.isqrt(n)

    i = 0
    while cmp(data[i], target):
        if i == last:
            # Target is past every element
            return -1
        i = min(i + block, last)

    while i > 0 and cmp(target, data[i]):
        i -= 1

    if is_equal(data[i], target, cmp):
        return i
    return -1

def search_binary(data: list, target, cmp: Comparator = natural_order) -> int:
    """
    Binary search over data sorted by `cmp`.
    Returns the index of an element equal to the target under `cmp`. On a miss,
    returns -(insertion_point + 1) where insertion_point is the index at which
    the target would keep the data sorted, so any result >= 0 means found.
    """
    low, high = 0, len(data) - 1
    while low <= high:
        mid = (low + high) >> 1
        value = data[mid]
        if cmp(value, target):
            low = mid + 1
        elif cmp(target, value):
            high = mid - 1
        else:
            return mid
    return -(low + 1)

def insertion_point(result: int) -> int:
    """Decodes the insertion point from a negative search_binary result."""
    if result >= 0:
        raise ValueError(f"search_binary result {result} is a hit, not an insertion point")
    return -(result + 1)
