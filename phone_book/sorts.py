import random

from .utils import Comparator, natural_order


def is_sorted(data: list, cmp: Comparator = natural_order) -> bool:
    """Checks that no element precedes the one before it."""
    return all(not cmp(data[i + 1], data[i]) for i in range(len(data) - 1))


def bubble_sort(data: list, cmp: Comparator = natural_order) -> list:
    """
    Exchange sort over a copy of `data`.
    For every position i, every later element that precedes the current one at i
    is swapped into place, so after the inner pass position i holds the i-th
    smallest element. Always O(n^2) comparisons, whatever the input order.
    Returns a new list; the input is left untouched.
    """
    result = list(data)
    n = len(result)
    for i in range(n):
        for j in range(i, n):
            if cmp(result[j], result[i]):
                result[i], result[j] = result[j], result[i]
    return result


def _partition(data: list, low: int, high: int, cmp: Comparator, rng: random.Random) -> int:
    # Move a random pivot to the end, then gather everything preceding it on the left.
    # Elements equal to the pivot stay on the right of the pivot's final slot.
    pivot_idx = rng.randint(low, high)
    data[pivot_idx], data[high] = data[high], data[pivot_idx]
    pivot = data[high]

    store = low
    for i in range(low, high):
        if cmp(data[i], pivot):
            data[i], data[store] = data[store], data[i]
            store += 1
    data[store], data[high] = data[high], data[store]
    return store


def quick_sort(data: list, cmp: Comparator = natural_order, rng: random.Random = None) -> list:
    """
    Randomized quicksort over a copy of `data`.

    A fresh uniformly random pivot is drawn for every partition. Elements that
    precede the pivot go left; everything else (equal elements included) goes
    right, and the pivot itself is excluded from both sides so each partition
    strictly shrinks. Expected O(n log n), worst case O(n^2).

    Partitioning is done in place on the copy. The smaller side is sorted
    recursively and the larger side iteratively, keeping the stack depth
    logarithmic even for inputs with many equal keys.
    """
    rng = rng or random.Random()
    result = list(data)

    def _sort(low: int, high: int):
        while low < high:
            p = _partition(result, low, high, cmp, rng)
            if p - low < high - p:
                _sort(low, p - 1)
                low = p + 1
            else:
                _sort(p + 1, high)
                high = p - 1

    _sort(0, len(result) - 1)
    return result
