import random
from abc import ABC, abstractmethod

from .hash_index import HashIndex
from .searches import search_binary, search_jump, search_linear
from .sorts import bubble_sort, quick_sort
from .utils import Comparator, extract_keys, natural_order


class SearchStrategy(ABC):
    """
    Abstract base class for a benchmarked strategy.
    A strategy builds its lookup structure from the raw directory entries once,
    then answers one query at a time. Each instance is meant for a single run so
    no derived structure is shared between strategies.
    """
    name: str = ""
    build_phase: str = None

    def __init__(self, cmp: Comparator = natural_order):
        self.cmp = cmp
        self.entries = []

    def build(self, entries: list[str]):
        """Builds the lookup structure. Strategies without a build phase keep the raw entries."""
        self.entries = entries

    @abstractmethod
    def find(self, query: str) -> bool:
        """Returns True when the query is found."""
        pass

    def count_found(self, queries: list[str]) -> int:
        return sum(1 for query in queries if self.find(query))


class LinearSearchStrategy(SearchStrategy):
    """Substring scan over the unsorted raw entries."""
    name = "linear search"

    def find(self, query: str) -> bool:
        return search_linear(self.entries, query) != -1


class SortedSearchStrategy(SearchStrategy):
    """
    Abstract base for strategies that sort the extracted keys before searching.
    Subclasses pick the sort and the search routine.
    """
    build_phase = "sorting"

    def __init__(self, cmp: Comparator = natural_order):
        super().__init__(cmp)
        self.sorted_keys = []

    def build(self, entries: list[str]):
        self.sorted_keys = self.sort(extract_keys(entries))

    @abstractmethod
    def sort(self, keys: list[str]) -> list[str]:
        pass


class JumpSearchStrategy(SortedSearchStrategy):
    name = "bubble sort + jump search"

    def sort(self, keys: list[str]) -> list[str]:
        return bubble_sort(keys, self.cmp)

    def find(self, query: str) -> bool:
        return search_jump(self.sorted_keys, query, self.cmp) != -1


class BinarySearchStrategy(SortedSearchStrategy):
    name = "quick sort + binary search"

    def __init__(self, cmp: Comparator = natural_order, rng: random.Random = None):
        super().__init__(cmp)
        self.rng = rng

    def sort(self, keys: list[str]) -> list[str]:
        return quick_sort(keys, self.cmp, self.rng)

    def find(self, query: str) -> bool:
        return search_binary(self.sorted_keys, query, self.cmp) >= 0


class HashTableStrategy(SearchStrategy):
    """Exact membership against a set of extracted keys."""
    name = "hash table"
    build_phase = "creating"

    def __init__(self, cmp: Comparator = natural_order):
        super().__init__(cmp)
        self.index = HashIndex()

    def build(self, entries: list[str]):
        self.index = HashIndex.from_entries(entries)

    def find(self, query: str) -> bool:
        return query in self.index


# Run order of the benchmark
STRATEGIES = {
    "linear": LinearSearchStrategy,
    "jump": JumpSearchStrategy,
    "binary": BinarySearchStrategy,
    "hash": HashTableStrategy,
}


def create_strategy(key: str, cmp: Comparator = natural_order) -> SearchStrategy:
    try:
        strategy_cls = STRATEGIES[key]
    except KeyError:
        raise ValueError(f"Unknown strategy {key!r}; choose from {', '.join(STRATEGIES)}") from None
    return strategy_cls(cmp)


# Bubble sort is O(n^2); above this size it is left out of the default selection
BUBBLE_SORT_MAX_ENTRIES = 20_000


def default_strategies(num_entries: int = None) -> list[str]:
    """
    Strategy keys selected by default for a directory of `num_entries`.
    The bubble sort strategy is dropped for directories larger than
    BUBBLE_SORT_MAX_ENTRIES. An unknown size keeps every strategy.
    """
    return [
        key for key in STRATEGIES
        if not (key == "jump" and num_entries is not None and num_entries > BUBBLE_SORT_MAX_ENTRIES)
    ]
