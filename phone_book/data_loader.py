import os

import numpy as np

from .utils import extract_key

FIRST_NAMES = [
    "Amelia", "Ariel", "Benjamin", "Chloe", "Daniel", "Elena", "Felix", "Grace",
    "Hugo", "Isla", "Jack", "Kira", "Liam", "Maya", "Noah", "Olivia",
    "Pavel", "Quinn", "Rosa", "Samuel", "Tara", "Umar", "Vera", "Wyatt",
]
SYLLABLES = ["do", "ro", "mo", "ka", "li", "sen", "ber", "tan", "vi", "gor", "wel", "son"]


def read_lines(file_path: str) -> list[str]:
    """
    Reads a text file into a list of lines without trailing newlines.
    Blank lines are skipped. A missing file raises FileNotFoundError.
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return [line.rstrip('\r\n') for line in f if line.strip()]


def generate_directory(num_entries: int, seed: int = None) -> list[str]:
    """
    Generates synthetic directory entries of the form "<phone> <first> <last>".
    Names are drawn at random, so duplicates are possible on larger sizes.
    """
    if num_entries <= 0:
        raise ValueError(f"num_entries must be positive, got {num_entries}")

    rng = np.random.default_rng(seed)
    phones = rng.integers(1_000_000, 10_000_000, size=num_entries)
    first_idx = rng.integers(0, len(FIRST_NAMES), size=num_entries)
    syllable_counts = rng.integers(2, 5, size=num_entries)

    entries = []
    for phone, first, count in zip(phones, first_idx, syllable_counts):
        last = "".join(rng.choice(SYLLABLES, size=count)).capitalize()
        entries.append(f"{phone} {FIRST_NAMES[first]} {last}")
    return entries


def generate_queries(directory: list[str], num_queries: int, miss_ratio: float = 0.0,
                     seed: int = None) -> list[str]:
    """
    Picks query names from the directory's keys. A `miss_ratio` share of the
    queries is replaced with names that are not in the directory.
    """
    if num_queries <= 0:
        raise ValueError(f"num_queries must be positive, got {num_queries}")
    if not 0.0 <= miss_ratio <= 1.0:
        raise ValueError(f"miss_ratio must be within [0, 1], got {miss_ratio}")

    if not directory:
        raise ValueError("Cannot pick queries from an empty directory")

    rng = np.random.default_rng(seed)
    keys = [extract_key(entry) for entry in directory]
    picked = rng.integers(0, len(keys), size=num_queries)
    queries = [keys[i] for i in picked]

    num_misses = int(round(num_queries * miss_ratio))
    miss_positions = rng.choice(num_queries, size=num_misses, replace=False)
    known = set(keys)
    for n, pos in enumerate(miss_positions):
        # Digits never appear in generated names
        candidate = f"{queries[pos]} {n}"
        while candidate in known:
            candidate += "x"
        queries[pos] = candidate
    return queries


def load_directory(directory_path: str = None, num_entries: int = 1000, seed: int = None) -> list[str]:
    """Reads the directory file when a path is given, otherwise generates entries."""
    if directory_path is None:
        return generate_directory(num_entries, seed=seed)
    if not os.path.exists(directory_path):
        raise FileNotFoundError(f"Directory file not found at {directory_path}")
    return read_lines(directory_path)


def load_queries(directory: list[str], find_path: str = None, num_queries: int = 100,
                 miss_ratio: float = 0.0, seed: int = None) -> list[str]:
    """Reads the find file when a path is given, otherwise picks names from the directory."""
    if find_path is None:
        return generate_queries(directory, num_queries, miss_ratio=miss_ratio, seed=seed)
    if not os.path.exists(find_path):
        raise FileNotFoundError(f"Find file not found at {find_path}")
    return read_lines(find_path)


def load_inputs(directory_path: str = None, find_path: str = None, num_entries: int = 1000,
                num_queries: int = 100, miss_ratio: float = 0.0, seed: int = None) -> tuple[list[str], list[str]]:
    """
    Loads the directory and query lines from files when paths are given,
    otherwise generates them.
    """
    directory = load_directory(directory_path, num_entries=num_entries, seed=seed)
    queries = load_queries(directory, find_path, num_queries=num_queries, miss_ratio=miss_ratio, seed=seed)
    return directory, queries
