from collections import defaultdict
from dataclasses import dataclass, field

from category_source import FetchResult


@dataclass
class LevelCache:
    """Per-build memo of catalog lookups, keyed by tree level.

    Holds at most one fetch result per level. Every node at that level
    reuses it, whichever parent id the node was reached through.
    Also counts the nodes created at each level.
    """

    per_level_fetch: dict[int, FetchResult] = field(default_factory=dict)
    per_level_count: defaultdict[int, int] = field(default_factory=lambda: defaultdict(int))

    def lookup(self, level: int) -> FetchResult | None:
        return self.per_level_fetch.get(level)

    def store(self, level: int, result: FetchResult) -> None:
        self.per_level_fetch[level] = result

    def bump(self, level: int) -> int:
        self.per_level_count[level] += 1
        return self.per_level_count[level]

    def count(self, level: int) -> int:
        return self.per_level_count[level]
