from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from .address import AddressDecoder
from .errors import InvariantViolation
from .geometry import CacheGeometry
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class HitInfo:
    """Hit/miss counts accumulated over one batch of requests."""
    hits: int = 0
    misses: int = 0

    @property
    def accesses(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        return self.hits / self.accesses if self.accesses else 0.0

    @property
    def miss_rate(self) -> float:
        return self.misses / self.accesses if self.accesses else 0.0

    def to_dict(self) -> dict:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "accesses": self.accesses,
            "hit_rate": self.hit_rate,
        }


class CacheSet:
    """
    One set of K tag slots with a K x K recency relation (the MRU matrix).

    ``recency[i][j]`` is True when way i was referenced more recently than way j.
    The least recently used way is the one whose row is all False; empty ways
    start with all-False rows so they are picked first, lowest index first.
    """
    def __init__(self, associativity: int):
        self.associativity = associativity
        self.tags: List[Optional[int]] = [None] * associativity
        self.recency = np.zeros((associativity, associativity), dtype=bool)

    def find_way(self, tag: int) -> Optional[int]:
        """Returns the way holding ``tag``, scanning ways in ascending order."""
        for way, stored in enumerate(self.tags):
            if stored is not None and stored == tag:
                return way
        return None

    def touch(self, way: int):
        """Marks ``way`` as most recently used."""
        self.recency[way, :] = True
        self.recency[:, way] = False

    def get_lru_way(self) -> int:
        """Returns the first way that is not more recent than any other way."""
        for way in range(self.associativity):
            if not self.recency[way].any():
                return way
        raise InvariantViolation(
            f"No way has an all-false recency row; relation is corrupt:\n{self.recency.astype(int)}"
        )

    def install(self, way: int, tag: int):
        self.tags[way] = tag

    def occupied(self) -> int:
        return sum(tag is not None for tag in self.tags)

    def clear(self):
        self.tags = [None] * self.associativity
        self.recency[:, :] = False


class SetAssociativeCache:
    """
    A set-associative cache that models tag lookup and true-LRU replacement only.
    No line data is stored; each request is classified as a hit or a miss.

    With ``fill_updates_recency=False`` a line installed on a miss is not marked
    most recently used, so it remains the next victim of its set.
    """
    def __init__(self, geometry: CacheGeometry, fill_updates_recency: bool = True):
        self.geometry = geometry
        self.fill_updates_recency = fill_updates_recency
        self.decoder = AddressDecoder(geometry)
        self.sets = [CacheSet(geometry.associativity) for _ in range(geometry.num_sets)]

    def probe(self, address: int) -> tuple[bool, Optional[int], int, int, int]:
        """
        Looks an address up without changing recency state.
        Returns (hit, way, tag, set_index, offset).
        """
        tag, set_index, offset = self.decoder.decode(address)
        way = self.sets[set_index].find_way(tag)
        return way is not None, way, tag, set_index, offset

    def access(self, address: int) -> bool:
        """Performs a single reference. Returns True on a hit."""
        hit, way, tag, set_index, _ = self.probe(address)
        cache_set = self.sets[set_index]

        if hit:
            cache_set.touch(way)
            logger.debug("%#06x: hit  set=%d way=%d tag=%#x", address, set_index, way, tag)
            return True

        victim = cache_set.get_lru_way()
        evicted = cache_set.tags[victim]
        cache_set.install(victim, tag)
        if self.fill_updates_recency:
            cache_set.touch(victim)
        if evicted is None:
            logger.debug("%#06x: miss set=%d way=%d tag=%#x (fill)", address, set_index, victim, tag)
        else:
            logger.debug("%#06x: miss set=%d way=%d tag=%#x (evict %#x)",
                         address, set_index, victim, tag, evicted)
        return False

    def process_requests(self, addresses: Iterable[int]) -> HitInfo:
        """Feeds ``addresses`` through the cache in order and returns the hit/miss counts."""
        info = HitInfo()
        for address in addresses:
            if self.access(address):
                info.hits += 1
            else:
                info.misses += 1
        return info

    def reset(self):
        """Empties every set and forgets all recency information."""
        for cache_set in self.sets:
            cache_set.clear()
