"""
Top-k tracker for (word, distance) candidates.
"""
import bisect
import heapq
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .errors import InvalidParameter


@dataclass(frozen=True)
class Candidate:
    word: str
    distance: float


SENTINEL = Candidate("", math.inf)


class TopKTracker:
    """
    Fixed-size list of the k best candidates, ascending by distance.

    Always holds exactly k slots; unfilled slots hold SENTINEL. A candidate
    is only inserted when strictly better than the current k-th entry, so on
    equal distances the first one seen keeps its rank.
    """

    def __init__(self, k: int):
        if k <= 0:
            raise InvalidParameter(f"k must be positive, got {k}")
        self.k = k
        self._slots: List[Candidate] = [SENTINEL] * k
        self._distances: List[float] = [math.inf] * k

    def insert(self, candidate: Candidate) -> bool:
        """Insert `candidate` if it beats the k-th entry. Returns True if kept."""
        if not candidate.distance < self._distances[-1]:
            return False
        # bisect_right puts it after any equal distances already held
        idx = bisect.bisect_right(self._distances, candidate.distance)
        self._distances.insert(idx, candidate.distance)
        self._slots.insert(idx, candidate)
        self._distances.pop()
        self._slots.pop()
        return True

    def current_bound(self) -> float:
        """Distance of the k-th entry, the live best-so-far cutoff."""
        return self._distances[-1]

    @property
    def slots(self) -> List[Candidate]:
        """All k slots, sentinels included."""
        return list(self._slots)

    def results(self) -> List[Candidate]:
        """Real candidates only, best first."""
        return [c for c in self._slots if c is not SENTINEL and c.distance < math.inf]

    def __len__(self) -> int:
        return len(self.results())


def merge_top_k(lists: Iterable[Sequence[Candidate]], k: int) -> List[Candidate]:
    """
    Merge several ascending candidate lists into one top-k list.

    heapq.merge is stable, so on equal distances entries from earlier lists
    win, which matches a sequential scan over the concatenated inputs.
    """
    tracker = TopKTracker(k)
    for candidate in heapq.merge(*lists, key=lambda c: c.distance):
        if not tracker.insert(candidate):
            break
    return tracker.results()
