"""
Word recognition engine for swipe-typing.
Ranks dictionary words by DTW distance between the drawn path and each
word's ideal path through the key centers.
"""
import logging
import math
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Collection, List, Mapping, Optional, Sequence, Tuple

from .config import RecognitionConfig
from .dtw import INF, get_strategy, path_ends
from .errors import EmptyQuery, InvalidParameter, NotInitialized, RecognitionCancelled
from .paths import Point, point_density
from .topk import Candidate, TopKTracker, merge_top_k
from .word_path import LazyPathSource, PrecomputedPathSource

logger = logging.getLogger(__name__)


@dataclass
class ScanStats:
    """Counters for one recognition call."""
    scanned: int = 0
    no_path: int = 0       # words without a usable path
    pruned: int = 0        # skipped by the endpoint pre-filter
    abandoned: int = 0     # DTW stopped early against the bsf
    computed: int = 0      # DTW ran to the end
    elapsed: float = 0.0

    def __add__(self, other: "ScanStats") -> "ScanStats":
        return ScanStats(
            scanned=self.scanned + other.scanned,
            no_path=self.no_path + other.no_path,
            pruned=self.pruned + other.pruned,
            abandoned=self.abandoned + other.abandoned,
            computed=self.computed + other.computed,
            elapsed=max(self.elapsed, other.elapsed),
        )


class Recognizer:
    """
    Recognizes the intended word from a drawn gesture path.

    1. Measure the query's point density and derive the warping window.
    2. For each dictionary word (lexicographic order), get its ideal path.
    3. Skip words whose endpoint bound already exceeds the k-th best distance.
    4. Run bounded DTW on the rest and keep the k best in a TopKTracker.

    Dictionary and layout are treated as read-only; every call owns its
    tracker, so calls from several threads do not interfere.
    """

    def __init__(
        self,
        dictionary: Collection[str],
        layout: Mapping[str, Point],
        config: Optional[RecognitionConfig] = None,
    ):
        if not dictionary:
            raise NotInitialized("Dictionary is missing or empty")
        if not layout:
            raise NotInitialized("Key layout is missing or empty")

        self._config = (config or RecognitionConfig()).validate()
        self._words = sorted(set(dictionary))
        self._dictionary = frozenset(self._words)
        self._layout = layout
        self._strategy = get_strategy(self._config.pruning)

        if self._config.path_cache == "precomputed":
            self._paths = PrecomputedPathSource(
                layout, self._words, self._config.cache_density
            )
        else:
            self._paths = LazyPathSource(layout)

        self.last_stats: Optional[ScanStats] = None

    @property
    def config(self) -> RecognitionConfig:
        return self._config

    @property
    def strategy(self):
        return self._strategy

    def contains(self, word: str) -> bool:
        """Literal membership query, no DTW involved."""
        return word in self._dictionary

    def window_for(self, query_len: int) -> int:
        """Sakoe-Chiba half-width for a query of `query_len` points."""
        # Round half up
        return int(math.floor(query_len * self._config.window_fraction + 0.5))

    def recognize(
        self,
        path: Sequence[Point],
        k: Optional[int] = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[Candidate]:
        """
        Rank dictionary words against a drawn path.

        Args:
            path: Drawn points in the keyboard-relative frame.
            k: Number of candidates to return (defaults to config.k).
            cancel: Optional event; when set, the scan stops between
                candidates and RecognitionCancelled is raised.

        Returns:
            Up to k candidates, ascending by distance.
        """
        if path is None or len(path) == 0:
            raise EmptyQuery("Cannot recognize an empty path")
        k = self._config.k if k is None else k
        if k <= 0:
            raise InvalidParameter(f"k must be positive, got {k}")

        query = [(float(x), float(y)) for x, y in path]
        density = point_density(query)
        window = self.window_for(len(query))

        start = time.perf_counter()
        workers = min(self._config.workers, len(self._words))
        if workers > 1:
            results, stats = self._scan_sharded(query, density, window, k, workers, cancel)
        else:
            results, stats = self._scan(self._words, query, density, window, k, cancel)
        stats.elapsed = time.perf_counter() - start
        self.last_stats = stats

        logger.debug(
            "Scanned %d words in %.1f ms (pruned=%d, abandoned=%d, computed=%d, "
            "no_path=%d, window=%d, density=%.4f)",
            stats.scanned, stats.elapsed * 1000, stats.pruned, stats.abandoned,
            stats.computed, stats.no_path, window, density,
        )
        if results:
            logger.debug("Best match %r with distance %.4f", results[0].word, results[0].distance)
        return results

    def _scan_sharded(self, query, density, window, k, workers, cancel):
        """Scan contiguous dictionary shards in parallel and merge the results."""
        size = math.ceil(len(self._words) / workers)
        shards = [self._words[i:i + size] for i in range(0, len(self._words), size)]

        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(self._scan, shard, query, density, window, k, cancel)
                for shard in shards
            ]
            parts = [f.result() for f in futures]

        stats = ScanStats()
        for _, part_stats in parts:
            stats = stats + part_stats
        return merge_top_k([results for results, _ in parts], k), stats

    def _scan(
        self,
        words: Sequence[str],
        query: List[Point],
        density: float,
        window: int,
        k: int,
        cancel: Optional[threading.Event],
    ) -> Tuple[List[Candidate], ScanStats]:
        tracker = TopKTracker(k)
        stats = ScanStats()
        bsf = tracker.current_bound()
        query_ends = path_ends(query)

        for word in words:
            if cancel is not None and cancel.is_set():
                raise RecognitionCancelled("Recognition superseded")
            stats.scanned += 1

            word_path = self._paths.word_path(word)
            if word_path is None:
                stats.no_path += 1
                continue

            if self._strategy.estimate_and_maybe_skip(
                query_ends, word_path.first_last_points(), bsf
            ):
                stats.pruned += 1
                continue

            # The candidate could not be skipped, so generate the full path
            candidate_path = self._paths.path_for(word_path, density)
            if not candidate_path:
                stats.no_path += 1
                continue

            dist = self._strategy.bounded_dtw(query, candidate_path, window, bsf)
            if dist == INF:
                stats.abandoned += 1
                continue
            stats.computed += 1

            if dist < bsf:
                tracker.insert(Candidate(word, dist))
                bsf = tracker.current_bound()

        return tracker.results(), stats


def recognize(
    path: Sequence[Point],
    dictionary: Collection[str],
    layout: Mapping[str, Point],
    k: int = 7,
    config: Optional[RecognitionConfig] = None,
) -> List[Candidate]:
    """Recognize one path against `dictionary` with a throwaway Recognizer."""
    return Recognizer(dictionary, layout, config).recognize(path, k=k)


def contains(word: str, dictionary: Collection[str]) -> bool:
    """Whether `word` is literally present in `dictionary`."""
    if not dictionary:
        raise NotInitialized("Dictionary is missing or empty")
    return word in dictionary
