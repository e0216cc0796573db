"""
Ideal path generation for dictionary words.

A word's ideal path visits the centers of its letters in order. Paths are
either generated on demand for every scan (LazyPathSource) or built once for
the whole dictionary (PrecomputedPathSource); the recognizer only talks to
the shared `word_path` / `path_for` accessors.
"""
import logging
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .errors import NoPath
from .paths import Path, Point, resample

logger = logging.getLogger(__name__)


class WordPath:
    """
    Waypoints of a single word on a key layout.

    Unmapped characters are skipped, except that a word whose first character
    has no key gets no path at all. Consecutive duplicate waypoints collapse
    into one ("hello" -> h, e, l, o) since the finger stays on the key.
    """

    def __init__(self, layout: Mapping[str, Point], word: str):
        self.word = word
        self.waypoints: Path = []

        if not word or layout.get(word[0].lower()) is None:
            return

        for char in word.lower():
            pos = layout.get(char)
            if pos is None:
                continue
            pos = (float(pos[0]), float(pos[1]))
            if not self.waypoints or self.waypoints[-1] != pos:
                self.waypoints.append(pos)

    @property
    def is_empty(self) -> bool:
        return not self.waypoints

    def first_last_points(self) -> Tuple[Optional[Point], Optional[Point]]:
        """
        First and last waypoint without resampling.
        `last` is None when the word collapses to a single waypoint.
        """
        if not self.waypoints:
            return None, None
        if len(self.waypoints) == 1:
            return self.waypoints[0], None
        return self.waypoints[0], self.waypoints[-1]

    def get_path(self, density: Optional[float] = None) -> Optional[Path]:
        """
        The word's path, resampled to `density` (average point spacing).
        Raw waypoints are returned when density is None or not positive.
        """
        if not self.waypoints:
            return None
        if not density or density <= 0:
            return list(self.waypoints)
        return resample(self.waypoints, density)

    def require_path(self, density: Optional[float] = None) -> Path:
        path = self.get_path(density)
        if path is None:
            raise NoPath(self.word)
        return path

    def __repr__(self) -> str:
        return f"WordPath({self.word!r}, {len(self.waypoints)} waypoints)"


class LazyPathSource:
    """Generates every word's path on demand, at the query's density."""

    def __init__(self, layout: Mapping[str, Point]):
        self._layout = layout

    def word_path(self, word: str) -> Optional[WordPath]:
        word_path = WordPath(self._layout, word)
        return None if word_path.is_empty else word_path

    def path_for(self, word_path: WordPath, density: Optional[float]) -> Optional[Path]:
        return word_path.get_path(density)


class PrecomputedPathSource:
    """
    Builds every word's path once at a fixed density.

    The query density passed to `path_for` is ignored: cached paths keep the
    density they were built with. Words without a path are left out.
    """

    def __init__(
        self,
        layout: Mapping[str, Point],
        words: Iterable[str],
        density: Optional[float] = None,
    ):
        self.density = density
        self._word_paths: Dict[str, WordPath] = {}
        self._paths: Dict[str, Path] = {}

        skipped = 0
        for word in words:
            word_path = WordPath(layout, word)
            path = word_path.get_path(density)
            if path is None:
                skipped += 1
                continue
            self._word_paths[word] = word_path
            self._paths[word] = path

        logger.info(
            "Precomputed %d word paths (density=%s, %d without path)",
            len(self._paths), density, skipped,
        )

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, word: str) -> bool:
        return word in self._paths

    def word_path(self, word: str) -> Optional[WordPath]:
        return self._word_paths.get(word)

    def path_for(self, word_path: WordPath, density: Optional[float]) -> Optional[Path]:
        return self._paths.get(word_path.word)
