"""
Dynamic Time Warping between 2D point sequences.

The DP runs inside a Sakoe-Chiba band and abandons early once every cell of
a row is known to end above the best-so-far (bsf) distance. Two lower bounds
feed the pruning:

- endpoint_bound (Kim): the first and last points of both sequences are
  always aligned to each other, so their distances bound the total cost.
- envelope_bound (UCR style): each query point must be aligned with at least
  one candidate point inside its band, so its distance to the bounding box of
  those points bounds that row's contribution. Suffix sums of it (cb) are
  added to a row's minimum to abandon before the matrix is filled.

Pruning strategies wrap these behind `estimate_and_maybe_skip` and
`bounded_dtw` so the recognizer does not care which one is active.
"""
import math
from typing import Dict, List, Optional, Sequence, Tuple, Type

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .errors import InvalidParameter
from .paths import Point, distance

INF = math.inf

# (first point, last point); last is None for single-point sequences
Endpoints = Tuple[Point, Optional[Point]]


def _effective_window(n: int, m: int, window: Optional[int]) -> int:
    if window is None:
        return max(n, m)
    if window < 0:
        raise InvalidParameter(f"Warping window must be >= 0, got {window}")
    # The end cell (n-1, m-1) must stay inside the band
    return max(window, abs(n - m))


def dtw(
    query: Sequence[Point],
    candidate: Sequence[Point],
    window: Optional[int] = None,
    bsf: float = INF,
    cb: Optional[Sequence[float]] = None,
) -> float:
    """
    Banded DTW distance between `query` and `candidate`.

    Args:
        query: Rows of the cost matrix.
        candidate: Columns of the cost matrix.
        window: Sakoe-Chiba half-width in index steps. Widened to the length
            difference of the two sequences when smaller; None disables it.
        bsf: Best-so-far cutoff. Cells above it are pruned.
        cb: Optional cumulative lower bound with len(query) + 1 entries;
            cb[i] bounds the cost still to be added by rows i.. n-1.

    Returns:
        The DTW distance, or INF if the computation was abandoned because the
        result cannot be lower than `bsf`.
    """
    n, m = len(query), len(candidate)
    if n == 0 or m == 0:
        raise InvalidParameter("DTW needs two non-empty sequences")
    w = _effective_window(n, m, window)

    prev = [INF] * m
    curr = [INF] * m

    # Row 0: only reachable from the left
    qx, qy = query[0]
    row_min = INF
    acc = 0.0
    for j in range(min(m - 1, w) + 1):
        cx, cy = candidate[j]
        acc += math.hypot(qx - cx, qy - cy)
        if acc > bsf:
            # Every later cell in this row is larger still
            acc = INF
        curr[j] = acc
        if acc < row_min:
            row_min = acc
    if row_min + (cb[1] if cb is not None else 0.0) > bsf:
        return INF
    prev, curr = curr, prev

    for i in range(1, n):
        qx, qy = query[i]
        lo = max(0, i - w)
        hi = min(m - 1, i + w)
        if lo > 0:
            curr[lo - 1] = INF

        row_min = INF
        for j in range(lo, hi + 1):
            best = prev[j]
            if j > 0:
                diag = prev[j - 1]
                if diag < best:
                    best = diag
                left = curr[j - 1]
                if left < best:
                    best = left
            cx, cy = candidate[j]
            val = best + math.hypot(qx - cx, qy - cy)
            if val > bsf:
                val = INF
            curr[j] = val
            if val < row_min:
                row_min = val

        if row_min + (cb[i + 1] if cb is not None else 0.0) > bsf:
            return INF
        prev, curr = curr, prev

    return prev[m - 1]


def path_ends(path: Sequence[Point]) -> Endpoints:
    """First and last point of a non-empty path (last is None for one point)."""
    return path[0], (path[-1] if len(path) > 1 else None)


def endpoint_bound(query_ends: Endpoints, candidate_ends: Endpoints) -> float:
    """
    Kim's lower bound from the endpoints of both sequences.

    When both sequences are a single point the alignment has one cell, so the
    endpoint distance is counted once.
    """
    q_first, q_last = query_ends
    c_first, c_last = candidate_ends
    bound = distance(q_first, c_first)
    if q_last is None and c_last is None:
        return bound
    q_last = q_first if q_last is None else q_last
    c_last = c_first if c_last is None else c_last
    return bound + distance(q_last, c_last)


def envelope_bound(
    query: Sequence[Point],
    candidate: Sequence[Point],
    window: Optional[int] = None,
) -> np.ndarray:
    """
    Per-row lower bound: distance from each query point to the bounding box of
    the candidate points inside its band.
    """
    n, m = len(query), len(candidate)
    if n == 0 or m == 0:
        raise InvalidParameter("Envelope needs two non-empty sequences")
    w = _effective_window(n, m, window)
    q = np.asarray(query, dtype=float)
    c = np.asarray(candidate, dtype=float)

    # Pad so that row i sees candidate indices i-w .. i+w
    size = n + 2 * w
    used = min(m, n + w)
    lower = np.full((size, 2), np.inf)
    upper = np.full((size, 2), -np.inf)
    lower[w:w + used] = c[:used]
    upper[w:w + used] = c[:used]

    lo = sliding_window_view(lower, 2 * w + 1, axis=0).min(axis=2)
    hi = sliding_window_view(upper, 2 * w + 1, axis=0).max(axis=2)

    gap = np.maximum(np.maximum(lo - q, q - hi), 0.0)
    return np.hypot(gap[:, 0], gap[:, 1])


def cumulative_bound(lb: Sequence[float]) -> List[float]:
    """Suffix sums of a per-row bound, with a trailing 0 for the last row."""
    lb = np.asarray(lb, dtype=float)
    cb = np.zeros(len(lb) + 1)
    cb[:-1] = np.cumsum(lb[::-1])[::-1]
    return cb.tolist()


class PruningStrategy:
    """
    Interface for DTW pruning.

    `estimate_and_maybe_skip` decides from endpoints alone whether a candidate
    can be skipped; `bounded_dtw` computes the distance, returning INF when it
    gave up because the result cannot beat `bsf`. The base class prunes
    nothing.
    """

    name = "none"

    def estimate_and_maybe_skip(
        self, query_ends: Endpoints, candidate_ends: Endpoints, bsf: float
    ) -> bool:
        return False

    def bounded_dtw(
        self,
        query: Sequence[Point],
        candidate: Sequence[Point],
        window: Optional[int],
        bsf: float,
    ) -> float:
        return dtw(query, candidate, window)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NoPruning(PruningStrategy):
    """Full banded DTW for every candidate. Reference for the others."""


class EndpointPruning(PruningStrategy):
    """Kim's endpoint pre-filter plus row-minimum abandoning."""

    name = "endpoint"

    def estimate_and_maybe_skip(self, query_ends, candidate_ends, bsf):
        return endpoint_bound(query_ends, candidate_ends) > bsf

    def bounded_dtw(self, query, candidate, window, bsf):
        return dtw(query, candidate, window, bsf=bsf)


class CumulativePruning(PruningStrategy):
    """In-loop abandoning with the cumulative envelope bound."""

    name = "cumulative"

    def bounded_dtw(self, query, candidate, window, bsf):
        if bsf == INF:
            return dtw(query, candidate, window)
        cb = cumulative_bound(envelope_bound(query, candidate, window))
        if cb[0] > bsf:
            return INF
        return dtw(query, candidate, window, bsf=bsf, cb=cb)


class CombinedPruning(EndpointPruning, CumulativePruning):
    """Endpoint pre-filter, then cumulative-bound abandoning."""

    name = "combined"

    estimate_and_maybe_skip = EndpointPruning.estimate_and_maybe_skip
    bounded_dtw = CumulativePruning.bounded_dtw


STRATEGIES: Dict[str, Type[PruningStrategy]] = {
    NoPruning.name: NoPruning,
    EndpointPruning.name: EndpointPruning,
    CumulativePruning.name: CumulativePruning,
    CombinedPruning.name: CombinedPruning,
}


def get_strategy(name: str) -> PruningStrategy:
    """Instantiate a pruning strategy by name."""
    try:
        return STRATEGIES[name.lower()]()
    except KeyError:
        raise InvalidParameter(
            f"Unknown pruning strategy {name!r}, expected one of {sorted(STRATEGIES)}"
        ) from None
