import numpy as np
import pytest

from prediction.errors import InvalidParameter
from prediction.paths import distance, path_length, point_density, resample, to_relative
from prediction.word_path import WordPath


def test_distance_is_a_metric():
    a, b, c = (0.1, 0.2), (0.4, 0.6), (0.9, 0.1)
    assert distance(a, b) == pytest.approx(0.5)
    assert distance(a, b) == distance(b, a)
    assert distance(a, a) == 0.0
    assert distance(a, c) <= distance(a, b) + distance(b, c)


def test_path_length_and_density():
    path = [(0.0, 0.0), (0.3, 0.4), (0.3, 0.9)]
    assert path_length(path) == pytest.approx(1.0)
    assert point_density(path) == pytest.approx(0.5)


def test_density_of_degenerate_paths_is_zero():
    assert point_density([]) == 0.0
    assert point_density([(0.5, 0.5)]) == 0.0
    assert path_length([(0.5, 0.5)]) == 0.0


def test_resample_straight_line():
    points = resample([(0.1, 0.5), (0.7, 0.5)], 0.2)
    assert len(points) == 4
    for (x, y), expected in zip(points, [0.1, 0.3, 0.5, 0.7]):
        assert x == pytest.approx(expected)
        assert y == pytest.approx(0.5)


def test_resample_keeps_endpoints():
    waypoints = [(0.05, 0.1), (0.45, 0.3), (0.2, 0.35), (0.9, 0.05)]
    points = resample(waypoints, 0.013)
    assert points[0] == waypoints[0]
    assert points[-1] == waypoints[-1]


def test_resample_spacing_is_even():
    waypoints = [(0.1, 0.1), (0.4, 0.1), (0.4, 0.4)]
    points = resample(waypoints, 0.05)
    # 0.6 long at 0.05 spacing, corner lands exactly on a sample
    assert len(points) == 13
    gaps = [distance(points[i], points[i + 1]) for i in range(len(points) - 1)]
    assert max(gaps) == pytest.approx(min(gaps))


def test_resampling_preserves_length():
    corner = [(0.1, 0.1), (0.4, 0.1), (0.4, 0.4)]
    original = path_length(corner)
    assert abs(path_length(resample(corner, 0.003)) - original) / original < 0.01

    rng = np.random.default_rng(7)
    for spacing in (0.001, 0.03, 0.1):
        for _ in range(20):
            waypoints = [tuple(p) for p in rng.random((6, 2)).tolist()]
            original = path_length(waypoints)
            resampled = resample(waypoints, spacing)
            assert abs(path_length(resampled) - original) / original < 0.01


@pytest.mark.parametrize("spacing", [0.02, 0.03, 0.05])
@pytest.mark.parametrize("word", ["typing", "swipe", "keyboard", "brown", "world", "quick"])
def test_word_paths_keep_length_at_gesture_spacing(qwerty, word, spacing):
    waypoints = WordPath(qwerty, word).waypoints
    original = path_length(waypoints)
    resampled = resample(waypoints, spacing)
    assert abs(path_length(resampled) - original) / original < 0.01


def test_resample_keeps_every_waypoint(qwerty):
    waypoints = WordPath(qwerty, "keyboard").waypoints
    resampled = resample(waypoints, 0.03)
    for waypoint in waypoints:
        assert waypoint in resampled
    # Waypoints appear in their original order
    indices = [resampled.index(w) for w in waypoints]
    assert indices == sorted(indices)


def test_resample_skips_repeated_points():
    resampled = resample([(0.1, 0.1), (0.1, 0.1), (0.3, 0.1)], 0.1)
    assert resampled == pytest.approx([(0.1, 0.1), (0.2, 0.1), (0.3, 0.1)])


def test_resample_degenerate_input_unchanged():
    assert resample([(0.3, 0.3)], 0.1) == [(0.3, 0.3)]
    assert resample([(0.1, 0.1), (0.2, 0.2)], 0.0) == [(0.1, 0.1), (0.2, 0.2)]
    assert resample([], 0.1) == []


def test_resample_coarse_spacing_keeps_two_points():
    points = resample([(0.1, 0.1), (0.2, 0.1)], 5.0)
    assert len(points) == 2


def test_to_relative():
    rel = to_relative([(100, 50), (0, 100)], 200, 100, y_scale=0.4)
    assert rel[0] == pytest.approx((0.5, 0.2))
    assert rel[1] == pytest.approx((0.0, 0.4))


def test_to_relative_rejects_empty_widget():
    with pytest.raises(InvalidParameter):
        to_relative([(1, 1)], 0, 100)
    with pytest.raises(InvalidParameter):
        to_relative([(1, 1)], 100, -5)
