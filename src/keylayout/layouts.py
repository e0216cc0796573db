"""
Keyboard layout definitions.
Support for QWERTY, DVORAK, and COLEMAK letter layouts.
"""
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from prediction.errors import InvalidParameter, NotInitialized


# Key layout as rows of keys.
# Each key is a string (letter) or (label, width_multiplier) for wider keys.

QWERTY = [
    ['q', 'w', 'e', 'r', 't', 'y', 'u', 'i', 'o', 'p'],
    ['a', 's', 'd', 'f', 'g', 'h', 'j', 'k', 'l'],
    ['z', 'x', 'c', 'v', 'b', 'n', 'm'],
]

DVORAK = [
    ["'", ',', '.', 'p', 'y', 'f', 'g', 'c', 'r', 'l'],
    ['a', 'o', 'e', 'u', 'i', 'd', 'h', 't', 'n', 's'],
    [';', 'q', 'j', 'k', 'x', 'b', 'm', 'w', 'v', 'z'],
]

COLEMAK = [
    ['q', 'w', 'f', 'p', 'g', 'j', 'l', 'u', 'y', ';'],
    ['a', 'r', 's', 't', 'd', 'h', 'n', 'e', 'i', 'o'],
    ['z', 'x', 'c', 'v', 'b', 'k', 'm'],
]

LAYOUTS: Dict[str, List[List[object]]] = {
    'qwerty': QWERTY,
    'dvorak': DVORAK,
    'colemak': COLEMAK,
}


class KeyLayout(Mapping[str, Tuple[float, float]]):
    """
    Immutable mapping from a single key character to its normalized center.

    Keys are stored lowercase. Lookups through `center()` return None for
    characters the layout does not contain (punctuation, digits, ...), so
    callers can skip them instead of failing the whole word.
    """

    def __init__(self, centers: Mapping[str, Tuple[float, float]]):
        table = {}
        for key, (x, y) in centers.items():
            if len(key) != 1:
                raise InvalidParameter(f"Layout keys must be single characters, got {key!r}")
            table[key.lower()] = (float(x), float(y))
        self._centers = table

    def center(self, letter: str) -> Optional[Tuple[float, float]]:
        """Center of the key for `letter`, or None if it has no key."""
        return self._centers.get(letter.lower())

    def __getitem__(self, key: str) -> Tuple[float, float]:
        return self._centers[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._centers)

    def __len__(self) -> int:
        return len(self._centers)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._centers

    def __repr__(self) -> str:
        return f"KeyLayout({len(self._centers)} keys)"


def get_layout(name: str) -> List[List[object]]:
    """Get keyboard row table by name."""
    try:
        return LAYOUTS[name.lower()]
    except KeyError:
        raise InvalidParameter(
            f"Unknown layout {name!r}, expected one of {sorted(LAYOUTS)}"
        ) from None


def get_key_positions(
    layout: List[List[object]], y_scale: float = 1.0
) -> Dict[str, Tuple[float, float]]:
    """
    Get normalized (0-1) center positions for each key.
    Accounts for width multipliers. Shorter rows are centered.
    The y coordinate is multiplied by `y_scale`.
    """
    if not layout:
        raise NotInitialized("Layout has no rows")

    positions = {}
    num_rows = len(layout)

    # First, calculate total width of each row in terms of "units"
    row_widths = []
    for row in layout:
        row_w = 0.0
        for key in row:
            row_w += key[1] if isinstance(key, tuple) else 1.0
        row_widths.append(row_w)

    max_row_w = max(row_widths)

    for row_idx, row in enumerate(layout):
        # X offset for centering shorter rows
        current_x = (max_row_w - row_widths[row_idx]) / 2.0
        center_y = (row_idx + 0.5) / num_rows * y_scale

        for key in row:
            char = key[0] if isinstance(key, tuple) else key
            width = key[1] if isinstance(key, tuple) else 1.0

            center_x = (current_x + width / 2.0) / max_row_w
            positions[char.lower()] = (center_x, center_y)
            current_x += width

    return positions


def default_layout(name: str = 'qwerty', y_scale: float = 1.0) -> KeyLayout:
    """Build a KeyLayout for one of the named row tables."""
    return KeyLayout(get_key_positions(get_layout(name), y_scale=y_scale))
