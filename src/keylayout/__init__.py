"""
SwipeMatch Keyboard Layouts

Letter-to-key-center tables in the normalized keyboard frame.
"""
from .layouts import (
    KeyLayout,
    default_layout,
    get_layout,
    get_key_positions,
    QWERTY,
    DVORAK,
    COLEMAK,
)

__all__ = [
    'KeyLayout',
    'default_layout',
    'get_layout',
    'get_key_positions',
    'QWERTY',
    'DVORAK',
    'COLEMAK',
]
