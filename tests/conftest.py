import pytest

from keylayout import KeyLayout, default_layout


@pytest.fixture
def line_layout():
    """Four keys on one row, as in the 'hello' walkthrough."""
    return KeyLayout({
        'h': (0.1, 0.5),
        'e': (0.3, 0.5),
        'l': (0.5, 0.5),
        'o': (0.7, 0.5),
    })


@pytest.fixture
def qwerty():
    return default_layout('qwerty', y_scale=0.4)


@pytest.fixture
def words():
    return {
        'the', 'to', 'and', 'a', 'of', 'in', 'is', 'it', 'you', 'that',
        'he', 'was', 'for', 'on', 'are', 'with', 'as', 'his', 'they', 'be',
        'at', 'one', 'have', 'this', 'from', 'or', 'had', 'by', 'hot', 'word',
        'but', 'what', 'some', 'we', 'can', 'out', 'other', 'were', 'all',
        'there', 'when', 'up', 'use', 'your', 'how', 'said', 'an', 'each',
        'she', 'which', 'do', 'their', 'time', 'if', 'will', 'way', 'about',
        'hello', 'help', 'held', 'hoe', 'home', 'house', 'world', 'quick',
        'brown', 'fox', 'jumps', 'lazy', 'dog', 'keyboard', 'swipe', 'typing',
    }
