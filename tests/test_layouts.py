import pytest

from keylayout import KeyLayout, default_layout, get_key_positions, get_layout, QWERTY
from prediction.errors import InvalidParameter


def test_qwerty_key_centers():
    positions = get_key_positions(QWERTY)
    assert positions['q'] == pytest.approx((0.05, 0.5 / 3))
    # Middle row is offset by half a key, bottom row by a key and a half
    assert positions['a'] == pytest.approx((0.1, 1.5 / 3))
    assert positions['z'] == pytest.approx((0.2, 2.5 / 3))


def test_y_scale_flattens_rows():
    positions = get_key_positions(QWERTY, y_scale=0.4)
    assert positions['z'][1] == pytest.approx(2.5 / 3 * 0.4)
    assert positions['z'][0] == pytest.approx(0.2)


def test_width_multipliers():
    positions = get_key_positions([['a', ('b', 2.0), 'c']])
    assert positions['a'][0] == pytest.approx(0.125)
    assert positions['b'][0] == pytest.approx(0.5)
    assert positions['c'][0] == pytest.approx(0.875)


@pytest.mark.parametrize("name", ["qwerty", "dvorak", "colemak"])
def test_layouts_are_normalized(name):
    layout = default_layout(name)
    assert len(layout) >= 26
    for x, y in layout.values():
        assert 0.0 <= x <= 1.0
        assert 0.0 <= y <= 1.0


def test_unknown_layout():
    with pytest.raises(InvalidParameter):
        get_layout("azerty")


def test_center_lookup(qwerty):
    assert qwerty.center('h') == qwerty['h']
    assert qwerty.center('H') == qwerty['h']
    assert 'H' in qwerty
    assert qwerty.center('!') is None
    assert qwerty.get('!') is None


def test_key_layout_is_read_only(line_layout):
    with pytest.raises(TypeError):
        line_layout['x'] = (0.0, 0.0)


def test_key_layout_rejects_multichar_keys():
    with pytest.raises(InvalidParameter):
        KeyLayout({'ab': (0.1, 0.1)})
