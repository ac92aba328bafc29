import pytest

from gnuspecs.border import BorderSpecs


def _code(border):
    return int(border.repr().split()[2])


EDGES_3D = [
    "bottom_left_front",
    "bottom_left_back",
    "bottom_right_front",
    "bottom_right_back",
    "left_vertical",
    "back_vertical",
    "right_vertical",
    "front_vertical",
    "top_left_back",
    "top_right_back",
    "top_left_front",
    "top_right_front",
]


def test_clear_gives_zero_encoding():
    assert _code(BorderSpecs().clear()) == 0


def test_none_same_as_clear():
    assert BorderSpecs().none().repr() == BorderSpecs().clear().repr()


def test_default_is_bottom_and_left():
    assert _code(BorderSpecs()) == _code(BorderSpecs().clear().bottom().left())


def test_repr_starts_with_set_border():
    assert BorderSpecs().repr().startswith("set border ")


@pytest.mark.parametrize(
    "alias,base",
    [
        ("bottom_left_front", "bottom"),
        ("bottom_left_back", "left"),
        ("bottom_right_front", "top"),
        ("bottom_right_back", "right"),
        ("polar", "top"),
    ],
)
def test_aliases_share_bits(alias, base):
    a = getattr(BorderSpecs().clear(), alias)()
    b = getattr(BorderSpecs().clear(), base)()
    assert _code(a) == _code(b)


def test_3d_edges_are_distinct_single_bits():
    codes = [_code(getattr(BorderSpecs().clear(), name)()) for name in EDGES_3D]
    assert len(set(codes)) == len(EDGES_3D)
    for code in codes:
        assert code > 0 and code & (code - 1) == 0


def test_edges_combine():
    border = BorderSpecs().clear()
    codes = []
    for name in EDGES_3D:
        codes.append(_code(getattr(BorderSpecs().clear(), name)()))
        getattr(border, name)()
    assert _code(border) == sum(codes)


def test_setting_edge_twice_is_idempotent():
    once = BorderSpecs().clear().left_vertical()
    twice = BorderSpecs().clear().left_vertical().left_vertical()
    assert once.repr() == twice.repr()


def test_default_depth_front():
    assert BorderSpecs().repr().split()[3] == "front"


@pytest.mark.parametrize("depth", ["front", "back", "behind"])
def test_depth(depth):
    border = getattr(BorderSpecs(), depth)()
    assert border.repr().split()[3] == depth


def test_line_options_in_repr():
    border = BorderSpecs().line_color("red").dash_type(4)
    text = border.repr()
    assert "linecolor 'red'" in text
    assert text.endswith("dashtype 4")


def test_str_matches_repr():
    border = BorderSpecs().top()
    assert str(border) == border.repr()