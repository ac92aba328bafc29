from gnuspecs.text import DEFAULT_TEXTCOLOR, TextSpecs
from gnuspecs.title import OffsetSpecs, TitleSpecs


def test_default_title_is_empty():
    assert TitleSpecs().repr() == ""


def test_empty_title_is_empty():
    assert TitleSpecs().title("Plot").title("").repr() == ""


def test_title_with_default_text():
    text = TitleSpecs().title("Hello").repr()
    assert text == f"title 'Hello' enhanced textcolor '{DEFAULT_TEXTCOLOR}'"


def test_title_contains_text_repr():
    text = TitleSpecs().title("Hello").repr()
    assert text == "title 'Hello' " + TextSpecs().repr()


def test_title_font_and_color():
    title = (
        TitleSpecs()
        .title("Hello")
        .title_font_name("Arial")
        .title_font_size(17)
        .title_text_color("blue")
    )
    assert title.repr() == "title 'Hello' enhanced textcolor 'blue' font 'Arial,17'"


def test_offset_default_empty():
    assert OffsetSpecs().repr() == ""


def test_offset_character_units():
    offset = OffsetSpecs().shift_along_x(2).shift_along_y(1.5)
    assert offset.repr() == "offset character 2, character 1.5"


def test_offset_graph_and_screen():
    offset = OffsetSpecs().shift_along_graph_x(0.25).shift_along_screen_y(0.75)
    assert offset.repr() == "offset graph 0.25, screen 0.75"


def test_offset_later_call_replaces():
    offset = OffsetSpecs().shift_along_x(3).shift_along_screen_x(0.5)
    assert "character 3" not in offset.repr()
    assert "screen 0.5" in offset.repr()


def test_title_shift_appends_offset():
    title = TitleSpecs().title("T").title_shift_along_graph_x(0.5).title_shift_along_graph_y(0.25)
    expected_offset = OffsetSpecs().shift_along_graph_x(0.5).shift_along_graph_y(0.25).repr()
    assert title.repr().endswith(expected_offset)


def test_title_shift_character_and_screen():
    title = TitleSpecs().title("T").title_shift_along_x(1).title_shift_along_screen_y(0.5)
    expected_offset = OffsetSpecs().shift_along_x(1).shift_along_screen_y(0.5).repr()
    assert title.repr().endswith(expected_offset)


def test_title_without_text_ignores_offset():
    assert TitleSpecs().title_shift_along_y(4).repr() == ""


def test_str_matches_repr():
    title = TitleSpecs().title("X")
    assert str(title) == title.repr()