import pytest

from gnuspecs.draw import DrawSpecs
from gnuspecs.types import ColumnIndex


@pytest.fixture
def specs():
    return DrawSpecs("'file.dat'", "1:2", "lines")


def test_source_sequence(specs):
    assert specs.repr() == "'file.dat' using 1:2 with lines linewidth 2"

    specs.label("SuperData")
    assert specs.repr() == "'file.dat' using 1:2 title 'SuperData' with lines linewidth 2"

    specs.label_default()
    assert specs.repr() == "'file.dat' using 1:2 with lines linewidth 2"

    specs.label_from_column_header()
    assert specs.repr() == "'file.dat' using 1:2 title columnheader with lines linewidth 2"

    specs.label_from_column_header(3)
    assert specs.repr() == "'file.dat' using 1:2 title columnheader(3) with lines linewidth 2"

    specs.label("OnlyData")
    assert specs.repr() == "'file.dat' using 1:2 title 'OnlyData' with lines linewidth 2"

    specs.line_width(3)
    specs.line_color("orange")
    assert specs.repr() == (
        "'file.dat' using 1:2 title 'OnlyData' with lines linewidth 3 linecolor 'orange'"
    )

    specs.ytics(9)
    assert specs.repr() == (
        "'file.dat' using 1:2:ytic(stringcolumn(9)) title 'OnlyData' "
        "with lines linewidth 3 linecolor 'orange'"
    )

    specs.xtics("Country")
    assert specs.repr() == (
        "'file.dat' using 1:2:xtic(stringcolumn('Country')):ytic(stringcolumn(9)) "
        "title 'OnlyData' with lines linewidth 3 linecolor 'orange'"
    )


def test_label_none(specs):
    assert specs.label_none().repr() == "'file.dat' using 1:2 notitle with lines linewidth 2"


def test_column_index_object_accepted(specs):
    by_object = DrawSpecs("'file.dat'", "1:2", "lines").xtics(ColumnIndex("Country"))
    assert by_object.repr() == specs.xtics("Country").repr()


def test_empty_using_and_with_are_omitted():
    text = DrawSpecs("sin(x)", "", "").repr()
    assert "using" not in text
    assert "with" not in text
    assert text.startswith("sin(x)")


def test_point_and_filled_options_appear(specs):
    specs.point_type(8).above()
    text = specs.repr()
    assert "pointtype 8" in text
    assert "with lines above" in text


def test_str_matches_repr(specs):
    assert str(specs) == specs.repr()