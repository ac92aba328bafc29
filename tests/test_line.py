from gnuspecs.line import LineSpecs


def test_default_is_empty():
    assert LineSpecs().repr() == ""


def test_full_line_options_in_order():
    specs = LineSpecs()
    specs.line_color("ocean")
    specs.line_width(1)
    specs.line_type(3)
    specs.dash_type(5)
    assert specs.repr() == "linetype 3 linewidth 1 linecolor 'ocean' dashtype 5"


def test_line_style_comes_first():
    specs = LineSpecs().line_width(2).line_style(4)
    assert specs.repr().startswith("linestyle 4")
    assert specs.repr().endswith("linewidth 2")


def test_setters_chain_and_return_same_object():
    specs = LineSpecs()
    assert specs.line_color("red") is specs
    assert specs.dash_type(1) is specs


def test_later_value_replaces_earlier():
    specs = LineSpecs().line_color("red").line_color("purple")
    assert specs.repr() == "linecolor 'purple'"
    assert "red" not in specs.repr()


def test_str_matches_repr():
    specs = LineSpecs().line_type(3)
    assert str(specs) == specs.repr()


def test_instances_are_independent():
    first = LineSpecs().line_type(3)
    second = LineSpecs()
    assert second.repr() == ""
    assert first.repr() == "linetype 3"