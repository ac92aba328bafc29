# gnuspecs

Small, chainable builders that produce gnuplot option and command strings.
Each builder keeps its settings and turns them into gnuplot text through
`repr()`, or through `str()` on the object. Setters return the builder, so
calls can be chained.

## Installation

```
pip install gnuspecs
```

## A draw command

```python
from gnuspecs.draw import DrawSpecs

specs = DrawSpecs("'file.dat'", "1:2", "lines")
specs.label("SuperData").line_width(3).line_color("orange")
specs.ytics(9)
print(specs.repr())
# 'file.dat' using 1:2:ytic(stringcolumn(9)) title 'SuperData' with lines linewidth 3 linecolor 'orange'
```

A new `DrawSpecs` starts with `linewidth 2`. Besides `label`, the legend
entry can be set with `label_from_column_header()` (optionally with a
column number), `label_none()` and `label_default()`. `DrawSpecs` also
carries the line, point and filled-curve options described below.

Columns for `xtics` and `ytics` can be given by number, by header name, or
as a `ColumnIndex`, which quotes header names:

```python
from gnuspecs.types import ColumnIndex

str(ColumnIndex(3))          # "3"
str(ColumnIndex("Country"))  # "'Country'"
```

## Other builders

| Module                | Builder                       | Produces                                   |
|-----------------------|-------------------------------|--------------------------------------------|
| `gnuspecs.line`       | `LineSpecs`                   | `linestyle`, `linetype`, `linewidth`, ...  |
| `gnuspecs.point`      | `PointSpecs`                  | `pointtype 8 pointsize 5`                  |
| `gnuspecs.filled`     | `FilledCurvesSpecs`           | `above` / `below`                          |
| `gnuspecs.text`       | `TextSpecs`                   | `enhanced textcolor '#404040' font '...'`  |
| `gnuspecs.frame`      | `FrameSpecs`                  | `box ...` / `nobox`                        |
| `gnuspecs.title`      | `TitleSpecs`, `OffsetSpecs`   | `title '...' ... offset ...`               |
| `gnuspecs.axislabel`  | `AxisLabelSpecs`              | `set xlabel '...' ...`                     |
| `gnuspecs.border`     | `BorderSpecs`                 | `set border 3 front ...`                   |
| `gnuspecs.minortics`  | `TicsSpecsMinor`              | `set mxtics 5` / `unset mxtics`            |
| `gnuspecs.histogram`  | `HistogramStyleSpecs`         | `set style histogram clustered gap 2`      |

The line, point, filled-curve, font, text, frame and title options are also
available as mixins (`LineSpecsMixin`, `PointSpecsMixin`,
`FilledCurvesSpecsMixin`, `FontSpecsMixin`, `TextSpecsMixin`,
`FrameSpecsMixin`, `TitleSpecsMixin`) for building new builders on the
`Specs` base class.

For example:

```python
from gnuspecs.point import PointSpecs
from gnuspecs.minortics import TicsSpecsMinor

PointSpecs().point_type(8).point_size(5).repr()
# 'pointtype 8 pointsize 5'

TicsSpecsMinor("x").number(4).repr()
# 'set mxtics 5'
```

`TicsSpecsMinor("")` raises `ValueError`.

## Helpers

`gnuspecs.types` also has `linspace(x0, x1, numintervals)`, which gives
`numintervals + 1` evenly spaced values (and raises `ValueError` when
`numintervals` is below 1), and `unit_range(x0, x1)`, which counts by one
from `x0` to `x1` in either direction. The `Extension` enum lists the
output formats: `emf`, `png`, `svg`, `pdf` and `eps`.

`gnuspecs.specs` holds the string helpers the builders share:
`format_number`, `remove_extra_whitespaces`, `option_value_str`,
`title_str` and `clean_path`.

```python
from gnuspecs.specs import clean_path, option_value_str, title_str

title_str("Something")                 # "'Something'"
option_value_str("title", "'sin(x)'")  # "title 'sin(x)' "
clean_path('build/:*?!"<>|xy.svg')     # "build/xy.svg"
```

## What it does not do

gnuspecs only builds strings. It has no plot, figure or canvas objects,
does not assemble complete gnuplot scripts, does not write data files, and
does not run gnuplot, show windows or save images. Grid, legend, major tic
and fill-style builders are not included.

## Running the tests

```
pip install -e ".[test]"
pytest
```