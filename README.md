# accelstats

Building blocks for benchmarking statistics on accelerometer recordings:

- loading `timestamp,x,y,z` CSV files into columns (`accelstats.loader`);
- running batches of work sequentially or on a thread pool
  (`accelstats.policy`);
- a bottom-up merge sort that also returns the sum and sum of squares of the
  data (`accelstats.merge_sort`);
- a small vector drawing model (`accelstats.drawing`) and an SVG renderer for
  it (`accelstats.svg_renderer`);
- SVG line charts of benchmark result files (`accelstats.plotter`);
- a minimal `--name value` / `--flag` argument parser and a timing helper
  (`accelstats.cli_args`).

## Installation

```
pip install .
```

## Loading data

```python
from accelstats.loader import load_data
from accelstats.policy import ExecutionPolicy

data = load_data("data/ACC_001.csv", ExecutionPolicy.PARALLEL)
print(len(data), data.x[:3])
```

The first line is taken as a header and skipped. Only newline-terminated lines
are read. Each column value is parsed from its leading number; a missing or
non-numeric value becomes `0.0`. `load_data` raises `OSError` if the file
cannot be read and `ValueError` if it holds no lines.

## Execution policies

`ExecutionPolicy.SEQUENTIAL` and `ExecutionPolicy.PARALLEL` both offer
`map(func, items)`, which returns the results in input order; the parallel
policy uses a thread pool.

## Sorting with sums

```python
from accelstats.merge_sort import merge_sort
from accelstats.policy import ExecutionPolicy

values = [3.0, 1.0, 2.0, 5.0]
total, total_sq = merge_sort(values, True, ExecutionPolicy.SEQUENTIAL)
# values is now sorted in place; total == 11.0, total_sq == 39.0
```

The sums are collected during the final merge pass, so a one-element list
yields zero sums; an empty list raises `ValueError`. With `is_vectorized`
set, the summation goes four lanes at a time through numpy. The lower-level
helpers `sum_and_copy`, `sum_and_copy_vec`, `merge`, `merge_no_count` and
`merge_and_count` are public as well.

## Drawing and SVG output

```python
from accelstats.drawing import Circle, Drawing, RGBColor, Text
from accelstats.svg_renderer import SVGRenderer

drawing = Drawing()
circle = drawing.root.add(Circle(50, 50, 20))
circle.fill_color = RGBColor.from_html_color("#FF0000")
drawing.root.add(Text(50, 90, "hello"))

renderer = SVGRenderer(100, 100)
drawing.render(renderer)
print(renderer.svg)
```

`Group.add` applies the group's default style to the element it adds, so set
an element's style after adding it.

## Charts of results

`plot_graph(x_points_all, y_points_all, line_labels, x_label, y_label, title,
output_filename, canvas_width, canvas_height)` draws one polyline per series,
writes the SVG file and returns its text. It raises `ValueError` when the
series lists differ in length, are empty, or a series has no points.

`load_results(filename)` reads a CSV with the header
`column,num_elements,comp_type,CV,MAD,time` into
`{column: {comp_type: [DataPoint, ...]}}`.

`plot_results(filename, output_folder)` writes, for each of the columns `x`,
`y` and `z`, charts of time, CV and MAD against the number of elements, and
returns the paths written. The file names are `output_folder` followed
directly by `time_for_x.svg`, `CV_for_x.svg` and so on, so give the folder
with a trailing separator.

## Argument parsing and timing

```python
from accelstats.cli_args import ArgParser, measure_time

parser = ArgParser("example --input FILE")
parser.add_argument("--input", "Input file", True, True)
parser.add_argument("--gpu", "Flag", False, False)
parser.parse_args(["--input", "a.csv", "--gpu"])
parser.get("--gpu")  # "true"

elapsed, result = measure_time(sorted, [3, 1, 2])
```

Errors (unknown or missing arguments, a missing value, options from a
mutually exclusive group used together) raise `ArgumentError`.

## What this package does not do

It does not compute the coefficient of variation or the median absolute
deviation itself, has no bitonic-sort back end, and installs no command-line
program: the pieces above have to be combined in your own code.