"""SVG line charts of benchmark results."""

from __future__ import annotations

import math
import sys
from collections import defaultdict
from dataclasses import dataclass
from typing import Sequence

from .drawing import Drawing, Group, Line, PolyLine, RGBColor, Text, TextAnchor
from .svg_renderer import SVGRenderer

LINE_COLORS = ("#FF0000", "#0000FF", "#00FF00", "#FF00FF", "#00FFFF", "#FFFF00")
COLUMN_LABELS = ("x", "y", "z")
COMP_LABELS = (
    "CPU_sequential_vectorized",
    "CPU_sequential_no_vectorized",
    "CPU_parallel_vectorized",
    "CPU_parallel_no_vectorized",
    "GPU",
)

_MARGIN_LEFT = 100.0
_MARGIN_BOTTOM = 100.0
_NUM_TICKS = 10


@dataclass
class DataPoint:
    """One measured result row."""

    num_elements: float
    time: float
    cv: float
    mad: float


def round_to_nearest(value: float, precision: int = 2) -> float:
    """Round ``value`` to ``precision`` decimals, halves away from zero."""
    scale = 10.0**precision
    scaled = value * scale
    if not math.isfinite(scaled):
        return scaled / scale
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / scale


def format_tick_label(value: float) -> str:
    """Whole numbers as integers, anything else with two significant digits."""
    if math.isfinite(value) and value == math.trunc(value):
        return str(math.trunc(value))
    return format(value, ".2g")


def _div(a: float, b: float) -> float:
    """IEEE-style division: no exception on a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _add_line(root: Group, x1, y1, x2, y2, color: str, width: float) -> Line:
    line = root.add(Line(x1, y1, x2, y2))
    line.stroke_color = RGBColor.from_html_color(color)
    line.stroke_width = width
    return line


def _add_text(root: Group, x, y, text: str, size: float, anchor: TextAnchor) -> Text:
    label = root.add(Text(x, y, text))
    label.font_size = size
    label.anchor = anchor
    return label


def plot_graph(
    x_points_all: Sequence[Sequence[float]],
    y_points_all: Sequence[Sequence[float]],
    line_labels: Sequence[str] = (),
    x_label: str = "X Axis",
    y_label: str = "Y Axis",
    title: str = "Graph",
    output_filename: str = "plot_graph.svg",
    canvas_width: float = 800,
    canvas_height: float = 600,
) -> str:
    """Draw one polyline per series, write the SVG file and return its text."""
    if len(x_points_all) != len(y_points_all) or not x_points_all:
        raise ValueError(
            "Each set of x_points and y_points must be of the same size and not empty."
        )
    if any(not xs or not ys for xs, ys in zip(x_points_all, y_points_all)):
        raise ValueError("Every data series must hold at least one point.")

    renderer = SVGRenderer(canvas_width, canvas_height)
    drawing = Drawing()
    root = drawing.root

    plot_width = canvas_width - _MARGIN_LEFT - 50
    plot_height = canvas_height - _MARGIN_BOTTOM - 50
    bottom = canvas_height - _MARGIN_BOTTOM

    x_min = min(min(xs) for xs in x_points_all)
    x_max = max(max(xs) for xs in x_points_all)
    y_min = min(min(ys) for ys in y_points_all)
    y_max = max(max(ys) for ys in y_points_all)

    x_padding = round_to_nearest(x_max - x_min, 1) * 0.1
    y_padding = round_to_nearest(y_max - y_min, 1) * 0.1
    x_lo, x_hi = x_min - x_padding, x_max + x_padding
    y_lo, y_hi = y_min - y_padding, y_max + y_padding

    _add_line(root, _MARGIN_LEFT, bottom, canvas_width - 50, bottom, "#000000", 2.0)
    _add_line(root, _MARGIN_LEFT, bottom, _MARGIN_LEFT, 50, "#000000", 2.0)

    for i in range(_NUM_TICKS + 1):
        x_pos = _MARGIN_LEFT + i * (plot_width / _NUM_TICKS)
        x_value = x_lo + i * ((x_hi - x_lo) / _NUM_TICKS)
        _add_line(root, x_pos, 50, x_pos, bottom, "#CCCCCC", 1.0)
        _add_line(root, x_pos, bottom, x_pos, bottom + 10, "#000000", 2.0)
        label = _add_text(
            root, x_pos, bottom + 25, format_tick_label(x_value), 12, TextAnchor.MIDDLE
        )
        label.transform = f"rotate(-20, {x_pos:f}, {bottom + 25:f})"

    for i in range(_NUM_TICKS + 1):
        y_pos = bottom - i * (plot_height / _NUM_TICKS)
        y_value = y_lo + i * ((y_hi - y_lo) / _NUM_TICKS)
        _add_line(root, _MARGIN_LEFT, y_pos, canvas_width - 50, y_pos, "#CCCCCC", 1.0)
        _add_line(root, _MARGIN_LEFT - 10, y_pos, _MARGIN_LEFT, y_pos, "#000000", 2.0)
        _add_text(
            root, _MARGIN_LEFT - 20, y_pos, format_tick_label(y_value), 12, TextAnchor.END
        )

    def to_canvas(x: float, y: float) -> tuple[float, float]:
        cx = _MARGIN_LEFT + _div(x - x_lo, x_hi - x_lo) * plot_width
        cy = bottom - _div(y - y_lo, y_hi - y_lo) * plot_height
        return cx, cy

    for index, (xs, ys) in enumerate(zip(x_points_all, y_points_all)):
        polyline = root.add(PolyLine(*to_canvas(xs[0], ys[0])))
        for x, y in zip(xs[1:], ys[1:]):
            polyline.add_point(*to_canvas(x, y))
        polyline.stroke_color = RGBColor.from_html_color(LINE_COLORS[index % len(LINE_COLORS)])
        polyline.stroke_width = 2.0
        polyline.fill_color = RGBColor.from_html_color("#000000")
        polyline.fill_opacity = 0
        polyline.stroke_opacity = 0.5

    _add_text(root, canvas_width / 2, bottom + 50, x_label, 16, TextAnchor.MIDDLE)
    y_axis_label = _add_text(
        root, 50, (canvas_height / 2) - 20, y_label, 16, TextAnchor.MIDDLE
    )
    y_axis_label.transform = f"rotate(-90, 50, {canvas_height / 2:f})"
    _add_text(root, canvas_width / 2, 30, title, 20, TextAnchor.MIDDLE)

    legend_x = canvas_width - 50
    legend_y = 60.0
    for i, label in enumerate(line_labels):
        row_y = legend_y + i * 20
        _add_line(
            root, legend_x, row_y, legend_x + 20, row_y, LINE_COLORS[i % len(LINE_COLORS)], 2.0
        )
        _add_text(root, legend_x + 30, row_y, label, 12, TextAnchor.START)

    renderer.begin_render()
    drawing.render(renderer)
    renderer.finalize_render()

    try:
        with open(output_filename, "w", encoding="utf-8") as out:
            out.write(renderer.svg)
    except OSError as exc:
        raise RuntimeError(f"Unable to write to output file: {output_filename}") from exc
    return renderer.svg


def load_results(filename: str) -> dict[str, dict[str, list[DataPoint]]]:
    """Read a results CSV into ``{column: {comp_type: [DataPoint, ...]}}``."""
    data: dict[str, dict[str, list[DataPoint]]] = defaultdict(lambda: defaultdict(list))
    with open(filename, encoding="utf-8") as handle:
        next(handle, None)
        for raw in handle:
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            column, num_elements, comp_type, cv, mad, elapsed = line.split(",", 5)
            data[column][comp_type].append(
                DataPoint(float(num_elements), float(elapsed), float(cv), float(mad))
            )
    return {column: dict(by_comp) for column, by_comp in data.items()}


def plot_results(filename: str, output_folder: str) -> list[str]:
    """Plot time, CV and MAD against size for each column; return the files written.

    File names are ``output_folder`` followed directly by e.g. ``time_for_x.svg``.
    """
    data = load_results(filename)
    written: list[str] = []

    for column in COLUMN_LABELS:
        by_comp = data.get(column, {})
        series = [by_comp.get(comp, []) for comp in COMP_LABELS]
        x_points = [[p.num_elements for p in points] for points in series]
        charts = (
            ("time_for_", "Time (s)", "Computation time for column ", "time"),
            ("CV_for_", "Coefficient of Variation", "Coefficient of Variation for column ", "cv"),
            ("MAD_for_", "Median Absolute Deviation", "Median Absolute Deviation for column ", "mad"),
        )
        try:
            for prefix, y_label, title, attr in charts:
                y_points = [[getattr(p, attr) for p in points] for points in series]
                output_filename = f"{output_folder}{prefix}{column}.svg"
                plot_graph(
                    x_points,
                    y_points,
                    list(COMP_LABELS),
                    "Number of Elements",
                    y_label,
                    title + column,
                    output_filename,
                )
                print(f"Graph saved to '{output_filename}'")
                written.append(output_filename)
        except Exception as exc:  # noqa: BLE001 - report and continue with next column
            print(f"Error: {exc}", file=sys.stderr)
    return written