"""Renderer that turns a drawing into SVG markup."""

from __future__ import annotations

import io

from .drawing import (
    Circle,
    Element,
    FontWeight,
    Group,
    Line,
    PolyLine,
    Polygon,
    Rectangle,
    Renderer,
    RGBColor,
    Text,
    TextAnchor,
)

_SVG_NS = "http://www.w3.org/2000/svg"
_XLINK_NS = "http://www.w3.org/1999/xlink"


def _num(value: float) -> str:
    """Format a number the way a default-configured text stream does."""
    return format(value, "g")


def color_to_string(color: RGBColor) -> str:
    """Return the SVG ``rgb(r,g,b)`` form of ``color``."""
    return f"rgb({color.r},{color.g},{color.b})"


def anchor_to_string(anchor: TextAnchor) -> str:
    """Return the SVG ``text-anchor`` value for ``anchor``."""
    return anchor.value if isinstance(anchor, TextAnchor) else ""


def weight_to_string(weight: FontWeight) -> str:
    """Return the SVG ``font-weight`` value for ``weight``."""
    return weight.value if isinstance(weight, FontWeight) else "normal"


class SVGRenderer(Renderer):
    """Render a drawing into an SVG document, available as ``svg`` once finished."""

    def __init__(self, canvas_width: float, canvas_height: float) -> None:
        super().__init__(canvas_width, canvas_height)
        self.svg = ""
        self._out = io.StringIO()
        self._depth = 0

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _render_default_params(self, shape: Element) -> None:
        if shape.id:
            self._write(f' id="{shape.id}"')
        if shape.css_class:
            self._write(f' class="{shape.css_class}"')
        if shape.transform:
            self._write(f' transform="{shape.transform}"')

        if shape.stroke_width > 0:
            self._write(f' stroke-width="{_num(shape.stroke_width)}"')
            self._write(f' stroke="{color_to_string(shape.stroke_color)}"')
            self._write(' stroke-linejoin="round"')
            self._write(' stroke-linecap="round"')
            self._write(f' stroke-opacity="{_num(shape.stroke_opacity)}"')

        if shape.stroke_dash_array:
            dashes = "".join(f"{_num(d)} " for d in shape.stroke_dash_array)
            self._write(f' stroke-dasharray="{dashes}"')

        self._write(f' fill="{color_to_string(shape.fill_color)}"')
        self._write(f' fill-opacity="{_num(shape.fill_opacity)}"')

    def begin_render(self) -> None:
        if self._depth == 0:
            self._out = io.StringIO()
            self._write(
                f'<svg xmlns="{_SVG_NS}" xmlns:xlink="{_XLINK_NS}"'
                f' viewBox="0 0 {_num(self.canvas_width)} {_num(self.canvas_height)}"'
                ' id="svgContainer" '
                ' shape-rendering="geometricPrecision">\n'
            )
            self._write("<g>\n")
        self._depth += 1

    def finalize_render(self) -> None:
        self._depth -= 1
        if self._depth == 0:
            self._write("</g>\n")
            self._write("</svg>\n")
            self.svg = self._out.getvalue()
            self._out = io.StringIO()

    def render_circle(self, shape: Circle) -> None:
        self._write(
            f'<circle cx="{_num(shape.x)}" cy="{_num(shape.y)}" r="{_num(shape.radius)}"'
        )
        self._render_default_params(shape)
        self._write(" />\n")

    def render_line(self, shape: Line) -> None:
        self._write(
            f'<line x1="{_num(shape.x)}" y1="{_num(shape.y)}"'
            f' x2="{_num(shape.target_x)}" y2="{_num(shape.target_y)}"'
        )
        self._render_default_params(shape)
        self._write(" />\n")

    def _points(self, shape: PolyLine | Polygon) -> str:
        parts = [f"{_num(shape.x)},{_num(shape.y)}"]
        parts.extend(f"{_num(p.x)},{_num(p.y)}" for p in shape.points)
        return " ".join(parts)

    def render_polyline(self, shape: PolyLine) -> None:
        self._write(f'<polyline points="{self._points(shape)}"\n')
        self._render_default_params(shape)
        self._write(" />\n")

    def render_rectangle(self, shape: Rectangle) -> None:
        self._write(
            f'<rect x="{_num(shape.x)}" y="{_num(shape.y)}"'
            f' width="{_num(shape.width)}" height="{_num(shape.height)}"'
        )
        self._render_default_params(shape)
        self._write("/>\n")

    def render_polygon(self, shape: Polygon) -> None:
        self._write(f'<polygon points="{self._points(shape)}"\n')
        self._render_default_params(shape)
        self._write(" />\n")

    def render_text(self, shape: Text) -> None:
        self._write(
            f'<text x="{_num(shape.x)}" y="{_num(shape.y)}"'
            f' text-anchor="{anchor_to_string(shape.anchor)}"'
        )
        self._render_default_params(shape)
        self._write(
            f' font-weight="{weight_to_string(shape.font_weight)}"'
            f' font-size="{_num(shape.font_size)}">'
        )
        self._write(shape.text)
        self._write("</text>\n")

    def render_group(self, shape: Group) -> None:
        self._write("<g")
        if shape.add_stroke:
            self._render_default_params(shape)
        self._write(">\n")
        shape.render_contents(self)
        self._write("</g>\n")