import pytest

from accelstats.drawing import (
    Circle,
    Drawing,
    FontWeight,
    Group,
    Line,
    PolyLine,
    Polygon,
    Rectangle,
    RGBColor,
    Text,
    TextAnchor,
)
from accelstats.svg_renderer import (
    SVGRenderer,
    anchor_to_string,
    color_to_string,
    weight_to_string,
)


def _render(*elements, width=800, height=600):
    drawing = Drawing()
    for element in elements:
        drawing.root.add(element)
    renderer = SVGRenderer(width, height)
    drawing.render(renderer)
    return renderer.svg


def test_color_to_string():
    assert color_to_string(RGBColor(1, 2, 3)) == "rgb(1,2,3)"


@pytest.mark.parametrize(
    "anchor,expected",
    [(TextAnchor.START, "start"), (TextAnchor.MIDDLE, "middle"), (TextAnchor.END, "end")],
)
def test_anchor_to_string(anchor, expected):
    assert anchor_to_string(anchor) == expected


@pytest.mark.parametrize(
    "weight,expected",
    [(FontWeight.LIGHT, "light"), (FontWeight.NORMAL, "normal"), (FontWeight.BOLD, "bold")],
)
def test_weight_to_string(weight, expected):
    assert weight_to_string(weight) == expected


def test_document_frame():
    svg = _render(width=800, height=600)
    assert svg.startswith("<svg ")
    assert 'viewBox="0 0 800 600"' in svg
    assert 'id="svgContainer"' in svg
    assert svg.endswith("</g>\n</svg>\n")


def test_output_empty_until_finalized():
    renderer = SVGRenderer(10, 10)
    renderer.begin_render()
    assert renderer.svg == ""
    renderer.finalize_render()
    assert renderer.svg.endswith("</svg>\n")


def test_nested_begin_writes_header_once():
    drawing = Drawing()
    drawing.root.add(Circle(1, 2, 3))
    renderer = SVGRenderer(100, 100)
    renderer.begin_render()
    drawing.render(renderer)
    assert renderer.svg == ""
    renderer.finalize_render()
    assert renderer.svg.count("<svg ") == 1
    assert renderer.svg.count("</svg>") == 1


def test_circle():
    svg = _render(Circle(10, 20, 5))
    assert '<circle cx="10" cy="20" r="5" fill="rgb(0,0,0)" fill-opacity="1" />\n' in svg


def test_stroke_only_when_width_positive():
    line = Line(0, 0, 10, 10)
    assert "stroke-width" not in _render(line)

    line.stroke_width = 2.0
    line.stroke_color = RGBColor(255, 0, 0)
    svg = _render(line)
    assert 'stroke-width="2"' in svg
    assert 'stroke="rgb(255,0,0)"' in svg
    assert 'stroke-linejoin="round"' in svg
    assert 'stroke-opacity="1"' in svg


def test_line_coordinates():
    svg = _render(Line(1, 2, 3, 4))
    assert '<line x1="1" y1="2" x2="3" y2="4"' in svg


def test_polyline_points():
    polyline = PolyLine(1, 2).add_point(3, 4).add_point(5.5, 6)
    svg = _render(polyline)
    assert '<polyline points="1,2 3,4 5.5,6"\n' in svg


def test_polygon_points():
    polygon = Polygon(0, 0).add_point(1, 0).add_point(1, 1)
    svg = _render(polygon)
    assert '<polygon points="0,0 1,0 1,1"\n' in svg


def test_rectangle_closing():
    svg = _render(Rectangle(1, 2, 30, 40))
    assert '<rect x="1" y="2" width="30" height="40"' in svg
    assert 'fill-opacity="1"/>\n' in svg


def test_text_attributes_and_content():
    text = Text(5, 6, "hello", anchor=TextAnchor.MIDDLE, font_size=12)
    text.transform = "rotate(-90)"
    svg = _render(text)
    assert '<text x="5" y="6" text-anchor="middle"' in svg
    assert 'transform="rotate(-90)"' in svg
    assert 'font-weight="normal" font-size="12">hello</text>\n' in svg


def test_dash_array_and_id_class():
    circle = Circle(0, 0, 1)
    circle.id = "c1"
    circle.css_class = "dot"
    circle.stroke_dash_array = [4, 2]
    svg = _render(circle)
    assert 'id="c1"' in svg
    assert 'class="dot"' in svg
    assert 'stroke-dasharray="4 2 "' in svg


def test_group_with_and_without_stroke():
    inner = Group("inner")
    inner.add(Circle(1, 1, 1))
    svg = _render(inner)
    assert "<g>\n<circle" in svg
    assert 'id="inner"' not in svg

    stroked = Group("inner", add_stroke=True)
    svg = _render(stroked)
    assert '<g id="inner"' in svg


def test_fill_opacity_fraction():
    polyline = PolyLine(0, 0)
    polyline.fill_opacity = 0.5
    assert 'fill-opacity="0.5"' in _render(polyline)