import pytest

from accelstats.drawing import (
    Circle,
    Drawing,
    Element,
    FontWeight,
    Group,
    Line,
    Point,
    PolyLine,
    Polygon,
    Rectangle,
    Renderer,
    RGBColor,
    Text,
    TextAnchor,
)


class RecordingRenderer(Renderer):
    def __init__(self):
        super().__init__(100, 50)
        self.calls = []

    def begin_render(self):
        self.calls.append(("begin", None))

    def finalize_render(self):
        self.calls.append(("end", None))

    def render_circle(self, shape):
        self.calls.append(("circle", shape))

    def render_line(self, shape):
        self.calls.append(("line", shape))

    def render_polyline(self, shape):
        self.calls.append(("polyline", shape))

    def render_rectangle(self, shape):
        self.calls.append(("rect", shape))

    def render_polygon(self, shape):
        self.calls.append(("polygon", shape))

    def render_text(self, shape):
        self.calls.append(("text", shape))

    def render_group(self, shape):
        self.calls.append(("group", shape))
        shape.render_contents(self)


def test_html_color_rgb():
    assert RGBColor.from_html_color("#FF0055") == RGBColor(0xFF, 0x00, 0x55, 255)


def test_html_color_argb():
    assert RGBColor.from_html_color("#80FF0011") == RGBColor(0xFF, 0x00, 0x11, 0x80)


def test_html_color_black_and_grey():
    assert RGBColor.from_html_color("#000000") == RGBColor(0, 0, 0, 255)
    grey = RGBColor.from_html_color("#CCCCCC")
    assert grey.r == grey.g == grey.b == 0xCC


def test_html_color_bad_length_is_black():
    assert RGBColor.from_html_color("#FFF") == RGBColor(0, 0, 0, 255)


def test_uint32_without_alpha():
    assert RGBColor.from_uint32(0xAABBCCDD) == RGBColor(0xBB, 0xCC, 0xDD, 255)


def test_uint32_with_alpha():
    assert RGBColor.from_uint32(0xAABBCCDD, True) == RGBColor(0xBB, 0xCC, 0xDD, 0xAA)


def test_element_defaults():
    e = Element()
    assert (e.x, e.y, e.stroke_width, e.stroke_opacity, e.fill_opacity) == (0.0, 0.0, 0.0, 1.0, 1.0)
    assert e.id == "" and e.stroke_dash_array == []


def test_clone_to_copies_style_but_not_id_or_position():
    src = Element(1, 2, stroke_width=3.0, id="src", css_class="c", stroke_dash_array=[1.0, 2.0],
                  fill_opacity=0.5, stroke_color=RGBColor(1, 2, 3))
    dst = Element(7, 8, id="dst")
    src.clone_to(dst)
    assert dst.stroke_width == 3.0
    assert dst.css_class == "c"
    assert dst.stroke_dash_array == [1.0, 2.0]
    assert dst.fill_opacity == 0.5
    assert dst.stroke_color == RGBColor(1, 2, 3)
    assert dst.id == "dst"
    assert (dst.x, dst.y) == (7, 8)
    dst.stroke_dash_array.append(9.0)
    assert src.stroke_dash_array == [1.0, 2.0]


def test_group_add_applies_defaults_and_returns_element():
    g = Group("root")
    g.default_shape.stroke_width = 4.0
    g.default_shape.fill_color = RGBColor(9, 9, 9)
    c = g.add(Circle(1, 2, 5))
    assert c is g.objects[-1]
    assert c.stroke_width == 4.0
    assert c.fill_color == RGBColor(9, 9, 9)
    assert c.radius == 5
    assert g.id == "root" and (g.x, g.y) == (0.0, 0.0)


def test_style_set_after_add_is_kept():
    g = Group()
    line = g.add(Line(0, 0, 10, 10))
    line.stroke_width = 2.0
    assert g.objects[0].stroke_width == 2.0
    assert (line.target_x, line.target_y) == (10, 10)


def test_polyline_points_and_clear():
    p = PolyLine(1, 1)
    assert p.add_point(2, 3).add_point(4, 5) is p
    assert p.points == [Point(2, 3), Point(4, 5)]
    p.clear()
    assert p.points == []


def test_polygon_points_and_clear():
    p = Polygon()
    p.add_point(1, 2)
    assert p.points == [Point(1, 2)]
    assert p.clear().points == []


def test_text_defaults():
    t = Text(1, 2, "hi")
    assert t.text == "hi"
    assert t.anchor is TextAnchor.START
    assert t.font_weight is FontWeight.NORMAL
    assert t.font_size == 10.0


def test_each_shape_dispatches_to_its_method():
    r = RecordingRenderer()
    shapes = [Circle(), Line(), PolyLine(), Polygon(), Rectangle(0, 0, 3, 4), Text()]
    for s in shapes:
        s.render_to(r)
    assert [k for k, _ in r.calls] == ["circle", "line", "polyline", "polygon", "rect", "text"]
    assert all(a is b for (_, a), b in zip(r.calls, shapes))


def test_bare_element_renders_nothing():
    r = RecordingRenderer()
    Element().render_to(r)
    assert r.calls == []


def test_drawing_render_order():
    d = Drawing()
    inner = d.root.add(Group("inner"))
    circle = inner.add(Circle())
    text = d.root.add(Text(text="t"))
    r = RecordingRenderer()
    d.render(r)
    kinds = [k for k, _ in r.calls]
    assert kinds == ["begin", "group", "group", "circle", "text", "end"]
    assert r.calls[1][1] is d.root
    assert r.calls[2][1] is inner
    assert r.calls[3][1] is circle
    assert r.calls[4][1] is text


def test_renderer_canvas_size_kept_through_render():
    d = Drawing()
    r = RecordingRenderer()
    d.render(r)
    assert r.calls == [("begin", None), ("group", d.root), ("end", None)]
    assert (r.canvas_width, r.canvas_height) == (100, 50)


def test_renderer_is_abstract():
    with pytest.raises(TypeError):
        Renderer()