"""Vector drawing model: colours, shapes, groups and the renderer interface."""

from __future__ import annotations

import abc
import enum
from dataclasses import KW_ONLY, dataclass, field


def _hex_digit(c: str) -> int:
    if c in "0123456789abcdefABCDEF":
        return int(c, 16)
    return 0


@dataclass
class RGBColor:
    """An 8-bit RGB colour with alpha."""

    r: int
    g: int
    b: int
    a: int = 255

    @staticmethod
    def _byte(text: str) -> int:
        return (_hex_digit(text[0]) * 16 + _hex_digit(text[1])) & 0xFF

    @classmethod
    def from_html_color(cls, col: str) -> RGBColor:
        """Parse "#RRGGBB" or "#AARRGGBB"; anything else yields opaque black."""
        if len(col) == 9:
            return cls(
                cls._byte(col[3:5]),
                cls._byte(col[5:7]),
                cls._byte(col[7:9]),
                cls._byte(col[1:3]),
            )
        if len(col) != 7:
            return cls(0, 0, 0, 255)
        return cls(cls._byte(col[1:3]), cls._byte(col[3:5]), cls._byte(col[5:7]), 255)

    @classmethod
    def from_uint32(cls, col: int, has_alpha: bool = False) -> RGBColor:
        """Unpack a 0xAARRGGBB integer; alpha is 255 unless ``has_alpha``."""
        return cls(
            (col >> 16) & 0xFF,
            (col >> 8) & 0xFF,
            col & 0xFF,
            (col >> 24) & 0xFF if has_alpha else 255,
        )


@dataclass(frozen=True)
class Point:
    """A point on the canvas."""

    x: float
    y: float


class TextAnchor(enum.Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class FontWeight(enum.Enum):
    LIGHT = "light"
    NORMAL = "normal"
    BOLD = "bold"


class Renderer(abc.ABC):
    """Interface of a drawing renderer."""

    def __init__(self, canvas_width: float = 0.0, canvas_height: float = 0.0) -> None:
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height

    @abc.abstractmethod
    def begin_render(self) -> None: ...

    @abc.abstractmethod
    def finalize_render(self) -> None: ...

    @abc.abstractmethod
    def render_circle(self, shape: Circle) -> None: ...

    @abc.abstractmethod
    def render_line(self, shape: Line) -> None: ...

    @abc.abstractmethod
    def render_polyline(self, shape: PolyLine) -> None: ...

    @abc.abstractmethod
    def render_rectangle(self, shape: Rectangle) -> None: ...

    @abc.abstractmethod
    def render_polygon(self, shape: Polygon) -> None: ...

    @abc.abstractmethod
    def render_text(self, shape: Text) -> None: ...

    @abc.abstractmethod
    def render_group(self, shape: Group) -> None: ...


@dataclass
class Element:
    """A drawable canvas element with position and style."""

    x: float = 0.0
    y: float = 0.0
    _: KW_ONLY
    stroke_width: float = 0.0
    stroke_color: RGBColor = field(default_factory=lambda: RGBColor(0, 0, 0))
    fill_color: RGBColor = field(default_factory=lambda: RGBColor(0, 0, 0))
    stroke_opacity: float = 1.0
    fill_opacity: float = 1.0
    id: str = ""
    css_class: str = ""
    stroke_dash_array: list[float] = field(default_factory=list)
    transform: str = ""

    def clone_to(self, target: Element) -> None:
        """Copy style settings (not id, position or transform) onto ``target``."""
        target.stroke_width = self.stroke_width
        target.stroke_color = RGBColor(
            self.stroke_color.r, self.stroke_color.g, self.stroke_color.b, self.stroke_color.a
        )
        target.fill_color = RGBColor(
            self.fill_color.r, self.fill_color.g, self.fill_color.b, self.fill_color.a
        )
        target.stroke_opacity = self.stroke_opacity
        target.fill_opacity = self.fill_opacity
        target.css_class = self.css_class
        target.stroke_dash_array = list(self.stroke_dash_array)

    def render_to(self, renderer: Renderer) -> None:
        """A bare element draws nothing."""


class Group(Element):
    """A group of elements sharing default style settings."""

    def __init__(self, id: str = "", *, add_stroke: bool = False) -> None:
        super().__init__(0.0, 0.0, id=id)
        self.default_shape = Element()
        self.objects: list[Element] = []
        self.add_stroke = add_stroke

    def add(self, element: Element) -> Element:
        """Append ``element``, apply the group's default style to it and return it."""
        self.objects.append(element)
        self.apply_defaults(element)
        return element

    def apply_defaults(self, target: Element) -> None:
        self.default_shape.clone_to(target)

    def render_contents(self, renderer: Renderer) -> None:
        for element in self.objects:
            element.render_to(renderer)

    def render_to(self, renderer: Renderer) -> None:
        renderer.render_group(self)


@dataclass
class Circle(Element):
    radius: float = 0.0

    def render_to(self, renderer: Renderer) -> None:
        renderer.render_circle(self)


@dataclass
class Line(Element):
    target_x: float = 0.0
    target_y: float = 0.0

    def render_to(self, renderer: Renderer) -> None:
        renderer.render_line(self)


@dataclass
class PolyLine(Element):
    points: list[Point] = field(default_factory=list)

    def add_point(self, x: float, y: float) -> PolyLine:
        self.points.append(Point(x, y))
        return self

    def clear(self) -> PolyLine:
        self.points.clear()
        return self

    def render_to(self, renderer: Renderer) -> None:
        renderer.render_polyline(self)


@dataclass
class Polygon(Element):
    points: list[Point] = field(default_factory=list)

    def add_point(self, x: float, y: float) -> Polygon:
        self.points.append(Point(x, y))
        return self

    def clear(self) -> Polygon:
        self.points.clear()
        return self

    def render_to(self, renderer: Renderer) -> None:
        renderer.render_polygon(self)


@dataclass
class Rectangle(Element):
    width: float = 0.0
    height: float = 0.0

    def render_to(self, renderer: Renderer) -> None:
        renderer.render_rectangle(self)


@dataclass
class Text(Element):
    text: str = ""
    _: KW_ONLY
    anchor: TextAnchor = TextAnchor.START
    font_weight: FontWeight = FontWeight.NORMAL
    font_size: float = 10.0

    def render_to(self, renderer: Renderer) -> None:
        renderer.render_text(self)


class Drawing:
    """A drawing container holding a root group."""

    def __init__(self) -> None:
        self.root = Group()

    def render(self, target: Renderer) -> None:
        """Render the whole drawing into ``target``."""
        target.begin_render()
        self.root.render_to(target)
        target.finalize_render()