"""
Diagram model - Graph and figure elements with their draw proxy.

Diagrams are a tagged variant: every diagram carries a ``DiagramKind`` and
consumers (like the export visitor) match on that tag instead of relying on
per-class double dispatch.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional
import click
from diagramkit.subscribers import Emit, Subject

if TYPE_CHECKING:
    from diagramkit.visitor import DiagramVisitor


class DiagramKind(str, Enum):
    """Type of diagram."""

    GRAPH = "graph"
    FIGURE = "figure"


class ElementType(str, Enum):
    """Element names accepted by the facade."""

    GRAPH = "Graph"
    FIGURE = "Figure"


@dataclass
class CreationResult:
    """Outcome of a request to create a diagram."""

    success: bool
    message: str
    diagram: Optional["Diagram"] = None

    def __bool__(self) -> bool:
        return self.success


class GraphDrawProxy:
    """Stands in for the real graph drawing, graphical and textual output in one call."""

    def __init__(self, emit: Emit | None = None):
        self.emit = emit or click.echo

    def draw(self) -> None:
        self.emit("[Graph Proxy] Drawing graphical + textual stub")


class Diagram(Subject):
    """Base for all diagrams.

    Every state-changing call writes its action to the output sink and then
    broadcasts exactly one notification to the subscribers.
    """

    kind: DiagramKind
    label: str

    def __init__(self, emit: Emit | None = None):
        super().__init__()
        self.emit = emit or click.echo

    def calc(self) -> None:
        self.emit(f"Calculating {self.label}")
        self.notify_subscribers(f"{self.label} calculated")

    def draw(self) -> None:
        self.emit(f"Drawing {self.label}")
        self.notify_subscribers(f"{self.label} drawn")

    def drag(self) -> None:
        self.emit(f"Dragging {self.label}")
        self.notify_subscribers(f"{self.label} dragged")

    def accept(self, visitor: "DiagramVisitor") -> None:
        visitor.visit(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r})"


class Graph(Diagram):
    """Graph of given style (Bar, Line) placed at coordinate.

    A graph without style is a generic one, as used for plain exports.
    """

    kind = DiagramKind.GRAPH
    label = "Graph"

    def __init__(self, style: str = "", coordinate: str = "", emit: Emit | None = None):
        super().__init__(emit)
        self.style = style
        self.coordinate = coordinate
        self.proxy = GraphDrawProxy(self.emit)

    def calc(self) -> None:
        if not self.style:
            return super().calc()
        self.emit(f"{self.style} calc at {self.coordinate}")
        self.notify_subscribers("Graph calculated")

    def draw(self) -> None:
        if self.style:
            self.proxy.draw()
        else:
            self.emit("[Graph] Drawing graphical representation.")
        self.notify_subscribers("Graph drawn")

    def drag(self) -> None:
        if not self.style:
            return super().drag()
        self.emit(f"Drag {self.style} at {self.coordinate}")
        self.notify_subscribers("Graph dragged")

    def __repr__(self) -> str:
        return f"Graph(style={self.style!r}, coordinate={self.coordinate!r})"


class Figure(Diagram):
    """Figure drawn as a textual stub."""

    kind = DiagramKind.FIGURE
    label = "Figure"

    def draw(self) -> None:
        self.emit("[Figure Stub] Drawing textual stub.")
        self.notify_subscribers("Figure drawn")
