"""
Graph builders - Step-by-step construction of graphs driven by a director.

Every construction request gets its own builder instance, so two requests for
the same style never share coordinate state.
"""

from typing import Dict, Iterable
import logging
from diagramkit.diagram_model import Graph
from diagramkit.subscribers import Emit, Subscriber

log = logging.getLogger(__name__)


class GraphBuilder:
    """Builds one graph of the builder's style."""

    style: str = ""

    def __init__(self, emit: Emit | None = None, subscribers: Iterable[Subscriber] = ()):
        self.graph = Graph(style=self.style, emit=emit)
        for subscriber in subscribers:
            self.graph.attach_subscriber(subscriber)

    def set_coord(self, coordinate: str) -> None:
        self.graph.coordinate = coordinate

    def calc(self) -> None:
        self.graph.calc()

    def draw(self) -> None:
        self.graph.draw()

    def drag(self) -> None:
        self.graph.drag()

    def get_result(self) -> Graph:
        return self.graph


class BarBuilder(GraphBuilder):
    style = "Bar"


class LineBuilder(GraphBuilder):
    style = "Line"


#: Builder classes by exact style name
BUILDERS: Dict[str, type[GraphBuilder]] = {
    BarBuilder.style: BarBuilder,
    LineBuilder.style: LineBuilder,
}


class Director:
    """Runs the fixed construction sequence on a builder."""

    def construct(self, builder: GraphBuilder, coordinate: str) -> Graph:
        """
        Construct graph: set coordinate, calculate, draw and drag, in that order.

        :param builder: Builder to drive
        :param coordinate: Opaque coordinate string, e.g. "(10,20)"
        :return: Constructed graph
        """
        log.debug(f"Constructing {builder.style} graph at {coordinate}")
        builder.set_coord(coordinate)
        builder.calc()
        builder.draw()
        builder.drag()
        return builder.get_result()
