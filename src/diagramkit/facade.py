"""
Diagram facade - Single entry point for creating diagrams, undo, redo and export.
"""

from typing import Optional
import click
import logging
from diagramkit.commands import CommandHistory, CreateGraphCommand
from diagramkit.config import Configuration
from diagramkit.diagram_model import CreationResult, Diagram, ElementType
from diagramkit.factories import FigureFactory, GraphFactory
from diagramkit.subscribers import ContrastImageSubscriber, Emit, RegularSubscriber
from diagramkit.visitor import ExportVisitor

log = logging.getLogger(__name__)


class DiagramFacade:
    """Routes creation requests to graph or figure factory and keeps graph history.

    Graph creation goes through commands and can be undone and redone. Figures
    come from the shared flyweight cache and are not part of the history.
    """

    def __init__(
        self,
        config: Optional[Configuration] = None,
        emit: Emit | None = None,
        graph_factory: Optional[GraphFactory] = None,
        figure_factory: Optional[FigureFactory] = None,
    ):
        """
        Initialize facade.

        Without config, output sink and figure factory the process-wide figure
        factory is used, otherwise the facade gets a figure factory of its own.

        :param config: Configuration object
        :param emit: Output sink for all action text
        :param graph_factory: Graph factory, created if not given
        :param figure_factory: Figure factory, see above if not given
        """
        if figure_factory is None:
            if config is None and emit is None:
                figure_factory = FigureFactory.instance()
            else:
                figure_factory = FigureFactory((config or Configuration()).figures, emit)
        self.config = config or Configuration()
        self.emit = emit or click.echo
        self.graph_factory = graph_factory or GraphFactory(self.emit)
        self.figure_factory = figure_factory
        self.history = CommandHistory()
        self.regular_subscriber = RegularSubscriber(self.emit)
        self.contrast_subscriber = ContrastImageSubscriber(self.emit)
        self.exporter = ExportVisitor(self.config.export, self.emit)

    def create_diagram(self, element: str, type: str, coordinate: str) -> CreationResult:
        """
        Create graph or figure.

        :param element: "Graph" or "Figure"
        :param type: Graph style ("Bar", "Line") or figure key ("CircleColor")
        :param coordinate: Opaque coordinate string
        :return: CreationResult, failed for unknown element or graph style
        """
        if element == ElementType.GRAPH.value:
            return self.create_graph(type, coordinate)
        elif element == ElementType.FIGURE.value:
            return self.create_figure(type, coordinate)
        message = f"Unknown element: {element}. Supported elements: " + ", ".join(e.value for e in ElementType)
        log.warning(message)
        return CreationResult(success=False, message=message)

    def create_graph(self, style: str, coordinate: str) -> CreationResult:
        cmd = CreateGraphCommand(self.graph_factory, style, coordinate, emit=self.emit)
        return self.history.execute(cmd)

    def create_figure(self, key: str, coordinate: str) -> CreationResult:
        figure = self.figure_factory.get_figure(key, coordinate, self.regular_subscriber)
        figure.attach_subscriber(self.contrast_subscriber)
        return CreationResult(success=True, message=f"Drew {key} figure at {coordinate}", diagram=figure)

    def undo(self) -> bool:
        """
        Undo last graph creation, if there is one.

        :return: True if something was undone
        """
        return self.history.undo() is not None

    def redo(self) -> bool:
        """
        Redo last undone graph creation, if there is one.

        :return: True if something was redone
        """
        return self.history.redo() is not None

    def export(self, diagram: Diagram) -> None:
        diagram.accept(self.exporter)
