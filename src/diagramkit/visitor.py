"""
Export visitor - Format-specific export of diagrams.

The visitor matches on the diagram kind tag, diagrams themselves never branch
on their own type. Export text is rendered from a jinja2 template.
"""

from typing import Callable, Dict, Optional, Protocol
import click
import logging
from jinja2 import Environment, PackageLoader, select_autoescape
from diagramkit.config import ConfigurationExport
from diagramkit.diagram_model import Diagram, DiagramKind
from diagramkit.subscribers import Emit

log = logging.getLogger(__name__)


def create_env() -> Environment:
    """Create jinja2 environment.

    :return: environment
    """
    return Environment(
        loader=PackageLoader("diagramkit"),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
    )


class DiagramVisitor(Protocol):
    """Protocol for diagram visitors."""

    def visit(self, diagram: Diagram) -> None: ...


class ExportVisitor:
    """Exports graphs and figures, each in its own format."""

    def __init__(self, config: Optional[ConfigurationExport] = None, emit: Emit | None = None):
        self.config = config or ConfigurationExport()
        self.emit = emit or click.echo
        self.template = create_env().get_template(self.config.template)
        self._handlers: Dict[DiagramKind, Callable[[Diagram], None]] = {
            DiagramKind.GRAPH: self.export_graph,
            DiagramKind.FIGURE: self.export_figure,
        }

    def visit(self, diagram: Diagram) -> None:
        self._handlers[diagram.kind](diagram)

    def export_graph(self, diagram: Diagram) -> None:
        self._export(diagram, self.config.graph_format)

    def export_figure(self, diagram: Diagram) -> None:
        self._export(diagram, self.config.figure_format)

    def _export(self, diagram: Diagram, format: str) -> None:
        log.debug(f"Exporting {diagram!r} as {format}")
        self.emit(self.template.render(diagram=diagram, format=format))
