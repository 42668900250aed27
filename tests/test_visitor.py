"""Tests for visitor.py - Export visitor."""

from diagramkit.config import ConfigurationExport
from diagramkit.diagram_model import Figure, Graph
from diagramkit.flyweight import FigureCache
from diagramkit.visitor import ExportVisitor


class TestExportVisitor:
    def test_graph(self, output, emit):
        Graph().accept(ExportVisitor(emit=emit))
        assert output == ["Exporting Graph as PNG..."]

    def test_figure(self, output, emit):
        Figure().accept(ExportVisitor(emit=emit))
        assert output == ["Exporting Figure as JPG..."]

    def test_flyweight_exported_as_figure(self, output, emit):
        FigureCache().get_figure("CircleColor").accept(ExportVisitor(emit=emit))
        assert output == ["Exporting Figure as JPG..."]

    def test_configured_formats(self, output, emit):
        visitor = ExportVisitor(ConfigurationExport(graph_format="svg", figure_format="gif"), emit)
        visitor.visit(Graph("Bar", "(1,1)"))
        visitor.visit(Figure())
        assert output == ["Exporting Graph as SVG...", "Exporting Figure as GIF..."]

    def test_export_does_not_notify(self, emit):
        from diagramkit.subscribers import RecordingSubscriber

        graph = Graph()
        sub = RecordingSubscriber()
        graph.attach_subscriber(sub)
        graph.accept(ExportVisitor(emit=emit))
        assert sub.messages == []
