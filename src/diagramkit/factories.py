"""
Factories - Creation of graphs through builders and of figures through the flyweight cache.
"""

from typing import Iterable, Optional
import threading
import click
import logging
from diagramkit.builders import BUILDERS, Director
from diagramkit.config import ConfigurationFigures
from diagramkit.diagram_model import CreationResult
from diagramkit.flyweight import FigureCache, FlyweightFigure
from diagramkit.subscribers import Emit, Subscriber

log = logging.getLogger(__name__)


class GraphFactory:
    """Selects builder for requested graph style and drives it."""

    def __init__(self, emit: Emit | None = None):
        self.emit = emit or click.echo
        self.director = Director()

    def create_graph(self, style: str, coordinate: str, subscribers: Iterable[Subscriber] = ()) -> CreationResult:
        """
        Create graph of given style.

        :param style: Exact style name, "Bar" or "Line"
        :param coordinate: Opaque coordinate string
        :param subscribers: Subscribers attached to graph before construction
        :return: CreationResult with the graph, or failure for unknown style
        """
        builder_cls = BUILDERS.get(style)
        if builder_cls is None:
            message = f"Unknown graph style: {style}. Supported styles: {', '.join(BUILDERS)}"
            log.warning(message)
            return CreationResult(success=False, message=message)
        graph = self.director.construct(builder_cls(self.emit, subscribers), coordinate)
        return CreationResult(success=True, message=f"Created {style} graph at {coordinate}", diagram=graph)


class FigureFactory:
    """Hands out shared flyweight figures.

    ``FigureFactory.instance()`` returns the process-wide factory, separate
    instances (with their own cache) can still be created directly.
    """

    _instance: Optional["FigureFactory"] = None
    _instance_lock = threading.Lock()

    def __init__(self, config: Optional[ConfigurationFigures] = None, emit: Emit | None = None):
        self.emit = emit or click.echo
        self.cache = FigureCache(config, self.emit)

    @classmethod
    def instance(cls) -> "FigureFactory":
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def get_figure(self, key: str, coordinate: str, subscriber: Subscriber) -> FlyweightFigure:
        """
        Fetch figure for key, attach subscriber and draw it at coordinate.

        :param key: Figure type key
        :param coordinate: Opaque coordinate string
        :param subscriber: Subscriber attached to the shared figure
        :return: Shared figure handle
        """
        figure = self.cache.get_figure(key)
        figure.attach_subscriber(subscriber)
        self.emit(f"Coordinates: {coordinate}")
        figure.draw()
        return figure
