"""
Flyweight figures - Shared figure instances cached by type key.

The cache only ever grows: a key gets its figure on first request and keeps it
for the lifetime of the process. Size can be watched through ``stats()`` and a
configurable warning threshold, but nothing is evicted since callers rely on
getting the very same instance back.

Subscribers attached to a figure stay attached: every request through the
figure factory adds its subscriber again, so the subscriber list of a shared
figure and the number of notifications per draw grow with every request.
"""

from typing import Dict, List, Optional
import threading
import logging
from diagramkit.config import ConfigurationFigures
from diagramkit.diagram_model import Figure
from diagramkit.subscribers import Emit

log = logging.getLogger(__name__)


class FlyweightFigure(Figure):
    """Figure shared between all requests for the same type key."""

    def __init__(self, type_key: str, emit: Emit | None = None):
        super().__init__(emit)
        self.type = type_key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type!r})"


class ColoredFigure(FlyweightFigure):
    def draw(self) -> None:
        self.emit(f"[Colored Flyweight] Drawing colored figure of type: {self.type}")
        self.notify_subscribers("Colored Figure drawn")


class BWFigure(FlyweightFigure):
    def draw(self) -> None:
        self.emit(f"[B/W Flyweight] Drawing black and white figure of type: {self.type}")
        self.notify_subscribers("B/W Figure drawn")


class FigureCache:
    """Keyed store of flyweight figures.

    Safe to use from several threads, at most one figure is ever created per key.
    """

    def __init__(self, config: Optional[ConfigurationFigures] = None, emit: Emit | None = None):
        self.config = config or ConfigurationFigures()
        self.emit = emit
        self._pool: Dict[str, FlyweightFigure] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._warned = False

    def variant_for(self, key: str) -> type[FlyweightFigure]:
        """
        Select figure class for a key.

        :param key: Figure type key
        :return: ColoredFigure if key contains color marker, BWFigure otherwise
        """
        if self.config.color_marker in key:
            return ColoredFigure
        return BWFigure

    def get_figure(self, key: str) -> FlyweightFigure:
        """
        Get shared figure for key, creating it on first request.

        :param key: Figure type key, e.g. "CircleColor"
        :return: The cached figure, same instance for same key
        """
        with self._lock:
            figure = self._pool.get(key)
            if figure is not None:
                self._hits += 1
                return figure
            self._misses += 1
            figure = self.variant_for(key)(key, self.emit)
            self._pool[key] = figure
            log.debug(f"Created {type(figure).__name__} for key {key!r}")
            self._check_size()
            return figure

    def _check_size(self) -> None:
        limit = self.config.cache_warn_size
        if limit is not None and len(self._pool) > limit and not self._warned:
            self._warned = True
            log.warning(f"Figure cache holds {len(self._pool)} figures, more than {limit}; figures are never evicted")

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._pool)

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {"size": len(self._pool), "hits": self._hits, "misses": self._misses}

    def __contains__(self, key: str) -> bool:
        return key in self._pool

    def __len__(self) -> int:
        return len(self._pool)
