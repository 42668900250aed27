"""Undo/redo command system for diagram creation."""

from typing import List, Optional, Protocol, Sequence
import threading
import click
import logging
from diagramkit.diagram_model import CreationResult, Graph
from diagramkit.factories import GraphFactory
from diagramkit.subscribers import Emit, Subscriber

log = logging.getLogger(__name__)


class Command(Protocol):
    """Reified request that can be executed and undone."""

    def execute(self) -> CreationResult: ...

    def undo(self) -> None: ...


class CreateGraphCommand:
    """Creates a graph through the graph factory.

    Undo only acknowledges the request, the graph created before stays as it is.
    Every execute (including redo) runs the whole construction again.
    """

    def __init__(
        self,
        factory: GraphFactory,
        style: str,
        coordinate: str,
        subscribers: Sequence[Subscriber] = (),
        emit: Emit | None = None,
    ):
        self.factory = factory
        self.style = style
        self.coordinate = coordinate
        self.subscribers = list(subscribers)
        self.emit = emit or click.echo
        self.graph: Optional[Graph] = None

    def execute(self) -> CreationResult:
        result = self.factory.create_graph(self.style, self.coordinate, self.subscribers)
        if result.success:
            self.graph = result.diagram
        return result

    def undo(self) -> None:
        self.emit(f"Undo creation of graph: {self.style}")

    def __repr__(self) -> str:
        return f"CreateGraphCommand(style={self.style!r}, coordinate={self.coordinate!r})"


class CommandHistory:
    """Linear undo/redo history.

    Executing a new command drops everything that could have been redone.
    Undo and redo on an empty stack do nothing.
    """

    def __init__(self):
        self._undo_stack: List[Command] = []
        self._redo_stack: List[Command] = []
        self._lock = threading.RLock()

    @property
    def can_undo(self) -> bool:
        return len(self._undo_stack) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    @property
    def history(self) -> List[Command]:
        return list(self._undo_stack)

    def execute(self, cmd: Command) -> CreationResult:
        """
        Execute command and push it onto the undo stack.

        Failed commands are not recorded and leave both stacks untouched.

        :param cmd: Command to execute
        :return: Result of the command
        """
        with self._lock:
            result = cmd.execute()
            if not result.success:
                log.debug(f"Not recording failed {cmd!r}")
                return result
            self._undo_stack.append(cmd)
            self._redo_stack.clear()
            return result

    def undo(self) -> Optional[Command]:
        with self._lock:
            if not self._undo_stack:
                log.debug("Nothing to undo")
                return None
            cmd = self._undo_stack.pop()
            cmd.undo()
            self._redo_stack.append(cmd)
            return cmd

    def redo(self) -> Optional[Command]:
        with self._lock:
            if not self._redo_stack:
                log.debug("Nothing to redo")
                return None
            cmd = self._redo_stack.pop()
            cmd.execute()
            self._undo_stack.append(cmd)
            return cmd

    def clear(self) -> None:
        with self._lock:
            self._undo_stack.clear()
            self._redo_stack.clear()
