"""Tests for commands.py - Commands and undo/redo history."""

import threading
from diagramkit.commands import CommandHistory, CreateGraphCommand
from diagramkit.diagram_model import CreationResult


class FakeCommand:
    """Command recording calls into a shared log."""

    def __init__(self, name, log, success=True):
        self.name = name
        self.log = log
        self.success = success

    def execute(self):
        self.log.append(("execute", self.name))
        return CreationResult(success=self.success, message=self.name)

    def undo(self):
        self.log.append(("undo", self.name))


class TestCommandHistory:
    def test_execute_pushes(self):
        log = []
        history = CommandHistory()
        a = FakeCommand("A", log)
        result = history.execute(a)
        assert result.success
        assert history.history == [a]
        assert history.can_undo
        assert not history.can_redo
        assert log == [("execute", "A")]

    def test_branch_cut(self):
        """Test that new command after undo drops redo history."""
        log = []
        history = CommandHistory()
        a, b, c = FakeCommand("A", log), FakeCommand("B", log), FakeCommand("C", log)
        history.execute(a)
        history.execute(b)
        assert history.undo() is b
        assert history.can_redo
        history.execute(c)

        assert not history.can_redo
        assert history.redo() is None
        assert history.history == [a, c]
        assert ("execute", "B") not in log[2:]

    def test_round_trip(self):
        """Test that execute, undo, redo leaves undo stack as after execute."""
        log = []
        history = CommandHistory()
        a = FakeCommand("A", log)
        history.execute(a)
        after_execute = history.history

        history.undo()
        assert history.undo_depth == 0
        assert history.redo_depth == 1
        history.redo()

        assert history.history == after_execute
        assert history.history[-1] is a
        assert history.redo_depth == 0
        assert log == [("execute", "A"), ("undo", "A"), ("execute", "A")]

    def test_empty_stacks_are_no_ops(self):
        """Test that undo and redo on fresh history change nothing."""
        history = CommandHistory()
        assert history.undo() is None
        assert history.redo() is None
        assert history.undo_depth == 0
        assert history.redo_depth == 0

    def test_undo_order_is_lifo(self):
        log = []
        history = CommandHistory()
        for name in "ABC":
            history.execute(FakeCommand(name, log))
        history.undo()
        history.undo()
        assert [entry for entry in log if entry[0] == "undo"] == [("undo", "C"), ("undo", "B")]
        history.redo()
        assert log[-1] == ("execute", "B")

    def test_failed_command_not_recorded(self):
        """Test that failed command does not touch either stack."""
        log = []
        history = CommandHistory()
        history.execute(FakeCommand("A", log))
        history.undo()
        result = history.execute(FakeCommand("Bad", log, success=False))
        assert not result.success
        assert history.undo_depth == 0
        assert history.redo_depth == 1

    def test_clear(self):
        history = CommandHistory()
        history.execute(FakeCommand("A", []))
        history.execute(FakeCommand("B", []))
        history.undo()
        history.clear()
        assert not history.can_undo
        assert not history.can_redo


class TestCreateGraphCommand:
    def test_execute_keeps_graph(self, graph_factory):
        cmd = CreateGraphCommand(graph_factory, "Bar", "(15,30)")
        result = cmd.execute()
        assert result.success
        assert cmd.graph is result.diagram

    def test_undo_only_acknowledges(self, graph_factory, output, emit):
        """Test that undo writes acknowledgment and keeps created graph."""
        cmd = CreateGraphCommand(graph_factory, "Bar", "(15,30)", emit=emit)
        cmd.execute()
        graph = cmd.graph
        output.clear()
        cmd.undo()
        assert output == ["Undo creation of graph: Bar"]
        assert cmd.graph is graph

    def test_re_execute_builds_new_graph(self, graph_factory):
        cmd = CreateGraphCommand(graph_factory, "Line", "(1,1)")
        first = cmd.execute().diagram
        second = cmd.execute().diagram
        assert first is not second
        assert cmd.graph is second

    def test_unknown_style(self, graph_factory):
        cmd = CreateGraphCommand(graph_factory, "Pie", "(1,1)")
        assert not cmd.execute().success
        assert cmd.graph is None


class TestCommandHistoryThreads:
    def test_concurrent_execute_undo_redo(self):
        """Test that concurrent execute, undo and redo never lose or duplicate a command."""
        history = CommandHistory()
        log = []
        commands = [FakeCommand(f"C{i}", log) for i in range(16)]
        barrier = threading.Barrier(len(commands))

        def worker(cmd):
            barrier.wait()
            history.execute(cmd)
            history.undo()
            history.redo()
            history.undo()

        threads = [threading.Thread(target=worker, args=(cmd,)) for cmd in commands]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert history.undo_depth + history.redo_depth == len(commands)
        kept = history.history + history._redo_stack
        assert sorted(cmd.name for cmd in kept) == sorted(cmd.name for cmd in commands)
        assert len({id(cmd) for cmd in kept}) == len(commands)
