"""Diagram composition toolkit: graphs, flyweight figures, undo/redo history and export."""
