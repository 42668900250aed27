"""Shared pytest fixtures for diagramkit tests."""

import pytest
from diagramkit.config import Configuration
from diagramkit.facade import DiagramFacade
from diagramkit.factories import FigureFactory, GraphFactory


@pytest.fixture
def test_config():
    """Default configuration object."""
    return Configuration()


@pytest.fixture
def output():
    """Lines written to the output sink."""
    return []


@pytest.fixture
def emit(output):
    """Output sink collecting lines into ``output``."""
    return output.append


@pytest.fixture
def graph_factory(emit):
    return GraphFactory(emit)


@pytest.fixture
def figure_factory(test_config, emit):
    """Figure factory with its own, empty cache."""
    return FigureFactory(test_config.figures, emit)


@pytest.fixture
def facade(test_config, emit):
    """Facade writing into ``output``, with its own figure cache."""
    return DiagramFacade(test_config, emit)
