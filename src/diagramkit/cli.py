import click
import json
import logging
import yaml
from importlib import metadata
from functools import wraps
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from diagramkit.diagram_model import Diagram, ElementType, Figure, Graph
from diagramkit.facade import DiagramFacade
from diagramkit.utils import load_config, load_config_file, setup_logging

log = logging.getLogger(__name__)


class CreateStep(BaseModel):
    model_config = ConfigDict(extra="forbid")
    element: str
    type: str
    coordinate: str


class ScriptStep(BaseModel):
    """Single step of a script, exactly one of the fields is set."""

    model_config = ConfigDict(extra="forbid")
    create: Optional[CreateStep] = None
    export: Optional[ElementType] = None
    action: Optional[Literal["undo", "redo"]] = None

    @model_validator(mode="after")
    def one_field(self):
        if sum(value is not None for value in (self.create, self.export, self.action)) != 1:
            raise ValueError("Step needs exactly one of: create, export, undo, redo")
        return self


def parse_script(loaded) -> List[ScriptStep]:
    if not isinstance(loaded, list):
        raise ValueError("Script has to be a list of steps")
    steps = []
    for item in loaded:
        if isinstance(item, str):
            steps.append(ScriptStep(action=item))
        else:
            steps.append(ScriptStep.model_validate(item))
    return steps


class ScriptRunner:
    """Runs script steps against a facade, remembering last diagram of each kind."""

    def __init__(self, facade: DiagramFacade):
        self.facade = facade
        self.last: Dict[ElementType, Diagram] = {}
        self.failures = 0

    def run(self, steps: List[ScriptStep]) -> None:
        for step in steps:
            if step.create is not None:
                self.create(step.create.element, step.create.type, step.create.coordinate)
            elif step.export is not None:
                self.export(step.export)
            elif step.action == "undo":
                self.facade.undo()
            else:
                self.facade.redo()

    def create(self, element: str, type: str, coordinate: str) -> None:
        result = self.facade.create_diagram(element, type, coordinate)
        if result.success:
            self.last[ElementType(element)] = result.diagram
        else:
            self.failures += 1
            click.echo(f"✗ {result.message}", err=True)

    def export(self, element: ElementType) -> None:
        diagram = self.last.get(element)
        if diagram is None:
            diagram = Graph() if element == ElementType.GRAPH else Figure()
        self.facade.export(diagram)


def setup_command(func):
    """Decorator to handle common CLI setup (logging, config loading, version)."""

    @wraps(func)
    def wrapper(config, debug, version=None, **kwargs):
        # Handle --version flag
        if version is not None and version:
            click.echo(metadata.version("diagramkit"))
            return

        setup_logging(debug)

        config_obj = load_config(config)
        if debug:
            log.debug(json.dumps(config_obj.model_dump(), indent=4))

        return func(config_obj=config_obj, debug=debug, **kwargs)

    return wrapper


@click.group()
def cli():
    pass


@click.command()
@click.option("--config", default=None, help="Configuration file.")
@click.option("--debug", default=False, is_flag=True, help="Enable debug.")
@click.option("--version", is_flag=True, help="Show the application's version.")
@setup_command
def demo(config_obj, debug):
    """Run reference scenario: graphs, figures, undo, redo and export."""
    runner = ScriptRunner(DiagramFacade(config_obj, click.echo))
    runner.create("Graph", "Line", "(10,20)")
    runner.create("Graph", "Bar", "(15,30)")
    runner.create("Figure", "CircleColor", "(5,5)")
    runner.create("Figure", "SquareBW", "(2,3)")
    runner.facade.undo()
    runner.facade.redo()
    runner.facade.export(Graph())
    runner.facade.export(Figure())


@click.command()
@click.option("--config", default=None, help="Configuration file.")
@click.option("--debug", default=False, is_flag=True, help="Enable debug.")
@click.option("--version", is_flag=True, help="Show the application's version.")
@click.option("--script", default=None, type=click.Path(exists=True, dir_okay=False), help="YAML or JSON script.")
@setup_command
def run(config_obj, debug, script):
    """Run steps (create, undo, redo, export) from script file."""
    if script is None:
        raise click.UsageError("Missing option '--script'.")
    try:
        steps = parse_script(load_config_file(script))
    except (ValidationError, ValueError, yaml.YAMLError) as error:
        raise click.UsageError(f"Invalid script {script}: {error}") from error

    runner = ScriptRunner(DiagramFacade(config_obj, click.echo))
    runner.run(steps)
    history = runner.facade.history
    click.echo(f"History: {history.undo_depth} undoable, {history.redo_depth} redoable")
    if runner.failures:
        raise SystemExit(1)


@click.command()
@click.option("--config", default=None, help="Configuration file.")
@click.option("--debug", default=False, is_flag=True, help="Enable debug.")
@click.option("--version", is_flag=True, help="Show the application's version.")
@click.option("--coordinate", default="(0,0)", help="Coordinate used for every figure.")
@click.argument("keys", nargs=-1)
@setup_command
def figures(config_obj, debug, coordinate, keys):
    """Draw figures for given keys and show flyweight cache summary."""
    facade = DiagramFacade(config_obj, click.echo)
    for key in keys:
        facade.create_diagram(ElementType.FIGURE.value, key, coordinate)
    cache = facade.figure_factory.cache
    stats = cache.stats()
    for key in cache.keys():
        click.echo(f"{key}\t{cache.variant_for(key).__name__}")
    click.echo(f"Cache: {stats['size']} figures, {stats['hits']} hits, {stats['misses']} misses")


cli.add_command(demo)
cli.add_command(run)
cli.add_command(figures)

if __name__ == "__main__":
    cli()
