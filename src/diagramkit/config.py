"""Stuff related to application configuration."""

from pydantic import BaseModel, ConfigDict
from typing import TypeAlias, Optional

#: General JSON type
JSON: TypeAlias = dict[str, "JSON"] | list["JSON"] | str | int | float | bool | None


class ConfigurationExport(BaseModel):
    """Configuration for the export visitor.

    Formats are only used in the export text, nothing is written to disk.
    """

    #: Format announced when exporting graphs.
    graph_format: str = "png"
    #: Format announced when exporting figures.
    figure_format: str = "jpg"
    #: Name of template used to render export line.
    template: str = "export.jinja2"


class ConfigurationFigures(BaseModel):
    """Configuration for the flyweight figure cache."""

    #: Keys containing this substring are drawn as colored figures.
    color_marker: str = "Color"
    #: Log a warning once the cache holds more figures than this. None disables it.
    cache_warn_size: Optional[int] = None


class Configuration(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)
    export: ConfigurationExport = ConfigurationExport()
    figures: ConfigurationFigures = ConfigurationFigures()
