"""Configuration settings for Polyaffine."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Logging level names accepted by the CLI and settings."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class WindowConfig(BaseModel):
    """Configuration for the interactive window view."""

    width: int = Field(
        default=900,
        ge=200,
        le=4000,
        description="Canvas width in pixels",
    )
    height: int = Field(
        default=700,
        ge=200,
        le=4000,
        description="Canvas height in pixels",
    )
    padding: float = Field(
        default=60.0,
        ge=0.0,
        le=500.0,
        description="Margin kept free around the drawing",
    )
    background: str = Field(
        default="black",
        description="Canvas background colour",
    )
    line_width: float = Field(
        default=2.0,
        gt=0.0,
        le=20.0,
        description="Polygon edge width",
    )
    vertex_radius: float = Field(
        default=4.0,
        gt=0.0,
        le=20.0,
        description="Vertex marker radius in pixels",
    )


class HtmlConfig(BaseModel):
    """Configuration for the static HTML/SVG export.

    Each transform gets a pair of SVG panels of width x height pixels.
    """

    width: int = Field(
        default=320,
        ge=100,
        le=2000,
        description="Panel width in pixels",
    )
    height: int = Field(
        default=260,
        ge=100,
        le=2000,
        description="Panel height in pixels",
    )
    padding: float = Field(
        default=40.0,
        ge=0.0,
        le=500.0,
        description="Margin kept free around each panel drawing",
    )
    normal_width: int = Field(
        default=320,
        ge=100,
        le=2000,
        description="Tangent/normal panel width in pixels",
    )
    normal_height: int = Field(
        default=260,
        ge=100,
        le=2000,
        description="Tangent/normal panel height in pixels",
    )
    background: str = Field(
        default="#111111",
        description="Page and panel background colour",
    )
    grid_color: str = Field(
        default="#333333",
        description="Grid line colour",
    )
    animation_ms: int = Field(
        default=2000,
        ge=100,
        le=60000,
        description="Duration of one before/after animation cycle",
    )
    output_path: Path = Field(
        default=Path("affine_view.html"),
        description="Where the HTML document is written",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class PolyaffineSettings(BaseModel):
    """Main application settings."""

    window: WindowConfig = Field(default_factory=WindowConfig)
    html: HtmlConfig = Field(default_factory=HtmlConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyaffineSettings:
    """Get default application settings."""
    return PolyaffineSettings()
