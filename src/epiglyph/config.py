"""Configuration management for epiglyph."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EpiglyphConfig(BaseSettings):
    """Application configuration loaded from environment variables.

    Environment variables should be prefixed with EPIGLYPH_
    Example: EPIGLYPH_SAMPLE_COUNT=1200

    Attributes:
        text: Text to trace
        font_path: Font file to draw with (None for matplotlib's default)
        font_size: Font size in points, scales the outline only
        sample_count: Number of arc-length samples (N)
        term_count: Number of epicycles drawn (M)
        canvas_fill: Fraction of the shorter canvas side used by unit radius
        width: Canvas width in pixels
        height: Canvas height in pixels
        fps: Animation frame rate
        y_down: Draw into a y-down (screen) coordinate frame
        log_level: Logging level name
    """

    # Curve
    text: str = Field(
        default="Hello",
        description="Text to trace",
    )
    font_path: Optional[str] = Field(
        default=None,
        description="Path to a TTF/OTF font file",
    )
    font_size: float = Field(
        default=200.0,
        gt=0,
        description="Font size used to build the outline",
    )

    # Analysis
    sample_count: int = Field(
        default=800,
        ge=2,
        le=20000,
        description="Arc-length samples taken along the outline",
    )
    term_count: int = Field(
        default=200,
        ge=0,
        description="Epicycle terms rendered per frame",
    )

    # Canvas
    canvas_fill: float = Field(
        default=0.42,
        gt=0,
        le=1,
        description="Fraction of min(width, height) mapped to unit amplitude",
    )
    width: int = Field(default=900, ge=50, description="Canvas width in pixels")
    height: int = Field(default=600, ge=50, description="Canvas height in pixels")
    fps: int = Field(default=60, ge=1, le=240, description="Frames per second")
    y_down: bool = Field(
        default=False,
        description="Flip the imaginary axis for y-down drawing surfaces",
    )

    log_level: str = Field(default="WARNING", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="EPIGLYPH_",
        case_sensitive=False,
        extra="ignore",
    )


# Global config instance (lazy-loaded)
_config: EpiglyphConfig | None = None


def get_config() -> EpiglyphConfig:
    """Get or create the global configuration instance.

    Returns:
        EpiglyphConfig: The configuration object
    """
    global _config
    if _config is None:
        _config = EpiglyphConfig()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
