"""Command-line interface for epiglyph."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from epiglyph import ConfigurationError, EpiglyphError, __version__
from epiglyph.config import EpiglyphConfig, get_config
from epiglyph.glyphs import load_font
from epiglyph.preview import SpectrumPreview
from epiglyph.session import EpicycleSession

console = Console()
logger = logging.getLogger(__name__)


def _load_config() -> EpiglyphConfig:
    try:
        return get_config()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid EPIGLYPH_* settings: {e}") from e


def _build_session(
    text: Optional[str],
    font: Optional[Path],
    font_size: Optional[float],
    samples: Optional[int],
    terms: Optional[int],
    y_down: bool = False,
) -> EpicycleSession:
    """Load config, apply CLI overrides, load the font and render the text."""
    config = _load_config()
    overrides = {
        "text": text,
        "font_path": str(font) if font else None,
        "font_size": font_size,
        "sample_count": samples,
        "term_count": terms,
        "y_down": y_down or None,
    }
    config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    logger.debug("Effective settings: %s", config.model_dump())

    session = EpicycleSession(config, font=load_font(config.font_path))
    session.render_text(config.text)
    return session


def curve_options(f):
    """Options shared by every command that renders text."""
    f = click.argument("text", required=False)(f)
    f = click.option(
        "--font",
        type=click.Path(path_type=Path),
        default=None,
        help="TTF/OTF font file (default: from config or matplotlib's default)",
    )(f)
    f = click.option(
        "--font-size",
        "-s",
        type=click.FloatRange(min=0, min_open=True),
        default=None,
        help="Font size (default: from config or 200)",
    )(f)
    f = click.option(
        "--samples",
        "-n",
        type=click.IntRange(min=2),
        default=None,
        help="Arc-length samples N (default: from config or 800)",
    )(f)
    f = click.option(
        "--terms",
        "-m",
        type=click.IntRange(min=0),
        default=None,
        help="Epicycles drawn M (default: from config or 200)",
    )(f)
    return f


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """epiglyph - Draw text with rotating circles.

    Samples a glyph outline, takes its Discrete Fourier Transform and
    animates the epicycles that trace it back.
    """
    try:
        level = "DEBUG" if verbose else get_config().log_level.upper()
    except ValidationError:
        level = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


@main.command()
@curve_options
@click.option(
    "--style",
    type=click.Choice(["dark", "blueprint", "neon"]),
    default="dark",
    help="Colour scheme",
)
@click.option(
    "--y-down",
    is_flag=True,
    help="Compose and draw in a y-down (screen) frame",
)
@click.option(
    "--save",
    "output",
    type=click.Path(path_type=Path),
    default=None,
    help="Write a GIF instead of opening a window",
)
@click.option(
    "--frames",
    type=click.IntRange(min=1),
    default=None,
    help="Frames to record with --save (default: one full cycle)",
)
def animate(
    text: Optional[str],
    font: Optional[Path],
    font_size: Optional[float],
    samples: Optional[int],
    terms: Optional[int],
    style: str,
    y_down: bool,
    output: Optional[Path],
    frames: Optional[int],
):
    """Animate TEXT as a chain of epicycles.

    In the window, space toggles pause and r restarts the trace.

    Examples:

        epiglyph animate Hello
        epiglyph animate "fourier" -n 1200 -m 300 --save fourier.gif
    """
    from epiglyph.rendering import EpicycleCanvas

    try:
        session = _build_session(text, font, font_size, samples, terms, y_down)
        console.print(f"[green]{session.status}[/green]")

        canvas = EpicycleCanvas(session, style=style)
        if output is None:
            canvas.show()
            return

        output.parent.mkdir(parents=True, exist_ok=True)
        with console.status("[cyan]Recording animation...[/cyan]"):
            canvas.save(output, frames=frames)
        console.print(f"[green]✓[/green] Saved animation to [bold]{output}[/bold]")

    except EpiglyphError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@main.command()
@curve_options
@click.option("--top", "-t", type=click.IntRange(min=1), default=20, help="Terms to list")
def spectrum(
    text: Optional[str],
    font: Optional[Path],
    font_size: Optional[float],
    samples: Optional[int],
    terms: Optional[int],
    top: int,
):
    """Print the strongest Fourier terms of TEXT."""
    try:
        session = _build_session(text, font, font_size, samples, terms)
        SpectrumPreview(console).show(session.curve, top=top, term_count=session.driver.term_count)
        console.print(f"[dim]{session.status}[/dim]")
    except EpiglyphError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@main.command()
@curve_options
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path("epiglyph.png"),
    help="Output image path",
)
@click.option(
    "--at",
    "t",
    type=click.FloatRange(min=0, max=1, max_open=True),
    default=0.125,
    help="Cycle position for the epicycles, in [0, 1)",
)
@click.option(
    "--style",
    type=click.Choice(["dark", "blueprint", "neon"]),
    default="dark",
    help="Colour scheme",
)
def snapshot(
    text: Optional[str],
    font: Optional[Path],
    font_size: Optional[float],
    samples: Optional[int],
    terms: Optional[int],
    output: Path,
    t: float,
    style: str,
):
    """Save a still image of TEXT reconstructed from M terms."""
    from epiglyph.rendering import EpicycleCanvas

    try:
        session = _build_session(text, font, font_size, samples, terms)
        output.parent.mkdir(parents=True, exist_ok=True)
        EpicycleCanvas(session, style=style).snapshot(output, t=t)
        console.print(f"[green]✓[/green] Saved snapshot to [bold]{output}[/bold]")
    except EpiglyphError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@main.command()
def config_show():
    """Show current configuration."""
    try:
        config = _load_config()
    except ConfigurationError as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        sys.exit(1)

    console.print(Panel.fit("[bold cyan]epiglyph Configuration[/bold cyan]", border_style="cyan"))
    console.print()
    console.print(f"[cyan]Text:[/cyan] {config.text}")
    console.print(f"[cyan]Font:[/cyan] {config.font_path or 'matplotlib default'}")
    console.print(f"[cyan]Font Size:[/cyan] {config.font_size}")
    console.print(f"[cyan]Samples (N):[/cyan] {config.sample_count}")
    console.print(f"[cyan]Terms (M):[/cyan] {config.term_count}")
    console.print(f"[cyan]Canvas:[/cyan] {config.width}x{config.height} @ {config.fps} fps")
    console.print(f"[cyan]Canvas Fill:[/cyan] {config.canvas_fill}")
    console.print(f"[cyan]Y Down:[/cyan] {config.y_down}")
    console.print(f"[cyan]Log Level:[/cyan] {config.log_level}")


if __name__ == "__main__":
    main()
