"""Terminal summary of a curve's spectrum using Rich."""

import math
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from epiglyph.models import Curve


class SpectrumPreview:
    """Print the strongest Fourier terms of a curve."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize spectrum preview.

        Args:
            console: Rich console to use (creates new if None)
        """
        self.console = console or Console()

    def show(self, curve: Curve, top: int = 20, term_count: Optional[int] = None) -> None:
        """Show a header panel and a table of the top terms.

        Args:
            curve: Analysed curve
            top: Number of terms listed
            term_count: Epicycles drawn (M), used for the energy summary
        """
        m = len(curve.terms) if term_count is None else max(0, min(term_count, len(curve.terms)))
        captured = energy_fraction(curve, m)

        self.console.print()
        self.console.print(
            Panel.fit(
                f"[bold cyan]Spectrum[/bold cyan]\n\n"
                f"Path length: [bold]{curve.path_length:.1f}[/bold]\n"
                f"Samples (N): [bold]{curve.sample_count}[/bold]\n"
                f"Terms drawn (M): [bold]{m}[/bold] "
                f"[dim]({captured:.1%} of energy)[/dim]",
                border_style="cyan",
                title="[bold]epiglyph[/bold]",
            )
        )

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("freq", justify="right")
        table.add_column("amp", justify="right")
        table.add_column("phase", justify="right")
        table.add_column("re", justify="right", style="dim")
        table.add_column("im", justify="right", style="dim")

        for rank, term in enumerate(curve.terms[:top]):
            table.add_row(
                str(rank),
                str(term.freq),
                f"{term.amp:.6f}",
                f"{math.degrees(term.phase):.1f}°",
                f"{term.re:+.6f}",
                f"{term.im:+.6f}",
            )
        self.console.print(table)


def energy_fraction(curve: Curve, m: int) -> float:
    """Share of total squared amplitude held by the first ``m`` terms."""
    total = sum(term.amp**2 for term in curve.terms)
    if total <= 0:
        return 1.0
    return sum(term.amp**2 for term in curve.terms[:m]) / total
