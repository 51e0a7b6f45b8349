"""Terminal previews."""

from epiglyph.preview.terminal import SpectrumPreview, energy_fraction

__all__ = ["SpectrumPreview", "energy_fraction"]
