"""Discrete Fourier Transform of complex samples, ranked by amplitude.

The transform is computed by direct summation,

    C[k] = (1/N) * sum_{n=0}^{N-1} z[n] * exp(-i 2 pi k n / N)

so every coefficient is exactly the textbook definition rather than an FFT
approximation of it. The running sum is vectorised across bins ``k`` but
accumulated one sample ``n`` at a time, which keeps the floating-point
summation order fixed and the output reproducible bit for bit.

Non-finite samples are not rejected; NaN simply propagates into the terms.
"""

import logging
import time

import numpy as np

from epiglyph.core.sampling import check_sample_count
from epiglyph.models import FourierTerm

logger = logging.getLogger(__name__)

TAU = 2 * np.pi


def signed_frequency(k: int, n: int) -> int:
    """Fold DFT bin ``k`` of ``n`` into the range (-n/2, n/2]."""
    return k if k <= n / 2 else k - n


def dft(samples: np.ndarray) -> np.ndarray:
    """Compute the normalised DFT coefficients of ``samples``.

    Args:
        samples: Complex samples z[0..N-1]

    Returns:
        np.ndarray: Complex coefficients C[0..N-1], already divided by N
    """
    zs = np.asarray(samples, dtype=complex)
    n_samples = len(zs)
    check_sample_count(n_samples)

    k = np.arange(n_samples)
    acc = np.zeros(n_samples, dtype=complex)
    for n in range(n_samples):
        theta = -TAU * k * n / n_samples
        acc += zs[n] * np.exp(1j * theta)

    return acc / n_samples


def analyze(samples: np.ndarray) -> tuple[FourierTerm, ...]:
    """Decompose samples into Fourier terms sorted by amplitude.

    Ties in amplitude keep their original bin order.

    Args:
        samples: Complex samples, N >= 2

    Returns:
        tuple[FourierTerm, ...]: N terms, largest amplitude first

    Raises:
        InvalidSampleCountError: If fewer than two samples are given
    """
    started = time.perf_counter()
    coefficients = dft(samples)
    n_samples = len(coefficients)

    re = coefficients.real
    im = coefficients.imag
    amps = np.hypot(re, im)
    phases = np.arctan2(im, re)

    order = np.argsort(-amps, kind="stable")
    terms = tuple(
        FourierTerm(
            freq=signed_frequency(int(k), n_samples),
            re=float(re[k]),
            im=float(im[k]),
            amp=float(amps[k]),
            phase=float(phases[k]),
        )
        for k in order
    )

    logger.debug(
        "Analysed %d samples in %.1fms", n_samples, (time.perf_counter() - started) * 1000
    )
    return terms
