"""Tests for the epicycle composer."""

import math

import numpy as np
import pytest

from epiglyph.core import analyze, build_curve, chain_radii, compose
from epiglyph.models import Point2D


def assert_point(p, x, y, tol=1e-12):
    assert p.x == pytest.approx(x, abs=tol)
    assert p.y == pytest.approx(y, abs=tol)


class TestCompose:
    """Tests for compose."""

    def test_unit_circle_quarter_turns(self, unit_circle_samples):
        """Test one term at t=0 and t=0.25 reproduces 1 and i."""
        terms = analyze(unit_circle_samples)

        tip, joints = compose(terms, 1, 0.0)
        assert_point(tip, 1.0, 0.0)
        assert joints == [tip]

        tip, _ = compose(terms, 1, 0.25)
        assert_point(tip, 0.0, 1.0)

    def test_flip_y_negates_imaginary_axis(self, unit_circle_samples):
        """Test y-down composition mirrors the sine component."""
        terms = analyze(unit_circle_samples)

        tip, _ = compose(terms, 1, 0.25, flip_y=True)
        assert_point(tip, 0.0, -1.0)

    def test_scale_and_origin(self, unit_circle_samples):
        """Test radii scale and the chain starts at the anchor."""
        terms = analyze(unit_circle_samples)

        tip, _ = compose(terms, 1, 0.0, scale=100.0, origin=Point2D(50.0, 20.0))
        assert_point(tip, 150.0, 20.0, tol=1e-9)

    def test_zero_terms_stays_at_origin(self, random_samples):
        """Test M=0 gives no joints and the anchor as tip."""
        anchor = Point2D(3.0, 4.0)
        tip, joints = compose(analyze(random_samples), 0, 0.3, origin=anchor)

        assert tip == anchor
        assert joints == []

    def test_negative_term_count_is_zero(self, random_samples):
        """Test negative M behaves like M=0."""
        tip, joints = compose(analyze(random_samples), -3, 0.3)
        assert joints == []
        assert tip == Point2D(0.0, 0.0)

    def test_joint_count_is_capped(self, unit_circle_samples):
        """Test M larger than the term list chains every term once."""
        _, joints = compose(analyze(unit_circle_samples), 50, 0.1)
        assert len(joints) == 4

    def test_chain_is_cumulative(self, random_samples):
        """Test each joint adds one rotating vector in rank order."""
        terms = analyze(random_samples)
        t = 0.37
        tip, joints = compose(terms, 5, t)

        z = 0j
        for term, joint in zip(terms[:5], joints):
            z += term.amp * np.exp(1j * (2 * math.pi * term.freq * t + term.phase))
            assert_point(joint, z.real, z.imag)
        assert tip == joints[-1]

    def test_round_trip_reconstructs_samples(self, random_samples):
        """Test all N terms at t = n/N give back sample n."""
        samples = random_samples
        terms = analyze(samples)
        n_samples = len(samples)

        for n, z in enumerate(samples):
            tip, _ = compose(terms, n_samples, n / n_samples)
            assert_point(tip, z.real, z.imag, tol=1e-9)

    def test_round_trip_through_pipeline(self, square_path):
        """Test the reconstruction of a sampled square hits every sample."""
        curve = build_curve(square_path, 64)

        for n, z in enumerate(curve.samples):
            tip, _ = compose(curve.terms, curve.sample_count, n / curve.sample_count)
            assert_point(tip, z.real, z.imag, tol=1e-9)


class TestChainRadii:
    """Tests for chain_radii."""

    def test_radii_are_scaled_amplitudes(self, random_samples):
        """Test one radius per chained term."""
        terms = analyze(random_samples)
        radii = chain_radii(terms, 3, scale=2.0)
        assert radii == [2.0 * term.amp for term in terms[:3]]

    def test_capped_and_clamped(self, unit_circle_samples):
        """Test M beyond the list and negative M."""
        terms = analyze(unit_circle_samples)
        assert len(chain_radii(terms, 10)) == 4
        assert chain_radii(terms, -1) == []
