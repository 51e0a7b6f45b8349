"""Tests for data models."""

import pytest

from epiglyph.models import AnimationState, FourierTerm, Frame, Point2D


class TestPoint2D:
    """Tests for Point2D."""

    def test_complex_round_trip(self):
        """Test conversion to and from complex."""
        p = Point2D(1.5, -2.0)
        assert p.to_complex() == 1.5 - 2j
        assert Point2D.from_complex(1.5 - 2j) == p

    def test_frozen(self):
        """Test points are immutable."""
        with pytest.raises(AttributeError):
            Point2D(0.0, 0.0).x = 1.0


class TestAnimationState:
    """Tests for AnimationState."""

    def test_t_from_step(self):
        """Test t is the step over the period."""
        state = AnimationState(period=8, step=2)
        assert state.t == 0.25

    def test_clear(self):
        """Test clear resets step and trail."""
        state = AnimationState(period=4, step=3, trail=[Point2D(1.0, 1.0)])
        state.clear()
        assert state.t == 0.0
        assert state.trail == []
        assert state.period == 4


class TestFrame:
    """Tests for Frame."""

    def test_centers_follow_chain(self):
        """Test each circle is centred on the previous joint."""
        a, b, c = Point2D(1.0, 0.0), Point2D(1.0, 1.0), Point2D(0.0, 1.0)
        frame = Frame(
            t=0.0,
            origin=Point2D(0.0, 0.0),
            joints=(a, b, c),
            radii=(1.0, 1.0, 1.0),
            tip=c,
            trail=(),
        )
        assert frame.centers == (Point2D(0.0, 0.0), a, b)

    def test_no_joints_no_centers(self):
        """Test an empty chain has no circles."""
        origin = Point2D(0.0, 0.0)
        frame = Frame(t=0.0, origin=origin, joints=(), radii=(), tip=origin, trail=())
        assert frame.centers == ()


class TestFourierTerm:
    """Tests for FourierTerm."""

    def test_coefficient(self):
        """Test the complex coefficient view."""
        term = FourierTerm(freq=-3, re=0.5, im=-0.25, amp=0.559, phase=-0.46)
        assert term.coefficient == 0.5 - 0.25j
