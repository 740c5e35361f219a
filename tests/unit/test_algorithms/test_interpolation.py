"""Unit tests for spline interpolation and evaluation."""

import logging
from decimal import Decimal

import numpy as np
import pytest

from pysplinelib.algorithms.interpolation import (evaluate, evaluate_array, evaluate_derivative, extract_segments,
                                                  find_segment, interpolate)
from pysplinelib.core.exceptions import InsufficientPointsError, SingularSystemError, UnsupportedBoundaryKindError
from pysplinelib.core.models import BoundaryKind, Point

TOLERANCE = Decimal('1e-15')
ALL_BOUNDARIES = list(BoundaryKind)


def assert_close(actual, expected, tolerance=TOLERANCE):
    assert actual is not None
    assert abs(actual - Decimal(expected)) < tolerance, f"{actual} != {expected}"


class TestNaturalScenario:
    """Points (1,10), (2,15), (3,12) with natural boundary."""

    def test_segments(self, three_points):
        segments = interpolate(three_points, BoundaryKind.NATURAL)
        assert len(segments) == 2
        for actual, expected in zip(segments[0].coefficients, (-2, 6, 1, 5)):
            assert_close(actual, expected)
        for actual, expected in zip(segments[1].coefficients, (2, -18, 49, -27)):
            assert_close(actual, expected)

    def test_reproduces_points(self, three_points):
        segments = interpolate(three_points, "natural")
        for point in three_points:
            assert_close(evaluate(segments, point.x), point.y)

    def test_zero_curvature_at_ends(self, three_points):
        segments = interpolate(three_points, BoundaryKind.NATURAL)
        assert_close(evaluate_derivative(segments, 1, order=2), 0)
        assert_close(evaluate_derivative(segments, 3, order=2), 0)


class TestSplineProperties:
    """Interpolation, continuity and segment count for every boundary kind."""

    @pytest.mark.parametrize("boundary", ALL_BOUNDARIES)
    def test_segment_count(self, demo_points, boundary):
        assert len(interpolate(demo_points, boundary)) == len(demo_points) - 1

    @pytest.mark.parametrize("boundary", ALL_BOUNDARIES)
    def test_interpolates_every_point(self, demo_points, boundary):
        segments = interpolate(demo_points, boundary)
        for point in demo_points:
            assert_close(evaluate(segments, point.x), point.y)

    @pytest.mark.parametrize("boundary", ALL_BOUNDARIES)
    def test_c1_and_c2_continuity(self, demo_points, boundary):
        segments = interpolate(demo_points, boundary)
        for left, right in zip(segments, segments[1:]):
            knot = left.range.x_max
            assert right.range.x_min == knot
            assert_close(left.evaluate(knot), right.evaluate(knot))
            assert_close(left.derivative(knot, 1), right.derivative(knot, 1))
            assert_close(left.derivative(knot, 2), right.derivative(knot, 2))

    @pytest.mark.parametrize("boundary", ALL_BOUNDARIES)
    def test_segments_in_input_order(self, demo_points, boundary):
        segments = interpolate(demo_points, boundary)
        for i, segment in enumerate(segments):
            assert segment.range.x_min == demo_points[i].x
            assert segment.range.x_max == demo_points[i + 1].x


class TestBoundaryLaws:
    """Each boundary kind enforces its own pair of end conditions."""

    def test_natural(self, demo_points):
        segments = interpolate(demo_points, BoundaryKind.NATURAL)
        assert_close(segments[0].derivative(demo_points[0].x, 2), 0)
        assert_close(segments[-1].derivative(demo_points[-1].x, 2), 0)

    def test_quadratic(self, demo_points):
        segments = interpolate(demo_points, BoundaryKind.QUADRATIC)
        assert_close(segments[0].a, 0)
        assert_close(segments[-1].a, 0)

    def test_quadratic_three_points_is_one_parabola(self, three_points):
        segments = interpolate(three_points, BoundaryKind.QUADRATIC)
        for segment in segments:
            for actual, expected in zip(segment.coefficients, (0, -4, 17, -3)):
                assert_close(actual, expected)

    def test_not_a_knot(self, demo_points):
        segments = interpolate(demo_points, BoundaryKind.NOT_A_KNOT)
        assert_close(segments[0].a, segments[1].a)
        assert_close(segments[-2].a, segments[-1].a)

    def test_not_a_knot_recovers_cubic(self, cubic_points):
        segments = interpolate(cubic_points, BoundaryKind.NOT_A_KNOT)
        for segment in segments:
            for actual, expected in zip(segment.coefficients, (1, 0, 0, 1)):
                assert_close(actual, expected)
        assert_close(evaluate(segments, Decimal('2.5')), Decimal('16.625'))

    def test_periodic(self, demo_points):
        segments = interpolate(demo_points, BoundaryKind.PERIODIC)
        first, last = demo_points[0].x, demo_points[-1].x
        assert_close(segments[0].derivative(first, 1), segments[-1].derivative(last, 1))
        assert_close(segments[0].derivative(first, 2), segments[-1].derivative(last, 2))

    def test_two_points_natural_is_a_line(self):
        segments = interpolate([(0, 1), (2, 5)], BoundaryKind.NATURAL)
        assert len(segments) == 1
        for actual, expected in zip(segments[0].coefficients, (0, 0, 2, 1)):
            assert_close(actual, expected)


class TestScaleIndependence:
    """Well-posed systems stay solvable whatever the magnitude of the x-values."""

    @pytest.mark.parametrize("scale", [Decimal('1e10'), Decimal('1e15')])
    @pytest.mark.parametrize("boundary", ALL_BOUNDARIES)
    def test_large_abscissas(self, boundary, scale):
        points = [(k * scale, y) for k, y in zip((1, 2, 3, 4), (0, 1, 0, 2))]
        segments = interpolate(points, boundary)
        assert len(segments) == 3
        for x, y in points:
            assert_close(evaluate(segments, x), y, tolerance=Decimal('1e-20'))

    @pytest.mark.parametrize("boundary", ALL_BOUNDARIES)
    def test_matches_unit_scale_solution(self, boundary):
        unit = interpolate([(1, 0), (2, 1), (3, 0), (4, 2)], boundary)
        scaled = interpolate([(1e10, 0), (2e10, 1), (3e10, 0), (4e10, 2)], boundary)
        for small, large in zip(unit, scaled):
            assert_close(large.d, small.d, tolerance=Decimal('1e-20'))
            assert_close(large.c * Decimal('1e10'), small.c, tolerance=Decimal('1e-20'))


class TestPrecision:
    """The solver precision carries over to evaluation."""

    def test_segments_keep_precision(self, three_points):
        segments = interpolate(three_points, BoundaryKind.NATURAL, precision=20)
        assert all(segment.precision == 20 for segment in segments)
        value = evaluate(segments, Decimal('1.23456789012345678901234567'))
        assert len(value.as_tuple().digits) <= 20
        assert len(evaluate_derivative(segments, Decimal('2.718281828459045235360287')).as_tuple().digits) <= 20

    def test_default_precision(self, three_points):
        segments = interpolate(three_points, BoundaryKind.NATURAL)
        assert all(segment.precision is None for segment in segments)


class TestErrors:
    """Error handling of interpolate."""

    def test_unsupported_boundary(self, three_points):
        with pytest.raises(UnsupportedBoundaryKindError):
            interpolate(three_points, "hermite")

    def test_too_few_points(self):
        with pytest.raises(InsufficientPointsError):
            interpolate([(1, 1)], BoundaryKind.NATURAL)

    def test_singular_not_a_knot_with_three_points(self, three_points):
        with pytest.raises(SingularSystemError):
            interpolate(three_points, BoundaryKind.NOT_A_KNOT)

    def test_non_strict_returns_segments(self, caplog):
        with caplog.at_level(logging.WARNING):
            segments = interpolate([(0, 0), (1, 1)], BoundaryKind.QUADRATIC, strict=False)
        assert len(segments) == 1
        assert "Singular system" in caplog.text


class TestEvaluation:
    """Evaluation containment and absence."""

    def test_outside_all_ranges(self, three_points):
        segments = interpolate(three_points, BoundaryKind.NATURAL)
        assert evaluate(segments, 0.5) is None
        assert evaluate(segments, Decimal('3.0001')) is None
        assert evaluate_derivative(segments, 4, order=1) is None

    def test_inside_uses_containing_segment(self, three_points):
        segments = interpolate(three_points, BoundaryKind.NATURAL)
        assert find_segment(segments, 1.5) is segments[0]
        assert find_segment(segments, 2.5) is segments[1]
        assert evaluate(segments, 2.5) == segments[1].evaluate(Decimal('2.5'))

    def test_shared_knot_uses_first_segment(self, three_points):
        segments = interpolate(three_points, BoundaryKind.NATURAL)
        assert find_segment(segments, 2) is segments[0]

    def test_example_query_outside_range(self, demo_points):
        segments = interpolate(demo_points, BoundaryKind.NATURAL)
        assert evaluate(segments, 4.6) is None
        assert evaluate(segments, 4.5) is not None

    def test_evaluate_array(self, three_points):
        segments = interpolate(three_points, BoundaryKind.NATURAL)
        values = evaluate_array(segments, [0.0, 1.0, 2.0, 3.0, 4.0])
        assert np.isnan(values[0]) and np.isnan(values[-1])
        np.testing.assert_allclose(values[1:4], [10.0, 15.0, 12.0])


class TestExtractSegments:
    """Grouping of the solution vector."""

    def test_groups_of_four(self):
        points = [Point(0, 0), Point(1, 1), Point(2, 0)]
        solution = [Decimal(v) for v in range(8)]
        segments = extract_segments(solution, points)
        assert segments[1].coefficients == (4, 5, 6, 7)
        assert segments[1].range.x_min == 1
        assert segments[1].range.x_max == 2

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="expected 8"):
            extract_segments([Decimal(0)] * 4, [Point(0, 0), Point(1, 1), Point(2, 0)])
