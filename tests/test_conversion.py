"""Tests for root <-> virtual conversion and percentage anchoring."""

import numpy as np
import pytest

from virtual_scaling import (
    AnchorSide,
    Dimensions,
    InvalidArgumentError,
    Point,
    Rect,
    RectF,
    ScaleFactor,
    TransformNode,
    letterbox_scale,
)


def assert_point(actual, expected, tol=1e-6):
    assert actual.x == pytest.approx(expected[0], abs=tol)
    assert actual.y == pytest.approx(expected[1], abs=tol)


class TestIdentityScale:
    def test_root_to_virtual_subtracts_position(self, identity_root):
        assert identity_root.root_to_virtual(Point(15, 25)) == Point(5, 5)

    def test_virtual_to_root_adds_position(self, identity_root):
        assert identity_root.virtual_to_root(Point(5, 5)) == Point(15, 25)

    def test_accepts_tuple_and_numbers(self, identity_root):
        assert identity_root.root_to_virtual((15, 25)) == Point(5, 5)
        assert identity_root.root_to_virtual(15, 25) == Point(5, 5)
        assert identity_root.virtual_to_root(5, 5) == Point(15, 25)


class TestScaledConversion:
    def test_root_to_virtual(self, scaled_root):
        assert_point(scaled_root.root_to_virtual(Point(400, 300)), (544, 344))

    def test_virtual_to_root(self, scaled_root):
        assert_point(scaled_root.virtual_to_root(Point(544, 344)), (400, 300))

    def test_non_uniform_scale(self):
        node = TransformNode(10, 20, 100, 200, virtual_width=50, virtual_height=400)
        assert_point(node.root_to_virtual(Point(30, 30)), (10, 20))
        assert_point(node.virtual_to_root(Point(10, 20)), (30, 30))

    def test_already_in_parent_space_skips_ancestors(self, chain):
        root, child, _ = chain
        in_parent = root.root_to_virtual(Point(400, 300))
        direct = child.root_to_virtual(in_parent, already_in_parent_space=True)
        assert direct == child.root_to_virtual(Point(400, 300))


class TestChainedConversion:
    def test_each_level_differs(self, chain):
        root, child, grandchild = chain
        raw = Point(400, 300)
        assert_point(root.root_to_virtual(raw), (544, 344))
        assert_point(child.root_to_virtual(raw), (1024, 624))
        assert_point(grandchild.root_to_virtual(raw), (2048, 1248))

    def test_each_level_round_trips(self, chain):
        raw = Point(400, 300)
        for node in chain:
            assert_point(node.virtual_to_root(node.root_to_virtual(raw)), (400, 300))

    @pytest.mark.parametrize(
        "raw", [(0, 0), (128.5, 77.25), (-300, 912), (1e4, -1e4)]
    )
    def test_round_trip_many_points(self, chain, raw):
        for node in chain:
            assert node.round_trips(raw)

    def test_round_trip_odd_ratios(self):
        root = TransformNode(3, 7, 333, 777, virtual_width=1000, virtual_height=100)
        child = root.create_child(11, 13, 97, 301)
        grandchild = child.create_child(5, 2, 1920, 1080, 640, 480)
        assert grandchild.round_trips(Point(123.456, 654.321))

    def test_round_trip_after_mutation(self, chain):
        root, child, grandchild = chain
        root.position = Point(0, 0)
        child.virtual_size = Dimensions(300, 700)
        assert grandchild.round_trips(Point(50, 60))


class TestRectConversion:
    def test_root_bounds_of_root(self, scaled_root):
        assert scaled_root.root_bounds().to_tuple() == pytest.approx((128, 128, 512, 512))

    def test_root_bounds_of_chain(self, chain):
        _, child, grandchild = chain
        assert child.root_bounds().to_tuple() == pytest.approx((144, 144, 256, 256))
        assert grandchild.root_bounds().to_tuple() == pytest.approx((144, 144, 128, 128))

    def test_integer_rect_stays_integer(self):
        node = TransformNode(10, 20, 100, 200, virtual_width=50, virtual_height=400)
        rect = node.virtual_rect_to_root(Rect(10, 10, 20, 40))
        assert rect == Rect(30, 25, 40, 20)

    def test_offset_rect_uses_far_corner(self, scaled_root):
        rect = scaled_root.virtual_rect_to_root(RectF(100, 200, 50, 50))
        assert isinstance(rect, RectF)
        assert rect.to_tuple() == pytest.approx((178, 228, 25, 25))

    def test_letterboxed_bounds_fit_footprint(self):
        node = TransformNode(
            0, 0, 200, 100, virtual_width=400, virtual_height=100,
            scale_strategy=letterbox_scale,
        )
        assert node.root_bounds().to_tuple() == pytest.approx((0, 0, 200, 50))


class TestArrayConversion:
    def test_matches_scalar_path(self, chain):
        pts = np.array([[0.0, 0.0], [400.0, 300.0], [-12.5, 999.0]])
        for node in chain:
            out = node.root_to_virtual_array(pts)
            expected = [node.root_to_virtual(tuple(p)).to_tuple() for p in pts]
            np.testing.assert_allclose(out, expected)

    def test_round_trip(self, chain):
        pts = np.random.default_rng(7).uniform(-500, 1500, size=(50, 2))
        _, _, grandchild = chain
        back = grandchild.virtual_to_root_array(grandchild.root_to_virtual_array(pts))
        np.testing.assert_allclose(back, pts, atol=1e-6)

    def test_identity_scale(self, identity_root):
        out = identity_root.root_to_virtual_array([[15, 25]])
        np.testing.assert_array_equal(out, [[5.0, 5.0]])

    def test_bad_shape(self, identity_root):
        with pytest.raises(ValueError, match="shape"):
            identity_root.root_to_virtual_array([1.0, 2.0, 3.0])


class TestPercentageAnchoring:
    @pytest.fixture
    def node(self):
        return TransformNode(0, 0, 512, 512, virtual_width=1024, virtual_height=1024)

    def test_left_top(self, node):
        p = node.virtual_point_from_percentage(0.25, AnchorSide.LEFT, 0.5, AnchorSide.TOP)
        assert p == Point(256, 512)

    def test_right_complements(self, node):
        p = node.virtual_point_from_percentage(0.25, AnchorSide.RIGHT, 0.5, AnchorSide.TOP)
        assert p.x == 768

    def test_bottom_complements(self):
        node = TransformNode(0, 0, 100, 100, virtual_width=1000, virtual_height=500)
        p = node.virtual_point_from_percentage(0.1, AnchorSide.RIGHT, 0.2, AnchorSide.BOTTOM)
        assert_point(p, (900, 400))

    def test_non_zero_percentage_is_computed(self, node):
        # Both axes are resolved for any percentage, not only for zero.
        p = node.virtual_point_from_percentage(0.75, AnchorSide.LEFT, 0.125, AnchorSide.TOP)
        assert p == Point(768, 128)

    def test_defaults_are_top_left_origin(self, node):
        assert node.virtual_point_from_percentage() == Point(0, 0)

    def test_root_point(self, node):
        p = node.root_point_from_percentage(0.25, AnchorSide.LEFT, 0.5, AnchorSide.TOP)
        assert_point(p, (128, 256))

    def test_root_point_through_chain(self, chain):
        _, _, grandchild = chain
        p = grandchild.root_point_from_percentage(1.0, AnchorSide.LEFT, 1.0, AnchorSide.TOP)
        assert_point(p, (272, 272))

    @pytest.mark.parametrize("side", [AnchorSide.TOP, AnchorSide.BOTTOM])
    def test_vertical_side_on_horizontal_axis(self, node, side):
        with pytest.raises(InvalidArgumentError, match="horizontal_side"):
            node.virtual_point_from_percentage(0.5, side, 0.5, AnchorSide.TOP)

    @pytest.mark.parametrize("side", [AnchorSide.LEFT, AnchorSide.RIGHT])
    def test_horizontal_side_on_vertical_axis(self, node, side):
        with pytest.raises(InvalidArgumentError, match="vertical_side"):
            node.virtual_point_from_percentage(0.5, AnchorSide.LEFT, 0.5, side)

    def test_non_side_rejected(self, node):
        with pytest.raises(TypeError):
            node.virtual_point_from_percentage(0.5, "left")


class TestPointArguments:
    def test_flag_is_keyword_only(self, chain):
        root, child, _ = chain
        in_parent = root.root_to_virtual(Point(400, 300))
        with pytest.raises(TypeError):
            child.root_to_virtual(in_parent, True)

    def test_flag_with_tuple_point_is_keyword_only(self, chain):
        _, child, _ = chain
        with pytest.raises(TypeError):
            child.root_to_virtual((544.0, 344.0), True)

    def test_keyword_flag_applies_only_local_transform(self, chain):
        _, child, _ = chain
        p = child.root_to_virtual((544.0, 344.0), already_in_parent_space=True)
        assert_point(p, (1024, 624))

    def test_y_with_point_rejected(self, identity_root):
        with pytest.raises(TypeError, match="y cannot be given"):
            identity_root.root_to_virtual(Point(15, 25), 3)
        with pytest.raises(TypeError, match="y cannot be given"):
            identity_root.virtual_to_root((5, 5), 3)

    def test_x_without_y_rejected(self, identity_root):
        with pytest.raises(TypeError):
            identity_root.root_to_virtual(15)

    def test_array_flag_is_keyword_only(self, chain):
        _, child, _ = chain
        with pytest.raises(TypeError):
            child.root_to_virtual_array([[544.0, 344.0]], True)
        out = child.root_to_virtual_array([[544.0, 344.0]], already_in_parent_space=True)
        np.testing.assert_allclose(out, [[1024.0, 624.0]])


def near_identity_x(actual, virtual):
    return ScaleFactor(1.0 + 1e-9, 2.0)


class TestIdentityFastPath:
    @pytest.fixture
    def node(self):
        return TransformNode(10, 0, 100, 100, scale_strategy=near_identity_x)

    def test_root_to_virtual_skips_multiplication(self, node):
        # An unscaled x-axis gives exactly point - position.
        p = node.root_to_virtual(Point(15.5, 3))
        assert p.x == 5.5
        assert p.y == 6.0

    def test_virtual_to_root_skips_division(self, node):
        p = node.virtual_to_root(Point(5.5, 6))
        assert p.x == 15.5
        assert p.y == 3.0

    def test_array_paths_match(self, node):
        out = node.root_to_virtual_array([[15.5, 3.0]])
        np.testing.assert_array_equal(out, [[5.5, 6.0]])
        back = node.virtual_to_root_array(out)
        np.testing.assert_array_equal(back, [[15.5, 3.0]])

    def test_scale_outside_tolerance_is_applied(self):
        node = TransformNode(
            10, 0, 100, 100, scale_strategy=lambda a, v: ScaleFactor(1.0 + 1e-6, 1.0)
        )
        assert node.root_to_virtual(Point(15.5, 3)).x != 5.5
