"""Unit tests for free-rectangle bookkeeping."""
import math

from geometry import FreeRect, prune_free_rects, rects_overlap, split_free_rect


class TestFreeRect:

    def test_can_fit_exact(self):
        assert FreeRect(0, 0, 10, 20).can_fit(10, 20)

    def test_can_fit_too_wide(self):
        assert not FreeRect(0, 0, 10, 20).can_fit(10.5, 5)

    def test_nan_never_fits(self):
        assert not FreeRect(0, 0, 10, 20).can_fit(math.nan, 5)

    def test_negative_area_never_fits(self):
        assert not FreeRect(0, 0, -5, 20).can_fit(0, 0)

    def test_contains_self(self):
        r = FreeRect(1, 2, 3, 4)
        assert r.contains(r)

    def test_contains_inner(self):
        assert FreeRect(0, 0, 10, 10).contains(FreeRect(2, 2, 8, 8))

    def test_does_not_contain_partial(self):
        assert not FreeRect(0, 0, 10, 10).contains(FreeRect(5, 5, 6, 2))


class TestSplit:
    """Guillotine split into right and bottom remainders."""

    def test_both_remainders(self):
        rects = split_free_rect(FreeRect(0, 0, 100, 80), 30, 20)
        assert rects == [FreeRect(30, 0, 70, 80), FreeRect(0, 20, 100, 60)]

    def test_remainders_overlap_in_corner(self):
        right, bottom = split_free_rect(FreeRect(0, 0, 100, 80), 30, 20)
        assert right.x < bottom.x + bottom.width
        assert bottom.y < right.y + right.height

    def test_offset_rect(self):
        rects = split_free_rect(FreeRect(10, 5, 50, 50), 20, 50)
        assert rects == [FreeRect(30, 5, 30, 50)]

    def test_exact_use_leaves_nothing(self):
        assert split_free_rect(FreeRect(0, 0, 40, 40), 40, 40) == []

    def test_only_bottom(self):
        assert split_free_rect(FreeRect(0, 0, 40, 40), 40, 10) == [FreeRect(0, 10, 40, 30)]


class TestPrune:
    """Contained rectangles are removed in place."""

    def test_inner_after_outer(self):
        rects = [FreeRect(0, 0, 10, 10), FreeRect(2, 2, 3, 3)]
        prune_free_rects(rects)
        assert rects == [FreeRect(0, 0, 10, 10)]

    def test_inner_before_outer(self):
        rects = [FreeRect(2, 2, 3, 3), FreeRect(0, 0, 10, 10)]
        prune_free_rects(rects)
        assert rects == [FreeRect(0, 0, 10, 10)]

    def test_disjoint_kept_in_order(self):
        a, b, c = FreeRect(0, 0, 10, 10), FreeRect(20, 0, 5, 5), FreeRect(1, 1, 2, 2)
        rects = [a, b, c]
        prune_free_rects(rects)
        assert rects == [a, b]

    def test_duplicates_collapse(self):
        rects = [FreeRect(0, 0, 5, 5), FreeRect(0, 0, 5, 5), FreeRect(0, 0, 5, 5)]
        prune_free_rects(rects)
        assert rects == [FreeRect(0, 0, 5, 5)]

    def test_overlapping_but_not_contained(self):
        a, b = FreeRect(0, 0, 10, 10), FreeRect(5, 5, 10, 10)
        rects = [a, b]
        prune_free_rects(rects)
        assert rects == [a, b]

    def test_chain_of_containment(self):
        rects = [FreeRect(1, 1, 1, 1), FreeRect(0, 0, 5, 5), FreeRect(0, 0, 20, 20)]
        prune_free_rects(rects)
        assert rects == [FreeRect(0, 0, 20, 20)]

    def test_empty(self):
        rects = []
        prune_free_rects(rects)
        assert rects == []


class TestOverlapPredicate:

    def test_touching_without_spacing(self):
        assert not rects_overlap((0, 0, 10, 10), (10, 0, 10, 10))

    def test_intersecting(self):
        assert rects_overlap((0, 0, 10, 10), (9, 9, 10, 10))

    def test_gap_equal_to_half_spacing_is_ok(self):
        assert not rects_overlap((0, 0, 10, 10), (11, 0, 10, 10), spacing=2)

    def test_gap_below_half_spacing_overlaps(self):
        assert rects_overlap((0, 0, 10, 10), (10.5, 0, 10, 10), spacing=2)

    def test_symmetric(self):
        a, b = (0, 0, 10, 10), (10.5, 3, 4, 4)
        assert rects_overlap(a, b, 2) == rects_overlap(b, a, 2)

    def test_separated_vertically(self):
        assert not rects_overlap((0, 0, 10, 10), (0, 12, 10, 10), spacing=2)
