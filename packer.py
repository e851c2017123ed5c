"""Packer: largest-first best-fit guillotine placement of stickers.

Stickers are placed one at a time, biggest area first, into the free
rectangle that leaves the least waste. The used rectangle is split into a
right and a bottom remainder (overlapping in their corner) and any free
rectangle contained in another is pruned.
"""

import logging
from dataclasses import dataclass

from geometry import FreeRect, prune_free_rects, rects_overlap, split_free_rect
from models import LayoutResult, Overlap, PlacedSticker, PrintableArea, Sticker

logger = logging.getLogger(__name__)


@dataclass
class _Fit:
    """Best candidate found so far for the sticker being placed."""
    rect_index: int
    rect: FreeRect
    rotation: int
    width: float
    height: float
    waste: float


class Packer:
    """Greedy bin packer for one page.

    Each call to :meth:`pack` owns its own free-rectangle list; a Packer
    holds no state between calls.
    """

    def __init__(self, area: PrintableArea, spacing: float = 0.0, allow_rotation: bool = True):
        self.area = area
        self.spacing = spacing
        self.allow_rotation = allow_rotation

    # ------------------------------------------------------------------ #
    #  Public API                                                         #
    # ------------------------------------------------------------------ #

    def pack(self, stickers: list[Sticker], capacity: int = 0) -> LayoutResult:
        """Place as many of *stickers* as possible."""
        # sorted() is stable, so equal areas keep their input order
        ordered = sorted(stickers, key=lambda s: s.width * s.height, reverse=True)

        free = [FreeRect(0, 0, self.area.width, self.area.height)]
        placed: list[PlacedSticker] = []
        failed: list[Sticker] = []

        for sticker in ordered:
            fit = self._find_best_fit(sticker, free, placed)
            if fit is None:
                failed.append(sticker)
                continue

            placed.append(PlacedSticker(
                sticker=sticker,
                x=self.area.offset_x + fit.rect.x,
                y=self.area.offset_y + fit.rect.y,
                width=fit.width,
                height=fit.height,
                rotation=fit.rotation,
            ))

            # Spacing is charged to the used rectangle so later stickers keep the gap
            del free[fit.rect_index]
            free.extend(split_free_rect(fit.rect, fit.width + self.spacing,
                                        fit.height + self.spacing))
            prune_free_rects(free)

        logger.debug("Packed %d/%d stickers (%d failed, %d free rects left)",
                     len(placed), len(ordered), len(failed), len(free))

        result = LayoutResult(stickers=placed, failed=failed, capacity=capacity)
        result.overlaps = validate_no_overlaps(placed, self.spacing)
        return result

    # ------------------------------------------------------------------ #
    #  Candidate search                                                   #
    # ------------------------------------------------------------------ #

    def _rotations(self):
        return (0, 90) if self.allow_rotation else (0,)

    def _find_best_fit(self, sticker, free, placed):
        """Return the tightest-fitting free rectangle and rotation, or None.

        Ties go to the first candidate seen: rotation 0 before 90, then
        free-rectangle list order.
        """
        best = None
        for rotation in self._rotations():
            if rotation == 90:
                w, h = sticker.height, sticker.width
            else:
                w, h = sticker.width, sticker.height

            for i, rect in enumerate(free):
                if not rect.can_fit(w + self.spacing, h + self.spacing):
                    continue
                waste = rect.width * rect.height - w * h
                if best is not None and waste >= best.waste:
                    continue
                if self._collides(rect, w, h, placed):
                    logger.debug("Skipping stale free rect %s for %s (rotation %d)",
                                 rect, sticker.id, rotation)
                    continue
                best = _Fit(i, rect, rotation, w, h, waste)
        return best

    def _collides(self, rect, width, height, placed):
        """True if a sticker at *rect*'s corner would crowd a placed one.

        A corner shared by a right and a bottom remainder stays listed in
        the other remainder after one of them is used.

        Uses the same half-spacing tolerance as the overlap validator, so a
        sticker can end up between spacing/2 and spacing from a neighbour
        placed through the other remainder.
        """
        candidate = (self.area.offset_x + rect.x, self.area.offset_y + rect.y, width, height)
        return any(rects_overlap(candidate, p.rect, self.spacing) for p in placed)


# ------------------------------------------------------------------ #
#  Overlap validation                                                 #
# ------------------------------------------------------------------ #

def find_overlaps(placed: list[PlacedSticker], spacing: float = 0.0) -> list[Overlap]:
    """Return every pair of placed stickers closer than half the spacing."""
    overlaps = []
    for i in range(len(placed)):
        a = placed[i]
        for j in range(i + 1, len(placed)):
            b = placed[j]
            if rects_overlap(a.rect, b.rect, spacing):
                overlaps.append(Overlap(a.id, b.id, a.rect, b.rect, spacing))
    return overlaps


def validate_no_overlaps(placed: list[PlacedSticker], spacing: float = 0.0) -> list[Overlap]:
    """Log each overlap at ERROR level and return them. Never raises."""
    overlaps = find_overlaps(placed, spacing)
    for o in overlaps:
        logger.error("Overlap detected between %s %s and %s %s (spacing %s)",
                     o.first_id, o.first_rect, o.second_id, o.second_rect, o.spacing)
    return overlaps
