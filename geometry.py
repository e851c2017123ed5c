"""Free-rectangle bookkeeping for the guillotine packer.

Coordinates are local to the printable area: (0, 0) is its top-left corner.
"""

from dataclasses import dataclass

# Contact tolerance (mm) for floating point sums of widths and spacings
EPSILON = 1e-9


@dataclass(frozen=True)
class FreeRect:
    """An axis-aligned region of the printable area not yet occupied."""
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def can_fit(self, width: float, height: float) -> bool:
        return self.width >= width and self.height >= height

    def contains(self, other: "FreeRect") -> bool:
        """True if *other* lies entirely inside this rectangle (edges may touch)."""
        return (other.x >= self.x and other.y >= self.y and
                other.x + other.width <= self.x + self.width and
                other.y + other.height <= self.y + self.height)


def split_free_rect(rect: FreeRect, used_width: float, used_height: float) -> list[FreeRect]:
    """Return the leftovers of *rect* after its top-left ``used_width x used_height``.

    The right remainder keeps the full height and the bottom remainder the
    full width, so the two overlap in the bottom-right corner.
    """
    leftovers = []
    if rect.width > used_width:
        leftovers.append(FreeRect(rect.x + used_width, rect.y,
                                  rect.width - used_width, rect.height))
    if rect.height > used_height:
        leftovers.append(FreeRect(rect.x, rect.y + used_height,
                                  rect.width, rect.height - used_height))
    return leftovers


def prune_free_rects(rects: list[FreeRect]) -> None:
    """Drop, in place, every rectangle fully contained in another one.

    Pairs are scanned in list order. When the earlier rectangle of a pair is
    contained in the later one it is dropped and the scan restarts from the
    same position; otherwise a contained later rectangle is dropped.
    Identical rectangles keep the later copy.
    """
    i = 0
    while i < len(rects):
        j = i + 1
        dropped_outer = False
        while j < len(rects):
            if rects[j].contains(rects[i]):
                del rects[i]
                dropped_outer = True
                break
            if rects[i].contains(rects[j]):
                del rects[j]
                continue
            j += 1
        if not dropped_outer:
            i += 1


def rects_overlap(a: tuple[float, float, float, float],
                  b: tuple[float, float, float, float],
                  spacing: float = 0.0) -> bool:
    """Spacing-aware intersection test for ``(x, y, width, height)`` tuples.

    Two rectangles are apart when, on some axis, the end of one plus half
    the spacing does not pass the start of the other.
    """
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    half = spacing / 2
    apart = (ax + aw + half <= bx + EPSILON or
             bx + bw + half <= ax + EPSILON or
             ay + ah + half <= by + EPSILON or
             by + bh + half <= ay + EPSILON)
    return not apart
