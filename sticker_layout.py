"""Sticker layout engine: public entry points.

Every function is a pure function of its inputs. Settings are read afresh
on each call, nothing is cached between calls.
"""

import logging

from models import (  # noqa: F401  (re-exported)
    PAPER_SIZES, STICKER_KINDS, STICKER_LABELS, Album, Dimensions, LayoutOptions,
    LayoutResult, LayoutSettings, LayoutStats, Margins, Overlap, PaperSettings,
    PlacedSticker, PrintableArea, PrintSettings, Size, Sticker, load_settings,
    paper_size,
)
from packer import Packer, find_overlaps, validate_no_overlaps  # noqa: F401
from stickers import collect_stickers, create_stickers_for_album  # noqa: F401

logger = logging.getLogger(__name__)

# Upper bound on capacity trials; larger pages still report at most this many sets
MAX_CAPACITY_TRIALS = 20


def get_printable_area(settings: LayoutSettings) -> PrintableArea:
    return settings.printable_area


def calculate_layout(albums, settings: LayoutSettings) -> LayoutResult:
    """Lay out the sticker sets of *albums* on one page."""
    albums = list(albums)
    stickers = collect_stickers(albums, settings.dimensions)
    packer = Packer(
        get_printable_area(settings),
        spacing=settings.layout.element_spacing,
        allow_rotation=settings.layout.allow_rotation,
    )
    return packer.pack(stickers, capacity=len(albums))


def make_placeholder_albums(count: int) -> list[Album]:
    """Dummy albums used to count how many sets fit."""
    return [
        Album(id=f"test-{i}", album_name="Test Album", artist_name="Test Artist", year=2025)
        for i in range(count)
    ]


def calculate_max_capacity(settings: LayoutSettings) -> int:
    """Largest number of album sets that fit on one page without failures.

    Tries 1, 2, ... sets and stops at the first count that does not fit,
    or after MAX_CAPACITY_TRIALS. Returns 0 if not even one set fits, so
    can_add_album() refuses the first album on such a page (the web app
    reported 1 here and let it through).
    """
    capacity = 0
    for count in range(1, MAX_CAPACITY_TRIALS + 1):
        result = calculate_layout(make_placeholder_albums(count), settings)
        logger.debug("Capacity trial %d: %d/%d placed", count,
                     result.placed_count, result.total_stickers)
        if not result.fits:
            break
        capacity = count
    return capacity


def can_add_album(albums, settings: LayoutSettings) -> bool:
    return len(albums) < calculate_max_capacity(settings)


def efficiency(result: LayoutResult, area: PrintableArea) -> float:
    """Percentage of the printable area covered by placed stickers."""
    if area.is_degenerate:
        return 0.0
    return result.used_area / area.area * 100


def get_layout_stats(albums, settings: LayoutSettings) -> LayoutStats:
    albums = list(albums)
    result = calculate_layout(albums, settings)
    return LayoutStats(
        current_sets=len(albums),
        max_capacity=calculate_max_capacity(settings),
        efficiency=efficiency(result, get_printable_area(settings)),
        fits_on_page=result.fits,
        placed_stickers=result.placed_count,
        total_stickers=result.total_stickers,
        failed_stickers=result.failed_count,
    )
