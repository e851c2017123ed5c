"""Debug preview: draw a layout result onto a Pillow image.

Shows the page, the printable-area guide, each placed sticker tinted by
kind, the fold line of front covers and the cut lines. No artwork.
"""

from PIL import Image, ImageDraw, ImageFont

from models import CUT_LINE_STYLES, LayoutResult, LayoutSettings, PlacedSticker

DEFAULT_SCALE = 4.0  # pixels per mm

KIND_COLORS = {
    "spine": (255, 205, 210),
    "face": (200, 230, 201),
    "front": (187, 222, 251),
    "back": (255, 236, 179),
}

PAGE_COLOR = (255, 255, 255)
GUIDE_COLOR = (200, 200, 200)
OUTLINE_COLOR = (90, 90, 90)
CUT_COLOR = (0, 0, 0)
FOLD_COLOR = (120, 120, 120)


def _dash_line(draw, start, end, fill, dash, gap):
    """Draw a dashed straight (horizontal or vertical) line."""
    (x0, y0), (x1, y1) = start, end
    length = abs(x1 - x0) + abs(y1 - y0)
    if length <= 0:
        return
    dx = (x1 - x0) / length
    dy = (y1 - y0) / length
    pos = 0.0
    while pos < length:
        seg_end = min(pos + dash, length)
        draw.line([(x0 + dx * pos, y0 + dy * pos), (x0 + dx * seg_end, y0 + dy * seg_end)],
                  fill=fill)
        pos = seg_end + gap


def _outline(draw, box, style, fill):
    x0, y0, x1, y1 = box
    if style == "solid":
        draw.rectangle(box, outline=fill)
        return
    dash, gap = (6, 4) if style == "dashed" else (1, 3)
    for start, end in (((x0, y0), (x1, y0)), ((x1, y0), (x1, y1)),
                       ((x1, y1), (x0, y1)), ((x0, y1), (x0, y0))):
        _dash_line(draw, start, end, fill, dash, gap)


def _fold_line(placed: PlacedSticker, scale):
    """Return the fold line of a front cover in pixels, or None.

    Part A sits above part B in the unrotated sticker; a 90 degree turn
    puts it on the right.
    """
    parts = placed.parts
    if not parts or "part_a" not in parts:
        return None
    fold = parts["part_a"].height
    x0, y0 = placed.x * scale, placed.y * scale
    x1, y1 = (placed.x + placed.width) * scale, (placed.y + placed.height) * scale
    if placed.rotation == 90:
        xs = x1 - fold * scale
        return (xs, y0), (xs, y1)
    ys = y0 + fold * scale
    return (x0, ys), (x1, ys)


def render_layout(result: LayoutResult, settings: LayoutSettings,
                  scale: float = DEFAULT_SCALE, cut_line_style: str = "dashed",
                  show_labels: bool = False) -> Image.Image:
    """Render *result* on a page-sized RGB image at *scale* pixels per mm."""
    if cut_line_style not in CUT_LINE_STYLES:
        raise ValueError(f"Unknown cut line style {cut_line_style!r}")

    page_w = max(1, round(settings.paper.width * scale))
    page_h = max(1, round(settings.paper.height * scale))
    img = Image.new("RGB", (page_w, page_h), PAGE_COLOR)
    draw = ImageDraw.Draw(img)

    area = settings.printable_area
    if not area.is_degenerate:
        guide = (area.offset_x * scale, area.offset_y * scale,
                 (area.offset_x + area.width) * scale, (area.offset_y + area.height) * scale)
        _outline(draw, guide, "dashed", GUIDE_COLOR)

    font = ImageFont.load_default() if show_labels else None

    for placed in result.stickers:
        box = (placed.x * scale, placed.y * scale,
               (placed.x + placed.width) * scale, (placed.y + placed.height) * scale)
        draw.rectangle(box, fill=KIND_COLORS.get(placed.kind, GUIDE_COLOR), outline=OUTLINE_COLOR)

        fold = _fold_line(placed, scale)
        if fold is not None:
            _dash_line(draw, fold[0], fold[1], FOLD_COLOR, 3, 3)

        if cut_line_style != "none":
            _outline(draw, box, cut_line_style, CUT_COLOR)

        if font is not None:
            draw.text((box[0] + 2, box[1] + 2), placed.kind, fill=OUTLINE_COLOR, font=font)

    return img


def save_preview(result: LayoutResult, settings: LayoutSettings, path: str, **kwargs) -> None:
    """Render and write a PNG preview."""
    render_layout(result, settings, **kwargs).save(path, "PNG")
