"""Data model classes and constants for the sticker layout engine.

All layout math happens in millimetres. Positions of placed stickers are in
page coordinates (printable-area offset already applied).
"""

import json
from dataclasses import dataclass, field


# === Constants (millimetres) ===
DEFAULT_ELEMENT_SPACING = 2.0
DEFAULT_MARGIN = 6.35  # 0.25 in

# Standard paper sizes as (name, width_mm, height_mm)
PAPER_SIZES = [
    ("A3", 297.0, 420.0),
    ("A4", 210.0, 297.0),
    ("A5", 148.0, 210.0),
    ("US Letter", 215.9, 279.4),
    ("US Legal", 215.9, 355.6),
]

CUT_LINE_STYLES = ["none", "dashed", "dotted", "solid"]

# Every album contributes exactly these four pieces
STICKER_KINDS = ("spine", "face", "front", "back")

STICKER_LABELS = {
    "spine": "Disc Edge (Spine)",
    "face": "Disc Face",
    "front": "Front Cover (with fold)",
    "back": "Track List (Inner)",
}


def paper_size(name: str) -> tuple[float, float]:
    """Return ``(width, height)`` in mm for a preset paper name."""
    for preset, w, h in PAPER_SIZES:
        if preset.lower() == name.strip().lower():
            return w, h
    known = ", ".join(p for p, _, _ in PAPER_SIZES)
    raise ValueError(f"Unknown paper size {name!r} (known: {known})")


# === Settings ===

@dataclass(frozen=True)
class Size:
    """A (width, height) pair in millimetres."""
    width: float
    height: float

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass
class Dimensions:
    """Nominal sticker measurements (real MiniDisc measurements by default)."""
    edge_sticker: Size = field(default_factory=lambda: Size(58.0, 3.0))
    disc_face: Size = field(default_factory=lambda: Size(36.0, 53.0))
    holder_front_part_a: Size = field(default_factory=lambda: Size(68.0, 65.0))
    holder_front_part_b: Size = field(default_factory=lambda: Size(68.0, 3.0))  # fold strip
    holder_back: Size = field(default_factory=lambda: Size(68.0, 58.0))


@dataclass
class Margins:
    top: float = DEFAULT_MARGIN
    bottom: float = DEFAULT_MARGIN
    left: float = DEFAULT_MARGIN
    right: float = DEFAULT_MARGIN


@dataclass
class LayoutOptions:
    element_spacing: float = DEFAULT_ELEMENT_SPACING  # min gap between stickers
    allow_rotation: bool = True


@dataclass
class PaperSettings:
    size: str = "A4"
    width: float = 210.0
    height: float = 297.0


@dataclass
class PrintSettings:
    margins: Margins = field(default_factory=Margins)


@dataclass(frozen=True)
class PrintableArea:
    """Page region left after subtracting the margins."""
    width: float
    height: float
    offset_x: float
    offset_y: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_degenerate(self) -> bool:
        """Nothing can ever fit in a zero or negative area."""
        return self.width <= 0 or self.height <= 0


# Maps dataclass field names to the keys used by persisted settings
_DIMENSION_KEYS = {
    "edge_sticker": "edgeSticker",
    "disc_face": "discFace",
    "holder_front_part_a": "holderFrontPartA",
    "holder_front_part_b": "holderFrontPartB",
    "holder_back": "holderBack",
}


_TRUE_STRINGS = ("true", "yes", "on", "1")
_FALSE_STRINGS = ("false", "no", "off", "0")


def _as_bool(value) -> bool:
    """Accept real booleans, 0/1 and the usual true/false strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"Expected a boolean, got {value!r}")


def _size_from(data, default: Size) -> Size:
    data = data or {}
    return Size(
        width=float(data.get("width", default.width)),
        height=float(data.get("height", default.height)),
    )


@dataclass
class LayoutSettings:
    """Fully resolved settings consumed by the layout engine."""
    dimensions: Dimensions = field(default_factory=Dimensions)
    layout: LayoutOptions = field(default_factory=LayoutOptions)
    paper: PaperSettings = field(default_factory=PaperSettings)
    printing: PrintSettings = field(default_factory=PrintSettings)

    @property
    def printable_area(self) -> PrintableArea:
        m = self.printing.margins
        return PrintableArea(
            width=self.paper.width - m.left - m.right,
            height=self.paper.height - m.top - m.bottom,
            offset_x=m.left,
            offset_y=m.top,
        )

    @classmethod
    def from_dict(cls, data: dict | None) -> "LayoutSettings":
        """Resolve a nested (camelCase) settings mapping, filling in defaults.

        Accepts the shape the surrounding application persists::

            {"dimensions": {"edgeSticker": {"width": 58, "height": 3}, ...},
             "layout": {"elementSpacing": 2, "allowRotation": true},
             "paper": {"size": "A4", "width": 210, "height": 297},
             "print": {"margins": {"top": 6.35, ...}}}

        Missing sections or fields take their defaults.
        """
        data = data or {}
        defaults = cls()

        dims_in = data.get("dimensions") or {}
        dims = Dimensions(**{
            attr: _size_from(dims_in.get(key), getattr(defaults.dimensions, attr))
            for attr, key in _DIMENSION_KEYS.items()
        })

        layout_in = data.get("layout") or {}
        layout = LayoutOptions(
            element_spacing=float(layout_in.get("elementSpacing", DEFAULT_ELEMENT_SPACING)),
            allow_rotation=_as_bool(layout_in.get("allowRotation", True)),
        )

        paper_in = data.get("paper") or {}
        size_name = paper_in.get("size", defaults.paper.size)
        if "width" in paper_in and "height" in paper_in:
            width, height = paper_in["width"], paper_in["height"]
        else:
            preset_w, preset_h = paper_size(size_name)
            width = paper_in.get("width", preset_w)
            height = paper_in.get("height", preset_h)
        paper = PaperSettings(size=size_name, width=float(width), height=float(height))

        margins_in = (data.get("print") or {}).get("margins") or {}
        margins = Margins(**{
            side: float(margins_in.get(side, DEFAULT_MARGIN))
            for side in ("top", "bottom", "left", "right")
        })

        return cls(dimensions=dims, layout=layout, paper=paper,
                   printing=PrintSettings(margins=margins))

    def to_dict(self) -> dict:
        """Inverse of :meth:`from_dict`."""
        m = self.printing.margins
        return {
            "dimensions": {
                key: getattr(self.dimensions, attr).to_dict()
                for attr, key in _DIMENSION_KEYS.items()
            },
            "layout": {
                "elementSpacing": self.layout.element_spacing,
                "allowRotation": self.layout.allow_rotation,
            },
            "paper": {
                "size": self.paper.size,
                "width": self.paper.width,
                "height": self.paper.height,
            },
            "print": {
                "margins": {"top": m.top, "bottom": m.bottom,
                            "left": m.left, "right": m.right},
            },
        }


def load_settings(path: str) -> LayoutSettings:
    """Read a JSON settings file."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at top level")
    return LayoutSettings.from_dict(data)


# === Data Model ===

@dataclass
class Album:
    """A record contributing one sticker set. Only ``id`` matters to layout."""
    id: str
    album_name: str = ""
    artist_name: str = ""
    year: int | None = None
    tracks: list[str] = field(default_factory=list)


@dataclass
class Sticker:
    """One physical rectangle to print, in its nominal (unrotated) size."""
    id: str
    owner_id: str
    kind: str
    label: str
    width: float
    height: float
    payload: object = field(default=None, repr=False, compare=False)
    parts: dict[str, Size] | None = None

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass
class PlacedSticker:
    """A sticker with its computed placement on the page.

    ``width``/``height`` are the final (possibly rotated) dimensions.
    """
    sticker: Sticker
    x: float
    y: float
    width: float
    height: float
    rotation: int = 0  # 0 or 90 degrees

    @property
    def id(self) -> str:
        return self.sticker.id

    @property
    def owner_id(self) -> str:
        return self.sticker.owner_id

    @property
    def kind(self) -> str:
        return self.sticker.kind

    @property
    def label(self) -> str:
        return self.sticker.label

    @property
    def payload(self):
        return self.sticker.payload

    @property
    def parts(self):
        return self.sticker.parts

    @property
    def original_width(self) -> float:
        return self.sticker.width

    @property
    def original_height(self) -> float:
        return self.sticker.height

    @property
    def rotated(self) -> bool:
        return self.rotation == 90

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Overlap:
    """Two placed stickers closer than the spacing allows."""
    first_id: str
    second_id: str
    first_rect: tuple[float, float, float, float]
    second_rect: tuple[float, float, float, float]
    spacing: float


@dataclass
class LayoutResult:
    """Complete layout: placed stickers plus the ones that did not fit."""
    stickers: list[PlacedSticker] = field(default_factory=list)
    failed: list[Sticker] = field(default_factory=list)
    capacity: int = 0  # number of records requested
    overlaps: list[Overlap] = field(default_factory=list)  # validator output

    @property
    def fits(self) -> bool:
        return not self.failed

    @property
    def placed_count(self) -> int:
        return len(self.stickers)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def total_stickers(self) -> int:
        return len(self.stickers) + len(self.failed)

    @property
    def used_area(self) -> float:
        return sum(p.width * p.height for p in self.stickers)


@dataclass
class LayoutStats:
    """Summary numbers reported next to a layout preview."""
    current_sets: int
    max_capacity: int
    efficiency: float  # percent of printable area covered
    fits_on_page: bool
    placed_stickers: int
    total_stickers: int
    failed_stickers: int
