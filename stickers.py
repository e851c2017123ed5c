"""Sticker-set expander: turns album records into placeable rectangles."""

from collections.abc import Mapping

from models import STICKER_LABELS, Dimensions, Sticker


def record_id(record) -> str:
    """Return the id of an album object or an album mapping."""
    if isinstance(record, Mapping):
        if "id" in record:
            return record["id"]
    elif hasattr(record, "id"):
        return record.id
    raise TypeError(f"album record has no id: {record!r}")


def create_stickers_for_album(album, dimensions: Dimensions) -> list[Sticker]:
    """Return the four stickers (spine, face, front, back) for one album.

    The front cover is the cover panel with the fold strip stacked below it;
    both parts are kept in ``parts`` so the fold line can be drawn.
    """
    album_id = record_id(album)
    part_a = dimensions.holder_front_part_a
    part_b = dimensions.holder_front_part_b

    def make(kind, width, height, parts=None):
        return Sticker(
            id=f"{album_id}-{kind}",
            owner_id=album_id,
            kind=kind,
            label=STICKER_LABELS[kind],
            width=width,
            height=height,
            payload=album,
            parts=parts,
        )

    return [
        make("spine", dimensions.edge_sticker.width, dimensions.edge_sticker.height),
        make("face", dimensions.disc_face.width, dimensions.disc_face.height),
        make("front", part_a.width, part_a.height + part_b.height,
             parts={"part_a": part_a, "part_b": part_b}),
        make("back", dimensions.holder_back.width, dimensions.holder_back.height),
    ]


def collect_stickers(albums, dimensions: Dimensions) -> list[Sticker]:
    """Flatten the sticker sets of *albums*, preserving album order."""
    stickers: list[Sticker] = []
    for album in albums:
        stickers.extend(create_stickers_for_album(album, dimensions))
    return stickers
