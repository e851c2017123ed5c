"""Shared pytest fixtures for sticker layout tests."""
import pytest

from models import Album, LayoutSettings, Margins


@pytest.fixture
def default_settings():
    """A4 page, 6.35 mm margins, 2 mm spacing, rotation allowed."""
    return LayoutSettings()


@pytest.fixture
def make_albums():
    """Factory fixture: make_albums(n) -> albums with ids a0, a1, ..."""
    def _make(n):
        return [Album(id=f"a{i}", album_name=f"Album {i}") for i in range(n)]
    return _make


@pytest.fixture
def make_settings():
    """Factory fixture: default settings with paper, margins, spacing or rotation replaced."""
    def _make(paper=None, margin=None, spacing=None, rotation=None):
        s = LayoutSettings()
        if paper is not None:
            s.paper.width, s.paper.height = paper
            s.paper.size = "Custom"
        if margin is not None:
            s.printing.margins = Margins(margin, margin, margin, margin)
        if spacing is not None:
            s.layout.element_spacing = spacing
        if rotation is not None:
            s.layout.allow_rotation = rotation
        return s
    return _make
