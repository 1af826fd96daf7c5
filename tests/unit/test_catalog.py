"""Unit tests for the bundled catalog."""

import pytest

from framing.application.catalog import CatalogEntryNotFoundError, CatalogManager
from framing.domain import FrameMaterial, StandardSize
from framing.domain.value_objects import FrameColor, MatCore


class TestFrames:
    """Frame profile lookups."""

    def test_lists_all_frames(self, catalog: CatalogManager) -> None:
        frames = catalog.list_frames()
        assert len(frames) == 38
        assert frames[0].id == "103F"

    def test_get_frame(self, catalog: CatalogManager) -> None:
        frame = catalog.get_frame("103F")
        assert frame.width == pytest.approx(2.0)
        assert frame.rebate == pytest.approx(0.5)
        assert frame.price_rate_per_meter == pytest.approx(5.0)
        assert frame.color is FrameColor.BLACK
        assert frame.fill_color.startswith("#")

    def test_filter_by_material(self, catalog: CatalogManager) -> None:
        assert len(catalog.list_frames(material=FrameMaterial.ALUMINIUM)) == 3
        floating = catalog.list_frames(material=FrameMaterial.FLOATING)
        assert [frame.id for frame in floating] == ["FL001", "FL002"]
        assert all(frame.is_floating for frame in floating)

    def test_filter_by_category_ignores_case(self, catalog: CatalogManager) -> None:
        popular = catalog.list_frames(category="popular")
        assert len(popular) == 6
        assert "103F" in {frame.id for frame in popular}

    def test_combined_filters(self, catalog: CatalogManager) -> None:
        frames = catalog.list_frames(material=FrameMaterial.THREE_D, category="Popular")
        assert frames == []

    def test_unknown_frame(self, catalog: CatalogManager) -> None:
        with pytest.raises(CatalogEntryNotFoundError) as exc_info:
            catalog.get_frame("XYZ")
        assert exc_info.value.kind == "frame"
        assert exc_info.value.entry_id == "XYZ"
        assert "Unknown frame: XYZ" in str(exc_info.value)

    def test_has_frame(self, catalog: CatalogManager) -> None:
        assert catalog.has_frame("FL001")
        assert not catalog.has_frame("FL999")


class TestMatBoards:
    def test_lists_boards(self, catalog: CatalogManager) -> None:
        boards = catalog.list_mat_boards()
        assert len(boards) == 20
        assert [board.id for board in boards[:3]] == ["1", "2", "3"]

    def test_get_board(self, catalog: CatalogManager) -> None:
        board = catalog.get_mat_board("1")
        assert board.color == "#fffdf8"
        assert board.core is MatCore.WHITE_CORE
        assert board.core_color == "#ffffff"

    def test_unknown_board(self, catalog: CatalogManager) -> None:
        with pytest.raises(CatalogEntryNotFoundError):
            catalog.get_mat_board("0")
        assert not catalog.has_mat_board("0")


class TestStandardSizes:
    def test_lists_sizes(self, catalog: CatalogManager) -> None:
        sizes = catalog.list_standard_sizes()
        assert len(sizes) == 18
        assert sizes[0].name == "4x6"
        assert all(isinstance(size, StandardSize) for size in sizes)

    def test_get_size(self, catalog: CatalogManager) -> None:
        size = catalog.get_standard_size("A4")
        assert size.width == pytest.approx(21.0)
        assert size.height == pytest.approx(29.7)

    def test_unknown_size(self, catalog: CatalogManager) -> None:
        with pytest.raises(CatalogEntryNotFoundError) as exc_info:
            catalog.get_standard_size("B0")
        assert exc_info.value.kind == "standard size"
