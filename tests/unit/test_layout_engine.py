"""Unit tests for LayoutEngine."""

from dataclasses import replace

import pytest

from framing.domain import (
    LayoutEngine,
    Length,
    MatConfiguration,
    MatStyle,
    MatWidthMode,
    PricingEngine,
    Rect,
    RegionKind,
    RenderSurface,
    SideLengths,
)
from framing.domain.services import (
    BEVEL_SHADOW_PX,
    PICTURE_PLACEHOLDER_FILL,
    REVEAL_BORDER_PX,
    V_GROOVE_GAP_PX,
)


@pytest.fixture
def engine() -> LayoutEngine:
    return LayoutEngine()


@pytest.fixture
def double_mat(white_board, black_board) -> MatConfiguration:
    """5 cm white top mat over a black bottom mat with a 0.5 cm reveal."""
    return MatConfiguration(
        style=MatStyle.DOUBLE,
        uniform_width=Length.cm(5.0),
        top_board=white_board,
        bottom_board=black_board,
        bottom_width=Length.cm(0.5),
    )


def assert_rect(rect: Rect, x: float, y: float, width: float, height: float) -> None:
    assert rect.x == pytest.approx(x)
    assert rect.y == pytest.approx(y)
    assert rect.width == pytest.approx(width)
    assert rect.height == pytest.approx(height)


class TestPlainFrame:
    """Frame with no mat."""

    def test_regions(self, engine, plain_order) -> None:
        layout = engine.compute_layout(plain_order)
        kinds = [region.kind for region in layout.regions]
        assert kinds == [RegionKind.FRAME, RegionKind.PICTURE]

    def test_geometry(self, engine, plain_order) -> None:
        layout = engine.compute_layout(plain_order)
        assert layout.frame_border == pytest.approx(1.5)
        assert_rect(layout.outer_frame_box, 40, 40, 230, 330)
        assert_rect(layout.picture_box, 55, 55, 200, 300)
        assert layout.canvas.width == pytest.approx(310)
        assert layout.canvas.height == pytest.approx(410)
        assert layout.mat_boxes == ()

    def test_frame_uses_finish_color(self, engine, plain_order, wood_frame) -> None:
        layout = engine.compute_layout(plain_order)
        frame_region = layout.regions_of(RegionKind.FRAME)[0]
        assert frame_region.fill == wood_frame.fill_color

    def test_picture_placeholder(self, engine, plain_order) -> None:
        layout = engine.compute_layout(plain_order)
        assert layout.regions[-1].fill == PICTURE_PLACEHOLDER_FILL

    def test_labels(self, engine, plain_order) -> None:
        labels = engine.compute_layout(plain_order).labels
        assert labels.image_size.width == pytest.approx(20.0)
        assert labels.visible_size.width == pytest.approx(19.0)
        assert labels.visible_size.height == pytest.approx(29.0)
        assert labels.outside_size.width == pytest.approx(23.0)
        assert labels.outside_size.height == pytest.approx(33.0)


class TestSingleMat:
    """Frame with a single 5 cm mat."""

    def test_paint_order(self, engine, single_mat_order) -> None:
        layout = engine.compute_layout(single_mat_order)
        kinds = [region.kind for region in layout.regions]
        assert kinds == [
            RegionKind.FRAME,
            RegionKind.TOP_MAT,
            RegionKind.MAT_REVEAL,
            RegionKind.BEVEL_SHADOW,
            RegionKind.PICTURE,
        ]

    def test_geometry(self, engine, single_mat_order) -> None:
        layout = engine.compute_layout(single_mat_order)
        assert layout.frame_border == pytest.approx(1.0)
        assert layout.canvas.width == pytest.approx(400)
        assert layout.canvas.height == pytest.approx(500)
        assert_rect(layout.outer_frame_box, 40, 40, 320, 420)
        assert_rect(layout.picture_box, 100, 100, 200, 300)
        assert len(layout.mat_boxes) == 1
        assert_rect(layout.mat_boxes[0], 50, 50, 300, 400)

    def test_reveal_and_bevel_rings(self, engine, single_mat_order) -> None:
        layout = engine.compute_layout(single_mat_order)
        reveal = layout.regions_of(RegionKind.MAT_REVEAL)[0]
        bevel = layout.regions_of(RegionKind.BEVEL_SHADOW)[0]
        assert_rect(
            reveal.rect,
            100 - REVEAL_BORDER_PX,
            100 - REVEAL_BORDER_PX,
            200 + 2 * REVEAL_BORDER_PX,
            300 + 2 * REVEAL_BORDER_PX,
        )
        assert_rect(
            bevel.rect,
            100 - BEVEL_SHADOW_PX,
            100 - BEVEL_SHADOW_PX,
            200 + 2 * BEVEL_SHADOW_PX,
            300 + 2 * BEVEL_SHADOW_PX,
        )
        assert 0 < bevel.opacity < 1

    def test_mat_uses_board_color(self, engine, single_mat_order, white_board) -> None:
        layout = engine.compute_layout(single_mat_order)
        assert layout.regions_of(RegionKind.TOP_MAT)[0].fill == white_board.color

    def test_labels(self, engine, single_mat_order) -> None:
        labels = engine.compute_layout(single_mat_order).labels
        assert labels.image_size.width == pytest.approx(20.0)
        assert labels.image_size.height == pytest.approx(30.0)
        assert labels.visible_size.width == pytest.approx(19.0)
        assert labels.visible_size.height == pytest.approx(29.0)
        assert labels.outside_size.width == pytest.approx(32.0)
        assert labels.outside_size.height == pytest.approx(42.0)

    def test_containment(self, engine, single_mat_order) -> None:
        layout = engine.compute_layout(single_mat_order)
        assert layout.outer_frame_box.contains(layout.mat_boxes[0])
        assert layout.mat_boxes[0].contains(layout.picture_box)

    def test_zero_width_mat_has_no_reveal(self, engine, make_order, wood_frame, white_board) -> None:
        mat = MatConfiguration(
            style=MatStyle.SINGLE, uniform_width=Length.cm(0.0), top_board=white_board
        )
        layout = engine.compute_layout(make_order(frame=wood_frame, mat=mat))
        assert layout.regions_of(RegionKind.MAT_REVEAL) == []
        assert layout.regions_of(RegionKind.BEVEL_SHADOW) == []
        assert layout.mat_boxes[0] == layout.picture_box


class TestCustomWidths:
    """Per-side mat widths."""

    def test_asymmetric_placement(self, engine, make_order, wood_frame, white_board) -> None:
        mat = MatConfiguration(
            style=MatStyle.SINGLE,
            width_mode=MatWidthMode.CUSTOM,
            custom_widths=SideLengths(
                top=Length.cm(2.0),
                bottom=Length.cm(6.0),
                left=Length.cm(3.0),
                right=Length.cm(3.0),
            ),
            top_board=white_board,
        )
        layout = engine.compute_layout(make_order(frame=wood_frame, mat=mat))
        assert layout.frame_border == pytest.approx(1.0)
        assert_rect(layout.picture_box, 80, 70, 200, 300)
        assert_rect(layout.mat_boxes[0], 50, 50, 260, 380)
        assert layout.labels.outside_size.width == pytest.approx(28.0)
        assert layout.labels.outside_size.height == pytest.approx(40.0)


class TestDoubleMat:
    """Top mat over a bottom mat."""

    def test_paint_order(self, engine, make_order, wood_frame, double_mat) -> None:
        layout = engine.compute_layout(make_order(frame=wood_frame, mat=double_mat))
        kinds = [region.kind for region in layout.regions]
        assert kinds == [
            RegionKind.FRAME,
            RegionKind.BOTTOM_MAT,
            RegionKind.BOTTOM_MAT_REVEAL,
            RegionKind.TOP_MAT,
            RegionKind.MAT_REVEAL,
            RegionKind.BEVEL_SHADOW,
            RegionKind.PICTURE,
        ]

    def test_mat_boxes_innermost_first(self, engine, make_order, wood_frame, double_mat) -> None:
        layout = engine.compute_layout(make_order(frame=wood_frame, mat=double_mat))
        top_box, bottom_box = layout.mat_boxes
        assert_rect(layout.picture_box, 105, 105, 200, 300)
        assert_rect(top_box, 55, 55, 300, 400)
        assert_rect(bottom_box, 50, 50, 310, 410)
        assert layout.outer_frame_box.contains(bottom_box)
        assert bottom_box.contains(top_box)
        assert top_box.contains(layout.picture_box)

    def test_bottom_mat_color(self, engine, make_order, wood_frame, double_mat, black_board) -> None:
        layout = engine.compute_layout(make_order(frame=wood_frame, mat=double_mat))
        assert layout.regions_of(RegionKind.BOTTOM_MAT)[0].fill == black_board.color

    def test_capped_reveal(self, engine, make_order, wood_frame, double_mat) -> None:
        mat = replace(double_mat, bottom_width=Length.cm(8.0))
        layout = engine.compute_layout(
            make_order(width=10.0, height=10.0, frame=wood_frame, mat=mat)
        )
        bottom_box = layout.mat_boxes[1]
        assert bottom_box.width == pytest.approx(300)
        assert bottom_box.height == pytest.approx(300)
        assert any("capped" in warning for warning in layout.warnings)


class TestVGroove:
    """Decorative groove stroke."""

    def test_single_mat_groove(self, engine, make_order, wood_frame, single_mat, white_board) -> None:
        mat = replace(single_mat, v_groove=True)
        layout = engine.compute_layout(make_order(frame=wood_frame, mat=mat))
        groove = layout.regions[-1]
        assert groove.kind is RegionKind.V_GROOVE
        assert groove.is_stroke
        assert groove.fill is None
        assert groove.stroke == white_board.core_color
        assert groove.rect == layout.picture_box.inflate(V_GROOVE_GAP_PX)
        assert layout.v_groove_box == groove.rect

    def test_double_mat_groove_uses_bottom_box(
        self, engine, make_order, wood_frame, double_mat, black_board
    ) -> None:
        mat = replace(double_mat, v_groove=True)
        layout = engine.compute_layout(make_order(frame=wood_frame, mat=mat))
        groove = layout.regions_of(RegionKind.V_GROOVE)[0]
        assert groove.rect == layout.mat_boxes[1].inflate(V_GROOVE_GAP_PX)
        assert groove.stroke == black_board.core_color

    def test_groove_without_mat_is_skipped(self, engine, make_order, wood_frame) -> None:
        mat = MatConfiguration(style=MatStyle.NONE, v_groove=True)
        layout = engine.compute_layout(make_order(frame=wood_frame, mat=mat))
        assert layout.regions_of(RegionKind.V_GROOVE) == []
        assert layout.v_groove_box is None
        assert any("V-groove" in warning for warning in layout.warnings)


class TestNormalization:
    """Out-of-range inputs never raise."""

    def test_no_frame_lays_out_picture_only(self, engine, make_order, single_mat) -> None:
        layout = engine.compute_layout(make_order(mat=single_mat))
        assert [region.kind for region in layout.regions] == [RegionKind.PICTURE]
        assert layout.outer_frame_box is None
        assert not layout.has_frame
        assert layout.labels.outside_size == layout.labels.image_size
        assert any("No frame" in warning for warning in layout.warnings)

    def test_rebate_larger_than_image(self, engine, make_order, wood_frame) -> None:
        frame = replace(wood_frame, rebate=12.0)
        layout = engine.compute_layout(make_order(frame=frame))
        assert layout.labels.visible_size.width == 0.0
        assert layout.labels.visible_size.height == pytest.approx(6.0)
        assert any("rebate" in warning for warning in layout.warnings)

    def test_non_positive_image_uses_default(self, engine, make_order, wood_frame) -> None:
        layout = engine.compute_layout(make_order(width=0.0, height=0.0, frame=wood_frame))
        assert layout.labels.image_size.width == pytest.approx(20.0)
        assert layout.labels.image_size.height == pytest.approx(30.0)
        assert layout.picture_box.width > 0

    def test_large_image_scales_down(self, engine, make_order, wood_frame) -> None:
        surface = RenderSurface()
        layout = engine.compute_layout(
            make_order(width=200.0, height=300.0, frame=wood_frame), surface
        )
        assert layout.px_per_cm < surface.px_per_cm
        assert layout.canvas.width <= surface.max_width_px + 1e-6
        assert layout.canvas.height == pytest.approx(surface.max_height_px)
        assert any("scaled down" in warning for warning in layout.warnings)

    def test_custom_surface_scale(self, engine, plain_order) -> None:
        layout = engine.compute_layout(plain_order, RenderSurface(padding_px=0, px_per_cm=5))
        assert layout.px_per_cm == 5
        assert_rect(layout.outer_frame_box, 0, 0, 115, 165)

    def test_is_deterministic(self, engine, single_mat_order) -> None:
        assert engine.compute_layout(single_mat_order) == engine.compute_layout(single_mat_order)


# Widths 15.0 to 89.5 cm cross every border band edge
STEPS_CM = [step / 10 for step in range(150, 900, 5)]


class TestMonotonicity:
    """A larger image never gives a smaller framed piece."""

    @pytest.mark.parametrize("face_width", [0.0, 1.5, 2.0, 4.0])
    def test_outside_width_grows_with_image_width(
        self, engine, make_order, wood_frame, face_width
    ) -> None:
        frame = replace(wood_frame, width=face_width)
        widths = [
            engine.compute_layout(make_order(width=w, height=100.0, frame=frame))
            .labels.outside_size.width
            for w in STEPS_CM
        ]
        assert all(later > earlier for earlier, later in zip(widths, widths[1:]))

    def test_thin_face_crossing_20cm(self, engine, make_order, wood_frame) -> None:
        frame = replace(wood_frame, width=1.5)
        below = engine.compute_layout(make_order(width=19.9, height=30.0, frame=frame))
        at_edge = engine.compute_layout(make_order(width=20.0, height=30.0, frame=frame))
        assert below.labels.outside_size.width == pytest.approx(22.9)
        assert at_edge.labels.outside_size.width == pytest.approx(23.0)
        assert at_edge.labels.outside_size.height == pytest.approx(
            below.labels.outside_size.height
        )

    @pytest.mark.parametrize("face_width", [0.0, 1.5, 2.0, 4.0])
    def test_outside_size_and_perimeter_grow_with_scale(
        self, engine, make_order, wood_frame, face_width
    ) -> None:
        frame = replace(wood_frame, width=face_width)
        pricing = PricingEngine()
        orders = [make_order(width=w, height=1.5 * w, frame=frame) for w in STEPS_CM]
        outsides = [engine.compute_layout(order).labels.outside_size for order in orders]
        charged = [pricing.compute_price(order).frame.basis for order in orders]

        pairs = list(zip(outsides, outsides[1:]))
        assert all(b.width > a.width and b.height > a.height for a, b in pairs)
        assert all(b.perimeter > a.perimeter for a, b in pairs)
        assert all(later > earlier for earlier, later in zip(charged, charged[1:]))


class TestRenderSurface:
    """Surface validation."""

    def test_rejects_non_positive_scale(self) -> None:
        with pytest.raises(ValueError):
            RenderSurface(px_per_cm=0)

    def test_rejects_padding_wider_than_canvas(self) -> None:
        with pytest.raises(ValueError):
            RenderSurface(padding_px=800, max_width_px=1500)
