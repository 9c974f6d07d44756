# PDFBookGen/pdfbookgen/logic/page_compositor.py
"""
Page compositing geometry.
Works on page sizes only - no document objects, no PDF operations.

Two source pages are laid side by side in a landscape frame (left page at
the origin, right page after it), the shorter one centred vertically. The
frame is then rotated a quarter turn, scaled uniformly to fit the portrait
target sheet and centred on it.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import GeometryError

LEFT = "left"
RIGHT = "right"

# PDF content matrix (a, b, c, d, e, f)
Matrix = Tuple[float, float, float, float, float, float]

# (cos, sin) for the two quarter turns used
_QUARTER_TURNS = {90: (0.0, 1.0), 270: (0.0, -1.0)}


@dataclass(frozen=True)
class PageGeometry:
    """
    Visible area (crop box) of one source page, in points.
    left/bottom locate the crop box within the page's own coordinates.
    """

    width: float
    height: float
    left: float = 0.0
    bottom: float = 0.0

    def validate(self):
        if self.width <= 0 or self.height <= 0:
            raise GeometryError(
                f"Page dimensions must be positive, got {self.width} x {self.height}"
            )


@dataclass(frozen=True)
class PagePlacement:
    """Where one source page sits in the un-rotated landscape frame."""

    source_index: int
    side: str  # LEFT or RIGHT
    geometry: PageGeometry
    offset_x: float
    offset_y: float


@dataclass(frozen=True)
class CompositeTransform:
    """
    Everything needed to draw one output page.
    Consumed immediately by the assembler, never stored.
    """

    target_width: float
    target_height: float
    frame_width: float
    frame_height: float
    scale: float
    rotation_deg: int  # 90 (anti-clockwise) or 270 (clockwise)
    translate_x: float
    translate_y: float
    placements: Tuple[PagePlacement, ...]

    def frame_matrix(self) -> Matrix:
        """Matrix mapping frame coordinates onto the target sheet."""
        cos, sin = _QUARTER_TURNS[self.rotation_deg]
        s = self.scale
        return (
            s * cos,
            s * sin,
            -s * sin,
            s * cos,
            self.translate_x,
            self.translate_y,
        )

    def matrix_for(self, placement: PagePlacement) -> Matrix:
        """Matrix mapping a source page's own coordinates onto the sheet."""
        a, b, c, d, e, f = self.frame_matrix()
        ox = placement.offset_x - placement.geometry.left
        oy = placement.offset_y - placement.geometry.bottom
        return (a, b, c, d, a * ox + c * oy + e, b * ox + d * oy + f)

    def placed_rect(
        self, placement: PagePlacement
    ) -> Tuple[float, float, float, float]:
        """
        Bounding box (x0, y0, x1, y1) of a placed page on the target sheet.
        """
        geom = placement.geometry
        matrix = self.matrix_for(placement)
        corners = [
            transform_point(matrix, x, y)
            for x in (geom.left, geom.left + geom.width)
            for y in (geom.bottom, geom.bottom + geom.height)
        ]
        xs = [x for x, _ in corners]
        ys = [y for _, y in corners]
        return min(xs), min(ys), max(xs), max(ys)


def transform_point(matrix: Matrix, x: float, y: float) -> Tuple[float, float]:
    """Apply a PDF content matrix to a point."""
    a, b, c, d, e, f = matrix
    return a * x + c * y + e, b * x + d * y + f


def compose_spread(
    right: Optional[Tuple[int, PageGeometry]],
    left: Optional[Tuple[int, PageGeometry]],
    target_width: float,
    target_height: float,
    rotate_clockwise: bool = False,
) -> CompositeTransform:
    """
    Calculate the placement of up to two source pages on a portrait sheet.

    Args:
        right: (source_index, geometry) for the right page, or None
        left: (source_index, geometry) for the left page, or None
        target_width: Sheet width in points
        target_height: Sheet height in points
        rotate_clockwise: Rotate 270 degrees instead of 90

    Returns:
        CompositeTransform for the output page

    Raises:
        GeometryError: non-positive dimensions, or nothing to place
    """
    if right is None and left is None:
        raise GeometryError("An output page needs at least one source page")
    if target_width <= 0 or target_height <= 0:
        raise GeometryError(
            f"Sheet dimensions must be positive, got {target_width} x {target_height}"
        )

    for entry in (right, left):
        if entry is not None:
            entry[1].validate()

    # A missing half takes the size of the page opposite and stays blank
    left_geom = left[1] if left is not None else right[1]
    right_geom = right[1] if right is not None else left[1]

    lw, lh = left_geom.width, left_geom.height
    rw, rh = right_geom.width, right_geom.height

    frame_width = lw + rw
    frame_height = max(lh, rh)

    # Vertically centre the shorter of the two pages
    left_ty = (frame_height - lh) / 2
    right_ty = (frame_height - rh) / 2

    placements = []
    if left is not None:
        placements.append(PagePlacement(left[0], LEFT, left_geom, 0.0, left_ty))
    if right is not None:
        placements.append(PagePlacement(right[0], RIGHT, right_geom, lw, right_ty))

    # After a quarter turn the frame height runs across the sheet
    scale = min(target_width / frame_height, target_height / frame_width)

    scaled_across = frame_height * scale
    scaled_along = frame_width * scale
    if rotate_clockwise:
        rotation_deg = 270
        translate_x = (target_width - scaled_across) / 2
        translate_y = (target_height + scaled_along) / 2
    else:
        rotation_deg = 90
        translate_x = (target_width + scaled_across) / 2
        translate_y = (target_height - scaled_along) / 2

    return CompositeTransform(
        target_width=target_width,
        target_height=target_height,
        frame_width=frame_width,
        frame_height=frame_height,
        scale=scale,
        rotation_deg=rotation_deg,
        translate_x=translate_x,
        translate_y=translate_y,
        placements=tuple(placements),
    )
