# PDFBookGen/pdfbookgen/logic/sheet_sizes.py
"""
Target sheet sizes for the generated booklet.
Presets are stored in millimeters, always portrait.
"""

from typing import Tuple, Union

from .errors import ConfigurationError
from .unit_converter import inches_to_points, mm_to_points

DEFAULT_PAPER_SIZE = "Letter"

# Preset sizes in mm (portrait)
PRESETS_MM = {
    "a0": (841.0, 1189.0),
    "a1": (594.0, 841.0),
    "a2": (420.0, 594.0),
    "a3": (297.0, 420.0),
    "a4": (210.0, 297.0),
    "a5": (148.0, 210.0),
    "a6": (105.0, 148.0),
    "letter": (215.9, 279.4),
    "legal": (215.9, 355.6),
    "tabloid": (279.4, 431.8),
}

# Display names in the order a host application would list them
PAPER_SIZE_NAMES = (
    "A0",
    "A1",
    "A2",
    "A3",
    "A4",
    "A5",
    "A6",
    "Letter",
    "Legal",
    "Tabloid",
)

SheetSize = Union[str, Tuple[float, float, str]]


def is_known_preset(name: str) -> bool:
    """Check if a name matches one of the presets (case-insensitive)."""
    return isinstance(name, str) and name.lower() in PRESETS_MM


def resolve_sheet_size(size: SheetSize) -> Tuple[float, float]:
    """
    Convert a sheet size description into points.

    Args:
        size: Can be:
            - A preset string: "A0".."A6", "Letter", "Legal", "Tabloid"
            - A tuple: (width, height, unit) where unit is 'mm', 'in' or 'pt'

    Returns:
        (width_pt, height_pt)

    Raises:
        ConfigurationError: unknown preset, unknown unit or non-positive size
    """
    if isinstance(size, str):
        if not is_known_preset(size):
            raise ConfigurationError(f"Unknown paper size: {size!r}")
        w_mm, h_mm = PRESETS_MM[size.lower()]
        return mm_to_points(w_mm), mm_to_points(h_mm)

    if isinstance(size, tuple) and len(size) == 3:
        w, h, unit = size
        if w <= 0 or h <= 0:
            raise ConfigurationError(f"Sheet size must be positive, got {w} x {h}")

        if unit == "mm":
            return mm_to_points(w), mm_to_points(h)
        elif unit == "in":
            return inches_to_points(w), inches_to_points(h)
        elif unit == "pt":
            return float(w), float(h)
        raise ConfigurationError(f"Unknown unit: {unit!r}")

    raise ConfigurationError(f"Unsupported sheet size: {size!r}")
