# PDFBookGen/pdfbookgen/logic/pdf_probe.py
"""
Lightweight source document inspection using PyMuPDF (fitz).
Used to populate page counts and sizes before any generation happens.
Never raises for missing or unreadable files - callers get 0 / None.
"""

import logging
import os
from typing import Optional, Tuple

import fitz

from .unit_converter import points_to_mm

logger = logging.getLogger(__name__)

_PROBE_ERRORS = (OSError, RuntimeError, ValueError)


def get_page_count(pdf_path: str) -> int:
    """
    Get the number of pages in a PDF.

    Args:
        pdf_path: Path to PDF file

    Returns:
        Number of pages, or 0 if the file is missing or unreadable
    """
    if not pdf_path or not os.path.isfile(pdf_path):
        return 0

    try:
        doc = fitz.open(pdf_path)
        count = doc.page_count
        doc.close()
        return count
    except _PROBE_ERRORS as e:
        logger.warning("Could not read page count from %s: %s", pdf_path, e)
        return 0


def get_page_size_mm(pdf_path: str) -> Optional[Tuple[float, float]]:
    """
    Get the size of the first page in millimeters.

    Args:
        pdf_path: Path to PDF file

    Returns:
        (width_mm, height_mm) or None on error
    """
    if not pdf_path or not os.path.isfile(pdf_path):
        return None

    try:
        doc = fitz.open(pdf_path)
        if doc.page_count == 0:
            doc.close()
            return None

        rect = doc[0].rect
        doc.close()

        return round(points_to_mm(rect.width), 2), round(points_to_mm(rect.height), 2)
    except _PROBE_ERRORS as e:
        logger.warning("Could not read page size from %s: %s", pdf_path, e)
        return None
