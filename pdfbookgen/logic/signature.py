# PDFBookGen/pdfbookgen/logic/signature.py
"""
Signature arithmetic.
Pure integer calculations, no document access.

A source page is a page from the source document. The generated document
has 2 source pages on each side of each sheet of paper, so there are 4
source pages on each printed sheet and 4 * sig_size pages in a signature.
"""

from dataclasses import dataclass

PAGES_PER_SHEET = 4


@dataclass(frozen=True)
class SignatureStats:
    """Derived counts shown alongside the page range and signature size."""

    page_count: int  # Source pages selected
    sig_page_count: int  # Source pages in a full signature
    sig_count: int  # Signatures generated (last may be partial)
    last_sig_first_page: int  # Source page the last signature starts with
    last_sig_page_count: int  # Source pages in the last signature
    last_sig_blank_count: int  # Unused page slots in the last signature
    sheet_count: int  # Sheets of paper needed


def calculate_signature_stats(
    sig_size: int, first_page: int, last_page: int
) -> SignatureStats:
    """
    Calculate the signature statistics for a page range.

    The number of full signatures is derived from the span of the range
    (last_page - first_page), not from the page count, so a range that
    exactly fills N signatures reports N signatures with no blanks.

    Args:
        sig_size: Number of sheets of paper in each signature (>= 1)
        first_page: First source page to include (1-indexed)
        last_page: Last source page to include (1-indexed, >= first_page)

    Returns:
        SignatureStats for the range
    """
    page_diff = last_page - first_page
    page_count = page_diff + 1
    sig_page_count = PAGES_PER_SHEET * sig_size

    full_sig_count = page_diff // sig_page_count
    full_sig_page_count = full_sig_count * sig_page_count

    sig_count = full_sig_count + 1
    last_sig_first_page = first_page + full_sig_page_count
    last_sig_page_count = page_count - full_sig_page_count
    last_sig_blank_count = sig_page_count - last_sig_page_count

    if last_sig_page_count < sig_page_count // 2:
        # A short last signature needs fewer sheets
        sheet_count = (sig_count - 1) * sig_size + (last_sig_page_count + 1) // 2
    else:
        sheet_count = sig_count * sig_size

    return SignatureStats(
        page_count=page_count,
        sig_page_count=sig_page_count,
        sig_count=sig_count,
        last_sig_first_page=last_sig_first_page,
        last_sig_page_count=last_sig_page_count,
        last_sig_blank_count=last_sig_blank_count,
        sheet_count=sheet_count,
    )
