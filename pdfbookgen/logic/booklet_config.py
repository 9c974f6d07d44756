# PDFBookGen/pdfbookgen/logic/booklet_config.py
"""
Booklet generation options supplied by the host application.
Validation happens here, before any planning starts.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .errors import ConfigurationError
from .sheet_sizes import DEFAULT_PAPER_SIZE, SheetSize, resolve_sheet_size

MIN_SIG_SIZE = 1
MAX_SIG_SIZE = 12


@dataclass(frozen=True)
class BookletConfig:
    """
    Signature size, page range, sheet size and rotation.
    Page numbers are 1-indexed and inclusive. last_page=None means
    "to the end of the document".
    """

    sig_size: int = 1
    first_page: int = 1
    last_page: Optional[int] = None
    paper_size: SheetSize = DEFAULT_PAPER_SIZE
    rotate: bool = True  # Rotate the back of each sheet clockwise

    def validate(self, page_count: int) -> "BookletConfig":
        """
        Check the options against a source document.

        Args:
            page_count: Number of pages in the source document

        Returns:
            A copy with last_page resolved

        Raises:
            ConfigurationError: if any option is out of range
        """
        if not MIN_SIG_SIZE <= self.sig_size <= MAX_SIG_SIZE:
            raise ConfigurationError(
                f"Signature size must be between {MIN_SIG_SIZE} and "
                f"{MAX_SIG_SIZE}, got {self.sig_size}"
            )

        if page_count < 1:
            raise ConfigurationError("The source document has no pages")

        last_page = self.last_page if self.last_page is not None else page_count
        if self.first_page < 1:
            raise ConfigurationError(
                f"First page must be at least 1, got {self.first_page}"
            )
        if last_page < self.first_page:
            raise ConfigurationError(
                f"Last page ({last_page}) is before first page ({self.first_page})"
            )
        if last_page > page_count:
            raise ConfigurationError(
                f"Last page ({last_page}) exceeds the document's {page_count} pages"
            )

        # Raises for unknown presets and units
        resolve_sheet_size(self.paper_size)

        return replace(self, last_page=last_page)

    def sheet_size_pt(self):
        """Returns (width_pt, height_pt) of the target sheet."""
        return resolve_sheet_size(self.paper_size)

    def clamp_to(self, page_count: int) -> "BookletConfig":
        """
        Make a stored range fit a (possibly shorter) document.
        Used on start up, when the source may have changed since last time.
        """
        count = max(page_count, 1)
        last = self.last_page if self.last_page is not None else count
        last = min(max(last, 1), count)
        first = min(max(self.first_page, 1), last)
        sig_size = min(max(self.sig_size, MIN_SIG_SIZE), MAX_SIG_SIZE)

        return replace(self, sig_size=sig_size, first_page=first, last_page=last)

    def with_first_page(self, first: int) -> "BookletConfig":
        """Move the first page, pushing the last page along if needed."""
        last = self.last_page
        if last is not None and last < first:
            last = first
        return replace(self, first_page=first, last_page=last)

    def with_last_page(self, last: int) -> "BookletConfig":
        """Move the last page, pulling the first page back if needed."""
        first = self.first_page
        if first > last:
            first = last
        return replace(self, first_page=first, last_page=last)
