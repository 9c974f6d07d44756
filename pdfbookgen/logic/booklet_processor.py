# PDFBookGen/pdfbookgen/logic/booklet_processor.py
"""
Coordinator for PDF booklet generation.
Delegates statistics to signature, layout to imposition and writing to
BookletAssembler. Holds the source path and the current options.
"""

import logging
import os
from dataclasses import replace
from typing import Callable, Optional, Tuple

from . import pdf_probe
from .booklet_assembler import BookletAssembler
from .booklet_config import BookletConfig
from .errors import BookletError
from .imposition import ImpositionPlan, plan_imposition
from .sheet_sizes import SheetSize
from .signature import SignatureStats, calculate_signature_stats

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = "-booklet"


def default_output_path(source_path: str) -> str:
    """Derive '<stem>-booklet.pdf' beside the source document."""
    stem, _ = os.path.splitext(source_path)
    return f"{stem}{OUTPUT_SUFFIX}.pdf"


class BookletProcessor:
    """
    Thin coordinator that manages booklet state and delegates work.

    Responsibilities:
    - Store PDF path and current options
    - Keep the page range consistent with the source document
    - Provide signature statistics and the imposition plan
    - Coordinate saving via BookletAssembler
    """

    def __init__(self, file_path: str, config: Optional[BookletConfig] = None):
        """
        Initialize the processor with a PDF file.

        Args:
            file_path: Path to the source PDF
            config: Stored options; the range is clamped to the document
        """
        self.pdf_path = file_path

        # Get page count and the size of the first page
        self.original_page_count = pdf_probe.get_page_count(file_path)
        self._original_page_size_mm = pdf_probe.get_page_size_mm(file_path)

        self.config = (config or BookletConfig()).clamp_to(self.original_page_count)
        logger.debug(
            "Loaded %s: %d pages, options %s",
            file_path,
            self.original_page_count,
            self.config,
        )

    # ==================== Options ====================

    def set_config(self, config: BookletConfig):
        self.config = config

    def set_sig_size(self, sig_size: int):
        self.config = replace(self.config, sig_size=sig_size)

    def set_first_page(self, first: int):
        """Set the first page, keeping the last page at or after it."""
        self.config = self.config.with_first_page(first)

    def set_last_page(self, last: int):
        """Set the last page, keeping the first page at or before it."""
        self.config = self.config.with_last_page(last)

    def set_paper_size(self, paper_size: SheetSize):
        self.config = replace(self.config, paper_size=paper_size)

    def set_rotate(self, rotate: bool):
        self.config = replace(self.config, rotate=rotate)

    # ==================== Layout ====================

    def get_signature_stats(self) -> SignatureStats:
        """
        Statistics for the current options.

        Raises:
            ConfigurationError: if the options do not fit the document
        """
        config = self.config.validate(self.original_page_count)
        return calculate_signature_stats(
            config.sig_size, config.first_page, config.last_page
        )

    def get_plan(self) -> ImpositionPlan:
        """
        Output page specs for the current options.

        Raises:
            ConfigurationError: if the options do not fit the document
        """
        config = self.config.validate(self.original_page_count)
        return plan_imposition(
            config.sig_size, config.first_page, config.last_page, config.rotate
        )

    # ==================== Saving ====================

    def generate(
        self,
        output_path: str,
        progress_callback: Optional[Callable[[int, str], None]] = None,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> Tuple[bool, Optional[str]]:
        """
        Generate the booklet.

        Args:
            output_path: Where to save the output PDF
            progress_callback: Optional callback(percent: int, message: str)
            should_cancel: Optional callable checked between output pages

        Returns:
            (success: bool, error_message: Optional[str])
        """
        try:
            config = self.config.validate(self.original_page_count)
            plan = plan_imposition(
                config.sig_size, config.first_page, config.last_page, config.rotate
            )
            sheet_width, sheet_height = config.sheet_size_pt()
        except BookletError as e:
            logger.error("Invalid booklet options: %s", e)
            return False, str(e)

        return BookletAssembler.save_booklet(
            source_pdf_path=self.pdf_path,
            output_pdf_path=output_path,
            plan=plan,
            sheet_width_pt=sheet_width,
            sheet_height_pt=sheet_height,
            progress_callback=progress_callback,
            should_cancel=should_cancel,
        )

    # ==================== Accessors ====================

    def get_page_count(self) -> int:
        """Get the number of output pages for the current options."""
        return len(self.get_plan())

    def get_original_page_size_mm(self) -> Optional[Tuple[float, float]]:
        """
        Get the size of the first source page in millimeters.

        Returns:
            (width_mm, height_mm), or None if the source could not be read
        """
        return self._original_page_size_mm
