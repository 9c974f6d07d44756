# PDFBookGen/pdfbookgen/logic/booklet_assembler.py
"""
PDF assembly using pypdf for vector-preserving page placement.
Walks an imposition plan, composites each output page and writes the result.
The output file only appears once every page has been written.
"""

import logging
import os
import tempfile
from typing import Callable, Optional, Tuple

from pypdf import PageObject, PdfReader, PdfWriter, Transformation
from pypdf.errors import PyPdfError

from .errors import (
    BookletError,
    ConfigurationError,
    DocumentIOError,
    GenerationCancelled,
)
from .imposition import ImpositionPlan, OutputPageSpec
from .page_compositor import CompositeTransform, Matrix, PageGeometry, compose_spread

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, str], None]
CancelCheck = Callable[[], bool]


class BookletAssembler:
    """
    Handles booklet output generation with pypdf.
    Source pages are merged as transformed content, so vectors are preserved.
    """

    @staticmethod
    def save_booklet(
        source_pdf_path: str,
        output_pdf_path: str,
        plan: ImpositionPlan,
        sheet_width_pt: float,
        sheet_height_pt: float,
        progress_callback: Optional[ProgressCallback] = None,
        should_cancel: Optional[CancelCheck] = None,
    ) -> Tuple[bool, Optional[str]]:
        """
        Save an imposed booklet PDF.

        Args:
            source_pdf_path: Path to source PDF
            output_pdf_path: Path to save output PDF
            plan: Output page specs from plan_imposition()
            sheet_width_pt: Output sheet width in points
            sheet_height_pt: Output sheet height in points
            progress_callback: Optional function(percent: int, message: str)
            should_cancel: Optional function returning True to stop the run

        Returns:
            (success: bool, error_message: Optional[str])
        """
        try:
            BookletAssembler.write_booklet(
                source_pdf_path,
                output_pdf_path,
                plan,
                sheet_width_pt,
                sheet_height_pt,
                progress_callback,
                should_cancel,
            )
            return True, None

        except (BookletError, OSError) as e:
            error_msg = f"Save failed: {e}"
            logger.exception("Booklet generation failed for %s", source_pdf_path)
            if progress_callback:
                progress_callback(0, error_msg)
            return False, error_msg

    @staticmethod
    def write_booklet(
        source_pdf_path: str,
        output_pdf_path: str,
        plan: ImpositionPlan,
        sheet_width_pt: float,
        sheet_height_pt: float,
        progress_callback: Optional[ProgressCallback] = None,
        should_cancel: Optional[CancelCheck] = None,
    ) -> int:
        """
        Same as save_booklet() but raises on failure.

        Returns:
            Number of pages written

        Raises:
            DocumentIOError, ConfigurationError, GeometryError, GenerationCancelled
        """
        if progress_callback:
            progress_callback(0, "Opening source PDF...")

        reader = BookletAssembler._open_source(source_pdf_path)
        writer = PdfWriter()

        if progress_callback:
            progress_callback(5, "Preparing output document...")

        total_pages = len(plan)
        for i, spec in enumerate(plan):
            if should_cancel and should_cancel():
                raise GenerationCancelled("Generation cancelled")

            try:
                output_page = BookletAssembler.build_output_page(
                    reader, spec, sheet_width_pt, sheet_height_pt
                )
            except PyPdfError as e:
                raise DocumentIOError(
                    f"Could not read source pages {spec.page_indices()}: {e}"
                ) from e

            writer.add_page(output_page)

            if progress_callback:
                percent = int(5 + ((i + 1) / total_pages) * 90)
                progress_callback(
                    percent, f"Assembling page {i + 1} of {total_pages}..."
                )

        if progress_callback:
            progress_callback(95, "Writing PDF to disk...")

        BookletAssembler._publish(writer, output_pdf_path)

        if progress_callback:
            progress_callback(100, "Save complete!")

        logger.info("File created in: %s", output_pdf_path)
        return total_pages

    @staticmethod
    def page_geometry(reader: PdfReader, source_idx: int) -> PageGeometry:
        """Get the crop box geometry of a source page."""
        if not 0 <= source_idx < len(reader.pages):
            raise ConfigurationError(
                f"Page {source_idx + 1} is outside the document "
                f"({len(reader.pages)} pages)"
            )

        box = reader.pages[source_idx].cropbox
        return PageGeometry(
            width=float(box.width),
            height=float(box.height),
            left=float(box.left),
            bottom=float(box.bottom),
        )

    @staticmethod
    def compose(
        reader: PdfReader,
        spec: OutputPageSpec,
        sheet_width_pt: float,
        sheet_height_pt: float,
    ) -> CompositeTransform:
        """Fetch the geometry for a spec and run the compositor on it."""
        right = left = None
        if spec.right_index is not None:
            right = (
                spec.right_index,
                BookletAssembler.page_geometry(reader, spec.right_index),
            )
        if spec.left_index is not None:
            left = (
                spec.left_index,
                BookletAssembler.page_geometry(reader, spec.left_index),
            )

        return compose_spread(
            right, left, sheet_width_pt, sheet_height_pt, spec.rotate_clockwise
        )

    @staticmethod
    def build_output_page(
        reader: PdfReader,
        spec: OutputPageSpec,
        sheet_width_pt: float,
        sheet_height_pt: float,
    ) -> PageObject:
        """Create one output sheet side with its source pages merged in."""
        transform = BookletAssembler.compose(
            reader, spec, sheet_width_pt, sheet_height_pt
        )

        output_page = PageObject.create_blank_page(
            width=sheet_width_pt, height=sheet_height_pt
        )

        for placement in transform.placements:
            ctm = _clean_ctm(transform.matrix_for(placement))
            output_page.merge_transformed_page(
                reader.pages[placement.source_index],
                Transformation(ctm),
                over=True,
                expand=False,
            )

        # Ensure page size is preserved
        output_page.mediabox.lower_left = (0, 0)
        output_page.mediabox.upper_right = (sheet_width_pt, sheet_height_pt)
        return output_page

    @staticmethod
    def _open_source(source_pdf_path: str) -> PdfReader:
        try:
            return PdfReader(source_pdf_path)
        except (OSError, PyPdfError) as e:
            raise DocumentIOError(f"Could not read {source_pdf_path}: {e}") from e

    @staticmethod
    def _publish(writer: PdfWriter, output_pdf_path: str):
        """
        Write to a temporary file beside the destination, then move it into
        place. A failed write leaves no file behind.
        """
        output_dir = os.path.dirname(os.path.abspath(output_pdf_path))
        try:
            fd, temp_path = tempfile.mkstemp(suffix=".pdf.tmp", dir=output_dir)
        except OSError as e:
            raise DocumentIOError(f"Could not write {output_pdf_path}: {e}") from e

        try:
            with os.fdopen(fd, "wb") as output_file:
                writer.write(output_file)
            os.replace(temp_path, output_pdf_path)
        except (OSError, PyPdfError) as e:
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise DocumentIOError(f"Could not write {output_pdf_path}: {e}") from e


def _clean_ctm(ctm: Matrix) -> Matrix:
    """
    Snap values very close to 0, 1 or -1 to exact values for better PDF
    compatibility.
    """
    cleaned = []
    for value in ctm:
        if abs(value) < 1e-10:
            cleaned.append(0.0)
        elif abs(value - 1.0) < 1e-10:
            cleaned.append(1.0)
        elif abs(value + 1.0) < 1e-10:
            cleaned.append(-1.0)
        else:
            cleaned.append(value)
    return tuple(cleaned)
