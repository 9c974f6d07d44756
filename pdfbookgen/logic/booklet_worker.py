# PDFBookGen/pdfbookgen/logic/booklet_worker.py
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from .booklet_processor import BookletProcessor

logger = logging.getLogger(__name__)


class BookletWorker(QObject):
    """
    A worker object to generate a booklet on a separate thread.
    The host moves it onto a QThread and connects thread.started to run().
    """

    processing_finished = pyqtSignal(object)  # Emits the output path
    processing_failed = pyqtSignal(str)  # Emits error message
    progress_updated = pyqtSignal(int, str)  # Emits percentage and message

    def __init__(self, processor: BookletProcessor = None, output_path: str = None):
        super().__init__()

        self.processor = processor
        self.output_path = output_path
        self._cancel_requested = False

    def cancel(self):
        """Ask a running generation to stop before the next output page."""
        self._cancel_requested = True

    def is_cancel_requested(self) -> bool:
        return self._cancel_requested

    def run(self):
        """
        Generates the booklet. Emits exactly one of processing_finished or
        processing_failed. This method runs on the worker thread.
        """
        if not (self.processor and self.output_path):
            self.processing_failed.emit(
                "Worker initialized with insufficient parameters."
            )
            return

        success, error_message = self.processor.generate(
            self.output_path,
            progress_callback=self.progress_updated.emit,
            should_cancel=self.is_cancel_requested,
        )

        if success:
            self.processing_finished.emit(self.output_path)
        else:
            logger.warning("Booklet worker failed: %s", error_message)
            self.processing_failed.emit(error_message or "Unknown save error")
