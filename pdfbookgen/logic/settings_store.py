# PDFBookGen/pdfbookgen/logic/settings_store.py
"""
Persists booklet options between sessions with QSettings.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QSettings

from .booklet_config import BookletConfig
from .sheet_sizes import DEFAULT_PAPER_SIZE

logger = logging.getLogger(__name__)

CUSTOM_PAPER_SIZE = "custom"


class SettingsStore:
    """Reads and writes BookletConfig plus the last used file paths."""

    def __init__(self, settings: Optional[QSettings] = None):
        self.settings = settings or QSettings("PDFBookGen", "PDFBookGen")

    def load_config(self) -> BookletConfig:
        """Returns the stored options, defaults for anything missing."""
        paper_size = self.settings.value(
            "booklet/paper_size", DEFAULT_PAPER_SIZE, type=str
        )
        if paper_size == CUSTOM_PAPER_SIZE:
            paper_size = (
                self.settings.value("booklet/custom_width", 0.0, type=float),
                self.settings.value("booklet/custom_height", 0.0, type=float),
                self.settings.value("booklet/custom_unit", "mm", type=str),
            )

        last_page = self.settings.value("booklet/last_page", 0, type=int)

        return BookletConfig(
            sig_size=self.settings.value("booklet/sig_size", 1, type=int),
            first_page=self.settings.value("booklet/first_page", 1, type=int),
            last_page=last_page if last_page > 0 else None,
            paper_size=paper_size,
            rotate=self.settings.value("booklet/rotate", True, type=bool),
        )

    def save_config(self, config: BookletConfig):
        """Store the options. A last_page of None is stored as 0."""
        self.settings.setValue("booklet/sig_size", config.sig_size)
        self.settings.setValue("booklet/first_page", config.first_page)
        self.settings.setValue("booklet/last_page", config.last_page or 0)
        self.settings.setValue("booklet/rotate", config.rotate)

        if isinstance(config.paper_size, tuple):
            width, height, unit = config.paper_size
            self.settings.setValue("booklet/paper_size", CUSTOM_PAPER_SIZE)
            self.settings.setValue("booklet/custom_width", float(width))
            self.settings.setValue("booklet/custom_height", float(height))
            self.settings.setValue("booklet/custom_unit", unit)
        else:
            self.settings.setValue("booklet/paper_size", config.paper_size)

        self.settings.sync()
        logger.debug("Saved booklet settings: %s", config)

    def load_source_document(self) -> str:
        return self.settings.value("files/source_document", "", type=str)

    def save_source_document(self, path: str):
        self.settings.setValue("files/source_document", path)
        self.settings.sync()

    def load_output_path(self) -> str:
        return self.settings.value("files/output_path", "", type=str)

    def save_output_path(self, path: str):
        self.settings.setValue("files/output_path", path)
        self.settings.sync()
