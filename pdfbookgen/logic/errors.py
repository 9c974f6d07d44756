# PDFBookGen/pdfbookgen/logic/errors.py
"""
Exceptions raised by the booklet engine.

Lower layers raise; the coordinator and assembler entry points catch
BookletError/OSError and report a single (success, error_message) result.
"""


class BookletError(Exception):
    """Base class for all booklet generation failures."""


class ConfigurationError(BookletError, ValueError):
    """Invalid signature size, page range or sheet size. Raised before planning."""


class GeometryError(BookletError, ValueError):
    """A page or sheet has a zero or negative dimension."""


class DocumentIOError(BookletError, IOError):
    """The source could not be read or the destination could not be written."""


class GenerationCancelled(BookletError):
    """A run was stopped by its cancellation check."""
