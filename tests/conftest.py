import sys
from pathlib import Path

import fitz
import pytest

# Add the project root to sys.path so we can import pdfbookgen from a checkout
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())


def page_label(number: int) -> str:
    """Marker text written on source page `number` (1-indexed)."""
    return f"PAGE-{number:03d}"


@pytest.fixture
def make_pdf(tmp_path: Path):
    """
    Factory creating a source PDF in tmp_path.

    Pass either a page count (A5 portrait pages) or a list of (width, height)
    sizes in points. Every page carries its page_label() as text.
    """

    def _make(pages, name: str = "source.pdf") -> Path:
        sizes = [(420, 595)] * pages if isinstance(pages, int) else list(pages)
        doc = fitz.open()
        for number, (width, height) in enumerate(sizes, start=1):
            page = doc.new_page(width=width, height=height)
            page.insert_text((36, 72), page_label(number), fontsize=24)
        path = tmp_path / name
        doc.save(str(path))
        doc.close()
        return path

    return _make


@pytest.fixture(name="page_label")
def page_label_fixture():
    """The page_label() helper, for tests that check page text."""
    return page_label
