"""
Tests for pdfbookgen.logic.booklet_worker

run() is called directly, so signals are delivered synchronously to the
connected callables without an event loop.
"""

import pytest

from pdfbookgen.logic.booklet_processor import BookletProcessor
from pdfbookgen.logic.booklet_worker import BookletWorker


@pytest.fixture
def collected():
    return {"finished": [], "failed": [], "progress": []}


def connect(worker, collected):
    worker.processing_finished.connect(collected["finished"].append)
    worker.processing_failed.connect(collected["failed"].append)
    worker.progress_updated.connect(
        lambda percent, message: collected["progress"].append(percent)
    )


def test_successful_run_emits_finished(make_pdf, tmp_path, collected):
    output = str(tmp_path / "out.pdf")
    worker = BookletWorker(BookletProcessor(str(make_pdf(4))), output)
    connect(worker, collected)

    worker.run()

    assert collected["finished"] == [output]
    assert collected["failed"] == []
    assert collected["progress"][-1] == 100


def test_cancelled_run_emits_failed(make_pdf, tmp_path, collected):
    output = tmp_path / "out.pdf"
    worker = BookletWorker(BookletProcessor(str(make_pdf(4))), str(output))
    connect(worker, collected)

    worker.cancel()
    worker.run()

    assert collected["finished"] == []
    assert len(collected["failed"]) == 1
    assert "cancelled" in collected["failed"][0]
    assert not output.exists()


def test_missing_parameters_emit_failed(collected):
    worker = BookletWorker()
    connect(worker, collected)

    worker.run()

    assert collected["failed"] == ["Worker initialized with insufficient parameters."]
