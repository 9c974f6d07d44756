"""
Tests for pdfbookgen.cli
"""

import pytest
from pypdf import PdfReader

from pdfbookgen.cli import format_stats, main
from pdfbookgen.logic.signature import calculate_signature_stats


def test_stats_only(make_pdf, capsys):
    source = make_pdf(10)

    exit_code = main([str(source), "--stats", "--signature-size", "2"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Signatures" in out
    assert "Blank pages in last signature  6" in out
    assert "148.2 x 209.9 mm" in out
    assert not (source.parent / "source-booklet.pdf").exists()


def test_generates_default_output(make_pdf, capsys):
    source = make_pdf(6)

    exit_code = main([str(source), "--paper", "a5"])

    output = source.parent / "source-booklet.pdf"
    assert exit_code == 0
    assert capsys.readouterr().out.strip() == str(output)
    assert len(PdfReader(str(output)).pages) == 4


def test_explicit_output_and_size(make_pdf, tmp_path):
    source = make_pdf(8)
    output = tmp_path / "custom.pdf"

    exit_code = main(
        [str(source), str(output), "--size", "100", "200", "mm", "--first", "5"]
    )

    assert exit_code == 0
    reader = PdfReader(str(output))
    assert len(reader.pages) == 2
    assert float(reader.pages[0].mediabox.height) == pytest.approx(566.93, abs=0.01)


@pytest.mark.parametrize(
    "extra",
    [
        ["--last", "99"],
        ["--first", "5", "--last", "2"],
        ["--signature-size", "0"],
        ["--paper", "B5"],
        ["--size", "100", "200", "cm"],
        ["--size", "wide", "200", "mm"],
    ],
)
def test_invalid_arguments_exit_with_usage_error(make_pdf, extra):
    with pytest.raises(SystemExit) as excinfo:
        main([str(make_pdf(4))] + extra)

    assert excinfo.value.code == 2


def test_missing_source_is_rejected(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.pdf")])

    assert excinfo.value.code == 2
    err = capsys.readouterr().err
    assert "cannot read source document" in err
    assert "no pages" not in err


def test_generation_failure_exit_code(make_pdf, tmp_path, capsys):
    source = make_pdf(4)

    exit_code = main([str(source), str(tmp_path / "no-such-dir" / "out.pdf")])

    assert exit_code == 1
    assert "Save failed" in capsys.readouterr().err


def test_format_stats_without_page_size():
    text = format_stats(calculate_signature_stats(1, 1, 4))

    assert "Source page size" not in text
    assert text.splitlines()[0].split() == ["Source", "pages", "4"]
