"""
Tests for pdfbookgen.logic.signature

Test Coverage:
- calculate_signature_stats(): documented examples, sheet counts
- Invariants over a grid of ranges and signature sizes
"""

import pytest

from pdfbookgen.logic.signature import SignatureStats, calculate_signature_stats


def test_hundred_pages_single_sheet_signatures():
    stats = calculate_signature_stats(1, 1, 100)

    assert stats.page_count == 100
    assert stats.sig_page_count == 4
    assert stats.sig_count == 25
    assert stats.last_sig_first_page == 97
    assert stats.last_sig_page_count == 4
    assert stats.last_sig_blank_count == 0
    assert stats.sheet_count == 25


def test_ten_pages_two_sheet_signatures():
    stats = calculate_signature_stats(2, 1, 10)

    assert stats == SignatureStats(
        page_count=10,
        sig_page_count=8,
        sig_count=2,
        last_sig_first_page=9,
        last_sig_page_count=2,
        last_sig_blank_count=6,
        sheet_count=3,
    )


def test_single_page_range():
    stats = calculate_signature_stats(3, 7, 7)

    assert stats.page_count == 1
    assert stats.sig_count == 1
    assert stats.last_sig_first_page == 7
    assert stats.last_sig_page_count == 1
    assert stats.last_sig_blank_count == 11
    assert stats.sheet_count == 1


def test_range_not_starting_at_one():
    stats = calculate_signature_stats(1, 5, 12)

    assert stats.page_count == 8
    assert stats.sig_count == 2
    assert stats.last_sig_first_page == 9
    assert stats.last_sig_page_count == 4


@pytest.mark.parametrize(
    "sig_size, last_page, expected_sheets",
    [
        (1, 5, 2),  # 1 page in last signature: half a sheet rounds up
        (1, 6, 2),  # 2 pages: not below half of 4
        (2, 9, 3),  # 1 page in last signature of 8
        (2, 11, 4),  # 3 pages: still below half, 2 sheets
        (2, 12, 4),  # 4 pages: exactly half, full signature counted
        (3, 12, 3),
    ],
)
def test_sheet_count(sig_size, last_page, expected_sheets):
    assert calculate_signature_stats(sig_size, 1, last_page).sheet_count == expected_sheets


def test_stats_are_immutable():
    stats = calculate_signature_stats(1, 1, 4)

    with pytest.raises(AttributeError):
        stats.sig_count = 3


@pytest.mark.parametrize("sig_size", [1, 2, 3, 5, 12])
def test_invariants_hold_for_all_ranges(sig_size):
    for first_page in (1, 2, 7):
        for last_page in range(first_page, first_page + 60):
            stats = calculate_signature_stats(sig_size, first_page, last_page)
            sig_page_count = 4 * sig_size

            assert stats.sig_count >= 1
            assert (
                (stats.sig_count - 1) * sig_page_count
                < stats.page_count
                <= stats.sig_count * sig_page_count
            )
            assert 0 <= stats.last_sig_blank_count < sig_page_count
            assert 1 <= stats.last_sig_page_count <= sig_page_count
            assert stats.last_sig_first_page + stats.last_sig_page_count - 1 == last_page
            assert stats.sheet_count <= stats.sig_count * sig_size
