# PDFBookGen/pdfbookgen/logic/imposition.py
"""
Pure imposition planning.
No file I/O, no rendering, no PDF operations.
Just data structures describing which source pages share an output page.

The range is processed one signature at a time (4 * sig_size pages). Within
a signature the outermost pages go on the first sheet and the innermost on
the last, so folding and nesting the sheets restores reading order.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .errors import ConfigurationError
from .signature import PAGES_PER_SHEET

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputPageSpec:
    """
    One side of one sheet: up to two source pages placed side by side.
    Indices are 0-based source document indices, None for an absent side.
    """

    right_index: Optional[int]
    left_index: Optional[int]
    rotate_clockwise: bool = False

    def page_indices(self) -> Tuple[int, ...]:
        """Returns the present source indices, right side first."""
        return tuple(
            idx for idx in (self.right_index, self.left_index) if idx is not None
        )

    def is_single(self) -> bool:
        """Check if only one side of this output page is occupied."""
        return self.right_index is None or self.left_index is None


ImpositionPlan = Tuple[OutputPageSpec, ...]

# (right, left, rotate_clockwise) with indices local to a signature
LocalSide = Tuple[int, int, bool]


class SheetSequencer:
    """
    Two-pointer state machine over the page slots of one signature.

    front starts at the first slot and back at the last. Every emitted side
    advances both pointers by one, so the front of a sheet takes the
    outer pair and its back takes the next pair inwards, swapped.
    """

    def __init__(self, sig_size: int):
        self.sig_size = sig_size
        self.front = 0
        self.back = PAGES_PER_SHEET * sig_size - 1

    def _advance(self):
        self.front += 1
        self.back -= 1

    def next_front_side(self) -> Tuple[int, int]:
        """Returns (right, left) for the front of the current sheet."""
        pair = (self.front, self.back)
        self._advance()
        return pair

    def next_back_side(self) -> Tuple[int, int]:
        """Returns (right, left) for the back of the current sheet."""
        pair = (self.back, self.front)
        self._advance()
        return pair

    def sides(self, rotate: bool) -> Iterator[LocalSide]:
        """
        Yield every side of every sheet in the signature, front then back.

        Args:
            rotate: Whether the back of each sheet is rotated clockwise
        """
        for _ in range(self.sig_size):
            right, left = self.next_front_side()
            yield right, left, False

            right, left = self.next_back_side()
            yield right, left, rotate


def _plan_signature(
    sig_size: int, block_start: int, block_size: int, rotate: bool
) -> List[OutputPageSpec]:
    """
    Plan one signature.

    Args:
        sig_size: Sheets per signature
        block_start: 0-based source index of the signature's first page
        block_size: Pages actually present in this signature (<= 4 * sig_size)
        rotate: Rotate the back of each sheet clockwise
    """

    def to_source(local: int) -> Optional[int]:
        return block_start + local if local < block_size else None

    specs = []
    for right, left, rotate_clockwise in SheetSequencer(sig_size).sides(rotate):
        right_index = to_source(right)
        left_index = to_source(left)
        if right_index is None and left_index is None:
            continue
        specs.append(OutputPageSpec(right_index, left_index, rotate_clockwise))

    return specs


def plan_imposition(
    sig_size: int, first_page: int, last_page: int, rotate: bool = True
) -> ImpositionPlan:
    """
    Generate the ordered output page specs for a page range.

    Args:
        sig_size: Number of sheets of paper in each signature
        first_page: First source page (1-indexed, inclusive)
        last_page: Last source page (1-indexed, inclusive)
        rotate: Whether the back of each sheet is rotated clockwise

    Returns:
        Tuple of OutputPageSpec in printable sheet order

    Raises:
        ConfigurationError: for a non-positive signature size or a bad range
    """
    if sig_size < 1:
        raise ConfigurationError(f"Signature size must be at least 1, got {sig_size}")
    if first_page < 1 or last_page < first_page:
        raise ConfigurationError(f"Invalid page range {first_page}-{last_page}")

    sig_page_count = PAGES_PER_SHEET * sig_size
    end = last_page  # 0-based exclusive end
    plan: List[OutputPageSpec] = []

    for block_start in range(first_page - 1, end, sig_page_count):
        block_size = min(sig_page_count, end - block_start)
        logger.debug(
            "Signature pages %d to %d", block_start + 1, block_start + block_size
        )
        plan.extend(_plan_signature(sig_size, block_start, block_size, rotate))

    return tuple(plan)


def plan_page_indices(plan: ImpositionPlan) -> List[int]:
    """Returns every source index referenced by a plan, in plan order."""
    return [idx for spec in plan for idx in spec.page_indices()]
