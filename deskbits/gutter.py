"""The line-number gutter: its width, the numbers it shows and code folding."""

from __future__ import annotations

from typing import NamedTuple

from .editor import TextEditor

_OPEN = "{"
_CLOSE = "}"
_BASE_WIDTH = 15


class LineNumber(NamedTuple):
    """One entry drawn in the gutter."""

    number: int
    current: bool
    foldable: bool
    folded: bool


def _unmatched_opens(line: str) -> int:
    """How many opening braces on ``line`` are not closed on the same line."""
    opens = 0
    for char in line:
        if char == _OPEN:
            opens += 1
        elif char == _CLOSE and opens > 0:
            opens -= 1
    return opens


class LineNumberArea:
    """Line numbers and fold state for the blocks (lines) of an editor."""

    def __init__(self, editor: TextEditor) -> None:
        self.editor = editor
        self._hidden: set[int] = set()

    def _lines(self) -> list[str]:
        return self.editor.to_plain_text().split("\n")

    def _is_valid(self, block: int) -> bool:
        return 0 <= block < self.editor.block_count()

    def _check(self, block: int) -> None:
        if not self._is_valid(block):
            raise IndexError(f"block {block} does not exist")

    def _is_visible(self, block: int) -> bool:
        return self._is_valid(block) and block not in self._hidden

    def _current_block(self) -> int:
        return self.editor.to_plain_text().count("\n", 0, self.editor.cursor)

    def width(self, char_width: int, line_spacing: int) -> int:
        """Gutter width in pixels: room for the widest number plus a fold marker."""
        digits = len(str(max(1, self.editor.block_count())))
        return _BASE_WIDTH + char_width * digits + line_spacing

    def visible_blocks(self) -> list[int]:
        """Numbers of the blocks not hidden by a fold, in order."""
        return [
            block for block in range(self.editor.block_count()) if block not in self._hidden
        ]

    def line_numbers(self) -> list[LineNumber]:
        """What the gutter draws, one entry per visible block."""
        current = self._current_block()
        return [
            LineNumber(
                number=block + 1,
                current=block == current,
                foldable=self.is_foldable(block),
                folded=self.is_folded(block),
            )
            for block in self.visible_blocks()
        ]

    def block_at_position(self, y: float, line_height: float) -> int | None:
        """The visible block drawn at height ``y``, or None below the last one."""
        top = 0.0
        for block in self.visible_blocks():
            bottom = top + line_height
            if top <= y <= bottom:
                return block
            top = bottom
        return None

    def is_foldable(self, block: int) -> bool:
        """True when ``block`` opens a region that is not closed on the same line."""
        if not self._is_valid(block):
            return False
        return _unmatched_opens(self._lines()[block]) > 0

    def is_folded(self, block: int) -> bool:
        """True when the block after ``block`` exists and is hidden."""
        if not self._is_valid(block):
            return False
        following = block + 1
        if not self._is_valid(following):
            return False
        return not self._is_visible(following)

    def folding_region_end(self, block: int) -> int:
        """The block that closes the region opened on ``block``.

        An unclosed region runs to the last block.
        """
        self._check(block)
        lines = self._lines()
        depth = _unmatched_opens(lines[block])
        if depth == 0:
            raise ValueError(f"block {block} does not start a folding region")
        for number in range(block + 1, len(lines)):
            for char in lines[number]:
                if char == _OPEN:
                    depth += 1
                elif char == _CLOSE:
                    depth -= 1
                    if depth <= 0:
                        return number
        return len(lines) - 1

    def toggle_fold(self, block: int) -> None:
        """Fold the region opened on ``block``, or unfold it if already folded."""
        self._check(block)
        if self.is_folded(block):
            following = block + 1
            while self._is_valid(following) and following in self._hidden:
                self._hidden.discard(following)
                following += 1
            return
        end = self.folding_region_end(block)
        self._hidden.update(range(block + 1, end + 1))

    def click(self, x: float, y: float, char_width: int, line_spacing: int) -> bool:
        """Handle a click in the gutter; return True when a fold was toggled."""
        if x < self.width(char_width, line_spacing) - line_spacing:
            return False
        block = self.block_at_position(y, line_spacing)
        if block is None or not self.is_foldable(block):
            return False
        self.toggle_fold(block)
        return True