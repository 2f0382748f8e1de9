"""Highlighter that paints tokens lexed by an editor controller."""

import logging
from typing import List, Sequence, Set

from PySide6.QtGui import QSyntaxHighlighter, QTextDocument

from diff.diff_types import LinePatch, LinePatchOp
from diff.line_diff import apply_patch
from editor.line import Line
from gui.token_formats import TokenFormats


class CodeEditorHighlighter(QSyntaxHighlighter):
    """
    Syntax highlighter for a code editor document.

    This highlighter never lexes anything itself.  It keeps a copy of the
    controller's lines, updated through patches, and paints a block with the
    tokens of the matching line.  A block whose text doesn't match its line
    yet is left plain until the next patch arrives.
    """

    def __init__(self, document: QTextDocument, formats: TokenFormats | None = None) -> None:
        super().__init__(document)
        self._formats = formats if formats is not None else TokenFormats()
        self._lines: List[Line] = []
        self._logger = logging.getLogger("CodeEditorHighlighter")

    @property
    def lines(self) -> List[Line]:
        """The lines currently being painted."""
        return self._lines

    @property
    def formats(self) -> TokenFormats:
        """The token formats in use."""
        return self._formats

    def apply_patches(self, patches: Sequence[LinePatch]) -> None:
        """
        Update the painted lines and repaint the blocks that changed.

        Args:
            patches: Operations from a render pass
        """
        changed: Set[int] = {
            patch.line.line_id for patch in patches
            if patch.op in (LinePatchOp.INSERT, LinePatchOp.REPLACE)
        }

        apply_patch(self._lines, patches)
        if not changed:
            return

        document = self.document()
        for i, line in enumerate(self._lines):
            if line.line_id not in changed:
                continue

            block = document.findBlockByNumber(i)
            if block.isValid():
                self.rehighlightBlock(block)

    def highlightBlock(self, text: str) -> None:
        """Apply highlighting to the given block of text."""
        try:
            block_number = self.currentBlock().blockNumber()
            if block_number < 0 or block_number >= len(self._lines):
                return

            line = self._lines[block_number]
            if line.text != text:
                return

            for token in line.tokens:
                self.setFormat(token.start, len(token.value), self._formats.get_format(token.type))

        except Exception:
            self._logger.exception("highlighting exception")
