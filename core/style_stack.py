"""
Style stack for nested inline tags.

Each open tag pushes a copy of the current style; the copy is handed to
the segment opened with the tag, so the stack only keeps references.
Popping drops the reference and yields a fresh copy of the ancestor
style for the text that follows the closing tag.
"""

from typing import List, Optional
from core.text_style import TextStyle
from utils.logging_config import get_logger

logger = get_logger(__name__)


class StyleStack:
    """Nesting record of the currently open style-affecting tags."""

    def __init__(self):
        """Initialize an empty stack."""
        self._frames: List[TextStyle] = []

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def top(self) -> Optional[TextStyle]:
        """Style of the innermost open tag, or None."""
        return self._frames[-1] if self._frames else None

    def _snapshot(self) -> TextStyle:
        top = self.top
        return top.duplicate() if top is not None else TextStyle()

    def push(self) -> TextStyle:
        """
        Open a nesting level.

        Returns:
            A copy of the current top style (or a default style) that the
            caller owns and mutates for the tag being opened
        """
        style = self._snapshot()
        self._frames.append(style)
        return style

    def pop(self) -> TextStyle:
        """
        Close the innermost nesting level.

        A pop on an empty stack is a no-op; the caller still gets a
        default style for the following text.

        Returns:
            An independent copy of the style now on top, or a default
            style when no tag remains open
        """
        if self._frames:
            self._frames.pop()
        else:
            logger.debug("Closing tag without a matching opening tag")
        return self._snapshot()
