"""Text offsets and ranges."""

from sqlcst.text.text import TextRange, slice_text_range

__all__ = ["TextRange", "slice_text_range"]
