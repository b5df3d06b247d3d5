"""Line-number gutter rendering."""

from __future__ import annotations

from typing import List, Sequence

from .stats import count_lines

DEFAULT_GUTTER_WIDTH = 4


def render_line_numbers(
    total_lines: int,
    visible_height: int,
    top_row: int,
    *,
    word_wrap: bool = False,
    width: int = DEFAULT_GUTTER_WIDTH,
) -> List[str]:
    """Return one right-aligned label per visible row.

    Rows past the end of the document get a blank label of the same width.

    With ``word_wrap`` enabled the labels are still numbered sequentially
    from ``top_row``, so a wrapped line shows more than one number.
    """

    if visible_height <= 0:
        return []
    top = max(0, top_row)
    if word_wrap:
        return _wrapped_labels(total_lines, visible_height, top, width)
    return _sequential_labels(total_lines, visible_height, top, width)


def _sequential_labels(
    total_lines: int, visible_height: int, top_row: int, width: int
) -> List[str]:
    labels: List[str] = []
    for row in range(visible_height):
        line_number = top_row + row + 1
        if line_number <= total_lines:
            labels.append(f"{line_number:>{width}}")
        else:
            labels.append(" " * width)
    return labels


def _wrapped_labels(
    total_lines: int, visible_height: int, top_row: int, width: int
) -> List[str]:
    # Same numbering as the unwrapped view on purpose.
    return _sequential_labels(total_lines, visible_height, top_row, width)


def format_gutter(labels: Sequence[str]) -> str:
    return "\n".join(labels)


def gutter_for_text(
    text: str,
    visible_height: int,
    top_row: int,
    *,
    word_wrap: bool = False,
    width: int = DEFAULT_GUTTER_WIDTH,
) -> str:
    labels = render_line_numbers(
        count_lines(text),
        visible_height,
        top_row,
        word_wrap=word_wrap,
        width=width,
    )
    return format_gutter(labels)


__all__ = [
    "DEFAULT_GUTTER_WIDTH",
    "render_line_numbers",
    "format_gutter",
    "gutter_for_text",
]
