"""Text layer: the indentation oracle and line algebra.

Key Components:
    indent_width_at: Indentation width of a line, 0 for the virtual root
    insert_after: The only primitive that grows a buffer
    split_lines / join_lines: Conversion between text and line sequences
"""

from .lines import (
    ROOT_ADDRESS,
    Lines,
    indent_width_at,
    insert_after,
    is_valid_address,
    join_lines,
    line_at,
    line_count,
    make_indent,
    split_lines,
)

__all__ = [
    "ROOT_ADDRESS",
    "Lines",
    "indent_width_at",
    "insert_after",
    "is_valid_address",
    "join_lines",
    "line_at",
    "line_count",
    "make_indent",
    "split_lines",
]
