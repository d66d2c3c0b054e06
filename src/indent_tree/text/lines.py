"""Line-level primitives over an indented text buffer.

A buffer is an immutable sequence of lines. Addresses are 1-based; address 0
is the virtual root and never denotes a real line. Nothing here raises on an
out-of-range address: the indentation oracle treats such an address as an
unindented, absent line and the splice clamps it into range.
"""

from typing import Iterable, List, Sequence, Tuple

Lines = Sequence[str]

ROOT_ADDRESS = 0


def line_count(lines: Lines) -> int:
    """Return the number of lines in the buffer."""
    return len(lines)


def is_valid_address(lines: Lines, address: int) -> bool:
    """Return True when ``address`` denotes a real line."""
    return 1 <= address <= len(lines)


def line_at(lines: Lines, address: int) -> str:
    """Return the raw line at ``address``, or ``""`` when there is none."""
    if not is_valid_address(lines, address):
        return ""
    return lines[address - 1]


def indent_width_at(lines: Lines, address: int, indent_char: str = " ") -> int:
    """Return the width of the leading run of ``indent_char`` at ``address``.

    The virtual root and addresses outside the buffer have width 0.
    """
    if not is_valid_address(lines, address):
        return 0
    line = lines[address - 1]
    return len(line) - len(line.lstrip(indent_char))


def make_indent(width: int, indent_char: str = " ") -> str:
    """Return ``width`` copies of ``indent_char`` (empty for width <= 0)."""
    return indent_char * max(width, 0)


def split_lines(text: str) -> List[str]:
    """Split text into lines; a single trailing newline adds no line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def join_lines(lines: Iterable[str]) -> str:
    """Join lines back into the textual form of the buffer."""
    return "\n".join(lines)


def insert_after(
    lines: Lines,
    address: int,
    text: str,
    indent: int,
    indent_char: str = " "
) -> Tuple[str, ...]:
    """Splice ``text`` into the buffer right after line ``address``.

    Every inserted line is prefixed with exactly ``indent`` copies of
    ``indent_char``, so relative indentation inside ``text`` is preserved.
    Each inserted line shifts every later address down by one. The input
    buffer is left untouched and a new tuple is returned.
    """
    position = min(max(address, ROOT_ADDRESS), len(lines))
    prefix = make_indent(indent, indent_char)
    inserted = [prefix + line for line in split_lines(text)]
    return tuple(lines[:position]) + tuple(inserted) + tuple(lines[position:])


def _remove_lines(lines: Lines, addresses: Iterable[int]) -> Tuple[str, ...]:
    """Return the buffer without the lines at ``addresses``.

    Addresses that do not denote a real line are ignored.
    """
    doomed = set(addresses)
    return tuple(
        line for address, line in enumerate(lines, start=1)
        if address not in doomed
    )
