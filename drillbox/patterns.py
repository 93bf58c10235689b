"""Text patterns: half pyramids, pyramids, hollow pyramids and Pascal-style shapes.

Every function returns the pattern as a list of lines without line endings.
Lines keep the trailing separator each cell is drawn with. A height below one
gives an empty pattern.
"""

from __future__ import annotations

from itertools import chain


def _numbered_cells(count: int) -> str:
    return "".join(f"{col} " for col in range(1, count + 1))


def _pascal_row(peak: int) -> str:
    """Return the digits 1..peak..1 written side by side."""
    values = chain(range(1, peak + 1), range(peak - 1, 0, -1))
    return "".join(str(value) for value in values)


def half_pyramid_numbers(height: int) -> list[str]:
    """Rows counting 1..row, one more number on each row."""
    return [_numbered_cells(row) for row in range(1, height + 1)]


def half_pyramid_symbol(height: int) -> list[str]:
    """Rows of stars, one more star on each row."""
    return ["* " * row for row in range(1, height + 1)]


def hollow_pyramid(height: int) -> list[str]:
    """A centred pyramid drawn only by its outline."""
    lines = []
    for row in range(1, height + 1):
        indent = "  " * (height - row)
        if row == 1:
            body = "* "
        elif row == height:
            body = "* " * (2 * height - 1)
        else:
            body = "* " + "  " * (2 * (row - 1) - 1) + "* "
        lines.append(indent + body)
    return lines


def inverted_half_pyramid_numbers(height: int) -> list[str]:
    """Rows counting 1..row, one fewer number on each row."""
    return [_numbered_cells(row) for row in range(height, 0, -1)]


def inverted_half_pyramid_symbol(height: int) -> list[str]:
    """Rows of stars, one fewer star on each row."""
    return ["* " * row for row in range(height, 0, -1)]


def pascal_pyramid(height: int) -> list[str]:
    """A centred pyramid whose rows read 1, 121, 12321 and so on."""
    return [" " * (height - row) + _pascal_row(row) for row in range(1, height + 1)]


def pascal_diamond(height: int) -> list[str]:
    """A diamond of ``height`` rows whose rows read 1, 121, 12321 up to the middle and back."""
    if height < 1:
        return []
    top = height // 2 + 1
    lines = pascal_pyramid(top)
    for row in range(top + 1, height + 1):
        lines.append(" " * (row - top) + _pascal_row(height - row + 1))
    return lines


def pyramid_numbers(height: int) -> list[str]:
    """A centred pyramid whose rows count 1..2*row-1."""
    return [
        "  " * (height - row) + _numbered_cells(2 * row - 1)
        for row in range(1, height + 1)
    ]


def pyramid_symbol(height: int) -> list[str]:
    """A centred solid pyramid of stars."""
    return [" " * (height - row) + "*" * (2 * row - 1) for row in range(1, height + 1)]