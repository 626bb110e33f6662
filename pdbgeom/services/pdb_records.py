"""Fixed-column field access for legacy PDB record lines."""

from __future__ import annotations

import math
from typing import Iterator, Optional, Tuple

from pdbgeom.config import (
    ATOM_NAME_COLUMNS,
    ATOM_RECORD,
    CHAIN_ID_COLUMNS,
    DEFAULT_CHAIN_ID,
    HETATM_RECORD,
    RESIDUE_NUMBER_COLUMNS,
)


def iter_record_lines(text: str) -> Iterator[str]:
    """Yield the lines of a PDB text block.

    Parameters
    ----------
    text
        PDB text with ``\\n`` or ``\\r\\n`` line endings.

    Returns
    -------
    iterator
        Lines without their terminators. Only ``\\n`` ends a line, so form
        feeds and other separator characters stay inside their record.
    """

    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


def is_atom_record(line: str) -> bool:
    """Return True for standard ``ATOM`` records."""
    return line.startswith(ATOM_RECORD)


def is_coordinate_record(line: str) -> bool:
    """Return True for ``ATOM`` and ``HETATM`` records."""
    return line.startswith(ATOM_RECORD) or line.startswith(HETATM_RECORD)


def slice_field(line: str, columns: Tuple[int, int]) -> str:
    """Return the raw text of a fixed-width field.

    Parameters
    ----------
    line
        Record line.
    columns
        0-indexed, half-open ``(start, end)`` column range.

    Returns
    -------
    str
        Field text, truncated when the line is short, empty when the line
        ends before ``start``.
    """

    start, end = columns
    if start >= len(line):
        return ""
    return line[start:min(end, len(line))]


def parse_int_field(line: str, columns: Tuple[int, int]) -> Optional[int]:
    """Parse an integer field, returning None when blank or malformed."""
    raw = slice_field(line, columns).strip()
    if not raw or "_" in raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def parse_float_field(line: str, columns: Tuple[int, int]) -> Optional[float]:
    """Parse a finite float field.

    Parameters
    ----------
    line
        Record line.
    columns
        0-indexed, half-open column range.

    Returns
    -------
    float or None
        Parsed value, or None when the field is blank, malformed, NaN or
        infinite.
    """

    raw = slice_field(line, columns).strip()
    if not raw or "_" in raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def atom_name_field(line: str) -> str:
    return slice_field(line, ATOM_NAME_COLUMNS).strip()


def chain_id_field(line: str) -> str:
    """Return the chain identifier, defaulting blank chains to ``A``."""
    return slice_field(line, CHAIN_ID_COLUMNS).strip() or DEFAULT_CHAIN_ID


def residue_number_field(line: str) -> Optional[int]:
    return parse_int_field(line, RESIDUE_NUMBER_COLUMNS)
