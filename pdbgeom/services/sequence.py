"""Residue sequence extraction and one-letter sequence helpers.

``replace_sequence_fragment`` and ``is_valid_amino_acid_sequence`` are
library API for callers that edit an extracted sequence; the reports and
CLI only read sequences.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Set, Tuple

from pdbgeom.config import (
    ALPHA_CARBON_NAME,
    RESIDUE_NAME_COLUMNS,
    SEQUENCE_LINE_LENGTH,
    UNKNOWN_RESIDUE_LETTER,
)
from pdbgeom.errors import SequenceError
from pdbgeom.model.state import Residue, SequenceResult
from pdbgeom.services.pdb_records import (
    atom_name_field,
    chain_id_field,
    is_atom_record,
    iter_record_lines,
    residue_number_field,
    slice_field,
)

logger = logging.getLogger(__name__)

THREE_TO_ONE: Dict[str, str] = {
    "ALA": "A",
    "ARG": "R",
    "ASN": "N",
    "ASP": "D",
    "CYS": "C",
    "GLN": "Q",
    "GLU": "E",
    "GLY": "G",
    "HIS": "H",
    "ILE": "I",
    "LEU": "L",
    "LYS": "K",
    "MET": "M",
    "PHE": "F",
    "PRO": "P",
    "SER": "S",
    "THR": "T",
    "TRP": "W",
    "TYR": "Y",
    "VAL": "V",
    "ASX": "B",
    "GLX": "Z",
    "XAA": "X",
    "UNK": "X",
}

_VALID_SEQUENCE_RE = re.compile(r"[ACDEFGHIKLMNPQRSTVWYXZ]+", re.IGNORECASE)


def residue_letter(residue_name: str) -> str:
    """Map a three-letter residue name to its one-letter code (``X`` if unknown)."""
    return THREE_TO_ONE.get(residue_name, UNKNOWN_RESIDUE_LETTER)


def extract_sequence(pdb_text: object) -> SequenceResult:
    """Extract the residue sequence from PDB text.

    One ``ATOM`` record per residue contributes: the alpha carbon. Residues
    are keyed by ``(chain_id, pdb_index)`` and the first occurrence wins, so
    alternate locations and later models do not add duplicates.

    Parameters
    ----------
    pdb_text
        PDB text. Anything other than a non-empty string yields an empty
        result.

    Returns
    -------
    SequenceResult
        Residues in first-appearance order and the one-letter sequence.
    """

    if not pdb_text or not isinstance(pdb_text, str):
        return SequenceResult(sequence="", residues=())

    residues: List[Residue] = []
    seen: Set[Tuple[str, int]] = set()
    skipped = 0
    for line in iter_record_lines(pdb_text):
        if not is_atom_record(line) or atom_name_field(line) != ALPHA_CARBON_NAME:
            continue
        pdb_index = residue_number_field(line)
        if pdb_index is None:
            skipped += 1
            continue
        chain_id = chain_id_field(line)
        key = (chain_id, pdb_index)
        if key in seen:
            continue
        seen.add(key)
        residue_name = slice_field(line, RESIDUE_NAME_COLUMNS).strip()
        residues.append(
            Residue(
                index=len(residues),
                residue_letter=residue_letter(residue_name),
                residue_name=residue_name,
                pdb_index=pdb_index,
                chain_id=chain_id,
            )
        )

    if skipped:
        logger.debug("Skipped %d CA records with unreadable residue numbers", skipped)
    logger.debug("Extracted %d residues", len(residues))
    sequence = "".join(residue.residue_letter for residue in residues)
    return SequenceResult(sequence=sequence, residues=tuple(residues))


def replace_sequence_fragment(
    sequence: str, start: int, end: int, fragment: str
) -> str:
    """Replace ``sequence[start:end]`` with ``fragment``.

    Parameters
    ----------
    sequence
        Original one-letter sequence.
    start
        0-based start of the fragment.
    end
        0-based exclusive end of the fragment.
    fragment
        Replacement text, may differ in length.

    Returns
    -------
    str
        Edited sequence.

    Raises
    ------
    SequenceError
        If the range is empty, reversed or outside the sequence.
    """

    if start < 0 or end > len(sequence) or start >= end:
        raise SequenceError(
            "invalid_range",
            "Invalid fragment range",
            {"start": start, "end": end, "length": len(sequence)},
        )
    return sequence[:start] + fragment + sequence[end:]


def is_valid_amino_acid_sequence(sequence: object) -> bool:
    """Return True for a non-empty string of amino acid letters."""
    if not sequence or not isinstance(sequence, str):
        return False
    return bool(_VALID_SEQUENCE_RE.fullmatch(sequence))


def format_sequence(sequence: str, line_length: int = SEQUENCE_LINE_LENGTH) -> str:
    """Wrap a sequence into lines of ``line_length`` characters."""
    if line_length <= 0:
        raise ValueError(f"line_length must be positive, got {line_length}")
    if not sequence:
        return ""
    return "\n".join(
        sequence[start:start + line_length]
        for start in range(0, len(sequence), line_length)
    )
