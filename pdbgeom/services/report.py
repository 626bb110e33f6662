"""JSON-ready payloads combining sequence and residue geometry."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from pdbgeom.config import DISTANCE_TABLE_LIMIT
from pdbgeom.errors import error_result
from pdbgeom.services.geometry import (
    calculate_atom_distances,
    calculate_centroid,
    common_pair_distances,
    distance_matrix,
    extract_residue_atoms,
    get_atom_pair_distance,
    parse_pair_query,
)
from pdbgeom.services.formatting import format_distance
from pdbgeom.services.sequence import extract_sequence, format_sequence
from pdbgeom.services.tables import atoms_table, distances_table

logger = logging.getLogger(__name__)


def sequence_report(pdb_text: str) -> Dict[str, object]:
    """Return the extracted sequence and residue list.

    Parameters
    ----------
    pdb_text
        PDB text.

    Returns
    -------
    dict
        Payload with sequence, length, residues and the wrapped sequence.
    """

    result = extract_sequence(pdb_text)
    return {
        "ok": True,
        "sequence": result.sequence,
        "length": result.length,
        "formatted": format_sequence(result.sequence),
        "residues": [residue.to_dict() for residue in result.residues],
    }


def residue_report(
    pdb_text: str,
    residue_index: int,
    pair: Optional[str] = None,
    limit: Optional[int] = DISTANCE_TABLE_LIMIT,
    include_matrix: bool = False,
) -> Dict[str, object]:
    """Return atoms, distances and centroid for one residue.

    Parameters
    ----------
    pdb_text
        PDB text.
    residue_index
        0-based index into the extracted residue list.
    pair
        Optional ``"NAME1-NAME2"`` lookup.
    limit
        Maximum number of distance rows.
    include_matrix
        Include the full N x N distance matrix.

    Returns
    -------
    dict
        Residue payload, or an error payload for a bad index or pair query.
    """

    residues = extract_sequence(pdb_text).residues
    if (
        isinstance(residue_index, bool)
        or not isinstance(residue_index, int)
        or not 0 <= residue_index < len(residues)
    ):
        logger.debug("residue_report index=%s outside %d residues", residue_index, len(residues))
        return error_result(
            "invalid_residue_index",
            "Residue index out of range",
            {"residue_index": residue_index, "count": len(residues)},
        )

    pair_names = None
    if pair is not None:
        pair_names = parse_pair_query(pair)
        if pair_names is None:
            return error_result(
                "invalid_pair_query", "Pair must look like NAME1-NAME2", pair
            )

    atoms = extract_residue_atoms(pdb_text, residue_index, residues)
    distances = calculate_atom_distances(atoms)
    centroid = calculate_centroid(atoms)
    common = common_pair_distances(atoms)

    pair_payload = None
    if pair_names is not None:
        found = get_atom_pair_distance(atoms, *pair_names)
        pair_payload = {
            "atom1": pair_names[0],
            "atom2": pair_names[1],
            "found": found is not None,
            "distance": found.distance if found else None,
            "label": format_distance(found.distance) if found else None,
        }

    matrix_payload = None
    if include_matrix:
        matrix_payload = {
            "atoms": [atom.atom_name for atom in atoms],
            "values": distance_matrix(atoms).tolist(),
        }

    logger.debug(
        "residue_report index=%d atoms=%d pairs=%d",
        residue_index,
        len(atoms),
        len(distances),
    )
    return {
        "ok": True,
        "residue": residues[residue_index].to_dict(),
        "atoms": atoms_table(atoms),
        "distances": distances_table(distances, limit=limit),
        "centroid": centroid.to_dict(),
        "common_pairs": [
            dict(item.to_dict(), label=format_distance(item.distance))
            for item in common
        ],
        "pair": pair_payload,
        "matrix": matrix_payload,
    }
