"""Per-residue atom extraction and interatomic geometry."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from pdbgeom.config import (
    B_FACTOR_COLUMNS,
    COMMON_ATOM_NAMES,
    DEFAULT_B_FACTOR,
    DEFAULT_OCCUPANCY,
    ELEMENT_COLUMNS,
    OCCUPANCY_COLUMNS,
    X_COLUMNS,
    Y_COLUMNS,
    Z_COLUMNS,
)
from pdbgeom.model.state import Atom, AtomPairDistance, DistancePair, Point, Residue
from pdbgeom.services.pdb_records import (
    atom_name_field,
    chain_id_field,
    is_coordinate_record,
    iter_record_lines,
    parse_float_field,
    residue_number_field,
    slice_field,
)

logger = logging.getLogger(__name__)


def _element_symbol(line: str, atom_name: str) -> str:
    element = slice_field(line, ELEMENT_COLUMNS).strip()
    if element:
        return element
    return atom_name[:1]


def extract_residue_atoms(
    pdb_text: object,
    residue_index: int,
    residues: Sequence[Residue],
) -> List[Atom]:
    """Extract every atom that belongs to one residue.

    Both ``ATOM`` and ``HETATM`` records are scanned. A record belongs to the
    residue when its chain identifier (blank read as ``A``) and residue number
    match the residue selected by ``residue_index``.

    Parameters
    ----------
    pdb_text
        PDB text.
    residue_index
        0-based index into ``residues``.
    residues
        Residues from :func:`pdbgeom.services.sequence.extract_sequence`.

    Returns
    -------
    list
        Atoms in file order. Empty when the text or residues are empty or the
        index is out of range. Records with unreadable coordinates are left
        out.
    """

    if not pdb_text or not isinstance(pdb_text, str) or not residues:
        return []
    if isinstance(residue_index, bool) or not isinstance(residue_index, int):
        return []
    if residue_index < 0 or residue_index >= len(residues):
        logger.debug(
            "Residue index %d out of range for %d residues",
            residue_index,
            len(residues),
        )
        return []

    target = residues[residue_index]
    atoms: List[Atom] = []
    dropped = 0
    for line in iter_record_lines(pdb_text):
        if not is_coordinate_record(line):
            continue
        if chain_id_field(line) != target.chain_id:
            continue
        if residue_number_field(line) != target.pdb_index:
            continue
        x = parse_float_field(line, X_COLUMNS)
        y = parse_float_field(line, Y_COLUMNS)
        z = parse_float_field(line, Z_COLUMNS)
        if x is None or y is None or z is None:
            dropped += 1
            continue
        occupancy = parse_float_field(line, OCCUPANCY_COLUMNS)
        b_factor = parse_float_field(line, B_FACTOR_COLUMNS)
        atom_name = atom_name_field(line)
        atoms.append(
            Atom(
                atom_name=atom_name,
                element=_element_symbol(line, atom_name),
                x=x,
                y=y,
                z=z,
                occupancy=DEFAULT_OCCUPANCY if occupancy is None else occupancy,
                b_factor=DEFAULT_B_FACTOR if b_factor is None else b_factor,
                residue_name=target.residue_name,
                residue_index=residue_index,
                pdb_index=target.pdb_index,
                chain_id=target.chain_id,
            )
        )

    if dropped:
        logger.debug(
            "Dropped %d atoms with unreadable coordinates in %s:%d",
            dropped,
            target.chain_id,
            target.pdb_index,
        )
    return atoms


def calculate_distance(atom1: Atom, atom2: Atom) -> float:
    """Return the Euclidean distance between two atoms in Angstrom."""
    dx = atom1.x - atom2.x
    dy = atom1.y - atom2.y
    dz = atom1.z - atom2.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def calculate_atom_distances(atoms: Sequence[Atom]) -> List[DistancePair]:
    """Compute all pairwise distances within an atom set.

    Parameters
    ----------
    atoms
        Atoms of a single residue.

    Returns
    -------
    list
        ``N * (N - 1) / 2`` pairs sorted by ascending distance. Pairs with
        equal distances keep their ``(i, j)`` generation order.
    """

    if not atoms or len(atoms) < 2:
        return []

    pairs: List[DistancePair] = []
    for i, atom1 in enumerate(atoms):
        for atom2 in atoms[i + 1:]:
            pairs.append(
                DistancePair(
                    atom1=atom1.atom_name,
                    atom2=atom2.atom_name,
                    element1=atom1.element,
                    element2=atom2.element,
                    distance=calculate_distance(atom1, atom2),
                    atom1_full=atom1,
                    atom2_full=atom2,
                )
            )
    pairs.sort(key=lambda pair: pair.distance)
    return pairs


def distance_matrix(atoms: Sequence[Atom]) -> np.ndarray:
    """Return the symmetric ``N x N`` distance matrix for ``atoms``."""
    if not atoms:
        return np.zeros((0, 0), dtype=float)
    coords = np.array([atom.coords for atom in atoms], dtype=float)
    delta = coords[:, None, :] - coords[None, :, :]
    return np.sqrt((delta * delta).sum(axis=-1))


def _find_atom(atoms: Sequence[Atom], name: str) -> Optional[Atom]:
    wanted = name.strip()
    for atom in atoms:
        if atom.atom_name.strip() == wanted:
            return atom
    return None


def get_atom_pair_distance(
    atoms: Sequence[Atom], name1: str, name2: str
) -> Optional[AtomPairDistance]:
    """Look up the distance between two atoms by name.

    The first atom carrying each name is used, so alternate locations resolve
    to whichever appears first in ``atoms``.

    Parameters
    ----------
    atoms
        Atoms of a single residue.
    name1, name2
        Atom names, compared after stripping whitespace.

    Returns
    -------
    AtomPairDistance or None
        None when either name is missing.
    """

    if not atoms or name1 is None or name2 is None:
        return None
    atom1 = _find_atom(atoms, name1)
    atom2 = _find_atom(atoms, name2)
    if atom1 is None or atom2 is None:
        return None
    return AtomPairDistance(
        atom1=atom1, atom2=atom2, distance=calculate_distance(atom1, atom2)
    )


def parse_pair_query(text: object) -> Optional[Tuple[str, str]]:
    """Split a ``"CB-H"`` style lookup into two atom names."""
    if not text or not isinstance(text, str):
        return None
    parts = [part.strip() for part in text.strip().split("-")]
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


def common_pair_distances(
    atoms: Sequence[Atom],
    names: Sequence[str] = COMMON_ATOM_NAMES,
) -> List[AtomPairDistance]:
    """Return distances between commonly inspected atoms that are present.

    Pairs are visited in the nested order of ``names`` and only kept when the
    first name sorts before the second, so each unordered pair appears once.
    """

    results: List[AtomPairDistance] = []
    for name1 in names:
        for name2 in names:
            if name1 >= name2:
                continue
            pair = get_atom_pair_distance(atoms, name1, name2)
            if pair is not None:
                results.append(pair)
    return results


def calculate_centroid(atoms: Sequence[Atom]) -> Point:
    """Return the arithmetic mean position, or the origin for no atoms."""
    if not atoms:
        return Point(x=0.0, y=0.0, z=0.0)
    coords = np.array([atom.coords for atom in atoms], dtype=float)
    x, y, z = coords.mean(axis=0).tolist()
    return Point(x=x, y=y, z=z)
