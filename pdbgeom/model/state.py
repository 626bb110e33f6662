"""Dataclasses for parsed structure records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Residue:
    """One residue of the extracted sequence.

    Attributes
    ----------
    index
        0-based position in sequence order.
    residue_letter
        One-letter amino acid code.
    residue_name
        Three-letter residue name as written in the file.
    pdb_index
        Author-assigned residue number.
    chain_id
        Chain identifier.
    """

    index: int
    residue_letter: str
    residue_name: str
    pdb_index: int
    chain_id: str

    @property
    def key(self) -> Tuple[str, int]:
        return (self.chain_id, self.pdb_index)

    def to_dict(self) -> Dict[str, object]:
        """Serialize residue metadata.

        Returns
        -------
        dict
            JSON-ready residue metadata.
        """
        return {
            "index": self.index,
            "residue_letter": self.residue_letter,
            "residue_name": self.residue_name,
            "pdb_index": self.pdb_index,
            "chain_id": self.chain_id,
        }


@dataclass(frozen=True)
class Atom:
    """One atom of a selected residue.

    Attributes
    ----------
    atom_name
        Trimmed atom name.
    element
        Element symbol.
    x, y, z
        Cartesian coordinates in Angstrom.
    occupancy
        Occupancy, 1.0 when the field is missing.
    b_factor
        Temperature factor, 0.0 when the field is missing.
    residue_name
        Three-letter name of the owning residue.
    residue_index
        0-based sequence index of the owning residue.
    pdb_index
        Author-assigned residue number.
    chain_id
        Chain identifier.
    """

    atom_name: str
    element: str
    x: float
    y: float
    z: float
    occupancy: float
    b_factor: float
    residue_name: str
    residue_index: int
    pdb_index: int
    chain_id: str

    @property
    def coords(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> Dict[str, object]:
        """Serialize atom metadata.

        Returns
        -------
        dict
            JSON-ready atom metadata.
        """
        return {
            "atom_name": self.atom_name,
            "element": self.element,
            "coords": {"x": self.x, "y": self.y, "z": self.z},
            "occupancy": self.occupancy,
            "b_factor": self.b_factor,
            "residue_name": self.residue_name,
            "residue_index": self.residue_index,
            "pdb_index": self.pdb_index,
            "chain_id": self.chain_id,
        }


@dataclass(frozen=True)
class DistancePair:
    """Distance between two atoms of the same residue.

    Attributes
    ----------
    atom1, atom2
        Atom names.
    element1, element2
        Element symbols.
    distance
        Euclidean distance in Angstrom.
    atom1_full, atom2_full
        Full atom records.
    """

    atom1: str
    atom2: str
    element1: str
    element2: str
    distance: float
    atom1_full: Atom
    atom2_full: Atom

    def to_dict(self) -> Dict[str, object]:
        return {
            "atom1": self.atom1,
            "atom2": self.atom2,
            "element1": self.element1,
            "element2": self.element2,
            "distance": self.distance,
        }


@dataclass(frozen=True)
class AtomPairDistance:
    """Result of a named atom pair lookup."""

    atom1: Atom
    atom2: Atom
    distance: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "atom1": self.atom1.atom_name,
            "atom2": self.atom2.atom_name,
            "distance": self.distance,
        }


@dataclass(frozen=True)
class Point:
    """Cartesian point in Angstrom."""

    x: float
    y: float
    z: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True)
class SequenceResult:
    """Residues and one-letter sequence extracted from PDB text.

    Attributes
    ----------
    sequence
        Concatenated one-letter codes.
    residues
        Residues in first-appearance order.
    """

    sequence: str
    residues: Tuple[Residue, ...]

    @property
    def length(self) -> int:
        return len(self.sequence)
