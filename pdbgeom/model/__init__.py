"""Model package exports."""

from pdbgeom.model.state import (
    Atom,
    AtomPairDistance,
    DistancePair,
    Point,
    Residue,
    SequenceResult,
)

__all__ = [
    "Atom",
    "AtomPairDistance",
    "DistancePair",
    "Point",
    "Residue",
    "SequenceResult",
]
