"""Column/row tables for atoms and distances."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from pdbgeom.config import COORDINATE_DECIMALS, DISTANCE_TABLE_LIMIT
from pdbgeom.model.state import Atom, DistancePair
from pdbgeom.services.formatting import format_coordinate, format_distance

ATOM_COLUMNS = [
    "atom_name",
    "element",
    "x",
    "y",
    "z",
    "occupancy",
    "b_factor",
]
DISTANCE_COLUMNS = [
    "atom1",
    "element1",
    "atom2",
    "element2",
    "distance",
    "distance_label",
]


def build_atom_frame(atoms: Sequence[Atom]) -> pd.DataFrame:
    """Return a DataFrame with one row per atom in input order."""
    records = [
        {
            "atom_name": atom.atom_name,
            "element": atom.element,
            "x": atom.x,
            "y": atom.y,
            "z": atom.z,
            "occupancy": atom.occupancy,
            "b_factor": atom.b_factor,
        }
        for atom in atoms
    ]
    return pd.DataFrame.from_records(records, columns=ATOM_COLUMNS)


def build_distance_frame(pairs: Sequence[DistancePair]) -> pd.DataFrame:
    """Return a DataFrame with one row per distance pair in input order."""
    records = [
        {
            "atom1": pair.atom1,
            "element1": pair.element1,
            "atom2": pair.atom2,
            "element2": pair.element2,
            "distance": pair.distance,
            "distance_label": format_distance(pair.distance),
        }
        for pair in pairs
    ]
    return pd.DataFrame.from_records(records, columns=DISTANCE_COLUMNS)


def atoms_table(atoms: Sequence[Atom]) -> Dict[str, object]:
    """Build the atom table payload.

    Parameters
    ----------
    atoms
        Atoms of a single residue.

    Returns
    -------
    dict
        ``columns`` and ``rows``, plus ``labels`` holding coordinates
        formatted for display.
    """

    df = build_atom_frame(atoms)
    table = _df_to_table(df)
    table["labels"] = [
        {
            "x": format_coordinate(atom.x),
            "y": format_coordinate(atom.y),
            "z": format_coordinate(atom.z),
            "b_factor": format_coordinate(atom.b_factor, 2),
        }
        for atom in atoms
    ]
    table["decimals"] = COORDINATE_DECIMALS
    return table


def distances_table(
    pairs: Sequence[DistancePair],
    limit: Optional[int] = DISTANCE_TABLE_LIMIT,
) -> Dict[str, object]:
    """Build the distance table payload.

    Parameters
    ----------
    pairs
        Distance pairs, already sorted.
    limit
        Maximum number of rows to include. ``None`` keeps every row.

    Returns
    -------
    dict
        ``columns``, ``rows``, ``total`` and ``truncated``.
    """

    df = build_distance_frame(pairs)
    total = len(df)
    if limit is not None and limit >= 0:
        df = df.head(limit)
    table = _df_to_table(df)
    table["total"] = total
    table["truncated"] = len(df) < total
    return table


def _df_to_table(df: pd.DataFrame) -> Dict[str, object]:
    safe = df.astype(object).where(pd.notnull(df), None)
    columns = [str(col) for col in safe.columns]
    rows: List[List[object]] = [
        [_to_native(value) for value in row] for row in safe.itertuples(index=False)
    ]
    return {"columns": columns, "rows": rows}


def _to_native(value: object) -> Optional[object]:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, (np.integer, np.floating)):
        return value.item()
    if isinstance(value, np.bool_):
        return bool(value)
    return value
