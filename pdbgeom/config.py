"""Static configuration for pdbgeom."""

from __future__ import annotations

from typing import Tuple

APP_NAME = "pdbgeom"

# Fixed-column PDB fields (0-indexed, half-open).
ATOM_NAME_COLUMNS: Tuple[int, int] = (12, 16)
RESIDUE_NAME_COLUMNS: Tuple[int, int] = (17, 20)
CHAIN_ID_COLUMNS: Tuple[int, int] = (21, 22)
RESIDUE_NUMBER_COLUMNS: Tuple[int, int] = (22, 26)
X_COLUMNS: Tuple[int, int] = (30, 38)
Y_COLUMNS: Tuple[int, int] = (38, 46)
Z_COLUMNS: Tuple[int, int] = (46, 54)
OCCUPANCY_COLUMNS: Tuple[int, int] = (54, 60)
B_FACTOR_COLUMNS: Tuple[int, int] = (60, 66)
ELEMENT_COLUMNS: Tuple[int, int] = (76, 78)

ATOM_RECORD = "ATOM"
HETATM_RECORD = "HETATM"
ALPHA_CARBON_NAME = "CA"

DEFAULT_CHAIN_ID = "A"
DEFAULT_OCCUPANCY = 1.0
DEFAULT_B_FACTOR = 0.0
UNKNOWN_RESIDUE_LETTER = "X"

COORDINATE_DECIMALS = 3
DISTANCE_DECIMALS = 3
DISTANCE_UNIT = "Å"
DISTANCE_TABLE_LIMIT = 50
SEQUENCE_LINE_LENGTH = 60

COMMON_ATOM_NAMES: Tuple[str, ...] = ("CA", "CB", "N", "C", "O", "H")
