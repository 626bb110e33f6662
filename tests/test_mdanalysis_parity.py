from pathlib import Path
import warnings

import numpy as np
import pytest

from pdbgeom.services.geometry import distance_matrix, extract_residue_atoms
from pdbgeom.services.sequence import extract_sequence


def test_residues_and_coordinates_match_mdanalysis() -> None:
    mda = pytest.importorskip("MDAnalysis")
    pdb_path = Path(__file__).resolve().parents[1] / "tests" / "data" / "agv.pdb"
    assert pdb_path.exists()
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        universe = mda.Universe(str(pdb_path))

    text = pdb_path.read_text(encoding="utf-8")
    result = extract_sequence(text)
    calphas = universe.select_atoms("name CA")
    assert [r.residue_name for r in result.residues] == [str(n) for n in calphas.resnames]
    assert [r.pdb_index for r in result.residues] == [int(i) for i in calphas.resids]

    for residue in result.residues:
        ours = extract_residue_atoms(text, residue.index, result.residues)
        theirs = universe.select_atoms(f"resid {residue.pdb_index}")
        assert [atom.atom_name for atom in ours] == [str(n) for n in theirs.names]
        coords = np.array([atom.coords for atom in ours])
        assert np.allclose(coords, theirs.positions, atol=1e-3)

        delta = theirs.positions[:, None, :] - theirs.positions[None, :, :]
        reference = np.sqrt((delta * delta).sum(axis=-1))
        assert np.allclose(distance_matrix(ours), reference, atol=1e-3)
