from pdbgeom.config import ATOM_NAME_COLUMNS, ELEMENT_COLUMNS, X_COLUMNS
from pdbgeom.services.pdb_records import (
    chain_id_field,
    is_atom_record,
    is_coordinate_record,
    iter_record_lines,
    parse_float_field,
    parse_int_field,
    residue_number_field,
    slice_field,
)
from pdbgeom.services.geometry import extract_residue_atoms
from pdbgeom.services.sequence import extract_sequence

from pdb_lines import atom_line


def test_atom_line_builder_matches_legacy_columns() -> None:
    line = atom_line("CA", "GLY", "B", 42, 1.5, -2.25, 3.0, element="C")
    assert len(line) == 78
    assert line[12:16] == " CA "
    assert line[17:20] == "GLY"
    assert line[21] == "B"
    assert line[22:26] == "  42"
    assert line[30:38] == "   1.500"
    assert line[76:78] == " C"


def test_slice_field_handles_short_lines() -> None:
    line = "ATOM      1  CA "
    assert slice_field(line, ATOM_NAME_COLUMNS) == " CA "
    assert slice_field(line, X_COLUMNS) == ""
    assert slice_field("ATOM      1  C", ATOM_NAME_COLUMNS) == " C"
    assert slice_field(line, ELEMENT_COLUMNS) == ""


def test_parse_float_field_rejects_blank_garbage_and_non_finite() -> None:
    assert parse_float_field(atom_line("N", x=12.5), X_COLUMNS) == 12.5
    assert parse_float_field(atom_line("N", x="        "), X_COLUMNS) is None
    assert parse_float_field(atom_line("N", x="   abc  "), X_COLUMNS) is None
    assert parse_float_field(atom_line("N", x="     nan"), X_COLUMNS) is None
    assert parse_float_field(atom_line("N", x="     inf"), X_COLUMNS) is None


def test_parse_int_field() -> None:
    assert parse_int_field(atom_line("N", resnum=-3), (22, 26)) == -3
    assert parse_int_field(atom_line("N", resnum="    "), (22, 26)) is None
    assert parse_int_field(atom_line("N", resnum="1x"), (22, 26)) is None


def test_record_kinds() -> None:
    assert is_atom_record(atom_line("CA"))
    assert not is_atom_record(atom_line("CA", record="HETATM"))
    assert is_coordinate_record(atom_line("CA", record="HETATM"))
    assert not is_coordinate_record("REMARK   1 ATOM")


def test_chain_and_residue_number_fields() -> None:
    assert chain_id_field(atom_line("CA", chain=" ")) == "A"
    assert chain_id_field(atom_line("CA", chain="H")) == "H"
    assert residue_number_field(atom_line("CA", resnum=1234)) == 1234


def test_iter_record_lines_accepts_crlf() -> None:
    text = atom_line("N") + "\r\n" + atom_line("CA") + "\r\n"
    lines = list(iter_record_lines(text))
    assert lines == [atom_line("N"), atom_line("CA"), ""]


def test_iter_record_lines_keeps_separator_characters_inside_records() -> None:
    for separator in ("\x0c", "\x0b", "\x1c", "\x85", " "):
        line = atom_line("CB", x=1.0, y=2.0, z=3.0)
        line = line[:8] + separator + line[9:]
        lines = list(iter_record_lines(atom_line("CA") + "\n" + line + "\n"))
        assert lines[1] == line
        assert len(lines[1]) == 78


def test_separator_in_serial_columns_does_not_lose_the_atom() -> None:
    ca = atom_line("CA", x=0.0, y=0.0, z=0.0)
    cb = atom_line("CB", x=1.0, y=2.0, z=3.0)
    cb = cb[:8] + "\x85" + cb[9:]
    text = ca + "\n" + cb + "\n"
    residues = extract_sequence(text).residues
    atoms = extract_residue_atoms(text, 0, residues)
    assert [atom.atom_name for atom in atoms] == ["CA", "CB"]
    assert atoms[1].coords == (1.0, 2.0, 3.0)


def test_numeric_fields_with_underscores_are_unparsable() -> None:
    assert parse_int_field(atom_line("N", resnum="1_0"), (22, 26)) is None
    assert parse_float_field(atom_line("N", x="   1_0.5"), X_COLUMNS) is None
    assert extract_sequence(atom_line("CA", resnum="1_0")).residues == ()
