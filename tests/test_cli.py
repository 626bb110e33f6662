import json
import logging
from pathlib import Path

from pdbgeom import config
from pdbgeom.app import _parse_args, main
from pdbgeom.logging_config import configure_logging

FIXTURE = Path(__file__).resolve().parents[1] / "tests" / "data" / "agv.pdb"


def test_parse_args_defaults() -> None:
    args = _parse_args(["pdbgeom", "example.pdb"])
    assert args.pdb_path == "example.pdb"
    assert args.residue_index is None
    assert args.pair is None
    assert args.limit == config.DISTANCE_TABLE_LIMIT
    assert not args.matrix


def test_parse_args_residue_and_pair() -> None:
    args = _parse_args(["pdbgeom", "example.pdb", "--residue", "2", "--pair", "N-CA"])
    assert args.residue_index == 2
    assert args.pair == "N-CA"


def test_main_prints_sequence(capsys) -> None:
    code = main(["pdbgeom", str(FIXTURE)])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["sequence"] == "AGV"


def test_main_prints_residue_report(capsys) -> None:
    code = main(["pdbgeom", str(FIXTURE), "--residue", "0", "--pair", "N-CA", "--limit", "-1"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["pair"]["label"] == "1.503 Å"
    assert payload["distances"]["total"] == 10


def test_main_reports_missing_file(tmp_path, capsys) -> None:
    code = main(["pdbgeom", str(tmp_path / "missing.pdb")])
    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["error"]["code"] == "file_not_found"


def test_main_rejects_pair_without_residue(capsys) -> None:
    code = main(["pdbgeom", str(FIXTURE), "--pair", "N-CA"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["error"]["code"] == "invalid_input"


def test_main_writes_log_file(tmp_path, capsys) -> None:
    log_path = tmp_path / "pdbgeom.log"
    code = main(["pdbgeom", str(FIXTURE), "--verbose", "--log-file", str(log_path)])
    capsys.readouterr()
    assert code == 0
    assert "Extracted 3 residues" in log_path.read_text(encoding="utf-8")


def test_configure_logging_leaves_third_party_loggers_alone(tmp_path) -> None:
    third_party = logging.getLogger("MDAnalysis")
    before = third_party.level
    configure_logging(str(tmp_path / "pdbgeom.log"))
    assert third_party.level == before
