"""pdbgeom command-line entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from pdbgeom import config
from pdbgeom.errors import PdbgeomError, ReportError, error_result
from pdbgeom.logging_config import configure_logging
from pdbgeom.services.report import residue_report, sequence_report

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=config.APP_NAME,
        description="Extract the sequence and per-residue atom geometry from a PDB file",
    )
    parser.add_argument("pdb_path", help="Path to a PDB file")
    parser.add_argument(
        "--residue",
        dest="residue_index",
        type=int,
        default=None,
        help="0-based residue index to report atoms and distances for",
    )
    parser.add_argument(
        "--pair",
        dest="pair",
        default=None,
        help="Atom pair to look up in the selected residue, e.g. N-CA",
    )
    parser.add_argument(
        "--limit",
        dest="limit",
        type=int,
        default=config.DISTANCE_TABLE_LIMIT,
        help="Maximum number of distance rows (negative for all)",
    )
    parser.add_argument(
        "--matrix",
        dest="matrix",
        action="store_true",
        help="Include the full distance matrix in the residue report",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write logs to this file instead of stderr",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv[1:])


def read_pdb_text(path: str) -> str:
    """Read a PDB file as text.

    Parameters
    ----------
    path
        Path to the PDB file.

    Returns
    -------
    str
        File contents.

    Raises
    ------
    ReportError
        If the file is missing or unreadable.
    """

    pdb_path = Path(path)
    if not pdb_path.is_file():
        raise ReportError("file_not_found", "PDB file not found", path)
    try:
        return pdb_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ReportError("read_failed", "Failed to read PDB file", str(exc)) from exc


def run(args: argparse.Namespace) -> Dict[str, object]:
    """Build the payload requested by parsed CLI arguments."""
    try:
        pdb_text = read_pdb_text(args.pdb_path)
        if args.residue_index is None:
            if args.pair:
                raise ReportError("invalid_input", "--pair requires --residue")
            return sequence_report(pdb_text)
        limit: Optional[int] = args.limit if args.limit >= 0 else None
        return residue_report(
            pdb_text,
            args.residue_index,
            pair=args.pair,
            limit=limit,
            include_matrix=args.matrix,
        )
    except PdbgeomError as exc:
        logger.error("%s: %s", exc.code, exc.message)
        return exc.to_result()
    except Exception as exc:
        logger.exception("Unexpected error")
        return error_result("unexpected", "Unexpected error", str(exc))


def main(argv: Optional[list[str]] = None) -> int:
    """Run the pdbgeom CLI.

    Parameters
    ----------
    argv
        Full argument vector including the program name. Defaults to
        ``sys.argv``.

    Returns
    -------
    int
        0 on success, 1 when an error payload was printed.
    """

    args = _parse_args(sys.argv if argv is None else argv)
    configure_logging(args.log_file, logging.DEBUG if args.verbose else logging.WARNING)
    logger.debug("Reading %s", args.pdb_path)
    result = run(args)
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0 if result.get("ok") else 1


if __name__ == "__main__":
    sys.exit(main())
