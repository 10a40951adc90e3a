"""
Bundled reference catalogs: valid unit symbols and valid asset type ids.

Both tables ship inside this package and are loaded once per process.
They are trusted static data, so a malformed line is a fatal
ReferenceDataError rather than a validation finding.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet

from asset_parser.core.errors import ReferenceDataError

logger = logging.getLogger(__name__)

REFERENCE_DIR = Path(__file__).parent
UNITS_FILE = REFERENCE_DIR / "units.txt"
ASSET_TYPES_FILE = REFERENCE_DIR / "asset_types.txt"

COMMENT_PREFIX = "--"


def _read_reference_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ReferenceDataError(f"Cannot read reference table {path.name}: {e}", path=str(path)) from e


def parse_units(text: str) -> FrozenSet[str]:
    """
    Parse a units table into a flat set of valid unit symbols.

    Blank lines and lines starting with "--" are ignored. Every other line
    is a comma-separated group of interchangeable symbols, each of which is
    added to the set on its own.
    """
    units = set()
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        units.update(symbol.strip() for symbol in line.split(",") if symbol.strip())
    return frozenset(units)


def parse_asset_type_ids(text: str) -> FrozenSet[int]:
    """
    Parse an asset type table (one non-negative integer per line).

    Blank lines are skipped.

    Raises:
        ReferenceDataError: If any other line is not a non-negative integer
    """
    ids = set()
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        if not (line.isascii() and line.isdigit()):
            raise ReferenceDataError(
                f"Invalid asset type id on line {line_number}: '{line}'"
            )
        ids.add(int(line))
    return frozenset(ids)


@lru_cache(maxsize=None)
def load_units() -> FrozenSet[str]:
    """Load the bundled unit catalog."""
    units = parse_units(_read_reference_file(UNITS_FILE))
    logger.debug(f"Loaded {len(units)} unit symbols from {UNITS_FILE.name}")
    return units


@lru_cache(maxsize=None)
def load_asset_type_ids() -> FrozenSet[int]:
    """Load the bundled asset type catalog."""
    ids = parse_asset_type_ids(_read_reference_file(ASSET_TYPES_FILE))
    logger.debug(f"Loaded {len(ids)} asset type ids from {ASSET_TYPES_FILE.name}")
    return ids
