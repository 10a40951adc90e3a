"""
JSON file access for catalog input and output.

Every failure here is fatal and surfaces as an AssetParserError subclass
carrying the offending path.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Tuple, Union

from asset_parser.core.errors import InputFileError, OutputFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

TMP_SUFFIX = ".tmp"


def read_json_file(path: PathLike) -> Any:
    """
    Read and parse a JSON file.

    Raises:
        InputFileError: If the file is missing, unreadable, or not valid JSON
    """
    path = Path(path)
    if not path.is_file():
        raise InputFileError(f"Input file not found: {path}", path=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InputFileError(f"Failed to parse JSON in {path}: {e}", path=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Failed to read {path}: {e}", path=str(path)) from e

    logger.debug(f"Read {path}")
    return data


def write_json_file(data: Any, path: PathLike, indent: int = 4) -> Path:
    """
    Write data as pretty-printed UTF-8 JSON with a trailing newline.

    Returns:
        Path to the written file

    Raises:
        OutputFileError: If the directory or file cannot be created
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        raise OutputFileError(f"Failed to write {path}: {e}", path=str(path)) from e

    logger.debug(f"Wrote {path}")
    return path


def write_json_files(outputs: List[Tuple[Any, PathLike]], indent: int = 4) -> List[Path]:
    """
    Write several JSON files so that either all of them land or none do.

    Each file is first written next to its target with a ".tmp" suffix;
    targets are only replaced once every temporary file was written.

    Returns:
        Paths to the written files, in the order given

    Raises:
        OutputFileError: If any file cannot be written or moved into place
    """
    staged: List[Tuple[Path, Path]] = []
    try:
        for data, path in outputs:
            path = Path(path)
            tmp_path = path.with_name(path.name + TMP_SUFFIX)
            staged.append((tmp_path, path))
            write_json_file(data, tmp_path, indent=indent)
    except OutputFileError:
        _remove_quietly(tmp for tmp, _ in staged)
        raise

    replaced: List[Path] = []
    try:
        for tmp_path, path in staged:
            tmp_path.replace(path)
            replaced.append(path)
    except OSError as e:
        _remove_quietly(replaced)
        _remove_quietly(tmp for tmp, _ in staged)
        raise OutputFileError(f"Failed to move {tmp_path} into place: {e}", path=str(path)) from e

    for path in replaced:
        logger.info(f"Saved to: {path}")
    return replaced


def _remove_quietly(paths: Iterable[Path]) -> None:
    for path in paths:
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove {path}: {e}")
