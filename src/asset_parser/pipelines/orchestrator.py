#!/usr/bin/env python3
"""
Catalog Orchestrator - Normalize and validate sensor and asset catalogs.

Runs a single linear pass:

    reading_inputs -> normalizing -> validating_sensors
        -> [findings? failed_validation] -> validating_assets
        -> [findings? failed_validation] -> writing_outputs -> completed

Asset validation only runs on a clean sensor catalog, since sensor
references cannot be checked against unreliable data. Output files are
written only when both catalogs produced no findings.

Usage:
    asset-parser assets.json sensors.json
    asset-parser assets.json sensors.json --output-dir ./catalog --verbose
    asset-parser assets.json sensors.json --dry-run
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, AbstractSet, Dict, List, Optional

from asset_parser.core import config
from asset_parser.core.errors import AssetParserError
from asset_parser.core.files import read_json_file, write_json_files
from asset_parser.core.normalizer import normalize_assets, normalize_sensors
from asset_parser.core.schema import (
    Asset,
    Sensor,
    assets_from_json,
    sensors_from_json,
    to_json_dict,
)
from asset_parser.validation.assets import build_sensor_lookup, get_asset_errors
from asset_parser.validation.common import ValidationFinding
from asset_parser.validation.sensors import get_sensor_errors

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    """All observable stages of a run."""
    READING_INPUTS = "reading_inputs"
    NORMALIZING = "normalizing"
    VALIDATING_SENSORS = "validating_sensors"
    VALIDATING_ASSETS = "validating_assets"
    WRITING_OUTPUTS = "writing_outputs"

    # Terminal
    COMPLETED = "completed"
    FAILED_VALIDATION = "failed_validation"


@dataclass
class PipelineResult:
    """Outcome of a single run."""
    stage: PipelineStage
    sensors: List[Sensor] = field(default_factory=list)
    assets: List[Asset] = field(default_factory=list)
    sensor_findings: List[ValidationFinding] = field(default_factory=list)
    asset_findings: List[ValidationFinding] = field(default_factory=list)
    written_files: List[Path] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.sensor_findings and not self.asset_findings

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def report_lines(self) -> List[str]:
        """One line per finding, sensors first."""
        lines = [f.render("Sensor") for f in self.sensor_findings]
        lines.extend(f.render("Asset") for f in self.asset_findings)
        return lines

    def normalized_catalogs(self) -> Dict[str, Any]:
        """Both normalized catalogs as one JSON-ready object."""
        return {
            "sensors": to_json_dict(self.sensors),
            "assets": to_json_dict(self.assets),
        }


# =============================================================================
# Orchestrator Class
# =============================================================================

class Orchestrator:
    """
    Drives one normalize-and-validate run over a pair of catalog files.

    Reference catalogs can be passed in to replace the bundled ones.
    """

    def __init__(
        self,
        assets_path: str,
        sensors_path: str,
        output_dir: Optional[str] = None,
        dry_run: bool = False,
        units: Optional[AbstractSet[str]] = None,
        asset_type_ids: Optional[AbstractSet[int]] = None,
    ):
        self.assets_path = Path(assets_path)
        self.sensors_path = Path(sensors_path)
        self.output_dir = Path(output_dir if output_dir is not None else config.OUTPUT_DIR)
        self.dry_run = dry_run
        self.units = units
        self.asset_type_ids = asset_type_ids
        self.stage = PipelineStage.READING_INPUTS

    def _enter(self, stage: PipelineStage) -> None:
        self.stage = stage
        logger.info(f"Stage: {stage.value}")

    def _read_inputs(self):
        raw_sensors = sensors_from_json(read_json_file(self.sensors_path))
        raw_assets = assets_from_json(read_json_file(self.assets_path))
        logger.info(f"Read {len(raw_sensors)} sensors from {self.sensors_path}")
        logger.info(f"Read {len(raw_assets)} assets from {self.assets_path}")
        return raw_sensors, raw_assets

    def _write_outputs(self, sensors: List[Sensor], assets: List[Asset]) -> List[Path]:
        if self.dry_run:
            logger.info("[DRY RUN] Would write normalized catalogs")
            return []
        return write_json_files(
            [
                (to_json_dict(sensors), self.output_dir / config.SENSORS_OUTPUT_FILENAME),
                (to_json_dict(assets), self.output_dir / config.ASSETS_OUTPUT_FILENAME),
            ],
            indent=config.JSON_INDENT,
        )

    def run(self) -> PipelineResult:
        """
        Execute the pipeline.

        Returns:
            PipelineResult; validation findings are data, not exceptions

        Raises:
            AssetParserError: On unreadable input, malformed JSON, broken
                reference data, or unwritable output
        """
        self._enter(PipelineStage.READING_INPUTS)
        raw_sensors, raw_assets = self._read_inputs()

        self._enter(PipelineStage.NORMALIZING)
        result = PipelineResult(
            stage=self.stage,
            sensors=normalize_sensors(raw_sensors),
            assets=normalize_assets(raw_assets),
        )

        self._enter(PipelineStage.VALIDATING_SENSORS)
        result.sensor_findings = get_sensor_errors(result.sensors, self.units)
        if result.sensor_findings:
            logger.warning(f"Sensor validation failed with {len(result.sensor_findings)} finding(s)")
            self._enter(PipelineStage.FAILED_VALIDATION)
            result.stage = self.stage
            return result

        self._enter(PipelineStage.VALIDATING_ASSETS)
        result.asset_findings = get_asset_errors(
            result.assets,
            build_sensor_lookup(result.sensors),
            self.asset_type_ids,
        )
        if result.asset_findings:
            logger.warning(f"Asset validation failed with {len(result.asset_findings)} finding(s)")
            self._enter(PipelineStage.FAILED_VALIDATION)
            result.stage = self.stage
            return result

        self._enter(PipelineStage.WRITING_OUTPUTS)
        result.written_files = self._write_outputs(result.sensors, result.assets)

        self._enter(PipelineStage.COMPLETED)
        result.stage = self.stage
        return result


# =============================================================================
# CLI Entry Point
# =============================================================================

class _UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints usage to stdout and exits with status 1."""

    def error(self, message):
        self.print_usage(sys.stdout)
        print(f"{self.prog}: error: {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageArgumentParser(
        prog="asset-parser",
        description="Normalize and validate SkySpark sensor and asset catalogs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s assets.json sensors.json                 # Validate, write new_*.json
  %(prog)s assets.json sensors.json --dry-run       # Validate only
  %(prog)s assets.json sensors.json --output-dir out

Environment:
  ASSET_PARSER_OUTPUT_DIR      Output directory (default: current directory)
  ASSET_PARSER_LOG_LEVEL       Logging level (default: WARNING)
  ASSET_PARSER_LOG_FILE        Also write logs to this file
        """
    )

    parser.add_argument("assets_file", type=str, help="Path to the assets JSON file")
    parser.add_argument("sensors_file", type=str, help="Path to the sensors JSON file")

    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory for new_assets.json and new_sensors.json (overrides ASSET_PARSER_OUTPUT_DIR)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Normalize and validate without writing any files; print the normalized catalogs to stdout when valid"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging"
    )

    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the configuration summary to stderr before running"
    )

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Send logs to stderr (stdout carries findings) and optionally a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.LOG_FILE:
        handlers.append(logging.FileHandler(config.LOG_FILE))

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config.validate_config()
    configure_logging(args.verbose)
    if args.print_config:
        print(config.get_config_summary(), file=sys.stderr)

    orchestrator = Orchestrator(
        assets_path=args.assets_file,
        sensors_path=args.sensors_file,
        output_dir=args.output_dir,
        dry_run=args.dry_run,
    )

    try:
        result = orchestrator.run()
    except AssetParserError as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(130)

    for line in result.report_lines():
        print(line)

    # Dry runs show the normalized catalogs instead of writing them
    if args.dry_run and result.success:
        print(json.dumps(result.normalized_catalogs(), indent=config.JSON_INDENT, ensure_ascii=False))

    sys.exit(result.exit_code)


if __name__ == "__main__":
    main()
