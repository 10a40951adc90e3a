"""
Configuration for the sensor/asset catalog validator.
Handles environment variable loading and validation.
"""

import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()


# =============================================================================
# Output Configuration
# =============================================================================

# Directory the normalized catalogs are written to (default: working directory)
OUTPUT_DIR: str = os.getenv("ASSET_PARSER_OUTPUT_DIR", ".")

ASSETS_OUTPUT_FILENAME: str = os.getenv("ASSET_PARSER_ASSETS_OUTPUT", "new_assets.json")
SENSORS_OUTPUT_FILENAME: str = os.getenv("ASSET_PARSER_SENSORS_OUTPUT", "new_sensors.json")

# Output is meant to be committed and diffed, so keep the indent stable
JSON_INDENT: int = int(os.getenv("ASSET_PARSER_JSON_INDENT", "4"))


# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL: str = os.getenv("ASSET_PARSER_LOG_LEVEL", "WARNING").upper()
LOG_FILE: Optional[str] = os.getenv("ASSET_PARSER_LOG_FILE") or None
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# =============================================================================
# Validation
# =============================================================================

def get_config_errors() -> List[str]:
    """Return a list of problems with the current configuration."""
    errors = []

    if JSON_INDENT < 0:
        errors.append(f"ASSET_PARSER_JSON_INDENT must not be negative (got {JSON_INDENT})")

    if not ASSETS_OUTPUT_FILENAME.strip():
        errors.append("ASSET_PARSER_ASSETS_OUTPUT must not be empty")

    if not SENSORS_OUTPUT_FILENAME.strip():
        errors.append("ASSET_PARSER_SENSORS_OUTPUT must not be empty")

    if ASSETS_OUTPUT_FILENAME == SENSORS_OUTPUT_FILENAME:
        errors.append("Assets and sensors output file names must differ")

    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        errors.append(f"ASSET_PARSER_LOG_LEVEL is not a logging level: {LOG_LEVEL}")

    return errors


def validate_config() -> None:
    """
    Validate the configuration values.
    Raises SystemExit if any of them are unusable.
    """
    errors = get_config_errors()

    # Report all errors
    if errors:
        print("Configuration Error(s):", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        print("\nPlease fix the environment variables and try again.", file=sys.stderr)
        sys.exit(1)


def get_config_summary() -> str:
    """Get a summary of the current configuration (for logging)."""
    log_file = LOG_FILE or "(stderr only)"

    return f"""
Asset Parser Configuration:
  Output:
    - Output Directory: {OUTPUT_DIR}
    - Assets File: {ASSETS_OUTPUT_FILENAME}
    - Sensors File: {SENSORS_OUTPUT_FILENAME}
    - JSON Indent: {JSON_INDENT}

  Logging:
    - Level: {LOG_LEVEL}
    - Log File: {log_file}
"""


if __name__ == "__main__":
    print("Validating configuration...")
    validate_config()
    print("Configuration is valid!")
    print(get_config_summary())
