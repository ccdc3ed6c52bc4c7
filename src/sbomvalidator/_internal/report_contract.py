"""Defaults shared by the API and the CLI."""

SCHEMA_PACKAGE = "sbomvalidator"
SCHEMA_DIR = "schemas"

# Violations printed before the "...and N more errors." summary.
DEFAULT_MAX_DISPLAYED_VIOLATIONS = 10

LOG_LEVEL_ENV_VAR = "SBOM_VALIDATOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "warning"
