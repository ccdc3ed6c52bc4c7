"""Packaging regression tests.

Tests that verify the source layout and the bundled package data.
"""

from importlib import resources
from pathlib import Path


def test_source_layout():
    """Test that the package lives under src/ with its schema data."""
    here = Path(__file__).resolve().parent
    repo_root = here.parent
    src_pkg = repo_root / "src" / "sbomvalidator"

    assert src_pkg.exists(), "sbomvalidator package should exist in src/"
    assert (src_pkg / "kernel").exists(), "sbomvalidator.kernel should exist"
    assert (src_pkg / "_internal").exists(), "sbomvalidator._internal should exist"
    assert (src_pkg / "schemas" / "cyclonedx").is_dir()


def test_schemas_are_package_data():
    """Installed package must carry the schema corpus."""
    schemas = resources.files("sbomvalidator").joinpath("schemas").joinpath("cyclonedx")
    names = {entry.name for entry in schemas.iterdir()}
    assert "bom-1.4.schema.json" in names
    assert "spdx.schema.json" in names
    assert "jsf-0.82.schema.json" in names


def test_console_script_target():
    from sbomvalidator.cli import main

    assert callable(main)
