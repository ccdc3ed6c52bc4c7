"""Tests for the dialect-specific version extractor."""

import pytest

from sbomvalidator import (
    Dialect,
    ErrorCode,
    MalformedJSONError,
    MissingVersionError,
    UnknownFormatError,
    extract_version,
)
from sbomvalidator.kernel.version import split_spdx_version


class TestCycloneDX:
    """specVersion is read verbatim."""

    def test_spec_version(self):
        assert extract_version(b'{"specVersion": "1.4"}', Dialect.CYCLONEDX) == "1.4"

    def test_no_further_parsing(self):
        assert extract_version({"specVersion": "1.6-rc1"}, Dialect.CYCLONEDX) == "1.6-rc1"

    def test_missing_spec_version(self):
        with pytest.raises(MissingVersionError) as excinfo:
            extract_version(b'{"bomFormat": "CycloneDX"}', Dialect.CYCLONEDX)
        assert excinfo.value.code is ErrorCode.MISSING_VERSION
        assert excinfo.value.details["field"] == "specVersion"

    def test_non_string_spec_version(self):
        with pytest.raises(MissingVersionError):
            extract_version(b'{"specVersion": 1.4}', Dialect.CYCLONEDX)

    def test_malformed_json(self):
        with pytest.raises(MalformedJSONError):
            extract_version(b'{"specVersion": "1.4"', Dialect.CYCLONEDX)


class TestSPDX:
    """The version follows the first hyphen of spdxVersion."""

    @pytest.mark.parametrize("marker, expected", [
        ("SPDX-2.3", "2.3"),
        ("SPDX-2.2", "2.2"),
        ("SPDX-2.3-extra", "2.3-extra"),
        ("SPDX--2.3", "-2.3"),
    ])
    def test_split_on_first_hyphen(self, marker, expected):
        assert extract_version({"spdxVersion": marker}, Dialect.SPDX) == expected

    @pytest.mark.parametrize("marker", ["SPDX", "SPDX-", "", "2.3"])
    def test_missing_hyphen_or_empty_suffix(self, marker):
        with pytest.raises(MissingVersionError, match="invalid SPDX version format"):
            extract_version({"spdxVersion": marker}, Dialect.SPDX)

    def test_missing_field(self):
        with pytest.raises(MissingVersionError):
            extract_version({"bomFormat": "CycloneDX"}, Dialect.SPDX)

    def test_non_string_field(self):
        with pytest.raises(MissingVersionError):
            extract_version({"spdxVersion": 2.3}, Dialect.SPDX)

    def test_split_helper(self):
        assert split_spdx_version("SPDX-2.3") == "2.3"


def test_dialect_given_as_string():
    assert extract_version({"specVersion": "1.5"}, "CycloneDX") == "1.5"


def test_unknown_dialect_string():
    with pytest.raises(UnknownFormatError):
        extract_version({"specVersion": "1.5"}, "SWID")


def test_dispatch_uses_dialect_not_fields():
    """A CycloneDX document has no spdxVersion, so extracting as SPDX fails."""
    with pytest.raises(MissingVersionError):
        extract_version({"bomFormat": "CycloneDX", "specVersion": "1.4"}, Dialect.SPDX)
