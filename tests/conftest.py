"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed sbomvalidator package.
"""

import json

import pytest

from sbomvalidator import InMemorySchemaCorpus, SchemaResolver


# Minimal schema used across tests: both markers required as strings.
MINIMAL_CDX_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "bomFormat": {"type": "string"},
        "specVersion": {"type": "string"},
    },
    "required": ["bomFormat", "specVersion"],
}


@pytest.fixture
def minimal_schema():
    """Schema JSON text requiring bomFormat and specVersion as strings."""
    return json.dumps(MINIMAL_CDX_SCHEMA)


@pytest.fixture
def minimal_corpus():
    """CycloneDX-only corpus holding bom-1.4.schema.json."""
    return InMemorySchemaCorpus({
        "cyclonedx": {"bom-1.4.schema.json": json.dumps(MINIMAL_CDX_SCHEMA)},
    })


@pytest.fixture
def minimal_resolver(minimal_corpus):
    """Uncached resolver over the minimal corpus."""
    return SchemaResolver(minimal_corpus)


@pytest.fixture
def spdx_corpus():
    """Corpus that also carries an SPDX 2.3 schema."""
    spdx_schema = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "required": ["spdxVersion", "SPDXID", "name"],
        "properties": {
            "spdxVersion": {"type": "string"},
            "SPDXID": {"type": "string", "const": "SPDXRef-DOCUMENT"},
            "name": {"type": "string"},
        },
    }
    return InMemorySchemaCorpus({
        "cyclonedx": {"bom-1.4.schema.json": json.dumps(MINIMAL_CDX_SCHEMA)},
        "spdx": {"spdx-2.3.schema.json": json.dumps(spdx_schema)},
    })


@pytest.fixture
def cdx_15_document():
    """A realistic CycloneDX 1.5 SBOM that satisfies the bundled schema."""
    return {
        "bomFormat": "CycloneDX",
        "specVersion": "1.5",
        "serialNumber": "urn:uuid:3e671687-395b-41f5-a30f-a58921a69b79",
        "version": 1,
        "metadata": {
            "timestamp": "2024-05-01T12:00:00Z",
            "component": {
                "type": "application",
                "name": "juice-shop",
                "version": "17.1.1",
                "bom-ref": "pkg:npm/juice-shop@17.1.1",
            },
        },
        "components": [
            {
                "type": "library",
                "name": "express",
                "version": "4.21.1",
                "bom-ref": "pkg:npm/express@4.21.1",
                "purl": "pkg:npm/express@4.21.1",
                "licenses": [{"license": {"id": "MIT"}}],
                "hashes": [
                    {"alg": "SHA-1", "content": "a3b2f1e3c5d4a6b7c8d9e0f1a2b3c4d5e6f7a8b9"}
                ],
            },
            {
                "type": "library",
                "name": "lodash",
                "version": "4.17.21",
                "bom-ref": "pkg:npm/lodash@4.17.21",
                "licenses": [{"expression": "MIT OR Apache-2.0"}],
            },
        ],
        "dependencies": [
            {
                "ref": "pkg:npm/juice-shop@17.1.1",
                "dependsOn": ["pkg:npm/express@4.21.1", "pkg:npm/lodash@4.17.21"],
            },
        ],
    }
