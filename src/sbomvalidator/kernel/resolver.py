"""Schema resolver: maps (dialect, version) to a schema document."""

import re
import threading
from typing import Dict, List, Optional, Tuple

from sbomvalidator._internal.logging_config import get_logger
from sbomvalidator.codes import Dialect
from sbomvalidator.contracts import SchemaDocument
from sbomvalidator.errors import (
    InvalidSchemaError,
    SchemaNotFoundError,
    UnsupportedDialectError,
)
from .corpus import PackagedSchemaCorpus, SchemaCorpus

logger = get_logger(__name__)

# Versions never contain path separators; anything else is not a lookup key.
_SAFE_VERSION = re.compile(r"^[0-9A-Za-z][0-9A-Za-z._+-]*$")


def schema_key(dialect: Dialect, version: str) -> str:
    """Lookup key of the schema for a version, e.g. "cyclonedx/bom-1.4.schema.json"."""
    return f"{dialect.namespace}/{dialect.schema_name(version)}"


def _name_pattern(dialect: Dialect) -> "re.Pattern[str]":
    prefix, _, suffix = dialect.schema_name("\0").partition("\0")
    return re.compile(f"^{re.escape(prefix)}(?P<version>.+){re.escape(suffix)}$")


def _version_sort_key(version: str) -> Tuple:
    """Natural ordering: "1.10" sorts after "1.9"."""
    return tuple(
        (0, int(part), "") if part.isdigit() else (1, 0, part)
        for part in re.split(r"[.\-+_]", version)
    )


class SchemaResolver:
    """Resolves schemas from a corpus, optionally caching resolved documents.

    The cache is filled on miss and never invalidated; concurrent misses for
    the same key may both read the corpus and the later write wins, which is
    harmless because the corpus is immutable.
    """

    def __init__(self, corpus: Optional[SchemaCorpus] = None, *, cache: bool = False):
        self.corpus: SchemaCorpus = corpus if corpus is not None else PackagedSchemaCorpus()
        self._cache: Optional[Dict[Tuple[Dialect, str], SchemaDocument]] = {} if cache else None
        self._lock = threading.Lock()

    def supports(self, dialect: Dialect) -> bool:
        """True if the corpus carries any schema namespace for the dialect."""
        return dialect.namespace in self.corpus.namespaces()

    def available_versions(self, dialect: Dialect) -> List[str]:
        """Versions the corpus holds schemas for, naturally sorted."""
        pattern = _name_pattern(dialect)
        versions = [
            match.group("version")
            for match in (pattern.match(name) for name in self.corpus.names(dialect.namespace))
            if match
        ]
        return sorted(versions, key=_version_sort_key)

    def resolve(self, version: str, dialect: Dialect) -> SchemaDocument:
        """Return the schema document for a dialect version.

        Raises:
            UnsupportedDialectError: If the corpus has no namespace for the dialect.
            SchemaNotFoundError: If no schema exists for the version.
        """
        try:
            dialect = Dialect(dialect)
        except ValueError as e:
            raise UnsupportedDialectError(f"unsupported SBOM type: {dialect!r}", dialect=str(dialect)) from e
        if not self.supports(dialect):
            raise UnsupportedDialectError(
                f"{dialect.value} is not currently supported: no {dialect.namespace!r} schemas bundled",
                dialect=dialect.value,
            )

        if self._cache is not None:
            with self._lock:
                cached = self._cache.get((dialect, version))
            if cached is not None:
                logger.debug("schema_cache_hit", key=cached.key)
                return cached

        document = self._load(version, dialect)

        if self._cache is not None:
            with self._lock:
                self._cache[(dialect, version)] = document
        return document

    def _load(self, version: str, dialect: Dialect) -> SchemaDocument:
        key = schema_key(dialect, version)
        name = dialect.schema_name(version)
        if not _SAFE_VERSION.match(version):
            raise self._not_found(key, dialect, version)

        try:
            content = self.corpus.read(dialect.namespace, name)
        except KeyError:
            raise self._not_found(key, dialect, version) from None

        pattern = _name_pattern(dialect)
        resources = {
            sibling: self._decode(self.corpus.read(dialect.namespace, sibling), f"{dialect.namespace}/{sibling}")
            for sibling in self.corpus.names(dialect.namespace)
            if not pattern.match(sibling)
        }

        logger.debug("schema_resolved", key=key, siblings=sorted(resources))
        return SchemaDocument(
            dialect=dialect,
            version=version,
            key=key,
            content=self._decode(content, key),
            resources=resources,
        )

    def _not_found(self, key: str, dialect: Dialect, version: str) -> SchemaNotFoundError:
        available = self.available_versions(dialect)
        return SchemaNotFoundError(
            f"no {dialect.value} schema for version {version!r} (looked up {key}; "
            f"available: {', '.join(available) or 'none'})",
            key=key,
            available=available,
        )

    @staticmethod
    def _decode(content: bytes, key: str) -> str:
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidSchemaError(f"schema {key} is not UTF-8 text: {e}", key=key) from e
