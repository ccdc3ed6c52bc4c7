"""Schema corpus sources.

A corpus is a closed, read-only set of JSON documents grouped by namespace
(one namespace per dialect, e.g. ``cyclonedx``). The resolver only reads
through the SchemaCorpus protocol, so the packaged files can be swapped for
a directory on disk or an in-memory mapping.
"""

from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import FrozenSet, List, Protocol, Union

from sbomvalidator._internal.report_contract import SCHEMA_DIR, SCHEMA_PACKAGE


class SchemaCorpus(Protocol):
    """Read-only lookup of schema documents by (namespace, name)."""

    def namespaces(self) -> FrozenSet[str]:
        """Namespaces present in the corpus."""
        ...

    def names(self, namespace: str) -> List[str]:
        """Sorted document names within a namespace (empty if absent)."""
        ...

    def read(self, namespace: str, name: str) -> bytes:
        """Return document bytes; raise KeyError if absent."""
        ...


class InMemorySchemaCorpus:
    """Corpus backed by a mapping of namespace -> {name: JSON text}."""

    def __init__(self, documents: Mapping[str, Mapping[str, Union[str, bytes]]]):
        self._documents = {
            namespace: {
                name: content.encode("utf-8") if isinstance(content, str) else bytes(content)
                for name, content in entries.items()
            }
            for namespace, entries in documents.items()
        }

    def namespaces(self) -> FrozenSet[str]:
        return frozenset(self._documents)

    def names(self, namespace: str) -> List[str]:
        return sorted(self._documents.get(namespace, {}))

    def read(self, namespace: str, name: str) -> bytes:
        return self._documents[namespace][name]


class _TraversableCorpus:
    """Corpus over a directory tree laid out as <root>/<namespace>/<name>.json."""

    def __init__(self, root):
        self._root = root

    def namespaces(self) -> FrozenSet[str]:
        if not self._root.is_dir():
            return frozenset()
        return frozenset(
            entry.name
            for entry in self._root.iterdir()
            if entry.is_dir() and any(child.name.endswith(".json") for child in entry.iterdir())
        )

    def names(self, namespace: str) -> List[str]:
        if namespace not in self.namespaces():
            return []
        directory = self._root.joinpath(namespace)
        return sorted(
            entry.name
            for entry in directory.iterdir()
            if entry.is_file() and entry.name.endswith(".json")
        )

    def read(self, namespace: str, name: str) -> bytes:
        if name not in self.names(namespace):
            raise KeyError(f"{namespace}/{name}")
        return self._root.joinpath(namespace).joinpath(name).read_bytes()


class PackagedSchemaCorpus(_TraversableCorpus):
    """The corpus shipped inside the sbomvalidator package."""

    def __init__(self, package: str = SCHEMA_PACKAGE, directory: str = SCHEMA_DIR):
        super().__init__(resources.files(package).joinpath(directory))


class DirectorySchemaCorpus(_TraversableCorpus):
    """A corpus on disk, e.g. a checkout of the upstream schema files."""

    def __init__(self, root: Union[str, Path]):
        super().__init__(Path(root))
