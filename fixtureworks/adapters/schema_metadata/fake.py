"""Fake schema metadata for testing.

Declares fields and associations in plain dicts, without an ORM.
"""

from types import SimpleNamespace
from typing import Any, Callable, Mapping, Optional, Sequence

from fixtureworks.core.exceptions import UnknownEntityTypeError


class FakeSchemaMetadata:
    """Test implementation of SchemaMetadataProtocol.

    Blank instances are ``SimpleNamespace`` objects carrying the declared
    defaults, unless an ``instance_factory`` is given.

    Usage:
        person = FakeSchemaMetadata(
            fields={"name": "", "age": 0, "email": None},
            associations={"employer": None},
        )
        blank = person.new_instance()

        assert person.get_field_value(blank, "age") == 0
        assert person.new_instance_calls == 1
    """

    def __init__(
        self,
        fields: Optional[Mapping[str, Any]] = None,
        associations: Optional[Mapping[str, Any]] = None,
        instance_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        """Initialize with field and association defaults."""
        self._fields: dict[str, Any] = dict(fields or {})
        self._associations: dict[str, Any] = dict(associations or {})
        self._instance_factory = instance_factory
        self.new_instance_calls = 0
        self.value_reads: list[str] = []

    def has_field(self, name: str) -> bool:
        """Return True if ``name`` was declared in ``fields``."""
        return name in self._fields

    def has_association(self, name: str) -> bool:
        """Return True if ``name`` was declared in ``associations``."""
        return name in self._associations

    def get_field_names(self) -> Sequence[str]:
        """Return declared field names."""
        return list(self._fields)

    def get_association_names(self) -> Sequence[str]:
        """Return declared association names."""
        return list(self._associations)

    def new_instance(self) -> Any:
        """Build a blank instance and count the call."""
        self.new_instance_calls += 1
        if self._instance_factory is not None:
            return self._instance_factory()
        return SimpleNamespace(**self._fields, **self._associations)

    def get_field_value(self, instance: Any, name: str) -> Any:
        """Record the read and return the attribute, None if absent."""
        self.value_reads.append(name)
        return getattr(instance, name, None)


class FakeSchemaMetadataResolver:
    """Test implementation of SchemaMetadataResolverProtocol.

    Populate via seed(). Unknown entity types raise UnknownEntityTypeError.
    """

    def __init__(self) -> None:
        """Initialize with no entity types."""
        self._metadata: dict[Any, FakeSchemaMetadata] = {}
        self.lookups: list[Any] = []

    def get_class_metadata(self, entity_type: Any) -> FakeSchemaMetadata:
        """Return seeded metadata. Raises UnknownEntityTypeError if missing."""
        self.lookups.append(entity_type)
        try:
            return self._metadata[entity_type]
        except KeyError:
            raise UnknownEntityTypeError(entity_type) from None

    # Test helpers

    def seed(self, entity_type: Any, metadata: FakeSchemaMetadata) -> FakeSchemaMetadata:
        """Register ``metadata`` for ``entity_type`` and return it."""
        self._metadata[entity_type] = metadata
        return metadata

    def clear(self) -> None:
        """Remove all entity types and recorded lookups."""
        self._metadata.clear()
        self.lookups.clear()
