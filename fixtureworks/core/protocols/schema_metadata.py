"""Schema metadata protocols.

A ``SchemaMetadataProtocol`` describes one mapped entity type: which fields
and associations it declares, how to allocate a blank instance of it, and
how to read a field back off an instance. A resolver hands out that
metadata for an entity type given as a class or a name.

Usage:
    metadata = resolver.get_class_metadata("Person")
    if metadata.has_field("email"):
        blank = metadata.new_instance()
        default = metadata.get_field_value(blank, "email")
"""

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class SchemaMetadataProtocol(Protocol):
    """Read-only view of the ORM metadata for a single entity type."""

    def has_field(self, name: str) -> bool:
        """Return True if ``name`` is a scalar (column) field of the entity."""
        ...

    def has_association(self, name: str) -> bool:
        """Return True if ``name`` is a relationship of the entity."""
        ...

    def get_field_names(self) -> Sequence[str]:
        """Return the scalar field names in declaration order."""
        ...

    def get_association_names(self) -> Sequence[str]:
        """Return the relationship names in declaration order."""
        ...

    def new_instance(self) -> Any:
        """Allocate a blank instance of the entity without constructor arguments."""
        ...

    def get_field_value(self, instance: Any, name: str) -> Any:
        """Read the current value of field or association ``name`` off ``instance``."""
        ...


@runtime_checkable
class SchemaMetadataResolverProtocol(Protocol):
    """Resolves entity types to their schema metadata."""

    def get_class_metadata(self, entity_type: Any) -> SchemaMetadataProtocol:
        """Return metadata for ``entity_type``.

        Raises:
            UnknownEntityTypeError: If the type is not mapped.
        """
        ...
