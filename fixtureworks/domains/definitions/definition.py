"""Entity definition.

An ``EntityDefinition`` is a named recipe for building instances of one
entity type. It is created once and read by a fixture factory: for every
field and association the entity declares, ``get_field_defs()`` holds one
provider producing the value to assign.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional

from fixtureworks.core.exceptions import UnknownFieldError, describe_entity_type
from fixtureworks.core.logging import logger
from fixtureworks.core.protocols.schema_metadata import (
    SchemaMetadataProtocol,
    SchemaMetadataResolverProtocol,
)
from fixtureworks.domains.definitions.normalization import normalize_field_def
from fixtureworks.domains.definitions.types import ConstantProvider, FieldProvider

definition_logger = logger.with_context(component="entity_definition")


class EntityDefinition:
    """Normalized field definitions for one entity type.

    Construction resolves the schema metadata for ``entity_type``, validates
    and normalizes the caller's ``field_defs``, then fills every remaining
    field and association with a constant provider holding the value found on
    one blank instance. The caller's definitions always win over defaults.

    Raises:
        UnknownFieldError: If ``field_defs`` names a field the entity does not declare.
        UnknownEntityTypeError: Propagated from the resolver for unmapped types.
    """

    def __init__(
        self,
        metadata_resolver: SchemaMetadataResolverProtocol,
        name: str,
        entity_type: Any,
        field_defs: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Build the definition and freeze its state."""
        self._name = name
        self._entity_type = entity_type
        self._metadata = metadata_resolver.get_class_metadata(entity_type)
        self._config: Mapping[str, Any] = MappingProxyType(dict(config or {}))

        providers: dict[str, FieldProvider] = {}
        self._read_field_defs(providers, field_defs or {})
        explicit_count = len(providers)
        self._default_defs_from_metadata(providers)
        self._field_defs: Mapping[str, FieldProvider] = MappingProxyType(providers)

        definition_logger.debug(
            f"Defined '{name}' for {describe_entity_type(entity_type)}: "
            f"{explicit_count} explicit, {len(providers) - explicit_count} defaulted fields",
            extra={"definition": name},
        )

    def _read_field_defs(
        self, providers: dict[str, FieldProvider], field_defs: Mapping[str, Any]
    ) -> None:
        for key, definition in field_defs.items():
            if not (self._metadata.has_field(key) or self._metadata.has_association(key)):
                raise UnknownFieldError(self._entity_type, key)
            providers[key] = normalize_field_def(definition)

    def _default_defs_from_metadata(self, providers: dict[str, FieldProvider]) -> None:
        default_entity = self._metadata.new_instance()

        all_fields = [
            *self._metadata.get_field_names(),
            *self._metadata.get_association_names(),
        ]
        for field_name in all_fields:
            if field_name in providers:
                continue
            # None doubles as "no default"; a declared None default reads the same.
            default_value = self._metadata.get_field_value(default_entity, field_name)
            providers[field_name] = ConstantProvider(default_value)

    def get_name(self) -> str:
        """Return the name of the entity definition."""
        return self._name

    def get_entity_type(self) -> Any:
        """Return the entity type exactly as given at construction."""
        return self._entity_type

    def get_field_defs(self) -> Mapping[str, FieldProvider]:
        """Return a read-only mapping of field name to provider."""
        return self._field_defs

    def get_entity_metadata(self) -> SchemaMetadataProtocol:
        """Return the schema metadata of the entity type."""
        return self._metadata

    def get_config(self) -> Mapping[str, Any]:
        """Return a read-only view of the extra configuration."""
        return self._config

    def __repr__(self) -> str:
        return (
            f"EntityDefinition(name={self._name!r}, "
            f"entity_type={describe_entity_type(self._entity_type)!r}, "
            f"fields={sorted(self._field_defs)!r})"
        )
