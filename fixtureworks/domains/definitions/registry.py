"""Entity definition registry: owns definitions by unique name."""

from typing import Any, Mapping, Optional

from fixtureworks.core.exceptions import (
    DuplicateEntityDefinitionError,
    EntityDefinitionNotFoundError,
    describe_entity_type,
)
from fixtureworks.core.logging import logger
from fixtureworks.core.protocols.schema_metadata import SchemaMetadataResolverProtocol
from fixtureworks.domains.definitions.definition import EntityDefinition
from fixtureworks.domains.definitions.protocols import EntityDefinitionRegistryProtocol

registry_logger = logger.with_prefix("EntityDefinitionRegistry: ").with_context(
    component="entity_definition_registry"
)


class EntityDefinitionRegistry(EntityDefinitionRegistryProtocol):
    """In-memory entity definition registry.

    Definitions are built against one schema metadata resolver and stored by
    name. Names are unique; redefining one is an error.
    """

    def __init__(self, metadata_resolver: SchemaMetadataResolverProtocol) -> None:
        """Initialize the registry."""
        self._resolver = metadata_resolver
        self._entries: dict[str, EntityDefinition] = {}

    def define(
        self,
        name: str,
        entity_type: Any,
        field_defs: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> EntityDefinition:
        """Build an entity definition and register it under ``name``.

        Args:
            name: Unique name of the definition (e.g., "person").
            entity_type: Mapped class or class name to build.
            field_defs: Field name to value or callable.
            config: Extra configuration passed through to the definition.

        Returns:
            The registered definition.

        Raises:
            DuplicateEntityDefinitionError: If ``name`` is already registered.
            UnknownFieldError: If ``field_defs`` names an undeclared field.
        """
        if name in self._entries:
            raise DuplicateEntityDefinitionError(name)

        definition = EntityDefinition(self._resolver, name, entity_type, field_defs, config)
        self._entries[name] = definition

        registry_logger.info(
            f"Registered '{name}' for {describe_entity_type(entity_type)} "
            f"with {len(definition.get_field_defs())} fields."
        )
        return definition

    def get(self, name: str) -> EntityDefinition:
        """Get a definition by name.

        Raises:
            EntityDefinitionNotFoundError: If nothing is registered under ``name``.
        """
        try:
            return self._entries[name]
        except KeyError:
            raise EntityDefinitionNotFoundError(name) from None

    def has(self, name: str) -> bool:
        return name in self._entries

    def list_all(self) -> list[EntityDefinition]:
        """List all registered definitions in registration order."""
        return list(self._entries.values())

    def clear(self) -> None:
        """Remove all definitions."""
        self._entries.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
