"""Protocols for the definitions domain."""

from typing import Any, Mapping, Optional, Protocol

from fixtureworks.core.protocols.registry import RegistryProtocol
from fixtureworks.domains.definitions.definition import EntityDefinition


class EntityDefinitionRegistryProtocol(RegistryProtocol[EntityDefinition], Protocol):
    """Entity definition registry protocol."""

    def define(
        self,
        name: str,
        entity_type: Any,
        field_defs: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> EntityDefinition:
        """Build and register a definition under a unique name."""
        ...

    def has(self, name: str) -> bool:
        """Return True if a definition is registered under ``name``."""
        ...
