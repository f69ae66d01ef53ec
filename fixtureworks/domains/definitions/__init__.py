"""Entity definitions: normalized field providers per entity type."""

from fixtureworks.domains.definitions.definition import EntityDefinition
from fixtureworks.domains.definitions.normalization import ensure_invokable, normalize_field_def
from fixtureworks.domains.definitions.registry import EntityDefinitionRegistry
from fixtureworks.domains.definitions.types import (
    CallableProvider,
    ConstantProvider,
    FieldProvider,
)

__all__ = [
    "CallableProvider",
    "ConstantProvider",
    "EntityDefinition",
    "EntityDefinitionRegistry",
    "FieldProvider",
    "ensure_invokable",
    "normalize_field_def",
]
