"""Core protocols for dependency injection."""

from fixtureworks.core.protocols.registry import RegistryProtocol
from fixtureworks.core.protocols.schema_metadata import (
    SchemaMetadataProtocol,
    SchemaMetadataResolverProtocol,
)

__all__ = [
    "RegistryProtocol",
    "SchemaMetadataProtocol",
    "SchemaMetadataResolverProtocol",
]
