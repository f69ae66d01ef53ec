"""Schema metadata adapters."""

from fixtureworks.adapters.schema_metadata.fake import (
    FakeSchemaMetadata,
    FakeSchemaMetadataResolver,
)
from fixtureworks.adapters.schema_metadata.sqlalchemy import (
    SqlAlchemySchemaMetadata,
    SqlAlchemySchemaMetadataResolver,
)

__all__ = [
    "FakeSchemaMetadata",
    "FakeSchemaMetadataResolver",
    "SqlAlchemySchemaMetadata",
    "SqlAlchemySchemaMetadataResolver",
]
