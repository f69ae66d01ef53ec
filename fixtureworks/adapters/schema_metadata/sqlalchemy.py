"""SQLAlchemy schema metadata.

Reads field and association names off the declarative mapper of an entity
class. Table columns are fields, relationships are associations.
SQL expressions mapped with ``column_property()`` are neither.

Blank instances are allocated through the class manager, so ``__init__`` is
never called. Scalar column defaults (``mapped_column(default="x")``) are
applied to the blank instance; callable, SQL-expression and server-side
defaults are not evaluated and read back as ``None``.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from sqlalchemy import Column, inspect
from sqlalchemy.orm import Mapper, registry as OrmRegistry

from fixtureworks.core.exceptions import AmbiguousEntityTypeError, UnknownEntityTypeError
from fixtureworks.core.logging import logger

metadata_logger = logger.with_prefix("SqlAlchemySchemaMetadata: ").with_context(
    component="sqlalchemy_schema_metadata"
)


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class SqlAlchemySchemaMetadata:
    """SchemaMetadataProtocol backed by a SQLAlchemy mapper."""

    def __init__(self, mapped_class: type) -> None:
        """Inspect ``mapped_class``.

        Raises:
            UnknownEntityTypeError: If the class is not mapped.
        """
        mapper = inspect(mapped_class, raiseerr=False)
        if not isinstance(mapper, Mapper):
            raise UnknownEntityTypeError(mapped_class)

        self._mapper = mapper
        self.mapped_class = mapper.class_
        # column_property() expressions are not table columns and not fields.
        self._columns: dict[str, Column] = {
            prop.key: prop.columns[0]
            for prop in mapper.column_attrs
            if isinstance(prop.columns[0], Column)
        }
        self._field_names: tuple[str, ...] = tuple(self._columns)
        self._association_names: tuple[str, ...] = tuple(mapper.relationships.keys())
        self._collections = frozenset(rel.key for rel in mapper.relationships if rel.uselist)

    def has_field(self, name: str) -> bool:
        """Return True if ``name`` is a mapped table column."""
        return name in self._field_names

    def has_association(self, name: str) -> bool:
        """Return True if ``name`` is a relationship."""
        return name in self._association_names

    def get_field_names(self) -> Sequence[str]:
        """Return column names in mapper order."""
        return list(self._field_names)

    def get_association_names(self) -> Sequence[str]:
        """Return relationship names in mapper order."""
        return list(self._association_names)

    def new_instance(self) -> Any:
        """Allocate a transient instance and apply scalar column defaults."""
        instance = self._mapper.class_manager.new_instance()
        for key, column in self._columns.items():
            default = column.default
            if default is not None and default.is_scalar:
                setattr(instance, key, default.arg)
        return instance

    def get_field_value(self, instance: Any, name: str) -> Any:
        """Read ``name`` off ``instance``; collections come back as a plain list."""
        value = getattr(instance, name)
        if name in self._collections and value is not None:
            # Detach from the instrumented collection of the blank instance.
            return list(value)
        return value

    def __repr__(self) -> str:
        return f"SqlAlchemySchemaMetadata({_qualified_name(self.mapped_class)})"


class SqlAlchemySchemaMetadataResolver:
    """Resolves entity types against one SQLAlchemy registry.

    Entity types may be given as a mapped class, a fully qualified class name
    (``app.models.Person``) or a bare class name (``Person``). Metadata is
    built once per class and cached.
    """

    def __init__(self, registry: Union[OrmRegistry, type]) -> None:
        """Bind the resolver to a ``registry`` or a declarative base class."""
        if not isinstance(registry, OrmRegistry):
            registry = registry.registry
        self._registry: OrmRegistry = registry
        self._cache: dict[type, SqlAlchemySchemaMetadata] = {}

    def get_class_metadata(self, entity_type: Any) -> SqlAlchemySchemaMetadata:
        """Return the metadata for ``entity_type``.

        Raises:
            UnknownEntityTypeError: If nothing in the registry matches.
            AmbiguousEntityTypeError: If a bare class name matches several classes.
        """
        mapped_class = self._resolve_class(entity_type)
        metadata = self._cache.get(mapped_class)
        if metadata is None:
            metadata = SqlAlchemySchemaMetadata(mapped_class)
            self._cache[mapped_class] = metadata
            metadata_logger.debug(
                f"Loaded metadata for {_qualified_name(mapped_class)}",
                extra={"entity_type": _qualified_name(mapped_class)},
            )
        return metadata

    def _mapped_classes(self) -> list[type]:
        return [mapper.class_ for mapper in self._registry.mappers]

    def _resolve_class(self, entity_type: Any) -> type:
        mapped_classes = self._mapped_classes()

        if isinstance(entity_type, type):
            if entity_type in mapped_classes:
                return entity_type
            raise UnknownEntityTypeError(entity_type)

        if not isinstance(entity_type, str):
            raise UnknownEntityTypeError(entity_type)

        for cls in mapped_classes:
            if _qualified_name(cls) == entity_type:
                return cls

        candidates = [cls for cls in mapped_classes if cls.__name__ == entity_type]
        if not candidates:
            raise UnknownEntityTypeError(entity_type)
        if len(candidates) > 1:
            raise AmbiguousEntityTypeError(entity_type, candidates)
        return candidates[0]
