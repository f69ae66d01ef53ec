"""Unit tests for SqlAlchemySchemaMetadata and its resolver."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

import pytest

from fixtureworks.adapters.schema_metadata.sqlalchemy import SqlAlchemySchemaMetadata
from fixtureworks.core.exceptions import AmbiguousEntityTypeError, UnknownEntityTypeError
from fixtureworks.core.protocols.schema_metadata import SchemaMetadataProtocol

# ---------------------------------------------------------------------------
# Field and association names
# ---------------------------------------------------------------------------


def test_satisfies_protocol(models):
    assert isinstance(SqlAlchemySchemaMetadata(models.Person), SchemaMetadataProtocol)


def test_field_names_in_declaration_order(models):
    metadata = SqlAlchemySchemaMetadata(models.Person)
    assert metadata.get_field_names() == ["id", "name", "age", "email", "token", "employer_id"]


def test_relationships_are_associations(models):
    assert SqlAlchemySchemaMetadata(models.Person).get_association_names() == ["employer"]
    assert SqlAlchemySchemaMetadata(models.Company).get_association_names() == ["employees"]


@dataclass
class HasCase:
    desc: str
    name: str
    is_field: bool
    is_association: bool


HAS_CASES = [
    HasCase("column", "email", True, False),
    HasCase("foreign key column", "employer_id", True, False),
    HasCase("relationship", "employer", False, True),
    HasCase("undeclared", "nickname", False, False),
    HasCase("python attribute that is not mapped", "__tablename__", False, False),
]


@pytest.mark.parametrize("case", HAS_CASES, ids=lambda c: c.desc)
def test_has_field_and_association(case: HasCase, models):
    metadata = SqlAlchemySchemaMetadata(models.Person)

    assert metadata.has_field(case.name) is case.is_field
    assert metadata.has_association(case.name) is case.is_association


def test_unmapped_class_raises(models):
    with pytest.raises(UnknownEntityTypeError):
        SqlAlchemySchemaMetadata(models.Unmapped)


# ---------------------------------------------------------------------------
# new_instance() / get_field_value()
# ---------------------------------------------------------------------------


@dataclass
class DefaultCase:
    desc: str
    name: str
    expected: Any


DEFAULT_CASES = [
    DefaultCase("scalar string default", "name", ""),
    DefaultCase("scalar int default", "age", 0),
    DefaultCase("nullable without default", "email", None),
    DefaultCase("callable default is not evaluated", "token", None),
    DefaultCase("primary key", "id", None),
    DefaultCase("many-to-one relationship", "employer", None),
]


@pytest.mark.parametrize("case", DEFAULT_CASES, ids=lambda c: c.desc)
def test_blank_instance_values(case: DefaultCase, models):
    metadata = SqlAlchemySchemaMetadata(models.Person)
    blank = metadata.new_instance()

    assert isinstance(blank, models.Person)
    assert metadata.get_field_value(blank, case.name) == case.expected


def test_collection_relationship_reads_as_plain_list(models):
    metadata = SqlAlchemySchemaMetadata(models.Company)
    blank = metadata.new_instance()

    value = metadata.get_field_value(blank, "employees")
    assert value == []
    assert type(value) is list
    assert metadata.get_field_value(blank, "name") == "ACME"


def test_new_instance_skips_constructor(models):
    metadata = SqlAlchemySchemaMetadata(models.AuditLog)
    blank = metadata.new_instance()

    assert isinstance(blank, models.AuditLog)
    assert metadata.get_field_value(blank, "action") == "created"


def test_new_instance_returns_distinct_objects(models):
    metadata = SqlAlchemySchemaMetadata(models.Person)
    assert metadata.new_instance() is not metadata.new_instance()


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


def _qualified(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass
class ResolveCase:
    desc: str
    entity_type: Callable[[Any], Any]  # receives the ``models`` namespace
    expect_class: Optional[str] = None  # None → expect UnknownEntityTypeError


RESOLVE_CASES = [
    ResolveCase("mapped class", lambda m: m.Person, "Person"),
    ResolveCase("bare class name", lambda m: "Person", "Person"),
    ResolveCase("qualified name", lambda m: _qualified(m.Person), "Person"),
    ResolveCase("unknown name", lambda m: "Robot"),
    ResolveCase("unmapped class", lambda m: m.Unmapped),
    ResolveCase("mapped in another registry", lambda m: m.ProductTag),
    ResolveCase("not a class or name", lambda m: 42),
]


@pytest.mark.parametrize("case", RESOLVE_CASES, ids=lambda c: c.desc)
def test_resolve(case: ResolveCase, models, sqlalchemy_resolver):
    entity_type = case.entity_type(models)

    if case.expect_class is None:
        with pytest.raises(UnknownEntityTypeError):
            sqlalchemy_resolver.get_class_metadata(entity_type)
    else:
        metadata = sqlalchemy_resolver.get_class_metadata(entity_type)
        assert metadata.mapped_class is getattr(models, case.expect_class)


def test_resolver_caches_metadata(sqlalchemy_resolver, models):
    first = sqlalchemy_resolver.get_class_metadata("Person")
    assert sqlalchemy_resolver.get_class_metadata(models.Person) is first


def test_ambiguous_bare_name(catalog_resolver, models):
    with pytest.raises(AmbiguousEntityTypeError) as exc_info:
        catalog_resolver.get_class_metadata("Tag")

    assert set(exc_info.value.candidates) == {models.ProductTag, models.ArticleTag}
    assert "catalog.articles.Tag, catalog.products.Tag" in str(exc_info.value)


def test_qualified_name_disambiguates(catalog_resolver, models):
    metadata = catalog_resolver.get_class_metadata("catalog.products.Tag")
    assert metadata.mapped_class is models.ProductTag


# ---------------------------------------------------------------------------
# column_property()
# ---------------------------------------------------------------------------


def test_column_property_is_not_a_field(models):
    metadata = SqlAlchemySchemaMetadata(models.Account)

    assert metadata.get_field_names() == ["id", "first_name", "last_name"]
    assert metadata.has_field("full_name") is False
    assert metadata.has_association("full_name") is False


def test_new_instance_with_column_property(models):
    metadata = SqlAlchemySchemaMetadata(models.Account)
    blank = metadata.new_instance()

    assert metadata.get_field_value(blank, "first_name") == "Ada"
    assert metadata.get_field_value(blank, "last_name") == "Lovelace"
