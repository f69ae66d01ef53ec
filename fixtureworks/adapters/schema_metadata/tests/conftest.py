"""Declarative models for the SQLAlchemy schema metadata tests.

No database is involved; only mapper inspection and transient instances.
"""

from types import SimpleNamespace
from typing import Optional

import pytest
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, column_property, mapped_column, relationship

from fixtureworks.adapters.schema_metadata.sqlalchemy import SqlAlchemySchemaMetadataResolver


class Base(DeclarativeBase):
    pass


class Company(Base):
    __tablename__ = "company"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String, default="ACME")

    employees: Mapped[list["Person"]] = relationship(back_populates="employer")


class Person(Base):
    __tablename__ = "person"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String, default="")
    age: Mapped[int] = mapped_column(default=0)
    email: Mapped[Optional[str]] = mapped_column(nullable=True)
    token: Mapped[str] = mapped_column(default=lambda: "generated")
    employer_id: Mapped[Optional[int]] = mapped_column(ForeignKey("company.id"))

    employer: Mapped[Optional[Company]] = relationship(back_populates="employees")


class AuditLog(Base):
    """Model whose constructor must not run for blank instances."""

    __tablename__ = "audit_log"

    id: Mapped[int] = mapped_column(primary_key=True)
    action: Mapped[str] = mapped_column(default="created")

    def __init__(self, **kwargs):
        raise RuntimeError("AuditLog must be built through the audit service")


class Account(Base):
    """Model with a computed column_property."""

    __tablename__ = "account"

    id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(default="Ada")
    last_name: Mapped[str] = mapped_column(default="Lovelace")
    full_name: Mapped[str] = column_property(first_name + " " + last_name)


# Two mapped classes sharing the bare name "Tag".


class CatalogBase(DeclarativeBase):
    pass


class Tag(CatalogBase):
    __module__ = "catalog.products"
    __tablename__ = "product_tag"

    id = mapped_column(Integer, primary_key=True)


ProductTag = Tag


class Tag(CatalogBase):  # noqa: F811
    __module__ = "catalog.articles"
    __tablename__ = "article_tag"

    id = mapped_column(Integer, primary_key=True)


ArticleTag = Tag


class Unmapped:
    pass


@pytest.fixture
def models():
    return SimpleNamespace(
        Company=Company,
        Person=Person,
        AuditLog=AuditLog,
        Account=Account,
        ProductTag=ProductTag,
        ArticleTag=ArticleTag,
        Unmapped=Unmapped,
    )


@pytest.fixture
def sqlalchemy_resolver():
    return SqlAlchemySchemaMetadataResolver(Base)


@pytest.fixture
def catalog_resolver():
    return SqlAlchemySchemaMetadataResolver(CatalogBase.registry)
