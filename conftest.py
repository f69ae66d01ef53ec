"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and fixtureworks/),
making its fixtures available to centralized tests AND colocated tests.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables: must be set before any fixtureworks module import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("FIXTUREWORKS_ENVIRONMENT", "test")
os.environ.setdefault("FIXTUREWORKS_LOG_LEVEL", "DEBUG")


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_metadata_resolver():
    """Empty FakeSchemaMetadataResolver; seed entity types per test."""
    from fixtureworks.adapters.schema_metadata.fake import FakeSchemaMetadataResolver

    return FakeSchemaMetadataResolver()


@pytest.fixture
def person_metadata(fake_metadata_resolver):
    """Person with fields name="", age=0, email=None and an employer association."""
    from fixtureworks.adapters.schema_metadata.fake import FakeSchemaMetadata

    return fake_metadata_resolver.seed(
        "Person",
        FakeSchemaMetadata(
            fields={"name": "", "age": 0, "email": None},
            associations={"employer": None},
        ),
    )
