"""Entity definition domain test fixtures."""

import pytest

from fixtureworks.domains.definitions.registry import EntityDefinitionRegistry


@pytest.fixture
def definition_registry(fake_metadata_resolver, person_metadata):
    """Registry bound to a resolver that knows Person."""
    return EntityDefinitionRegistry(fake_metadata_resolver)
