"""Protocols for registries."""

from typing import Protocol, TypeVar

EntryT = TypeVar("EntryT", covariant=True)


class RegistryProtocol(Protocol[EntryT]):
    """Base protocol for in-memory registries.

    Populated once at fixture-definition time. All lookups are synchronous dict reads.
    """

    def get(self, name: str) -> EntryT:
        """Get an entry by name. Raises KeyError if not found."""
        ...

    def list_all(self) -> list[EntryT]:
        """List all registered entries."""
        ...
