"""Shared exceptions module."""

from typing import Any, Optional, Sequence


def describe_entity_type(entity_type: Any) -> str:
    """Return a readable name for an entity type given as a class or a string."""
    if isinstance(entity_type, type):
        return f"{entity_type.__module__}.{entity_type.__qualname__}"
    return str(entity_type)


class FixtureWorksException(Exception):
    """Base exception for fixtureworks."""

    pass


class NotFoundException(FixtureWorksException):
    """Exception raised when an object is not found."""

    def __init__(self, message: Optional[str] = "Object not found"):
        """Create a new NotFoundException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class UnknownFieldError(FixtureWorksException):
    """Raised when a field definition names a field the entity does not declare."""

    def __init__(self, entity_type: Any, field_name: str):
        """Create a new UnknownFieldError instance.

        Args:
        ----
            entity_type: The entity type the definition targets.
            field_name (str): The field or association name that is not declared.

        """
        self.entity_type = entity_type
        self.field_name = field_name
        self.message = f"No such field in {describe_entity_type(entity_type)}: {field_name}"
        super().__init__(self.message)


class UnknownEntityTypeError(FixtureWorksException):
    """Raised when schema metadata cannot be resolved for an entity type."""

    def __init__(self, entity_type: Any, message: Optional[str] = None):
        """Create a new UnknownEntityTypeError instance.

        Args:
        ----
            entity_type: The class or name that could not be resolved.
            message (str, optional): Custom error message.

        """
        self.entity_type = entity_type
        self.message = message or f"No mapped entity type: {describe_entity_type(entity_type)}"
        super().__init__(self.message)


class AmbiguousEntityTypeError(UnknownEntityTypeError):
    """Raised when a bare class name matches more than one mapped class."""

    def __init__(self, entity_type: str, candidates: Sequence[type]):
        """Create a new AmbiguousEntityTypeError instance.

        Args:
        ----
            entity_type (str): The bare class name that was looked up.
            candidates: The mapped classes sharing that name.

        """
        self.candidates = tuple(candidates)
        names = ", ".join(sorted(describe_entity_type(c) for c in self.candidates))
        super().__init__(
            entity_type,
            f"Entity type '{entity_type}' is ambiguous, use a fully qualified name: {names}",
        )


class EntityDefinitionNotFoundError(NotFoundException, KeyError):
    """Raised when no entity definition is registered under a name."""

    def __init__(self, name: str):
        """Create a new EntityDefinitionNotFoundError instance.

        Args:
        ----
            name (str): The definition name that was looked up.

        """
        self.name = name
        super().__init__(f"No entity definition named '{name}'")

    def __str__(self) -> str:
        return str(self.message)


class DuplicateEntityDefinitionError(FixtureWorksException):
    """Raised when an entity definition name is registered twice."""

    def __init__(self, name: str):
        """Create a new DuplicateEntityDefinitionError instance.

        Args:
        ----
            name (str): The definition name that is already taken.

        """
        self.name = name
        self.message = f"Entity definition '{name}' is already defined"
        super().__init__(self.message)
