"""Infrastructure adapters.

Adapters implement protocols defined in core/protocols/.
Each adapter wraps an ORM binding (SQLAlchemy) or stands in for one in tests.
"""
