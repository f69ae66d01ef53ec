"""Fixture definitions for ORM-mapped entities."""
