"""Creational design patterns: builders, prototypes, factories and singletons."""

__version__ = "1.0.0"
