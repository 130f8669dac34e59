"""Infrastructure patterns package."""

from patterncraft.infrastructure.patterns.singleton_access import get_singleton, register_singleton
from patterncraft.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["SingletonRegistry", "get_singleton", "register_singleton"]
