"""Registry holding one instance per class for the lifetime of the process."""

import threading
from typing import Any, ClassVar, Dict, Optional, Type, TypeVar, cast

from patterncraft.infrastructure.logging.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class SingletonRegistry:
    """
    Registry for singleton instances.

    Instances are created on first access and never torn down, unless
    ``reset()`` is called (tests do this between cases). An instance can also
    be supplied up front with ``register()``, which is how callers inject a
    preconfigured object instead of relying on lazy construction.
    """

    _instance: ClassVar[Optional["SingletonRegistry"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide registry."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """Return the instance of ``singleton_class``, creating it on first use.

        Constructor arguments are only used by the call that creates the
        instance; later calls return the existing instance unchanged.
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    logger.debug("Created singleton", singleton=singleton_class.__name__)
        return cast(T, instance)

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register an explicitly constructed instance."""
        with self._lock:
            self._instances[singleton_class] = instance
            logger.debug("Registered singleton", singleton=singleton_class.__name__)

    def is_registered(self, singleton_class: Type) -> bool:
        return singleton_class in self._instances

    def reset(self) -> None:
        """Drop every instance."""
        with self._lock:
            self._instances.clear()
