"""Unit tests for the singleton registry and access helpers."""

import threading

from patterncraft.config.manager import ConfigurationManager
from patterncraft.config.schemas import PoolConfig
from patterncraft.infrastructure.patterns import SingletonRegistry, get_singleton, register_singleton
from patterncraft.infrastructure.pool import DatabaseConnectionPool


class TestSingletonRegistry:
    """Test cases for SingletonRegistry."""

    def test_registry_is_process_wide(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_same_instance_returned(self):
        first = get_singleton(DatabaseConnectionPool)
        second = get_singleton(DatabaseConnectionPool)

        assert first is second

    def test_constructor_arguments_only_apply_on_creation(self):
        first = get_singleton(DatabaseConnectionPool, PoolConfig(max_connections=3))
        second = get_singleton(DatabaseConnectionPool, PoolConfig(max_connections=50))

        assert second is first
        assert second.max_connections == 3

    def test_register_injects_instance(self):
        manager = ConfigurationManager(environ={})

        returned = register_singleton(ConfigurationManager, manager)

        assert returned is manager
        assert get_singleton(ConfigurationManager) is manager
        assert SingletonRegistry.get_instance().is_registered(ConfigurationManager)

    def test_reset_drops_instances(self):
        first = get_singleton(DatabaseConnectionPool)

        SingletonRegistry.get_instance().reset()

        assert get_singleton(DatabaseConnectionPool) is not first

    def test_concurrent_first_access_creates_one_instance(self):
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(get_singleton(DatabaseConnectionPool))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result is results[0] for result in results)


class TestDatabaseConnectionPool:
    """Test cases for the connection pool."""

    def test_default_max_connections(self):
        assert DatabaseConnectionPool().max_connections == 10

    def test_acquire_connection(self):
        connection = DatabaseConnectionPool().acquire_connection()

        assert connection.startswith("conn-")
        assert connection[len("conn-"):].isdigit()
