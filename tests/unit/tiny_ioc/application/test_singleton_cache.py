"""Unit tests for SingletonCache."""

import threading

import pytest

from tiny_ioc.application.singleton_cache import SingletonCache
from tiny_ioc.domain import ConstructionError, ISingletonCache, MissingDependencyError


class Service:
    pass


class TestSingletonCache:
    """Test cases for caching behavior."""

    def test_implements_interface(self):
        assert isinstance(SingletonCache(), ISingletonCache)

    def test_creates_once(self):
        """Test that the factory runs only on the first lookup."""
        cache = SingletonCache()
        calls = []

        def factory():
            calls.append(1)
            return Service()

        first = cache.get_or_create(Service, factory)
        second = cache.get_or_create(Service, factory)

        assert first is second
        assert len(calls) == 1

    def test_caches_none(self):
        """Test that a None result is cached rather than recomputed."""
        cache = SingletonCache()
        calls = []

        def factory():
            calls.append(1)
            return None

        assert cache.get_or_create(Service, factory) is None
        assert cache.get_or_create(Service, factory) is None
        assert len(calls) == 1
        assert cache.contains(Service)

    def test_factory_error_is_wrapped(self):
        cache = SingletonCache()

        def factory():
            raise RuntimeError("database down")

        with pytest.raises(ConstructionError) as exc_info:
            cache.get_or_create(Service, factory)

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "database down" in str(exc_info.value)
        assert not cache.contains(Service)

    def test_container_errors_pass_through(self):
        """Test that IoC errors raised by a factory are not re-wrapped."""
        cache = SingletonCache()
        error = MissingDependencyError(Service, "dep", int)

        def factory():
            raise error

        with pytest.raises(MissingDependencyError) as exc_info:
            cache.get_or_create(Service, factory)

        assert exc_info.value is error

    def test_cached_types_and_clear(self):
        cache = SingletonCache()
        cache.get_or_create(Service, Service)
        cache.get_or_create(int, lambda: 1)

        assert cache.cached_types() == [Service, int]

        cache.clear()

        assert cache.cached_types() == []
        assert not cache.contains(Service)

    def test_concurrent_first_access_creates_once(self):
        """Test that racing threads share a single factory call."""
        cache = SingletonCache()
        calls = []
        barrier = threading.Barrier(8)
        results = []

        def factory():
            calls.append(1)
            return Service()

        def worker():
            barrier.wait()
            results.append(cache.get_or_create(Service, factory))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert all(result is results[0] for result in results)
