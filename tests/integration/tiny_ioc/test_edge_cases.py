"""Edge cases across registry, resolver and container."""

import threading

import pytest

from tiny_ioc import (
    ABSENT,
    AmbiguousAutowireError,
    ConstructionError,
    IoCContainer,
    autowired,
    bean,
)


class Counter:
    def __init__(self, value: int):
        self.value = value


class Config:
    created = 0
    lock = threading.Lock()

    @bean
    def counter(self) -> Counter:
        with Config.lock:
            Config.created += 1
        return Counter(Config.created)


class TestConcurrency:
    """Concurrent first-time resolution."""

    def test_factory_runs_once_under_contention(self):
        Config.created = 0
        container = IoCContainer(Config)
        container.init()
        barrier = threading.Barrier(10)
        results = []

        def worker():
            barrier.wait()
            results.append(container.get_bean(Counter))

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert Config.created == 1
        assert len(results) == 10
        assert all(result is results[0] for result in results)


class TestEdgeCases:
    """Unusual but valid or explicitly rejected shapes."""

    def test_empty_config_source(self):
        class EmptyConfig:
            pass

        container = IoCContainer(EmptyConfig)
        container.init()

        assert container.registry.factory_types() == []
        assert container.get_bean(Counter) is ABSENT

    def test_factory_may_use_container_types(self):
        class Wrapper:
            pass

        class NestedConfig:
            @bean
            def wrapper(self) -> Wrapper:
                return Wrapper()

            @bean
            def counter(self) -> Counter:
                return Counter(1)

        container = IoCContainer(NestedConfig)
        container.init()

        assert isinstance(container.get_bean(Wrapper), Wrapper)
        assert container.get_bean(Counter).value == 1

    def test_autowired_type_not_reachable_through_get_bean(self):
        class Report:
            @autowired
            def __init__(self, counter: Counter):
                self.counter = counter

        container = IoCContainer(Config)
        container.init()
        container.create(Report)

        assert container.get_bean(Report) is ABSENT

    def test_autowired_parameter_typed_as_non_bean_builtin(self):
        class Report:
            @autowired
            def __init__(self, title: str, counter: Counter):
                self.title = title
                self.counter = counter

        container = IoCContainer(Config)
        container.init()

        report = container.create(Report)

        assert report.title is None
        assert isinstance(report.counter, Counter)

    def test_ambiguous_constructors(self):
        class Report:
            @autowired
            def __init__(self, counter: Counter):
                self.counter = counter

            @classmethod
            @autowired
            def empty(cls):
                return cls(None)

        container = IoCContainer(Config)
        container.init()

        with pytest.raises(AmbiguousAutowireError):
            container.create(Report)

    def test_failed_factory_result_is_not_cached(self):
        class Flaky:
            attempts = 0

        class FlakyConfig:
            @bean
            def counter(self) -> Counter:
                Flaky.attempts += 1
                if Flaky.attempts == 1:
                    raise RuntimeError("first call fails")
                return Counter(Flaky.attempts)

        container = IoCContainer(FlakyConfig)
        container.init()

        with pytest.raises(ConstructionError):
            container.get_bean(Counter)
        assert container.get_bean(Counter).value == 2

    def test_factory_error_surfaces_through_autowiring(self):
        class FailingConfig:
            @bean
            def counter(self) -> Counter:
                raise RuntimeError("no counter")

        class Report:
            @autowired
            def __init__(self, counter: Counter):
                self.counter = counter

        container = IoCContainer(FailingConfig)
        container.init()

        with pytest.raises(ConstructionError) as exc_info:
            container.create(Report)

        assert exc_info.value.cls is Counter
        assert isinstance(exc_info.value.__cause__, RuntimeError)
