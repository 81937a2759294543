# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

import threading

import pytest

from ormreflect.exceptions import AmbiguousAccessorError
from ormreflect.reflection.reflector import Reflector
from ormreflect.reflection.reflector_factory import DEFAULT_REFLECTOR_FACTORY, DefaultReflectorFactory, reflect


class Point:
    x: int
    y: int


class Pair[T]:
    left: T
    right: T


class Broken:
    def get_value(self) -> int:
        return 0

    def getValue(self) -> str:
        return ""


@pytest.mark.reflection
@pytest.mark.reflector
class TestReflectorFactory:
    def test_caches_reflectors(self):
        factory = DefaultReflectorFactory()
        reflector = factory.find_for_class(Point)
        assert isinstance(reflector, Reflector)
        assert reflector.type is Point
        assert factory.find_for_class(Point) is reflector
        assert Point in factory

    def test_disabled_cache(self):
        factory = DefaultReflectorFactory(class_cache_enabled=False)
        assert not factory.is_class_cache_enabled()
        assert factory.find_for_class(Point) is not factory.find_for_class(Point)
        assert Point not in factory

    def test_toggle_cache(self):
        factory = DefaultReflectorFactory()
        factory.set_class_cache_enabled(False)
        assert factory.find_for_class(Point) is not factory.find_for_class(Point)
        factory.set_class_cache_enabled(True)
        assert factory.find_for_class(Point) is factory.find_for_class(Point)

    def test_aliases_share_their_origin(self):
        factory = DefaultReflectorFactory()
        assert factory.find_for_class(Pair[int]) is factory.find_for_class(Pair)
        assert factory.find_for_class(list[int]).type is list

    def test_rejects_non_classes(self):
        with pytest.raises(TypeError, match="Can only reflect classes"):
            DefaultReflectorFactory().find_for_class("Point")

    def test_failed_build_is_not_cached(self):
        factory = DefaultReflectorFactory()
        with pytest.raises(AmbiguousAccessorError):
            factory.find_for_class(Broken)
        assert Broken not in factory
        with pytest.raises(AmbiguousAccessorError):
            factory.find_for_class(Broken)

    def test_concurrent_lookups_share_one_reflector(self):
        factory = DefaultReflectorFactory()
        workers = 8
        barrier = threading.Barrier(workers)
        results: list[Reflector] = []
        lock = threading.Lock()

        def lookup() -> None:
            barrier.wait()
            reflector = factory.find_for_class(Point)
            with lock:
                results.append(reflector)

        threads = [threading.Thread(target=lookup) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == workers
        assert all(reflector is results[0] for reflector in results)
        assert factory.find_for_class(Point) is results[0]

    def test_clear(self):
        factory = DefaultReflectorFactory()
        reflector = factory.find_for_class(Point)
        factory.clear()
        assert Point not in factory
        assert factory.find_for_class(Point) is not reflector

    def test_default_factory(self):
        assert reflect(Point) is DEFAULT_REFLECTOR_FACTORY.find_for_class(Point)
