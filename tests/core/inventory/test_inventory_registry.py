"""
tests/core/inventory/test_inventory_registry.py - GeneratorRegistry 테스트
"""

from unittest.mock import MagicMock

import pytest

from core.exceptions import GeneratorNotFoundError
from core.inventory.generator import ResourceGenerator
from core.inventory.registry import GeneratorRegistry


def empty_generator(client_factory):
    return ResourceGenerator("svc", "aws", [], client_factory)


class TestGeneratorRegistry:
    """GeneratorRegistry 테스트"""

    def test_register_decorator(self):
        registry = GeneratorRegistry()

        @registry.register("aws", "svc")
        def factory(client_factory):
            return empty_generator(client_factory)

        assert ("aws", "svc") in registry
        assert len(registry) == 1
        assert factory.__name__ == "factory"

    def test_create_returns_new_instance(self):
        """create는 호출마다 새 Generator를 생성"""
        registry = GeneratorRegistry()
        registry.add("aws", "svc", empty_generator)
        client_factory = MagicMock()

        first = registry.create("aws", "svc", client_factory)
        second = registry.create("aws", "svc", client_factory)

        assert first is not second
        first.discover()
        second.discover()
        assert client_factory.call_count == 2

    def test_create_unknown(self):
        registry = GeneratorRegistry()

        with pytest.raises(GeneratorNotFoundError) as exc_info:
            registry.create("aws", "ec2", MagicMock())

        assert exc_info.value.provider == "aws"
        assert exc_info.value.service == "ec2"

    def test_listing(self):
        registry = GeneratorRegistry()
        registry.add("octopusdeploy", "tag_sets", empty_generator)
        registry.add("aws", "wafregional", empty_generator)
        registry.add("aws", "cloudformation", empty_generator)

        assert registry.providers() == ["aws", "octopusdeploy"]
        assert registry.services("aws") == ["cloudformation", "wafregional"]
        assert registry.services("gcp") == []
        assert registry.keys() == [
            ("aws", "cloudformation"),
            ("aws", "wafregional"),
            ("octopusdeploy", "tag_sets"),
        ]

    def test_add_replaces(self):
        registry = GeneratorRegistry()
        replacement = MagicMock()
        registry.add("aws", "svc", empty_generator)
        registry.add("aws", "svc", replacement)

        registry.create("aws", "svc", MagicMock())

        replacement.assert_called_once()
        assert len(registry) == 1
