"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Generator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from relaykit.globalid import GlobalIdCodec, reset_default_codec  # noqa: E402
from relaykit.nodes import NodeDispatcher, NodeRegistry  # noqa: E402


@dataclass(frozen=True)
class BusinessRecord:
    id: int
    name: str


@dataclass(frozen=True)
class PersonRecord:
    id: str
    name: str


BUSINESSES = {
    "19": BusinessRecord(id=19, name="Corner Bakery"),
    "20": BusinessRecord(id=20, name="Hardware Depot"),
}

PEOPLE = {
    "alice": PersonRecord(id="alice", name="Alice"),
    "bob:smith": PersonRecord(id="bob:smith", name="Bob Smith"),
}


async def fetch_business(internal_id: str, context: Any) -> BusinessRecord | None:
    return BUSINESSES.get(internal_id)


def fetch_person(internal_id: str, context: Any) -> PersonRecord | None:
    return PEOPLE.get(internal_id)


@pytest.fixture
def codec() -> GlobalIdCodec:
    """Codec with the default delimiter."""
    return GlobalIdCodec()


@pytest.fixture
def registry() -> NodeRegistry:
    """Frozen registry with Business (async) and Person (sync) resolvers."""
    registry = NodeRegistry()
    registry.register("Business", fetch_business, model=BusinessRecord)
    registry.register("Person", fetch_person, model=PersonRecord)
    return registry.freeze()


@pytest.fixture
def dispatcher(registry: NodeRegistry, codec: GlobalIdCodec) -> NodeDispatcher:
    return NodeDispatcher(registry, codec)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables and the cached default codec for each test."""
    original_env = os.environ.copy()
    reset_default_codec()
    yield
    os.environ.clear()
    os.environ.update(original_env)
    reset_default_codec()


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
