"""Pytest configuration and shared fixtures for Complex Obs tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from complex_obs.adapters.outbound import FileComplexDataStorage, InMemoryComplexDataStorage
from complex_obs.domain.entities import ComplexData, Obs
from complex_obs.domain.services import TextHandler
from complex_obs.infrastructure.config import Config, StorageConfig
from complex_obs.infrastructure.container import Container
from complex_obs.infrastructure.metrics import ComplexObsMetrics


@pytest.fixture(autouse=True)
def reset_container():
    """Reset the DI container before each test."""
    Container.reset()
    yield
    Container.reset()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory(prefix="complex_obs_test_") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir: Path) -> Config:
    """Provide a test configuration rooted in a temporary directory."""
    return Config(
        storage=StorageConfig(
            application_data_dir=temp_dir,
            complex_obs_dir=Path("complex_obs"),
        ),
    )


@pytest.fixture
def metrics_registry() -> CollectorRegistry:
    """Provide a fresh registry to avoid conflicts between tests."""
    return CollectorRegistry(auto_describe=True)


@pytest.fixture
def metrics(metrics_registry: CollectorRegistry) -> ComplexObsMetrics:
    """Provide metrics bound to a private registry."""
    return ComplexObsMetrics(registry=metrics_registry)


@pytest.fixture
def file_storage(temp_dir: Path) -> FileComplexDataStorage:
    """Provide file storage in a temporary directory."""
    return FileComplexDataStorage(temp_dir / "complex_obs")


@pytest.fixture
def memory_storage() -> InMemoryComplexDataStorage:
    """Provide in-memory storage."""
    return InMemoryComplexDataStorage()


@pytest.fixture
def text_handler(file_storage: FileComplexDataStorage, metrics: ComplexObsMetrics) -> TextHandler:
    """Provide a text handler over file storage."""
    return TextHandler(file_storage, metrics=metrics)


@pytest.fixture
def sample_text() -> str:
    """Provide sample clinical note text."""
    return "Patient reports mild headache.\nBP 120/80, afebrile.\r\nPlan: review in 2 weeks, évaluation."


@pytest.fixture
def text_obs(sample_text: str) -> Obs:
    """Provide an obs carrying a text payload."""
    return Obs(
        obs_id=42,
        concept="CLINICAL NOTE",
        person_id=7,
        complex_data=ComplexData(title="notes.txt", data=sample_text),
    )


@pytest.fixture
def container(test_config: Config) -> Container:
    """Provide a configured container for testing."""
    return Container.create(test_config)


# Pytest markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
