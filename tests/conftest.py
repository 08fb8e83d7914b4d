import pytest
from fastapi.testclient import TestClient

from graph_registry.adapters.registry import InMemoryGraphRegistry
from graph_registry.adapters.solver import BFSPathSolver
from graph_registry.api import create_app
from graph_registry.config import AppConfig, reset_config
from graph_registry.container import Container, reset_container
from graph_registry.services import GraphService


@pytest.fixture(autouse=True)
def _fresh_globals():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def registry():
    return InMemoryGraphRegistry()


@pytest.fixture
def service(registry):
    return GraphService(registry=registry, solver=BFSPathSolver())


@pytest.fixture
def container():
    return Container.create_default(AppConfig())


@pytest.fixture
def client(container):
    return TestClient(create_app(container))
