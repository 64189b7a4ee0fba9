from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.pod_registry import PodRegistry

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def _make_pod(namespace="a", name="b", containers=(("c1", "img1"),), **extra):
    pod = {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": {"namespace": namespace, "name": name},
        "spec": {"containers": [{"name": c, "image": i} for c, i in containers]},
    }
    pod.update(extra)
    return pod


@pytest.fixture
def make_pod():
    return _make_pod


@pytest.fixture
def registry():
    return PodRegistry(clock=lambda: FIXED_NOW)


@pytest.fixture
def settings():
    return Settings(VKUBELET_POD_IP="10.1.2.3", _env_file=None)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
