import os

import pytest

# Plain-text logs keep pytest's captured output readable
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture(scope="session")
def client():
    from fastapi.testclient import TestClient

    from apps.api.main import app

    return TestClient(app)


@pytest.fixture(scope="session")
def openapi_spec(client):
    r = client.get("/openapi.json")
    r.raise_for_status()
    return r.json()


@pytest.fixture
def default_config():
    from xuankong.chart_config import ChartConfig

    return ChartConfig(
        orthodox_max_deg=3.0,
        void_min_deg=7.0,
        enable_alternate_board=True,
        enable_gate_detection=True,
    )
