"""Shared test fixtures — a mock HTTP server and a configured client."""

from __future__ import annotations

import json
from typing import Any, Iterator

import pytest
from pytest_httpserver import HTTPServer
from werkzeug import Response

from cronos_platform import ClientConfig, CronosEvm, PlatformClient

API_KEY = "test-api-key"
PREFIX = "/api/v1/cdc-developer-platform"


@pytest.fixture()
def config() -> ClientConfig:
    return ClientConfig(api_key=API_KEY, chain_id=CronosEvm.TESTNET)


@pytest.fixture()
def client(httpserver: HTTPServer, config: ClientConfig) -> Iterator[PlatformClient]:
    """Return a client pointed at the pytest-httpserver instance."""
    with PlatformClient(config, httpserver.url_for("")) as c:
        yield c


def json_response(data: Any, status: int = 200) -> Response:
    """Build a Werkzeug JSON response."""
    return Response(
        json.dumps(data),
        status=status,
        content_type="application/json",
    )


def ok(data: Any) -> dict[str, Any]:
    """Wrap *data* in the platform's success envelope."""
    return {"status": "Success", "data": data}
