"""Integration tests for faults outside the guarded provider paths."""

from __future__ import annotations

from http import HTTPStatus

from flask import Flask
from flask.testing import FlaskClient

from lingorelay.backend.app.services.batch import BatchResult


def test_unexpected_batch_fault_returns_500(
    app: Flask, client: FlaskClient, monkeypatch
) -> None:
    app.config.update(PROPAGATE_EXCEPTIONS=False)

    def explode(self: BatchResult) -> dict:
        raise RuntimeError("serialisation exploded")

    monkeypatch.setattr(BatchResult, "as_dict", explode)

    response = client.post("/translate/batch", json={"texts": ["hello"]})

    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.get_json() == {
        "error": "Internal server error",
        "details": "serialisation exploded",
    }


def test_inconsistent_batch_payload_is_not_a_client_error(
    app: Flask, client: FlaskClient, monkeypatch
) -> None:
    """Response validation failures surface as 500, not 400."""

    app.config.update(PROPAGATE_EXCEPTIONS=False)

    def inconsistent(self: BatchResult) -> dict:
        return {"count": 1, "success": 1, "failed": 1, "results": []}

    monkeypatch.setattr(BatchResult, "as_dict", inconsistent)

    response = client.post("/translate/batch", json={"texts": ["hello"]})

    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.get_json()["error"] == "Internal server error"
