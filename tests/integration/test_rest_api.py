"""Integration tests for the Complex Obs REST API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from complex_obs.adapters.inbound import create_app
from complex_obs.adapters.outbound import InMemoryComplexDataStorage
from complex_obs.domain.services import TextHandler
from complex_obs.infrastructure.container import Container


class ReadOnlyStorage(InMemoryComplexDataStorage):
    def write_chunks(self, filename, chunks):
        raise PermissionError(13, "Permission denied", str(self.path_for(filename)))


@pytest.fixture
def client(text_handler: TextHandler) -> TestClient:
    return TestClient(create_app(text_handler))


@pytest.mark.integration
class TestRestApi:
    """REST endpoints over a file-backed handler."""

    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["handler_type"] == "TextHandler"

    def test_create_and_read(self, client: TestClient):
        response = client.post(
            "/observations",
            json={"title": "notes.txt", "text": "Stable.\nContinue meds.", "person_id": 3},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["obs_id"] == 1
        assert body["person_id"] == 3
        filename = f"notes_{body['uuid']}.txt"
        assert body["value_complex"] == f"{filename} file |{filename}"

        response = client.get(f"/observations/{body['uuid']}/complex")
        assert response.status_code == 200
        assert response.text == "Stable.\nContinue meds."
        assert response.headers["content-type"].startswith("text/plain")
        assert response.headers["x-complex-obs-title"] == f"{filename} file"

    def test_download_view(self, client: TestClient):
        uuid = client.post("/observations", json={"title": "a.txt", "text": "x"}).json()["uuid"]
        response = client.get(f"/observations/{uuid}/complex", params={"view": "download"})
        assert response.headers["x-complex-obs-title"] == f"a_{uuid}.txt"

    def test_get_observation(self, client: TestClient):
        uuid = client.post("/observations", json={"title": "a.txt", "text": "x"}).json()["uuid"]
        response = client.get(f"/observations/{uuid}")
        assert response.status_code == 200
        assert response.json()["uuid"] == uuid

    def test_unknown_observation(self, client: TestClient):
        assert client.get("/observations/nope").status_code == 404
        assert client.get("/observations/nope/complex").status_code == 404
        assert client.delete("/observations/nope/complex").status_code == 404

    def test_purge(self, client: TestClient, text_handler: TextHandler):
        uuid = client.post("/observations", json={"title": "a.txt", "text": "x"}).json()["uuid"]
        assert len(text_handler.storage.list_files()) == 1

        response = client.delete(f"/observations/{uuid}/complex")
        assert response.status_code == 204
        assert text_handler.storage.list_files() == []

        # Payload is gone, so reading it reports not found
        assert client.get(f"/observations/{uuid}/complex").status_code == 404

    def test_write_failure(self, metrics):
        client = TestClient(create_app(TextHandler(ReadOnlyStorage(), metrics=metrics)))
        response = client.post("/observations", json={"title": "a.txt", "text": "x"})
        assert response.status_code == 500
        assert "Trying to write complex obs" in response.json()["detail"]

    def test_unencodable_text(self, client: TestClient, text_handler: TextHandler):
        """A lone surrogate is valid escaped JSON but cannot be stored as utf-8."""
        response = client.post(
            "/observations",
            content=b'{"title": "a.txt", "text": "a\\ud800b"}',
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 500
        assert "Trying to write complex obs" in response.json()["detail"]
        assert text_handler.storage.list_files() == []

    def test_default_handler_from_container(self, test_config):
        Container.create(test_config)
        client = TestClient(create_app())
        uuid = client.post("/observations", json={"title": "a.txt", "text": "x"}).json()["uuid"]
        assert client.get(f"/observations/{uuid}/complex").text == "x"
