import httpx
import pytest
from fastapi.testclient import TestClient

from cloudmedia.api.deps import get_media_service
from cloudmedia.integrations.cloudinary.uploader import CloudinaryUploader
from cloudmedia.main import create_app
from cloudmedia.services.media_service import MediaService


def build_client(credentials, handler):
    app = create_app()
    transport_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    uploader = CloudinaryUploader(credentials, chunk_size=8, client=transport_client)
    app.dependency_overrides[get_media_service] = lambda: MediaService(uploader)
    return TestClient(app)


@pytest.fixture
def received():
    return []


def test_upload_endpoint_returns_asset_id(credentials, received):
    async def handler(request: httpx.Request) -> httpx.Response:
        received.append((request.url.path, await request.aread()))
        return httpx.Response(200, json={"asset_id": "a1b2", "version": 1})

    with build_client(credentials, handler) as client:
        resp = client.post(
            "/api/v1/media/uploads",
            params={"visibility": "private"},
            files={"file": ("photo.jpg", b"jpeg-bytes-here", "image/jpeg")},
        )

    assert resp.status_code == 200
    assert resp.json() == {"asset_id": "a1b2", "visibility": "private"}
    assert received == [("/v1_1/demo/auto/private", b"jpeg-bytes-here")]


def test_upload_endpoint_defaults_to_public(credentials, received):
    def handler(request: httpx.Request) -> httpx.Response:
        received.append(request.url.path)
        return httpx.Response(200, json={"asset_id": "pub"})

    with build_client(credentials, handler) as client:
        resp = client.post("/api/v1/media/uploads", files={"file": ("a.txt", b"abc", "text/plain")})

    assert resp.status_code == 200
    assert received == ["/v1_1/demo/auto/upload"]


def test_upload_endpoint_maps_errors_to_bad_gateway(credentials):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)

    with build_client(credentials, handler) as client:
        resp = client.post("/api/v1/media/uploads", files={"file": ("a.txt", b"abc", "text/plain")})

    assert resp.status_code == 502
    assert resp.json() == {"detail": "name resolution failed"}


def test_upload_endpoint_rejects_unknown_visibility(credentials):
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("provider must not be called")

    with build_client(credentials, handler) as client:
        resp = client.post(
            "/api/v1/media/uploads",
            params={"visibility": "secret"},
            files={"file": ("a.txt", b"abc", "text/plain")},
        )
    assert resp.status_code == 422


def test_health_and_metrics(credentials):
    with build_client(credentials, lambda request: httpx.Response(200, json={"asset_id": "x"})) as client:
        client.post("/api/v1/media/uploads", files={"file": ("a.txt", b"abc", "text/plain")})
        assert client.get("/api/v1/health/live").json() == {"status": "ok"}
        metrics = client.get("/api/v1/metrics")
    assert metrics.status_code == 200
    assert "cloudmedia_uploads_total" in metrics.text


def test_unexpected_error_becomes_generic_500():
    def broken_service():
        raise RuntimeError("uploader wiring bug")

    app = create_app()
    app.dependency_overrides[get_media_service] = broken_service
    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.post("/api/v1/media/uploads", files={"file": ("a.txt", b"abc", "text/plain")})

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}
