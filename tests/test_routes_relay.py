"""Tests des endpoints de relais `/api/upload-image-to-imgbb` et `/api/generate-aura`."""

from __future__ import annotations

import httpx

from aura_backend.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_OK,
)
from tests.fakes import HF_HOST, IMAGE_HOST, IMGBB_HOST, happy_upstream

IMAGE_URL = f"https://{IMAGE_HOST}/x/photo.jpg"


def test_upload_success(client, mock_upstream):
    seen = mock_upstream(happy_upstream)
    r = client.post("/api/upload-image-to-imgbb", json={"imageData": "data:image/png;base64,QUJD"})
    assert r.status_code == HTTP_OK
    assert r.json() == {"imageUrl": IMAGE_URL}
    assert [req.url.host for req in seen] == [IMGBB_HOST]


def test_upload_missing_image_data_is_400(client, mock_upstream):
    seen = mock_upstream(happy_upstream)
    for body in ({}, {"imageData": ""}):
        r = client.post("/api/upload-image-to-imgbb", json=body)
        assert r.status_code == HTTP_BAD_REQUEST
        assert r.json()["error"] == "No image data provided."
    assert seen == []


def test_upload_rejected_by_imgbb(client, mock_upstream):
    mock_upstream(
        lambda request: httpx.Response(200, json={"success": False, "error": {"message": "M"}})
    )
    r = client.post("/api/upload-image-to-imgbb", json={"imageData": "QUJD"})
    assert r.status_code == HTTP_INTERNAL_SERVER_ERROR
    assert r.json() == {"error": "Failed to upload image to ImgBB", "details": "M"}


def test_upload_upstream_http_error(client, mock_upstream):
    mock_upstream(lambda request: httpx.Response(400, json={"error": {"message": "Bad key"}}))
    r = client.post("/api/upload-image-to-imgbb", json={"imageData": "QUJD"})
    assert r.status_code == HTTP_INTERNAL_SERVER_ERROR
    body = r.json()
    assert body["error"] == "An internal server error occurred during image upload."
    assert body["details"] == "ImgBB upload failed: Bad key"


def test_generate_success(client, mock_upstream):
    seen = mock_upstream(happy_upstream)
    r = client.post("/api/generate-aura", json={"prompt": "p", "imageUrl": IMAGE_URL})
    assert r.status_code == HTTP_OK
    output = r.json()["output"]
    assert len(output) == 1
    assert output[0].startswith("data:image/webp;base64,")
    assert [req.url.host for req in seen] == [IMAGE_HOST, HF_HOST]


def test_generate_missing_fields_is_400(client, mock_upstream):
    seen = mock_upstream(happy_upstream)
    for body in ({"prompt": "p"}, {"imageUrl": IMAGE_URL}, {"prompt": "", "imageUrl": ""}):
        r = client.post("/api/generate-aura", json=body)
        assert r.status_code == HTTP_BAD_REQUEST
        assert r.json()["error"] == "Missing prompt or image URL"
    assert seen == []


def test_generate_image_fetch_failure(client, mock_upstream):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == IMAGE_HOST:
            raise httpx.ConnectError("unreachable", request=request)
        return happy_upstream(request)

    seen = mock_upstream(handler)
    r = client.post("/api/generate-aura", json={"prompt": "p", "imageUrl": IMAGE_URL})
    assert r.status_code == HTTP_INTERNAL_SERVER_ERROR
    body = r.json()
    assert body["error"] == "Failed to process uploaded image"
    assert "unreachable" in body["details"]
    assert [req.url.host for req in seen] == [IMAGE_HOST]


def test_generate_inference_failure(client, mock_upstream):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == HF_HOST:
            return httpx.Response(401, json={"error": "Invalid credentials in Authorization header"})
        return happy_upstream(request)

    mock_upstream(handler)
    r = client.post("/api/generate-aura", json={"prompt": "p", "imageUrl": IMAGE_URL})
    assert r.status_code == HTTP_INTERNAL_SERVER_ERROR
    assert r.json() == {
        "error": "Failed to generate aura",
        "details": "Hugging Face API failed: Invalid credentials in Authorization header",
    }


def test_malformed_body_is_400(client):
    r = client.post(
        "/api/generate-aura",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == HTTP_BAD_REQUEST
    assert r.json()["error"] == "Invalid request body"


def test_oversized_body_is_413(client):
    r = client.post(
        "/api/upload-image-to-imgbb",
        content=b"{}",
        headers={"Content-Type": "application/json", "Content-Length": str(60 * 1024 * 1024)},
    )
    assert r.status_code == 413
