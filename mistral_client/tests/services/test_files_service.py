"""Files service tests."""
from __future__ import annotations

import httpx

FILE = {"id": "file-1", "object": "file", "bytes": 12, "created_at": 1700000000, "filename": "train.jsonl", "purpose": "fine-tune"}


def test_list_get_delete(make_client):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        if request.method == "DELETE":
            return httpx.Response(200, json={"id": "file-1", "deleted": True})
        if request.url.path == "/v1/files":
            return httpx.Response(200, json={"object": "list", "data": [FILE]})
        return httpx.Response(200, json=FILE)

    client = make_client(handler)
    listing = client.files.list()
    assert [f.filename for f in listing.data] == ["train.jsonl"]  # nosec B101
    fetched = client.files.get("file-1")
    assert fetched.bytes == 12 and fetched.created_at.year == 2023  # nosec B101
    assert client.files.delete("file-1") is None  # nosec B101
    assert seen == [("GET", "/v1/files"), ("GET", "/v1/files/file-1"), ("DELETE", "/v1/files/file-1")]  # nosec B101


def test_upload_sends_multipart_file_and_purpose(make_client, tmp_path):
    path = tmp_path / "train.jsonl"
    path.write_bytes(b'{"prompt": "x"}\n')
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = request.read()
        return httpx.Response(200, json=FILE)

    uploaded = make_client(handler).files.upload(path, "fine-tune")
    assert uploaded.id == "file-1"  # nosec B101
    assert seen["content_type"].startswith("multipart/form-data")  # nosec B101
    assert b'name="file"; filename="train.jsonl"' in seen["body"]  # nosec B101
    assert b'name="purpose"' in seen["body"] and b"fine-tune" in seen["body"]  # nosec B101
    assert b'{"prompt": "x"}' in seen["body"]  # nosec B101


def test_download_returns_raw_bytes(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/files/file-1/content"  # nosec B101
        return httpx.Response(200, content=b"\x00raw bytes")

    assert make_client(handler).files.download("file-1") == b"\x00raw bytes"  # nosec B101
