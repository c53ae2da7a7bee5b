"""Models, moderations, OCR, classifiers and fine-tuning services."""
from __future__ import annotations

import json

import httpx
import pytest

from mistral_client import APIError
from mistral_client.models import ClassifierRequest, Message, ModerationRequest, OCRRequest


def _router(routes):
    """Build a handler answering ``(method, path)`` keys and recording bodies."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        seen.append((request.method, request.url.path, body))
        return httpx.Response(200, json=routes[(request.method, request.url.path)])

    return handler, seen


def test_models_endpoints(make_client):
    enhanced = {
        "id": "mistral-large",
        "version": "2",
        "capabilities": [{"name": "function_calling", "available": True}],
        "performance": [{"metric": "latency", "value": 1.5, "unit": "s"}],
        "max_tokens": 32000,
        "token_costs": {"input": 0.002, "output": 0.006},
    }
    handler, seen = _router(
        {
            ("GET", "/v1/models"): {"object": "list", "data": [{"id": "mistral-large"}]},
            ("GET", "/v1/models/mistral-large"): {"id": "mistral-large", "owned_by": "mistralai"},
            ("GET", "/v1/models/mistral-large/enhanced"): enhanced,
            ("GET", "/v1/models/mistral-large/versions"): [enhanced],
            ("GET", "/v1/models/mistral-large/capabilities"): enhanced["capabilities"],
            ("GET", "/v1/models/mistral-large/performance"): enhanced["performance"],
            ("POST", "/v1/models/mistral-large/tokenize"): {"token_count": 7},
        }
    )
    models = make_client(handler).models
    assert [m.id for m in models.list().data] == ["mistral-large"]  # nosec B101
    assert models.get("mistral-large").owned_by == "mistralai"  # nosec B101
    assert models.get_enhanced("mistral-large").token_costs.output == 0.006  # nosec B101
    assert models.list_versions("mistral-large")[0].version == "2"  # nosec B101
    assert models.get_capabilities("mistral-large")[0].available is True  # nosec B101
    assert models.get_performance("mistral-large")[0].unit == "s"  # nosec B101
    assert models.estimate_tokens("mistral-large", "hello world") == 7  # nosec B101
    assert seen[-1][2] == {"text": "hello world"}  # nosec B101


def test_moderations(make_client):
    reply = {"id": "mod-1", "model": "mistral-moderation", "results": [{"categories": {"violence": False}, "category_scores": {"violence": 0.01}}]}
    handler, seen = _router({("POST", "/v1/moderations"): reply, ("POST", "/v1/chat/moderations"): reply})
    client = make_client(handler)

    resp = client.moderations.create(ModerationRequest(input=["hello"], model="mistral-moderation"))
    assert resp.results[0].category_scores["violence"] == 0.01  # nosec B101
    client.moderations.create_chat([Message(role="user", content="hi")], "mistral-moderation")
    assert seen[1][2] == {"input": [{"role": "user", "content": "hi"}], "model": "mistral-moderation"}  # nosec B101


def test_ocr_sync_and_async(make_client):
    result = {
        "id": "ocr-1",
        "model": "mistral-ocr",
        "results": [
            {
                "file_id": "file-1",
                "text": "Invoice",
                "language": "en",
                "blocks": [{"text": "Invoice", "confidence": 0.98, "bounding_box": {"x": 1, "y": 2, "width": 30, "height": 8}}],
            }
        ],
    }
    handler, seen = _router(
        {
            ("POST", "/v1/ocr"): result,
            ("POST", "/v1/ocr/async"): {"job_id": "job-9"},
            ("GET", "/v1/ocr/async/job-9"): result,
        }
    )
    ocr = make_client(handler).ocr
    request = OCRRequest(model="mistral-ocr", files=["file-1"])
    assert ocr.create(request).results[0].blocks[0].bounding_box.width == 30  # nosec B101
    assert ocr.create_async(request) == "job-9"  # nosec B101
    assert ocr.get_async_result("job-9").results[0].text == "Invoice"  # nosec B101
    assert "languages" not in seen[0][2]  # nosec B101


def test_classifiers(make_client):
    reply = {"id": "cls-1", "results": [{"input": "great", "labels": ["positive"], "scores": {"positive": 0.9, "negative": 0.1}, "confidence": 0.9}]}
    handler, seen = _router({("POST", "/v1/classifiers"): reply})
    classifiers = make_client(handler).classifiers

    assert classifiers.confidence("great", ["positive", "negative"], "clf") == {"positive": 0.9, "negative": 0.1}  # nosec B101
    classifiers.batch(["a", "b"], ["x"], "clf")
    assert seen[-1][2] == {"model": "clf", "input": ["a", "b"], "labels": ["x"]}  # nosec B101

    request = ClassifierRequest(model="clf", input=["a"], labels=["x", "y"])
    classifiers.multi_label(request)
    assert seen[-1][2]["multi_label"] is True and request.multi_label is None  # nosec B101


def test_classifier_confidence_without_results(make_client):
    handler, _ = _router({("POST", "/v1/classifiers"): {"id": "cls-2", "results": []}})
    with pytest.raises(APIError, match="no classification results returned"):
        make_client(handler).classifiers.confidence("text", ["a"], "clf")


def test_fine_tuning_jobs(make_client):
    job = {"id": "ft-1", "model": "open-mistral-7b", "status": "RUNNING", "training_files": ["file-1"], "hyperparameters": {"epochs": 3}, "created_at": 1}
    handler, seen = _router(
        {
            ("POST", "/v1/fine_tuning/jobs"): job,
            ("GET", "/v1/fine_tuning/jobs"): {"object": "list", "data": [job]},
            ("GET", "/v1/fine_tuning/jobs/ft-1"): job,
            ("POST", "/v1/fine_tuning/jobs/ft-1/cancel"): dict(job, status="CANCELLED"),
        }
    )
    ft = make_client(handler).fine_tuning
    created = ft.create("open-mistral-7b", ["file-1"], {"epochs": 3})
    assert created.hyperparameters == {"epochs": 3}  # nosec B101
    assert seen[0][2] == {"model": "open-mistral-7b", "training_files": ["file-1"], "hyperparameters": {"epochs": 3}}  # nosec B101
    assert [j.id for j in ft.list().data] == ["ft-1"]  # nosec B101
    assert ft.get("ft-1").status == "RUNNING"  # nosec B101
    assert ft.cancel("ft-1").status == "CANCELLED"  # nosec B101
