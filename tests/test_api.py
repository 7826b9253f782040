"""
FastAPI endpoint tests for the Money Amount Translator API.

Uses httpx + FastAPI TestClient, so no real server is needed.
"""

from __future__ import annotations

import time

from api import app
from fastapi.testclient import TestClient

client = TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["max_scale_word"] == "Decillion"


class TestTranslateEndpoint:
    def test_translates_amount(self) -> None:
        resp = client.post("/translate", json={"amount": "921.015"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["words"] == "Nine Hundred Twenty-One Dollars And Two Cents"
        assert data["amount"] == "921.015"
        assert data["magnitude"] == "921"
        assert data["cents"] == 2
        assert data["is_negative"] is False

    def test_negative_cents_only(self) -> None:
        data = client.post("/translate", json={"amount": "-0.005"}).json()
        assert data["words"] == "Negative One Cent"
        assert data["is_negative"] is True

    def test_negative_rounding_to_zero(self) -> None:
        data = client.post("/translate", json={"amount": "-0.001"}).json()
        assert data["words"] == "Zero"

    def test_huge_magnitude_is_string(self) -> None:
        amount = "9" * 36
        data = client.post("/translate", json={"amount": amount}).json()
        assert data["magnitude"] == amount
        assert data["words"].startswith("Nine Hundred Ninety-Nine Decillion")

    def test_path_variant(self) -> None:
        resp = client.get("/translate/1.015")
        assert resp.status_code == 200
        assert resp.json()["words"] == "One Dollar And Two Cents"


class TestTranslateErrors:
    def test_unsupported_magnitude_returns_422(self) -> None:
        resp = client.post("/translate", json={"amount": "1" + "0" * 36})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "UNSUPPORTED_MAGNITUDE"

    def test_huge_exponent_path_rejected_quickly(self) -> None:
        started = time.perf_counter()
        resp = client.get("/translate/1e20000000")
        assert time.perf_counter() - started < 1.0
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "UNSUPPORTED_MAGNITUDE"

    def test_long_literal_rejected_quickly(self) -> None:
        started = time.perf_counter()
        resp = client.post("/translate", json={"amount": "9" * 100000})
        assert time.perf_counter() - started < 1.0
        assert resp.status_code == 422
        assert resp.json()["detail"]["details"]["groups_required"] > 12

    def test_arabic_indic_digits_rejected(self) -> None:
        resp = client.post("/translate", json={"amount": "\u0661\u0662"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_AMOUNT"

    def test_malformed_amount_returns_422(self) -> None:
        resp = client.post("/translate", json={"amount": "1,000"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_AMOUNT"

    def test_nan_path_returns_422(self) -> None:
        resp = client.get("/translate/NaN")
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_AMOUNT"

    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/translate", json={})
        assert resp.status_code == 422


class TestBatchEndpoint:
    def test_mixed_batch(self) -> None:
        resp = client.post(
            "/translate/batch",
            json={"amounts": ["1", "0.995", "abc", "1e36"]},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["error_count"] == 2
        words = [item["words"] for item in data["results"]]
        assert words[:2] == ["One Dollar", "One Hundred Cents"]
        codes = [item["error"]["code"] for item in data["results"][2:]]
        assert codes == ["INVALID_AMOUNT", "UNSUPPORTED_MAGNITUDE"]

    def test_batch_limit_from_config(self, monkeypatch) -> None:
        monkeypatch.setenv("AMOUNT_TRANSLATOR_MAX_BATCH", "2")
        resp = client.post("/translate/batch", json={"amounts": ["1", "2", "3"]})
        assert resp.status_code == 413

    def test_empty_batch_returns_422(self) -> None:
        resp = client.post("/translate/batch", json={"amounts": []})
        assert resp.status_code == 422
