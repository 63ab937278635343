"""Tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from cipherlab.core.config import Settings, get_settings
from cipherlab.main import app

PREFIX = "/api/v1"


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestAffineEndpoints:
    """Affine encrypt/decrypt/crack routes."""

    def test_encrypt(self, client):
        response = client.post(f"{PREFIX}/affine/encrypt", json={"text": "HELLO", "a": 5, "b": 8})

        assert response.status_code == 200
        assert response.json() == {"result": "RCLLA"}

    def test_decrypt(self, client):
        response = client.post(f"{PREFIX}/affine/decrypt", json={"text": "RCLLA", "a": 5, "b": 8})

        assert response.status_code == 200
        assert response.json() == {"result": "HELLO"}

    def test_invalid_multiplier(self, client):
        response = client.post(f"{PREFIX}/affine/encrypt", json={"text": "HELLO", "a": 2, "b": 8})

        assert response.status_code == 400
        assert "coprime" in response.json()["detail"]

    def test_missing_field(self, client):
        response = client.post(f"{PREFIX}/affine/encrypt", json={"text": "HELLO", "a": 5})

        assert response.status_code == 422

    def test_crack(self, client):
        encrypted = client.post(
            f"{PREFIX}/affine/encrypt",
            json={"text": "MEET ME AT THE STREET TENT", "a": 5, "b": 8},
        ).json()["result"]

        response = client.post(f"{PREFIX}/affine/crack", json={"text": encrypted})

        assert response.status_code == 200
        candidates = response.json()["candidates"]
        assert 0 < len(candidates) <= 10
        assert candidates[0]["a"] == 5
        assert candidates[0]["b"] == 8
        assert candidates[0]["preview"] == "MEET ME AT THE STREET TENT"

    def test_crack_custom_letters(self, client):
        response = client.post(
            f"{PREFIX}/affine/crack",
            json={"text": "AAAA", "plain1": "A", "plain2": "B"},
        )

        assert response.status_code == 200
        assert len(response.json()["candidates"]) == 10

    def test_crack_without_letters(self, client):
        response = client.post(f"{PREFIX}/affine/crack", json={"text": "1234"})

        assert response.status_code == 400


class TestKeywordEndpoints:
    """Monoalphabetic and Vigenère routes."""

    def test_mono_encrypt(self, client):
        response = client.post(
            f"{PREFIX}/mono/encrypt",
            json={"text": "HELLO", "key": "QWERTYUIOPASDFGHJKLZXCVBNM"},
        )

        assert response.status_code == 200
        assert response.json() == {"result": "ITSSG"}

    def test_mono_decrypt(self, client):
        response = client.post(
            f"{PREFIX}/mono/decrypt",
            json={"text": "ITSSG", "key": "QWERTYUIOPASDFGHJKLZXCVBNM"},
        )

        assert response.json() == {"result": "HELLO"}

    def test_mono_bad_key(self, client):
        response = client.post(f"{PREFIX}/mono/encrypt", json={"text": "HELLO", "key": "ABC"})

        assert response.status_code == 400

    def test_vigenere_roundtrip(self, client):
        encrypted = client.post(
            f"{PREFIX}/vigenere/encrypt",
            json={"text": "Hello, World", "key": "KEY"},
        ).json()["result"]

        response = client.post(
            f"{PREFIX}/vigenere/decrypt",
            json={"text": encrypted, "key": "KEY"},
        )

        assert encrypted.startswith("Rijvs")
        assert response.json() == {"result": "Hello, World"}

    def test_vigenere_empty_key(self, client):
        response = client.post(f"{PREFIX}/vigenere/encrypt", json={"text": "HELLO", "key": "42"})

        assert response.status_code == 400


class TestPlayfairEndpoints:
    """Playfair routes."""

    def test_encrypt_returns_matrix(self, client):
        response = client.post(
            f"{PREFIX}/playfair/encrypt",
            json={"text": "Hello, World", "key": "MONARCHY"},
        )

        assert response.status_code == 200
        body = response.json()
        assert len(body["matrix"]) == 5
        assert all(len(row) == 5 for row in body["matrix"])
        assert body["matrix"][0] == ["M", "O", "N", "A", "R"]

    def test_decrypt_cleans_fillers(self, client):
        encrypted = client.post(
            f"{PREFIX}/playfair/encrypt",
            json={"text": "Hello, World", "key": "MONARCHY"},
        ).json()["result"]

        response = client.post(
            f"{PREFIX}/playfair/decrypt",
            json={"text": encrypted, "key": "MONARCHY"},
        )

        body = response.json()
        assert body["result"] == "Hello, World"
        assert body["raw"] == "Helxl, OworlDX"


class TestHillEndpoints:
    """Hill routes."""

    def test_encrypt(self, client):
        response = client.post(
            f"{PREFIX}/hill/encrypt",
            json={"text": "HI", "keyMat": [[3, 3], [2, 5]]},
        )

        assert response.status_code == 200
        assert response.json() == {"result": "TC", "inverse": [[15, 17], [20, 9]]}

    def test_decrypt(self, client):
        response = client.post(
            f"{PREFIX}/hill/decrypt",
            json={"text": "TC", "keyMat": [[3, 3], [2, 5]]},
        )

        assert response.json()["result"] == "HI"

    def test_encrypt_non_invertible_has_null_inverse(self, client):
        response = client.post(
            f"{PREFIX}/hill/encrypt",
            json={"text": "HI", "keyMat": [[2, 4], [6, 8]]},
        )

        assert response.status_code == 200
        assert response.json()["inverse"] is None

    def test_decrypt_non_invertible(self, client):
        response = client.post(
            f"{PREFIX}/hill/decrypt",
            json={"text": "HI", "keyMat": [[2, 4], [6, 8]]},
        )

        assert response.status_code == 400
        assert "not invertible" in response.json()["detail"]

    def test_bad_matrix(self, client):
        response = client.post(
            f"{PREFIX}/hill/encrypt",
            json={"text": "HI", "keyMat": [[1, 2, 3], [4, 5, 6]]},
        )

        assert response.status_code == 400


class TestEuclidEndpoint:
    """Extended Euclid route."""

    def test_coprime(self, client):
        response = client.post(f"{PREFIX}/euclid", json={"a": 15, "m": 26})

        assert response.status_code == 200
        assert response.json() == {"gcd": 1, "inverse": 7, "coefficients": {"x": 7, "y": -4}}

    def test_not_coprime(self, client):
        body = client.post(f"{PREFIX}/euclid", json={"a": 4, "m": 26}).json()

        assert body["gcd"] == 2
        assert body["inverse"] is None
        assert 4 * body["coefficients"]["x"] + 26 * body["coefficients"]["y"] == 2


class TestOpenAPI:
    """Documented error bodies match what the handlers return."""

    def test_error_schema_is_detail(self, client):
        schema = client.get(f"{PREFIX}/openapi.json").json()

        error_schema = schema["components"]["schemas"]["ErrorResponse"]
        assert list(error_schema["properties"]) == ["detail"]

    def test_error_body_matches_schema(self, client):
        response = client.post(f"{PREFIX}/affine/encrypt", json={"text": "HELLO", "a": 2, "b": 8})

        assert list(response.json()) == ["detail"]


class TestLimits:
    """Settings-driven request limits."""

    def test_text_too_long(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(max_text_length=5)
        try:
            response = client.post(
                f"{PREFIX}/vigenere/encrypt",
                json={"text": "HELLO WORLD", "key": "KEY"},
            )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 400
        assert "exceeds maximum" in response.json()["detail"]

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
