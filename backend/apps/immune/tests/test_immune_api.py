# apps/immune/tests/test_immune_api.py
"""
Tests for the immune HTTP endpoints
"""
from django.urls import reverse
from rest_framework.test import APIClient

from apps.domain.models import Antigen


class TestRespondEndpoint:
    """Test POST /api/immune/respond/"""

    def setup_method(self):
        self.client = APIClient()
        self.url = reverse("immune:respond")

    def test_fresh_then_recalled(self, immune_app):
        first = self.client.post(self.url, {"antigen": 5}, format="json")

        assert first.status_code == 200
        assert first.data["antigen"] == 5
        assert first.data["effort"] > 0
        assert first.data["recalled"] is False

        second = self.client.post(self.url, {"antigen": 5}, format="json")

        assert second.status_code == 200
        assert second.data == {"antigen": 5, "effort": 0, "recalled": True}

    def test_missing_antigen(self, immune_app):
        response = self.client.post(self.url, {}, format="json")

        assert response.status_code == 400
        assert "antigen" in response.data

    def test_non_integer_antigen(self, immune_app):
        response = self.client.post(self.url, {"antigen": "abc"}, format="json")

        assert response.status_code == 400
        assert "antigen" in response.data

    def test_out_of_range_antigen(self, immune_app):
        for value in (-1, 100):
            response = self.client.post(self.url, {"antigen": value}, format="json")

            assert response.status_code == 400
            assert response.data == {
                "error": f"Invalid antigen value: {value}",
                "antigen": value,
            }

    def test_store_is_shared_between_requests(self, immune_app):
        self.client.post(self.url, {"antigen": 17}, format="json")

        service = immune_app.get_service()

        assert service.respond(Antigen(17)).effort == 0

    def test_only_post_allowed(self, immune_app):
        response = self.client.get(self.url)

        assert response.status_code == 405


class TestServiceInfoEndpoint:
    """Test GET /api/immune/"""

    def test_service_info(self, immune_app):
        client = APIClient()

        response = client.get(reverse("immune:service-info"))

        assert response.status_code == 200
        assert response.data["environment"] == "test"
        assert response.data["max_value"] == 100
        assert response.data["store"] == "memory"


class TestServiceUnavailable:
    """Test endpoints when the configuration cannot be loaded"""

    def setup_method(self):
        self.client = APIClient()

    def test_bad_env_override_returns_503(self, immune_app, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("IMMUNE_RANDOM_SEED", "not-a-seed")

        respond = self.client.post(reverse("immune:respond"), {"antigen": 5}, format="json")
        info = self.client.get(reverse("immune:service-info"))

        assert respond.status_code == 503
        assert "IMMUNE_RANDOM_SEED" in respond.data["error"]
        assert info.status_code == 503
