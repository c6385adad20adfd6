"""
Test the health check endpoints.
"""
from fastapi import status


class TestHealthEndpoints:

    def test_basic_health(self, test_client, api_client):
        response = test_client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert "Careers Admin Console" in data["message"]
        api_client.check_health.assert_not_called()

    def test_detailed_health_backend_reachable(self, test_client, api_client):
        api_client.check_health.return_value = True

        response = test_client.get("/api/health/detailed")

        data = response.json()
        assert data["careers_backend"] == {
            "health_url": "https://careers.test/api/health",
            "reachable": True,
        }
        assert data["app_info"]["name"] == "Careers Admin Console"

    def test_detailed_health_degraded_when_backend_down(self, test_client, api_client):
        api_client.check_health.return_value = False

        response = test_client.get("/api/health/detailed")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "degraded"
