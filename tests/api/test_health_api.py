"""Tests for health, operational and service information endpoints"""
from unittest.mock import AsyncMock, patch

from bazzarnet.core.config import config


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == config.service_name

    def test_liveness(self, client):
        response = client.get("/api/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    @patch("bazzarnet.api.health.check_system_resources", new_callable=AsyncMock)
    @patch("bazzarnet.api.health.check_database_health", new_callable=AsyncMock)
    def test_ready(self, mock_db_check, mock_resources_check, client):
        mock_db_check.return_value = {"name": "database", "status": "healthy"}
        mock_resources_check.return_value = {"name": "system_resources", "status": "healthy"}

        response = client.get("/api/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    @patch("bazzarnet.api.health.check_system_resources", new_callable=AsyncMock)
    @patch("bazzarnet.api.health.check_database_health", new_callable=AsyncMock)
    def test_not_ready_when_database_down(self, mock_db_check, mock_resources_check, client):
        mock_db_check.return_value = {"name": "database", "status": "unhealthy", "error": "timed out"}
        mock_resources_check.return_value = {"name": "system_resources", "status": "healthy"}

        response = client.get("/api/health/ready")

        assert response.status_code == 503
        assert response.json()["errors"] == ["database: timed out"]


class TestServiceInfo:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "operational"

    def test_version(self, client):
        assert client.get("/version").json() == {"version": config.service_version}

    def test_info(self, client):
        body = client.get("/info").json()

        assert body["service"] == config.service_name
        assert body["configuration"]["mongodb_database"] == config.mongodb_database

    def test_metrics(self, client):
        body = client.get("/api/metrics").json()

        assert body["service"] == config.service_name
        assert "memory_rss_mb" in body["process"]
