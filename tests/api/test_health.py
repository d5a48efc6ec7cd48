"""
Tests for the health check endpoint.
"""


def test_health_check_returns_200(client):
    """
    Verify the health endpoint responds with HTTP 200.

    If this fails, nothing else will work.
    """
    response = client.get("/health")
    assert response.status_code == 200


def test_health_check_returns_service_name(client):
    """
    Monitoring parses this field, so its value must not drift.
    """
    response = client.get("/health")
    data = response.json()
    assert data["service"] == "erp-accounting"
    assert data["status"] == "healthy"


def test_health_check_reports_database_status(client):
    response = client.get("/health")
    data = response.json()
    assert data["database"] in ("healthy", "unhealthy")
