def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200

    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["message"] == "Zenith Finance API is operational"


def test_root_info(client):
    response = client.get("/")
    assert response.status_code == 200
    payload = response.json()
    assert payload == {"status": "ok", "service": "Zenith Finance API", "version": "1.0"}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_wrong_method_uses_error_envelope(client):
    response = client.get("/api/v1/waitlist")
    assert response.status_code == 405
    assert "error" in response.json()
