import pytest
from django.db import DatabaseError


@pytest.mark.django_db
def test_health_reports_db_and_gateway(client):
    r = client.get("/health/")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["components"]["db"] == {"ok": True}
    assert body["components"]["payment_gateway"] == {"configured": True}


@pytest.mark.django_db
def test_health_unconfigured_gateway_is_still_up(client, settings):
    settings.RAZORPAY_KEY_ID = ""
    r = client.get("/health/")
    assert r.status_code == 200
    assert r.json()["components"]["payment_gateway"] == {"configured": False}


@pytest.mark.django_db
def test_health_db_down_returns_503(client, monkeypatch):
    class DownConnection:
        def cursor(self):
            raise DatabaseError("db down")

    monkeypatch.setattr("apps.monitoring.api.connection", DownConnection())
    r = client.get("/health/")
    assert r.status_code == 503
    assert r.json()["components"]["db"] == {"ok": False}


def test_unknown_route_uses_json_envelope(client):
    r = client.get("/no/such/route/")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Not found"}
