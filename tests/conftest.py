import pytest
from fastapi.testclient import TestClient

import livehouse.db as db_module
from livehouse.server import create_app

ADMIN_PASSWORD = "letmein"

# Smallest byte strings that pass the image signature check
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64
GIF_BYTES = b"GIF89a" + b"\x00" * 64


@pytest.fixture
def cfg(tmp_path):
    return {
        "database": {"path": str(tmp_path / "data" / "livehouse.db")},
        "uploads": {"dir": str(tmp_path / "uploads")},
        "secrets": {"admin_password": ADMIN_PASSWORD},
        "server": {"env": "development"},
    }


@pytest.fixture
def conn(tmp_path):
    conn = db_module.connect(tmp_path / "events.db")
    yield conn
    conn.close()


@pytest.fixture
def client(cfg):
    with TestClient(create_app(cfg)) as c:
        yield c


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/session", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


def event_payload(**overrides):
    payload = {
        "date": "2026-11-20",
        "title": "Noise Night",
        "artists": "Static Bloom",
        "description": "Loud.",
        "openTime": "18:00",
        "startTime": "19:00",
        "ticketPrice": "¥2,000",
        "doorPrice": "",
        "imageUrl": "",
    }
    payload.update(overrides)
    return payload
