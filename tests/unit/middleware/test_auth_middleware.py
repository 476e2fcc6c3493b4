"""Unit tests for bearer token extraction (quirknotes/middleware/auth.py)."""

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from quirknotes.middleware.auth import bearer_token


def build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/protected")
    async def protected(token=Depends(bearer_token)):
        return {"token": token}

    return app


def test_extracts_bearer_token():
    client = TestClient(build_app())
    resp = client.get("/protected", headers={"Authorization": "Bearer abc.def.ghi"})
    assert resp.status_code == 200
    assert resp.json() == {"token": "abc.def.ghi"}


def test_scheme_is_case_insensitive():
    client = TestClient(build_app())
    resp = client.get("/protected", headers={"Authorization": "bearer abc"})
    assert resp.json() == {"token": "abc"}


def test_missing_header_yields_none():
    client = TestClient(build_app())
    resp = client.get("/protected")
    assert resp.status_code == 200
    assert resp.json() == {"token": None}


def test_wrong_scheme_yields_none():
    client = TestClient(build_app())
    resp = client.get("/protected", headers={"Authorization": "Basic abc"})
    assert resp.json() == {"token": None}
