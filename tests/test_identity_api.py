from __future__ import annotations

import pytest

from src.student_affairs.student_affairs.core.exceptions import StoreError
from src.student_affairs.student_affairs.database.bootstrap import seed_memory_store
from src.student_affairs.student_affairs.database.memory_store import InMemoryRecordStore
from src.student_affairs.student_affairs.main import create_app

ADMIN = ("admin@smk.sch.id", "admin123")
BUDI = ("budi@smk.sch.id", "siswa123")
BUDI_STUDENT_ID = "10000000-0000-0000-0000-000000000001"


@pytest.fixture
def mem_store():
    store = InMemoryRecordStore()
    seed_memory_store(store)
    return store


@pytest.fixture
def client(mem_store):
    app = create_app("config.testing", store=mem_store)
    return app.test_client()


def login(client, creds):
    email, password = creds
    return client.post("/api/auth/login", json={"email": email, "password": password})


def test_login_rejects_bad_password(client):
    resp = client.post("/api/auth/login", json={"email": "budi@smk.sch.id", "password": "salah"})
    assert resp.status_code == 401
    assert resp.get_json()["status"] == "error"


def test_student_endpoint_requires_login(client):
    assert client.get("/api/me/student").status_code == 401


def test_student_is_linked_on_first_visit(client, mem_store):
    assert login(client, BUDI).status_code == 200

    first = client.get("/api/me/student")
    second = client.get("/api/me/student")

    assert first.status_code == 200
    body = first.get_json()
    assert body["status"] == "linked"
    assert body["strategy"] == "profile_nis"
    assert body["student"]["id"] == BUDI_STUDENT_ID
    assert second.get_json()["status"] == "already_linked"
    assert mem_store.get("students", BUDI_STUDENT_ID)["user_id"] == "00000000-0000-0000-0000-000000000002"


def test_non_student_without_match_gets_not_linked_message(client):
    login(client, ADMIN)

    resp = client.get("/api/me/student")

    assert resp.status_code == 404
    body = resp.get_json()
    assert body["status"] == "not_found"
    assert "administrator" in body["message"]


def test_review_log_is_admin_only(client):
    login(client, ADMIN)
    client.get("/api/me/student")

    resp = client.get("/api/admin/identity-reviews?limit=5")
    assert resp.status_code == 200
    assert isinstance(resp.get_json()["items"], list)

    client.post("/api/auth/logout")
    login(client, BUDI)
    assert client.get("/api/admin/identity-reviews").status_code == 403


def test_review_limit_must_be_numeric(client):
    login(client, ADMIN)
    assert client.get("/api/admin/identity-reviews?limit=abc").status_code == 400


def test_store_outage_maps_to_503(mem_store):
    class BrokenStore(InMemoryRecordStore):
        def query(self, *args, **kwargs):
            raise StoreError("down")

    broken = BrokenStore()
    seed_memory_store(broken)
    client = create_app("config.testing", store=broken).test_client()
    with client.session_transaction() as sess:
        sess["account_id"] = "00000000-0000-0000-0000-000000000002"

    assert client.get("/api/me/student").status_code == 503
