"""End-to-end walks through the public HTTP surface."""
from filmreview import store

from .conftest import login, register


def test_register_duplicate(client):
    assert register(client, "alice", "pw").status_code == 201
    assert register(client, "alice", "pw").status_code == 409


def test_login_flow(client):
    register(client, "alice", "pw")

    ok = login(client, "alice", "pw")
    assert ok.status_code == 200
    assert any(h.startswith("session_token=") for h in ok.headers.getlist("Set-Cookie"))

    wrong = login(client, "alice", "wrong")
    assert wrong.status_code == 401
    assert wrong.data == b"Invalid username or password"

    unknown = login(client, "bob", "x")
    assert unknown.status_code == 401
    assert unknown.data == wrong.data


def test_protected_read(client, alice, film_id):
    assert client.get("/film").status_code == 401

    resp = alice.get("/film")
    assert resp.status_code == 200
    assert resp.get_json() == [{"id": 1, "title": "A"}]

    detail = alice.get("/film?id=1").get_json()
    assert detail["reviews"] in ([], None)


def test_review_lifecycle(alice, bob, film_id):
    assert alice.post("/review", json={"film_id": 1, "review": "great"}).status_code == 201

    reviews = alice.get("/film?id=1").get_json()["reviews"]
    assert len(reviews) == 1
    assert reviews[0]["user"] == "alice"
    assert reviews[0]["review"] == "great"
    rid = reviews[0]["id"]

    assert alice.patch("/review", json={"id": rid, "review": "ok"}).status_code == 202
    assert bob.patch("/review", json={"id": rid, "review": "ok"}).status_code == 404
    assert bob.delete("/review", json={"id": rid}).status_code == 404
    assert alice.delete("/review", json={"id": rid}).status_code == 202


def test_dangling_film(alice, film_id):
    resp = alice.post("/review", json={"film_id": 9999, "review": "x"})
    assert resp.status_code == 400
    assert resp.data == b"Film not found"


def test_empty_review_body(alice, film_id):
    resp = alice.post("/review", json={"film_id": 1, "review": ""})
    assert resp.status_code == 400
    assert resp.data == b"Invalid request body"


def test_password_digest_never_leaves_the_server(app, alice, film_id):
    seen = [
        alice.post("/login", json={"username": "alice", "password": "pw"}),
        alice.post("/review", json={"film_id": film_id, "review": "great"}),
        alice.get("/film"),
        alice.get(f"/film?id={film_id}"),
        alice.post("/register", json={"username": "alice", "password": "pw"}),
        alice.post("/logout"),
    ]
    with app.app_context():
        digest = store.get_password("alice")
    for resp in seen:
        assert digest.encode() not in resp.data
        assert digest not in str(resp.headers)


def test_sql_metacharacters_in_username(client):
    name = "a' OR 1=1--"
    assert register(client, name, "pw").status_code == 201
    assert login(client, name, "pw").status_code == 200
    assert register(client, "a", "pw").status_code == 201
    assert login(client, "a", "wrong").status_code == 401
