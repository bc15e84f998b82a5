# filmreview/store.py
"""
Parameterized queries over the embedded SQLite database.

Every statement binds request values as named parameters; nothing supplied
by a client is ever formatted into SQL text. Single-row lookups return None
when the row is missing, and SQLAlchemy errors propagate to the caller.
"""
from sqlalchemy import text

from .models import db


def init_schema():
    # create-if-absent only, never drops or alters existing tables
    db.create_all()


# ---------------- USERS ----------------
def count_users(username):
    with db.engine.connect() as conn:
        return conn.execute(text(
            "SELECT COUNT(*) FROM users WHERE username = :username"
        ), {"username": username}).scalar_one()


def insert_user(username, password_hash):
    with db.engine.begin() as conn:
        res = conn.execute(text(
            "INSERT INTO users (username, password) VALUES (:username, :password)"
        ), {"username": username, "password": password_hash})
        return res.lastrowid


def get_password(username):
    with db.engine.connect() as conn:
        return conn.execute(text(
            "SELECT password FROM users WHERE username = :username"
        ), {"username": username}).scalar_one_or_none()


def get_user_id(username):
    with db.engine.connect() as conn:
        return conn.execute(text(
            "SELECT id FROM users WHERE username = :username"
        ), {"username": username}).scalar_one_or_none()


def get_username(user_id):
    with db.engine.connect() as conn:
        return conn.execute(text(
            "SELECT username FROM users WHERE id = :uid"
        ), {"uid": user_id}).scalar_one_or_none()


# ---------------- FILMS ----------------
def list_films():
    with db.engine.connect() as conn:
        res = conn.execute(text("SELECT id, title FROM films"))
        return [dict(row._mapping) for row in res]


def get_film(film_id):
    with db.engine.connect() as conn:
        row = conn.execute(text(
            "SELECT id, title, director, year, description FROM films WHERE id = :fid"
        ), {"fid": film_id}).fetchone()
    return dict(row._mapping) if row else None


def film_exists(film_id):
    with db.engine.connect() as conn:
        found = conn.execute(text(
            "SELECT id FROM films WHERE id = :fid"
        ), {"fid": film_id}).scalar_one_or_none()
    return found is not None


# ---------------- REVIEWS ----------------
def list_reviews(film_id):
    with db.engine.connect() as conn:
        res = conn.execute(text(
            "SELECT id, review, film_id, user_id FROM reviews WHERE film_id = :fid"
        ), {"fid": film_id})
        return [dict(row._mapping) for row in res]


def insert_review(film_id, review, user_id):
    with db.engine.begin() as conn:
        res = conn.execute(text(
            "INSERT INTO reviews (film_id, review, user_id) VALUES (:fid, :review, :uid)"
        ), {"fid": film_id, "review": review, "uid": user_id})
        return res.lastrowid


def update_review(review_id, user_id, review):
    """Rewrite a review's text; returns the number of rows touched (0 or 1)."""
    with db.engine.begin() as conn:
        res = conn.execute(text(
            "UPDATE reviews SET review = :review WHERE id = :rid AND user_id = :uid"
        ), {"review": review, "rid": review_id, "uid": user_id})
        return res.rowcount


def delete_review(review_id, user_id):
    with db.engine.begin() as conn:
        res = conn.execute(text(
            "DELETE FROM reviews WHERE id = :rid AND user_id = :uid"
        ), {"rid": review_id, "uid": user_id})
        return res.rowcount
