# filmreview/auth.py
"""
Registration, login and request identification.

The ``session_token`` cookie carries the username signed with the app's
SECRET_KEY and a timestamp. Identification verifies the signature and age
before resolving the username to a user id, so a hand-written cookie such
as ``session_token=alice`` is rejected.
"""
from datetime import datetime, timedelta, timezone

from flask import current_app
from itsdangerous import BadSignature, URLSafeTimedSerializer
from sqlalchemy.exc import IntegrityError

from . import store
from .errors import Conflict, InternalError, Unauthorized
from .passwords import hash_password, verify_password

SESSION_COOKIE = "session_token"
TOKEN_SALT = "session-token"
INVALID_CREDENTIALS = "Invalid username or password"


def _serializer():
    return URLSafeTimedSerializer(current_app.config["SECRET_KEY"], salt=TOKEN_SALT)


def issue_token(username):
    return _serializer().dumps(username)


def read_token(token):
    """Return the username inside a valid, unexpired token, else None."""
    try:
        username = _serializer().loads(token, max_age=current_app.config["SESSION_MAX_AGE"])
    except BadSignature:
        # SignatureExpired is a BadSignature too
        return None
    return username if isinstance(username, str) else None


# ---------------- REGISTER ----------------
def register(creds):
    if store.count_users(creds.username) > 0:
        raise Conflict("Username already exists")

    try:
        pwd_hash = hash_password(creds.password, current_app.config["PASSWORD_HASH_METHOD"])
    except (ValueError, TypeError) as e:
        raise InternalError(str(e)) from e

    try:
        user_id = store.insert_user(creds.username, pwd_hash)
    except IntegrityError:
        # lost the race against a concurrent registration of the same name
        raise Conflict("Username already exists") from None

    current_app.logger.info("registered user id=%s", user_id)
    return user_id


# ---------------- LOGIN ----------------
def login(creds):
    stored = store.get_password(creds.username)
    if stored is None or not verify_password(stored, creds.password):
        current_app.logger.info("failed login for %r", creds.username)
        raise Unauthorized(INVALID_CREDENTIALS)

    current_app.logger.info("user %r logged in", creds.username)
    return issue_token(creds.username)


def set_session_cookie(response, token):
    max_age = current_app.config["SESSION_MAX_AGE"]
    response.set_cookie(
        SESSION_COOKIE,
        token,
        max_age=max_age,
        expires=datetime.now(timezone.utc) + timedelta(seconds=max_age),
        httponly=True,
        samesite="Lax",
        secure=current_app.config["SESSION_TOKEN_SECURE"],
    )


# ---------------- LOGOUT ----------------
def clear_session_cookie(response):
    # nothing is held server-side; expiring the cookie is the whole logout
    response.set_cookie(
        SESSION_COOKIE,
        "",
        expires=datetime.now(timezone.utc) - timedelta(hours=1),
        httponly=True,
        samesite="Lax",
        secure=current_app.config["SESSION_TOKEN_SECURE"],
    )


# ---------------- IDENTIFY ----------------
def identify(request):
    """Resolve the request's session cookie to a user id or raise 401."""
    token = request.cookies.get(SESSION_COOKIE)
    if not token:
        raise Unauthorized()

    username = read_token(token)
    if username is None:
        raise Unauthorized()

    user_id = store.get_user_id(username)
    if user_id is None:
        raise Unauthorized()
    return user_id
