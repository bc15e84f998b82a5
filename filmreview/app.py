# filmreview/app.py
import logging

import click
from flask import Flask, Response, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import MethodNotAllowed, NotFound as RouteNotFound

from . import auth, catalog, reviews, store
from .config import Config, database_uri
from .errors import ApiError, plain_text
from .models import db
from .schemas import LoginIn, RegisterIn, ReviewCreateIn, ReviewDeleteIn, ReviewUpdateIn, parse_body


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    app.config.setdefault("SQLALCHEMY_DATABASE_URI", database_uri(app.config["DATABASE_PATH"]))

    # keep film/review fields in declaration order
    app.json.sort_keys = False

    db.init_app(app)

    # Ensure DB tables exist
    with app.app_context():
        store.init_schema()
    app.logger.info("database ready at %s", app.config["SQLALCHEMY_DATABASE_URI"])

    if app.config["SECRET_KEY"] == "fallback_key" and not app.testing:
        app.logger.warning("SECRET_KEY is not set; session tokens use the built-in fallback key")

    # ---------------- ERRORS ----------------
    @app.errorhandler(ApiError)
    def api_error(e):
        return plain_text(e.message, e.status_code)

    @app.errorhandler(SQLAlchemyError)
    def store_error(e):
        app.logger.error("store failure on %s %s: %s", request.method, request.path, e)
        return plain_text(str(e), 500)

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(e):
        resp = plain_text("Invalid request method", 405)
        if e.valid_methods:
            resp.headers["Allow"] = ", ".join(e.valid_methods)
        return resp

    @app.errorhandler(RouteNotFound)
    def route_not_found(e):
        return plain_text("Not Found", 404)

    # ---------------- REGISTER ----------------
    @app.route("/register", methods=["POST"], provide_automatic_options=False)
    def register():
        creds = parse_body(RegisterIn, request)
        auth.register(creds)
        return Response(status=201)

    # ---------------- LOGIN ----------------
    @app.route("/login", methods=["POST"], provide_automatic_options=False)
    def login():
        creds = parse_body(LoginIn, request)
        token = auth.login(creds)
        resp = Response(status=200)
        auth.set_session_cookie(resp, token)
        return resp

    # ---------------- LOGOUT ----------------
    @app.route("/logout", methods=["POST"], provide_automatic_options=False)
    def logout():
        resp = Response(status=200)
        auth.clear_session_cookie(resp)
        return resp

    # ---------------- FILMS ----------------
    @app.route("/film", methods=["GET"], provide_automatic_options=False)
    def film():
        auth.identify(request)

        raw_id = request.args.get("id", "")
        if raw_id:
            film_id = catalog.parse_film_id(raw_id)
            return jsonify(catalog.get_film(film_id))

        return jsonify(catalog.list_films())

    # ---------------- REVIEWS ----------------
    @app.route("/review", methods=["POST", "PATCH", "DELETE"], provide_automatic_options=False)
    def review():
        user_id = auth.identify(request)

        if request.method == "POST":
            reviews.create_review(user_id, parse_body(ReviewCreateIn, request))
            return Response(status=201)

        if request.method == "PATCH":
            reviews.update_review(user_id, parse_body(ReviewUpdateIn, request))
        else:
            reviews.delete_review(user_id, parse_body(ReviewDeleteIn, request))
        return Response(status=202)

    # ---------------- CLI ----------------
    @app.cli.command("init-db")
    def init_db_command():
        """Create the users, films and reviews tables if they are missing."""
        store.init_schema()
        click.echo("Initialized the database.")

    return app


def main():
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"], threaded=True)


if __name__ == "__main__":
    main()
