# filmreview/reviews.py
from flask import current_app

from . import store
from .errors import BadRequest, NotFound

# not-owner and not-found are reported identically
REVIEW_NOT_FOUND = "Unauthorized or Review not found"


def create_review(user_id, body):
    if not store.film_exists(body.film_id):
        raise BadRequest("Film not found")

    review_id = store.insert_review(body.film_id, body.review, user_id)
    current_app.logger.info("user %s created review %s on film %s", user_id, review_id, body.film_id)
    return review_id


def update_review(user_id, body):
    if store.update_review(body.id, user_id, body.review) == 0:
        raise NotFound(REVIEW_NOT_FOUND)
    current_app.logger.info("user %s updated review %s", user_id, body.id)


def delete_review(user_id, body):
    if store.delete_review(body.id, user_id) == 0:
        raise NotFound(REVIEW_NOT_FOUND)
    current_app.logger.info("user %s deleted review %s", user_id, body.id)
