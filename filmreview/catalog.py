# filmreview/catalog.py
from . import store
from .errors import BadRequest, InternalError, NotFound
from .schemas import MAX_ID


def parse_film_id(raw):
    """Query-string id must be a plain positive decimal integer."""
    if not (raw.isascii() and raw.isdigit()):
        raise BadRequest("Invalid film id")
    film_id = int(raw)
    if film_id <= 0 or film_id > MAX_ID:
        raise BadRequest("Invalid film id")
    return film_id


def list_films():
    return store.list_films()


def get_film(film_id):
    """Film row plus its reviews, each tagged with the author's username."""
    film = store.get_film(film_id)
    if film is None:
        raise NotFound("Film not found")

    reviews = []
    for row in store.list_reviews(film_id):
        username = store.get_username(row["user_id"])
        if username is None:
            raise InternalError(f"author of review {row['id']} not found")
        reviews.append({
            "id": row["id"],
            "user_id": row["user_id"],
            "film_id": row["film_id"],
            "review": row["review"],
            "user": username,
        })

    return {
        "id": film["id"],
        "title": film["title"],
        "director": film["director"],
        "year": film["year"],
        "description": film["description"],
        "reviews": reviews,
    }
