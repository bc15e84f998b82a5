# filmreview/schemas.py
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import BadRequest

# largest value an SQLite INTEGER column can bind
MAX_ID = 2**63 - 1


class RequestBody(BaseModel):
    # no coercion: "1" is not an id and 1 is not a username
    model_config = ConfigDict(strict=True)


class RegisterIn(RequestBody):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginIn(RequestBody):
    # an empty password is a failed login, not a malformed body
    username: str
    password: str


class ReviewCreateIn(RequestBody):
    film_id: int = Field(gt=0, le=MAX_ID)
    review: str = Field(min_length=1)


class ReviewUpdateIn(RequestBody):
    id: int = Field(gt=0, le=MAX_ID)
    review: str = Field(min_length=1)


class ReviewDeleteIn(RequestBody):
    id: int = Field(gt=0, le=MAX_ID)


def parse_body(model, request):
    """Decode and validate a JSON body in one step.

    Either the whole object validates or the request fails with a single
    400; partially valid bodies are never handed to a handler.
    """
    data = request.get_json(force=True, silent=True)
    if data is None:
        raise BadRequest()
    try:
        return model.model_validate(data)
    except ValidationError:
        raise BadRequest() from None
