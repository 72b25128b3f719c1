"""Request-body decoding at the API boundary.

Each endpoint declares a pydantic schema; views decode the body exactly
once with ``parse_body`` and hand typed objects to the services.
"""

import json

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .exceptions import ValidationError


class RequestSchema(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    def provided(self) -> dict:
        """Return only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{location}: {message}" if location else message


def load_json(request) -> dict:
    """Decode a JSON object body; an empty body is an empty object."""
    if not request.body:
        return {}
    try:
        payload = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError("Request body must be valid JSON")
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def parse_data(data: dict, schema: type[RequestSchema]) -> RequestSchema:
    """Validate a dict against ``schema``.

    Raises:
        ValidationError: naming the first field that failed
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(_describe(e.errors()[0])) from e


def parse_body(request, schema: type[RequestSchema]) -> RequestSchema:
    """Decode and validate the JSON body of ``request``."""
    return parse_data(load_json(request), schema)
