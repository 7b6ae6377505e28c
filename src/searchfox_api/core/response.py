import json
import logging
from typing import Any

from pydantic import BaseModel, Field, StrictBool, StrictStr, ValidationError

from searchfox_api.core.matches import decode_matches
from searchfox_api.errors import MalformedPayload, schema_violation
from searchfox_api.models import Matches, Response

logger = logging.getLogger(__name__)

SECTIONS = ("normal", "test", "generated")


class RawResponse(BaseModel):
    title: StrictStr = Field(alias="*title*")
    timedout: StrictBool = Field(alias="*timedout*")
    normal: dict[str, Any] | None = None
    test: dict[str, Any] | None = None
    generated: dict[str, Any] | None = None


def load_payload(payload: bytes | bytearray | str | Any) -> dict[str, Any]:
    """Parse raw bytes or text into a JSON object; pass parsed values through."""
    if isinstance(payload, (bytes, bytearray, str)):
        try:
            document = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
            raise MalformedPayload(str(exc)) from exc
    else:
        document = payload

    if not isinstance(document, dict):
        raise MalformedPayload(f"expected a JSON object, got {type(document).__name__}")
    return document


def decode_response(payload: bytes | bytearray | str | Any) -> Response:
    """Decode a Searchfox search response.

    ``payload`` is the raw response body or an already parsed JSON value. Raises
    a ``DecodeError`` subclass on the first problem found.
    """
    raw = _validate_envelope(load_payload(payload))

    sections: dict[str, Matches] = {}
    for name in SECTIONS:
        section = getattr(raw, name)
        if section is not None:
            sections[name] = decode_matches(section, name)

    logger.debug("Decoded response for %r (timedout=%s, sections=%s)", raw.title, raw.timedout, list(sections))
    return Response(title=raw.title, timedout=raw.timedout, **sections)


def _validate_envelope(document: dict[str, Any]) -> RawResponse:
    try:
        return RawResponse.model_validate(document)
    except ValidationError as exc:
        raise schema_violation(exc) from exc
