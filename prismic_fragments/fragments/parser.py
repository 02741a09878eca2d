# (c) Nelen & Schuurmans

import logging
from typing import Optional

from ..base.domain import Fragment
from ..base.domain import InvalidFragment
from ..base.domain import Json
from .web_link import WebLink

__all__ = ["FRAGMENT_TYPES", "parse_fragment", "parse_fragments"]


logger = logging.getLogger(__name__)


FRAGMENT_TYPES: dict[str, type[Fragment]] = {
    "Link.web": WebLink,
}


def _ensure_object(json: Json) -> None:
    if not isinstance(json, dict):
        raise InvalidFragment(f"expected a JSON object, got {type(json).__name__}")


def parse_fragment(json: Json) -> Optional[Fragment]:
    """Parse one {"type": ..., "value": ...} fragment from an API response.

    Returns None for fragment types that are not known to this library.
    """
    _ensure_object(json)
    try:
        type_name = json["type"]
        value = json["value"]
    except KeyError as e:
        raise InvalidFragment(f"fragment is missing the {e.args[0]!r} key")
    if not isinstance(type_name, str):
        raise InvalidFragment(
            f"fragment type must be a string, got {type(type_name).__name__}"
        )
    fragment_cls = FRAGMENT_TYPES.get(type_name)
    if fragment_cls is None:
        logger.warning("Skipping fragment of unknown type '%s'", type_name)
        return None
    fragment = fragment_cls.parse(value)  # type: ignore
    logger.debug("Parsed fragment of type '%s'", type_name)
    return fragment


def parse_fragments(json: Json) -> dict[str, Fragment]:
    """Parse the fragments of a document, keyed by fragment name."""
    _ensure_object(json)
    result = {}
    for name, fragment_json in json.items():
        fragment = parse_fragment(fragment_json)
        if fragment is not None:
            result[name] = fragment
    return result
