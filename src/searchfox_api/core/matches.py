import logging
from collections.abc import Mapping
from typing import Any

from searchfox_api.core.categories import (
    EXPECTED_FIELDS,
    DeclarationsCategory,
    DefinitionsCategory,
    FilesCategory,
    TextCategory,
    UsesCategory,
    classify,
)
from searchfox_api.core.raw_match import parse_groups, to_file_matches, to_path_list
from searchfox_api.errors import UnrecognizedField
from searchfox_api.models import FileMatches, FuzzyMatches, Matches

logger = logging.getLogger(__name__)


def decode_matches(section: Mapping[str, Any], location: str = "") -> Matches:
    """Decode one result section (``normal``, ``test`` or ``generated``)."""
    declarations: FuzzyMatches = {}
    definitions: FuzzyMatches = {}
    uses: FuzzyMatches = {}
    files: tuple[str, ...] = ()
    text_matches: FileMatches = {}

    for key, value in section.items():
        category = classify(key)
        if isinstance(category, FilesCategory):
            files = to_path_list(parse_groups(value, _join(location, key)))
        elif isinstance(category, TextCategory):
            text_matches = to_file_matches(parse_groups(value, _join(location, key)))
        elif isinstance(category, DefinitionsCategory):
            definitions[category.name] = to_file_matches(parse_groups(value, _join(location, key)))
        elif isinstance(category, DeclarationsCategory):
            declarations[category.name] = to_file_matches(parse_groups(value, _join(location, key)))
        elif isinstance(category, UsesCategory):
            uses[category.name] = to_file_matches(parse_groups(value, _join(location, key)))
        else:
            raise UnrecognizedField(key, EXPECTED_FIELDS)

    logger.debug(
        "Decoded section %r: %d declarations, %d definitions, %d uses, %d files, %d text matches",
        location,
        len(declarations),
        len(definitions),
        len(uses),
        len(files),
        len(text_matches),
    )

    return Matches(
        declarations=declarations,
        definitions=definitions,
        files=files,
        text_matches=text_matches,
        uses=uses,
    )


def _join(location: str, key: str) -> str:
    return f"{location}.{key}" if location else key
