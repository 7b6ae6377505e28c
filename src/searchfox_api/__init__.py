from searchfox_api.core.categories import (
    CategoryTag,
    DeclarationsCategory,
    DefinitionsCategory,
    FilesCategory,
    TextCategory,
    Unknown,
    UsesCategory,
    classify,
)
from searchfox_api.core.matches import decode_matches
from searchfox_api.core.repos import Repo, repo_names, resolve_repo
from searchfox_api.core.response import decode_response
from searchfox_api.core.search import SEARCH_HEADERS, SearchQuery, build_search_url
from searchfox_api.core.sentinels import normalize_context, normalize_optional_string
from searchfox_api.errors import (
    DecodeError,
    InvalidValue,
    MalformedPayload,
    SchemaViolation,
    UnrecognizedField,
)
from searchfox_api.models import (
    FileMatches,
    FuzzyMatches,
    LineMatch,
    MatchContext,
    Matches,
    Response,
)

__all__ = [
    "SEARCH_HEADERS",
    "CategoryTag",
    "DeclarationsCategory",
    "DecodeError",
    "DefinitionsCategory",
    "FileMatches",
    "FilesCategory",
    "FuzzyMatches",
    "InvalidValue",
    "LineMatch",
    "MalformedPayload",
    "MatchContext",
    "Matches",
    "Repo",
    "Response",
    "SchemaViolation",
    "SearchQuery",
    "TextCategory",
    "Unknown",
    "UnrecognizedField",
    "UsesCategory",
    "build_search_url",
    "classify",
    "decode_matches",
    "decode_response",
    "normalize_context",
    "normalize_optional_string",
    "repo_names",
    "resolve_repo",
]
