"""Search requests understood by a Searchfox instance.

Only the request is described here; sending it is left to the caller.
"""

from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, field_validator

from searchfox_api.config import get_base_url
from searchfox_api.core.repos import Repo, resolve_repo

MIN_QUERY_LENGTH = 3

# Searchfox only answers with JSON when asked to.
SEARCH_HEADERS = {"Accept": "application/json"}


class SearchQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str
    repository: Repo = Repo.MOZILLA_CENTRAL
    case_sensitive: bool = False
    regex: bool = False
    path: str = ""

    @field_validator("query")
    @classmethod
    def _check_query_length(cls, value: str) -> str:
        if len(value) < MIN_QUERY_LENGTH:
            raise ValueError("Queries must be at least three characters.")
        return value

    @field_validator("repository", mode="before")
    @classmethod
    def _resolve_repository(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, Repo):
            return resolve_repo(value)
        return value


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def build_search_url(query: SearchQuery, base_url: str | None = None) -> str:
    base = (base_url if base_url is not None else get_base_url()).rstrip("/")
    params = urlencode(
        [
            ("q", query.query),
            ("case", _bool_param(query.case_sensitive)),
            ("regex", _bool_param(query.regex)),
            ("path", query.path),
        ]
    )
    return f"{base}/{query.repository.value}/search?{params}"
