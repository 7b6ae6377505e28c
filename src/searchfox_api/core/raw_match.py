"""Wire-level match groups (``{"path": ..., "lines": [...]}``) and their folding."""

from typing import Annotated, Any

from pydantic import BaseModel, Field, StrictInt, StrictStr, TypeAdapter, ValidationError

from searchfox_api.core.sentinels import normalize_context, normalize_optional_string
from searchfox_api.errors import InvalidValue, schema_violation
from searchfox_api.models import FileMatches, LineMatch


class RawLineEntry(BaseModel):
    line: StrictStr
    lno: Annotated[StrictInt, Field(ge=0)]
    bounds: tuple[StrictInt, StrictInt]
    peek_lines: StrictStr | None = Field(default=None, alias="peekLines")
    context: StrictStr = ""
    contextsym: StrictStr = ""

    def to_line_match(self) -> LineMatch:
        return LineMatch(
            line=self.line,
            number=self.lno,
            bounds=self.bounds,
            peek_lines=normalize_optional_string(self.peek_lines),
            context=normalize_context(self.context, self.contextsym),
        )


class RawMatch(BaseModel):
    path: StrictStr
    lines: list[RawLineEntry]


_GROUPS = TypeAdapter(list[RawMatch])


def parse_groups(value: Any, location: str = "") -> list[RawMatch]:
    try:
        return _GROUPS.validate_python(value)
    except ValidationError as exc:
        raise schema_violation(exc, location) from exc


def to_path_list(groups: list[RawMatch]) -> tuple[str, ...]:
    """Paths of a ``Files`` category; file-name hits never carry line matches."""
    for group in groups:
        if group.lines:
            raise InvalidValue(group.path, "a file name match without line matches")
    return tuple(group.path for group in groups)


def to_file_matches(groups: list[RawMatch]) -> FileMatches:
    """Map each path to its line matches.

    Paths are not unique across groups; a later group replaces an earlier one.
    """
    file_matches: FileMatches = {}
    for group in groups:
        file_matches[group.path] = tuple(entry.to_line_match() for entry in group.lines)
    return file_matches
