from pydantic import BaseModel, ConfigDict, Field


class MatchContext(BaseModel):
    """The scope a match was found in, e.g. the function that contains it."""

    model_config = ConfigDict(frozen=True)

    context: str
    # Unique identifier Searchfox generates for the context.
    symbol: str


class LineMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: str
    number: int
    bounds: tuple[int, int]
    peek_lines: str | None = None
    context: MatchContext | None = None


FileMatches = dict[str, tuple[LineMatch, ...]]

# A single query can fuzzily match several symbols, so matches are keyed by
# the symbol they matched against.
FuzzyMatches = dict[str, FileMatches]


class Matches(BaseModel):
    model_config = ConfigDict(frozen=True)

    declarations: FuzzyMatches = Field(default_factory=dict)
    definitions: FuzzyMatches = Field(default_factory=dict)
    files: tuple[str, ...] = ()
    text_matches: FileMatches = Field(default_factory=dict)
    uses: FuzzyMatches = Field(default_factory=dict)


class Response(BaseModel):
    """A decoded Searchfox search response.

    ``timedout`` means the service gave up early and the results are incomplete.
    Each section is ``None`` when the service omitted it.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    timedout: bool
    normal: Matches | None = None
    test: Matches | None = None
    generated: Matches | None = None
