"""Classification of the dynamic keys of a result section.

Searchfox names each group of results with a label such as ``"Files"`` or
``"Uses (BrowserChild)"``. ``classify`` turns such a label into a closed set of
tags, with ``Unknown`` for anything else.
"""

from dataclasses import dataclass

FILES_KEY = "Files"
TEXT_KEY = "Textual Occurrences"

_DEFINITIONS_PREFIX = "Definitions ("
_DECLARATIONS_PREFIX = "Declarations ("
_USES_PREFIX = "Uses ("

EXPECTED_FIELDS = (
    FILES_KEY,
    TEXT_KEY,
    "Definitions (...)",
    "Declarations (...)",
    "Uses (...)",
)


@dataclass(frozen=True)
class FilesCategory:
    pass


@dataclass(frozen=True)
class TextCategory:
    pass


@dataclass(frozen=True)
class DefinitionsCategory:
    name: str


@dataclass(frozen=True)
class DeclarationsCategory:
    name: str


@dataclass(frozen=True)
class UsesCategory:
    name: str


@dataclass(frozen=True)
class Unknown:
    key: str


CategoryTag = FilesCategory | TextCategory | DefinitionsCategory | DeclarationsCategory | UsesCategory | Unknown

_NAMED_CATEGORIES: tuple[tuple[str, type[DefinitionsCategory | DeclarationsCategory | UsesCategory]], ...] = (
    (_DEFINITIONS_PREFIX, DefinitionsCategory),
    (_DECLARATIONS_PREFIX, DeclarationsCategory),
    (_USES_PREFIX, UsesCategory),
)


def classify(key: str) -> CategoryTag:
    if key == FILES_KEY:
        return FilesCategory()
    if key == TEXT_KEY:
        return TextCategory()
    if key.endswith(")"):
        stripped = key[:-1]
        for prefix, category in _NAMED_CATEGORIES:
            # An empty name ("Uses ()") has nothing to key the matches by.
            if stripped.startswith(prefix) and len(stripped) > len(prefix):
                return category(stripped[len(prefix) :])
    return Unknown(key)
