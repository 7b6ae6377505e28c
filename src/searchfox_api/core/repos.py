from enum import Enum

_REPO_ALIASES = {
    "mozilla-central": ("central", "m-c", "mc"),
    "mozilla-mobile": ("mobile",),
    "comm-central": ("comm",),
    "nss": (),
    "what-wg-html": ("what-wg", "what", "html"),
    "mozilla-beta": ("beta",),
    "mozilla-release": ("release",),
    "mozilla-esr60": ("esr60",),
}


class Repo(str, Enum):
    """A source tree indexed by Searchfox; the value is its canonical name."""

    MOZILLA_CENTRAL = "mozilla-central"
    MOZILLA_MOBILE = "mozilla-mobile"
    COMM_CENTRAL = "comm-central"
    NSS = "nss"
    WHAT_WG_HTML = "what-wg-html"
    MOZILLA_BETA = "mozilla-beta"
    MOZILLA_RELEASE = "mozilla-release"
    MOZILLA_ESR60 = "mozilla-esr60"

    def __str__(self) -> str:
        return self.value

    @property
    def aliases(self) -> tuple[str, ...]:
        return _REPO_ALIASES[self.value]


_NAME_TO_REPO = {name: repo for repo in Repo for name in (repo.value, *repo.aliases)}


def repo_names() -> list[str]:
    """Every canonical name and alias, in declaration order."""
    return [name for repo in Repo for name in (repo.value, *repo.aliases)]


def resolve_repo(name: str) -> Repo:
    normalized = name.strip().lower()
    if normalized not in _NAME_TO_REPO:
        raise ValueError(f"Unsupported repository '{name}'. Supported: {repo_names()}")
    return _NAME_TO_REPO[normalized]
