import pytest

from searchfox_api.core.repos import Repo, repo_names, resolve_repo


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("mozilla-central", Repo.MOZILLA_CENTRAL),
        ("m-c", Repo.MOZILLA_CENTRAL),
        ("MC", Repo.MOZILLA_CENTRAL),
        ("  Central ", Repo.MOZILLA_CENTRAL),
        ("mobile", Repo.MOZILLA_MOBILE),
        ("comm", Repo.COMM_CENTRAL),
        ("NSS", Repo.NSS),
        ("html", Repo.WHAT_WG_HTML),
        ("what-wg", Repo.WHAT_WG_HTML),
        ("beta", Repo.MOZILLA_BETA),
        ("Mozilla-Release", Repo.MOZILLA_RELEASE),
        ("esr60", Repo.MOZILLA_ESR60),
    ],
)
def test_resolve_repo_accepts_names_and_aliases(name: str, expected: Repo) -> None:
    assert resolve_repo(name) is expected


@pytest.mark.parametrize("name", ["", "mozilla", "central-mozilla", "esr", "m c"])
def test_resolve_repo_rejects_unknown_names(name: str) -> None:
    with pytest.raises(ValueError, match="Unsupported repository"):
        resolve_repo(name)


def test_repo_str_is_canonical_name() -> None:
    assert str(Repo.WHAT_WG_HTML) == "what-wg-html"


def test_repo_names_lists_canonical_names_then_aliases() -> None:
    names = repo_names()
    assert names[:4] == ["mozilla-central", "central", "m-c", "mc"]
    assert names[-2:] == ["mozilla-esr60", "esr60"]
    assert len(names) == len(set(names))
