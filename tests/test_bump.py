import pytest
from semver import Version

from releaseratchet.bump import (
    BumpLevel,
    apply_bump,
    base_version,
    compute_prerelease_version,
    determine_bump,
)
from releaseratchet.commit import CommitFooter, CommitType, ConventionalCommit
from releaseratchet.errors import InvalidVersionError


def _commit(kind, breaking=False, footers=()):
    return ConventionalCommit(
        oid="0" * 40,
        commit_type=CommitType.parse(kind),
        scope=None,
        breaking=breaking,
        description="do something",
        footers=list(footers),
    )


def _default(commit_type):
    return commit_type.default_bump()


def test_apply_major():
    assert apply_bump(Version(1, 2, 3), BumpLevel.MAJOR) == Version(2, 0, 0)


def test_apply_minor():
    assert apply_bump(Version(1, 2, 3), BumpLevel.MINOR) == Version(1, 3, 0)


def test_apply_patch():
    assert apply_bump(Version(1, 2, 3), BumpLevel.PATCH) == Version(1, 2, 4)


def test_apply_none():
    assert apply_bump(Version(1, 2, 3), BumpLevel.NONE) == Version(1, 2, 3)


@pytest.mark.parametrize(
    "higher, lower",
    [
        (BumpLevel.MAJOR, BumpLevel.MINOR),
        (BumpLevel.MINOR, BumpLevel.PATCH),
        (BumpLevel.PATCH, BumpLevel.NONE),
    ],
)
def test_bump_ordering(higher, lower):
    commits = [_commit("chore"), _commit("chore")]
    ascending = iter([lower, higher])
    assert determine_bump(commits, lambda _t: next(ascending)) is higher
    descending = iter([higher, lower])
    assert determine_bump(commits, lambda _t: next(descending)) is higher


@pytest.mark.parametrize(
    "kind, breaking, expected",
    [
        ("docs", False, "none"),
        ("fix", False, "patch"),
        ("feat", False, "minor"),
        ("feat", True, "major"),
    ],
)
def test_bump_level_display(kind, breaking, expected):
    level = determine_bump([_commit(kind, breaking=breaking)], _default)
    assert str(level) == expected


def test_base_version_strips_pre():
    assert base_version(Version.parse("1.2.3-alpha.1")) == Version(1, 2, 3)


def test_prerelease_first_alpha():
    v = compute_prerelease_version(Version(0, 5, 0), None, BumpLevel.MAJOR, "alpha")
    assert v == Version.parse("1.0.0-alpha.1")


def test_prerelease_increment_alpha():
    prev = Version.parse("1.0.0-alpha.2")
    v = compute_prerelease_version(Version(0, 5, 0), prev, BumpLevel.MAJOR, "alpha")
    assert v == Version.parse("1.0.0-alpha.3")


def test_prerelease_switch_id_resets():
    prev = Version.parse("1.0.0-alpha.3")
    v = compute_prerelease_version(Version(0, 5, 0), prev, BumpLevel.MAJOR, "beta")
    assert v == Version.parse("1.0.0-beta.1")


def test_prerelease_minor_bump():
    v = compute_prerelease_version(Version(1, 2, 0), None, BumpLevel.MINOR, "rc")
    assert v == Version.parse("1.3.0-rc.1")


def test_prerelease_unparseable_previous_resets():
    prev = Version.parse("1.0.0-alpha")
    v = compute_prerelease_version(Version(0, 5, 0), prev, BumpLevel.MAJOR, "alpha")
    assert v == Version.parse("1.0.0-alpha.1")


def test_prerelease_invalid_identifier():
    with pytest.raises(InvalidVersionError):
        compute_prerelease_version(Version(0, 5, 0), None, BumpLevel.MINOR, "bad id")


def test_determine_bump_empty_is_none():
    assert determine_bump([], _default) is BumpLevel.NONE


def test_determine_bump_takes_highest():
    commits = [_commit("fix"), _commit("feat"), _commit("docs")]
    assert determine_bump(commits, _default) is BumpLevel.MINOR


def test_determine_bump_only_fixes_is_patch():
    commits = [_commit("fix"), _commit("fix"), _commit("perf")]
    assert determine_bump(commits, _default) is BumpLevel.PATCH


def test_determine_bump_breaking_bang_is_major():
    commits = [_commit("refactor", breaking=True)]
    assert determine_bump(commits, _default) is BumpLevel.MAJOR


def test_determine_bump_breaking_footer_is_major():
    footer = CommitFooter("BREAKING CHANGE", "response is now JSON instead of XML")
    commits = [_commit("fix", footers=[footer])]
    assert determine_bump(commits, _default) is BumpLevel.MAJOR


def test_determine_bump_uses_override():
    commits = [_commit("refactor")]
    assert determine_bump(commits, lambda t: BumpLevel.PATCH) is BumpLevel.PATCH