import pytest

from releaseratchet.bump import BumpLevel
from releaseratchet.commit import (
    STANDARD_TYPES,
    CommitFooter,
    CommitType,
    ConventionalCommit,
    short_oid,
)

OID = "0123456789abcdef0123456789abcdef01234567"


def _commit(breaking=False, footers=()):
    return ConventionalCommit(
        oid=OID,
        commit_type=CommitType.parse("feat"),
        scope=None,
        breaking=breaking,
        description="add login",
        footers=list(footers),
    )


@pytest.mark.parametrize("name", STANDARD_TYPES)
def test_standard_types_round_trip(name):
    kind = CommitType.parse(name)
    assert str(kind) == name
    assert not kind.is_custom


def test_parse_is_case_insensitive():
    assert CommitType.parse("FEAT") == CommitType.parse("feat")
    assert str(CommitType.parse("Fix")) == "fix"


def test_custom_type():
    kind = CommitType.parse("security")
    assert kind.is_custom
    assert str(kind) == "security"
    assert kind.default_bump() is BumpLevel.NONE
    assert kind.default_changelog_heading() is None


@pytest.mark.parametrize(
    "name, level",
    [
        ("feat", BumpLevel.MINOR),
        ("fix", BumpLevel.PATCH),
        ("perf", BumpLevel.PATCH),
        ("revert", BumpLevel.PATCH),
        ("docs", BumpLevel.NONE),
        ("chore", BumpLevel.NONE),
        ("refactor", BumpLevel.NONE),
    ],
)
def test_default_bump(name, level):
    assert CommitType.parse(name).default_bump() is level


@pytest.mark.parametrize(
    "name, heading",
    [
        ("feat", "Features"),
        ("fix", "Bug Fixes"),
        ("perf", "Performance"),
        ("revert", "Reverts"),
        ("ci", None),
    ],
)
def test_default_changelog_heading(name, heading):
    assert CommitType.parse(name).default_changelog_heading() == heading


def test_not_breaking_by_default():
    assert _commit().is_breaking() is False


def test_breaking_bang():
    assert _commit(breaking=True).is_breaking() is True


@pytest.mark.parametrize("token", ["BREAKING CHANGE", "BREAKING-CHANGE", "breaking change"])
def test_breaking_footer(token):
    assert _commit(footers=[CommitFooter(token, "old API removed")]).is_breaking() is True


def test_other_footers_not_breaking():
    footers = [CommitFooter("Reviewed-by", "Bob"), CommitFooter("Refs", "#123")]
    assert _commit(footers=footers).is_breaking() is False


def test_short_oid_is_prefix():
    abbreviated = short_oid(OID)
    assert len(abbreviated) == 7
    assert OID.startswith(abbreviated)
    assert _commit().short_oid() == abbreviated


def test_short_oid_of_short_input_unchanged():
    assert short_oid("abc") == "abc"