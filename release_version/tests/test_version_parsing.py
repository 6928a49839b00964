import pytest

from release_version.version import (
    MAX_COMPONENT,
    PRE_RELEASE_TAG_WEIGHTS,
    InvalidVersionStringError,
    Version,
    VersionNumberFormatError,
    is_valid_version_string,
    parse,
)


VALID_SAMPLES = [
    "1",
    "v1.2",
    "V1.2.3",
    "10.0.0-beta3",
    "3.1-rc2-snapshot",
    "1.0-alpha.1",
    "0.9",
    "1.0-alpha",
    "1.0-beta9",
    "1.0-pre",
    "1.0-rc2",
    "1.0-snapshot",
    "1.0.1-rc1",
    "1.10",
    "v2.0.0",
    "2.00-rc",
    "1.0.0-Custom-Build",
    "V0-RC1-SNAPSHOT",
]


def test_grammar_accepts_version_shapes() -> None:
    for value in VALID_SAMPLES:
        assert is_valid_version_string(value), value


def test_grammar_rejects_malformed_strings() -> None:
    for value in ("", "v", "abc", "1..2", "1.", ".1", "1.2-", "1.2--rc", "1.2 ", "vv1", "1.2-rc 1", "١.٢"):
        assert not is_valid_version_string(value), value
    assert not is_valid_version_string(None)
    assert not is_valid_version_string(12)


@pytest.mark.parametrize("value", ["", "abc", "1..2", "v", "1.2-", None, 12])
def test_invalid_strings_are_rejected(value) -> None:
    with pytest.raises(InvalidVersionStringError) as excinfo:
        Version(value)
    assert excinfo.value.version == value
    assert excinfo.value.pattern == r"[vV]?\d+(\.\d+)*(-[^-\s]+)*"
    assert isinstance(excinfo.value, ValueError)


def test_out_of_range_group_is_a_number_format_error() -> None:
    assert Version(str(MAX_COMPONENT)).components == (MAX_COMPONENT,)
    with pytest.raises(VersionNumberFormatError) as excinfo:
        Version("1.2147483648")
    assert excinfo.value.group == "2147483648"


@pytest.mark.parametrize("value", VALID_SAMPLES)
def test_display_string_strips_only_leading_v(value: str) -> None:
    expected = value[1:] if value[0] in "vV" else value
    assert str(parse(value)) == expected
    assert parse(value).to_display_string() == expected
    assert parse(value, True).raw == expected


def test_display_string_examples() -> None:
    assert str(parse("v2.0.0-beta3")) == "2.0.0-beta3"
    assert parse("V1.2.3").to_display_string() == "1.2.3"
    assert parse("1.0.0-Custom-Build").raw == "1.0.0-Custom-Build"
    assert repr(parse("v1.4")) == "Version('1.4')"


def test_trailing_zero_groups_are_trimmed() -> None:
    assert parse("1.2.0.0").components == (1, 2)
    assert parse("1.0").components == (1,)
    assert parse("0.0.0").components == (0,)
    assert parse("1.20.0").components == (1, 20)
    assert parse("1.00").components == (1, 0)


def test_optional_tags_are_kept_verbatim() -> None:
    assert parse("1.0").optional_tags == ()
    assert parse("3.1-rc2-SNAPSHOT").optional_tags == ("rc2", "SNAPSHOT")


def test_release_stage_weights() -> None:
    assert dict(PRE_RELEASE_TAG_WEIGHTS) == {
        "alpha": 60,
        "beta": 50,
        "pre": 40,
        "rc": 30,
        "snapshot": 20,
    }
    with pytest.raises(TypeError):
        PRE_RELEASE_TAG_WEIGHTS["alpha"] = 1  # type: ignore[index]


def test_pre_release_appends_synthetic_component_and_borrows() -> None:
    version = parse("1.0.0-alpha")
    assert version.is_pre_release
    assert version.components == (0, MAX_COMPONENT - 60)
    assert parse("1.0-beta1").components == (0, MAX_COMPONENT - 50 + 1)


def test_multiple_tags_resolve_in_keyword_order() -> None:
    version = parse("3.1-rc2-snapshot")
    assert version.components == (3, 0, MAX_COMPONENT - 30 + 2 - 20)
    assert parse("1.0-snapshot-rc1") == parse("1.0-rc1-snapshot")


def test_borrow_scans_backward_past_zero_groups() -> None:
    assert parse("2.00-rc").components == (1, 0, MAX_COMPONENT - 30)
    assert parse("2.0.1-pre").components == (2, 0, 0, MAX_COMPONENT - 40)
    assert parse("0-alpha").components == (-1, MAX_COMPONENT - 60)


def test_unknown_tags_do_not_affect_components() -> None:
    version = parse("1.0-custombuild")
    assert not version.is_pre_release
    assert version.components == (1,)


def test_tag_matching_is_case_insensitive() -> None:
    assert parse("1.0-RC1") == parse("1.0-rc1")
    assert parse("1.0-Beta") == parse("1.0-beta")


def test_substring_matching_quirk() -> None:
    # "prerelease" contains "pre", so it ranks exactly like a plain "pre" tag.
    assert parse("1.0-prerelease") == parse("1.0-pre")
    # Only a single trailing digit is read as the sub-version.
    assert parse("1.0-beta10") < parse("1.0-beta9")


def test_ignore_optional_tags() -> None:
    version = parse("1.0.0-alpha", True)
    assert not version.is_pre_release
    assert version.components == (1,)
    assert version.raw == "1.0.0-alpha"
    assert version == parse("1.0.0", True)
    assert Version.parse("2.0-rc1", ignore_optional_tags=True).components == (2,)


def test_versions_are_immutable() -> None:
    version = parse("1.2.3")
    with pytest.raises(AttributeError):
        version.raw = "4.5.6"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        version._components = (4,)  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del version._raw
    assert version.components == (1, 2, 3)
