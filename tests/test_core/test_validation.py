"""
Tests for the name and display name format checks.
"""

import pytest

from localgroup.core.validation import (
    DISPLAY_NAME_MAX_LENGTH,
    is_display_name,
    is_dns1123_label,
    is_qualified_name,
    is_valid_label_value,
)


@pytest.mark.parametrize("value", ["g1", "a", "team-platform", "0" * 63])
def test_valid_dns_label(value):
    assert is_dns1123_label(value) == []


@pytest.mark.parametrize(
    "value", ["", "Team", "-team", "team-", "team_a", "a.b", "g1\n", "a" * 64]
)
def test_invalid_dns_label(value):
    assert is_dns1123_label(value) != []


@pytest.mark.parametrize("value", ["tier", "example.com/team", "a_b.c-d"])
def test_valid_qualified_name(value):
    assert is_qualified_name(value) == []


@pytest.mark.parametrize(
    "value", ["", "/team", "team/", "a/b/c", "Example.com/team", "-team", "a" * 64]
)
def test_invalid_qualified_name(value):
    assert is_qualified_name(value) != []


@pytest.mark.parametrize("value", ["", "prod", "v1.2_3"])
def test_valid_label_value(value):
    assert is_valid_label_value(value) == []


@pytest.mark.parametrize("value", ["-prod", "prod!", "a" * 64])
def test_invalid_label_value(value):
    assert is_valid_label_value(value) != []


@pytest.mark.parametrize(
    "value", ["Platform Team", "平台团队", "x" * DISPLAY_NAME_MAX_LENGTH]
)
def test_valid_display_name(value):
    assert is_display_name(value) == []


def test_invalid_display_name():
    assert is_display_name("") == ["must be specified"]
    assert is_display_name(" team") == ["must not start or end with whitespace"]
    assert is_display_name("a\tb") == ["must not contain control characters"]
    assert is_display_name("x" * (DISPLAY_NAME_MAX_LENGTH + 1)) == [
        f"must be no more than {DISPLAY_NAME_MAX_LENGTH} characters"
    ]
