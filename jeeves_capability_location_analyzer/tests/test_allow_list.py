"""Tests for the allow-list gate."""

import pytest

from jeeves_capability_location_analyzer.models.types import LocationSpec
from jeeves_capability_location_analyzer.policy.allow_list import (
    configured_patterns,
    is_allowed,
    is_allowed_location,
)
from jeeves_capability_location_analyzer.tests.fakes import processor_config


@pytest.mark.parametrize(
    "target",
    ["https://example.com/a", "file:///tmp/x", "", "anything at all"],
)
def test_absent_policy_allows_everything(target):
    assert is_allowed(target, None) is True


@pytest.mark.parametrize("target", ["https://example.com/a", "", "x"])
def test_empty_policy_allows_nothing(target):
    assert is_allowed(target, []) is False


def test_double_star_matches_nested_paths():
    assert is_allowed("https://example.com/a/b", ["https://example.com/**"]) is True


def test_other_host_is_rejected():
    assert is_allowed("https://other.com/x", ["https://example.com/**"]) is False


def test_single_star_crosses_path_separators():
    assert is_allowed("https://example.com/a/b/c.yaml", ["https://example.com/*.yaml"]) is True


def test_question_mark_matches_one_character():
    assert is_allowed("https://example.com/v1", ["https://example.com/v?"]) is True
    assert is_allowed("https://example.com/v10", ["https://example.com/v?"]) is False


def test_literal_pattern_requires_exact_match():
    target = "https://example.com/catalog-info.yaml"
    assert is_allowed(target, [target]) is True
    assert is_allowed(target + ".bak", [target]) is False


def test_matching_is_case_sensitive():
    assert is_allowed("https://Example.com/x", ["https://example.com/*"]) is False


def test_any_pattern_may_match():
    patterns = ["https://a.com/*", "https://b.com/*"]
    assert is_allowed("https://b.com/x", patterns) is True


def test_malformed_patterns_match_nothing():
    patterns = [None, 42, "", "https://example.com/[", {"glob": "*"}]
    assert is_allowed("https://example.com/x", patterns) is False


def test_malformed_pattern_does_not_hide_valid_one():
    assert is_allowed("https://example.com/x", [None, "https://example.com/*"]) is True


def test_string_instead_of_list_matches_nothing():
    assert is_allowed("https://example.com/x", "https://example.com/*") is False


@pytest.mark.parametrize("collection", [set, frozenset, tuple])
def test_any_pattern_collection_is_accepted(collection):
    patterns = collection(["https://a.com/*", "https://b.com/*"])

    assert is_allowed("https://b.com/x", patterns) is True
    assert is_allowed("https://c.com/x", patterns) is False


def test_empty_set_allows_nothing():
    assert is_allowed("https://example.com/x", set()) is False


def test_pattern_generator_is_accepted():
    patterns = (p for p in ["https://example.com/*"])
    assert is_allowed("https://example.com/x", patterns) is True


def test_mapping_instead_of_list_matches_nothing():
    assert is_allowed("https://example.com/x", {"https://example.com/*": True}) is False


def test_repeated_calls_agree():
    patterns = ["https://example.com/**"]
    results = {
        is_allowed(target, patterns)
        for target in ["https://example.com/a"] * 5
    }
    assert results == {True}

    results = {is_allowed("https://other.com/a", patterns) for _ in range(5)}
    assert results == {False}


def test_is_allowed_location_reads_config():
    config = processor_config(allowedLocationTargets=["https://allowed.com/**"])

    assert is_allowed_location(config, LocationSpec("url", "https://allowed.com/x")) is True
    assert is_allowed_location(config, LocationSpec("url", "https://blocked.com/x")) is False


def test_is_allowed_location_without_key():
    config = processor_config()
    assert is_allowed_location(config, LocationSpec("url", "https://any.com/x")) is True


def test_configured_patterns_non_list_value_is_closed():
    config = processor_config(allowedLocationTargets="https://example.com/*")
    assert configured_patterns(config) == ()
    assert is_allowed_location(config, LocationSpec("url", "https://example.com/x")) is False
