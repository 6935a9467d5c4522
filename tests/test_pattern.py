import pytest

from resgate.pattern import ResourcePattern, parse_resource_pattern


@pytest.mark.parametrize(
    "pattern",
    ["", ".test", "test.", "test..model", "test.>.model", "te*st", "*a.b", "a>", "test.mo>"],
)
def test_invalid_patterns(pattern):
    p = parse_resource_pattern(pattern)
    assert not p.is_valid()
    assert not p.match(pattern)


@pytest.mark.parametrize("pattern", ["test", "test.model", "test.*", "test.>", "*.model", ">", "*"])
def test_valid_patterns(pattern):
    assert parse_resource_pattern(pattern).is_valid()


@pytest.mark.parametrize(
    "pattern, name, expected",
    [
        ("test.model", "test.model", True),
        ("test.model", "test.model.foo", False),
        ("test.*", "test.model", True),
        ("test.*", "test.model.foo", False),
        ("test.*.foo", "test.model.foo", True),
        ("test.*.foo", "test.model.bar", False),
        ("*.model", "test.model", True),
        ("test.>", "test.model", True),
        ("test.>", "test.model.foo", True),
        ("test.>", "test", False),
        ("test.>", "other.model", False),
        (">", "test.model", True),
        ("test.collection", "test.collection", True),
    ],
)
def test_match(pattern, name, expected):
    assert parse_resource_pattern(pattern).match(name) is expected


def test_wildcard_flag_set_only_with_wildcards():
    assert parse_resource_pattern("test.*").has_wild
    assert not parse_resource_pattern("test.model").has_wild


def test_empty_pattern_matches_nothing():
    assert not ResourcePattern().match("")