"""Tests for style keys."""

import pytest

from depstyle.style.key import StyleKey


class TestCreate:
    def test_literal_key(self):
        key = StyleKey.create("com.example", "lib", "compile", "jar", "1.0")
        assert key.group_id == "com.example"
        assert key.artifact_id == "lib"
        assert key.scope == "compile"
        assert key.type == "jar"
        assert key.version == "1.0"

    def test_absent_fields_are_wildcards(self):
        key = StyleKey.create("com.example", artifact_id="", version=None)
        assert key.artifact_id is None
        assert key.scope is None
        assert key.version is None

    def test_structural_equality(self):
        a = StyleKey.create("com.example", "lib")
        b = StyleKey.create("com.example", "lib")
        assert a == b
        assert hash(a) == hash(b)
        assert {a: 1}[b] == 1

    def test_immutable(self):
        key = StyleKey.create("com.example")
        with pytest.raises(AttributeError):
            key.group_id = "org.other"  # type: ignore[misc]


class TestFromString:
    def test_group_only(self):
        assert StyleKey.from_string("com.example") == StyleKey.create("com.example")

    def test_all_segments(self):
        key = StyleKey.from_string("g:a:test:war:2.0")
        assert key == StyleKey.create("g", "a", "test", "war", "2.0")

    def test_empty_and_star_segments_are_wildcards(self):
        key = StyleKey.from_string("*:lib::pom")
        assert key == StyleKey.create(artifact_id="lib", type="pom")

    def test_empty_string_matches_everything(self):
        key = StyleKey.from_string("")
        assert key == StyleKey()

    def test_too_many_segments(self):
        with pytest.raises(ValueError):
            StyleKey.from_string("a:b:c:d:e:f")

    def test_string_notation_round_trip(self):
        for notation in ["com.example", ":lib", "g::test", "g:a:s:t:v", ""]:
            key = StyleKey.from_string(notation)
            assert StyleKey.from_string(str(key)) == key

    def test_str_drops_trailing_wildcards(self):
        assert str(StyleKey.create("g", scope="test")) == "g::test"


class TestMatches:
    @pytest.fixture
    def candidate(self) -> StyleKey:
        return StyleKey.create("com.example", "lib", "compile", "jar", "1.0")

    def test_wildcard_matches_anything(self, candidate):
        assert StyleKey().matches(candidate)

    def test_exact_match(self, candidate):
        pattern = StyleKey.create("com.example", "lib", "compile", "jar", "1.0")
        assert pattern.matches(candidate)

    def test_partial_pattern(self, candidate):
        assert StyleKey.create("com.example").matches(candidate)
        assert StyleKey.create(scope="compile").matches(candidate)
        assert StyleKey.create("com.example", version="1.0").matches(candidate)

    def test_any_differing_field_fails(self, candidate):
        assert not StyleKey.create("com.other").matches(candidate)
        assert not StyleKey.create("com.example", "other").matches(candidate)
        assert not StyleKey.create(scope="test").matches(candidate)
        assert not StyleKey.create(type="war").matches(candidate)
        assert not StyleKey.create(version="2.0").matches(candidate)

    def test_case_sensitive(self, candidate):
        assert not StyleKey.create("COM.EXAMPLE").matches(candidate)

    def test_no_glob_matching(self, candidate):
        assert not StyleKey.create("com.*").matches(candidate)
        assert not StyleKey.create("com").matches(candidate)

    def test_literal_field_does_not_match_missing_candidate_field(self):
        candidate = StyleKey.create("com.example", "lib")
        assert not StyleKey.create(scope="compile").matches(candidate)


class TestPattern:
    def test_scalars_become_strings(self):
        key = StyleKey.pattern(group_id=42, version=2)
        assert key == StyleKey.create("42", version="2")

    def test_float_version(self):
        assert StyleKey.pattern(version=1.0).version == "1.0"

    def test_star_and_empty_are_wildcards(self):
        key = StyleKey.pattern(group_id="*", artifact_id="lib", scope="", type=" ")
        assert key == StyleKey.create(artifact_id="lib")

    def test_non_scalar_rejected(self):
        with pytest.raises(ValueError):
            StyleKey.pattern(group_id=["a", "b"])
        with pytest.raises(ValueError):
            StyleKey.pattern(version=True)

    def test_str_of_numeric_pattern(self):
        assert str(StyleKey.pattern("com.example", version=2)) == "com.example::::2"
