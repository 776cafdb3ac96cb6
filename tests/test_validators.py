"""
Tests for field validators — coordinates, paths and profiles.
"""

import pytest

from maven_deploy.core.errors import ValidationError
from maven_deploy.core.security.validators import (
    validate_coordinate,
    validate_path,
    validate_profile,
)

HOSTILE_TOKENS = [
    "com.example; rm -rf /",
    "com.example$(whoami)",
    "com.example`id`",
    "com example",
    "com.example\t",
    "com.example\n",
    "com.example|cat",
]


class TestValidateCoordinate:
    @pytest.mark.parametrize(
        "value",
        ["com.example", "my-artifact", "my_artifact", "a", "Com.Example2", "x" * 256],
    )
    def test_valid(self, value: str):
        validate_coordinate(value, "group_id")

    def test_empty(self):
        with pytest.raises(ValidationError, match="group_id cannot be empty") as exc:
            validate_coordinate("", "group_id")
        assert exc.value.field == "group_id"

    def test_too_long(self):
        with pytest.raises(ValidationError, match="too long"):
            validate_coordinate("a" * 257, "artifact_id")

    @pytest.mark.parametrize("value", HOSTILE_TOKENS)
    def test_hostile_characters(self, value: str):
        with pytest.raises(ValidationError, match="disallowed characters"):
            validate_coordinate(value, "group_id")

    @pytest.mark.parametrize("value", [".hidden", "-flag", "_x"])
    def test_must_start_alphanumeric(self, value: str):
        with pytest.raises(ValidationError, match="disallowed characters"):
            validate_coordinate(value, "group_id")

    def test_double_dot(self):
        with pytest.raises(ValidationError, match="cannot contain '..'"):
            validate_coordinate("com..example", "group_id")

    def test_field_name_in_message(self):
        with pytest.raises(ValidationError) as exc:
            validate_coordinate("bad;id", "artifact_id")
        assert str(exc.value) == "invalid artifact_id: contains disallowed characters"


class TestValidatePath:
    @pytest.mark.parametrize(
        "path",
        ["pom.xml", "module/pom.xml", ".mvn/settings.xml", "./pom.xml", "a/b/../pom.xml", ""],
    )
    def test_valid(self, path: str):
        validate_path(path)

    def test_absolute(self):
        with pytest.raises(ValidationError, match="absolute paths are not allowed"):
            validate_path("/etc/passwd")

    @pytest.mark.parametrize(
        "path",
        ["..", "../pom.xml", "../../etc/passwd", "a/../../etc/passwd", "foo/../../../etc/passwd"],
    )
    def test_traversal(self, path: str):
        with pytest.raises(ValidationError, match="path traversal detected"):
            validate_path(path)

    def test_absolute_after_canonicalization(self):
        with pytest.raises(ValidationError, match="absolute"):
            validate_path("/tmp/../etc/passwd")

    def test_dotdot_inside_name_is_allowed(self):
        validate_path("releases..old/pom.xml")

    def test_idempotent(self):
        for path in ("module/./pom.xml", "../x"):
            outcomes = []
            for _ in range(2):
                try:
                    validate_path(path)
                    outcomes.append(None)
                except ValidationError as e:
                    outcomes.append(str(e))
            assert outcomes[0] == outcomes[1]

    def test_field_name(self):
        with pytest.raises(ValidationError) as exc:
            validate_path("/abs", "settings")
        assert exc.value.field == "settings"


class TestValidateProfile:
    @pytest.mark.parametrize("name", ["release", "gpg-sign", "gpg_sign", "jdk21", "R"])
    def test_valid(self, name: str):
        validate_profile(name)

    def test_empty(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            validate_profile("")

    def test_too_long(self):
        with pytest.raises(ValidationError, match="too long"):
            validate_profile("a" * 129)

    def test_max_length(self):
        validate_profile("a" * 128)

    @pytest.mark.parametrize("name", ["my profile", "1release", "rel;ease", "x$(id)", "a`b`", "a.b", "-P"])
    def test_grammar(self, name: str):
        with pytest.raises(ValidationError, match="alphanumeric with dashes or underscores"):
            validate_profile(name)
