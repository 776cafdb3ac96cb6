"""
Tests for the Maven command builder.
"""

import pytest

from maven_deploy.core.errors import BuildError, ValidationError
from maven_deploy.core.models.deploy import DeployConfig
from maven_deploy.core.services.command_builder import build_maven_command, render_command


class TestBuildMavenCommand:
    def test_minimal(self):
        assert build_maven_command(DeployConfig(pom_path="pom.xml")) == ["deploy", "-f", "pom.xml"]

    def test_empty_pom_path_defaults(self):
        assert build_maven_command(DeployConfig(pom_path="")) == ["deploy", "-f", "pom.xml"]

    def test_all_options_in_order(self):
        config = DeployConfig(
            pom_path="pom.xml",
            skip_tests=True,
            settings="s.xml",
            profiles=("release", "sign"),
        )
        assert build_maven_command(config) == [
            "deploy", "-f", "pom.xml", "-DskipTests", "-s", "s.xml", "-P", "release,sign",
        ]

    def test_submodule(self):
        config = DeployConfig(
            pom_path="submodule/pom.xml",
            skip_tests=True,
            settings=".mvn/settings.xml",
            profiles=("ossrh", "gpg"),
        )
        assert build_maven_command(config) == [
            "deploy", "-f", "submodule/pom.xml", "-DskipTests",
            "-s", ".mvn/settings.xml", "-P", "ossrh,gpg",
        ]

    def test_settings_only(self):
        args = build_maven_command(DeployConfig(settings="custom-settings.xml"))
        assert args == ["deploy", "-f", "pom.xml", "-s", "custom-settings.xml"]

    def test_returns_fresh_list(self):
        config = DeployConfig()
        first = build_maven_command(config)
        first.append("mutated")
        assert build_maven_command(config) == ["deploy", "-f", "pom.xml"]

    def test_bad_pom_path(self):
        with pytest.raises(BuildError, match="invalid pom_path: path traversal") as exc:
            build_maven_command(DeployConfig(pom_path="../../../etc/passwd"))
        assert exc.value.field == "pom_path"
        assert isinstance(exc.value.__cause__, ValidationError)

    def test_absolute_pom_path(self):
        with pytest.raises(BuildError, match="invalid pom_path: absolute paths"):
            build_maven_command(DeployConfig(pom_path="/etc/passwd"))

    def test_bad_settings(self):
        with pytest.raises(BuildError, match="invalid settings path: path traversal"):
            build_maven_command(DeployConfig(settings="../settings.xml"))

    def test_bad_profile_named(self):
        with pytest.raises(BuildError, match=r"invalid profile 'bad;rm': invalid profile name"):
            build_maven_command(DeployConfig(profiles=("release", "bad;rm")))

    def test_empty_profile(self):
        with pytest.raises(BuildError, match="profile name cannot be empty"):
            build_maven_command(DeployConfig(profiles=("release", "")))


class TestRenderCommand:
    def test_render(self):
        assert render_command(["deploy", "-f", "pom.xml"]) == "mvn deploy -f pom.xml"
