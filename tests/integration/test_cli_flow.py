"""Integration tests: configuration -> registry -> umbrella -> CLI."""

import pytest
import yaml

from kraftpack.__main__ import build_umbrella, main
from kraftpack.common.config import CONFIG_ENV_VAR, parse_config
from kraftpack.packmanager import CatalogQuery, Context
from kraftpack.unikraft import load_application
from tests.factories import OciManager, TarManager


@pytest.fixture
def config_file(tmp_path, monkeypatch, sample_config):
    """Write the sample configuration and point the CLI at it."""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(sample_config))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path


class TestBuildUmbrella:
    """Tests wiring configured managers into an umbrella."""

    def test_configured_managers(self, sample_config):
        """Test the umbrella sees every configured manager."""
        umbrella = build_umbrella(parse_config(sample_config))

        assert isinstance(umbrella.from_format("oci"), OciManager)
        assert isinstance(umbrella.from_format("tar"), TarManager)
        assert umbrella.sort_by_key is True

    def test_pack_project_targets(self, tmp_path, sample_config):
        """Test packing each target of a loaded Kraftfile via every manager."""
        kraftfile = tmp_path / "Kraftfile"
        kraftfile.write_text("name: nginx\ntargets:\n  - qemu/x86_64\n  - fc/arm64\n")
        project = load_application(str(kraftfile))
        umbrella = build_umbrella(parse_config(sample_config))
        ctx = Context.background()

        packages = []
        for target in project.targets:
            packages.extend(umbrella.pack(ctx, target))

        assert [p.format_name for p in packages] == ["oci", "tar", "oci", "tar"]

    def test_catalog_across_formats(self, sample_config):
        """Test catalog spans every format."""
        umbrella = build_umbrella(parse_config(sample_config))

        names = [p.name for p in umbrella.catalog(Context.background(), CatalogQuery())]

        assert names == ["unikraft.org/nginx:latest", "nginx.tar.gz"]


class TestCli:
    """Tests for the command-line entry point."""

    def test_usage(self, capsys):
        """Test running without a command."""
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().err

    def test_unknown_command(self, capsys):
        assert main(["frobnicate"]) == 1

    def test_missing_argument(self, config_file, capsys):
        """Test commands that need an argument."""
        assert main(["add-source"]) == 1
        assert "requires an argument" in capsys.readouterr().err

    def test_formats(self, config_file, capsys):
        """Test listing registered formats."""
        assert main(["formats"]) == 0
        assert capsys.readouterr().out.splitlines() == ["oci\toci", "tar\ttar"]

    def test_catalog(self, config_file, capsys):
        """Test catalog output."""
        assert main(["catalog"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "unikraft.org/nginx:latest",
            "nginx.tar.gz",
        ]

    def test_catalog_by_name(self, config_file, capsys):
        assert main(["catalog", "nginx.tar.gz"]) == 0
        assert capsys.readouterr().out.splitlines() == ["nginx.tar.gz"]

    def test_compatible(self, config_file, capsys):
        """Test resolving a source to its manager."""
        assert main(["compatible", "nginx.tar.gz"]) == 0
        assert capsys.readouterr().out.strip() == "tar"

    def test_no_compatible_manager(self, config_file, capsys):
        """Test the error path when nothing handles a source."""
        assert main(["compatible", "ftp://nowhere"]) == 1
        assert "cannot find compatible package manager" in capsys.readouterr().err

    def test_update_and_sources(self, config_file):
        """Test side-effecting commands succeed."""
        assert main(["update"]) == 0
        assert main(["add-source", "https://example.com/index.yaml"]) == 0

    def test_missing_config_uses_defaults(self, tmp_path, monkeypatch, capsys):
        """Test an absent config file runs with an empty registry."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))

        assert main(["formats"]) == 0
        assert capsys.readouterr().out == ""


class TestCliConfigErrors:
    """Tests that bad configuration exits 1 instead of raising."""

    @pytest.mark.parametrize(
        "content,message",
        [
            ("packmanager:\n  managers:\n    x: no_colon_path\n", "Invalid package manager path"),
            (
                "packmanager:\n  managers:\n    x: tests.factories:NotAManager\n",
                "is not a PackageManager",
            ),
            ("logging:\n  level: LOUD\n  console_logging: false\n", "Invalid log level"),
            ("- just\n- a\n- list\n", "Configuration root must be a mapping"),
            ("packmanager:\n  managers: [oci, tar]\n", "must be a mapping"),
            ("logging: {level: [unclosed\n", ""),
        ],
        ids=["malformed-path", "not-a-manager", "bad-level", "root-list", "managers-list", "bad-yaml"],
    )
    def test_bad_config_exits_1(self, tmp_path, monkeypatch, capsys, content, message):
        path = tmp_path / "config.yaml"
        path.write_text(content)
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert main(["formats"]) == 1

        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert message in err
