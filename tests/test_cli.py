"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from conftest import FakeAnalyzer, FakeBuilder
from javaminify import __version__, cli
from javaminify.cli import EXIT_FAILURE, EXIT_VALIDATION, app, check_options, main
from javaminify.errors import ValidationError
from javaminify.pipeline import Minifier

runner = CliRunner()


@pytest.fixture
def args(project: Path, repository: Path, seeds: Path, java_home: Path, tmp_path: Path) -> list[str]:
    return [
        "--java-home", str(java_home),
        "--classes", str(seeds),
        "--input", str(project),
        "--output", str(tmp_path / "output"),
        "--maven-repo", str(repository),
        "p",
    ]


def _use_fakes(monkeypatch: pytest.MonkeyPatch, builder: FakeBuilder, analyzer: FakeAnalyzer) -> None:
    monkeypatch.setattr(
        cli, "Minifier", lambda config: Minifier(config, builder=builder, analyzer=analyzer)
    )


class TestCheckOptions:
    """Tests for option validation."""

    def test_valid_options(self, project: Path, seeds: Path, java_home: Path, tmp_path: Path) -> None:
        config = check_options(java_home, seeds, project, tmp_path / "out", ["p", "q"], test=True)

        assert config.packages == ("p", "q")
        assert config.test
        assert config.additional_file is None
        assert config.output_dir.is_absolute()

    @pytest.mark.parametrize(
        "broken, message",
        [
            ("java_home_missing", "Java home directory does not exist"),
            ("java_home_file", "Java home does not point to a directory"),
            ("classes_missing", "File with class names does not exist"),
            ("classes_dir", "File with class names points to directory"),
            ("input_missing", "Input build environment does not exist"),
            ("input_file", "Input build environment points to a file"),
            ("no_output", "No output directory supplied"),
            ("no_packages", "At least one package"),
        ],
    )
    def test_invalid_options(
        self, broken: str, message: str, project: Path, seeds: Path, java_home: Path, tmp_path: Path
    ) -> None:
        values = {
            "java_home": java_home,
            "classes": seeds,
            "input_dir": project,
            "output": tmp_path / "out",
            "packages": ["p"],
        }
        missing = tmp_path / "missing"
        a_file = seeds
        overrides = {
            "java_home_missing": ("java_home", missing),
            "java_home_file": ("java_home", a_file),
            "classes_missing": ("classes", missing),
            "classes_dir": ("classes", tmp_path),
            "input_missing": ("input_dir", missing),
            "input_file": ("input_dir", a_file),
            "no_output": ("output", None),
            "no_packages": ("packages", []),
        }
        key, value = overrides[broken]
        values[key] = value

        with pytest.raises(ValidationError, match=message):
            check_options(**values)

    def test_additional_file_must_exist(
        self, project: Path, seeds: Path, java_home: Path, tmp_path: Path
    ) -> None:
        with pytest.raises(ValidationError, match="additional class names does not exist"):
            check_options(
                java_home, seeds, project, tmp_path / "out", ["p"], additional=tmp_path / "extra.txt"
            )

    def test_config_file_overrides_layout(
        self, project: Path, seeds: Path, java_home: Path, tmp_path: Path
    ) -> None:
        config_path = tmp_path / "minify.json"
        config_path.write_text(
            json.dumps({"build": {"command": ["./mvnw", "package"]}, "layout": {"auxiliary": []}})
        )

        config = check_options(
            java_home, seeds, project, tmp_path / "out", ["p"],
            config_path=config_path, mindeps_classpath="deps4j.jar",
        )

        assert config.layout.build_command == ("./mvnw", "package")
        assert config.layout.auxiliary_paths == ()
        assert config.layout.mindeps_classpath == "deps4j.jar"


class TestMinifyCommand:
    """Tests for the minify command."""

    def test_success(self, args: list[str], monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        _use_fakes(monkeypatch, FakeBuilder(), FakeAnalyzer(["p.Main", "p.Helper"]))

        result = runner.invoke(app, args)

        assert result.exit_code == 0
        assert (tmp_path / "output" / "src" / "main" / "java" / "p" / "Helper.java").exists()

    def test_writes_report(self, args: list[str], monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        _use_fakes(monkeypatch, FakeBuilder(), FakeAnalyzer(["p.Main"]))
        report = tmp_path / "report.json"

        result = runner.invoke(app, [*args[:-1], "--report", str(report), "p"])

        assert result.exit_code == 0
        data = json.loads(report.read_text())
        assert data["retained_classes"] == ["p.Main"]
        assert data["metadata"]["packages"] == ["p"]
        assert data["verified"] is False

    def test_validation_failure_exits_1(
        self, args: list[str], monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        analyzer = FakeAnalyzer(["p.Main"])
        _use_fakes(monkeypatch, FakeBuilder(), analyzer)
        args[args.index("--input") + 1] = str(tmp_path / "nowhere")

        result = runner.invoke(app, args)

        assert result.exit_code == EXIT_VALIDATION
        assert "Input build environment does not exist" in result.output
        assert analyzer.calls == []

    def test_pipeline_failure_exits_2(
        self, args: list[str], monkeypatch: pytest.MonkeyPatch, project: Path
    ) -> None:
        _use_fakes(monkeypatch, FakeBuilder(exit_codes={project.resolve(): 1}, stderr="boom"), FakeAnalyzer())

        result = runner.invoke(app, args)

        assert result.exit_code == EXIT_FAILURE
        assert "Failed to build input build environment" in result.output
        assert "Exit code: 1" in result.output

    def test_unwritable_report_exits_2(
        self, args: list[str], monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        _use_fakes(monkeypatch, FakeBuilder(), FakeAnalyzer(["p.Main"]))
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        result = runner.invoke(app, [*args[:-1], "--report", str(blocker / "report.json"), "p"])

        assert result.exit_code == EXIT_FAILURE
        assert "Failed to write report" in result.output

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestMain:
    """Tests for the console script entry point."""

    def test_missing_arguments_exit_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Usage errors print a message instead of a traceback."""
        assert main(["--java-home", "/tmp"]) == EXIT_VALIDATION

        assert "Missing" in capsys.readouterr().err

    def test_missing_packages_exit_1(
        self, args: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(args[:-1]) == EXIT_VALIDATION

        assert "Missing" in capsys.readouterr().err

    def test_unknown_option_exit_1(self, args: list[str]) -> None:
        assert main(["--no-such-option", *args]) == EXIT_VALIDATION

    @pytest.mark.parametrize(
        "content",
        [
            {"build": ["mvn"]},
            {"layout": {"properties": [{"strip_array": True}]}},
            {"maven": "/opt/m2"},
        ],
    )
    def test_malformed_config_exit_1(
        self, content: dict, args: list[str], tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config_path = tmp_path / "minify.json"
        config_path.write_text(json.dumps(content))

        assert main(["--config", str(config_path), *args]) == EXIT_VALIDATION

        assert "Invalid configuration" in capsys.readouterr().err

    def test_pipeline_exit_code(
        self, args: list[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _use_fakes(monkeypatch, FakeBuilder(), FakeAnalyzer(error=RuntimeError("no jdeps")))

        assert main(args) == EXIT_FAILURE

    def test_success_exit_code(self, args: list[str], monkeypatch: pytest.MonkeyPatch) -> None:
        _use_fakes(monkeypatch, FakeBuilder(), FakeAnalyzer(["p.Main"]))

        assert main(args) == 0
