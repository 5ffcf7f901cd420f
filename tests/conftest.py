"""Shared fixtures: a small Maven project, a local repository and fake collaborators."""

import shutil
from pathlib import Path

import pytest

from javaminify.models.results import BuildResult
from javaminify.models.run import Layout, RunConfiguration

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "meka_project"


class FakeBuilder:
    """Records the directories it was asked to build."""

    def __init__(self, exit_codes: dict[Path, int] | None = None, stderr: str = "") -> None:
        self.exit_codes = exit_codes or {}
        self.stderr = stderr
        self.built: list[Path] = []

    def build(self, directory: Path) -> BuildResult:
        self.built.append(directory)
        code = self.exit_codes.get(directory, 0)
        return BuildResult(
            command=["mvn"],
            directory=directory,
            exit_code=code,
            stderr=self.stderr if code else "",
        )


class FakeAnalyzer:
    """Returns a fixed class list and remembers how it was called."""

    def __init__(self, classes: list[str] | None = None, error: Exception | None = None) -> None:
        self.classes = classes or []
        self.error = error
        self.calls: list[dict] = []

    def retained_classes(self, java_home, classpath, packages, classes_file, additional_file=None):
        self.calls.append(
            {
                "java_home": java_home,
                "classpath": classpath,
                "packages": packages,
                "classes_file": classes_file,
                "additional_file": additional_file,
            }
        )
        if self.error is not None:
            raise self.error
        return list(self.classes)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A copy of the fixture project with a built snapshot jar."""
    path = tmp_path / "input"
    shutil.copytree(FIXTURES_PATH, path)
    target = path / "target"
    target.mkdir()
    (target / "proj-1.0-SNAPSHOT.jar").write_bytes(b"PK")
    (target / "classes").mkdir()
    return path


@pytest.fixture
def repository(tmp_path: Path) -> Path:
    """A local Maven repository holding g:a:1.0."""
    repo = tmp_path / "m2" / "repository"
    jar = repo / "g" / "a" / "1.0" / "a-1.0.jar"
    jar.parent.mkdir(parents=True)
    jar.write_bytes(b"PK")
    return repo


@pytest.fixture
def seeds(tmp_path: Path) -> Path:
    path = tmp_path / "classes.txt"
    path.write_text("# seeds\np.Main\n")
    return path


@pytest.fixture
def java_home(tmp_path: Path) -> Path:
    path = tmp_path / "jdk"
    (path / "bin").mkdir(parents=True)
    return path


@pytest.fixture
def run_config(tmp_path: Path, project: Path, repository: Path, seeds: Path, java_home: Path):
    def make(**overrides) -> RunConfiguration:
        values = {
            "java_home": java_home,
            "classes_file": seeds,
            "input_dir": project,
            "output_dir": tmp_path / "output",
            "packages": ("p",),
            "layout": Layout.from_config({"maven": {"repository": str(repository)}}),
        }
        values.update(overrides)
        return RunConfiguration(**values)

    return make
