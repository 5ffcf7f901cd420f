"""Running the external build tool against a project directory."""

import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from javaminify.config import DEFAULT_BUILD_COMMAND
from javaminify.errors import BuildError
from javaminify.models.results import BuildResult


@runtime_checkable
class ProjectBuilder(Protocol):
    """Builds a project directory and reports the captured outcome."""

    def build(self, directory: Path) -> BuildResult:
        ...


class MavenBuilder:
    """Builds a project with Maven, skipping the tests."""

    def __init__(self, command: list[str] | tuple[str, ...] | None = None) -> None:
        self.command = list(command or DEFAULT_BUILD_COMMAND)

    def build(self, directory: Path) -> BuildResult:
        """Run the build command in ``directory`` and wait for it to finish.

        Raises:
            BuildError: If the command cannot be started at all.
        """
        try:
            result = subprocess.run(
                self.command,
                cwd=directory,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise BuildError(f"Failed to execute: {' '.join(self.command)} (in {directory})\n{e}") from e

        return BuildResult(
            command=self.command,
            directory=directory,
            exit_code=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )


def run_build(builder: ProjectBuilder, directory: Path) -> BuildResult:
    """Build ``directory``, raising BuildError unless the build exits with 0."""
    result = builder.build(directory)
    if not result.succeeded:
        raise BuildError(result.describe_failure())
    return result
