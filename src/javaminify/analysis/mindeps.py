"""Delegation to the external MinDeps dependency analyzer."""

import os
import subprocess
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from javaminify.errors import AnalyzerError
from javaminify.models.descriptor import Classpath
from javaminify.models.run import RunConfiguration

MINDEPS_CLASS = "com.github.fracpete.deps4j.MinDeps"
MINDEPS_CLASSPATH_ENV = "MINDEPS_CLASSPATH"


@runtime_checkable
class DependencyAnalyzer(Protocol):
    """Computes the classes needed by a set of seed classes."""

    def retained_classes(
        self,
        java_home: Path,
        classpath: str,
        packages: list[str],
        classes_file: Path,
        additional_file: Path | None = None,
    ) -> list[str]:
        ...


def read_class_names(text: str) -> list[str]:
    """Parse newline-separated class names, skipping blanks and # comments."""
    names = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            names.append(line)
    return names


class MinDepsAnalyzer:
    """Runs deps4j's MinDeps in a separate JVM."""

    def __init__(self, tool_classpath: str | None = None) -> None:
        self.tool_classpath = tool_classpath or os.environ.get(MINDEPS_CLASSPATH_ENV)

    def build_command(
        self,
        java_home: Path,
        classpath: str,
        packages: list[str],
        classes_file: Path,
        additional_file: Path | None,
        output_file: Path,
    ) -> list[str]:
        if not self.tool_classpath:
            raise AnalyzerError(
                f"No classpath for {MINDEPS_CLASS}; "
                f"use --mindeps-classpath or set {MINDEPS_CLASSPATH_ENV}."
            )
        cmd = [
            str(java_home / "bin" / "java"),
            "-cp",
            self.tool_classpath,
            MINDEPS_CLASS,
            "--java-home",
            str(java_home),
            "--class-path",
            classpath,
            "--classes",
            str(classes_file),
        ]
        if additional_file is not None:
            cmd += ["--additional", str(additional_file)]
        cmd += ["--output", str(output_file)]
        cmd += list(packages)
        return cmd

    def retained_classes(
        self,
        java_home: Path,
        classpath: str,
        packages: list[str],
        classes_file: Path,
        additional_file: Path | None = None,
    ) -> list[str]:
        with tempfile.TemporaryDirectory(prefix="javaminify-") as tmp:
            output_file = Path(tmp) / "classes.txt"
            cmd = self.build_command(
                java_home, classpath, packages, classes_file, additional_file, output_file
            )
            try:
                result = subprocess.run(cmd, capture_output=True, text=True, check=False)
            except OSError as e:
                raise AnalyzerError(f"Failed to execute: {' '.join(cmd[:4])}\n{e}") from e

            if result.returncode != 0:
                raise AnalyzerError(
                    f"\nExit code: {result.returncode}\nStderr:\n{result.stderr}"
                )
            if output_file.exists():
                return read_class_names(output_file.read_text(encoding="utf-8"))
            return read_class_names(result.stdout)


def determine_classes(
    analyzer: DependencyAnalyzer,
    config: RunConfiguration,
    classpath: Classpath,
) -> list[str]:
    """Ask the analyzer for the full set of classes to keep.

    Raises:
        AnalyzerError: Wrapping whatever the analyzer reported.
    """
    try:
        classes = analyzer.retained_classes(
            config.java_home,
            classpath.to_string(),
            list(config.packages),
            config.classes_file,
            config.additional_file,
        )
    except Exception as e:
        raise AnalyzerError(f"Failed to execute MinDeps: {e}") from e
    return list(classes)
