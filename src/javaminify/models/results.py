"""Data models for build and copy results."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class BuildResult:
    """Outcome of running the external build command."""

    command: list[str]
    directory: Path
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def describe_failure(self) -> str:
        message = f"\nExit code: {self.exit_code}"
        if self.stderr:
            message += f"\nStderr:\n{self.stderr}"
        if self.stdout:
            message += f"\nStdout:\n{self.stdout}"
        return message


@dataclass
class CopyReport:
    """What the copier did with the retained classes."""

    copied_sources: list[Path] = field(default_factory=list)
    missing_sources: list[Path] = field(default_factory=list)
    copied_resources: list[Path] = field(default_factory=list)
    missing_resource_dirs: list[Path] = field(default_factory=list)


@dataclass
class PropertyPatch:
    """Keys removed from one property file."""

    file: Path
    removed: list[str] = field(default_factory=list)

    @property
    def modified(self) -> bool:
        return bool(self.removed)


@dataclass
class MinifyResult:
    """Summary of a complete run."""

    classpath: list[Path] = field(default_factory=list)
    retained_classes: list[str] = field(default_factory=list)
    copy_report: CopyReport = field(default_factory=CopyReport)
    property_patches: list[PropertyPatch] = field(default_factory=list)
    verified: bool = False


def _paths(paths: list[Path]) -> list[str]:
    return [str(p) for p in paths]


def copy_report_to_dict(report: CopyReport) -> dict:
    return {
        "copied_sources": _paths(report.copied_sources),
        "missing_sources": _paths(report.missing_sources),
        "copied_resources": _paths(report.copied_resources),
        "missing_resource_dirs": _paths(report.missing_resource_dirs),
    }


def result_to_dict(result: MinifyResult) -> dict:
    """Convert a run summary to a JSON-serializable dictionary."""
    return {
        "classpath": _paths(result.classpath),
        "retained_classes": result.retained_classes,
        "copy": copy_report_to_dict(result.copy_report),
        "properties": [
            {"file": str(patch.file), "removed": patch.removed}
            for patch in result.property_patches
        ],
        "verified": result.verified,
    }
