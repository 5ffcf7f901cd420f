"""Data models for the build descriptor and the analysis classpath."""

import os
from dataclasses import dataclass, field
from pathlib import Path

TEST_SCOPE = "test"


@dataclass(frozen=True)
class Dependency:
    """A <dependency> declaration from pom.xml."""

    group: str | None = None
    artifact: str | None = None
    version: str | None = None
    scope: str | None = None

    @property
    def is_test(self) -> bool:
        return self.scope == TEST_SCOPE

    @property
    def is_resolvable(self) -> bool:
        """Whether group, artifact and version are all present."""
        return bool(self.group and self.artifact and self.version)

    @property
    def coordinates(self) -> str:
        return f"{self.group}:{self.artifact}:{self.version}"

    def jar_path(self, repository: Path) -> Path:
        """Get the expected jar location inside a local Maven repository."""
        return (
            repository.joinpath(*self.group.split("."))
            / self.artifact
            / self.version
            / f"{self.artifact}-{self.version}.jar"
        )


@dataclass
class Classpath:
    """Ordered jars handed to the dependency analyzer."""

    artifact: Path
    dependencies: list[Path] = field(default_factory=list)

    @property
    def entries(self) -> list[Path]:
        return [self.artifact, *self.dependencies]

    def to_string(self) -> str:
        return os.pathsep.join(str(entry) for entry in self.entries)
