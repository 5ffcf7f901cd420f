"""Build tool integration."""

from javaminify.build.maven import MavenBuilder, ProjectBuilder, run_build

__all__ = ["MavenBuilder", "ProjectBuilder", "run_build"]
