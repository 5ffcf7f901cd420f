"""Data models for javaminify."""

from javaminify.models.descriptor import Classpath, Dependency
from javaminify.models.results import BuildResult, CopyReport, MinifyResult, PropertyPatch
from javaminify.models.run import Layout, PropertyFile, RunConfiguration

__all__ = [
    # Descriptor models
    "Classpath",
    "Dependency",
    # Result models
    "BuildResult",
    "CopyReport",
    "MinifyResult",
    "PropertyPatch",
    # Run models
    "Layout",
    "PropertyFile",
    "RunConfiguration",
]
