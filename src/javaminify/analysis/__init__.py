"""Analysis of the input build environment."""

from javaminify.analysis.classpath import assemble_classpath
from javaminify.analysis.descriptor import BuildDescriptor, read_descriptor
from javaminify.analysis.mindeps import DependencyAnalyzer, MinDepsAnalyzer, determine_classes

__all__ = [
    "BuildDescriptor",
    "DependencyAnalyzer",
    "MinDepsAnalyzer",
    "assemble_classpath",
    "determine_classes",
    "read_descriptor",
]
