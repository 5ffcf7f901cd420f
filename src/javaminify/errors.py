"""Errors raised by the minification pipeline.

Every error carries a single human-readable message; the CLI prints it
and exits with a non-zero status.
"""


class MinifyError(Exception):
    """Base class for all pipeline failures."""


class ValidationError(MinifyError):
    """Invalid command-line options or configuration."""


class BuildError(MinifyError):
    """The external build command failed or could not be started."""


class DescriptorError(MinifyError):
    """The build descriptor could not be read or parsed."""


class ClasspathError(MinifyError):
    """A classpath entry could not be resolved."""


class AnalyzerError(MinifyError):
    """The dependency analyzer failed."""


class CopyError(MinifyError):
    """Preparing the output directory or copying files failed."""


class PropertiesError(MinifyError):
    """A property file could not be loaded or saved."""
