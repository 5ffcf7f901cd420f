"""Producing the minified build environment."""

from javaminify.output.copier import copy_classes
from javaminify.output.json_writer import write_report
from javaminify.output.prepare import prepare_output_dir
from javaminify.output.properties import PropertiesDocument, patch_properties
from javaminify.output.summary import display_summary

__all__ = [
    "PropertiesDocument",
    "copy_classes",
    "display_summary",
    "patch_properties",
    "prepare_output_dir",
    "write_report",
]
