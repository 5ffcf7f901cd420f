"""Reading the pom.xml build descriptor."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from javaminify.errors import DescriptorError
from javaminify.models.descriptor import Dependency
from javaminify.paths import get_pom_path


@dataclass
class BuildDescriptor:
    """A parsed pom.xml with namespaces removed from all tags."""

    path: Path
    root: ET.Element

    def dependencies(self) -> Iterator[Dependency]:
        """Yield every <dependency> declaration in document order."""
        for node in self.root.iterfind(".//dependency"):
            yield Dependency(
                group=_first_text(node, "groupId"),
                artifact=_first_text(node, "artifactId"),
                version=_first_text(node, "version"),
                scope=_first_text(node, "scope"),
            )


def read_descriptor(project_path: Path) -> BuildDescriptor:
    """Read and parse the pom.xml of a project.

    Raises:
        DescriptorError: If the file is missing or not well-formed XML.
    """
    pom = get_pom_path(project_path)
    try:
        root = ET.fromstring(pom.read_bytes())
    except (OSError, ET.ParseError) as e:
        raise DescriptorError(f"Failed to read/parse: {pom}\n{e}") from e

    _strip_namespaces(root)
    return BuildDescriptor(path=pom, root=root)


def _strip_namespaces(root: ET.Element) -> None:
    """Drop the "{uri}" prefix ElementTree puts on namespaced tags."""
    for element in root.iter():
        if isinstance(element.tag, str) and element.tag.startswith("{"):
            element.tag = element.tag.split("}", 1)[1]


def _first_text(node: ET.Element, tag: str) -> str | None:
    child = node.find(f"./{tag}")
    if child is None or child.text is None:
        return None
    return child.text.strip() or None
