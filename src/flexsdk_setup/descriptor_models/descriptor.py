"""
Pydantic data models for the SDK installer descriptor document.

The descriptor is an XML document. It is converted into an immutable tree of
DescriptorElement and DescriptorOther nodes so that navigation can match on
node kind explicitly instead of probing the shape of a parsed dictionary.
"""

import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from flexsdk_setup.flexsdk_setup_exceptions import DescriptorError


class DescriptorOther(BaseModel):
    """
    Any node that is not an element: character data or a comment.
    """

    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., description="Node kind: text or comment")
    text: str = Field("", description="Raw node content")


class DescriptorElement(BaseModel):
    """
    An element of the descriptor with its attribute map and ordered children.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Element tag name")
    attributes: Dict[str, str] = Field(default_factory=dict)
    children: List[Union["DescriptorElement", DescriptorOther]] = Field(default_factory=list)

    def get_attribute(self, key: str) -> Optional[str]:
        return self.attributes.get(key)

    def child_elements(self) -> List["DescriptorElement"]:
        """Get the element children, skipping text and comments."""
        return [child for child in self.children if isinstance(child, DescriptorElement)]

    def get_child(self, name: str) -> Optional["DescriptorElement"]:
        """
        Get the first child element with the given name.

        Args:
            name: The element name (e.g., "products", "versions")

        Returns:
            DescriptorElement or None if not found
        """
        for child in self.child_elements():
            if child.name == name:
                return child
        return None


DescriptorNode = Union[DescriptorElement, DescriptorOther]

DescriptorElement.model_rebuild()


def _convert(element: ET.Element) -> DescriptorNode:
    if not isinstance(element.tag, str):
        # Comments and processing instructions carry a factory function as tag
        kind = "comment" if element.tag is ET.Comment else "other"
        return DescriptorOther(kind=kind, text=element.text or "")

    children: List[DescriptorNode] = []
    if element.text and element.text.strip():
        children.append(DescriptorOther(kind="text", text=element.text))
    for sub in element:
        children.append(_convert(sub))
        if sub.tail and sub.tail.strip():
            children.append(DescriptorOther(kind="text", text=sub.tail))

    return DescriptorElement(
        name=element.tag,
        attributes=dict(element.attrib),
        children=children,
    )


def parse_descriptor(document: str) -> DescriptorElement:
    """
    Parses the descriptor XML text into its root element.

    Raises:
        DescriptorError: if the document is not well-formed XML
    """
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        root = ET.fromstring(document, parser=parser)
    except ET.ParseError as exc:
        raise DescriptorError() from exc
    node = _convert(root)
    if not isinstance(node, DescriptorElement):
        raise DescriptorError()
    return node
