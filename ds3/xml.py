# -*- coding: utf-8 -*-
# DS3 Python Library for Spectra Logic Object Storage,
# (C) 2014 Spectra Logic Corporation.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""XML encoding and decoding functions."""

from __future__ import annotations

import io
import logging
from typing import Optional, TypeVar
from xml.etree import ElementTree as ET

from typing_extensions import Protocol

from .error import invalid_xml

_LOGGER = logging.getLogger(__name__)


def Element(  # pylint: disable=invalid-name
    tag: str,
    namespace: Optional[str] = None,
) -> ET.Element:
    """Create ElementTree.Element with tag and optional namespace."""
    return ET.Element(tag, {"xmlns": namespace} if namespace else {})


def SubElement(  # pylint: disable=invalid-name
    parent: ET.Element,
    tag: str,
    text: Optional[str] = None,
    attrib: Optional[dict[str, str]] = None,
) -> ET.Element:
    """Create ElementTree.SubElement on parent with tag, text and attributes."""
    element = ET.SubElement(parent, tag, attrib or {})
    if text is not None:
        element.text = text
    return element


def localname(name: str) -> str:
    """Strip '{namespace}' prefix of element or attribute name."""
    return name.rsplit("}", 1)[1] if name.startswith("{") else name


def gettext(element: ET.Element) -> Optional[str]:
    """Get text of element; None if element has no text."""
    return element.text


def getint(value: Optional[str], name: str) -> Optional[int]:
    """Parse base-10 integer of element text or attribute value."""
    if value is None:
        return None
    try:
        return int(value.strip(), 10)
    except ValueError as exc:
        raise ValueError(f"{name} value '{value}' is not an integer") from exc


def unknown_element(element: ET.Element, parent: ET.Element):
    """Log and skip element not known to the decoder."""
    _LOGGER.warning(
        "Unknown xml element: (%s) in <%s>",
        localname(element.tag), localname(parent.tag),
    )


def unknown_attribute(name: str, element: ET.Element):
    """Log and skip attribute not known to the decoder."""
    _LOGGER.warning(
        "Unknown attribute: (%s) in <%s>",
        localname(name), localname(element.tag),
    )


UnmarshalT = TypeVar("UnmarshalT", bound="UnmarshalProtocol")


class UnmarshalProtocol(Protocol):
    """typing stub for class with `ROOT` tag and `fromxml` method"""

    ROOT: str

    @classmethod
    def fromxml(cls: type[UnmarshalT], element: ET.Element) -> UnmarshalT:
        """
        Create object by values from XML element.
        Code discipline:
        1. Walk direct children by local name; skip unknown ones.
        2. Raise ValueError on malformed values.
        """


def unmarshal(cls: type[UnmarshalT], data: bytes | str) -> UnmarshalT:
    """
    Unmarshal given XML document to an object of passed class. Raises
    INVALID_XML error if document does not parse, root element is not
    `cls.ROOT` or a value is malformed.
    """
    body = data.decode(errors="replace") if isinstance(data, bytes) else data
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise invalid_xml("Failed to parse response document", body) from exc

    if localname(root.tag) != cls.ROOT:
        raise invalid_xml(
            f"Expected the root element to be '{cls.ROOT}'", body,
        )

    try:
        return cls.fromxml(root)
    except ValueError as exc:
        raise invalid_xml(
            f"Failed to decode '{cls.ROOT}' document: {exc}", body,
        ) from exc


def getbytes(element: ET.Element) -> bytes:
    """Convert ElementTree.Element to bytes."""
    with io.BytesIO() as data:
        ET.ElementTree(element).write(
            data,
            encoding=None,
            xml_declaration=False,
        )
        return data.getvalue()


class MarshalT(Protocol):
    """typing stub for class with `toxml` method"""

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """
        Convert python object to ElementTree.Element.
        Code discipline:
        1. Do not create its own `SubElement` if needed.
        2. Always return passed `Element`.
        3. For root, `element` argument is always `None` hence
           root `Element` must be created.
        """


def marshal(obj: MarshalT) -> bytes:
    """Get XML data as bytes of ElementTree.Element."""
    return getbytes(obj.toxml(None))
