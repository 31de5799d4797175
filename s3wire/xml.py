# -*- coding: utf-8 -*-
# s3wire, request addressing and response handling for Amazon S3
# compatible storage, (C) 2025 The s3wire Authors.
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

import codecs
import io
import re
from typing import Optional
from xml.etree import ElementTree as ET

_S3_NAMESPACE = "http://s3.amazonaws.com/doc/2006-03-01/"
_XML_DECLARATION_REGEX = re.compile(r"^<\?xml[^>]*\?>")


def Element(  # pylint: disable=invalid-name
    tag: str,
    namespace: str = _S3_NAMESPACE,
) -> ET.Element:
    """Create ElementTree.Element with tag and namespace."""
    return ET.Element(tag, {"xmlns": namespace} if namespace else {})


def SubElement(  # pylint: disable=invalid-name
    parent: ET.Element, tag: str, text: Optional[str] = None
) -> ET.Element:
    """Create ElementTree.SubElement on parent with tag and text."""
    element = ET.SubElement(parent, tag)
    if text is not None:
        element.text = text
    return element


def getbytes(element: ET.Element) -> bytes:
    """Convert ElementTree.Element to bytes."""
    with io.BytesIO() as data:
        ET.ElementTree(element).write(
            data,
            encoding=None,
            xml_declaration=False,
        )
        return data.getvalue()


def _namespace(element: ET.Element) -> str:
    """Exact namespace if found."""
    start = element.tag.find("{")
    if start < 0:
        return ""
    start += 1
    end = element.tag.find("}")
    if end < 0:
        return ""
    return element.tag[start:end]


def _namespaced(element: ET.Element, name: str) -> tuple[str, dict[str, str]]:
    """Namespace arguments for find and findall."""
    namespace = _namespace(element)
    if namespace:
        name = "/".join(f"ns:{token}" for token in name.split("/"))
        return name, {"ns": namespace}
    return name, {}


def localname(element: ET.Element) -> str:
    """Tag name of element without namespace."""
    return element.tag.rsplit("}", 1)[-1]


def fromstring(data: bytes | str) -> Optional[ET.Element]:
    """
    Parse XML data; return None if data is not well-formed XML.

    Bytes are decoded by the parser from their byte order mark or encoding
    declaration. A str is already decoded, so its declaration is dropped.
    """
    if isinstance(data, str):
        data = _XML_DECLARATION_REGEX.sub("", data.lstrip("\ufeff").strip())
    else:
        if data.startswith(codecs.BOM_UTF8):
            data = data[len(codecs.BOM_UTF8):]
        if not data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
            data = data.strip()
    try:
        return ET.fromstring(data)
    except (ET.ParseError, LookupError, ValueError):
        # LookupError for unknown encoding declarations.
        return None


def findall(element: ET.Element, name: str) -> list[ET.Element]:
    """Namespace aware ElementTree.Element.findall()."""
    name, namespaces = _namespaced(element, name)
    return element.findall(name, namespaces=namespaces)


def find(
        element: ET.Element,
        name: str,
        strict: bool = False,
) -> Optional[ET.Element]:
    """Namespace aware ElementTree.Element.find()."""
    name, namespaces = _namespaced(element, name)
    elem = element.find(name, namespaces=namespaces)
    if strict and elem is None:
        raise ValueError(f"XML element <{name}> not found")
    return elem


def findtext(
    element: ET.Element,
    name: str,
    strict: bool = False,
    default: Optional[str] = None,
) -> Optional[str]:
    """
    Namespace aware ElementTree.Element.findtext() with strict flag
    raises ValueError if element name not exist.
    """
    elem = find(element, name, strict=strict)
    return default if elem is None else (elem.text or "")
