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

"""
Responses of GetService, GetBucket and bulk job APIs, and the bulk object
list sent to start a bulk job.
"""

from __future__ import absolute_import, annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Type, TypeVar
from xml.etree import ElementTree as ET

from .xml import (Element, SubElement, getint, gettext, localname,
                  unknown_attribute, unknown_element)

A = TypeVar("A", bound="Owner")


@dataclass(frozen=True)
class Owner:
    """Owner information."""
    name: Optional[str] = None
    id: Optional[str] = None  # pylint: disable=invalid-name

    @classmethod
    def fromxml(cls: Type[A], element: ET.Element) -> A:
        """Create new object with values from XML element."""
        values = {}
        for child in element:
            tag = localname(child.tag)
            if tag == "DisplayName":
                values["name"] = gettext(child)
            elif tag == "ID":
                values["id"] = gettext(child)
            else:
                unknown_element(child, element)
        return cls(**values)


B = TypeVar("B", bound="Bucket")


@dataclass(frozen=True)
class Bucket:
    """Bucket information."""
    name: Optional[str] = None
    creation_date: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[B], element: ET.Element) -> B:
        """Create new object with values from XML element."""
        values = {}
        for child in element:
            tag = localname(child.tag)
            if tag == "Name":
                values["name"] = gettext(child)
            elif tag == "CreationDate":
                values["creation_date"] = gettext(child)
            else:
                unknown_element(child, element)
        return cls(**values)


C = TypeVar("C", bound="ListAllMyBucketsResult")


@dataclass(frozen=True)
class ListAllMyBucketsResult:
    """GetService API result."""
    ROOT = "ListAllMyBucketsResult"

    buckets: list[Bucket] = field(default_factory=list)
    owner: Optional[Owner] = None

    @classmethod
    def fromxml(cls: Type[C], element: ET.Element) -> C:
        """Create new object with values from XML element."""
        buckets = []
        owner = None
        for child in element:
            tag = localname(child.tag)
            if tag == "Buckets":
                buckets.extend(Bucket.fromxml(bucket) for bucket in child)
            elif tag == "Owner":
                owner = Owner.fromxml(child)
            else:
                unknown_element(child, element)
        return cls(buckets, owner)


D = TypeVar("D", bound="Object")


@dataclass(frozen=True)
class Object:
    """Object information."""
    name: Optional[str] = None
    etag: Optional[str] = None
    last_modified: Optional[str] = None
    storage_class: Optional[str] = None
    size: Optional[int] = None
    owner: Optional[Owner] = None

    @classmethod
    def fromxml(cls: Type[D], element: ET.Element) -> D:
        """Create new object with values from <Contents> XML element."""
        values: dict = {}
        for child in element:
            tag = localname(child.tag)
            if tag == "Key":
                values["name"] = gettext(child)
            elif tag == "ETag":
                values["etag"] = gettext(child)
            elif tag == "LastModified":
                values["last_modified"] = gettext(child)
            elif tag == "StorageClass":
                values["storage_class"] = gettext(child)
            elif tag == "Size":
                values["size"] = getint(gettext(child), "Size")
            elif tag == "Owner":
                values["owner"] = Owner.fromxml(child)
            else:
                unknown_element(child, element)
        return cls(**values)


E = TypeVar("E", bound="ListBucketResult")

# Text elements of <ListBucketResult> mapped to field names.
_LIST_BUCKET_TEXT_FIELDS = {
    "CreationDate": "creation_date",
    "Marker": "marker",
    "Name": "name",
    "Delimiter": "delimiter",
    "NextMarker": "next_marker",
    "Prefix": "prefix",
}


@dataclass(frozen=True)
class ListBucketResult:
    """GetBucket API result."""
    ROOT = "ListBucketResult"

    objects: list[Object] = field(default_factory=list)
    creation_date: Optional[str] = None
    is_truncated: bool = False
    marker: Optional[str] = None
    max_keys: Optional[int] = None
    name: Optional[str] = None
    delimiter: Optional[str] = None
    next_marker: Optional[str] = None
    prefix: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[E], element: ET.Element) -> E:
        """Create new object with values from XML element."""
        values: dict = {"objects": []}
        for child in element:
            tag = localname(child.tag)
            if tag == "Contents":
                values["objects"].append(Object.fromxml(child))
            elif tag == "IsTruncated":
                values["is_truncated"] = gettext(child) == "true"
            elif tag == "MaxKeys":
                values["max_keys"] = getint(gettext(child), "MaxKeys")
            elif tag in _LIST_BUCKET_TEXT_FIELDS:
                values[_LIST_BUCKET_TEXT_FIELDS[tag]] = gettext(child)
            else:
                unknown_element(child, element)
        return cls(**values)


F = TypeVar("F", bound="BulkObject")


@dataclass(frozen=True)
class BulkObject:
    """Object name and size of a bulk job."""
    name: str
    size: int = 0

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ValueError("bulk object name must be a string")
        if self.size < 0:
            raise ValueError(
                f"bulk object {self.name} size must not be negative",
            )

    @classmethod
    def fromxml(cls: Type[F], element: ET.Element) -> F:
        """Create new object with values from <Object> XML element."""
        name = None
        size = 0
        for key, value in element.attrib.items():
            attr = localname(key)
            if attr == "Name":
                name = value
            elif attr == "Size":
                size = getint(value, "Size") or 0
            else:
                unknown_attribute(key, element)
        for child in element:
            unknown_element(child, element)
        if name is None:
            raise ValueError("Object element has no Name attribute")
        return cls(name, size)

    def toxml(self, element: ET.Element) -> ET.Element:
        """Convert to XML."""
        SubElement(
            element, "Object", attrib={"Name": self.name, "Size": str(self.size)},
        )
        return element


G = TypeVar("G", bound="BulkObjectList")


@dataclass
class BulkObjectList:
    """
    Ordered list of bulk objects. On the way in it names the objects of a
    bulk job request; on the way out it is one chunk of the job, tagged with
    the chunk number and server id assigned by the server.
    """
    ROOT = "MasterObjectList"

    objects: list[BulkObject] = field(default_factory=list)
    chunk_number: Optional[int] = None
    server_id: Optional[str] = None

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[BulkObject]:
        return iter(self.objects)

    def __getitem__(self, index: int) -> BulkObject:
        return self.objects[index]

    def append(self, name: str, size: int = 0):
        """Add object of given name and size."""
        self.objects.append(BulkObject(name, size))

    @classmethod
    def fromxml(cls: Type[G], element: ET.Element) -> G:
        """Create new object with values from <Objects> XML element."""
        chunk_number = None
        server_id = None
        for key, value in element.attrib.items():
            attr = localname(key)
            if attr == "ServerId":
                server_id = value
            elif attr == "ChunkNumber":
                chunk_number = getint(value, "ChunkNumber")
            else:
                unknown_attribute(key, element)
        objects = []
        for child in element:
            if localname(child.tag) == "Object":
                objects.append(BulkObject.fromxml(child))
            else:
                unknown_element(child, element)
        return cls(objects, chunk_number, server_id)

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """
        Convert to <MasterObjectList> request document. Chunk number and
        server id are assigned by the server and are never sent.
        """
        element = Element(self.ROOT)
        objects = SubElement(element, "Objects")
        for obj in self.objects:
            obj.toxml(objects)
        return element


H = TypeVar("H", bound="BulkResponse")


@dataclass(frozen=True)
class BulkResponse:
    """Bulk job with chunks in the order the server assigned them."""
    ROOT = "MasterObjectList"

    job_id: str
    chunks: list[BulkObjectList] = field(default_factory=list)

    def __post_init__(self):
        if not self.job_id:
            raise ValueError("MasterObjectList has no JobId")

    @classmethod
    def fromxml(cls: Type[H], element: ET.Element) -> H:
        """Create new object with values from XML element."""
        job_id = None
        for key, value in element.attrib.items():
            if localname(key) == "JobId":
                job_id = value
            else:
                unknown_attribute(key, element)
        chunks = []
        for child in element:
            if localname(child.tag) == "Objects":
                chunks.append(BulkObjectList.fromxml(child))
            else:
                unknown_element(child, element)
        return cls(job_id or "", chunks)
