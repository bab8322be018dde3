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

"""Request of a single DS3 operation and constructors per operation."""

from __future__ import absolute_import, annotations

from typing import Mapping, Optional

from .datatypes import BulkObjectList
from .helpers import check_bucket_name, check_object_name, quote

HTTP_VERBS = ("GET", "PUT", "POST", "DELETE", "HEAD")

_BULK_PATH = "/_rest_/bucket/"


class Request:
    """
    HTTP verb, path, query parameters, headers and declared body length of
    one DS3 operation. Bulk requests also carry the object list of the job.
    """

    def __init__(
            self,
            verb: str,
            path: str,
            query_params: Optional[Mapping[str, str]] = None,
            headers: Optional[Mapping[str, str]] = None,
            length: int = 0,
            object_list: Optional[BulkObjectList] = None,
    ):
        verb = verb.upper()
        if verb not in HTTP_VERBS:
            raise ValueError(f"unsupported HTTP verb {verb}")
        if not path or not path.startswith("/"):
            raise ValueError(f"path {path!r} must start with '/'")
        if length < 0:
            raise ValueError("length must not be negative")
        self._verb = verb
        self._path = path
        self._query_params = dict(query_params or {})
        self._headers = dict(headers or {})
        self._length = length
        self._object_list = object_list

    @property
    def verb(self) -> str:
        """Get HTTP verb."""
        return self._verb

    @property
    def path(self) -> str:
        """Get request path."""
        return self._path

    @property
    def query_params(self) -> dict[str, str]:
        """Get query parameters."""
        return self._query_params

    @property
    def headers(self) -> dict[str, str]:
        """Get request headers."""
        return self._headers

    @property
    def length(self) -> int:
        """Get number of bytes of request body."""
        return self._length

    @length.setter
    def length(self, length: int):
        """Set number of bytes of request body."""
        if length < 0:
            raise ValueError("length must not be negative")
        self._length = length

    @property
    def object_list(self) -> Optional[BulkObjectList]:
        """Get object list of bulk request."""
        return self._object_list

    def __repr__(self):
        return f"Request(verb={self._verb!r}, path={self._path!r})"

    def __str__(self):
        return f"Verb: {self._verb}\nPath: {self._path}"


def _bucket_path(bucket_name: str) -> str:
    check_bucket_name(bucket_name)
    return "/" + quote(bucket_name)


def _object_path(bucket_name: str, object_name: str) -> str:
    check_object_name(object_name)
    return _bucket_path(bucket_name) + "/" + quote(object_name)


def init_get_service() -> Request:
    """Create request to list all buckets."""
    return Request("GET", "/")


def init_get_bucket(bucket_name: str) -> Request:
    """Create request to list objects of a bucket."""
    return Request("GET", _bucket_path(bucket_name))


def init_put_bucket(bucket_name: str) -> Request:
    """Create request to create a bucket."""
    return Request("PUT", _bucket_path(bucket_name))


def init_delete_bucket(bucket_name: str) -> Request:
    """Create request to remove a bucket."""
    return Request("DELETE", _bucket_path(bucket_name))


def init_get_object(bucket_name: str, object_name: str) -> Request:
    """Create request to download an object."""
    return Request("GET", _object_path(bucket_name, object_name))


def init_put_object(bucket_name: str, object_name: str, length: int) -> Request:
    """Create request to upload an object of given length."""
    return Request("PUT", _object_path(bucket_name, object_name), length=length)


def init_delete_object(bucket_name: str, object_name: str) -> Request:
    """Create request to remove an object."""
    return Request("DELETE", _object_path(bucket_name, object_name))


def _init_bulk(
        bucket_name: str,
        object_list: BulkObjectList,
        operation: str,
) -> Request:
    check_bucket_name(bucket_name)
    return Request(
        "PUT",
        _BULK_PATH + quote(bucket_name),
        query_params={"operation": operation},
        object_list=object_list,
    )


def init_get_bulk(bucket_name: str, object_list: BulkObjectList) -> Request:
    """Create request to start a bulk get job of given objects."""
    return _init_bulk(bucket_name, object_list, "start_bulk_get")


def init_put_bulk(bucket_name: str, object_list: BulkObjectList) -> Request:
    """Create request to start a bulk put job of given objects."""
    return _init_bulk(bucket_name, object_list, "start_bulk_put")
