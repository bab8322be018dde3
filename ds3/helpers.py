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

"""Helper functions."""

from __future__ import absolute_import, annotations

import logging
import os
import platform
import re
import urllib.parse
from typing import BinaryIO, Callable, Iterable, Mapping, Optional

from . import __title__, __version__
from .datatypes import BulkObject, BulkObjectList

_LOGGER = logging.getLogger(__name__)

_DEFAULT_USER_AGENT = (
    f"DS3 ({platform.system()}; {platform.machine()}) "
    f"{__title__}/{__version__}"
)

_AWS_SIGNATURE_REGEX = re.compile(r"^AWS ([^:]+):.*$")

ReadSink = Callable[[bytes], object]
WriteSink = Callable[[int], bytes]


def quote(
        resource: str,
        safe: str = "/",
        encoding: str | None = None,
        errors: str | None = None,
) -> str:
    """
    Wrapper to urllib.parse.quote() keeping '~' unescaped.
    """
    return urllib.parse.quote(
        resource,
        safe=safe,
        encoding=encoding,
        errors=errors,
    ).replace("%7E", "~")


def gen_query_params(query_params: Optional[Mapping[str, str]]) -> str:
    """
    Build query string 'key1=value1&key2=value2' in mapping iteration order.
    Returns empty string for empty mapping.
    """
    if not query_params:
        return ""
    return "&".join(f"{key}={value}" for key, value in query_params.items())


def build_url(
        endpoint: str,
        path: str,
        query_params: Optional[Mapping[str, str]] = None,
) -> str:
    """Build request URL; '?' is appended only if there is a query string."""
    query = gen_query_params(query_params)
    url = endpoint.rstrip("/") + path
    return f"{url}?{query}" if query else url


def headers_to_strings(headers: Mapping[str, str], redact: bool = False) -> str:
    """Convert HTTP headers to multi-line string."""
    values = []
    for key, value in headers.items():
        if redact and key.lower() == "authorization":
            value = _AWS_SIGNATURE_REGEX.sub(r"AWS \1:*REDACTED*", value)
        values.append(f"{key}: {value}")
    return "\n".join(values)


def check_non_empty_string(string: str | bytes):
    """Check whether given string is not empty."""
    try:
        if not string.strip():
            raise ValueError()
    except AttributeError as exc:
        raise TypeError() from exc


def check_bucket_name(bucket_name: str):
    """Check whether bucket name is usable in a request path."""
    try:
        check_non_empty_string(bucket_name)
    except (TypeError, ValueError) as exc:
        raise ValueError("bucket name must not be empty") from exc
    if "/" in bucket_name:
        raise ValueError(f"bucket name {bucket_name} must not contain '/'")


def check_object_name(object_name: str):
    """Check whether object name is not empty."""
    try:
        check_non_empty_string(object_name)
    except (TypeError, ValueError) as exc:
        raise ValueError("object name must not be empty") from exc


def _bulk_object_from_file(file_name: str) -> BulkObject:
    """Create bulk object of given file with its size."""
    try:
        size = os.stat(file_name).st_size
    except OSError as exc:
        _LOGGER.error("Failed to get file info for %s: %s", file_name, exc)
        size = 0
    return BulkObject(name=file_name, size=size)


def convert_file_list(file_list: Iterable[str]) -> BulkObjectList:
    """
    Convert file paths to bulk object list sized by each file on disk.
    A path which cannot be stat'ed is kept with size 0.
    """
    return BulkObjectList(
        [_bulk_object_from_file(file_name) for file_name in file_list],
    )


def write_to_file(fileobj: BinaryIO) -> ReadSink:
    """Get read sink writing response body to given binary file object."""
    return fileobj.write


def read_from_file(fileobj: BinaryIO) -> WriteSink:
    """Get write sink reading request body from given binary file object."""
    return fileobj.read
