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
ds3.error
~~~~~~~~~~~~~~~~~~~

This module provides the exception classes raised by the DS3 library.

:copyright: (c) 2014 by Spectra Logic Corporation.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Kind of failure carried by :class:`Ds3Error`."""

    MISSING_ARGS = "MISSING_ARGS"
    CURL_HANDLE = "CURL_HANDLE"
    FAILED_REQUEST = "FAILED_REQUEST"
    INVALID_XML = "INVALID_XML"


class Ds3Exception(Exception):
    """Base DS3 exception."""


class Ds3Error(Ds3Exception):
    """
    Raised to indicate that a DS3 operation failed. `code` tells what kind
    of failure happened; `body` holds the raw response text for
    `ErrorCode.INVALID_XML` failures.
    """

    def __init__(
            self,
            code: ErrorCode,
            message: str,
            body: Optional[str] = None,
    ):
        self._code = code
        self._message = message
        self._body = body
        super().__init__(message)

    @property
    def code(self) -> ErrorCode:
        """Get error kind."""
        return self._code

    @property
    def message(self) -> str:
        """Get human readable message."""
        return self._message

    @property
    def body(self) -> Optional[str]:
        """Get raw response body if any."""
        return self._body

    def __reduce__(self):
        return type(self), (self._code, self._message, self._body)

    def __repr__(self):
        return f"Ds3Error(code={self._code.name}, message={self._message!r})"

    def __str__(self):
        return f"{self._code.name}: {self._message}"


def missing_args(message: str) -> Ds3Error:
    """Create MISSING_ARGS error."""
    return Ds3Error(ErrorCode.MISSING_ARGS, message)


def invalid_xml(message: str, body: str) -> Ds3Error:
    """Create INVALID_XML error with raw body appended to the message."""
    return Ds3Error(
        ErrorCode.INVALID_XML,
        f"{message}.  The actual response is: {body}",
        body,
    )
