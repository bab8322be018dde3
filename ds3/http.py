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
Process-wide transport state and response header parsing for DS3
requests.
"""

from __future__ import absolute_import, annotations

import os
import ssl
import threading
from typing import Iterator, Optional

import certifi
import urllib3
from urllib3.util.ssl_ import create_urllib3_context

try:
    from urllib3.response import BaseHTTPResponse  # type: ignore[attr-defined]
except ImportError:
    from urllib3.response import HTTPResponse as BaseHTTPResponse

_STATUS_LINE_PREFIX = "HTTP/1.1"

_EXPECT_STATUS = 0
_COLLECT_HEADERS = 1
_DONE = 2

_TRANSPORT_LOCK = threading.Lock()
_SSL_CONTEXT: Optional[ssl.SSLContext] = None


def _init_transport() -> ssl.SSLContext:
    """
    Initialize process-wide TLS context once; CA certificates are loaded
    from SSL_CERT_FILE file if set, else from certifi bundle.
    """
    global _SSL_CONTEXT  # pylint: disable=global-statement
    with _TRANSPORT_LOCK:
        if _SSL_CONTEXT is None:
            context = create_urllib3_context()
            context.load_verify_locations(
                cafile=os.environ.get("SSL_CERT_FILE") or certifi.where(),
            )
            _SSL_CONTEXT = context
        return _SSL_CONTEXT


def cleanup():
    """
    Release process-wide transport state. Next request initializes it
    again.
    """
    global _SSL_CONTEXT  # pylint: disable=global-statement
    with _TRANSPORT_LOCK:
        _SSL_CONTEXT = None


def new_handle(
        proxy: Optional[str] = None,
        cert_check: bool = True,
) -> urllib3.PoolManager:
    """Create HTTP handle owned by a single request."""
    kwargs: dict = {"num_pools": 1, "maxsize": 1}
    if cert_check:
        kwargs["ssl_context"] = _init_transport()
    else:
        kwargs["cert_reqs"] = "CERT_NONE"
    if proxy:
        return urllib3.ProxyManager(proxy, **kwargs)
    return urllib3.PoolManager(**kwargs)


class ResponseHeaderParser:
    """
    Line oriented parser of a response header block. The first line must be
    'HTTP/1.1' status line; '100 Continue' status lines are skipped. Each
    following 'key: value' line is collected until a blank line ends the
    block.
    """

    def __init__(self):
        self._state = _EXPECT_STATUS
        self._status_code: Optional[int] = None
        self._status_message: Optional[str] = None
        self._headers: dict[str, str] = {}

    @property
    def status_code(self) -> Optional[int]:
        """Get HTTP status code."""
        return self._status_code

    @property
    def status_message(self) -> Optional[str]:
        """Get HTTP status message."""
        return self._status_message

    @property
    def headers(self) -> dict[str, str]:
        """Get collected headers."""
        return self._headers

    @property
    def done(self) -> bool:
        """Check whether terminating blank line is received."""
        return self._state == _DONE

    def _parse_status_line(self, line: str):
        """Parse status line like 'HTTP/1.1 200 OK'."""
        if not line.startswith(_STATUS_LINE_PREFIX):
            raise ValueError(f"Unsupported protocol in status line '{line}'")

        tokens = line.split(" ")
        try:
            status_code = int(tokens[1], 10)
        except (IndexError, ValueError) as exc:
            raise ValueError(
                f"Encountered a problem parsing the status code of '{line}'",
            ) from exc
        if status_code <= 0:
            raise ValueError(f"Invalid status code in status line '{line}'")

        if status_code == 100:
            return

        self._status_code = status_code
        self._status_message = " ".join(tokens[2:])
        self._state = _COLLECT_HEADERS

    def feed(self, line: bytes | str) -> int:
        """
        Process one raw header line and return number of bytes accepted.
        Raises ValueError on protocol violation.
        """
        size = len(line)
        if self._state == _DONE:
            return size

        text = line.decode("iso-8859-1") if isinstance(line, bytes) else line
        text = text.rstrip("\r\n")

        if not text.strip():
            if self._state == _COLLECT_HEADERS:
                self._state = _DONE
            return size

        if self._state == _EXPECT_STATUS:
            self._parse_status_line(text)
        else:
            key, _, value = text.partition(": ")
            self._headers[key] = value
        return size


def header_lines(response: BaseHTTPResponse) -> Iterator[str]:
    """Yield raw header block lines of given response in arrival order."""
    version = getattr(response, "version", 11) or 11
    reason = getattr(response, "reason", None) or ""
    yield (
        f"HTTP/{version // 10}.{version % 10} {response.status} {reason}"
        .rstrip() + "\r\n"
    )
    for key, value in response.headers.items():
        yield f"{key}: {value}\r\n"
    yield "\r\n"
