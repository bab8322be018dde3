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

# pylint: disable=too-many-arguments,too-many-positional-arguments

"""
ds3.api
~~~~~~~~~~~~

This module implements the DS3 client: request signing and dispatch, and
the typed operations built on top of it.

:copyright: (c) 2014 by Spectra Logic Corporation.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import logging
import os
from typing import Iterator, Optional, TextIO
from urllib.parse import urlsplit

import urllib3
from urllib3 import Retry
from urllib3.exceptions import HTTPError

from . import time
from .credentials import Credentials
from .credentials import from_env as credentials_from_env
from .datatypes import BulkResponse, ListAllMyBucketsResult, ListBucketResult
from .error import Ds3Error, ErrorCode, missing_args
from .helpers import (_DEFAULT_USER_AGENT, ReadSink, WriteSink, build_url,
                      check_non_empty_string, headers_to_strings)
from .http import ResponseHeaderParser, header_lines, new_handle
from .request import Request
from .signer import sign_request
from .xml import marshal, unmarshal

_LOGGER = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024
DEFAULT_MAX_REDIRECTS = 5


def _iter_body(write_sink: WriteSink, length: int) -> Iterator[bytes]:
    """Yield exactly `length` bytes read from write sink."""
    remaining = length
    while remaining > 0:
        data = write_sink(min(_CHUNK_SIZE, remaining))
        if not data:
            raise ValueError(
                f"write sink supplied {length - remaining} bytes; "
                f"expected {length} bytes",
            )
        if len(data) > remaining:
            data = data[:remaining]
        remaining -= len(data)
        yield data


class Client:
    """
    DS3 client holding endpoint, credentials and transport policy. The client
    carries no per-request state, so one client may be shared by threads
    dispatching their own requests.
    """
    _endpoint: str
    _credentials: Credentials
    _proxy: Optional[str]
    _max_redirects: int
    _cert_check: bool
    _user_agent: str
    _trace_stream: Optional[TextIO]

    def __init__(
            self,
            endpoint: str,
            access_key: Optional[str] = None,
            secret_key: Optional[str] = None,
            credentials: Optional[Credentials] = None,
            proxy: Optional[str] = None,
            max_redirects: int = DEFAULT_MAX_REDIRECTS,
            cert_check: bool = True,
    ):
        """
        Initializes a new DS3 client object.

        Args:
            endpoint (str):
                URL of DS3 service including scheme,
                e.g. 'http://ds3.example.com:8080'.

            access_key (Optional[str], default=None):
                Access key (aka access id) of your account.

            secret_key (Optional[str], default=None):
                Secret key of your account.

            credentials (Optional[Credentials], default=None):
                Credentials of your account; used when access key is not
                given.

            proxy (Optional[str], default=None):
                URL of HTTP proxy to send requests through.

            max_redirects (int, default=5):
                Maximum number of redirects to follow per request.

            cert_check (bool, default=True):
                Flag to enable/disable server certificate validation
                for HTTPS connections.

        Example:
            >>> from ds3 import Client
            >>> client = Client(
            ...     "http://ds3.example.com:8080",
            ...     access_key="ACCESS-KEY",
            ...     secret_key="SECRET-KEY",
            ... )
        """
        check_non_empty_string(endpoint)
        url = urlsplit(endpoint)
        if url.scheme not in ("http", "https") or not url.netloc:
            raise ValueError(
                f"endpoint {endpoint} must be 'http://' or 'https://' URL",
            )
        if max_redirects < 0:
            raise ValueError("max redirects must not be negative")

        if access_key:
            if secret_key is None:
                raise ValueError("secret key must be provided with access key")
            credentials = Credentials(access_key, secret_key)
        if credentials is None:
            raise ValueError("credentials must be provided")

        self._endpoint = endpoint.rstrip("/")
        self._credentials = credentials
        self._proxy = proxy
        self._max_redirects = max_redirects
        self._cert_check = cert_check
        self._user_agent = _DEFAULT_USER_AGENT
        self._trace_stream = None

    @classmethod
    def from_env(cls) -> Client:
        """
        Create client from DS3_ENDPOINT, DS3_ACCESS_KEY, DS3_SECRET_KEY and
        optional http_proxy environment variables.
        """
        endpoint = os.environ.get("DS3_ENDPOINT")
        if not endpoint:
            raise ValueError("DS3_ENDPOINT environment variable is not set")
        return cls(
            endpoint,
            credentials=credentials_from_env(),
            proxy=os.environ.get("http_proxy") or None,
        )

    @property
    def endpoint(self) -> str:
        """Get endpoint URL."""
        return self._endpoint

    @property
    def credentials(self) -> Credentials:
        """Get credentials."""
        return self._credentials

    @property
    def proxy(self) -> Optional[str]:
        """Get proxy URL."""
        return self._proxy

    @proxy.setter
    def proxy(self, proxy: Optional[str]):
        """Set proxy URL."""
        self._proxy = proxy

    @property
    def max_redirects(self) -> int:
        """Get maximum number of redirects to follow."""
        return self._max_redirects

    def trace_on(self, stream: TextIO):
        """
        Enable http trace.

        :param stream: Stream for writing HTTP call tracing.
        """
        if not stream:
            raise ValueError('Input stream for trace output is invalid.')
        # Save new output stream.
        self._trace_stream = stream

    def trace_off(self):
        """Disable HTTP trace."""
        self._trace_stream = None

    def _retries(self) -> Retry:
        """Follow redirects only; never retry a failed request."""
        return Retry(
            total=None,
            connect=0,
            read=0,
            status=0,
            other=0,
            redirect=self._max_redirects,
            raise_on_redirect=True,
            raise_on_status=False,
        )

    def _trace_request(self, method: str, url: str, headers: dict[str, str]):
        if not self._trace_stream:
            return
        self._trace_stream.write("---------START-HTTP---------\n")
        split = urlsplit(url)
        query = ("?" + split.query) if split.query else ""
        self._trace_stream.write(f"{method} {split.path}{query} HTTP/1.1\n")
        self._trace_stream.write(headers_to_strings(headers, redact=True))
        self._trace_stream.write("\n\n")

    def _trace_response(self, parser: ResponseHeaderParser):
        if not self._trace_stream:
            return
        self._trace_stream.write(
            f"HTTP/1.1 {parser.status_code} {parser.status_message}\n",
        )
        self._trace_stream.write(headers_to_strings(parser.headers))
        self._trace_stream.write("\n----------END-HTTP----------\n")

    def dispatch(
            self,
            request: Request,
            read_sink: Optional[ReadSink] = None,
            write_sink: Optional[WriteSink] = None,
    ):
        """
        Sign and send given request and wait for the exchange to complete.

        Response body is passed chunk by chunk to `read_sink`. For PUT and
        POST requests, `request.length` bytes of body are read from
        `write_sink`. Response status is not checked; only transport
        failures raise.

        Args:
            request (Request):
                Request to send.

            read_sink (Optional[Callable[[bytes], object]], default=None):
                Callable receiving response body bytes, e.g.
                `fileobj.write`.

            write_sink (Optional[Callable[[int], bytes]], default=None):
                Callable returning up to given number of request body
                bytes, e.g. `fileobj.read`.

        Raises:
            Ds3Error: `MISSING_ARGS` if request is not given,
                `CURL_HANDLE` if HTTP handle cannot be created,
                `FAILED_REQUEST` on transport failure or when a request
                body read from `write_sink` is redirected.
        """
        if request is None:
            raise missing_args(
                "All arguments must be filled in for request processing",
            )

        body = None
        if request.verb in ("PUT", "POST") and write_sink is not None:
            body = _iter_body(write_sink, request.length)
        self._send(request, read_sink, body)

    def _send(
            self,
            request: Request,
            read_sink: Optional[ReadSink],
            body: Optional[bytes | Iterator[bytes]],
    ):
        """Sign request and run one exchange with given body."""
        url = build_url(self._endpoint, request.path, request.query_params)
        headers = dict(request.headers)
        headers["User-Agent"] = self._user_agent

        if request.verb in ("PUT", "POST"):
            headers["Content-Length"] = (
                "0" if body is None else str(request.length)
            )
        else:
            body = None

        # Date and signature are computed at send time on every dispatch.
        sign_request(
            request.verb,
            request.path,
            headers,
            self._credentials,
            time.utcnow(),
        )

        self._trace_request(request.verb, url, headers)
        _LOGGER.debug("Dispatching %s %s", request.verb, url)

        try:
            handle = new_handle(self._proxy, self._cert_check)
        except (OSError, ValueError, HTTPError) as exc:
            raise Ds3Error(
                ErrorCode.CURL_HANDLE, f"Failed to create HTTP handle: {exc}",
            ) from exc

        try:
            self._perform(handle, request.verb, url, headers, body, read_sink)
        finally:
            handle.clear()

    def _perform(
            self,
            handle: urllib3.PoolManager,
            method: str,
            url: str,
            headers: dict[str, str],
            body: Optional[bytes | Iterator[bytes]],
            read_sink: Optional[ReadSink],
    ):
        """Execute HTTP exchange on given handle."""
        # Streamed body cannot be rewound, so its redirects are not followed.
        replayable = body is None or isinstance(body, bytes)
        try:
            response = handle.urlopen(
                method,
                url,
                body=body,
                headers=headers,
                preload_content=False,
                redirect=replayable,
                retries=self._retries(),
            )
        except HTTPError as exc:
            raise Ds3Error(
                ErrorCode.FAILED_REQUEST, f"Request failed: {exc}",
            ) from exc

        try:
            parser = ResponseHeaderParser()
            try:
                for line in header_lines(response):
                    parser.feed(line)
            except ValueError as exc:
                raise Ds3Error(
                    ErrorCode.FAILED_REQUEST, f"Request failed: {exc}",
                ) from exc
            if not parser.done:
                raise Ds3Error(
                    ErrorCode.FAILED_REQUEST,
                    "Request failed: incomplete response header block",
                )
            self._trace_response(parser)
            _LOGGER.debug(
                "Response status: %s %s",
                parser.status_code, parser.status_message,
            )

            location = None if replayable else response.get_redirect_location()
            if location:
                raise Ds3Error(
                    ErrorCode.FAILED_REQUEST,
                    "Request failed: cannot resend request body to "
                    f"redirect location {location}",
                )

            try:
                for chunk in response.stream(_CHUNK_SIZE):
                    if read_sink is not None and chunk:
                        read_sink(chunk)
            except HTTPError as exc:
                raise Ds3Error(
                    ErrorCode.FAILED_REQUEST, f"Request failed: {exc}",
                ) from exc
        finally:
            response.release_conn()

    def _dispatch_xml(
            self,
            request: Request,
            data: Optional[bytes] = None,
    ) -> bytes:
        """Dispatch request and return whole response body."""
        if request is None:
            raise missing_args(
                "All arguments must be filled in for request processing",
            )
        body = bytearray()
        self._send(request, body.extend, data)
        return bytes(body)

    def get_service(self, request: Request) -> ListAllMyBucketsResult:
        """
        List all buckets of the account.

        Raises:
            Ds3Error: `INVALID_XML` if response is not
                'ListAllMyBucketsResult' document.

        Example:
            >>> response = client.get_service(init_get_service())
            >>> for bucket in response.buckets:
            ...     print(bucket.name, bucket.creation_date)
        """
        return unmarshal(ListAllMyBucketsResult, self._dispatch_xml(request))

    def get_bucket(self, request: Request) -> ListBucketResult:
        """
        List objects of a bucket.

        Raises:
            Ds3Error: `INVALID_XML` if response is not 'ListBucketResult'
                document.

        Example:
            >>> response = client.get_bucket(init_get_bucket("my-bucket"))
            >>> for obj in response.objects:
            ...     print(obj.name, obj.size)
        """
        return unmarshal(ListBucketResult, self._dispatch_xml(request))

    def get_object(self, request: Request, read_sink: ReadSink):
        """
        Download object data to read sink.

        Example:
            >>> with open("my-file", "wb") as file_data:
            ...     client.get_object(
            ...         init_get_object("my-bucket", "my-object"),
            ...         file_data.write,
            ...     )
        """
        self.dispatch(request, read_sink=read_sink)

    def put_object(self, request: Request, write_sink: WriteSink):
        """
        Upload `request.length` bytes of object data from write sink.

        Example:
            >>> size = os.stat("my-file").st_size
            >>> with open("my-file", "rb") as file_data:
            ...     client.put_object(
            ...         init_put_object("my-bucket", "my-object", size),
            ...         file_data.read,
            ...     )
        """
        self.dispatch(request, write_sink=write_sink)

    def delete_object(self, request: Request):
        """Remove an object."""
        self.dispatch(request)

    def put_bucket(self, request: Request):
        """Create a bucket."""
        self.dispatch(request)

    def delete_bucket(self, request: Request):
        """Remove a bucket."""
        self.dispatch(request)

    def bulk(self, request: Request) -> BulkResponse:
        """
        Start bulk get or put job of the request's object list and return
        the job with chunks in the order assigned by the server.

        Raises:
            Ds3Error: `MISSING_ARGS` if request or its object list is not
                given, `INVALID_XML` if response is not 'MasterObjectList'
                document with a job id.

        Example:
            >>> objects = BulkObjectList()
            >>> objects.append("my-object", 1024)
            >>> job = client.bulk(init_put_bulk("my-bucket", objects))
            >>> for chunk in job.chunks:
            ...     print(chunk.chunk_number, [obj.name for obj in chunk])
        """
        if request is None:
            raise missing_args(
                "All arguments must be filled in for request processing",
            )
        if not request.object_list:
            raise missing_args(
                "The bulk command requires a list of objects to process",
            )

        data = marshal(request.object_list)
        request.length = len(data)
        return unmarshal(BulkResponse, self._dispatch_xml(request, data))
