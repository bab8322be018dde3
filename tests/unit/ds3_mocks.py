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

from http import client as httplib

from urllib3._collections import HTTPHeaderDict


class MockResponse:
    def __init__(self, method, url, headers, status_code,
                 response_headers=None, content=None, version=11):
        self.method = method
        self.url = url
        self.request_headers = headers
        self.status = status_code
        self.reason = httplib.responses.get(status_code, "")
        self.version = version
        self.headers = HTTPHeaderDict(response_headers or {})
        self.data = content or b""
        self.released = False

    def mock_verify(self, method, url, headers):
        assert self.method == method, f"{self.method} != {method}"
        assert self.url == url, f"{self.url} != {url}"
        for header in self.request_headers:
            assert self.request_headers[header] == headers.get(header), header

    # noinspection PyUnusedLocal
    def stream(self, amt=65536, decode_content=None):
        for index in range(0, len(self.data), amt):
            yield self.data[index:index + amt]

    def get_redirect_location(self):
        if self.status in (301, 302, 303, 307, 308):
            return self.headers.get("Location")
        return False

    def release_conn(self):
        self.released = True


class MockConnection:
    def __init__(self):
        self.requests = []
        self.bodies = []
        self.headers = []
        self.retries = []
        self.redirects = []
        self.cleared = False

    def mock_add_request(self, request):
        self.requests.append(request)

    # noinspection PyUnusedLocal
    def urlopen(self, method, url, body=None, headers=None,
                preload_content=True, redirect=True, retries=None):
        response = self.requests.pop(0)
        response.mock_verify(method, url, headers or {})
        if body is not None and not isinstance(body, bytes):
            body = b"".join(body)
        self.bodies.append(body)
        self.headers.append(dict(headers or {}))
        self.retries.append(retries)
        self.redirects.append(redirect)
        return response

    def clear(self):
        self.cleared = True
