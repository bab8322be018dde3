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
ds3.signer
~~~~~~~~~~~~~~~

This module implements the HMAC-SHA1 request signature used by DS3
'Authorization: AWS <access-key>:<signature>' header.

:copyright: (c) 2014 by Spectra Logic Corporation.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import base64
import hashlib
import hmac
import re
from datetime import datetime
from typing import Mapping, MutableMapping, Optional

from . import time
from .credentials import Credentials

_MULTI_SPACE_REGEX = re.compile(r"( +)")
_AMZ_HEADER_PREFIX = "x-amz-"


def _hmac_hash(key: bytes, data: bytes) -> bytes:
    """Return HMacSHA1 digest of given key and data."""
    return hmac.new(key, data, hashlib.sha1).digest()


def canonicalize_amz_headers(headers: Optional[Mapping[str, str]]) -> str:
    """
    Get canonicalized 'x-amz-*' headers; each header is lower-cased and
    emitted as 'name:value\\n' in sorted order.
    """
    amz_headers: dict[str, list[str]] = {}
    for key, value in (headers or {}).items():
        key = key.lower()
        if key.startswith(_AMZ_HEADER_PREFIX):
            amz_headers.setdefault(key, []).append(
                _MULTI_SPACE_REGEX.sub(" ", value.strip()),
            )
    return "".join(
        f"{key}:{','.join(values)}\n"
        for key, values in sorted(amz_headers.items())
    )


def get_string_to_sign(
        verb: str,
        resource_path: Optional[str],
        date: Optional[str],
        content_type: str = "",
        content_md5: str = "",
        canonicalized_amz_headers: str = "",
) -> str:
    """Get string-to-sign."""
    if not resource_path:
        raise ValueError("resource path is required")
    if not date:
        raise ValueError("date is required")

    # StringToSign =
    #   HTTP-Verb + '\n' +
    #   Content-MD5 + '\n' +
    #   Content-Type + '\n' +
    #   Date + '\n' +
    #   CanonicalizedAmzHeaders +
    #   CanonicalizedResource
    return (
        f"{verb}\n"
        f"{content_md5}\n"
        f"{content_type}\n"
        f"{date}\n"
        f"{canonicalized_amz_headers}{resource_path}"
    )


def sign(
        secret_key: str | bytes,
        verb: str,
        resource_path: Optional[str],
        date: Optional[str],
        content_type: str = "",
        content_md5: str = "",
        canonicalized_amz_headers: str = "",
) -> str:
    """Compute base64 encoded HMAC-SHA1 signature of the request."""
    string_to_sign = get_string_to_sign(
        verb,
        resource_path,
        date,
        content_type,
        content_md5,
        canonicalized_amz_headers,
    )
    key = secret_key.encode() if isinstance(secret_key, str) else secret_key
    digest = _hmac_hash(key, string_to_sign.encode("utf-8"))
    return base64.b64encode(digest).decode()


def get_authorization(access_key: str, signature: str) -> str:
    """Get authorization header value."""
    return f"AWS {access_key}:{signature}"


def sign_request(
        method: str,
        path: str,
        headers: MutableMapping[str, str],
        credentials: Credentials,
        date: datetime,
) -> MutableMapping[str, str]:
    """
    Add 'Date' and 'Authorization' headers of given request. Content-Type
    and Content-MD5 are always signed as empty values.
    """
    headers["Date"] = time.to_http_header(date)
    signature = sign(
        credentials.secret_key,
        method,
        path,
        headers["Date"],
        canonicalized_amz_headers=canonicalize_amz_headers(headers),
    )
    headers["Authorization"] = get_authorization(
        credentials.access_key, signature,
    )
    return headers
