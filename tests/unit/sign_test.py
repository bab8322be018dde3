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

import base64
import hashlib
import hmac
from datetime import datetime, timezone
from unittest import TestCase

from ds3.credentials import Credentials
from ds3.signer import (canonicalize_amz_headers, get_authorization,
                        get_string_to_sign, sign, sign_request)
from ds3.time import to_http_header

DATE = "Tue, 27 Mar 2007 19:36:42 GMT"
SECRET_KEY = "wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY"


def _expected_signature(secret_key, string_to_sign):
    digest = hmac.new(
        secret_key.encode(), string_to_sign.encode(), hashlib.sha1,
    ).digest()
    return base64.b64encode(digest).decode()


class StringToSignTest(TestCase):
    def test_empty_content_type_and_md5(self):
        self.assertEqual(
            "GET\n\n\n" + DATE + "\n/",
            get_string_to_sign("GET", "/", DATE),
        )

    def test_all_fields(self):
        self.assertEqual(
            "PUT\nmd5\ntext/plain\n" + DATE + "\nx-amz-meta-a:b\n/bucket",
            get_string_to_sign(
                "PUT", "/bucket", DATE, "text/plain", "md5",
                "x-amz-meta-a:b\n",
            ),
        )

    def test_missing_resource_path(self):
        with self.assertRaises(ValueError):
            get_string_to_sign("GET", None, DATE)

    def test_missing_date(self):
        with self.assertRaises(ValueError):
            get_string_to_sign("GET", "/", None)
        with self.assertRaises(ValueError):
            sign(SECRET_KEY, "GET", "/", "")


class SignTest(TestCase):
    def test_signature_is_hmac_sha1(self):
        self.assertEqual(
            _expected_signature(SECRET_KEY, "GET\n\n\n" + DATE + "\n/bucket"),
            sign(SECRET_KEY, "GET", "/bucket", DATE),
        )

    def test_bytes_secret_key(self):
        self.assertEqual(
            sign(SECRET_KEY, "GET", "/bucket", DATE),
            sign(SECRET_KEY.encode(), "GET", "/bucket", DATE),
        )

    def test_deterministic(self):
        self.assertEqual(
            sign(SECRET_KEY, "PUT", "/bucket", DATE),
            sign(SECRET_KEY, "PUT", "/bucket", DATE),
        )

    def test_each_input_changes_signature(self):
        signature = sign(SECRET_KEY, "PUT", "/bucket", DATE)
        self.assertNotEqual(signature, sign("other", "PUT", "/bucket", DATE))
        self.assertNotEqual(signature, sign(SECRET_KEY, "GET", "/bucket", DATE))
        self.assertNotEqual(signature, sign(SECRET_KEY, "PUT", "/other", DATE))
        self.assertNotEqual(
            signature,
            sign(SECRET_KEY, "PUT", "/bucket", "Wed, 28 Mar 2007 19:36:42 GMT"),
        )

    def test_authorization(self):
        self.assertEqual("AWS access:c2ln", get_authorization("access", "c2ln"))


class CanonicalAmzHeadersTest(TestCase):
    def test_no_amz_headers(self):
        self.assertEqual("", canonicalize_amz_headers({"Date": DATE}))
        self.assertEqual("", canonicalize_amz_headers(None))

    def test_amz_headers_sorted_and_lowered(self):
        self.assertEqual(
            "x-amz-a:1\nx-amz-meta-b:x y\n",
            canonicalize_amz_headers({
                "X-Amz-Meta-B": "x   y",
                "Content-Type": "text/plain",
                "x-amz-a": "1",
            }),
        )


class SignRequestTest(TestCase):
    def test_date_and_authorization_headers(self):
        date = datetime(2007, 3, 27, 19, 36, 42, 0, timezone.utc)
        headers = sign_request(
            "GET", "/bucket", {}, Credentials("access", SECRET_KEY), date,
        )
        self.assertEqual(DATE, headers["Date"])
        self.assertEqual(
            "AWS access:" + _expected_signature(
                SECRET_KEY, "GET\n\n\n" + DATE + "\n/bucket",
            ),
            headers["Authorization"],
        )
        self.assertNotIn("Content-MD5", headers)
        self.assertNotIn("Content-Type", headers)


class TimeTest(TestCase):
    def test_http_header_date(self):
        self.assertEqual(
            DATE,
            to_http_header(datetime(2007, 3, 27, 19, 36, 42, 0, timezone.utc)),
        )
