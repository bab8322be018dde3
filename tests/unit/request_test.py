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

from unittest import TestCase

from ds3.datatypes import BulkObjectList
from ds3.request import (Request, init_delete_bucket, init_delete_object,
                         init_get_bucket, init_get_bulk, init_get_object,
                         init_get_service, init_put_bucket, init_put_bulk,
                         init_put_object)


class RequestTest(TestCase):
    def test_request_fields(self):
        request = Request(
            "get", "/bucket", {"prefix": "a"}, {"x-amz-meta-a": "b"}, 10,
        )
        self.assertEqual("GET", request.verb)
        self.assertEqual("/bucket", request.path)
        self.assertEqual({"prefix": "a"}, request.query_params)
        self.assertEqual({"x-amz-meta-a": "b"}, request.headers)
        self.assertEqual(10, request.length)
        self.assertIsNone(request.object_list)
        self.assertEqual("Verb: GET\nPath: /bucket", str(request))

    def test_invalid_request(self):
        with self.assertRaises(ValueError):
            Request("PATCH", "/")
        with self.assertRaises(ValueError):
            Request("GET", "bucket")
        with self.assertRaises(ValueError):
            Request("PUT", "/bucket", length=-1)

    def test_service_and_bucket_requests(self):
        for request, verb, path in [
                (init_get_service(), "GET", "/"),
                (init_get_bucket("b"), "GET", "/b"),
                (init_put_bucket("b"), "PUT", "/b"),
                (init_delete_bucket("b"), "DELETE", "/b"),
        ]:
            self.assertEqual(verb, request.verb)
            self.assertEqual(path, request.path)
            self.assertEqual({}, request.query_params)

    def test_object_requests(self):
        self.assertEqual("/b/dir/my%20file", init_get_object("b", "dir/my file").path)
        self.assertEqual("DELETE", init_delete_object("b", "o").verb)
        request = init_put_object("b", "o", 42)
        self.assertEqual("PUT", request.verb)
        self.assertEqual("/b/o", request.path)
        self.assertEqual(42, request.length)

    def test_bulk_requests(self):
        objects = BulkObjectList()
        objects.append("a", 1)
        request = init_get_bulk("b", objects)
        self.assertEqual("PUT", request.verb)
        self.assertEqual("/_rest_/bucket/b", request.path)
        self.assertEqual({"operation": "start_bulk_get"}, request.query_params)
        self.assertIs(objects, request.object_list)
        self.assertEqual(
            {"operation": "start_bulk_put"},
            init_put_bulk("b", objects).query_params,
        )

    def test_invalid_names(self):
        with self.assertRaises(ValueError):
            init_get_bucket("")
        with self.assertRaises(ValueError):
            init_put_bucket("a/b")
        with self.assertRaises(ValueError):
            init_get_object("b", "")
