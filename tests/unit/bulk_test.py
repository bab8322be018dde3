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

from unittest import TestCase, mock
from xml.etree import ElementTree as ET

from ds3 import Client
from ds3.datatypes import BulkObjectList
from ds3.error import Ds3Error, ErrorCode
from ds3.request import Request, init_get_bulk, init_put_bulk

from .ds3_mocks import MockConnection, MockResponse

ENDPOINT = "http://localhost:8080"


def _client():
    return Client(ENDPOINT, access_key="access", secret_key="secret")


class BulkTest(TestCase):
    @mock.patch("urllib3.PoolManager")
    def test_put_bulk(self, mock_connection):
        mock_data = (
            b'<MasterObjectList JobId="J1">'
            b'<Objects ChunkNumber="1" ServerId="s1">'
            b'<Object Name="a" Size="10"/></Objects>'
            b'<Objects ChunkNumber="2" ServerId="s1">'
            b'<Object Name="b" Size="20"/></Objects>'
            b'</MasterObjectList>'
        )
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "PUT",
                ENDPOINT + "/_rest_/bucket/bucket?operation=start_bulk_put",
                {},
                200,
                content=mock_data,
            ),
        )
        objects = BulkObjectList()
        objects.append("a", 10)
        objects.append("b", 20)
        request = init_put_bulk("bucket", objects)

        response = _client().bulk(request)

        self.assertEqual("J1", response.job_id)
        self.assertEqual([1, 2], [c.chunk_number for c in response.chunks])
        self.assertEqual([10], [o.size for o in response.chunks[0]])
        self.assertEqual([20], [o.size for o in response.chunks[1]])

        body = mock_server.bodies[0]
        self.assertIsInstance(body, bytes)
        self.assertTrue(mock_server.redirects[0])
        self.assertEqual(len(body), request.length)
        self.assertEqual(str(len(body)), mock_server.headers[0]["Content-Length"])
        root = ET.fromstring(body)
        self.assertEqual(
            [("a", "10"), ("b", "20")],
            [(o.get("Name"), o.get("Size")) for o in root.iter("Object")],
        )
        # request object list is left untouched
        self.assertEqual(2, len(objects))
        self.assertIsNone(objects.chunk_number)

    @mock.patch("urllib3.PoolManager")
    def test_get_bulk_invalid_response(self, mock_connection):
        mock_data = b"<Error><Code>NoSuchBucket</Code></Error>"
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "PUT",
                ENDPOINT + "/_rest_/bucket/bucket?operation=start_bulk_get",
                {},
                404,
                content=mock_data,
            ),
        )
        objects = BulkObjectList()
        objects.append("a")
        with self.assertRaises(Ds3Error) as context:
            _client().bulk(init_get_bulk("bucket", objects))
        self.assertEqual(ErrorCode.INVALID_XML, context.exception.code)
        self.assertEqual(mock_data.decode(), context.exception.body)

    def test_missing_object_list(self):
        for request in [
                Request("PUT", "/_rest_/bucket/bucket"),
                init_put_bulk("bucket", BulkObjectList()),
        ]:
            with self.assertRaises(Ds3Error) as context:
                _client().bulk(request)
            self.assertEqual(ErrorCode.MISSING_ARGS, context.exception.code)

    def test_missing_request(self):
        with self.assertRaises(Ds3Error) as context:
            _client().bulk(None)
        self.assertEqual(ErrorCode.MISSING_ARGS, context.exception.code)
