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

from ds3 import Client
from ds3.request import init_get_bucket

client = Client(
    "http://ds3.example.com:8080",
    access_key="YOUR-ACCESSKEYID",
    secret_key="YOUR-SECRETACCESSKEY",
)

response = client.get_bucket(init_get_bucket("my-bucket"))
for obj in response.objects:
    print(obj.name, obj.size, obj.last_modified, obj.etag)
if response.is_truncated:
    print(f"more objects after {response.next_marker}")
