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

import os

from ds3 import Client
from ds3.helpers import read_from_file, write_to_file
from ds3.request import init_get_object, init_put_object

client = Client(
    "http://ds3.example.com:8080",
    access_key="YOUR-ACCESSKEYID",
    secret_key="YOUR-SECRETACCESSKEY",
)

# Upload a file.
size = os.stat("my-testfile").st_size
with open("my-testfile", "rb") as file_data:
    client.put_object(
        init_put_object("my-bucket", "my-object", size),
        read_from_file(file_data),
    )

# Download it back.
with open("my-testfile.copy", "wb") as file_data:
    client.get_object(
        init_get_object("my-bucket", "my-object"),
        write_to_file(file_data),
    )
