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
import sys

from ds3 import Client
from ds3.helpers import convert_file_list, read_from_file
from ds3.request import init_put_bulk, init_put_object

client = Client.from_env()

# Start a bulk put job of files given on the command line.
job = client.bulk(init_put_bulk("my-bucket", convert_file_list(sys.argv[1:])))
print(f"job {job.job_id} has {len(job.chunks)} chunks")

# Send objects chunk by chunk in the order the server assigned.
for chunk in job.chunks:
    print(f"chunk {chunk.chunk_number} on server {chunk.server_id}")
    for obj in chunk:
        with open(obj.name, "rb") as file_data:
            client.put_object(
                init_put_object("my-bucket", obj.name, os.stat(obj.name).st_size),
                read_from_file(file_data),
            )
