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
from ds3.datatypes import BulkObjectList
from ds3.request import init_get_bulk

client = Client.from_env()

objects = BulkObjectList()
objects.append("my-object1")
objects.append("my-object2")

job = client.bulk(init_get_bulk("my-bucket", objects))
for chunk in job.chunks:
    print(job.job_id, chunk.chunk_number, [obj.name for obj in chunk])
