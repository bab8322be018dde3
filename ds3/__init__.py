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
ds3 - Python client for the DS3 bulk object storage API

    >>> from ds3 import Client
    >>> from ds3.request import init_get_service
    >>> client = Client(
    ...     "http://ds3.example.com:8080",
    ...     access_key="YOUR-ACCESSKEYID",
    ...     secret_key="YOUR-SECRETACCESSKEY",
    ... )
    >>> response = client.get_service(init_get_service())
    >>> for bucket in response.buckets:
    ...     print(bucket.name, bucket.creation_date)

:copyright: (C) 2014 Spectra Logic Corporation.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "ds3-py"
__author__ = "Spectra Logic Corporation"
__version__ = "0.1.0"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2014 Spectra Logic Corporation"

# pylint: disable=unused-import,useless-import-alias
from .api import Client as Client
from .credentials import Credentials as Credentials
from .error import Ds3Error as Ds3Error
from .error import ErrorCode as ErrorCode
from .http import cleanup as cleanup
