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

"""Credential definitions to access DS3 service."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    """
    Represents credentials access key and secret key.
    """

    access_key: str
    secret_key: str

    def __post_init__(self):
        if not self.access_key:
            raise ValueError("Access key must not be empty")

        if not self.secret_key:
            raise ValueError("Secret key must not be empty")

    def __repr__(self):
        return f"Credentials(access_key={self.access_key!r})"


def from_env() -> Credentials:
    """Create credentials from DS3 environment variables."""
    return Credentials(
        access_key=os.environ.get("DS3_ACCESS_KEY") or "",
        secret_key=os.environ.get("DS3_SECRET_KEY") or "",
    )
