# -*- coding: utf-8 -*-
# s3wire, request addressing and response handling for Amazon S3
# compatible storage, (C) 2025 The s3wire Authors.
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

"""Client configuration."""

from __future__ import absolute_import, annotations

import os
from dataclasses import dataclass
from typing import Optional, Type, TypeVar

from .helpers import DEFAULT_REGION, check_region, resolve_hostname

A = TypeVar("A", bound="ClientConfig")

_TRUE_VALUES = ["1", "true", "yes", "on"]
_FALSE_VALUES = ["0", "false", "no", "off"]


def _env_flag(name: str, default: bool) -> bool:
    """Read boolean flag from environment variable."""
    value = os.environ.get(name)
    if not value:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value {value} in {name}")


@dataclass(frozen=True)
class ClientConfig:
    """
    Client configuration shared read-only by all requests of a client.

    Args:
        region (str, default="us-east-1"):
            Region of the S3 service.

        ssl_enabled (bool, default=True):
            Flag to indicate whether to use a secure (TLS) connection.

        force_path_style (bool, default=False):
            Flag to always address buckets as the first path segment.

        endpoint (Optional[str], default=None):
            Hostname overriding the one resolved from region.
    """
    region: str = DEFAULT_REGION
    ssl_enabled: bool = True
    force_path_style: bool = False
    endpoint: Optional[str] = None

    def __post_init__(self):
        check_region(self.region)
        if self.endpoint is not None and not self.endpoint.strip():
            raise ValueError("endpoint must not be empty")

    @property
    def hostname(self) -> str:
        """Get base hostname of the S3 service."""
        return self.endpoint or resolve_hostname(self.region)

    @property
    def scheme(self) -> str:
        """Get URL scheme."""
        return "https" if self.ssl_enabled else "http"

    @classmethod
    def from_env(cls: Type[A]) -> A:
        """Create configuration from environment variables."""
        region = (
            os.environ.get("AWS_REGION") or
            os.environ.get("AWS_DEFAULT_REGION") or
            DEFAULT_REGION
        )
        return cls(
            region=region,
            ssl_enabled=_env_flag("S3_USE_SSL", True),
            force_path_style=_env_flag("S3_FORCE_PATH_STYLE", False),
            endpoint=os.environ.get("S3_ENDPOINT") or None,
        )
