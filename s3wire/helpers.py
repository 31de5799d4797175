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

"""Helper functions."""

from __future__ import absolute_import, annotations

import base64
import hashlib
import platform
import re
import urllib.parse
from typing import Mapping, Optional

from . import __title__, __version__

_DEFAULT_USER_AGENT = (
    f"s3wire ({platform.system()}; {platform.machine()}) "
    f"{__title__}/{__version__}"
)

DEFAULT_REGION = "us-east-1"

_DNS_BUCKET_NAME_REGEX = re.compile(r"[a-z0-9][a-z0-9\.\-]{1,61}[a-z0-9]")
_IPV4_SHAPE_REGEX = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+")
_REGION_REGEX = re.compile(r'^((?!_)(?!-)[a-z_\d-]{1,63}(?<!-)(?<!_))$',
                           re.IGNORECASE)


def quote(
        resource: str,
        safe: str = "/",
        encoding: Optional[str] = None,
        errors: Optional[str] = None,
) -> str:
    """
    Wrapper to urllib.parse.quote() replacing back to '~' for older python
    versions.
    """
    return urllib.parse.quote(
        resource,
        safe=safe,
        encoding=encoding,
        errors=errors,
    ).replace("%7E", "~")


def queryencode(
        query: str,
        safe: str = "",
        encoding: Optional[str] = None,
        errors: Optional[str] = None,
) -> str:
    """Encode query parameter value."""
    return quote(query, safe, encoding, errors)


def headers_to_strings(
        headers: Mapping[str, str | list[str] | tuple[str]],
        titled_key: bool = False,
) -> str:
    """Convert HTTP headers to multi-line string."""
    values = []
    for key, value in headers.items():
        key = key.title() if titled_key else key
        for item in value if isinstance(value, (list, tuple)) else [value]:
            values.append(f"{key}: {item}")
    return "\n".join(values)


def is_dns_compatible(bucket_name: str) -> bool:
    """
    Check whether bucket name can be used as hostname labels, i.e. for
    virtual-hosted style addressing.

    :param bucket_name: Name of the bucket.
    :return: True if every DNS naming rule holds, False otherwise.
    """
    if not isinstance(bucket_name, str):
        return False

    if not _DNS_BUCKET_NAME_REGEX.fullmatch(bucket_name):
        return False

    if ".." in bucket_name:
        return False

    return not _IPV4_SHAPE_REGEX.fullmatch(bucket_name)


def resolve_hostname(region: Optional[str]) -> str:
    """Get Amazon S3 hostname for given region."""
    if not region or region == DEFAULT_REGION:
        return "s3.amazonaws.com"
    return f"s3-{region}.amazonaws.com"


def check_region(region: Optional[str]):
    """Check whether region is usable in a hostname."""
    if region is None:
        return
    if not isinstance(region, str):
        raise TypeError("region must be str type")
    if not _REGION_REGEX.match(region):
        raise ValueError(f"invalid region {region}")


def check_non_empty_string(string: str | bytes):
    """Check whether given string is not empty."""
    try:
        if not string.strip():
            raise ValueError()
    except AttributeError as exc:
        raise TypeError() from exc


def md5sum_hash(data: str | bytes | None) -> str | None:
    """Compute MD5 of data and return hash as Base64 encoded value."""
    if data is None:
        return None

    # indicate md5 hashing algorithm is not used in a security context.
    hasher = hashlib.new(  # type: ignore[call-arg]
        "md5",
        usedforsecurity=False,
    )
    hasher.update(data.encode() if isinstance(data, str) else data)
    return base64.b64encode(hasher.digest()).decode()
