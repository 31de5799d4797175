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

# pylint: disable=too-many-arguments

"""Request addressing: hostname, path and query string of S3 requests."""

from __future__ import absolute_import, annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from urllib3._collections import HTTPHeaderDict

from .config import ClientConfig
from .helpers import is_dns_compatible, queryencode, quote
from .operations import Operation, get_operation
from .time import format_http_date


@dataclass(frozen=True)
class RequestShape:
    """Outgoing request handed to the transport."""
    method: str
    hostname: str
    path: str
    query_params: dict[str, str] = field(default_factory=dict)
    headers: HTTPHeaderDict = field(default_factory=HTTPHeaderDict)
    body: Optional[bytes] = None
    bucket_name: Optional[str] = None
    object_name: Optional[str] = None

    def url(self, scheme: str = "https") -> str:
        """Get absolute URL of this request."""
        return f"{scheme}://{self.hostname}{self.path}"


def use_path_style(
        bucket_name: str,
        ssl_enabled: bool,
        force_path_style: bool,
) -> bool:
    """Check whether bucket must be addressed in path instead of hostname."""
    if force_path_style:
        return True

    if not is_dns_compatible(bucket_name):
        return True

    # Dotted bucket hostname does not match wildcard TLS certificate.
    return "." in bucket_name and ssl_enabled


def _encode_query(query_params: Mapping[str, Optional[str]]) -> dict[str, str]:
    """Percent-encode query values; None marks a bare subresource key."""
    return {
        key: "" if value is None else queryencode(value)
        for key, value in sorted(query_params.items())
    }


def _query_string(query_params: Mapping[str, Optional[str]]) -> str:
    return "&".join(
        queryencode(key) if value is None
        else f"{queryencode(key)}={queryencode(value)}"
        for key, value in sorted(query_params.items())
    )


def build_request(
        base_hostname: str,
        ssl_enabled: bool,
        force_path_style: bool,
        bucket_name: Optional[str] = None,
        object_name: Optional[str] = None,
        query_params: Optional[Mapping[str, Optional[str]]] = None,
        method: str = "GET",
        headers: Optional[HTTPHeaderDict] = None,
        body: Optional[bytes] = None,
) -> RequestShape:
    """
    Build request shape for given bucket, object and query parameters.

    Query parameters are expected with their wire names; a value of None
    renders the key alone, as used by subresources like `?location`.
    """
    if not bucket_name and object_name:
        raise ValueError(
            f"empty bucket name for object name {object_name}",
        )

    hostname = base_hostname
    segments = []
    if bucket_name:
        if use_path_style(bucket_name, ssl_enabled, force_path_style):
            segments.append(quote(bucket_name, safe=""))
        else:
            hostname = f"{bucket_name}.{base_hostname}"
    if object_name:
        segments.append(quote(object_name))

    path = "/" + "/".join(segments)
    query_params = query_params or {}
    query = _query_string(query_params)
    if query:
        path += "?" + query

    return RequestShape(
        method=method,
        hostname=hostname,
        path=path,
        query_params=_encode_query(query_params),
        headers=HTTPHeaderDict(headers or {}),
        body=body,
        bucket_name=bucket_name,
        object_name=object_name,
    )


def _header_value(value: Any) -> str:
    if isinstance(value, datetime):
        return format_http_date(value)
    return str(value)


def build_operation_request(
        config: ClientConfig,
        operation: str | Operation,
        params: Mapping[str, Any],
) -> RequestShape:
    """Build request shape of an operation call."""
    operation = get_operation(operation)
    params = dict(params)

    bucket_name = params.pop("Bucket", None)
    object_name = params.pop("Key", None)
    body = params.pop("Body", None)

    if bucket_name is not None and not isinstance(bucket_name, str):
        raise TypeError("bucket name must be str type")
    if object_name is not None and not isinstance(object_name, str):
        raise TypeError("object name must be str type")
    if operation.bucket_required and not bucket_name:
        raise ValueError(f"Bucket is required for {operation.name}")
    if operation.key_required and not object_name:
        raise ValueError(f"Key is required for {operation.name}")
    if not operation.bucket_required and bucket_name:
        raise ValueError(f"Bucket is not supported by {operation.name}")
    if not operation.key_required and object_name:
        raise ValueError(f"Key is not supported by {operation.name}")
    if body is not None:
        if not operation.accepts_body:
            raise ValueError(f"Body is not supported by {operation.name}")
        if isinstance(body, str):
            body = body.encode()

    query_params: dict[str, Optional[str]] = {}
    if operation.subresource:
        query_params[operation.subresource] = None
    headers = HTTPHeaderDict()
    for name, value in params.items():
        if value is None:
            continue
        query_name = operation.wire_query_name(name)
        header_name = operation.wire_header_name(name)
        if query_name:
            query_params[query_name] = str(value)
        elif header_name:
            headers[header_name] = _header_value(value)
        else:
            raise ValueError(
                f"unknown parameter {name} for {operation.name}",
            )

    return build_request(
        config.hostname,
        config.ssl_enabled,
        config.force_path_style,
        bucket_name=bucket_name,
        object_name=object_name,
        query_params=query_params,
        method=operation.method,
        headers=headers,
        body=body,
    )
