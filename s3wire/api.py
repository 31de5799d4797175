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

"""
Simple Storage Service (aka S3) client executing operations over HTTP.
"""

from __future__ import absolute_import, annotations

import os
from datetime import timedelta
from typing import Any, Optional, TextIO, Union

import certifi
import urllib3
from urllib3 import Retry
from urllib3._collections import HTTPHeaderDict

try:
    from urllib3.response import BaseHTTPResponse  # type: ignore[attr-defined]
except ImportError:
    from urllib3.response import HTTPResponse as BaseHTTPResponse

from urllib3.util import Timeout

from .config import ClientConfig
from .datatypes import ResponseOutcome, parse_http_response
from .error import ErrorResult, InvalidResponseError
from .helpers import (_DEFAULT_USER_AGENT, DEFAULT_REGION,
                      check_non_empty_string, headers_to_strings, md5sum_hash)
from .operations import XML, Operation, get_operation
from .request import RequestShape, build_operation_request
from .xml import Element, SubElement, fromstring, getbytes


class Client:
    """
    Simple Storage Service (aka S3) client addressing buckets and objects
    and normalizing responses into success or error outcomes.
    """
    _config: ClientConfig
    _user_agent: str
    _trace_stream: Optional[TextIO]
    _http: urllib3.PoolManager

    def __init__(
            self,
            config: Optional[ClientConfig] = None,
            http_client: Optional[urllib3.PoolManager] = None,
            cert_check: bool = True,
    ):
        """
        Initializes a new client object.

        Args:
            config (Optional[ClientConfig], default=None):
                Client configuration; `ClientConfig()` if not given.

            http_client (Optional[urllib3.PoolManager], default=None):
                Customized HTTP client.

            cert_check (bool, default=True):
                Flag to enable/disable server certificate validation
                for HTTPS connections.

        Example:
            >>> from s3wire import Client, ClientConfig
            >>>
            >>> # Create client for us-east-1
            >>> client = Client()
            >>>
            >>> # Create client with path-style addressing over plain HTTP
            >>> client = Client(
            ...     ClientConfig(
            ...         region="eu-west-1",
            ...         ssl_enabled=False,
            ...         force_path_style=True,
            ...     ),
            ... )
        """
        # Validate http client has correct base class.
        if http_client and not isinstance(http_client, urllib3.PoolManager):
            raise TypeError(
                "HTTP client should be urllib3.PoolManager like object, "
                f"got {type(http_client).__name__}",
            )

        self._config = config or ClientConfig()
        self._user_agent = _DEFAULT_USER_AGENT
        self._trace_stream = None

        # Load CA certificates from SSL_CERT_FILE file if set
        timeout = timedelta(minutes=5).seconds
        self._http = http_client or urllib3.PoolManager(
            timeout=Timeout(connect=timeout, read=timeout),
            maxsize=10,
            cert_reqs='CERT_REQUIRED' if cert_check else 'CERT_NONE',
            ca_certs=os.environ.get('SSL_CERT_FILE') or certifi.where(),
            retries=Retry(total=5, backoff_factor=0.2),
        )

    def __del__(self):
        if hasattr(self, "_http"):  # Only required for unit test run
            self._http.clear()

    @property
    def config(self) -> ClientConfig:
        """Get client configuration."""
        return self._config

    def set_app_info(self, app_name: str, app_version: str):
        """
        Set your application name and version to user agent header.

        Example:
            >>> client.set_app_info("my_app", "1.0.2")
        """
        if not (app_name and app_version):
            raise ValueError("Application name/version cannot be empty.")
        self._user_agent = f"{_DEFAULT_USER_AGENT} {app_name}/{app_version}"

    def trace_on(self, stream: TextIO):
        """
        Enable http trace.

        Args:
            stream (TextIO):
                Stream for writing HTTP call tracing.

        Example:
            >>> client.trace_on(sys.stdout)
        """
        if not stream:
            raise ValueError('Input stream for trace output is invalid.')
        # Save new output stream.
        self._trace_stream = stream

    def trace_off(self):
        """Disable HTTP trace."""
        self._trace_stream = None

    def _trace(self, *lines: str):
        if self._trace_stream:
            for line in lines:
                self._trace_stream.write(line)
                self._trace_stream.write("\n")

    def _url_open(self, request: RequestShape) -> BaseHTTPResponse:
        """Execute HTTP request."""
        headers = HTTPHeaderDict(request.headers)
        headers["Host"] = request.hostname
        headers["User-Agent"] = self._user_agent
        if request.method in ["PUT", "POST"]:
            headers["Content-Length"] = str(len(request.body or b""))
            if not headers.get("Content-Type"):
                headers["Content-Type"] = "application/octet-stream"

        self._trace(
            "---------START-HTTP---------",
            f"{request.method} {request.path} HTTP/1.1",
            headers_to_strings(headers, titled_key=True),
        )

        response = self._http.urlopen(
            request.method,
            request.url(self._config.scheme),
            body=request.body,
            headers=headers,
            preload_content=True,
            redirect=False,
        )

        self._trace(
            "",
            f"HTTP/1.1 {response.status}",
            headers_to_strings(response.headers),
        )
        if response.status not in [200, 204, 206] and response.data:
            self._trace("", response.data.decode(errors="replace"))
        self._trace("----------END-HTTP----------")
        return response

    def execute(
            self,
            operation: Union[str, Operation],
            **params: Any,
    ) -> ResponseOutcome:
        """
        Execute an S3 operation.

        Args:
            operation (Union[str, Operation]):
                Name of a registered operation, e.g. "GetObject".

            **params:
                Operation parameters, e.g. Bucket, Key, VersionId.

        Returns:
            ResponseOutcome: SuccessResult or ErrorResult.

        Example:
            >>> outcome = client.execute(
            ...     "ListObjects", Bucket="my-bucket", MaxKeys=10,
            ... )
            >>> for item in outcome.result()["Contents"]:
            ...     print(item["Key"])
        """
        operation = get_operation(operation)
        request = build_operation_request(self._config, operation, params)
        response = self._url_open(request)

        body = response.data
        if (
                200 <= response.status < 300 and
                not operation.payload and
                body and body.strip() and
                any(member.location == XML for member in operation.output) and
                fromstring(body) is None
        ):
            raise InvalidResponseError(
                response.status,
                response.headers.get("content-type"),
                body.decode(errors="replace"),
            )

        return parse_http_response(operation, response)

    def make_bucket(
            self,
            bucket_name: str,
            location: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Create a bucket.

        Example:
            >>> client.make_bucket("my-bucket", "eu-west-1")
        """
        check_non_empty_string(bucket_name)
        location = location or self._config.region or DEFAULT_REGION
        params: dict[str, Any] = {"Bucket": bucket_name}
        if location != DEFAULT_REGION:
            element = Element("CreateBucketConfiguration")
            SubElement(element, "LocationConstraint", location)
            body = getbytes(element)
            params.update(
                Body=body,
                ContentType="application/xml",
                ContentMD5=md5sum_hash(body),
            )
        return self.execute("CreateBucket", **params).result()

    def list_buckets(self) -> list[dict[str, Any]]:
        """List information of all accessible buckets."""
        return self.execute("ListBuckets").result()["Buckets"]

    def bucket_exists(self, bucket_name: str) -> bool:
        """
        Check if a bucket exists.

        Example:
            >>> if client.bucket_exists("my-bucket"):
            ...     print("my-bucket exists")
        """
        check_non_empty_string(bucket_name)
        outcome = self.execute("HeadBucket", Bucket=bucket_name)
        if (
                isinstance(outcome, ErrorResult) and
                outcome.code in ["NotFound", "NoSuchBucket"]
        ):
            return False
        outcome.result()
        return True

    def get_bucket_location(self, bucket_name: str) -> str:
        """Get region of a bucket."""
        check_non_empty_string(bucket_name)
        data = self.execute("GetBucketLocation", Bucket=bucket_name).result()
        location = data.get("LocationConstraint")
        if not location:
            return DEFAULT_REGION
        if location == "EU":
            return "eu-west-1"
        return location

    def get_object(
            self,
            bucket_name: str,
            object_name: str,
            version_id: Optional[str] = None,
    ) -> bytes:
        """
        Get data of an object.

        Example:
            >>> data = client.get_object("my-bucket", "my-object")
        """
        check_non_empty_string(bucket_name)
        check_non_empty_string(object_name)
        data = self.execute(
            "GetObject",
            Bucket=bucket_name,
            Key=object_name,
            VersionId=version_id,
        ).result()
        return data["Body"]

    def put_object(
            self,
            bucket_name: str,
            object_name: str,
            data: bytes,
            content_type: str = "application/octet-stream",
    ) -> dict[str, Any]:
        """
        Upload data to an object in a bucket.

        Example:
            >>> result = client.put_object("my-bucket", "my-object", b"hello")
            >>> print(result["ETag"])
        """
        check_non_empty_string(bucket_name)
        check_non_empty_string(object_name)
        if not isinstance(data, bytes):
            raise TypeError("data must be bytes type")
        return self.execute(
            "PutObject",
            Bucket=bucket_name,
            Key=object_name,
            Body=data,
            ContentType=content_type,
            ContentMD5=md5sum_hash(data),
        ).result()

    def complete_multipart_upload(
            self,
            bucket_name: str,
            object_name: str,
            upload_id: str,
            parts: list[tuple[int, str]],
    ) -> dict[str, Any]:
        """
        Complete a multipart upload from (part number, etag) pairs.

        A 200 response of this operation may still carry an error document,
        which is raised as S3Error.
        """
        check_non_empty_string(bucket_name)
        check_non_empty_string(object_name)
        check_non_empty_string(upload_id)
        element = Element("CompleteMultipartUpload")
        for part_number, etag in parts:
            tag = SubElement(element, "Part")
            SubElement(tag, "PartNumber", str(part_number))
            SubElement(tag, "ETag", '"' + etag.strip('"') + '"')
        body = getbytes(element)
        return self.execute(
            "CompleteMultipartUpload",
            Bucket=bucket_name,
            Key=object_name,
            UploadId=upload_id,
            Body=body,
            ContentType="application/xml",
            ContentMD5=md5sum_hash(body),
        ).result()
