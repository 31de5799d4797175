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

"""
s3wire.error
~~~~~~~~~~~~~~~~~~~

This module provides error results of S3 responses, their extraction from
raw HTTP responses and the exception classes raised by the client.

:copyright: (c) 2025 by The s3wire Authors.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

from dataclasses import dataclass
from typing import Mapping, NoReturn, Optional, Union

from urllib3._collections import HTTPHeaderDict

from .xml import findtext, fromstring, localname

# Codes of errors caused by the server side rather than by the request.
RETRYABLE_CODES = frozenset([
    "InternalError",
    "RequestThrottled",
    "RequestTimeTooSkewed",
    "RequestTimeout",
    "ServiceUnavailable",
    "SlowDown",
    "Throttling",
    "ThrottlingException",
])

_BODYLESS_CODES = {
    304: "NotModified",
    403: "Forbidden",
    404: "NotFound",
}


class S3WireException(Exception):
    """Base s3wire exception."""


class InvalidResponseError(S3WireException):
    """Raised to indicate that non-xml response from server."""

    def __init__(
            self, code: int, content_type: Optional[str], body: Optional[str],
    ):
        self._code = code
        self._content_type = content_type
        self._body = body
        super().__init__(
            f"non-XML response from server; Response code: {code}, "
            f"Content-Type: {content_type}, Body: {body}"
        )

    def __reduce__(self):
        return type(self), (self._code, self._content_type, self._body)


def is_retryable(code: Union[str, int]) -> bool:
    """Check whether error code denotes a transient server side failure."""
    if isinstance(code, int):
        return code >= 500 or code == 429
    return code in RETRYABLE_CODES


@dataclass(frozen=True)
class ErrorResult:
    """Error outcome of an S3 response."""
    code: Union[str, int]
    message: Optional[str]
    status_code: int
    request_id: Optional[str] = None
    host_id: Optional[str] = None
    retryable: bool = False

    @property
    def is_error(self) -> bool:
        """Always True for error outcome."""
        return True

    def result(self) -> NoReturn:
        """Raise this error as S3Error."""
        raise S3Error(self)


class S3Error(S3WireException):
    """
    Raised to indicate that error response is received
    when executing S3 operation.
    """
    error: ErrorResult

    _EXC_MUTABLES = {"__traceback__", "__context__", "__cause__"}

    def __init__(self, error: ErrorResult):
        object.__setattr__(self, "error", error)
        super().__init__(
            f"S3 operation failed; code: {error.code}, "
            f"message: {error.message}, status_code: {error.status_code}, "
            f"request_id: {error.request_id}, host_id: {error.host_id}"
        )

        # freeze after init
        object.__setattr__(self, "_is_frozen", True)

    def __setattr__(self, name, value):
        if name in self._EXC_MUTABLES:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_is_frozen", False):
            raise AttributeError(
                f"{self.__class__.__name__} is frozen and "
                "does not allow attribute assignment"
            )
        object.__setattr__(self, name, value)

    def __reduce__(self):
        return type(self), (self.error,)

    @property
    def code(self) -> Union[str, int]:
        """Get error code."""
        return self.error.code

    @property
    def message(self) -> Optional[str]:
        """Get error message."""
        return self.error.message

    @property
    def status_code(self) -> int:
        """Get HTTP status code."""
        return self.error.status_code

    @property
    def request_id(self) -> Optional[str]:
        """Get request ID."""
        return self.error.request_id

    @property
    def host_id(self) -> Optional[str]:
        """Get host ID."""
        return self.error.host_id

    @property
    def retryable(self) -> bool:
        """Check whether failed request may be retried."""
        return self.error.retryable

    def __repr__(self):
        return f"S3Error({self.error!r})"


def error_from_status(
        status_code: int,
        headers: Optional[Mapping[str, str]] = None,
) -> ErrorResult:
    """Make error of a response without error document."""
    headers = HTTPHeaderDict(headers or {})
    code = _BODYLESS_CODES.get(status_code, status_code)
    return ErrorResult(
        code=code,
        message=None,
        status_code=status_code,
        request_id=headers.get("x-amz-request-id"),
        host_id=headers.get("x-amz-id-2"),
        retryable=is_retryable(code),
    )


def extract_error(
        status_code: int,
        headers: Optional[Mapping[str, str]],
        body: Optional[Union[bytes, str]],
) -> Optional[ErrorResult]:
    """
    Extract error from raw HTTP response.

    An empty body is classified by status code alone. A non-empty body is an
    error only if it is an <Error> document, whatever the status code is; a
    200 response may carry one. Any other body is not an error here.
    """
    if not body or not body.strip():
        if 200 <= status_code < 300:
            return None
        return error_from_status(status_code, headers)

    headers = HTTPHeaderDict(headers or {})
    request_id = headers.get("x-amz-request-id")
    host_id = headers.get("x-amz-id-2")

    element = fromstring(body)
    if element is None or localname(element) != "Error":
        return None

    code = (
        findtext(element, "Code") or
        _BODYLESS_CODES.get(status_code, status_code)
    )
    return ErrorResult(
        code=code,
        message=findtext(element, "Message"),
        status_code=status_code,
        request_id=findtext(element, "RequestId") or request_id,
        host_id=findtext(element, "HostId") or host_id,
        retryable=is_retryable(code) or is_retryable(status_code),
    )
