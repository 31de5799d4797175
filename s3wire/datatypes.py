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
Response outcomes and mapping of S3 responses to output fields.
"""

from __future__ import absolute_import, annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union
from xml.etree import ElementTree as ET

from typing_extensions import Protocol
from urllib3._collections import HTTPHeaderDict

from .error import ErrorResult, error_from_status, extract_error
from .operations import (BOOLEAN, HEADER, INTEGER, MISSING, STRING,
                         TIMESTAMP, Member, Operation, get_operation)
from .time import parse_timestamp
from .xml import findall, fromstring


@dataclass(frozen=True)
class SuccessResult:
    """Success outcome of an S3 response."""
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        """Always False for success outcome."""
        return False

    def result(self) -> dict[str, Any]:
        """Get output fields."""
        return self.data


ResponseOutcome = Union[SuccessResult, ErrorResult]


class RawResponse(Protocol):  # pylint: disable=too-few-public-methods
    """typing stub for raw HTTP response received from transport."""
    status: int
    headers: Mapping[str, str]
    data: bytes


def _convert(member: Member, text: str) -> Any:
    """Convert text to member type; unparsable text is kept as is."""
    text = text.strip() if member.type != STRING else text
    try:
        if member.type == INTEGER:
            return int(text)
        if member.type == BOOLEAN:
            return text.lower() == "true"
        if member.type == TIMESTAMP:
            return parse_timestamp(text)
    except ValueError:
        return text
    return text


def _set_default(data: dict[str, Any], member: Member):
    if member.default is not MISSING:
        data[member.name] = copy.copy(member.default)


def _structure(element: ET.Element, members: tuple[Member, ...]) -> dict:
    data: dict[str, Any] = {}
    for member in members:
        _map_xml_member(data, element, member)
    return data


def _map_xml_member(
        data: dict[str, Any],
        element: Optional[ET.Element],
        member: Member,
):
    """Map XML elements of member found under element into data."""
    if element is None:
        found = []
    elif member.source == ".":
        found = [element]
    else:
        found = findall(element, member.source)

    if not found:
        _set_default(data, member)
        return

    if member.flattened:
        data[member.name] = [
            _structure(elem, member.members) if member.members
            else _convert(member, elem.text or "")
            for elem in found
        ]
        return

    elem = found[0]
    if member.members:
        data[member.name] = _structure(elem, member.members)
        return

    text = elem.text or ""
    if member.omit_empty and not text.strip():
        _set_default(data, member)
        return
    data[member.name] = _convert(member, text)


def map_response(
        operation: Union[str, Operation],
        headers: Optional[Mapping[str, str]],
        body: Optional[Union[bytes, str]],
) -> dict[str, Any]:
    """
    Map successful response of operation to output fields.

    Absent optional fields are omitted. The x-amz-request-id header is
    always merged in as RequestId.
    """
    operation = get_operation(operation)
    headers = HTTPHeaderDict(headers or {})

    element = None
    if not operation.payload and body:
        element = fromstring(body)

    data: dict[str, Any] = {}
    for member in operation.output:
        if member.location == HEADER:
            value = headers.get(member.source)
            if value is None:
                _set_default(data, member)
            else:
                data[member.name] = _convert(member, value)
        else:
            _map_xml_member(data, element, member)

    if operation.payload:
        data["Body"] = body if body is not None else b""

    request_id = headers.get("x-amz-request-id")
    if request_id is not None:
        data["RequestId"] = request_id
    return data


def parse_response(
        operation: Union[str, Operation],
        status_code: int,
        headers: Optional[Mapping[str, str]],
        body: Optional[Union[bytes, str]],
) -> ResponseOutcome:
    """
    Normalize raw HTTP response of operation into success or error outcome.

    The body of a successful payload response is object data and is never
    inspected for an error document.
    """
    operation = get_operation(operation)
    successful = 200 <= status_code < 300

    if not (operation.payload and successful):
        error = extract_error(status_code, headers, body)
        if error is not None:
            return error

    if not successful:
        return error_from_status(status_code, headers)

    return SuccessResult(map_response(operation, headers, body))


def parse_http_response(
        operation: Union[str, Operation],
        response: RawResponse,
) -> ResponseOutcome:
    """Normalize response object of transport, e.g. urllib3 response."""
    return parse_response(
        operation, response.status, response.headers, response.data,
    )
