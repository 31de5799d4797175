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
Registry of S3 operations.

Each operation is described by an :class:`Operation` which tells how call
parameters land on the wire (query string casing, request headers, body)
and which :class:`Member` fields are read back from the response.
"""

from __future__ import absolute_import, annotations

from dataclasses import dataclass, field
from typing import Any, Optional

STRING = "string"
INTEGER = "integer"
BOOLEAN = "boolean"
TIMESTAMP = "timestamp"

XML = "xml"
HEADER = "header"

_TYPES = [STRING, INTEGER, BOOLEAN, TIMESTAMP]


class _Missing:  # pylint: disable=too-few-public-methods
    """Marker of member without default value."""

    def __repr__(self):
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Member:
    """
    Output field read from response.

    `source` is an element path relative to the document root for XML
    members, "." meaning the root itself, or a header name for header
    members. A member with `members` set is a structure; combined with
    `flattened` it is a list of structures, one per matching element.
    """
    name: str
    source: str
    location: str = XML
    type: str = STRING
    default: Any = MISSING
    omit_empty: bool = False
    flattened: bool = False
    members: tuple[Member, ...] = ()

    def __post_init__(self):
        if self.type not in _TYPES:
            raise ValueError(f"unknown member type {self.type}")
        if self.location not in [XML, HEADER]:
            raise ValueError(f"unknown member location {self.location}")
        if self.location == HEADER and self.members:
            raise ValueError(
                f"header member {self.name} must not have nested members",
            )


@dataclass(frozen=True)
class Operation:
    """Description of an S3 operation."""
    name: str
    method: str
    bucket_required: bool = True
    key_required: bool = False
    subresource: Optional[str] = None
    query: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    accepts_body: bool = False
    payload: bool = False
    output: tuple[Member, ...] = ()

    def wire_query_name(self, name: str) -> Optional[str]:
        """Get query parameter name on the wire for given parameter."""
        return self.query.get(name)

    def wire_header_name(self, name: str) -> Optional[str]:
        """Get request header name for given parameter."""
        return self.headers.get(name)


_OBJECT_HEADERS = (
    Member("ETag", "ETag", HEADER),
    Member("ContentLength", "Content-Length", HEADER, INTEGER),
    Member("ContentType", "Content-Type", HEADER),
    Member("LastModified", "Last-Modified", HEADER, TIMESTAMP),
    Member("VersionId", "x-amz-version-id", HEADER),
    Member("DeleteMarker", "x-amz-delete-marker", HEADER, BOOLEAN),
)

_READ_HEADERS = {
    "IfMatch": "If-Match",
    "IfNoneMatch": "If-None-Match",
    "IfModifiedSince": "If-Modified-Since",
    "IfUnmodifiedSince": "If-Unmodified-Since",
}

_OWNER = Member(
    "Owner", "Owner",
    members=(
        Member("ID", "ID"),
        Member("DisplayName", "DisplayName"),
    ),
)


def _ops(*operations: Operation) -> dict[str, Operation]:
    return {operation.name: operation for operation in operations}


OPERATIONS = _ops(
    Operation(
        "ListBuckets", "GET",
        bucket_required=False,
        output=(
            Member(
                "Buckets", "Buckets/Bucket", flattened=True, default=[],
                members=(
                    Member("Name", "Name"),
                    Member("CreationDate", "CreationDate", type=TIMESTAMP),
                ),
            ),
            _OWNER,
        ),
    ),
    Operation(
        "CreateBucket", "PUT",
        headers={
            "ACL": "x-amz-acl",
            "ContentMD5": "Content-MD5",
            "ContentType": "Content-Type",
        },
        accepts_body=True,
        output=(Member("Location", "Location", HEADER),),
    ),
    Operation("DeleteBucket", "DELETE"),
    Operation("HeadBucket", "HEAD"),
    Operation(
        "GetBucketLocation", "GET",
        subresource="location",
        output=(Member("LocationConstraint", ".", omit_empty=True),),
    ),
    Operation(
        "ListObjects", "GET",
        query={
            "Delimiter": "delimiter",
            "EncodingType": "encoding-type",
            "Marker": "marker",
            "MaxKeys": "max-keys",
            "Prefix": "prefix",
        },
        output=(
            Member("Name", "Name"),
            Member("Prefix", "Prefix"),
            Member("Marker", "Marker"),
            Member("NextMarker", "NextMarker"),
            Member("Delimiter", "Delimiter"),
            Member("MaxKeys", "MaxKeys", type=INTEGER),
            Member("IsTruncated", "IsTruncated", type=BOOLEAN, default=False),
            Member(
                "Contents", "Contents", flattened=True, default=[],
                members=(
                    Member("Key", "Key"),
                    Member("LastModified", "LastModified", type=TIMESTAMP),
                    Member("ETag", "ETag"),
                    Member("Size", "Size", type=INTEGER),
                    Member("StorageClass", "StorageClass"),
                    _OWNER,
                ),
            ),
            Member(
                "CommonPrefixes", "CommonPrefixes", flattened=True,
                members=(Member("Prefix", "Prefix"),),
            ),
        ),
    ),
    Operation(
        "GetObject", "GET",
        key_required=True,
        query={"VersionId": "versionId", "PartNumber": "partNumber"},
        headers={"Range": "Range", **_READ_HEADERS},
        payload=True,
        output=_OBJECT_HEADERS + (
            Member("ContentRange", "Content-Range", HEADER),
        ),
    ),
    Operation(
        "HeadObject", "HEAD",
        key_required=True,
        query={"VersionId": "versionId", "PartNumber": "partNumber"},
        headers=_READ_HEADERS,
        output=_OBJECT_HEADERS,
    ),
    Operation(
        "PutObject", "PUT",
        key_required=True,
        headers={
            "ACL": "x-amz-acl",
            "CacheControl": "Cache-Control",
            "ContentDisposition": "Content-Disposition",
            "ContentEncoding": "Content-Encoding",
            "ContentMD5": "Content-MD5",
            "ContentType": "Content-Type",
            "StorageClass": "x-amz-storage-class",
        },
        accepts_body=True,
        output=(
            Member("ETag", "ETag", HEADER),
            Member("VersionId", "x-amz-version-id", HEADER),
        ),
    ),
    Operation(
        "DeleteObject", "DELETE",
        key_required=True,
        query={"VersionId": "versionId"},
        output=(
            Member("VersionId", "x-amz-version-id", HEADER),
            Member("DeleteMarker", "x-amz-delete-marker", HEADER, BOOLEAN),
        ),
    ),
    Operation(
        "CreateMultipartUpload", "POST",
        key_required=True,
        subresource="uploads",
        headers={
            "ACL": "x-amz-acl",
            "ContentType": "Content-Type",
            "StorageClass": "x-amz-storage-class",
        },
        output=(
            Member("Bucket", "Bucket"),
            Member("Key", "Key"),
            Member("UploadId", "UploadId"),
        ),
    ),
    Operation(
        "UploadPart", "PUT",
        key_required=True,
        query={"PartNumber": "partNumber", "UploadId": "uploadId"},
        headers={"ContentMD5": "Content-MD5"},
        accepts_body=True,
        output=(Member("ETag", "ETag", HEADER),),
    ),
    Operation(
        "CompleteMultipartUpload", "POST",
        key_required=True,
        query={"UploadId": "uploadId"},
        headers={"ContentMD5": "Content-MD5", "ContentType": "Content-Type"},
        accepts_body=True,
        output=(
            Member("Location", "Location"),
            Member("Bucket", "Bucket"),
            Member("Key", "Key"),
            Member("ETag", "ETag"),
            Member("VersionId", "x-amz-version-id", HEADER),
        ),
    ),
    Operation(
        "AbortMultipartUpload", "DELETE",
        key_required=True,
        query={"UploadId": "uploadId"},
    ),
)


def get_operation(name: str | Operation) -> Operation:
    """Get registered operation by name."""
    if isinstance(name, Operation):
        return name
    try:
        return OPERATIONS[name]
    except KeyError as exc:
        raise ValueError(f"unknown operation {name}") from exc
