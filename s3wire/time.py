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
Timestamps of S3 responses and conditional request headers.

XML elements like LastModified and CreationDate carry ISO-8601 values;
headers like Last-Modified and If-Modified-Since carry HTTP dates. Month and
weekday names come from fixed tables, never from the process locale.
"""

from __future__ import absolute_import, annotations

from datetime import datetime, timezone

_WEEK_DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_MONTHS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]
_ISO8601_FORMATS = ["%Y-%m-%dT%H:%M:%S.%fZ", "%Y-%m-%dT%H:%M:%SZ"]


def _utc(value: datetime) -> datetime:
    """Convert to aware UTC time; naive value is taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_iso8601(value: str) -> datetime:
    """Parse ISO-8601 timestamp of an XML element to aware UTC time."""
    value = value.strip()
    for fmt in _ISO8601_FORMATS:
        try:
            return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            pass
    # Some S3 compatible servers send a numeric offset instead of Z.
    return _utc(datetime.fromisoformat(value))


def parse_http_date(value: str) -> datetime:
    """Parse HTTP date like 'Mon, 02 Mar 2015 07:28:00 GMT'."""
    tokens = value.strip().split(" ")
    if len(tokens) != 6:
        raise ValueError(f"invalid HTTP date {value}")

    weekday, day, month, year, clock, zone = tokens
    if (
            weekday[:-1] not in _WEEK_DAYS or
            not weekday.endswith(",") or
            len(day) != 2 or
            month not in _MONTHS or
            zone != "GMT"
    ):
        raise ValueError(f"invalid HTTP date {value}")

    time = datetime.strptime(
        f"{year}-{_MONTHS.index(month) + 1:02d}-{day} {clock}",
        "%Y-%m-%d %H:%M:%S",
    )
    if _WEEK_DAYS.index(weekday[:-1]) != time.weekday():
        raise ValueError(f"weekday does not match date in {value}")
    return time.replace(tzinfo=timezone.utc)


def format_http_date(value: datetime) -> str:
    """Format time as HTTP date for headers like If-Modified-Since."""
    value = _utc(value)
    return (
        f"{_WEEK_DAYS[value.weekday()]}, {value.day:02d} "
        f"{_MONTHS[value.month - 1]} {value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} GMT"
    )


def parse_timestamp(value: str) -> datetime:
    """Parse either HTTP date or ISO-8601 timestamp."""
    if value.strip()[:3] in _WEEK_DAYS:
        return parse_http_date(value)
    return parse_iso8601(value)
