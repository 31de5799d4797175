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

from datetime import datetime, timedelta, timezone
from unittest import TestCase

from s3wire.datatypes import map_response
from s3wire.time import (format_http_date, parse_http_date, parse_iso8601,
                         parse_timestamp)

LAST_MODIFIED = datetime(2015, 5, 5, 2, 21, 15, 716000, tzinfo=timezone.utc)


class ParseIso8601Test(TestCase):
    def test_element_values(self):
        for value in [
                "2015-05-05T02:21:15.716Z",
                "2015-05-05T02:21:15.716000Z",
                "2015-05-05T02:21:15.716+00:00",
                "2015-05-05T07:51:15.716+05:30",
                "\n  2015-05-05T02:21:15.716Z  \n",
        ]:
            with self.subTest(value=value):
                self.assertEqual(parse_iso8601(value), LAST_MODIFIED)

    def test_whole_seconds(self):
        self.assertEqual(
            parse_iso8601("2015-06-22T23:07:43Z"),
            datetime(2015, 6, 22, 23, 7, 43, tzinfo=timezone.utc),
        )

    def test_invalid(self):
        for value in ["", "yesterday", "2015-13-05T02:21:15Z"]:
            with self.subTest(value=value):
                self.assertRaises(ValueError, parse_iso8601, value)


class ParseHttpDateTest(TestCase):
    def test_valid(self):
        self.assertEqual(
            parse_http_date("Wed, 30 Oct 2024 09:35:00 GMT"),
            datetime(2024, 10, 30, 9, 35, tzinfo=timezone.utc),
        )
        self.assertEqual(
            parse_http_date("Sun, 29 Feb 2004 23:59:59 GMT"),
            datetime(2004, 2, 29, 23, 59, 59, tzinfo=timezone.utc),
        )

    def test_invalid(self):
        for value in [
                "Wed 30 Oct 2024 09:35:00 GMT",
                "Wed, 30 Oct 2024 09:35:00 UTC",
                "Wed, 30 Oct 2024 09:35:00",
                "Wed,  30 Oct 2024 09:35:00 GMT",
                "Wed, 3 Oct 2024 09:35:00 GMT",
                "Wed, 30 Okt 2024 09:35:00 GMT",
                "Wed, 31 Sep 2024 09:35:00 GMT",
                "Thu, 30 Oct 2024 09:35:00 GMT",
                "Wed, 30 Oct 2024 25:35:00 GMT",
        ]:
            with self.subTest(value=value):
                self.assertRaises(ValueError, parse_http_date, value)


class FormatHttpDateTest(TestCase):
    def test_aware_value(self):
        offset = timezone(timedelta(hours=5, minutes=30))
        value = datetime(2015, 3, 2, 12, 58, tzinfo=offset)
        self.assertEqual(
            format_http_date(value), "Mon, 02 Mar 2015 07:28:00 GMT",
        )

    def test_naive_value_is_utc(self):
        self.assertEqual(
            format_http_date(datetime(2024, 1, 7, 0, 0, 5)),
            "Sun, 07 Jan 2024 00:00:05 GMT",
        )

    def test_parses_back(self):
        value = datetime(2024, 10, 1, 22, 35, 22, tzinfo=timezone.utc)
        self.assertEqual(parse_http_date(format_http_date(value)), value)


class ParseTimestampTest(TestCase):
    def test_dispatch(self):
        self.assertEqual(
            parse_timestamp("Mon, 02 Mar 2015 07:28:00 GMT"),
            datetime(2015, 3, 2, 7, 28, tzinfo=timezone.utc),
        )
        self.assertEqual(
            parse_timestamp("2015-05-05T02:21:15.716Z"), LAST_MODIFIED,
        )

    def test_response_fields(self):
        data = map_response(
            "ListObjects", {},
            "<ListBucketResult><Contents><Key>a</Key>"
            "<LastModified>2015-05-05T02:21:15.716Z</LastModified>"
            "</Contents></ListBucketResult>",
        )
        self.assertEqual(data["Contents"][0]["LastModified"], LAST_MODIFIED)

        data = map_response(
            "HeadObject", {"Last-Modified": "Mon, 02 Mar 2015 07:28:00 GMT"},
            b"",
        )
        self.assertEqual(
            data["LastModified"],
            datetime(2015, 3, 2, 7, 28, tzinfo=timezone.utc),
        )

    def test_unparsable_header_kept(self):
        data = map_response(
            "HeadObject", {"Last-Modified": "Mon, 32 Mar 2015 07:28:00 GMT"},
            b"",
        )
        self.assertEqual(data["LastModified"], "Mon, 32 Mar 2015 07:28:00 GMT")
