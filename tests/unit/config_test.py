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

import dataclasses
import os
import unittest.mock as mock
from unittest import TestCase

from s3wire.config import ClientConfig


class ClientConfigTest(TestCase):
    def test_defaults(self):
        config = ClientConfig()
        self.assertEqual(config.region, "us-east-1")
        self.assertTrue(config.ssl_enabled)
        self.assertFalse(config.force_path_style)
        self.assertIsNone(config.endpoint)
        self.assertEqual(config.hostname, "s3.amazonaws.com")
        self.assertEqual(config.scheme, "https")

    def test_regional_hostname(self):
        config = ClientConfig(region="eu-west-1", ssl_enabled=False)
        self.assertEqual(config.hostname, "s3-eu-west-1.amazonaws.com")
        self.assertEqual(config.scheme, "http")

    def test_endpoint(self):
        config = ClientConfig(endpoint="localhost:9000")
        self.assertEqual(config.hostname, "localhost:9000")

    def test_frozen(self):
        config = ClientConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.region = "eu-west-1"

    def test_invalid_region(self):
        self.assertRaises(ValueError, ClientConfig, region="us east 1")
        self.assertRaises(TypeError, ClientConfig, region=1)

    def test_empty_endpoint(self):
        self.assertRaises(ValueError, ClientConfig, endpoint=" ")


class FromEnvTest(TestCase):
    @mock.patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        self.assertEqual(ClientConfig.from_env(), ClientConfig())

    @mock.patch.dict(
        os.environ,
        {
            "AWS_REGION": "ap-south-1",
            "S3_USE_SSL": "false",
            "S3_FORCE_PATH_STYLE": "1",
            "S3_ENDPOINT": "localhost:9000",
        },
        clear=True,
    )
    def test_values(self):
        self.assertEqual(
            ClientConfig.from_env(),
            ClientConfig(
                region="ap-south-1",
                ssl_enabled=False,
                force_path_style=True,
                endpoint="localhost:9000",
            ),
        )

    @mock.patch.dict(
        os.environ, {"AWS_DEFAULT_REGION": "us-west-2"}, clear=True,
    )
    def test_default_region(self):
        self.assertEqual(ClientConfig.from_env().region, "us-west-2")

    @mock.patch.dict(os.environ, {"S3_USE_SSL": "maybe"}, clear=True)
    def test_invalid_flag(self):
        self.assertRaises(ValueError, ClientConfig.from_env)
