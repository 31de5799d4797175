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
s3wire - request addressing and response handling for Amazon S3 compatible
storage

    >>> from s3wire import Client, ClientConfig
    >>> client = Client(ClientConfig(region="us-west-2"))
    >>> outcome = client.execute("GetBucketLocation", Bucket="my-bucket")
    >>> if outcome.is_error:
    ...     print(outcome.code, outcome.retryable)
    ... else:
    ...     print(outcome.data.get("LocationConstraint"))

:copyright: (C) 2025 The s3wire Authors.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "s3wire"
__author__ = "The s3wire Authors"
__version__ = "0.3.0"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2025 The s3wire Authors"

# pylint: disable=wrong-import-position
from .api import Client as Client
from .config import ClientConfig as ClientConfig
from .datatypes import SuccessResult as SuccessResult
from .error import ErrorResult as ErrorResult
from .error import InvalidResponseError as InvalidResponseError
from .error import S3Error as S3Error
