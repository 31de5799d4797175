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

# Note: my-bucketname and my-objectname are dummy values, please replace them
# with original values.

from s3wire import Client, ClientConfig
from s3wire.error import S3Error

client = Client(
    ClientConfig(
        endpoint="localhost:9000",
        ssl_enabled=False,
        force_path_style=True,
    ),
)

try:
    if not client.bucket_exists("my-bucketname"):
        client.make_bucket("my-bucketname")

    result = client.put_object(
        "my-bucketname", "my-objectname", b"hello, world",
        content_type="text/plain",
    )
    print("etag:", result["ETag"])

    data = client.get_object("my-bucketname", "my-objectname")
    print(data.decode())
except S3Error as err:
    print(err)
