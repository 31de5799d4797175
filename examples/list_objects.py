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

# Note: my-bucketname and my-prefixname are dummy values, please replace them
# with original values.

from s3wire import Client, ClientConfig

client = Client(ClientConfig(region="us-west-2"))

# List objects information, one page at a time.
marker = None
while True:
    outcome = client.execute(
        "ListObjects",
        Bucket="my-bucketname",
        Prefix="my-prefixname/",
        Marker=marker,
    )
    if outcome.is_error:
        print(outcome.code, outcome.message, outcome.retryable)
        break
    page = outcome.data
    for item in page["Contents"]:
        print(item["Key"], item["Size"], item.get("LastModified"))
    if not page["IsTruncated"] or not page["Contents"]:
        break
    marker = page.get("NextMarker") or page["Contents"][-1]["Key"]
