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

# Note: my-bucketname, my-objectname and my-testfile are dummy values, please
# replace them with original values.

from s3wire import Client
from s3wire.error import S3Error
from s3wire.helpers import md5sum_hash

PART_SIZE = 5 * 1024 * 1024

client = Client()

upload_id = client.execute(
    "CreateMultipartUpload", Bucket="my-bucketname", Key="my-objectname",
).result()["UploadId"]

parts = []
try:
    with open("my-testfile", "rb") as file_data:
        part_number = 1
        while True:
            data = file_data.read(PART_SIZE)
            if not data:
                break
            result = client.execute(
                "UploadPart",
                Bucket="my-bucketname",
                Key="my-objectname",
                UploadId=upload_id,
                PartNumber=part_number,
                Body=data,
                ContentMD5=md5sum_hash(data),
            ).result()
            parts.append((part_number, result["ETag"]))
            part_number += 1

    # A 200 response may still carry an error; S3Error is raised for it.
    result = client.complete_multipart_upload(
        "my-bucketname", "my-objectname", upload_id, parts,
    )
    print("location:", result.get("Location"), "etag:", result.get("ETag"))
except S3Error as err:
    print(err, "retryable:", err.retryable)
    client.execute(
        "AbortMultipartUpload",
        Bucket="my-bucketname",
        Key="my-objectname",
        UploadId=upload_id,
    )
