# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


class FetchError(Exception):
    """Base error for a fetch attempt. `str(error)` is what the widgets display."""
    pass


class NetworkFailure(FetchError):
    """The request could not complete (connection refused, DNS, timeout...)."""
    pass


class HttpError(FetchError):
    """The server answered with a non-2xx status."""
    def __init__(self, status: int, reason: str | None = None):
        self.status = status
        self.reason = reason
        super().__init__(f"HTTP {status}: {reason}" if reason else f"HTTP {status}")


class ParseFailure(FetchError):
    """The response body was not valid JSON."""
    pass
