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

"""
Framework-independent core of the Pokemon and GIF search widgets.

-   `fetch_state`: the fetch-state hook (data / loading / error per locator).
-   `locators`: URLs built from user input, or the NO_REQUEST sentinel.
-   `schema`: lenient partial schemas of the PokeAPI and Giphy payloads.
-   `view_models`: display-ready cards and panel selection.
"""

from .errors import FetchError, HttpError, NetworkFailure, ParseFailure
from .fetch_state import NO_REQUEST, FetchState, FetchStateHook, FetchStatus

__all__ = [
    "FetchError",
    "HttpError",
    "NetworkFailure",
    "ParseFailure",
    "NO_REQUEST",
    "FetchState",
    "FetchStateHook",
    "FetchStatus",
]
