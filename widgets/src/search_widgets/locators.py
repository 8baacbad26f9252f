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

from urllib.parse import quote, urlencode

from search_widgets.config import WidgetSettings
from search_widgets.constants import PLACEHOLDER_API_KEY
from search_widgets.fetch_state import NO_REQUEST, Locator

DOT_SEGMENTS = {".", ".."}


def pokemon_locator(name: str, settings: WidgetSettings | None = None) -> Locator:
    """
    URL of the PokeAPI resource for a Pokemon name or national dex number.
    Blank input means nothing to look up; so do "." and "..", which the
    client would resolve as path segments onto the list endpoints.
    """
    settings = settings or WidgetSettings.from_env()
    name = name.strip().lower()
    if not name or name in DOT_SEGMENTS:
        return NO_REQUEST
    return f"{settings.pokeapi_base_url.rstrip('/')}/pokemon/{quote(name, safe='')}"


def giphy_search_locator(term: str, submitted: bool, settings: WidgetSettings | None = None) -> Locator:
    """
    URL of a Giphy search for `term`, or NO_REQUEST until the user has
    submitted a search. The API key travels as the `api_key` query parameter.
    """
    if not submitted or not term.strip():
        return NO_REQUEST
    settings = settings or WidgetSettings.from_env()
    query = urlencode({
        "q": term.strip(),
        "api_key": settings.giphy_api_key,
        "limit": settings.giphy_result_limit,
    })
    return f"{settings.giphy_base_url.rstrip('/')}/gifs/search?{query}"


def uses_placeholder_key(api_key: str) -> bool:
    """True when no usable Giphy key is configured: blank, or still the placeholder."""
    return not api_key.strip() or api_key.strip() == PLACEHOLDER_API_KEY
