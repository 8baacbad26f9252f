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

import logging
import os

from pydantic import BaseModel, Field

from search_widgets.constants import (
    GIPHY_BASE_URL,
    GIPHY_RESULT_LIMIT,
    PLACEHOLDER_API_KEY,
    POKEAPI_BASE_URL,
)

logger = logging.getLogger(__name__)


class WidgetSettings(BaseModel):
    """
    Runtime configuration shared by both widgets.

    Values come from the environment (or a `.env` file loaded by the front end)
    and are read when `from_env` is called, not at import time.
    """
    pokeapi_base_url: str = Field(POKEAPI_BASE_URL, description="Base URL of the PokeAPI v2 REST API")
    giphy_base_url: str = Field(GIPHY_BASE_URL, description="Base URL of the Giphy v1 REST API")
    giphy_api_key: str = Field(PLACEHOLDER_API_KEY, description="Provisioned Giphy API key")
    giphy_result_limit: int = Field(GIPHY_RESULT_LIMIT, ge=1, description="Number of GIFs requested per search")
    fetch_timeout: float | None = Field(None, gt=0, description="Seconds before a request is abandoned; None keeps the aiohttp default")

    @classmethod
    def from_env(cls) -> "WidgetSettings":
        values = {
            "pokeapi_base_url": os.getenv("POKEAPI_BASE_URL", POKEAPI_BASE_URL),
            "giphy_base_url": os.getenv("GIPHY_BASE_URL", GIPHY_BASE_URL),
            "giphy_api_key": os.getenv("GIPHY_API_KEY", PLACEHOLDER_API_KEY),
            "giphy_result_limit": os.getenv("GIPHY_RESULT_LIMIT", GIPHY_RESULT_LIMIT),
        }
        timeout = os.getenv("FETCH_TIMEOUT")
        if timeout:
            values["fetch_timeout"] = timeout
        settings = cls.model_validate(values)
        logger.debug(f"Loaded widget settings (timeout={settings.fetch_timeout})")
        return settings
