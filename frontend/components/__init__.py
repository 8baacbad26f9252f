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

# components/__init__.py
"""
Package for the search widgets rendered by the Streamlit application.

Each module defines one self-contained widget: an input, a fetch-state hook
keyed by the widget's name, and the card layout for its results. All decisions
about what a field shows are made by `search_widgets.view_models`; these
modules only lay the result out.
"""

from .pokemon_search import render_pokemon_search
from .giphy_search import render_giphy_search

__all__ = [
    "render_pokemon_search",
    "render_giphy_search",
]
