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
Display-ready views of the fetched payloads.

The Streamlit components only lay these out; every decision about what a field
shows (unit conversion, fallbacks, stat bar scaling, which panel is visible)
is made here so it can be tested without a running app.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from search_widgets.constants import FALLBACK_TEXT, STAT_MAX, UNTITLED_GIF
from search_widgets.fetch_state import NO_REQUEST, FetchState, FetchStatus, Locator
from search_widgets.schema import GiphySearchPayload, PokemonPayload
from search_widgets.utils import capitalize_first, format_measure


class WidgetView(str, Enum):
    HELP = "help"
    LOADING = "loading"
    ERROR = "error"
    RESULTS = "results"
    EMPTY = "empty"


def select_view(locator: Locator, state: FetchState) -> WidgetView:
    """Which panel a widget shows for the current locator and fetch state."""
    if locator is NO_REQUEST:
        return WidgetView.HELP
    status = state.status
    if status is FetchStatus.LOADING:
        return WidgetView.LOADING
    if status is FetchStatus.ERROR:
        return WidgetView.ERROR
    if status is FetchStatus.SUCCESS:
        return WidgetView.RESULTS
    return WidgetView.EMPTY


@dataclass(frozen=True)
class StatBar:
    name: str
    value: int | None
    fill_ratio: float

    @property
    def percent(self) -> float:
        return self.fill_ratio * 100


@dataclass(frozen=True)
class PokemonCard:
    title: str
    image_url: str | None
    identifier: str
    weight: str
    height: str
    types: str
    abilities: str
    stats: list[StatBar] = field(default_factory=list)


def _join_names(resources) -> str:
    names = [r.name for r in resources or [] if r is not None and r.name]
    return ", ".join(names) if names else FALLBACK_TEXT


def build_pokemon_card(payload: Any) -> PokemonCard:
    pokemon = PokemonPayload.decode(payload)
    sprites = pokemon.sprites

    artwork = None
    if sprites is not None:
        other = sprites.other
        if other is not None and other.official_artwork is not None:
            artwork = other.official_artwork.front_default
        artwork = artwork or sprites.front_default

    stats = []
    for entry in pokemon.stats or []:
        if entry.stat is None or not entry.stat.name:
            continue
        ratio = entry.base_stat / STAT_MAX if entry.base_stat is not None else 0.0
        stats.append(StatBar(name=entry.stat.name.upper(), value=entry.base_stat, fill_ratio=ratio))

    return PokemonCard(
        title=capitalize_first(pokemon.name) if pokemon.name else FALLBACK_TEXT,
        image_url=artwork,
        identifier=f"#{pokemon.id}" if pokemon.id is not None else FALLBACK_TEXT,
        weight=format_measure(pokemon.weight, 10, "kg") if pokemon.weight is not None else FALLBACK_TEXT,
        height=format_measure(pokemon.height, 10, "m") if pokemon.height is not None else FALLBACK_TEXT,
        types=_join_names(t.type for t in pokemon.types or []),
        abilities=_join_names(a.ability for a in pokemon.abilities or []),
        stats=stats,
    )


@dataclass(frozen=True)
class GifCard:
    id: str | None
    title: str
    page_url: str | None
    image_url: str | None


@dataclass(frozen=True)
class GifGrid:
    count_label: str
    cards: list[GifCard] = field(default_factory=list)
    total_count: int | None = None


def build_gif_grid(payload: Any) -> GifGrid | None:
    """None when the payload carries no `data` list, so nothing is rendered."""
    search = GiphySearchPayload.decode(payload)
    if search.data is None:
        return None

    cards = []
    for gif in search.data:
        image = gif.images.fixed_height if gif.images is not None else None
        cards.append(GifCard(
            id=gif.id,
            title=gif.title or UNTITLED_GIF,
            page_url=gif.url,
            image_url=image.url if image is not None else None,
        ))
    total = search.pagination.total_count if search.pagination is not None else None
    return GifGrid(count_label=f"Found {len(cards)} GIFs", cards=cards, total_count=total)
