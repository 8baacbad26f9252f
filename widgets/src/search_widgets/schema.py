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
Partial schemas for the remote payloads.

Only the fields the widgets render are declared. Every field is optional, and a
field whose value does not match its declared type decodes to ``None`` instead
of failing the whole payload, so a card can still render what is there.
In a list field only the entries that do not match are dropped.
"""
from typing import Any, TypeVar, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

M = TypeVar("M", bound="LenientModel")


def _is_list_field(annotation) -> bool:
    if get_origin(annotation) is list:
        return True
    return any(get_origin(arg) is list for arg in get_args(annotation))


def _valid_items(items: list, handler) -> list:
    """Validate a list entry by entry, dropping the entries that do not fit."""
    kept = []
    for item in items:
        try:
            kept.extend(handler([item]))
        except ValidationError:
            continue
    return kept


class LenientModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def _mismatch_to_none(cls, value, handler, info):
        try:
            return handler(value)
        except ValidationError:
            if isinstance(value, list) and _is_list_field(cls.model_fields[info.field_name].annotation):
                return _valid_items(value, handler)
            return None

    @classmethod
    def decode(cls: type[M], payload: Any) -> M:
        """Decode an untyped JSON value; anything but an object gives an empty model."""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)


class NamedResource(LenientModel):
    name: str | None = None
    url: str | None = None


##
# PokeAPI: /pokemon/{name}
##
class OtherSprite(LenientModel):
    front_default: str | None = None


class OtherSprites(LenientModel):
    official_artwork: OtherSprite | None = Field(None, alias="official-artwork")


class Sprites(LenientModel):
    front_default: str | None = None
    other: OtherSprites | None = None


class PokemonType(LenientModel):
    slot: int | None = None
    type: NamedResource | None = None


class PokemonAbility(LenientModel):
    ability: NamedResource | None = None
    is_hidden: bool | None = None


class PokemonStat(LenientModel):
    base_stat: int | None = None
    stat: NamedResource | None = None


class PokemonPayload(LenientModel):
    id: int | None = None
    name: str | None = None
    weight: float | None = Field(None, description="Weight in hectograms")
    height: float | None = Field(None, description="Height in decimetres")
    sprites: Sprites | None = None
    types: list[PokemonType] | None = None
    abilities: list[PokemonAbility] | None = None
    stats: list[PokemonStat] | None = None


##
# Giphy: /gifs/search
##
class GifImage(LenientModel):
    url: str | None = None


class GifImages(LenientModel):
    fixed_height: GifImage | None = None


class Gif(LenientModel):
    id: str | None = None
    title: str | None = None
    url: str | None = None
    images: GifImages | None = None


class Pagination(LenientModel):
    total_count: int | None = None
    count: int | None = None
    offset: int | None = None


class Meta(LenientModel):
    status: int | None = None
    msg: str | None = None


class GiphySearchPayload(LenientModel):
    data: list[Gif] | None = None
    pagination: Pagination | None = None
    meta: Meta | None = None
