from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, PlainValidator

from blossom_core.models.hash import Hash
from blossom_core.services.sniffer import DEFAULT_MEDIA_TYPE


def utcnow() -> datetime:
    return datetime.now(UTC)


def _coerce_hash(value: object) -> Hash:
    if isinstance(value, Hash):
        return value
    return Hash.from_storage_form(value)


def _coerce_media_type(value: object) -> object:
    if value is None or value == "":
        return DEFAULT_MEDIA_TYPE
    return value


HashField = Annotated[
    Hash,
    PlainValidator(_coerce_hash),
    PlainSerializer(lambda h: h.to_storage_form(), return_type=str),
]


class BlobMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    hash: HashField
    media_type: Annotated[str, BeforeValidator(_coerce_media_type)] = DEFAULT_MEDIA_TYPE
    size: int = Field(ge=0)
    created_at: datetime = Field(default_factory=utcnow)
