from __future__ import annotations

import logging
from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any, Iterator, List, Optional

from maptools.mapping.types import ObjectMappingDefinition

logger = logging.getLogger(__name__)


class UnmappablePayloadError(LookupError):
    """No mapping could be resolved for one item of a payload."""

    def __init__(self, key: Any, payload: Any):
        self.key = key
        self.payload = payload
        super().__init__(f"No object mapping resolved for item {key!r}: {payload!r}")


@dataclass(frozen=True)
class MappableItem:
    key: Any
    payload: Any
    object_mapping: Optional[ObjectMappingDefinition]


def iter_mappable(definition: ObjectMappingDefinition, payload: Any) -> Iterator[MappableItem]:
    """
    Split a payload into the items the object mapper should convert.

    - list/tuple: one item per element, keyed by index
    - dict with force_collection_mapping: one item per value, keyed by dict key
    - any other dict: the dict itself, key None
    """
    if isinstance(payload, (list, tuple)):
        pairs = enumerate(payload)
    elif isinstance(payload, Mapping):
        if definition.force_collection_mapping:
            pairs = payload.items()
        else:
            pairs = [(None, payload)]
    else:
        raise TypeError(f"Payload of type {type(payload).__name__} is not mappable")

    for key, item in pairs:
        yield MappableItem(key, item, definition.object_mapping_for(item))


def resolve_all(
    definition: ObjectMappingDefinition,
    payload: Any,
    *,
    strict: bool = False,
) -> List[MappableItem]:
    items: List[MappableItem] = []
    for item in iter_mappable(definition, payload):
        if item.object_mapping is None:
            if strict:
                raise UnmappablePayloadError(item.key, item.payload)
            logger.warning("No object mapping for item %r; it will be skipped by the mapper", item.key)
        items.append(item)
    return items
