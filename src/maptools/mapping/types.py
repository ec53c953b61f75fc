from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class ObjectMappingDefinition(ABC):
    """
    Anything the object mapper can be handed as "the mapping" for a payload.

    Static and dynamic mappings both answer the same two questions, so the
    mapper never has to tell them apart:

    - which concrete ObjectMapping applies to this payload (or None)
    - whether a dict payload is a keyed collection of items
    """

    @abstractmethod
    def object_mapping_for(self, payload: Any) -> Optional["ObjectMappingDefinition"]:
        raise NotImplementedError()

    @property
    @abstractmethod
    def force_collection_mapping(self) -> bool:
        raise NotImplementedError()


@dataclass(eq=False)
class ObjectMapping(ObjectMappingDefinition):
    """
    A concrete mapping: the target class plus its attribute and relationship
    rules. The conversion itself is done by the object mapper; this is only
    the description it works from.
    """

    object_class: type
    attribute_mappings: Dict[str, str] = field(default_factory=dict)
    relationship_mappings: Dict[str, "RelationshipMapping"] = field(default_factory=dict)
    name: Optional[str] = None

    def map_attribute(self, source: str, destination: Optional[str] = None) -> "ObjectMapping":
        self.attribute_mappings[source] = destination or source
        return self

    def map_relationship(
        self,
        source: str,
        mapping: ObjectMappingDefinition,
        destination: Optional[str] = None,
    ) -> "ObjectMapping":
        self.relationship_mappings[source] = RelationshipMapping(
            destination=destination or source,
            mapping=mapping,
        )
        return self

    def object_mapping_for(self, payload: Any) -> "ObjectMapping":
        return self

    @property
    def force_collection_mapping(self) -> bool:
        return False

    def __repr__(self) -> str:
        label = self.name or self.object_class.__name__
        return f"ObjectMapping({label})"


@dataclass(frozen=True)
class RelationshipMapping:
    destination: str
    mapping: ObjectMappingDefinition


@dataclass(frozen=True)
class MappingRule:
    """Use ``object_mapping`` when the value at ``key_path`` equals ``expected_value``."""

    key_path: str
    expected_value: Any
    object_mapping: ObjectMappingDefinition
