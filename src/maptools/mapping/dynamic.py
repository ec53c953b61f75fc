from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple

from maptools.mapping.selector import MappingCallback, MappingSelector
from maptools.mapping.types import MappingRule, ObjectMappingDefinition


class DynamicObjectMappingDelegate(ABC):
    """Object-style hook for choosing a mapping from the payload itself."""

    @abstractmethod
    def object_mapping_for_data(self, data: Any) -> Optional[ObjectMappingDefinition]:
        raise NotImplementedError()


class DynamicObjectMapping(ObjectMappingDefinition):
    """
    A mapping definition that decides at mapping time which concrete
    ObjectMapping to apply, based on the content of the payload.

    Suppose a person payload should become a Boy or a Girl depending on its
    "gender" value:

        mapping = DynamicObjectMapping.builder()
        mapping.set_object_mapping(boy_mapping, when_key_path="gender", equals="male")
        mapping.set_object_mapping(girl_mapping, when_key_path="gender", equals="female")

        mapping.object_mapping_for({"gender": "male"})    -> boy_mapping
        mapping.object_mapping_for({"gender": "other"})   -> None

    For logic that does not fit key/value rules, set a ``delegate``
    (a DynamicObjectMappingDelegate) or an ``object_mapping_for_data_block``
    (any callable payload -> mapping). Both are consulted before the rules.
    """

    def __init__(self, selector: Optional[MappingSelector] = None):
        self._selector = selector if selector is not None else MappingSelector()

    @classmethod
    def builder(
        cls,
        configure: Optional[Callable[["DynamicObjectMapping"], Any]] = None,
    ) -> "DynamicObjectMapping":
        mapping = cls()
        if configure is not None:
            configure(mapping)
        return mapping

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------
    def set_object_mapping(
        self,
        object_mapping: ObjectMappingDefinition,
        when_key_path: str,
        equals: Any,
    ) -> "DynamicObjectMapping":
        self._selector.add_rule(when_key_path, equals, object_mapping)
        return self

    def add_rule(
        self,
        key_path: str,
        expected_value: Any,
        object_mapping: ObjectMappingDefinition,
    ) -> MappingRule:
        return self._selector.add_rule(key_path, expected_value, object_mapping)

    @property
    def rules(self) -> Tuple[MappingRule, ...]:
        return self._selector.rules

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    @property
    def delegate(self) -> Optional[DynamicObjectMappingDelegate]:
        return self._selector.delegate

    @delegate.setter
    def delegate(self, delegate: Optional[DynamicObjectMappingDelegate]) -> None:
        if delegate is not None and not callable(getattr(delegate, "object_mapping_for_data", None)):
            raise TypeError(
                f"Delegate {delegate!r} must implement object_mapping_for_data(data); "
                "use object_mapping_for_data_block for plain callables"
            )
        self._selector.delegate = delegate

    @property
    def object_mapping_for_data_block(self) -> Optional[MappingCallback]:
        return self._selector.callback

    @object_mapping_for_data_block.setter
    def object_mapping_for_data_block(self, block: Optional[MappingCallback]) -> None:
        if block is not None and not callable(block):
            raise TypeError(f"object_mapping_for_data_block must be callable, got {block!r}")
        self._selector.callback = block

    @property
    def force_collection_mapping(self) -> bool:
        """
        When True, a dict payload is a keyed collection ({"123": {...}, "456": {...}})
        whose values are mapped one by one, rather than a single object.
        """
        return self._selector.force_collection_mapping

    @force_collection_mapping.setter
    def force_collection_mapping(self, value: bool) -> None:
        self._selector.force_collection_mapping = bool(value)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def resolve_mapping(self, payload: Any) -> Optional[ObjectMappingDefinition]:
        return self._selector.resolve(payload)

    def object_mapping_for_dictionary(self, dictionary: Any) -> Optional[ObjectMappingDefinition]:
        return self._selector.resolve(dictionary)

    def object_mapping_for(self, payload: Any) -> Optional[ObjectMappingDefinition]:
        return self._selector.resolve(payload)

    def copy(self) -> "DynamicObjectMapping":
        return type(self)(self._selector.copy())

    def __repr__(self) -> str:
        sel = self._selector
        return (
            f"DynamicObjectMapping(rules={len(sel.rules)}, "
            f"delegate={sel.delegate is not None}, "
            f"block={sel.callback is not None}, "
            f"force_collection_mapping={sel.force_collection_mapping})"
        )
