from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Callable, List, Optional, Tuple

from maptools.mapping.matcher import PathMatcher
from maptools.mapping.types import MappingRule, ObjectMappingDefinition

logger = logging.getLogger(__name__)

MappingCallback = Callable[[Any], Optional[ObjectMappingDefinition]]


class MappingSelector:
    """
    Picks the concrete mapping for a payload.

    Resolution order:
      1. delegate.object_mapping_for_data(payload), if a delegate is set
      2. callback(payload), if a callback is set
      3. registered rules, first match in insertion order
      4. None

    A strategy that is set but answers None falls through to the next one.
    Errors raised by the delegate or callback are not caught.

    The selector is meant to be configured once and then only read;
    nothing here is locked.
    """

    def __init__(self):
        self._rules: List[Tuple[MappingRule, PathMatcher]] = []
        self.delegate: Any = None
        self.callback: Optional[MappingCallback] = None
        self.force_collection_mapping: bool = False

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def add_rule(
        self,
        key_path: str,
        expected_value: Any,
        object_mapping: ObjectMappingDefinition,
    ) -> MappingRule:
        """Append a rule. Paths are not validated; a bad path just never matches."""
        rule = MappingRule(key_path, expected_value, object_mapping)
        self._rules.append((rule, PathMatcher(key_path, expected_value)))
        return rule

    @property
    def rules(self) -> Tuple[MappingRule, ...]:
        return tuple(rule for rule, _ in self._rules)

    def copy(self) -> "MappingSelector":
        """
        Copy with its own rule list. Expected values are deep-copied; target
        mappings, the delegate and the callback are shared references.
        """
        other = MappingSelector()
        for rule, _ in self._rules:
            other.add_rule(rule.key_path, deepcopy(rule.expected_value), rule.object_mapping)
        other.delegate = self.delegate
        other.callback = self.callback
        other.force_collection_mapping = self.force_collection_mapping
        return other

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def resolve(self, payload: Any) -> Optional[ObjectMappingDefinition]:
        if self.delegate is not None:
            mapping = self.delegate.object_mapping_for_data(payload)
            if mapping is not None:
                logger.debug("Delegate %r selected %r", self.delegate, mapping)
                return mapping

        if self.callback is not None:
            mapping = self.callback(payload)
            if mapping is not None:
                logger.debug("Callback selected %r", mapping)
                return mapping

        for rule, matcher in self._rules:
            if matcher.matches(payload):
                logger.debug("%r selected %r", matcher, rule.object_mapping)
                return rule.object_mapping

        logger.debug("No dynamic mapping matched payload %r", payload)
        return None
