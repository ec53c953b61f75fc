"""
Declarative dynamic mappings.

A dynamic mapping can be described in YAML and bound to concrete mappings
by name:

    force_collection_mapping: false
    rules:
      - key_path: gender
        equals: male
        mapping: boy
      - key_path: gender
        equals: female
        mapping: girl

Rule order in the file is the order rules are tried in.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from maptools.mapping.dynamic import DynamicObjectMapping
from maptools.mapping.types import ObjectMappingDefinition


class MappingConfigError(ValueError):
    pass


class RuleConfig(BaseModel):
    key_path: str
    equals: Any = None
    mapping: str

    @field_validator("key_path")
    @classmethod
    def _key_path_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("key_path must not be empty")
        return v


class DynamicMappingConfig(BaseModel):
    schema_version: str = Field(default="0.1.0")
    force_collection_mapping: bool = False
    rules: List[RuleConfig] = Field(default_factory=list)


def dynamic_mapping_from_config(
    cfg: Dict[str, Any] | None,
    mappings: Mapping[str, ObjectMappingDefinition],
) -> DynamicObjectMapping:
    """Build a DynamicObjectMapping from a config dict, resolving mapping names."""
    if cfg is None:
        return DynamicObjectMapping.builder()

    try:
        parsed = DynamicMappingConfig.model_validate(cfg)
    except ValidationError as e:
        raise MappingConfigError(f"Invalid dynamic mapping config: {e}") from e

    dynamic = DynamicObjectMapping.builder()
    dynamic.force_collection_mapping = parsed.force_collection_mapping
    for i, rule in enumerate(parsed.rules):
        if rule.mapping not in mappings:
            raise MappingConfigError(
                f"rules[{i}]: unknown mapping '{rule.mapping}' "
                f"(known: {', '.join(sorted(mappings)) or 'none'})"
            )
        dynamic.add_rule(rule.key_path, rule.equals, mappings[rule.mapping])
    return dynamic


def load_dynamic_mapping(
    path: str | Path,
    mappings: Mapping[str, ObjectMappingDefinition],
) -> DynamicObjectMapping:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    if data is not None and not isinstance(data, dict):
        raise MappingConfigError(f"{p}: top level must be a mapping")
    return dynamic_mapping_from_config(data, mappings)
