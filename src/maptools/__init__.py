from maptools.mapping.keypath import ABSENT, value_for_key_path
from maptools.mapping.types import MappingRule, ObjectMapping, ObjectMappingDefinition
from maptools.mapping.matcher import PathMatcher
from maptools.mapping.selector import MappingSelector
from maptools.mapping.dynamic import DynamicObjectMapping, DynamicObjectMappingDelegate
from maptools.mapping.dispatch import MappableItem, UnmappablePayloadError, iter_mappable, resolve_all
from maptools.config import MappingConfigError, dynamic_mapping_from_config, load_dynamic_mapping

__all__ = [
    "ABSENT",
    "value_for_key_path",
    "MappingRule",
    "ObjectMapping",
    "ObjectMappingDefinition",
    "PathMatcher",
    "MappingSelector",
    "DynamicObjectMapping",
    "DynamicObjectMappingDelegate",
    "MappableItem",
    "UnmappablePayloadError",
    "iter_mappable",
    "resolve_all",
    "MappingConfigError",
    "dynamic_mapping_from_config",
    "load_dynamic_mapping",
]
