from . import keypath
from . import types
from . import matcher
from . import selector
from . import dynamic
from . import dispatch

__all__ = [
    "keypath",
    "types",
    "matcher",
    "selector",
    "dynamic",
    "dispatch",
]
