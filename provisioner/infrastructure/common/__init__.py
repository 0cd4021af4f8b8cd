from .di import inject_use_case
from .persistence import classify_integrity_error, translate_persistence_errors

__all__ = [
    "classify_integrity_error",
    "inject_use_case",
    "translate_persistence_errors",
]
