from .resolver import Resolution, replace_with_resolution, resolve, smart_replace
from .strategies import STRATEGIES

__all__ = ["Resolution", "resolve", "smart_replace", "replace_with_resolution", "STRATEGIES"]
