from .bus import SpyBus
from .helpers import make_name_factory, all_name_kinds

__all__ = ["SpyBus", "make_name_factory", "all_name_kinds"]
