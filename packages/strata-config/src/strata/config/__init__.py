__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .loader import StrataConfig, load_config_from_path, find_project_root

__all__ = ["StrataConfig", "load_config_from_path", "find_project_root"]
