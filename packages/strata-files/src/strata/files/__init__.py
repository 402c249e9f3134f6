__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .node import Node
from .directory import Directory, RootNode, PATH_DELIMITER
from .file import File, FileState

__all__ = ["Node", "Directory", "RootNode", "File", "FileState", "PATH_DELIMITER"]
