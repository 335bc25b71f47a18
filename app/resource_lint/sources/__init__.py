from .discovery import DiscoveredPaths, discover_paths
from .loader import load_dictionaries, read_source_files

__all__ = ["DiscoveredPaths", "discover_paths", "load_dictionaries", "read_source_files"]
