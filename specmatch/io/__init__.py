from .config_loader import load_config, build_from_config, get_matcher, MATCHER_NAMES
from .json_io import load_suite, save_json

__all__ = ["load_config", "build_from_config", "get_matcher", "MATCHER_NAMES", "load_suite", "save_json"]
