from .loader import load_config_mapping, load_de_config

__all__ = ["load_config_mapping", "load_de_config"]
