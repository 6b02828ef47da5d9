from approxeq.config.loader import ConfigError, EnvVarLoader, load_from_yaml
from approxeq.config.tolerance import ToleranceConfig, load_tolerance_profiles

__all__ = [
    "ConfigError",
    "EnvVarLoader",
    "ToleranceConfig",
    "load_from_yaml",
    "load_tolerance_profiles",
]
