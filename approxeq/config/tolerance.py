from __future__ import annotations

from pathlib import Path

from beartype import beartype
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from approxeq.compare import DEFAULT_ABS_TOL, DEFAULT_REL_TOL, Numeric, approximately_equal
from approxeq.config.loader import ConfigError, load_from_yaml
from approxeq.logs.structlog import logger


@beartype
class ToleranceConfig(BaseModel):
    """A named pair of tolerances applied with ``approximately_equal``."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    rel_tol: float = Field(default=DEFAULT_REL_TOL, ge=0, allow_inf_nan=False)
    abs_tol: float = Field(default=DEFAULT_ABS_TOL, ge=0, allow_inf_nan=False)

    def is_close(self, actual: Numeric, expected: Numeric) -> bool:
        return approximately_equal(actual, expected, rel_tol=self.rel_tol, abs_tol=self.abs_tol)


@beartype
def load_tolerance_profiles(path: str | Path, section: str = "tolerances") -> dict[str, ToleranceConfig]:
    """
    Load named tolerance profiles from a YAML config file.

    The file holds a top-level ``section`` mapping each profile name to its
    ``rel_tol`` and ``abs_tol``; omitted tolerances take the library defaults.

    Raises:
        ConfigError: If the file cannot be loaded, the section is missing or not
            a mapping, or a profile fails validation.
    """
    log = logger.bind(component="tolerance_config")
    data = load_from_yaml(path)
    raw_profiles = data.get(section)
    if raw_profiles is None:
        raise ConfigError(f"Missing '{section}' section in {path}")
    if not isinstance(raw_profiles, dict):
        raise ConfigError(f"'{section}' section must be a mapping of profile names to tolerances")

    profiles: dict[str, ToleranceConfig] = {}
    for name, settings in raw_profiles.items():
        try:
            profiles[str(name)] = ToleranceConfig.model_validate({} if settings is None else settings)
        except ValidationError as err:
            raise ConfigError(f"Invalid tolerance profile '{name}': {err}") from err

    log.info("Loaded tolerance profiles", path=str(path), profiles=sorted(profiles))
    return profiles
