import logging
import os
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator

from scaled_decimal.constants import DEFAULT_PRECISION, ENV_DEFAULT_PRECISION, SOURCE_SUFFIX

logger = logging.getLogger(__name__)


class AccessorOptions(BaseModel):
    """Options for one decimal accessor: backing field name and precision."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    source: Optional[str] = None
    precision: StrictInt = Field(default=DEFAULT_PRECISION, ge=0)

    @field_validator("source")
    @classmethod
    def validate_source(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.isidentifier():
            raise ValueError(f"Source {value!r} must be a valid attribute name.")
        return value

    def resolve_source(self, attribute: str) -> str:
        return self.source or f"{attribute}{SOURCE_SUFFIX}"


class AccessorConfig(BaseModel):
    """A set of accessors to bind onto one host type, keyed by attribute name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    accessors: Dict[str, AccessorOptions] = Field(default_factory=dict)

    @field_validator("accessors", mode="before")
    @classmethod
    def expand_shorthand(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value

        expanded = {}
        for attribute, options in value.items():
            if options is None:
                options = {}
            elif isinstance(options, int) and not isinstance(options, bool):
                # "seconds: 4" means precision 4 on the default source
                options = {"precision": options}
            expanded[attribute] = options
        return expanded

    @model_validator(mode="after")
    def validate_attributes(self) -> "AccessorConfig":
        for attribute, options in self.accessors.items():
            if not isinstance(attribute, str) or not attribute.isidentifier():
                raise ValueError(f"Attribute {attribute!r} must be a valid attribute name.")
            if options.resolve_source(attribute) == attribute:
                raise ValueError(f"Attribute {attribute!r} cannot be its own source.")
        return self


def load_accessor_config(path: str) -> AccessorConfig:
    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Accessor config {path} must be a mapping, got {type(data).__name__}")

    config = AccessorConfig.model_validate(data)
    logger.debug(f"Loaded {len(config.accessors)} accessor(s) from {path}")
    return config


def bind_from_config(host_type: type, config: AccessorConfig) -> Dict[str, Any]:
    """Binds every accessor in config onto host_type; returns the installed descriptors."""
    from scaled_decimal.accessor import bind_decimal_accessor

    return {
        attribute: bind_decimal_accessor(
            host_type,
            attribute,
            source=options.source,
            precision=options.precision,
        )
        for attribute, options in config.accessors.items()
    }


def default_precision_from_env() -> int:
    raw = os.getenv(ENV_DEFAULT_PRECISION)
    if raw is None or not raw.strip():
        return DEFAULT_PRECISION

    try:
        precision = int(raw.strip())
    except ValueError:
        precision = -1

    if precision < 0:
        logger.warning(
            f"Ignoring invalid {ENV_DEFAULT_PRECISION}={raw!r}, using {DEFAULT_PRECISION}"
        )
        return DEFAULT_PRECISION
    return precision
