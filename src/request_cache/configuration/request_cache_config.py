"""Request cache configuration management.

ONLY configuration loading - builds request cache options from
environment variables, YAML/JSON files and dictionaries, and writes
them back out.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from ..core.exceptions import InvalidArgument, NullReference
from ..options import RequestCacheOptions
from .options_schema import RequestCacheOptionsSchema

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT_PREFIX = "REQUEST_CACHE"
FILE_SECTION = "request_cache"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"expected one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}")


def _parse_status_codes(value: str) -> List[int]:
    return [int(part) for part in value.split(",") if part.strip()]


class RequestCacheConfig:
    """Loads and serializes request cache options.

    Every loader validates through RequestCacheOptionsSchema and returns a
    fresh RequestCacheOptions. Validation failures surface as
    InvalidArgument (or NullReference for a null status code list).
    """

    @classmethod
    def from_dict(
        cls,
        config_dict: Mapping[str, Any],
        defaults: Optional[RequestCacheOptions] = None,
    ) -> RequestCacheOptions:
        """Create options from a dictionary.

        Args:
            config_dict: Option values keyed by field name
            defaults: Options supplying values missing from config_dict

        Returns:
            Options instance
        """
        if not isinstance(config_dict, Mapping):
            raise InvalidArgument.wrong_type("request_cache", config_dict, "a mapping")

        if "cached_status_codes" in config_dict and config_dict["cached_status_codes"] is None:
            raise NullReference.for_field("cached_status_codes")

        config_data: Dict[str, Any] = defaults.to_dict() if defaults is not None else {}
        config_data.update(config_dict)

        try:
            schema = RequestCacheOptionsSchema.model_validate(config_data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            first = e.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else FILE_SECTION
            logger.warning(f"Invalid request cache configuration: {'; '.join(errors)}")
            raise InvalidArgument(
                field=field,
                value=config_data.get(field),
                reason=first["msg"],
                error_code="CONFIG_VALIDATION_ERROR",
                details={"errors": errors},
            ) from e

        options = schema.to_options()
        logger.debug(f"Request cache options resolved: {options!r}")
        return options

    @classmethod
    def from_environment(
        cls,
        prefix: str = DEFAULT_ENVIRONMENT_PREFIX,
        defaults: Optional[RequestCacheOptions] = None,
    ) -> RequestCacheOptions:
        """Create options from environment variables.

        Reads ``{prefix}_EXPIRES_AFTER_WRITE_MILLIS``, ``{prefix}_EVICT_BEFORE``,
        ``{prefix}_EXPIRES_AFTER_ACCESS_MILLIS``, ``{prefix}_EVICT_ALL_BEFORE``
        and ``{prefix}_CACHED_STATUS_CODES`` (comma separated). Unset
        variables keep the value from defaults.

        Args:
            prefix: Environment variable prefix
            defaults: Options to override

        Returns:
            Options instance
        """
        env_mapping: Dict[str, tuple[str, Callable[[str], Any]]] = {
            f"{prefix}_EXPIRES_AFTER_WRITE_MILLIS": ("expires_after_write", int),
            f"{prefix}_EVICT_BEFORE": ("evict_before", _parse_bool),
            f"{prefix}_EXPIRES_AFTER_ACCESS_MILLIS": ("expires_after_access", int),
            f"{prefix}_EVICT_ALL_BEFORE": ("evict_all_before", _parse_bool),
            f"{prefix}_CACHED_STATUS_CODES": ("cached_status_codes", _parse_status_codes),
        }

        config_dict = {}

        for env_var, (field_name, converter) in env_mapping.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                try:
                    config_dict[field_name] = converter(env_value)
                except (ValueError, TypeError) as e:
                    raise InvalidArgument(
                        field=env_var,
                        value=env_value,
                        reason=f"has an invalid value {env_value!r}: {e}",
                        error_code="INVALID_ENVIRONMENT_VALUE",
                    ) from e

        logger.info(
            f"Loading request cache options from environment "
            f"(prefix={prefix}, variables={sorted(config_dict)})"
        )
        return cls.from_dict(config_dict, defaults=defaults)

    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        defaults: Optional[RequestCacheOptions] = None,
    ) -> RequestCacheOptions:
        """Create options from a YAML or JSON file.

        The options may sit at the top level of the document or under a
        ``request_cache`` section.

        Args:
            file_path: Path to configuration file
            defaults: Options to override

        Returns:
            Options instance
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        suffix = file_path.suffix.lower()
        with open(file_path, "r", encoding="utf-8") as f:
            if suffix in [".yaml", ".yml"]:
                config_data = yaml.safe_load(f)
            elif suffix == ".json":
                config_data = json.load(f)
            else:
                raise InvalidArgument(
                    field="file_path",
                    value=str(file_path),
                    reason=f"has an unsupported configuration file format: {file_path.suffix}",
                    error_code="UNSUPPORTED_FILE_FORMAT",
                )

        if config_data is None:
            config_data = {}
        if isinstance(config_data, Mapping) and FILE_SECTION in config_data:
            config_data = config_data[FILE_SECTION] or {}

        logger.info(f"Loading request cache options from file {file_path}")
        return cls.from_dict(config_data, defaults=defaults)

    @staticmethod
    def to_json(options: RequestCacheOptions, indent: int = 2) -> str:
        return json.dumps(options.to_dict(), indent=indent)

    @staticmethod
    def to_yaml(options: RequestCacheOptions) -> str:
        return yaml.safe_dump(options.to_dict(), default_flow_style=False, sort_keys=False)

    @classmethod
    def save_to_file(cls, options: RequestCacheOptions, file_path: Union[str, Path]) -> None:
        """Save options to a YAML or JSON file.

        Args:
            options: Options to save
            file_path: Destination path, format chosen by suffix
        """
        file_path = Path(file_path)
        suffix = file_path.suffix.lower()

        if suffix in [".yaml", ".yml"]:
            content = cls.to_yaml(options)
        elif suffix == ".json":
            content = cls.to_json(options)
        else:
            raise InvalidArgument(
                field="file_path",
                value=str(file_path),
                reason=f"has an unsupported file format: {file_path.suffix}",
                error_code="UNSUPPORTED_FILE_FORMAT",
            )

        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Saved request cache options to {file_path}")


def create_request_cache_options(
    source: str = "environment",
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> RequestCacheOptions:
    """Factory function to create request cache options.

    Args:
        source: Configuration source ("environment", "file", "defaults")
        config_path: Path to configuration file (if source="file")
        overrides: Optional option overrides applied last

    Returns:
        Configured options instance
    """
    if source == "environment":
        options = RequestCacheConfig.from_environment()
    elif source == "file":
        if not config_path:
            raise InvalidArgument(
                field="config_path",
                value=config_path,
                reason="is required when source='file'",
            )
        options = RequestCacheConfig.from_file(config_path)
    elif source == "defaults":
        options = RequestCacheOptions()
    else:
        raise InvalidArgument(
            field="source",
            value=source,
            reason=f"is not a valid configuration source: {source}",
        )

    if overrides:
        options = RequestCacheConfig.from_dict(overrides, defaults=options)

    return options
