"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
import tomllib

from .constants import (
    DEFAULT_MAX_MASK_LENGTH,
    DEFAULT_MAX_VALUE_LENGTH,
    DEFAULT_PLACEHOLDER_CHAR,
)

NAMED_MASK_PREFIX = "@"


@dataclass
class MaskConfig:
    """Configuration for the input-mask command line.

    Attributes:
        masks: Named masks, referenced on the command line as ``@name``.
        placeholder_char: Character shown for wildcard slots in templates.
        max_mask_length: Longest raw mask that will be compiled.
        max_value_length: Longest value or text that will be processed.

    Examples:
        MaskConfig(masks={"phone": "(000) 000-0000"}, placeholder_char="#")
    """

    masks: dict[str, str] = field(default_factory=dict)

    # Formatting
    placeholder_char: str = DEFAULT_PLACEHOLDER_CHAR

    # Limits
    max_mask_length: int = DEFAULT_MAX_MASK_LENGTH
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`placeholder_char` must be a single character")
    """


def load_config(search_path: Path) -> MaskConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.input-mask]`` table from `pyproject.toml` and the
    ``[input-mask]`` or ``[tool.input-mask]`` table from `.input-mask.toml`
    when present. Returns default values when no configuration is found. TOML
    files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        MaskConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("forms"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "input-mask")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".input-mask.toml",
            table_paths=[("input-mask",), ("tool", "input-mask")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return MaskConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> MaskConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> MaskConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return MaskConfig()

    try:
        return MaskConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: MaskConfig) -> None:
    """Validate a `MaskConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If named masks are not a string table, the placeholder is
            not a single character, or limits are not positive integers.
    """
    if not isinstance(config.masks, dict):
        raise ConfigError("`masks` must be a table of mask strings")
    for name, mask in config.masks.items():
        if not isinstance(mask, str):
            raise ConfigError(f"mask `{name}` must be a string")
        if not mask:
            raise ConfigError(f"mask `{name}` must not be empty")

    if not isinstance(config.placeholder_char, str) or len(config.placeholder_char) != 1:
        raise ConfigError("`placeholder_char` must be a single character")

    limits = {
        "max_mask_length": config.max_mask_length,
        "max_value_length": config.max_value_length,
    }
    _ensure_integers(limits)
    _ensure_positive(limits)


def apply_overrides(config: MaskConfig, **overrides: object) -> MaskConfig:
    """Apply override values to a `MaskConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        MaskConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `MaskConfig`.

    Examples:
        updated = apply_overrides(config, placeholder_char="*")
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> MaskConfig:
    """Load, override, and validate configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), placeholder_char="*")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def resolve_mask(mask: str, config: MaskConfig) -> str:
    """Expand an ``@name`` reference to the configured mask.

    Any other string is returned unchanged, so raw masks never need quoting
    unless they start with ``@``; ``\\@`` escapes a literal at sign.

    Raises:
        ConfigError: If `mask` names a mask that is not configured, or is
            longer than `config.max_mask_length`.

    Examples:
        resolve_mask("@phone", MaskConfig(masks={"phone": "(000) 000-0000"}))
    """
    if mask.startswith(NAMED_MASK_PREFIX):
        name = mask[len(NAMED_MASK_PREFIX) :]
        try:
            mask = config.masks[name]
        except KeyError as error:
            raise ConfigError(f"Unknown mask `{name}`") from error

    if len(mask) > config.max_mask_length:
        raise ConfigError(
            f"Mask is {len(mask)} characters long (limit: {config.max_mask_length})"
        )
    return mask


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
