"""Handles the parsing, validation and persistence of the ClipTranslate configuration file."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError as RuamelYAMLError

from .errors import ConfigError, UnknownLanguageError
from .languages import Language, get_language
from .models import ProviderId

logger = logging.getLogger(__name__)

# Upper bound for a single provider call. `provider_timeout: null` waits
# indefinitely.
DEFAULT_PROVIDER_TIMEOUT = 10.0

# Registration order doubles as result priority.
DEFAULT_PROVIDER_ORDER: tuple[ProviderId, ...] = (
    ProviderId.GOOGLE,
    ProviderId.YANDEX,
    ProviderId.TURENG,
    ProviderId.SESLISOZLUK,
    ProviderId.PROMPT,
)


class ProviderSettings(BaseModel):
    """Settings for a specific translation provider."""

    enabled: bool = True
    api_key: str | None = None
    url: str | None = None
    supported_languages: list[str] | None = None
    max_results: int | None = Field(default=None, gt=0)
    extra: dict[str, Any] | None = None


class ClipboardSettings(BaseModel):
    """Settings for the clipboard watcher."""

    poll_interval: float = Field(default=0.5, gt=0)


class AnalyticsSettings(BaseModel):
    """Settings for usage tracking. Tracking is off unless a tracking id is set."""

    tracking_id: str | None = None
    client_id: str | None = None


def _default_providers() -> dict[ProviderId, ProviderSettings]:
    return {provider_id: ProviderSettings() for provider_id in DEFAULT_PROVIDER_ORDER}


class AppConfig(BaseModel):
    """The root configuration for ClipTranslate."""

    model_config = ConfigDict(extra="forbid")

    target_language: str = "Turkish"
    provider_timeout: float | None = Field(default=DEFAULT_PROVIDER_TIMEOUT, gt=0)
    providers: dict[ProviderId, ProviderSettings] = Field(default_factory=_default_providers)
    clipboard: ClipboardSettings = Field(default_factory=ClipboardSettings)
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)

    @field_validator("target_language")
    @classmethod
    def _validate_target_language(cls, value: str) -> str:
        """Normalize the target language to its display name."""
        try:
            return get_language(value).name
        except UnknownLanguageError as e:
            raise ValueError(str(e)) from e

    @field_validator("providers", mode="before")
    @classmethod
    def _fill_empty_provider_entries(cls, value: Any) -> Any:  # noqa: ANN401
        """Accept `google:` with no body as 'use defaults'."""
        if isinstance(value, dict):
            return {key: ({} if settings is None else settings) for key, settings in value.items()}
        return value

    @property
    def language(self) -> Language:
        """Return the configured target language."""
        return get_language(self.target_language)

    def provider_settings(self, provider_id: ProviderId) -> ProviderSettings:
        """Return the settings of a provider, or defaults when it is not configured."""
        return self.providers.get(provider_id) or ProviderSettings()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppConfig":
        """
        Create an AppConfig from a parsed YAML mapping.

        Raises:
            ConfigError: If the data does not describe a valid configuration.

        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            msg = f"Invalid or missing configuration: {e}"
            raise ConfigError(msg) from e


class StrictSingleQuoteLoader(yaml.SafeLoader):
    """
    A YAML loader that enforces the use of single quotes for all strings.

    It raises an error if any double-quoted strings are found.
    """


def _construct_scalar(loader: StrictSingleQuoteLoader, node: yaml.ScalarNode) -> Any:  # noqa: ANN401
    """Construct a scalar node, but first check its style."""
    if node.style == '"':
        line = node.start_mark.line + 1
        col = node.start_mark.column + 1
        msg = f"Double-quoted string found at line {line}, column {col}. Please use single quotes (') instead."
        raise yaml.YAMLError(msg)
    return loader.construct_scalar(node)


StrictSingleQuoteLoader.add_constructor("tag:yaml.org,2002:str", _construct_scalar)


def load_config(config_path: str | Path) -> AppConfig:
    """
    Load, parse, and validate the YAML configuration file.

    Args:
        config_path: The path to the configuration file.

    Returns:
        The validated AppConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If there is a syntax error in the YAML file.
        ConfigError: If the configuration is invalid.

    """
    path = Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found at: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.load(f, Loader=StrictSingleQuoteLoader)  # noqa: S506
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML config file: {e}"
        raise yaml.YAMLError(msg) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = "Config file must be a YAML mapping (dictionary)."
        raise ConfigError(msg)

    return AppConfig.from_dict(data)


def save_settings(
    config_path: str | Path,
    *,
    target_language: Language | None = None,
    enabled: dict[ProviderId, bool] | None = None,
) -> bool:
    """
    Persist the target language and provider flags back to the configuration file.

    ruamel.yaml is used so that comments and formatting of the file survive.
    A missing file is created. Failures are logged and reported through the
    return value; they never interrupt the caller.

    Args:
        config_path: Path to the configuration file.
        target_language: The language whose name is stored as `target_language`.
        enabled: Provider id -> enabled flag.

    Returns:
        True if the file was written.

    """
    if target_language is None and not enabled:
        return False

    path = Path(config_path)
    yaml_handler = YAML()
    yaml_handler.preserve_quotes = True
    yaml_handler.default_flow_style = False

    try:
        data: Any = None
        if path.is_file():
            with path.open(encoding="utf-8") as f:
                data = yaml_handler.load(f)
        if data is None:
            data = {}

        if target_language is not None:
            data["target_language"] = target_language.name

        if enabled:
            providers = data.get("providers")
            if not isinstance(providers, dict):
                providers = {}
                data["providers"] = providers
            for provider_id, flag in enabled.items():
                entry = providers.get(provider_id.value)
                if not isinstance(entry, dict):
                    entry = {}
                    providers[provider_id.value] = entry
                entry["enabled"] = flag

        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml_handler.dump(data, f)
    except (OSError, ValueError, TypeError, RuamelYAMLError) as e:
        logger.warning("Failed to save settings to %s: %s", path, e)
        return False

    logger.info("Saved settings to %s", path)
    return True
