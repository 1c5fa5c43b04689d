"""Configuration handling for the CLI."""

import json
import pathlib
import typing

import platformdirs
import pydantic
import pydantic_settings
import structlog

from cloudprint import consts

logger = structlog.get_logger(consts.APP_NAME)


def get_config_file() -> pathlib.Path:
    """Return the location of config.json in the platform-specific config directory."""
    config_dir = pathlib.Path(platformdirs.user_config_dir(consts.APP_NAME, consts.APP_AUTHOR))
    return config_dir / "config.json"


def load_json_config() -> dict[str, typing.Any]:
    """Load configuration from config.json."""
    config_file = get_config_file()
    logger.info("Attempting to load config.json", config_file=config_file)
    if config_file.exists():
        try:
            with config_file.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError):
            # Fallback if JSON is malformed
            logger.exception("Failed to read config.json", config_file=config_file)
            return {}
    logger.info("No config.json found.")
    return {}


class Settings(pydantic_settings.BaseSettings):
    """Settings loaded from environment variables (CLOUDPRINT_*), .env or config.json."""

    access_token: pydantic.SecretStr | None = None
    refresh_token: pydantic.SecretStr | None = None
    client_id: str | None = None
    client_secret: pydantic.SecretStr | None = None
    token_url: str = consts.TOKEN_URL

    default_printer_id: str | None = None
    timeout: float = consts.DEFAULT_TIMEOUT

    model_config = pydantic_settings.SettingsConfigDict(env_prefix="CLOUDPRINT_", env_file=".env", extra="ignore")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[pydantic_settings.BaseSettings],
        init_settings: pydantic_settings.PydanticBaseSettingsSource,
        env_settings: pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[pydantic_settings.PydanticBaseSettingsSource, ...]:
        """Customise settings sources to include config.json."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            pydantic_settings.InitSettingsSource(settings_cls, load_json_config()),
            file_secret_settings,
        )

    @property
    def can_refresh(self) -> bool:
        """Whether enough OAuth material is configured to mint an access token."""
        return bool(self.refresh_token and self.client_id and self.client_secret)


def save_json_config(current_settings: Settings) -> None:
    """Save the persistable part of the configuration to config.json."""
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)

    save_data = load_json_config()
    if current_settings.default_printer_id is not None:
        save_data["default_printer_id"] = current_settings.default_printer_id

    with config_file.open("w", encoding="utf-8") as f:
        json.dump(save_data, f, indent=4)


if typing.TYPE_CHECKING:
    settings: Settings

_settings: Settings | None = None


def __getattr__(name: str) -> typing.Any:
    """Implement lazy loading for settings to allow logging initialization first."""
    if name == "settings":
        global _settings
        if _settings is None:
            _settings = Settings()
        return _settings
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
