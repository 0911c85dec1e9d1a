"""
Configuration Management Module

This module defines the configuration schema for bankpull using Pydantic.
It handles:
1.  Process-wide settings (output directory, downloader tool, logging), read
    from environment variables prefixed with `BANKPULL_`.
2.  The fetch configuration file (`credentials` + `accounts`) loaded from YAML.
3.  Resolving relative paths in the fetch configuration against the file's own
    directory.
"""

from typing import Annotated, List, Optional, Dict, Any, Union
from pathlib import Path
from pydantic import BeforeValidator, Field, BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml

from .errors import ConfigurationError

DEFAULT_DOWNLOADER_TOOL = "bank-downloader"


def _stringify(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


# Identifiers, logins and passwords are opaque text, even when written as digits
Text = Annotated[str, BeforeValidator(_stringify)]


class CredentialConfig(BaseModel):
    """Login credentials for one bank."""
    bank: str = Field(..., description="Bank name, e.g. 'chase'")
    login: Text
    password: Text


class AccountConfig(BaseModel):
    """One account to fetch."""
    bank: str = Field(..., description="Bank name, matched against credentials")
    type: str = Field(..., description="Free-text account type (cc, checking, savings...)")
    id: Text = Field(..., description="Bank specific account identifier")
    login: Optional[Text] = Field(
        default=None,
        description="Selects among several credentials for the same bank"
    )


class FetchConfig(BaseModel):
    """
    Declarative description of what to fetch.

    Mirrors the YAML file passed on the command line:

        credentials:
          - {bank: chase, login: me, password: secret}
        accounts:
          - {bank: chase, type: cc, id: 1234}
    """
    credentials: List[CredentialConfig] = Field(default_factory=list)
    accounts: List[AccountConfig] = Field(default_factory=list)
    transactions_path: Optional[Path] = None

    def credentials_for(self, bank: str, login: Optional[str] = None) -> Optional[CredentialConfig]:
        """Return the first credentials entry for `bank` (and `login`, if given)."""
        for cred in self.credentials:
            if cred.bank.lower() != bank.lower():
                continue
            if login is not None and cred.login != login:
                continue
            return cred
        return None

    @classmethod
    def load(cls, config_path: Union[str, Path]) -> "FetchConfig":
        """
        Load the fetch configuration from a YAML file.

        Raises:
            ConfigurationError: if the file is missing, is not valid YAML, or
                does not match the schema.
        """
        path = Path(config_path)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                # BaseLoader keeps every scalar a string, so ids like 0123 are not read as octal
                file_data: Dict[str, Any] = yaml.load(f, Loader=yaml.BaseLoader) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(file_data, dict):
            raise ConfigurationError(f"Expected a mapping at the top of {path}")

        # Relative paths are relative to the config file, not the working directory
        if file_data.get('transactions_path'):
            path_val = Path(file_data['transactions_path'])
            if not path_val.is_absolute():
                file_data['transactions_path'] = path.resolve().parent / path_val

        try:
            return cls(**file_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e


class Settings(BaseSettings):
    """
    Global settings for bankpull.

    Values come from environment variables (prefixed with BANKPULL_) or the
    defaults below.
    """

    transactions_path: Path = Field(
        default=Path("./transactions"),
        description="Directory where retrieved exports are stored"
    )
    download_path: Optional[Path] = Field(
        default=None,
        description="Directory the downloader tool writes to (defaults to the OS download directory)"
    )
    downloader_tool: str = Field(
        default=DEFAULT_DOWNLOADER_TOOL,
        description="Name or path of the external downloader executable"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_dir: Optional[Path] = Field(
        default=None,
        description="When set, logs are also written to a dated file in this directory"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    model_config = SettingsConfigDict(
        env_prefix='BANKPULL_',
        extra='ignore'
    )

    def with_fetch_config(self, fetch_config: FetchConfig) -> "Settings":
        """Return a copy with overrides from the fetch configuration applied."""
        if fetch_config.transactions_path is None:
            return self
        return self.model_copy(update={"transactions_path": fetch_config.transactions_path})


# Global settings instance
settings = Settings()
