"""Configuration manager — read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from fila_cli.client.errors import ConfigurationError
from fila_cli.config.constants import (
    CONFIG_FILE,
    DEFAULT_TIMEOUT,
    ENV_API_TOKEN,
    ENV_API_URL,
    ENV_PROFILE,
)
from fila_cli.config.models import CLIConfig, Profile
from fila_cli.models import Token

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk and resolves API profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        raw = self.config_path.read_bytes()
        data = tomllib.loads(raw.decode())
        profiles: dict[str, Profile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = Profile(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Tokens live in this file: owner-only directory and file.
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                prof_dict = profile.model_dump(exclude={"name"}, exclude_none=True)
                if prof_dict.get("timeout") == DEFAULT_TIMEOUT:
                    del prof_dict["timeout"]
                data["profiles"][name] = prof_dict
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def add_profile(self, profile: Profile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> Profile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def save_token(self, profile: Profile, token: Token) -> Profile:
        """Persist a session token on *profile*, creating the profile if needed."""
        stored = self.config.profiles.get(profile.name)
        base = stored or profile
        updated = base.model_copy(update={
            "token": token.token, "expira": token.expira, "token_override": False,
        })
        self.add_profile(updated)
        return updated

    def delete_token(self, name: str) -> bool:
        profile = self.config.profiles.get(name)
        if profile is None or profile.token is None:
            return False
        self.config.profiles[name] = profile.model_copy(
            update={"token": None, "expira": None},
        )
        self.save()
        return True

    def resolve_profile(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        token: str | None = None,
    ) -> Profile:
        """Resolve the API connection.

        Precedence: CLI flags > env vars > config profile. A stored token past
        its expiry is dropped from the result.
        """
        env_profile = os.environ.get(ENV_PROFILE)
        profile = self.get_profile(profile_name or env_profile)

        env_url = os.environ.get(ENV_API_URL)
        env_token = os.environ.get(ENV_API_TOKEN)

        resolved_url = url or env_url or (profile.url if profile else None)
        if not resolved_url:
            raise ConfigurationError(
                "No API URL configured. Use 'fila config add' or set "
                f"{ENV_API_URL} or pass --url."
            )

        override = token or env_token
        stored_token = profile.token if profile and profile.authenticated else None
        return Profile(
            name=profile.name if profile else (profile_name or env_profile or "default"),
            url=resolved_url.rstrip("/"),
            token=override or stored_token,
            expira=None if override else (profile.expira if stored_token else None),
            timeout=profile.timeout if profile else DEFAULT_TIMEOUT,
            token_override=bool(override),
        )


class ProfileTokenStore:
    """Token storage backed by a profile in the config file."""

    def __init__(self, manager: ConfigManager, profile: Profile) -> None:
        self.manager = manager
        self.profile = profile

    def get_token(self) -> str | None:
        return self.profile.token if self.profile.authenticated else None

    def save_token(self, token: Token) -> None:
        self.profile = self.manager.save_token(self.profile, token)

    def delete_token(self) -> None:
        """Forget the token; the stored session is only cleared if it was the one used."""
        if not self.profile.token_override:
            self.manager.delete_token(self.profile.name)
        self.profile = self.profile.model_copy(update={"token": None, "expira": None})
