"""Pydantic models for hookmux configuration."""

import warnings

from pydantic import BaseModel, ConfigDict, model_validator


class _StrictConfig(BaseModel):
    """Base config: frozen, warns on unknown keys."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _warn_unknown_keys(cls, values: dict) -> dict:
        if not isinstance(values, dict):
            return values
        known = set(cls.model_fields.keys())
        unknown = set(values.keys()) - known
        for key in sorted(unknown):
            warnings.warn(f"Unknown config key: {key!r}", UserWarning, stacklevel=2)
        return values


class HookmuxConfig(_StrictConfig):
    """Merged [hooks] table from hookmux.toml / [tool.hookmux]."""

    hooks: dict[str, str] = {}

    def command(self, hook_name: str) -> str | None:
        """Configured command for a hook, None when unset or blank."""
        return _nonBlank(self.hooks.get(hook_name))


class PackageMetadata(BaseModel):
    """Legacy [tool.hookmux.scripts] table. Keys are hook names without hyphens."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    scripts: dict[str, str] = {}

    def command(self, hook_name: str) -> str | None:
        return _nonBlank(self.scripts.get(legacyScriptName(hook_name)))


def legacyScriptName(hook_name: str) -> str:
    """pre-commit -> precommit"""
    return hook_name.replace("-", "")


def _nonBlank(cmd: str | None) -> str | None:
    if cmd is None or not cmd.strip():
        return None
    return cmd
