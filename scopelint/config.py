import logging
import tomllib
from pathlib import Path, PurePosixPath
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

FOUNDRY_TOML: Final[str] = "foundry.toml"
SOLIDITY_SUFFIX: Final[str] = ".sol"
SCRIPT_SUFFIX: Final[str] = ".s.sol"
TEST_SUFFIX: Final[str] = ".t.sol"


class CheckConfig(BaseModel):
    """Project layout and run options for a convention check."""

    root: Path = Field(default_factory=Path.cwd)
    src: str = "src"
    script: str = "script"
    test: str = "test"
    jobs: int = Field(default=1, ge=1)
    check_formatting: bool = True

    @field_validator("src", "script", "test")
    @classmethod
    def normalize_root(cls, value: str) -> str:
        normalized = PurePosixPath(value.replace("\\", "/")).as_posix()
        if normalized in ("", ".") or normalized.startswith("/"):
            raise ValueError(f"Root must be a relative directory, got {value!r}")
        return normalized

    @property
    def roots(self) -> tuple[str, ...]:
        """Configured roots in walk order, without duplicates."""

        return tuple(dict.fromkeys((self.src, self.script, self.test)))

    @classmethod
    def from_project(cls, root: Path, **overrides: Any) -> "CheckConfig":
        """Build a configuration for the project at `root`.

        Directory names are read from `[profile.default]` in `foundry.toml`
        when the file exists. Overrides that are None are ignored.

        Raises:
            ValueError: If `foundry.toml` exists but cannot be read or parsed.
        """

        values: dict[str, Any] = {}
        foundry_toml = root / FOUNDRY_TOML
        if foundry_toml.is_file():
            try:
                data = tomllib.loads(foundry_toml.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
                raise ValueError(f"Failed to read {foundry_toml}: {e}") from e

            profile = data.get("profile", {}).get("default", {})
            for key in ("src", "script", "test"):
                if isinstance(profile.get(key), str):
                    values[key] = profile[key]
            logger.debug("Loaded project layout from %s: %s", foundry_toml, values)

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(root=root, **values)
