import logging
import subprocess
from pathlib import Path
from typing import Final

from pydantic import BaseModel

from scopelint.config import FOUNDRY_TOML

logger = logging.getLogger(__name__)

FORGE_FMT_CHECK: Final[list[str]] = ["forge", "fmt", "--check"]
TAPLO_OPTIONS: Final[dict[str, str]] = {
    "allowed_blank_lines": "1",
    "indent_entries": "true",
    "reorder_keys": "true",
}


class FormattingService(BaseModel):
    """Verify that Solidity sources and `foundry.toml` are formatted.

    Formatting is delegated to `forge fmt` and `taplo fmt`, both run in check
    mode so no file is rewritten.
    """

    src: Path

    def check(self) -> bool:
        """Returns true if both formatters report no changes."""

        forge_ok = self._run(FORGE_FMT_CHECK)

        taplo_ok = True
        if (self.src / FOUNDRY_TOML).is_file():
            taplo_ok = self._run(self.taplo_command())
        else:
            logger.debug("No %s in %s, skipping taplo", FOUNDRY_TOML, self.src)

        return forge_ok and taplo_ok

    @staticmethod
    def taplo_command() -> list[str]:
        command = ["taplo", "fmt", "--check"]
        for key, value in TAPLO_OPTIONS.items():
            command.extend(["--option", f"{key}={value}"])
        command.append(FOUNDRY_TOML)
        return command

    def _run(self, command: list[str]) -> bool:
        logger.debug("Running %s in %s", " ".join(command), self.src)
        try:
            result = subprocess.run(command, cwd=self.src, capture_output=True, text=True)
        except FileNotFoundError:
            logger.error("%s is not installed or not on PATH", command[0])
            return False

        if result.returncode != 0:
            logger.warning(
                "%s reported unformatted files:\n%s", command[0], result.stdout + result.stderr
            )
            return False
        return True
