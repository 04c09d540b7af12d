import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import BaseModel

from scopelint.config import SOLIDITY_SUFFIX, CheckConfig
from scopelint.models.base import RuleKind
from scopelint.models.finding import InvalidItem
from scopelint.models.report import Report
from scopelint.services.classifier import classify
from scopelint.services.directives import extract_directives
from scopelint.services.solidity_parser.parser import SolidityParser
from scopelint.services.suppression import SuppressionIndex
from scopelint.services.validators import ParsedFile, run_validators
from scopelint.utils.files import collect_files, read_source

logger = logging.getLogger(__name__)


class ConventionChecker(BaseModel):
    """Run every convention validator over a forge project.

    Files under the configured `src`, `script` and `test` roots are parsed
    independently, so with `jobs > 1` they are checked on a thread pool. The
    report is sorted when rendered, so its output does not depend on `jobs`.
    """

    config: CheckConfig

    def run(self) -> Report:
        """Check the whole project.

        Returns:
            Report with every finding, suppressed ones included.

        Raises:
            SolidityParseError: If any file fails to parse.
        """

        files = self._collect_solidity_files()
        logger.debug("Checking %d files with %d jobs", len(files), self.config.jobs)

        report = Report()
        if self.config.jobs > 1:
            with ThreadPoolExecutor(max_workers=self.config.jobs) as executor:
                for items in executor.map(self.check_file, files):
                    report.add_items(items)
        else:
            for path in files:
                report.add_items(self.check_file(path))

        logger.info(
            "Checked %d files: %d findings, %d suppressed",
            len(files),
            len(report.reported_items),
            report.suppressed_count,
        )
        return report

    def check_file(self, path: Path) -> list[InvalidItem]:
        """Check one file on disk, logging and skipping it if it cannot be read."""

        source = read_source(path)
        if source is None:
            return []
        return self.check_source(path.relative_to(self.config.root).as_posix(), source)

    def check_source(self, relative_path: str, source: bytes) -> list[InvalidItem]:
        """Check in-memory file contents.

        Args:
            relative_path: Path relative to the project root, used for
                classification and display.
            source: Raw file contents.

        Returns:
            Validator findings followed by invalid directive findings.
        """

        display_path = f"./{relative_path}"
        unit = SolidityParser().parse(source, display_path)
        suppression = SuppressionIndex.build(extract_directives(unit.comments, source))

        parsed = ParsedFile(
            path=display_path,
            kind=classify(relative_path, self.config),
            source=source,
            unit=unit,
            suppression=suppression,
        )
        items = run_validators(parsed)
        items.extend(
            InvalidItem(
                kind=RuleKind.DIRECTIVE,
                file=display_path,
                text=directive.reason,
                line=directive.line,
            )
            for directive in suppression.invalid_directives
        )
        return items

    def _collect_solidity_files(self) -> list[Path]:
        return collect_files(self.config.root, self.config.roots, SOLIDITY_SUFFIX)
