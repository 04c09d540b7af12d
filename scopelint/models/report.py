from collections.abc import Iterable

from pydantic import BaseModel, Field

from scopelint.models.finding import InvalidItem


class Report(BaseModel):
    """Append-only collection of invalid items across all checked files."""

    items: list[InvalidItem] = Field(default_factory=list)

    def add_item(self, item: InvalidItem) -> None:
        self.items.append(item)

    def add_items(self, items: Iterable[InvalidItem]) -> None:
        self.items.extend(items)

    @property
    def reported_items(self) -> list[InvalidItem]:
        """Unsuppressed items in their stable display order."""

        return sorted(
            (item for item in self.items if not item.suppressed),
            key=InvalidItem.sort_key,
        )

    @property
    def suppressed_count(self) -> int:
        return sum(1 for item in self.items if item.suppressed)

    def is_valid(self) -> bool:
        """Returns true if no unsuppressed item was found."""

        return all(item.suppressed for item in self.items)

    def render(self) -> str:
        """Render one line per unsuppressed item.

        Returns:
            Newline-terminated lines sorted by rule kind, file, line and text,
            or an empty string for a valid report.
        """

        return "".join(f"{item.description()}\n" for item in self.reported_items)
