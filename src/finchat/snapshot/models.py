from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import SNAPSHOT_SEPARATOR, SNAPSHOT_UNAVAILABLE


class Snapshot(BaseModel):
    """Textual summary of a family's financial state used as LLM context."""

    model_config = ConfigDict(frozen=True)

    lines: tuple[str, ...] = Field(default=(), description="Snapshot lines in display order")
    available: bool = Field(default=True, description="False when the snapshot could not be built")

    @field_validator("lines")
    @classmethod
    def _drop_blank_lines(cls, lines: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(line for line in lines if line and line.strip())

    @classmethod
    def from_lines(cls, lines: Iterable[str | None]) -> "Snapshot":
        """Build a snapshot, dropping omitted (None) lines."""
        return cls(lines=tuple(line for line in lines if line))

    @classmethod
    def unavailable(cls) -> "Snapshot":
        """The fallback snapshot used when building fails."""
        return cls(available=False)

    @property
    def text(self) -> str:
        if not self.available:
            return SNAPSHOT_UNAVAILABLE
        return SNAPSHOT_SEPARATOR.join(self.lines)

    def __str__(self) -> str:
        return self.text
