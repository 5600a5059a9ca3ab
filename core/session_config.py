"""Typing session configuration with Pydantic validation."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SessionMode(str, Enum):
    """How a session ends."""

    TIMED = "timed"
    WORDS = "words"


class SessionConfig(BaseModel):
    """Configuration for a typing session with validation."""

    words_per_line: int = Field(
        default=10, gt=0, description="Words rendered on each line"
    )
    lines_per_page: int = Field(
        default=3, gt=0, description="Number of visible lines"
    )
    min_word_length: int = Field(
        default=2, ge=1, description="Shortest generated word (code points)"
    )
    max_word_length: int = Field(
        default=8, ge=1, description="Longest generated word (code points)"
    )
    duration_sec: int = Field(
        default=30, gt=0, description="Length of a timed session in seconds"
    )
    mode: SessionMode = Field(
        default=SessionMode.TIMED,
        description="End the session on timeout or after word_count words",
    )
    word_count: int = Field(
        default=25, gt=0, description="Number of words in words mode"
    )

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("max_word_length")
    @classmethod
    def validate_length_bounds(cls, v, info):
        """Validate interdependent field relationships."""
        if "min_word_length" in info.data and v < info.data["min_word_length"]:
            raise ValueError(
                f"max_word_length ({v}) must not be "
                f"less than min_word_length ({info.data['min_word_length']})"
            )
        return v

    @property
    def page_size(self) -> int:
        """Number of words in the visible window."""
        return self.words_per_line * self.lines_per_page

    @property
    def replenish_offset(self) -> int:
        """Distance from the stream end at which more words are requested."""
        return self.words_per_line * (self.lines_per_page // 2)

    @property
    def is_timed(self) -> bool:
        return self.mode == SessionMode.TIMED


__all__ = ["SessionConfig", "SessionMode"]
