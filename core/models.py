"""Pydantic models for StronglyTyped data structures."""

from pydantic import BaseModel, ConfigDict, Field


class SessionStats(BaseModel):
    """Final statistics of a finished typing session."""

    wpm: int = Field(..., description="Words per minute from fully correct words")
    accuracy: int = Field(
        ..., description="Keystroke accuracy in percent (0 when nothing was typed)"
    )
    correct_chars: int = Field(..., description="Correct keystrokes")
    incorrect_chars: int = Field(..., description="Incorrect keystrokes")
    correct_words: int = Field(..., description="Committed words matching target")
    incorrect_words: int = Field(..., description="Committed words with mistakes")
    duration_sec: float = Field(..., description="Session duration in seconds")

    model_config = ConfigDict(extra="ignore", frozen=True)

    @property
    def has_keystrokes(self) -> bool:
        """Whether any character was typed during the session."""
        return self.correct_chars + self.incorrect_chars > 0
