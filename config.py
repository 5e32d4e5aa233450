"""Configuration management for the memory match game."""

from dataclasses import dataclass, field


DEFAULT_SYMBOLS: tuple[str, ...] = (
    "apple",
    "banana",
    "cherry",
    "pineapple",
    "grape",
    "watermelon",
    "strawberry",
    "peach",
)


@dataclass(frozen=True)
class MatchConfig:
    """Default matching rules."""

    symbols: tuple[str, ...] = DEFAULT_SYMBOLS
    mismatch_delay: float = 1.0  # Seconds before a mismatched pair flips back
    match_points: int = 2
    mismatch_penalty: int = 1
    seed: int | None = None


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = False
    log_level: str = "INFO"

    match: MatchConfig = field(default_factory=MatchConfig)


# Global configuration instance
config = AppConfig()
