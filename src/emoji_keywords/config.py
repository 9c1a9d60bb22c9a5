"""Configuration management for the emoji keyword converter."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from config directory or project root
config_env = Path(__file__).parent.parent.parent / "config" / ".env"
if config_env.exists():
    load_dotenv(config_env)
else:
    load_dotenv()


class Config:
    """Application configuration."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Input documents
        self.emoji_file = Path(os.getenv("EMOJI_KEYWORDS_EMOJI_FILE", "emoji.json"))
        self.words_file = Path(os.getenv("EMOJI_KEYWORDS_WORDS_FILE", "words.json"))

        # Output document
        self.output_file = Path(
            os.getenv("EMOJI_KEYWORDS_OUTPUT_FILE", "emojis_with_keywords.json")
        )
        self.indent = int(os.getenv("EMOJI_KEYWORDS_INDENT", "2"))

        self.encoding = os.getenv("EMOJI_KEYWORDS_ENCODING", "utf-8")


def get_config() -> Config:
    """Get application configuration."""
    return Config()
