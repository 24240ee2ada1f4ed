"""Validation of user-supplied search and booking input."""

import logging
import re

from booktable.config import Config, get_config

logger = logging.getLogger(__name__)

# Patterns that indicate potential abuse or inappropriate content
BLOCKED_PATTERNS = [
    r"<script",
    r"javascript:",
    r"onclick",
    r"onerror",
    r"eval\(",
    r"exec\(",
]

MAX_TEXT_LENGTH = 100


class InputValidator:
    """Checks for search form fields.

    Every check returns ``(is_valid, error_message)``; the message is None
    when the value is acceptable.
    """

    @staticmethod
    def validate_text(value: str | None, field: str = "Input") -> tuple[bool, str | None]:
        """Validate an optional free-text filter such as location or cuisine."""
        if value is None or not value.strip():
            return True, None

        if len(value) > MAX_TEXT_LENGTH:
            logger.warning(f"{field} too long ({len(value)} > {MAX_TEXT_LENGTH} chars)")
            return False, f"{field} too long (max {MAX_TEXT_LENGTH} characters)."

        lowered = value.lower()
        for pattern in BLOCKED_PATTERNS:
            if re.search(pattern, lowered):
                logger.warning(f"Suspicious pattern in {field.lower()} ({pattern})")
                return False, f"{field} contains suspicious content."

        return True, None

    @staticmethod
    def validate_party_size(
        party_size: int, config: Config | None = None
    ) -> tuple[bool, str | None]:
        """Validate a party size against the configured limits.

        Args:
            party_size: Number of people
            config: Limits to check against (defaults to the global config)
        """
        config = config or get_config()
        min_party_size = config.min_party_size
        max_party_size = config.max_party_size

        if party_size < min_party_size or party_size > max_party_size:
            logger.warning(
                f"Invalid party size ({party_size} people, allowed: {min_party_size}-{max_party_size})"
            )
            return (
                False,
                f"Party size must be between {min_party_size} and {max_party_size} people.",
            )

        return True, None

    @classmethod
    def validate_search(
        cls,
        party_size: int,
        location: str | None,
        cuisine: str | None,
        config: Config | None = None,
    ) -> tuple[bool, str | None]:
        """Run every search form check, stopping at the first failure."""
        for is_valid, error in (
            cls.validate_party_size(party_size, config),
            cls.validate_text(location, "Location"),
            cls.validate_text(cuisine, "Cuisine"),
        ):
            if not is_valid:
                return False, error
        return True, None
