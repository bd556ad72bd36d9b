"""Composable field constraints for form validation."""

import re
from dataclasses import dataclass
from typing import Optional


EMAIL_REGEX = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'


@dataclass(frozen=True)
class Required:
    """Value must be non-empty after trimming whitespace."""
    label: str

    def check(self, value: str) -> Optional[str]:
        if value.strip() == "":
            return f"{self.label} is required"
        return None


@dataclass(frozen=True)
class MinLength:
    """Value as submitted must have at least `length` characters."""
    label: str
    length: int

    def check(self, value: str) -> Optional[str]:
        if len(value) < self.length:
            return f"{self.label} must be at least {self.length} characters"
        return None


@dataclass(frozen=True)
class MaxLength:
    """Value as submitted must have at most `length` characters."""
    label: str
    length: int

    def check(self, value: str) -> Optional[str]:
        if len(value) > self.length:
            return f"{self.label} must not exceed {self.length} characters"
        return None


@dataclass(frozen=True)
class Pattern:
    """Trimmed value must match a regular expression."""
    regex: str
    message: str

    def check(self, value: str) -> Optional[str]:
        if not re.match(self.regex, value.strip()):
            return self.message
        return None
