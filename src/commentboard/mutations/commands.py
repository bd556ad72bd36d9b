"""Request objects built by the presentation layer."""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class SubmitComment:
    comment: str

    def as_form(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class SubmitFeedback:
    name: str
    email: str
    feedback: str

    def as_form(self) -> Dict[str, str]:
        return asdict(self)
