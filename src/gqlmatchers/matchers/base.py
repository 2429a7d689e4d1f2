"""Matcher protocol shared by all gqlmatchers matchers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gqlmatchers.types import TypeView, type_name


class Matcher(ABC):
    """Base class for matchers.

    ``matches`` runs the check and stores its outcome; ``failure_message``
    explains the last failed ``matches`` call.
    """

    @abstractmethod
    def matches(self, value: Any) -> bool:
        """Return True if value satisfies the matcher."""
        ...

    @property
    @abstractmethod
    def failure_message(self) -> str:
        """Explain why the last ``matches`` call failed."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description of what the matcher expects."""
        ...


def describe_subject(subject: Any) -> str:
    """Display name for a type, model class or record in failure messages."""
    if isinstance(subject, type):
        return subject.__name__
    if isinstance(subject, TypeView):
        return type_name(subject)
    return repr(subject)
