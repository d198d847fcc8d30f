from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ..core.exceptions import OperationCanceled


class Prompter(Protocol):
    def ask(self, field: str, label: str) -> str:
        """Return the human's answer, or raise OperationCanceled on Cancel."""

        raise NotImplementedError


class MappingPrompter:
    """Answers prompts from a pre-collected mapping (e.g. a JSON request body).

    A missing or null answer is treated as Cancel.
    """

    def __init__(self, answers: Optional[Mapping[str, Any]] = None):
        self._answers = dict(answers or {})

    def ask(self, field: str, label: str) -> str:
        value = self._answers.get(field)
        if value is None:
            raise OperationCanceled(f"Operation canceled ({label})")
        return str(value)
