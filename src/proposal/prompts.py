"""
Operator prompts.

The builder describes *what* to ask as ``Prompt`` values; an operator
channel decides *how*. ``ConsoleOperator`` talks to a terminal,
``ScriptedOperator`` replays recorded answers.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from .errors import AmbiguousSelectionError, InvalidArgumentError, ProposalError

logger = logging.getLogger(__name__)

__all__ = ["Prompt", "Operator", "ConsoleOperator", "ScriptedOperator", "load_answers"]

PROMPT_KINDS = ("select", "input", "number", "confirm")
YES = ("y", "yes")
NO = ("n", "no", "")


@dataclass(frozen=True)
class Prompt:
    kind: str
    name: str
    message: str
    choices: list[str] = field(default_factory=list)

    def __post_init__(self):
        if self.kind not in PROMPT_KINDS:
            raise ValueError(f"Unknown prompt kind: {self.kind}")


class Operator(Protocol):
    def ask(self, prompt: Prompt) -> Any: ...


class ConsoleOperator:
    """Interactive terminal operator. Re-asks until an answer is usable."""

    def __init__(self, input_fn=input, output_fn=print):
        self._input = input_fn
        self._print = output_fn

    def ask(self, prompt: Prompt) -> Any:
        if prompt.kind == "select":
            return self._ask_select(prompt)
        if prompt.kind == "confirm":
            return self._ask_confirm(prompt)
        if prompt.kind == "number":
            return self._ask_number(prompt)
        return self._input(f"{prompt.message}: ")

    def _ask_select(self, prompt: Prompt) -> str:
        self._print(prompt.message)
        for i, choice in enumerate(prompt.choices, 1):
            self._print(f"  [{i}] {choice}")
        while True:
            answer = self._input("Choice: ").strip()
            if answer in prompt.choices:
                return answer
            if answer.isdigit() and 1 <= int(answer) <= len(prompt.choices):
                return prompt.choices[int(answer) - 1]
            self._print(f"Invalid choice: {answer!r}")

    def _ask_confirm(self, prompt: Prompt) -> bool:
        while True:
            answer = self._input(f"{prompt.message} (y/N): ").strip().lower()
            if answer in YES:
                return True
            if answer in NO:
                return False
            self._print("Please answer y or n")

    def _ask_number(self, prompt: Prompt) -> int:
        while True:
            answer = self._input(f"{prompt.message}: ").strip()
            try:
                return int(answer or "0")
            except ValueError:
                self._print(f"Not an integer: {answer!r}")


class ScriptedOperator:
    """Answers prompts from a fixed sequence, in order."""

    def __init__(self, answers: Iterable[Any]):
        self._answers = list(answers)
        self._position = 0
        self.asked: list[Prompt] = []

    def ask(self, prompt: Prompt) -> Any:
        self.asked.append(prompt)
        if self._position >= len(self._answers):
            raise ProposalError(f"No recorded answer for prompt '{prompt.name}': {prompt.message}")
        answer = self._answers[self._position]
        self._position += 1
        logger.debug("Scripted answer for %s: %r", prompt.name, answer)
        if prompt.kind == "confirm" and isinstance(answer, str):
            return answer.strip().lower() in YES
        if prompt.kind == "select":
            return self._resolve_choice(prompt, answer)
        if prompt.kind == "number":
            try:
                return int(answer)
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError(f"Recorded answer for '{prompt.name}' is not an integer: {answer!r}") from e
        if prompt.kind == "input":
            # raw answers are text, the builder does its own coercion
            return answer if isinstance(answer, str) else json.dumps(answer)
        return answer

    @staticmethod
    def _resolve_choice(prompt: Prompt, answer: Any) -> Any:
        # 1-based index, like the console menu; text is left to the caller to match
        is_index = isinstance(answer, int) and not isinstance(answer, bool)
        if not (is_index or (isinstance(answer, str) and answer.strip().isdigit())):
            return answer
        index = int(answer)
        if not 1 <= index <= len(prompt.choices):
            raise AmbiguousSelectionError(
                f"Choice {index} for '{prompt.name}' is out of range 1..{len(prompt.choices)}"
            )
        return prompt.choices[index - 1]

    @property
    def remaining(self) -> int:
        return len(self._answers) - self._position


def load_answers(path: str | Path) -> ScriptedOperator:
    """Build a ScriptedOperator from a JSON list of answers."""
    with open(path, encoding="utf-8") as f:
        answers = json.load(f)
    if not isinstance(answers, list):
        raise ProposalError(f"Answers file {path} must contain a JSON list")
    return ScriptedOperator(answers)
