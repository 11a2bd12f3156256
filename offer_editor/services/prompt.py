"""Line-based operator prompts.

The update flow talks to the operator only through a ``Prompt`` so a scripted
sequence of answers can stand in for a live terminal.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, Protocol, TextIO

from offer_editor.exceptions import PromptClosedError


class Prompt(Protocol):
    """Operator I/O channel."""

    async def ask(self, question: str) -> str:
        """Show ``question`` and return one line of input without its terminator."""
        ...

    def say(self, message: str) -> None:
        """Show an informational line."""
        ...


def _strip_line_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line


class TerminalPrompt:
    """Prompt over stdin/stdout (or any pair of text streams)."""

    def __init__(self, input_stream: TextIO | None = None, output_stream: TextIO | None = None):
        self._input = input_stream
        self._output = output_stream

    def _read_answer(self, question: str) -> str:
        input_stream = self._input or sys.stdin
        output_stream = self._output or sys.stdout
        output_stream.write(question)
        output_stream.flush()
        line = input_stream.readline()
        if not line:
            raise PromptClosedError("Input closed before an answer was given")
        return _strip_line_terminator(line)

    async def ask(self, question: str) -> str:
        # Blocks the loop; nothing else is scheduled while the operator types.
        return self._read_answer(question)

    def say(self, message: str) -> None:
        output_stream = self._output or sys.stdout
        output_stream.write(message + "\n")
        output_stream.flush()


class ScriptedPrompt:
    """Prompt that replays canned answers and records the conversation."""

    def __init__(self, answers: Iterable[str]):
        self._answers = deque(answers)
        self.questions: list[str] = []
        self.messages: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._answers)

    async def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self._answers:
            raise PromptClosedError(f"No scripted answer for: {question!r}")
        return self._answers.popleft()

    def say(self, message: str) -> None:
        self.messages.append(message)
