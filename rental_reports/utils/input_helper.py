"""
Interactive input over a text stream

InputHelper is the input source handed to reports that ask the user for
parameters. It writes prompts to an output stream and reads answers line by
line, so tests can drive it with io.StringIO.
"""
import sys
import logging
from datetime import date
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

YES_ANSWERS = {'y', 'yes'}
NO_ANSWERS = {'n', 'no'}


class InputHelper:
    """Prompts on an output stream and reads lines from an input stream"""

    def __init__(self, input_stream: Optional[TextIO] = None, output: Optional[TextIO] = None) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    @classmethod
    def wrap(cls, source, output: Optional[TextIO] = None) -> "InputHelper":
        """Returns source itself if it already is an InputHelper, otherwise wraps the stream"""
        if isinstance(source, cls):
            return source
        return cls(source, output=output)

    def _read_line(self) -> str:
        line = self.input_stream.readline()
        if line == '':
            raise EOFError("Input source is exhausted")
        return line.rstrip('\r\n')

    def _prompt(self, prompt: str) -> str:
        self.output.write(prompt)
        self.output.flush()
        return self._read_line()

    def _say(self, text: str) -> None:
        self.output.write(text + "\n")

    def get_string(self, prompt: str) -> str:
        return self._prompt(prompt)

    def get_int(self, prompt: str) -> int:
        while True:
            answer = self._prompt(prompt)
            try:
                return int(answer.strip())
            except ValueError:
                logger.debug(f"Rejected integer input: {answer!r}")
                self._say("Invalid input. Please enter a valid integer.")

    def get_float(self, prompt: str) -> float:
        while True:
            answer = self._prompt(prompt)
            try:
                return float(answer.strip())
            except ValueError:
                logger.debug(f"Rejected numeric input: {answer!r}")
                self._say("Invalid input. Please enter a valid number.")

    def get_confirmation(self, prompt: str) -> bool:
        """Asks a Y/N question until a recognised answer is given"""
        while True:
            answer = self._prompt(f"{prompt} (Y/N): ").strip().lower()
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self._say("Invalid input. Please enter Y or N.")

    def get_date(self, prompt: str, today: Optional[date] = None) -> date:
        """
        Reads a date in yyyy-MM-dd format

        The word "today" (any case) returns today's date.
        """
        while True:
            answer = self._prompt(prompt).strip()
            if answer.lower() == 'today':
                return today or date.today()
            try:
                return date.fromisoformat(answer)
            except ValueError:
                self._say("Invalid date format. Please use yyyy-MM-dd.")
