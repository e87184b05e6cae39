"""Ask questions on the console and deliver the answers."""

import logging
from typing import Any, Iterable, List, Optional, TextIO

from rich.console import Console

from weezard import config
from weezard.extractor import questions_for
from weezard.errors import ReadError
from weezard.question import Question, render_template

logger = logging.getLogger(__name__)


class PromptRunner:
    """Run the prompt/read/resolve loop for one or many questions."""

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None, template: Optional[str] = None):
        """
        Initialize the runner.

        Args:
            console: Console prompts are printed to. Defaults to stdout.
            stdin: Stream answers are read from. When None, answers are
                read with console.input().
            template: Template for this runner only. When None, the
                process-wide template is used.
        """
        self.console = console if console is not None else Console()
        self.stdin = stdin
        self.template = template

    def render(self, question: Question) -> None:
        """Print the prompt for a question, without a newline."""
        template = self.template if self.template is not None else config.get_template()
        markup = render_template(template, question)
        self.console.print(markup, end="", highlight=False, emoji=False, soft_wrap=True)

    def read_line(self) -> str:
        """
        Read one line of input.

        Returns:
            The line without its terminator or surrounding whitespace.

        Raises:
            ReadError: On end of input or a stream error.
        """
        try:
            if self.stdin is None:
                line = self.console.input()
            else:
                line = self.stdin.readline()
        except EOFError as e:
            raise ReadError("unexpected end of input") from e
        except OSError as e:
            raise ReadError(f"failed to read answer: {e}") from e
        if self.stdin is not None and not line:
            raise ReadError("unexpected end of input")
        return line.strip()

    def ask_question(self, question: Question) -> str:
        """
        Ask a single question until it resolves to a non-empty answer.

        An empty line takes the question's default. When that is empty
        too, the question is asked again, with no limit on attempts.

        Args:
            question: Question to ask.

        Returns:
            The resolved answer, already delivered to the question's setter.
        """
        attempt = 0
        while True:
            attempt += 1
            self.render(question)
            answer = self.read_line() or question.default
            if answer:
                break
            logger.debug(f"Empty answer for {question.name!r} (attempt {attempt}), asking again")

        question.set(answer)
        logger.debug(f"Answered {question.name!r} after {attempt} attempt(s)")
        return answer

    def ask_questions(self, questions: Iterable[Question]) -> List[str]:
        """
        Ask questions in order, stopping at the first failure.

        Args:
            questions: Questions to ask.

        Returns:
            Answers in asking order.
        """
        return [self.ask_question(q) for q in questions]

    def ask(self, record: Any) -> List[str]:
        """
        Ask every question of a dataclass record and fill in its fields.

        Args:
            record: Dataclass instance, see weezard.extractor.questions_for.

        Returns:
            Answers in field order.
        """
        return self.ask_questions(questions_for(record))


def ask_question(question: Question) -> str:
    """Ask one question on the standard console."""
    return PromptRunner().ask_question(question)


def ask_questions(questions: Iterable[Question]) -> List[str]:
    """Ask questions in order on the standard console."""
    return PromptRunner().ask_questions(questions)


def ask(record: Any) -> List[str]:
    """Fill in a dataclass record from the standard console."""
    return PromptRunner().ask(record)
