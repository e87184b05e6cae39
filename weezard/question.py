"""Question data type, tag parsing and prompt rendering."""

import string
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

from rich.errors import MarkupError
from rich.markup import escape, render as render_markup

from weezard.errors import MalformedTag, TemplateError

TAG_SEPARATOR = ","


def parse_tag(tag: Optional[str]) -> Tuple[str, str]:
    """
    Split a field tag into its default and prompt text.

    An empty (or missing) tag gives an empty default and an empty prompt.
    Otherwise the tag is split on the first comma only, so the prompt may
    itself contain commas.

    Args:
        tag: Tag string of the form ``<default>,<prompt>``.

    Returns:
        Tuple of (default, prompt).

    Raises:
        MalformedTag: If the tag is non-empty and has no comma.
    """
    if not tag:
        return "", ""
    default, sep, prompt = tag.partition(TAG_SEPARATOR)
    if not sep:
        raise MalformedTag(f"must provide <default>,<question>, got {tag!r}")
    return default, prompt


@dataclass
class Question:
    """A single promptable unit bound to (at most) one field."""

    name: str
    prompt: str = ""
    default: str = ""
    setter: Optional[Callable[[str], None]] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if not self.prompt:
            self.prompt = f"{self.name}?"

    @classmethod
    def from_tag(cls, name: str, tag: Optional[str] = "", setter: Optional[Callable[[str], None]] = None) -> "Question":
        """
        Build a question from a field name and its tag string.

        Args:
            name: Field name, used as the prompt when the tag has none.
            tag: Tag string, see :func:`parse_tag`.
            setter: Optional write capability for the answer.

        Returns:
            New Question.
        """
        default, prompt = parse_tag(tag)
        return cls(name=name, prompt=prompt, default=default, setter=setter)

    def strong(self, text: str) -> str:
        """Emphasize text (bold)."""
        return f"[bold]{escape(text)}[/bold]"

    def accent(self, text: str) -> str:
        """Highlight text (bold blue)."""
        return f"[bold blue]{escape(text)}[/bold blue]"

    def set(self, value: str) -> None:
        """Deliver an answer to the bound field, if any."""
        if self.setter is not None:
            self.setter(value)


class PromptFormatter(string.Formatter):
    """``str.format`` with ``strong``/``accent`` format specs and escaped values."""

    def __init__(self, question: Question):
        super().__init__()
        self.question = question

    def format_field(self, value: Any, format_spec: str) -> str:
        if format_spec == "strong":
            return self.question.strong(str(value))
        if format_spec == "accent":
            return self.question.accent(str(value))
        return escape(super().format_field(value, format_spec))


def render_template(template: str, question: Question) -> str:
    """
    Render a prompt template for a question.

    Args:
        template: Template using ``{prompt}``, ``{default}`` and ``{name}``,
            optionally with the ``strong`` or ``accent`` format spec.
            Literal text is console markup: write ``\\[y/n]`` to show
            ``[y/n]``, otherwise it is read as a style tag and dropped.
        question: Question providing the values.

    Returns:
        Console markup for the prompt.

    Raises:
        TemplateError: If the template is malformed.
    """
    formatter = PromptFormatter(question)
    try:
        markup = formatter.format(
            template,
            prompt=question.prompt,
            default=question.default,
            name=question.name,
        )
        # Parse once so bad markup fails here rather than half way through printing
        render_markup(markup)
    except (KeyError, IndexError, ValueError, TypeError, AttributeError, MarkupError) as e:
        raise TemplateError(f"Cannot render template {template!r}: {e}") from e
    return markup
