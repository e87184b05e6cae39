"""Ask the user questions on the console and store the answers in a record."""

from weezard.config import DEFAULT_TEMPLATE, get_template, reset_template, set_template
from weezard.errors import InvalidArgument, MalformedTag, ReadError, TemplateError, WeezardError
from weezard.extractor import TAG_KEY, QuestionBuilder, question_field, questions_for
from weezard.question import Question, parse_tag, render_template
from weezard.runner import PromptRunner, ask, ask_question, ask_questions

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TEMPLATE",
    "TAG_KEY",
    "InvalidArgument",
    "MalformedTag",
    "PromptRunner",
    "Question",
    "QuestionBuilder",
    "ReadError",
    "TemplateError",
    "WeezardError",
    "ask",
    "ask_question",
    "ask_questions",
    "get_template",
    "parse_tag",
    "question_field",
    "questions_for",
    "render_template",
    "reset_template",
    "set_template",
]
