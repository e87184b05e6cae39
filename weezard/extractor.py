"""Build questions from dataclass records or explicit registrations."""

import dataclasses
import logging
from collections.abc import MutableMapping
from typing import Any, Callable, List, Optional

from weezard.errors import InvalidArgument, MalformedTag
from weezard.question import Question

logger = logging.getLogger(__name__)

TAG_KEY = "question"


def question_field(tag: str = "", default: str = "", **kwargs) -> Any:
    """
    Declare a dataclass field carrying a question tag.

    Args:
        tag: Tag string of the form ``<default>,<prompt>``.
        default: Initial value of the field (not the answer default).
        **kwargs: Passed through to dataclasses.field().

    Returns:
        A dataclasses.Field.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tag
    return dataclasses.field(default=default, metadata=metadata, **kwargs)


def _is_settable(record: Any, f: dataclasses.Field) -> bool:
    if f.name.startswith("_"):
        return False
    params = getattr(type(record), "__dataclass_params__", None)
    if params is not None and params.frozen:
        return False
    # Annotations may be strings under postponed evaluation
    return f.type is str or f.type == "str"


def _setter_for(record: Any, name: str) -> Callable[[str], None]:
    def setter(value: str) -> None:
        setattr(record, name, value)

    return setter


def questions_for(record: Any) -> List[Question]:
    """
    Build the list of questions for a dataclass instance.

    Fields are visited in declaration order. Private, frozen and non-string
    fields are skipped. Each question's setter writes back into its field
    on ``record``.

    Args:
        record: Dataclass instance to fill in.

    Returns:
        Questions in field declaration order.

    Raises:
        InvalidArgument: If record is not a dataclass instance.
        MalformedTag: If a field's tag is malformed. The questions built
            so far are attached to the exception.
    """
    if record is None or isinstance(record, type) or not dataclasses.is_dataclass(record):
        raise InvalidArgument(f"dataclass instance required, got {type(record).__name__}")

    questions: List[Question] = []
    for f in dataclasses.fields(record):
        if not _is_settable(record, f):
            logger.debug(f"Skipping field {f.name!r}")
            continue
        tag = f.metadata.get(TAG_KEY, "")
        try:
            q = Question.from_tag(f.name, tag, setter=_setter_for(record, f.name))
        except MalformedTag as e:
            raise MalformedTag(f"field {f.name!r}: {e}", field_name=f.name, questions=questions) from e
        questions.append(q)

    logger.debug(f"Extracted {len(questions)} question(s) from {type(record).__name__}")
    return questions


class QuestionBuilder:
    """Register questions explicitly, in asking order."""

    def __init__(self):
        self.questions: List[Question] = []

    def add(self, name: str, tag: str = "", setter: Optional[Callable[[str], None]] = None) -> "QuestionBuilder":
        """
        Append a question.

        Args:
            name: Question name.
            tag: Tag string of the form ``<default>,<prompt>``.
            setter: Optional callable receiving the answer.

        Returns:
            The builder, for chaining.

        Raises:
            MalformedTag: If the tag is malformed.
        """
        try:
            q = Question.from_tag(name, tag, setter=setter)
        except MalformedTag as e:
            raise MalformedTag(f"question {name!r}: {e}", field_name=name, questions=list(self.questions)) from e
        self.questions.append(q)
        return self

    def bind(self, target: Any, attr: str, tag: str = "") -> "QuestionBuilder":
        """Append a question writing its answer to ``target[attr]`` or ``target.attr``."""
        if isinstance(target, MutableMapping):
            def setter(value: str) -> None:
                target[attr] = value
        else:
            def setter(value: str) -> None:
                setattr(target, attr, value)
        return self.add(attr, tag, setter=setter)

    def build(self) -> List[Question]:
        """Get the registered questions."""
        return list(self.questions)
