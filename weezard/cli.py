"""CLI entry point for weezard."""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from weezard import __version__, config
from weezard.errors import ReadError, WeezardError
from weezard.extractor import QuestionBuilder
from weezard.logs import LogManager
from weezard.question import Question, render_template
from weezard.runner import PromptRunner

console = Console()


def _parse_question(ctx, param, values):
    """Split NAME=TAG options into (name, tag) pairs."""
    pairs = []
    for value in values:
        name, sep, tag = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=TAG, got {value!r}", ctx=ctx, param=param)
        pairs.append((name, tag))
    return pairs


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="INI file with [prompt] and [logging] sections",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def cli(ctx, config_path, debug):
    """weezard - ask questions on the console and collect the answers."""
    manager = config.ConfigManager(Path(config_path) if config_path else None)
    manager.load()
    manager.apply()
    level = "DEBUG" if debug else manager.log_level()
    LogManager("weezard", level=level, log_file=manager.log_file())
    ctx.obj = manager


@cli.command()
@click.option(
    "--question",
    "-q",
    "questions",
    multiple=True,
    required=True,
    callback=_parse_question,
    help="Question as NAME=<default>,<prompt> (repeatable, asked in order)",
)
@click.option(
    "--template",
    "-t",
    default=None,
    help="Prompt template for this run",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write answers as JSON to this file instead of stdout",
)
def ask(questions, template, output):
    """Ask questions given on the command line and print the answers as JSON."""
    answers = {}
    try:
        builder = QuestionBuilder()
        for name, tag in questions:
            builder.bind(answers, name, tag)
        PromptRunner(console=console, template=template).ask_questions(builder.build())
    except ReadError as e:
        console.print(f"\n[red]✗ Aborted: {escape(str(e))}[/red]")
        sys.exit(1)
    except WeezardError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    if output:
        Path(output).write_text(json.dumps(answers, indent=2) + "\n")
        console.print(f"📝 Saved to {output}")
    else:
        console.print_json(json.dumps(answers))


@cli.command()
@click.option(
    "--preview",
    "-p",
    default=None,
    help="Render the template for a sample question NAME=<default>,<prompt>",
)
def template(preview):
    """Show the effective prompt template."""
    current = config.get_template()
    console.print(current, markup=False, highlight=False)
    if preview is None:
        return
    name, _, tag = preview.partition("=")
    try:
        q = Question.from_tag(name or "sample", tag)
        console.print(render_template(current, q), highlight=False, emoji=False, soft_wrap=True)
    except WeezardError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
