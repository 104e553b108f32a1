"""Console and JSON writers for retrieved records."""

import logging
from pathlib import Path
from typing import Callable, Sequence, Union

import click
import orjson

from .models import DebeRecord, Entry, Topic

logger = logging.getLogger(__name__)

OUTPUT_CONSOLE = "console"
OUTPUT_JSON = "json"
OUTPUT_MODES = (OUTPUT_CONSOLE, OUTPUT_JSON)

SEPARATOR = "-" * 60


def format_entry(entry: Entry) -> str:
    header = f"{entry.id} {entry.author}".strip()
    if entry.date:
        header = f"{header} ({entry.date})"
    return f"{header}\n{entry.text}"


def format_topic(topic: Topic) -> str:
    return f"{topic.title} ({topic.count})\n{topic.link}"


def format_debe(record: DebeRecord) -> str:
    return f"{format_topic(record.topic)}\n\n{format_entry(record.entry)}"


def write_console(records: Sequence, formatter: Callable[[object], str]):
    """Print each record as a text block separated by a rule."""
    if not records:
        click.echo("No results.")
        return

    for index, record in enumerate(records, start=1):
        click.echo(f"[{index}] {formatter(record)}")
        click.echo(SEPARATOR)


def write_json(records: Sequence, path: Union[str, Path]) -> Path:
    """Write records as an indented JSON array using an atomic rename."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = orjson.dumps(
        [record.to_dict() for record in records],
        option=orjson.OPT_INDENT_2,
    )
    tmp = path.with_suffix(path.suffix + '.tmp')
    tmp.write_bytes(data)
    tmp.replace(path)

    logger.info("Wrote %d records to %s", len(records), path)
    return path


def write_records(records: Sequence, output: str, path: Union[str, Path],
                  formatter: Callable[[object], str]):
    """Dispatch to the console or JSON writer."""
    if output == OUTPUT_JSON:
        written = write_json(records, path)
        click.echo(f"{len(records)} records written to {written}")
    elif output == OUTPUT_CONSOLE:
        write_console(records, formatter)
    else:
        raise ValueError(f"Unknown output mode: {output}")
