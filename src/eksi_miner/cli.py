"""CLI interface for eksi-miner."""

import logging

import click

from .exceptions import ScraperError
from .models import DEFAULT_LIMIT, DEFAULT_PAGE, RetrievalConfig
from .output import OUTPUT_CONSOLE, OUTPUT_MODES, format_debe, format_entry, format_topic, write_records
from .scraper import EksiScraper
from .utils import output_filename


def retrieval_options(func):
    """Options shared by every listing command."""
    func = click.option(
        '--output-file',
        type=click.Path(dir_okay=False),
        default=None,
        help='JSON file to write when --output=json (default: generated name)'
    )(func)
    func = click.option(
        '--output',
        type=click.Choice(OUTPUT_MODES),
        default=OUTPUT_CONSOLE,
        show_default=True,
        help='console: print to the terminal, json: write a JSON file'
    )(func)
    func = click.option(
        '--limit',
        type=click.IntRange(min=0),
        default=None,
        help=f'Maximum number of records to list (default {DEFAULT_LIMIT})'
    )(func)
    func = click.option(
        '--page',
        type=click.IntRange(min=1),
        default=DEFAULT_PAGE,
        show_default=True,
        help='Listing page to start from'
    )(func)
    return func


def build_config(page, limit, sukela=False) -> RetrievalConfig:
    if limit is None:
        limit = DEFAULT_LIMIT
    return RetrievalConfig(page_number=page, limit=limit, sukela=sukela)


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Log every fetched URL')
def main(verbose):
    """eksi-miner - List entries and topics from eksisozluk.com."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


@main.command()
@click.argument('text')
@retrieval_options
@click.option('--sukela', is_flag=True, help='Use the "nice" (şükela) ordering')
def search(text, page, limit, output, output_file, sukela):
    """List entries found for a search term."""
    config = build_config(page, limit, sukela)
    try:
        with EksiScraper() as scraper:
            entries = scraper.get_entries(text, config)
    except ScraperError as e:
        raise click.ClickException(str(e)) from e

    write_records(entries, output, output_file or output_filename("entries", text), format_entry)


@main.command()
@retrieval_options
def gundem(page, limit, output, output_file):
    """List popular (gündem) topics."""
    config = build_config(page, limit)
    try:
        with EksiScraper() as scraper:
            topics = scraper.get_popular_topics(config)
    except ScraperError as e:
        raise click.ClickException(str(e)) from e

    write_records(topics, output, output_file or output_filename("gundem"), format_topic)


@main.command()
@retrieval_options
@click.option('--progress', is_flag=True, help='Show a progress bar while entries are fetched')
def debe(page, limit, output, output_file, progress):
    """List yesterday's most liked entries (debe)."""
    config = build_config(page, limit)
    try:
        with EksiScraper() as scraper:
            records = scraper.get_debe(config, show_progress=progress)
    except ScraperError as e:
        raise click.ClickException(str(e)) from e

    write_records(records, output, output_file or output_filename("debe"), format_debe)


if __name__ == '__main__':
    main()
