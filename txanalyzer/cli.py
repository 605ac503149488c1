# txanalyzer/cli.py
import os
import logging
import click
from dotenv import load_dotenv
from txanalyzer.config import load_config
from txanalyzer.core.errors import TransactionStoreError
from txanalyzer.core.store import store_from_records
from txanalyzer.loaders import get_loader
from txanalyzer.outputs import get_output
from txanalyzer.report import build_report

logger = logging.getLogger(__name__)

_EXTENSION_FORMATS = {
    '.json': 'json',
    '.csv':  'csv',
    '.yaml': 'yaml',
    '.yml':  'yaml',
}


def _detect_format(path):
    ext = os.path.splitext(path)[1].lower()
    fmt = _EXTENSION_FORMATS.get(ext)
    if fmt is None:
        raise click.BadParameter(
            f"Cannot infer format from '{ext or path}', pass --format",
            param_hint="'--format'",
        )
    return fmt


@click.command()
@click.option(
    '--file', 'data_file',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help='Transactions document to analyze (JSON, CSV or YAML).'
)
@click.option(
    '--format', 'input_format',
    default=None,
    type=click.Choice(['json', 'csv', 'yaml']),
    help='Input format; inferred from the file extension when omitted.'
)
@click.option(
    '--output', 'output_format',
    default='console',
    type=click.Choice(['console', 'json']),
    help='Output target: console or json'
)
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to config.yaml (defaults are used when omitted)'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file, e.g. to set TXANALYZER_LOG_LEVEL'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Logging level (default: $TXANALYZER_LOG_LEVEL or WARNING)'
)
def main(data_file, input_format, output_format, config_path, env_file, log_level):
    """
    Load a transactions document into an in-memory store, run the standard
    set of queries over it and print the results or write them as JSON.
    """
    if env_file:
        load_dotenv(env_file)

    level = (log_level or os.getenv('TXANALYZER_LOG_LEVEL', 'WARNING')).upper()
    logging.basicConfig(level=level)

    fmt = input_format or _detect_format(data_file)

    try:
        cfg = load_config(config_path)
        loader = get_loader(fmt, cfg)
        store = store_from_records(loader.load(data_file))
        logger.info("Loaded %d transaction(s) from %s", len(store), data_file)
        report = build_report(store, cfg.get('report') or {})
    except (TransactionStoreError, ValueError, RuntimeError) as e:
        raise click.ClickException(str(e))

    outputter = get_output(output_format, cfg)
    result = outputter.write(report)
    if output_format == 'json':
        click.echo(f"Wrote report for {len(store)} transaction(s) to {result}.")
