"""CLI main entry point."""

import json
import logging
import os
from pathlib import Path

import click
from pydantic import ValidationError

from .config import Config
from .diagnostics import Diagnostics
from .document import ContentDocument
from .errors import ConfigException, SectionCMSException
from .log import setup as setup_log
from .normalizer import normalize_document
from .registry import default_registry
from .session import FormSession
from .utils import validation_messages

logger = logging.getLogger(__name__)


def load_config(config_path: str | None) -> Config:
    if config_path:
        return Config.load_from_file(config_path)
    return Config()


def read_json(path: str):
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {path}: {e}")


def dump_json(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def get_contract(type_id: str):
    contract = default_registry().get_contract(type_id)
    if contract is None:
        raise click.ClickException(f"Unknown section type: {type_id}")
    return contract


@click.group()
@click.option("--config", "-c", default=None, help="Configuration file path")
@click.pass_context
def cli(ctx, config: str | None):
    """Section CMS command line tool."""
    ctx.ensure_object(dict)
    try:
        cfg = load_config(config)
    except ConfigException as e:
        raise click.ClickException(str(e))

    ctx.obj["config_path"] = config
    ctx.obj["config"] = cfg
    setup_log(cfg.get_log_file(), cfg.log_level)


@cli.command()
def types():
    """List registered section types."""
    registry = default_registry()
    for category, contracts in registry.contracts_by_category().items():
        for contract in contracts:
            click.echo(f"{contract.type_id}\t{contract.label}\t{category}")


@cli.command()
@click.argument("type_id")
def defaults(type_id: str):
    """Print the default data of a section type."""
    click.echo(dump_json(get_contract(type_id).new_data()))


@cli.command()
@click.argument("type_id")
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False))
def normalize(type_id: str, data_file: str):
    """Repair stored section data so it matches its section type."""
    contract = get_contract(type_id)
    diagnostics = Diagnostics()
    data = normalize_document(contract, read_json(data_file), diagnostics)

    for event in diagnostics:
        click.echo(f"{event.kind.value}\t{event.path or '<root>'}\t{event.message}", err=True)
    click.echo(dump_json(data))


@cli.command()
@click.argument("type_id")
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False))
def validate(type_id: str, data_file: str):
    """Check section data against its section type without repairing it."""
    contract = get_contract(type_id)
    try:
        contract.validate(read_json(data_file))
    except ValidationError as e:
        for loc, msg in validation_messages(e):
            click.echo(f"{loc or '<root>'}: {msg}", err=True)
        raise click.ClickException(f"{data_file} is not valid {type_id} data")

    click.echo(f"{data_file} is valid {type_id} data")


@cli.command()
@click.argument("type_id")
@click.option("--data", "data_file", type=click.Path(exists=True, dir_okay=False), default=None)
@click.pass_context
def form(ctx, type_id: str, data_file: str | None):
    """Print the editing form built for a section type."""
    cfg = ctx.obj["config"]
    contract = default_registry().get_contract(type_id)

    if data_file is not None:
        document = ContentDocument(section_type=type_id, data=read_json(data_file))
        session = FormSession(
            contract, document, repair_threshold=cfg.editor.repair_alert_threshold
        )
    elif contract is not None:
        session = FormSession.new(contract, repair_threshold=cfg.editor.repair_alert_threshold)
    else:
        raise click.ClickException(f"Unknown section type: {type_id}")

    click.echo(session.render().model_dump_json(indent=2))


@cli.command()
@click.option("--host", "-h", default=None, help="Override host from config")
@click.option("--port", "-p", default=None, type=int, help="Override port from config")
@click.option("--reload/--no-reload", default=None, help="Reload on code changes")
@click.pass_context
def serve(ctx, host, port, reload):
    """Start the editing API server."""
    import uvicorn

    cfg = ctx.obj["config"]
    host = host or cfg.web.host
    port = port or cfg.web.port
    if reload is None:
        reload = cfg.web.reload

    if ctx.obj["config_path"]:
        os.environ["CONFIG_FILE"] = str(Path(ctx.obj["config_path"]).resolve())

    if cfg.web.debug:
        logger.warning("Debug mode is enabled. This should NOT be used in production.")

    logger.info(f"Starting API server on {host}:{port}")
    try:
        uvicorn.run(
            "sectioncms.api:create_app",
            host=host,
            port=port,
            factory=True,
            reload=reload,
            log_level="debug" if cfg.web.debug else "info",
        )
    except SectionCMSException as e:
        logger.error(f"Application error: {e}", exc_info=True)
        raise click.ClickException(str(e))


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
