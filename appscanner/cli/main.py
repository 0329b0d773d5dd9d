"""Click commands: ``appscanner applications`` and ``appscanner pipelines``.

Reports go to stdout; structured logs go to stderr.
"""

from __future__ import annotations

import asyncio
import dataclasses

import click

from appscanner import __version__
from appscanner.config import load_config, validate_label_key
from appscanner.errors import ScannerError
from appscanner.models.config import ScannerConfig
from appscanner.observability.logging import LOG_FORMATS, get_logger, setup_logging
from appscanner.report import render_applications, render_pipelines
from appscanner.scanner import scan_applications, scan_pipelines
from appscanner.visualise import write_dot

_LOG_LEVELS = click.Choice(["debug", "info", "warning", "error"], case_sensitive=False)


def _label_key(_ctx: click.Context, _param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return validate_label_key(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.group(help="Scan and log information from clusters based on labels.")
@click.version_option(__version__, prog_name="appscanner")
@click.option("--log-level", type=_LOG_LEVELS, default=None, help="Override APPSCANNER_LOG_LEVEL.")
@click.option(
    "--log-format",
    type=click.Choice(list(LOG_FORMATS), case_sensitive=False),
    default=None,
    help="Override APPSCANNER_LOG_FORMAT.",
)
@click.option("--namespace", "-n", default=None, help="Only scan this namespace (default: all).")
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_format: str | None,
    namespace: str | None,
) -> None:
    try:
        config = load_config()
    except ValueError as exc:
        raise click.ClickException(f"invalid configuration: {exc}") from exc

    if log_level is not None:
        config.log.level = log_level.lower()
    if log_format is not None:
        config.log.format = log_format.lower()
    if namespace is not None:
        config.kubernetes.namespace = namespace

    setup_logging(config.log.level, config.log.format)
    ctx.obj = config


@cli.command(help="List applications in the cluster.")
@click.option(
    "--graphviz-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write a graphviz of the discovered applications.",
)
@click.pass_obj
def applications(config: ScannerConfig, graphviz_file: str | None) -> None:
    log = get_logger("cli")
    log.info("scanning for applications", namespace=config.kubernetes.namespace or "*")
    try:
        apps = asyncio.run(scan_applications(config))
    except ScannerError as exc:
        raise click.ClickException(f"failed to discover applications: {exc}") from exc

    report = render_applications(apps)
    if report:
        click.echo(report)

    if graphviz_file:
        try:
            write_dot(apps, graphviz_file)
        except OSError as exc:
            raise click.ClickException(f"failed to write {graphviz_file}: {exc}") from exc
        log.info("graphviz written", path=graphviz_file, applications=len(apps))


@cli.command(help="List pipelines in the cluster.")
@click.option("--pipeline-label", callback=_label_key, default=None, help="Label naming the pipeline.")
@click.option("--environment-label", callback=_label_key, default=None, help="Label naming the environment.")
@click.option("--after-label", callback=_label_key, default=None, help="Label naming the preceding environment.")
@click.pass_obj
def pipelines(
    config: ScannerConfig,
    pipeline_label: str | None,
    environment_label: str | None,
    after_label: str | None,
) -> None:
    labels = config.pipeline_labels
    overrides = {
        "name": pipeline_label,
        "environment": environment_label,
        "after": after_label,
    }
    labels = dataclasses.replace(labels, **{k: v for k, v in overrides.items() if v is not None})
    config = dataclasses.replace(config, pipeline_labels=labels)

    log = get_logger("cli")
    log.info("scanning for pipelines", label=labels.name, namespace=config.kubernetes.namespace or "*")
    try:
        discovery = asyncio.run(scan_pipelines(config))
    except ScannerError as exc:
        raise click.ClickException(f"failed to discover pipelines: {exc}") from exc

    report = render_pipelines(discovery)
    if report:
        click.echo(report)
    if not discovery.ok:
        raise click.ClickException(f"{len(discovery.errors)} pipeline(s) could not be ordered")
