#!/usr/bin/env python3
"""
Command-line interface for marshalling vCards described in YAML.

Subcommands:
- xml: Write an xCard (XML) document
- json: Write a jCard (JSON) document
- text: Write plain-text vCards
"""

from contextlib import contextmanager, nullcontext
from pathlib import Path
from typing import List, Optional

import typer

from vcardio.contexts.marshalling import (
    JCardMarshaller,
    MarshalResult,
    MarshallingSettings,
    VCardTextWriter,
    XCardMarshaller,
    load_marshalling_settings,
)
from vcardio.contexts.marshalling.exceptions import InvalidSettingsError
from vcardio.contexts.marshalling.logger import (
    log_document_written,
    log_load_failed,
    log_vcards_loaded,
    setup_marshalling_logger,
)
from vcardio.contexts.types import InvalidVCardDataError, VCard, load_vcards
from vcardio.utils.timestamp import now

app = typer.Typer(
    add_completion=False,
    help="Marshal vCards described in YAML to xCard, jCard or plain text",
    invoke_without_command=True,
)

INPUT_ARGUMENT = typer.Argument(
    ...,
    help="YAML file with a top-level 'vcards' list",
    exists=True,
    file_okay=True,
    dir_okay=False,
)
OUTPUT_OPTION = typer.Option(
    None, "--output", "-o", help="Output file (defaults to stdout)"
)
TARGET_VERSION_OPTION = typer.Option(
    None, "--target-version", "-t", help="vCard version to produce (2.1, 3.0 or 4.0)"
)
NO_GENERATOR_OPTION = typer.Option(
    False, "--no-generator", help="Do not add an X-GENERATOR property"
)
CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Settings YAML (defaults to VCARDIO_MARSHALLING_CONFIG)"
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_settings(
    config: Optional[Path], target_version: Optional[str], no_generator: bool
) -> MarshallingSettings:
    overrides = []
    if target_version:
        overrides.append(f"target_version='{target_version}'")
    if no_generator:
        overrides.append("add_generator=false")

    try:
        return load_marshalling_settings(config, overrides=overrides)
    except (InvalidSettingsError, FileNotFoundError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _prepare(
    input_file: Path, output_format: str, settings: MarshallingSettings
) -> List[VCard]:
    """Start a logging session and load the input vCards."""
    log_dir = settings.log_dir / f"{output_format}_{now()}"
    setup_marshalling_logger(log_dir, output_format, settings.target_version.version)

    try:
        vcards = load_vcards(input_file)
    except (InvalidVCardDataError, OSError) as e:
        log_load_failed(str(input_file), e)
        typer.secho(f"Error: could not load {input_file}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_vcards_loaded(len(vcards), str(input_file))
    return vcards


@contextmanager
def _open_output(output: Optional[Path]):
    if output is None:
        with nullcontext(typer.get_text_stream("stdout")) as stream:
            yield stream
    else:
        # newline="" keeps CRLF line endings of plain-text vCards intact
        with output.open("w", encoding="utf-8", newline="") as stream:
            yield stream


def _report(index: int, result: MarshalResult) -> None:
    for warning in result.warnings:
        typer.secho(f"  vCard #{index}: {warning}", fg=typer.colors.YELLOW, err=True)


@app.command("xml")
def xml_command(
    input_file: Path = INPUT_ARGUMENT,
    output: Optional[Path] = OUTPUT_OPTION,
    target_version: Optional[str] = TARGET_VERSION_OPTION,
    no_generator: bool = NO_GENERATOR_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Write the vCards as one xCard document.

    Example:\n

        $ marshal_vcard.py xml contacts.yaml -o contacts.xml
    """
    settings = _load_settings(config, target_version, no_generator)
    vcards = _prepare(input_file, "xml", settings)

    marshaller = XCardMarshaller.from_settings(settings)
    for index, vcard in enumerate(vcards, start=1):
        _report(index, marshaller.add_vcard(vcard))

    with _open_output(output) as stream:
        marshaller.write(stream, indent=settings.xml_indent)
        stream.write("\n")
    log_document_written("xCard", len(marshaller), str(output or "stdout"))


@app.command("json")
def json_command(
    input_file: Path = INPUT_ARGUMENT,
    output: Optional[Path] = OUTPUT_OPTION,
    target_version: Optional[str] = TARGET_VERSION_OPTION,
    no_generator: bool = NO_GENERATOR_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Write the vCards as a jCard document.

    Example:\n

        $ marshal_vcard.py json contacts.yaml -o contacts.json
    """
    settings = _load_settings(config, target_version, no_generator)
    vcards = _prepare(input_file, "json", settings)

    marshaller = JCardMarshaller.from_settings(settings)
    for index, vcard in enumerate(vcards, start=1):
        _report(index, marshaller.add_vcard(vcard))

    with _open_output(output) as stream:
        marshaller.write(stream, indent=settings.json_indent)
        stream.write("\n")
    log_document_written("jCard", len(marshaller), str(output or "stdout"))


@app.command("text")
def text_command(
    input_file: Path = INPUT_ARGUMENT,
    output: Optional[Path] = OUTPUT_OPTION,
    target_version: Optional[str] = TARGET_VERSION_OPTION,
    no_generator: bool = NO_GENERATOR_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Write the vCards in plain-text form.

    Example:\n

        $ marshal_vcard.py text contacts.yaml -t 3.0 -o contacts.vcf
    """
    settings = _load_settings(config, target_version, no_generator)
    vcards = _prepare(input_file, "text", settings)

    with _open_output(output) as stream:
        writer = VCardTextWriter.from_settings(stream, settings)
        for index, vcard in enumerate(vcards, start=1):
            _report(index, writer.write(vcard))
    log_document_written("text", len(writer), str(output or "stdout"))


if __name__ == "__main__":
    app()
