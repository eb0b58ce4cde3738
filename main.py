#! .venv/bin/python3

import json
import click
from rich.markup import escape
from rich.table import Table

from caselib.constants import CASE_STYLES, EXAMPLES, INVALID_EXAMPLES, VERSION
from caselib.logger import LOG_LEVELS, console, log, logError, setLogLevel
from caselib.string_utils import tryConvert
from interactive_converter import interactiveConvert
from settings_store import load_settings, save_settings

def read_input_file(path):
    """Reads one input per line, skipping blank lines."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except UnicodeDecodeError as err:
        raise click.BadParameter(f"{path} is not valid UTF-8 ({err.reason})", param_hint="--input_file") from err
    return [line for line in lines if line.strip()]

def convert_all(style, texts):
    """
    Converts every text to the given style, printing each outcome as it goes.
    Invalid inputs are reported and skipped so one bad line doesn't stop the batch.
    """
    results = []
    for text in texts:
        result = tryConvert(style, text)
        results.append(result)
        if result.ok:
            log(f"{escape(text)} [dim]→[/] [bright_green]{escape(result.value)}")
        else:
            logError(f"{text!r}: {result.error}")
            log(f"    [dim]cause: {result.error.cause.name}", LOG_LEVELS.COMPLEX)
    return results

def show_examples(style):
    """Runs the documented example inputs, including the invalid ones, through the converter."""
    table = Table(title=f"{style} case examples", show_header=True, header_style="bold magenta")
    table.add_column("Input", style="cyan")
    table.add_column("Output")
    for example in [*EXAMPLES, *INVALID_EXAMPLES]:
        result = tryConvert(style, example)
        if result.ok:
            table.add_row(repr(example), f"[green]{escape(result.value)}")
        else:
            table.add_row(repr(example), f"[red]{escape(str(result.error))}")
    console.print(table)

def result_to_json(result):
    if result.ok:
        return {"input": result.input, "output": result.value}
    return {
        "input": result.input,
        "error": str(result.error),
        "cause": result.error.cause.name,
    }

@click.command()
@click.argument("texts", nargs=-1)
@click.option("--style", "-s", type=click.Choice(CASE_STYLES), help="Case to convert to (defaults to the saved setting)")
@click.option("--input_file", type=click.Path(exists=True, dir_okay=False), help="File with one string to convert per line")
@click.option("--json_output", type=click.Path(), help="Path to save the conversions as JSON")
@click.option("--save_default", is_flag=True, help="Remember --style as the default")
@click.option("--interactive", is_flag=True, help="Prompt for strings to convert")
@click.option("--examples", is_flag=True, help="Convert the documented example strings")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.pass_context
def main(ctx, texts, style, input_file, json_output, save_default, interactive, examples, debug):
    """
    Converts each TEXT (and each line of --input_file) to camelCase, dot.case
    or kebab-case. Exits with status 1 when any of the given strings is invalid.
    """
    if debug:
        setLogLevel(LOG_LEVELS.COMPLEX)

    settings = load_settings()
    log(settings, LOG_LEVELS.COMPLEX, prettyPrint=True)
    if not debug:
        setLogLevel(LOG_LEVELS[settings["logLevel"]])

    if save_default:
        if style is None:
            raise click.UsageError("--save_default needs --style")
        try:
            save_settings({**settings, "style": style})
        except OSError as err:
            raise click.FileError("settings", hint=str(err)) from err
        log(f"[bold green]✓ Default style set to {style}[/bold green]")

    style = style or settings["style"]

    inputs = list(texts)
    if input_file:
        inputs += read_input_file(input_file)
        log(f"Read {len(inputs) - len(texts)} strings from {input_file}", LOG_LEVELS.SIMPLE)

    if not (inputs or interactive or examples or save_default):
        raise click.UsageError("Nothing to convert: pass TEXT, --input_file, --interactive or --examples")

    log(f"Converting to {style} case", LOG_LEVELS.COMPLEX)
    results = convert_all(style, inputs)
    failed = [r for r in results if not r.ok]

    if interactive:
        results += interactiveConvert(style)

    if examples:
        show_examples(style)

    if json_output:
        output = {
            "style": style,
            "version": VERSION,
            "conversions": [result_to_json(r) for r in results],
        }
        with open(json_output, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2, ensure_ascii=False)
        log(f"[bold green]✓ Output saved to {json_output}[/bold green]", LOG_LEVELS.SIMPLE)

    if failed:
        log(f"\n[bold red]{len(failed)} of {len(inputs)} strings could not be converted", LOG_LEVELS.SIMPLE)
        ctx.exit(1)

if __name__ == "__main__":
    # This makes the script executable from the command line.
    main()
