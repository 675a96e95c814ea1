from pathlib import Path

import typer

from .arguments import RawArguments
from .config import CONFIG_FILENAME, Settings
from .dispatcher import Dispatcher
from .exceptions import SwiftFormatError

app = typer.Typer(
    help="swiftformat - format Swift source files",
    add_completion=False,
)


@app.command(add_help_option=False)
def main(
    inputs: list[str] | None = typer.Argument(None, help="input file(s) or directory path(s)", show_default=False),
    output: str | None = typer.Option(None, "--output", help="output path for formatted file(s)"),
    inferoptions: str | None = typer.Option(None, "--inferoptions", help="file or directory to infer options from"),
    indent: str | None = typer.Option(None, "--indent", help='number of spaces, or "tab"'),
    allman: str | None = typer.Option(None, "--allman", help='"true" or "false"'),
    linebreaks: str | None = typer.Option(None, "--linebreaks", help='"cr", "crlf" or "lf"'),
    semicolons: str | None = typer.Option(None, "--semicolons", help='"never" or "inline"'),
    commas: str | None = typer.Option(None, "--commas", help='"always" or "inline"'),
    comments: str | None = typer.Option(None, "--comments", help='"indent" or "ignore"'),
    ranges: str | None = typer.Option(None, "--ranges", help='"spaced" or "nospace"'),
    empty: str | None = typer.Option(None, "--empty", help='"void" or "tuple"'),
    trimwhitespace: str | None = typer.Option(None, "--trimwhitespace", help='"always" or "nonblank-lines"'),
    insertlines: str | None = typer.Option(None, "--insertlines", help='"enabled" or "disabled"'),
    removelines: str | None = typer.Option(None, "--removelines", help='"enabled" or "disabled"'),
    header: str | None = typer.Option(None, "--header", help='"strip" or "ignore"'),
    ifdef: str | None = typer.Option(None, "--ifdef", help='"indent", "noindent" or "outdent"'),
    hexliterals: str | None = typer.Option(None, "--hexliterals", help='"uppercase" or "lowercase"'),
    experimental: str | None = typer.Option(None, "--experimental", help='"enabled" or "disabled"'),
    fragment: str | None = typer.Option(None, "--fragment", help='"true" or "false"'),
    cache: str | None = typer.Option(None, "--cache", help='cache file path, "clear" or "ignore"'),
    show_help: bool = typer.Option(False, "--help", help="this help page"),
    show_version: bool = typer.Option(False, "--version", help="version information"),
):
    """Format Swift source files, or standard input when no files are given."""
    params = {
        "output": output,
        "inferoptions": inferoptions,
        "indent": indent,
        "allman": allman,
        "linebreaks": linebreaks,
        "semicolons": semicolons,
        "commas": commas,
        "comments": comments,
        "ranges": ranges,
        "empty": empty,
        "trimwhitespace": trimwhitespace,
        "insertlines": insertlines,
        "removelines": removelines,
        "header": header,
        "ifdef": ifdef,
        "hexliterals": hexliterals,
        "experimental": experimental,
        "fragment": fragment,
        "cache": cache,
        "help": show_help,
        "version": show_version,
    }
    settings = Settings.load(Path.cwd() / CONFIG_FILENAME)
    try:
        arguments = RawArguments.from_params(inputs, params)
        result = Dispatcher(settings).run(arguments)
    except SwiftFormatError as e:
        typer.echo(e.render())
        raise typer.Exit(code=e.exit_code)

    if result is not None and result.exit_code:
        raise typer.Exit(code=result.exit_code)


if __name__ == "__main__":
    app()
