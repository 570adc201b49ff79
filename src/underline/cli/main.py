"""
Main CLI entry point.

Each command reads a JSON document (file argument or stdin), applies one
underline operation and prints the JSON result.
"""

import json
import logging

import click

from underline import __version__


class NumberType(click.ParamType):
    """Accept ints where possible, floats otherwise."""
    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberType()


def _load(source):
    try:
        return json.load(source)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON input: {e}")


def _emit(result):
    click.echo(json.dumps(result))


def _apply(fn, *args):
    """Run an underline operation, turning library errors into CLI errors."""
    from underline import ArityError, UnderlineError

    try:
        return fn(*args)
    except ArityError as e:
        raise click.UsageError(str(e))
    except (UnderlineError, ValueError, TypeError, KeyError, AttributeError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def main(verbose):
    """underline: functional helpers for JSON collections."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@main.command()
@click.argument("path")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--default", "default", help="JSON value printed when the path does not resolve")
@click.option("--separator", default=".", show_default=True, help="Path delimiter")
def get(path, source, default, separator):
    """Print the value at PATH (e.g. response.data.users.0)."""
    from underline import get as get_path

    fallback = None
    if default is not None:
        try:
            fallback = json.loads(default)
        except json.JSONDecodeError:
            raise click.BadParameter(f"{default!r} is not valid JSON", param_hint="--default")
    _emit(get_path(_load(source), path, fallback, separator=separator))


@main.command(name="range", context_settings={"ignore_unknown_options": True})
@click.argument("bounds", nargs=-1, type=NUMBER)
def range_command(bounds):
    """Print the list for [START] END [STEP] (end-exclusive)."""
    from underline import range as make_range

    logger = logging.getLogger(__name__)
    logger.debug(f"range arguments: {bounds}")
    _emit(_apply(make_range, *bounds))


@main.command()
@click.argument("key")
@click.argument("source", type=click.File("r"), default="-")
def pluck(key, source):
    """Print KEY of every object in a JSON array."""
    from underline import pluck as pluck_key

    _emit(_apply(pluck_key, _load(source), key))


def _simple_command(name, help_text):
    """Register a command that applies a one-argument operation to the input."""

    @main.command(name=name, help=help_text)
    @click.argument("source", type=click.File("r"), default="-")
    def command(source):
        import underline

        _emit(_apply(getattr(underline, name), _load(source)))

    return command


flatten = _simple_command("flatten", "Flatten nested arrays to any depth.")
unique = _simple_command("unique", "Drop repeated values, keeping the first occurrence.")
compact = _simple_command("compact", "Drop falsy values.")
total = _simple_command("sum", "Add up an array of numbers.")
keys = _simple_command("keys", "Keys of an object, or indices of an array.")
values = _simple_command("values", "Values of an object.")


if __name__ == "__main__":
    main()
