"""CLI entry point for waveform-ascii."""

import logging
import sys

import click

from waveform_ascii.config import RenderConfig
from waveform_ascii.errors import WaveformError
from waveform_ascii.parsers import parse
from waveform_ascii.renderers.charset import GlyphSet
from waveform_ascii.renderers.waveform import WaveformRenderer

logger = logging.getLogger(__name__)


class _Command(click.Command):
    """Reports usage errors with exit status 1 instead of click's 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


@click.command(cls=_Command, context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--no-grid", "-G", "no_grid", is_flag=True, help="Do not draw grid lines")
@click.option("--no-time", "-T", "no_time", is_flag=True, help="Do not draw the time axis")
@click.option("--ascii", "-A", "use_ascii", is_flag=True, help="Use plain ASCII instead of Unicode")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(input: str | None, output: str | None, no_grid: bool, no_time: bool, use_ascii: bool, verbose: bool) -> None:
    """Signal edge sequences to ASCII/Unicode timing diagram output.

    Each input line is `name | edges`, where edges is a string of
    H/1 (high), L/0 (low), Z (high impedance), B (both) and - (keep).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if input:
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            click.echo(f"error: cannot decode '{input}' as UTF-8: {e}", err=True)
            sys.exit(1)
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        try:
            text = click.get_text_stream("stdin", encoding="utf-8").read()
        except UnicodeDecodeError as e:
            click.echo(f"error: cannot decode standard input as UTF-8: {e}", err=True)
            sys.exit(1)

    try:
        sequences = parse(text)
    except WaveformError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    config = RenderConfig(
        show_grid=not no_grid,
        show_time_axis=not no_time,
        glyph_set=GlyphSet.Ascii if use_ascii else GlyphSet.Unicode,
    )
    try:
        rendered = WaveformRenderer(config).render(sequences)
    except WaveformError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if output:
        logger.debug("writing %d bytes to %s", len(rendered.encode("utf-8")), output)
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
