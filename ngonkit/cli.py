"""Command-line interface for ngonkit."""

import logging
import sys
import time
import click

from . import __version__
from .errors import NgonError
from .geometry import DEFAULT_ATOL, Ngon, Point, contains

logger = logging.getLogger(__name__)


def _parse_point(text: str) -> Point:
    """Parse ``"x,y[,z...]"`` into a point."""
    try:
        coords = [float(c) for c in text.split(',')]
    except ValueError as e:
        raise ValueError(f"invalid point {text!r}, expected comma-separated numbers") from e
    return Point(*coords)


def _build_ngon(vertices) -> Ngon:
    return Ngon([_parse_point(v) for v in vertices])


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group()
@click.version_option(__version__)
@click.option('--verbose', '-v', is_flag=True, help='Log debug output and timings to stderr')
@click.pass_context
def main(ctx, verbose):
    """ngonkit: area, boundary and containment of N-gons.

    Vertices are given as comma-separated coordinates, in CCW order.
    Put -- before the vertices when a coordinate starts with a minus sign.

    Examples:

        ngonkit measure 0,0 1,0 1,1 0,1

        ngonkit contains --point 0.5,0.5 0,0 1,0 1,1 0,1
    """
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['start_time'] = time.time()


def _fail(message: str):
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load(vertices) -> Ngon:
    try:
        ngon = _build_ngon(vertices)
    except (NgonError, ValueError) as e:
        _fail(str(e))
    logger.debug("built %r", ngon)
    return ngon


def _done(ctx) -> None:
    elapsed = time.time() - ctx.obj['start_time']
    logger.debug("completed in %.3fs", elapsed)


@main.command()
@click.argument('vertices', nargs=-1, required=True)
@click.option('--signed', is_flag=True, help='Print the signed area (2D only)')
@click.pass_context
def measure(ctx, vertices, signed):
    """Print the area of the N-gon with the given VERTICES."""
    ngon = _load(vertices)
    try:
        value = ngon.signed_area() if signed else ngon.measure()
    except NgonError as e:
        _fail(str(e))
    click.echo(value)
    _done(ctx)


@main.command(name='contains')
@click.option('--point', '-p', 'point', required=True, help='Point to test, e.g. 0.5,0.5')
@click.option('--atol', default=DEFAULT_ATOL, type=float,
              help=f'Distance tolerance above 2D (default: {DEFAULT_ATOL})')
@click.argument('vertices', nargs=-1, required=True)
@click.pass_context
def contains_cmd(ctx, point, atol, vertices):
    """Print whether POINT lies in the N-gon (boundary included).

    N-gons with more than 3 vertices are assumed convex.
    """
    ngon = _load(vertices)
    try:
        inside = contains(_parse_point(point), ngon, atol=atol)
    except (NgonError, ValueError) as e:
        _fail(str(e))
    click.echo('true' if inside else 'false')
    _done(ctx)


@main.command()
@click.argument('vertices', nargs=-1, required=True)
@click.pass_context
def edges(ctx, vertices):
    """Print the boundary edges of the N-gon, one per line."""
    ngon = _load(vertices)
    for edge in ngon.edges():
        start = ','.join(str(c) for c in edge.start)
        end = ','.join(str(c) for c in edge.end)
        click.echo(f"{start} -> {end}")
    _done(ctx)


@main.command()
def shapes():
    """List the named N-gons."""
    click.echo("Named N-gons:")
    click.echo()
    for n in range(3, 11):
        click.echo(f"  {Ngon[n].__name__:<11} N={n}")
    click.echo()
    click.echo("Any other N >= 3 is available as Ngon[N].")


if __name__ == '__main__':
    main()
