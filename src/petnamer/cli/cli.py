import click
import json
import logging

from .. import __version__
from .. import Log, ApplicationConfig, GenerateConfig
from ..commands import generate, batch, info
from .common import word_options, petname_errors, dask_handle, close_dask


@click.group()
@click.option("--debug", is_flag=True, default=False,
        help="Changes logging level from INFO to DEBUG.")
@click.option("--log-dir", default=None, help="Directory for log output",
        type=str)
@click.option("--workers", type=click.IntRange(min=1), default=4,
        help="Number of workers for Dask, and of tasks for 'batch'")
@click.option("--threads", type=click.IntRange(min=1), default=1,
        help="Number of threads per worker for Dask")
@click.option("--watch", is_flag=True, default=False, type=bool,
        help="Show dask progress, or open the dask diagnostic page in the "
        "default web browser when distributed.")
@click.option("--scheduler", default='single-threaded',
        type=click.Choice(['single-threaded', 'threads', 'processes',
        'distributed']), help="Type of dask scheduler used by 'batch'. See "
        "https://docs.dask.org/en/stable/scheduling.html.")
@click.version_option(__version__)
@click.pass_context
def cli(ctx, debug, log_dir, workers, threads, watch, scheduler):
    """Generate human readable random names."""

    # Set up logging
    if debug:
        log_level = 'DEBUG'
    else:
        log_level = 'INFO'

    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    log = Log(log_level, log_dir)
    log.set_level(log_level)
    app = ApplicationConfig(log=log,
            debug=debug,
            scheduler=scheduler,
            workers=workers,
            threads=threads,
            watch=watch)
    ctx.obj = app
    ctx.call_on_close(close_dask)


def make_config(app: ApplicationConfig, words, separator, lists, directory,
        letters, alliterate, alliterate_with, ubuntu, seed, count=1,
        stream=False) -> GenerateConfig:
    if directory is not None and lists != 'small':
        raise click.UsageError(
            "Options '--dir' and '--lists' cannot be used together.")

    return GenerateConfig(log=app.log,
            debug=app.debug,
            words=words,
            separator=separator,
            lists=lists,
            directory=directory,
            letters=letters,
            alliterate=alliterate or ubuntu,
            alliterate_with=alliterate_with,
            count=count,
            stream=stream,
            seed=seed)


@cli.command("generate")
@word_options
@click.option("--count", type=click.IntRange(min=0), default=None,
        help="Generate multiple names; or use --stream to generate "
        "continuously")
@click.option("--stream", is_flag=True, default=False,
        help="Stream names continuously")
@click.pass_obj
@petname_errors
def generate_cmd(app, words, separator, lists, directory, letters,
        alliterate, alliterate_with, ubuntu, seed, count, stream):
    """Print one or more names, one per line."""

    if stream and count is not None:
        raise click.UsageError(
            "Options '--stream' and '--count' cannot be used together.")

    config = make_config(app, words, separator, lists, directory, letters,
            alliterate, alliterate_with, ubuntu, seed,
            count=1 if count is None else count, stream=stream)

    if config.stream:
        for name in generate.names(config):
            click.echo(name)
    else:
        for name in generate.generate(config):
            click.echo(name)


@cli.command("batch")
@word_options
@click.option("--count", type=click.IntRange(min=0), default=1000,
        help="Number of names to generate")
@click.pass_obj
@petname_errors
def batch_cmd(app, words, separator, lists, directory, letters, alliterate,
        alliterate_with, ubuntu, seed, count):
    """Generate COUNT names in parallel using dask, one random number
    generator per task."""

    dask_handle(app.scheduler, app.workers, app.threads, app.watch, app.log)
    config = make_config(app, words, separator, lists, directory, letters,
            alliterate, alliterate_with, ubuntu, seed, count=count)

    for name in batch.batch(config, tasks=app.workers):
        click.echo(name)


@cli.command("info")
@word_options
@click.option("--max-words", type=click.IntRange(0, 255), default=4,
        help="Report cardinality for names of up to this many words")
@click.pass_obj
@petname_errors
def info_cmd(app, words, separator, lists, directory, letters, alliterate,
        alliterate_with, ubuntu, seed, max_words):
    """Print word list sizes and the number of possible names as JSON."""

    config = make_config(app, words, separator, lists, directory, letters,
            alliterate, alliterate_with, ubuntu, seed)
    i = info.info(config, max_words=max_words)
    click.echo(json.dumps(i, indent=2))


if __name__ == "__main__":
    cli()
