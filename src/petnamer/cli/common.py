import click
import functools
import webbrowser

import dask
from dask.diagnostics import ProgressBar
from dask.distributed import Client, LocalCluster

from .. import Log, Tiers, PetnameError


class TierParamType(click.ParamType):
    """Click parameter type for built-in word list tiers.

    Accepts a tier name or its number, eg. "small" or "0".
    """

    name = 'Tier'

    def convert(self, value, param, ctx) -> str:
        if isinstance(value, int):
            value = str(value)
        v = value.strip().lower()
        if v.isdigit() and int(v) < len(Tiers):
            return Tiers[int(v)]
        if v in Tiers:
            return v
        self.fail(
            f'{value!r} is not a word list tier, use one of'
            f" {', '.join(Tiers)}",
            param,
            ctx,
        )


class LetterParamType(click.ParamType):
    """Click parameter type for a single alliteration letter."""

    name = 'Letter'

    def convert(self, value, param, ctx) -> str:
        if not isinstance(value, str) or len(value) != 1 or not value.isalpha():
            self.fail(f'{value!r} is not a single letter', param, ctx)
        return value.lower()


def word_options(f):
    """Options shared by every command that reads word lists."""
    options = [
        click.option('--words', '-w', type=click.IntRange(0, 255), default=2,
                help='Number of words in name'),
        click.option('--separator', '-s', type=str, default='-',
                help='Separator between words'),
        click.option('--lists', type=TierParamType(), default='small',
                help="Use 'small', 'medium' or 'large' built-in word lists"),
        click.option('--dir', '-d', 'directory', default=None,
                type=click.Path(exists=True, file_okay=False),
                help='Directory containing adjectives.txt, adverbs.txt, '
                'nouns.txt'),
        click.option('--letters', '-l', type=click.IntRange(min=0), default=0,
                help='Maximum number of letters in each word; 0 for '
                'unlimited'),
        click.option('--alliterate', '-a', is_flag=True, default=False,
                help='Generate names where each word begins with the same '
                'letter'),
        click.option('--alliterate-with', '-A', type=LetterParamType(),
                default=None, help='Generate names where each word begins '
                'with the given letter'),
        click.option('--ubuntu', '-u', is_flag=True, default=False,
                help='Alias; see --alliterate'),
        click.option('--seed', type=click.IntRange(0, 2**64 - 1),
                default=None, help='Seed the random number generator with '
                'this value, making the names repeatable'),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def petname_errors(f):
    """Turn generation errors into click errors, with a non-zero exit."""

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (PetnameError, FileNotFoundError) as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def dask_handle(
    scheduler: str,
    workers: int,
    threads: int,
    watch: bool,
    log: Log,
) -> None:
    dask_config = {}

    if scheduler in ('threads', 'processes'):
        dask_config['scheduler'] = scheduler
        dask_config['num_workers'] = workers
        if watch:
            p = ProgressBar()
            p.register()

    elif scheduler == 'distributed':
        dask_config['scheduler'] = scheduler
        cluster = LocalCluster(
            processes=True, n_workers=workers, threads_per_worker=threads
        )
        client = Client(cluster)
        client.get_versions(check=True)
        dask_config['distributed.client'] = client
        if watch:
            webbrowser.open(client.cluster.dashboard_link)

    elif scheduler == 'single-threaded':
        dask_config['scheduler'] = scheduler

    else:
        raise ValueError(f"Invalid value for 'scheduler', {scheduler}")

    log.debug(f'Dask configuration: {dask_config}')
    dask.config.set(dask_config)


def close_dask() -> None:
    client = dask.config.get('distributed.client', None)
    if isinstance(client, Client):
        client.close()
