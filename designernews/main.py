from asyncio import new_event_loop
from os import _exit
from signal import signal, SIGTERM, SIGINT
import click
from .config import get_config
from .data.stories import StoriesRemoteDataSource
from .errors import ConfigException
from .gateway.designer_news import DesignerNewsGateway
from .models.result import Error, Result


def run(coro) -> Result:
    loop = new_event_loop()

    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def echo_result(result: Result):
    if isinstance(result, Error):
        raise click.ClickException(str(result.exception))

    for story in result.value:
        click.echo(f"{story.id}\t{story.created_at.isoformat()}\t{story.title}")


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Configuration file path")
@click.pass_context
def cli(ctx, config_path):
    try:
        config = get_config(config_path)
    except ConfigException as e:
        raise click.ClickException(str(e))

    ctx.obj = StoriesRemoteDataSource(DesignerNewsGateway(config))


@cli.command(name="top")
@click.option("--page", "-p", default=1, type=int, help="Page of top stories")
@click.pass_obj
def top(data_source: StoriesRemoteDataSource, page):
    echo_result(run(data_source.load_top_stories(page)))


@cli.command(name="search")
@click.argument("query")
@click.option("--page", "-p", default=1, type=int, help="Page of search results")
@click.pass_obj
def search(data_source: StoriesRemoteDataSource, query, page):
    echo_result(run(data_source.search(query, page)))


def signal_handler(signum, frame):
    _exit(1)


def main():
    signal(SIGTERM, signal_handler)
    signal(SIGINT, signal_handler)

    cli()


if __name__ == '__main__':
    main()
