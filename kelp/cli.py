"""Command-line interface for the presentation helpers."""

from __future__ import annotations

import json
import logging
import mimetypes

import click

from .adapters import ImageFieldValue, LocalFile, UrlLink
from .common.text import machinify, youtube_video_id
from .config import Settings
from .images import ImageDataExtractor
from .links import link_helper


@click.group()
@click.option(
    "--log-level",
    envvar="LOG_LEVEL",
    show_envvar=True,
    type=click.Choice(
        ["critical", "error", "warning", "info", "debug", "notset"],
        case_sensitive=False,
    ),
    default="info",
    show_default=True,
    help="Logging level for console output",
)
def main(log_level: str) -> None:
    """Entry-point for the ``kelp`` script."""

    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO))


@main.command("machinify")
@click.argument("text")
@click.option(
    "--separator",
    default=None,
    help="Character used to join words [default: KELP_MACHINE_NAME_SEPARATOR or _]",
)
def machinify_command(text: str, separator: str | None) -> None:
    """Print TEXT as a machine name."""

    if separator is None:
        separator = Settings().machine_name_separator
    click.echo(machinify(text, separator))


@main.command("youtube-id")
@click.argument("url")
def youtube_id_command(url: str) -> None:
    """Print the YouTube video ID contained in URL."""

    video_id = youtube_video_id(url)
    if video_id is False:
        raise click.ClickException(f"No YouTube video ID found in {url!r}")
    click.echo(video_id)


@main.command("link-data")
@click.argument("url")
@click.option("--title", default=None, help="Title stored on the link")
@click.option(
    "--default-title",
    default=None,
    help="Title used when the link has none [default: KELP_LINK_TITLE]",
)
@click.option("--aria-label", default=None, help="Accessible label attribute")
@click.option(
    "--modifier",
    "modifiers",
    multiple=True,
    help="CSS modifier class (repeatable)",
)
def link_data_command(
    url: str,
    title: str | None,
    default_title: str | None,
    aria_label: str | None,
    modifiers: tuple[str, ...],
) -> None:
    """Print the render properties for a link to URL as JSON."""

    options = {"attributes": {"aria-label": aria_label}} if aria_label is not None else {}
    link = UrlLink(url=url, title=title, options=options)
    description = link_helper(
        link,
        {
            "title": default_title or Settings().link_title,
            "modifiers": modifiers,
        },
    )
    click.echo(json.dumps(description.to_render_array(), indent=2))


@main.command("image-data")
@click.argument("uri")
@click.option("--fid", default=None, help="File ID to report")
@click.option("--alt", default=None, help="Alternative text for the image")
@click.option(
    "--mime-type",
    default=None,
    help="MIME type of the file (guessed from the URI when omitted)",
)
def image_data_command(
    uri: str, fid: str | None, alt: str | None, mime_type: str | None
) -> None:
    """Print background-image data for the image stored at URI as JSON."""

    settings = Settings()
    extractor = ImageDataExtractor.from_settings(settings)
    file = LocalFile(
        fid=fid,
        uri=uri,
        mime_type=mime_type or mimetypes.guess_type(uri)[0],
    )
    values = [{"alt": alt}] if alt is not None else []
    description = extractor.get_image_data(ImageFieldValue(entity=file, values=values))
    if description is None:
        raise click.ClickException(f"{uri!r} does not reference a file")
    click.echo(json.dumps(description.to_render_array(), indent=2))


if __name__ == "__main__":
    main()
