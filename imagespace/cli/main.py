"""imagespace command line interface."""

import logging
from typing import Optional, Tuple

import click

from ..catalog import Catalog
from ..db import make_engine, settings
from ..storage import DatabaseStore
from ..uploads import upload_paths

logger = logging.getLogger(__name__)


def open_catalog(database_url: str) -> Catalog:
    """Open the catalog stored in ``database_url``."""
    store = DatabaseStore(make_engine(database_url, echo=settings.sql_echo))
    return Catalog.open(store, seed_demo_images=settings.seed_demo_images)


@click.group()
@click.option(
    "--database-url",
    default=None,
    help="Database holding the catalog (defaults to IMAGESPACE_DATABASE_URL).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, database_url: Optional[str], verbose: bool) -> None:
    """Image Space - image gallery and annotation catalog."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["database_url"] = database_url or settings.database_url


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@click.option("--workers", type=int, default=None, help="Concurrent file readers.")
@click.pass_context
def upload(ctx: click.Context, paths: Tuple[str, ...], workers: Optional[int]) -> None:
    """Upload PNG/JPEG files or directories of them."""
    catalog = open_catalog(ctx.obj["database_url"])
    report = upload_paths(catalog, paths, max_workers=workers)

    for rejection in report.rejected:
        click.echo(f"Rejected {rejection.path}: {rejection.reason}", err=True)
    click.echo(f"Added {len(report.added)} images")


@cli.command("ls")
@click.option("--query", "-q", default="", help="Search names and tag names.")
@click.option("--tag", "-t", "tag_names", multiple=True, help="Filter by tag name.")
@click.pass_context
def list_images(ctx: click.Context, query: str, tag_names: Tuple[str, ...]) -> None:
    """List images in display order."""
    catalog = open_catalog(ctx.obj["database_url"])

    tag_ids = []
    for name in tag_names:
        tag_id = catalog.get_tag_id(name)
        if tag_id is None:
            raise click.BadParameter(f"Unknown tag: {name}", param_hint="--tag")
        tag_ids.append(tag_id)

    catalog.set_search_query(query)
    catalog.set_tag_filter(tag_ids)
    for image in catalog.filtered_view():
        star = "*" if image.is_starred else " "
        names = ", ".join(catalog.get_tag_name(tag_id) for tag_id in image.tags)
        click.echo(f"{star} {image.id}  {image.name}  [{names}]")


@cli.command()
@click.pass_context
def tags(ctx: click.Context) -> None:
    """List tags."""
    catalog = open_catalog(ctx.obj["database_url"])
    for tag in catalog.tags:
        click.echo(f"{tag.id}  {tag.name}")


@cli.command("tag-add")
@click.argument("name")
@click.pass_context
def tag_add(ctx: click.Context, name: str) -> None:
    """Create a tag."""
    catalog = open_catalog(ctx.obj["database_url"])
    if not catalog.add_tag(name):
        raise click.ClickException(f"Tag '{name}' is empty or already exists")
    click.echo(f"Created tag {name}")


@cli.command("copy-names")
@click.argument("image_ids", nargs=-1, required=True)
@click.pass_context
def copy_names(ctx: click.Context, image_ids: Tuple[str, ...]) -> None:
    """Print the given images' names without extensions, comma-joined."""
    catalog = open_catalog(ctx.obj["database_url"])
    for image_id in image_ids:
        if catalog.get_image(image_id) is None:
            raise click.ClickException(f"Image not found: {image_id}")
        if image_id not in catalog.selection:
            catalog.toggle_image_selection(image_id)
    click.echo(catalog.copy_names())


@cli.command()
@click.argument("image_ids", nargs=-1, required=True)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_context
def delete(ctx: click.Context, image_ids: Tuple[str, ...], yes: bool) -> None:
    """Delete images."""
    catalog = open_catalog(ctx.obj["database_url"])
    missing = [image_id for image_id in image_ids if catalog.get_image(image_id) is None]
    if missing:
        raise click.ClickException(f"Image not found: {', '.join(missing)}")

    if not yes and not click.confirm(
        f"Delete {len(image_ids)} image(s)? This cannot be undone."
    ):
        click.echo("Cancelled")
        return

    deleted = catalog.batch_delete_images(image_ids)
    click.echo(f"Deleted {deleted} images")
