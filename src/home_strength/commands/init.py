"""Initialize project command."""

import click

from ..db import get_data_dir, get_db_path, init_db
from ..generators import DEFAULT_CATALOG
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the home-strength data directory and database.

    Set HOME_STRENGTH_DATA_DIR to keep the data somewhere other than ./data.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing home-strength in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")
    echo_info(
        f"Exercise library: {len(DEFAULT_CATALOG.adult_templates)} exercises, "
        f"{len(DEFAULT_CATALOG.kid_templates)} kid activities"
    )

    click.echo()
    click.echo("home-strength is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Generate a routine:")
    click.echo("     home-strength generate -e dumbbells --duration medium --save")
    click.echo("     home-strength kid --duration short --energy high")
    click.echo()
    click.echo("  2. Log it when you're done:")
    click.echo("     home-strength log <routine-id>")
