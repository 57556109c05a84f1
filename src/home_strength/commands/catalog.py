"""Browse the exercise library."""

import click

from ..generators import DEFAULT_CATALOG
from ..models.exercises import Equipment, MuscleFocus
from .base import echo_info, format_table


@click.command()
@click.option(
    "--equipment",
    "-e",
    multiple=True,
    type=click.Choice([eq.value for eq in Equipment]),
    help="Only exercises doable with this equipment (repeatable)",
)
@click.option(
    "--focus",
    "-f",
    type=click.Choice([f.value for f in MuscleFocus]),
    default=None,
)
@click.option("--kids", is_flag=True, help="Show the kid activity library")
def catalog(equipment: tuple[str, ...], focus: str | None, kids: bool):
    """List exercises the generator can pick from."""
    templates = DEFAULT_CATALOG.templates_matching(
        equipment=[Equipment(eq) for eq in equipment],
        focus=MuscleFocus(focus) if focus else None,
        kid_friendly=kids,
    )

    if not templates:
        echo_info("No exercises match those filters")
        return

    if kids:
        headers = ["ID", "Activity", "Energy", "Focus"]
        rows = [
            [
                t.id,
                t.name,
                ", ".join(e.value for e in t.energy_levels),
                ", ".join(f.display_name for f in t.focus),
            ]
            for t in templates
        ]
    else:
        headers = ["ID", "Exercise", "Equipment", "Focus", "Default"]
        rows = [
            [
                t.id,
                t.name,
                t.equipment.display_name,
                ", ".join(f.display_name for f in t.focus),
                f"{t.sets} x {t.reps}",
            ]
            for t in templates
        ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(templates)} exercise(s)")
