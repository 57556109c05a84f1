"""CLI entry point for home-strength."""

import click

from .commands import catalog, generate, init, kid, log, log_class, routines, stats


@click.group()
@click.version_option(version="0.1.0", prog_name="home-strength")
def main():
    """home-strength: household workout generator and tracker.

    Generate randomized routines from the equipment you have, play-based
    routines for young kids, and track streaks and progress.

    Example usage:

        # Initialize the project
        home-strength init

        # Generate and save a routine
        home-strength generate -e dumbbells -d medium -i medium --save

        # Fun moves for the little ones
        home-strength kid --energy high

        # Log it and check your streak
        home-strength log <routine-id>
        home-strength stats

        # Instructors can log the classes they lead
        home-strength log-class <routine-id> --participants 12
    """
    pass


# Register commands
main.add_command(init)
main.add_command(generate)
main.add_command(kid)
main.add_command(catalog)
main.add_command(routines)
main.add_command(log)
main.add_command(log_class)
main.add_command(stats)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
