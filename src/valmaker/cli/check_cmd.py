"""Check values against a profile validator."""

from pathlib import Path

import click

from valmaker.profiles import ProfileError, load_profile_file


@click.command()
@click.argument("profile_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("validator")
@click.argument("values", nargs=-1, required=True)
def check(profile_file: Path, validator: str, values: tuple[str, ...]):
    """Validate VALUES with VALIDATOR from PROFILE_FILE.

    Exits with status 1 if any value is invalid.
    """
    try:
        loaded = load_profile_file(profile_file)
        run = loaded.get_validator(validator)
    except ProfileError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    invalid = 0
    for value in values:
        message = run(value)
        if message:
            invalid += 1
            click.echo(click.style(f"invalid: {value}: {message}", fg="red"))
        else:
            click.echo(click.style(f"ok: {value}", fg="green"))

    if invalid:
        click.echo(
            click.style(f"\n{invalid} of {len(values)} value(s) invalid", fg="red", bold=True)
        )
        raise SystemExit(1)
