"""Profile CLI commands."""

from pathlib import Path

import click

from valmaker.profiles import Profile, ProfileError, ProfileLoader, load_profile_file


@click.group()
def profile():
    """Profile commands."""
    pass


@profile.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
def lint(path: Path):
    """Load a profile file, or every profile in a directory, and list its validators."""
    try:
        if path.is_dir():
            loader = ProfileLoader(path)
            loader.load_all()
            profiles: list[Profile] = [loader.profiles[name] for name in sorted(loader.profiles)]
        else:
            profiles = [load_profile_file(path)]
    except ProfileError as e:
        click.echo(click.style(f"Profile validation failed: {e}", fg="red"), err=True)
        raise SystemExit(1)

    if not profiles:
        click.echo(click.style(f"No profiles found in {path}", fg="yellow"))
        return

    for loaded in profiles:
        click.echo(
            f"  ✓ {loaded.name} ({len(loaded.matchers)} matchers, "
            f"{len(loaded.validators)} validators)"
        )
        for name in loaded.validators:
            click.echo(f"      - {name}")

    click.echo(click.style("\nAll profiles are valid.", fg="green", bold=True))
