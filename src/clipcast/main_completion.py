"""Shell completion script generation."""
import click
from click.shell_completion import get_completion_class

PROG_NAME: str = "clipcast"
COMPLETE_VAR: str = "_CLIPCAST_COMPLETE"

# Choice values accepted by "clipcast generate", mapped to click shell names.
SHELLS: dict[str, str] = {
    "complete-bash": "bash",
    "complete-zsh": "zsh",
    "complete-fish": "fish",
}


def completion_source(cli: click.Command, choice: str) -> str:
    """Return the completion script for one shell.

    Args:
        cli: The root click command.
        choice: One of the SHELLS keys.

    Returns:
        Script text to source in the shell.
    """
    completion_class = get_completion_class(SHELLS[choice])
    if completion_class is None:
        raise click.UsageError(f"Unsupported shell: {choice}")
    completion = completion_class(cli, {}, PROG_NAME, COMPLETE_VAR)
    return completion.source()
