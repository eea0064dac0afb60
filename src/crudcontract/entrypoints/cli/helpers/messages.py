"""Terminal message helpers for the crudcontract CLI.

Messages write to stderr so stdout can remain machine-readable.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(emoji: str, fallback: str) -> str:
    """Return `emoji` when stderr can encode it, else the ASCII `fallback`."""
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  tests/controllers/assets/conftest.py exists, skipping.``
    """
    click.secho(f"{glyph('⚠️', '[!]')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Wrote tests/controllers/assets/conftest.py``
    """
    click.secho(f"{glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)
