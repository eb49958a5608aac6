import secrets
from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def now() -> datetime:
    return datetime.now(UTC)


def generate_id(size: int) -> str:
    """Return a random hex string of `size` characters.

    Draws size/2 bytes from the OS CSPRNG. A failing random source raises
    and is not handled here.
    """
    return secrets.token_hex(size // 2)
