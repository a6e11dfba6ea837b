"""
Random hex identifiers for users, posts, comments and sessions
"""
import secrets

from ..config import settings
from ..domain.exceptions import EntropySourceError


def generate_hex_id(num_bytes: int = None) -> str:
    """
    Generate a random hex-encoded identifier

    Args:
        num_bytes: Number of random bytes (defaults to ENTITY_ID_BYTES)

    Returns:
        Hex string twice as long as num_bytes

    Raises:
        EntropySourceError: If the OS random source is unavailable
    """
    if num_bytes is None:
        num_bytes = settings.ENTITY_ID_BYTES
    try:
        return secrets.token_hex(num_bytes)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceError(str(e)) from e


def generate_session_id() -> str:
    """Generate a session identifier"""
    return generate_hex_id(settings.SESSION_ID_BYTES)
