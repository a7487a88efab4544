"""Record identifier generation shared by users and file records."""

import secrets


def generate_record_id() -> str:
    """
    Generate a new record identifier.

    Returns:
        24 lowercase hex characters (96 random bits)
    """
    return secrets.token_hex(12)
