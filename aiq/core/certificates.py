"""Certificate code generation and shape checks.

A certificate code is a lookup token for the stored result, not a signature:
it is drawn from a non-cryptographic random source and nothing checks it
against previously issued codes.
"""

import random
import string

CERTIFICATE_PREFIX = "AIQ-"
CERTIFICATE_BODY_LENGTH = 8
CERTIFICATE_LENGTH = len(CERTIFICATE_PREFIX) + CERTIFICATE_BODY_LENGTH

CERTIFICATE_ALPHABET = string.ascii_uppercase + string.digits


def generate_certificate_code(rng: random.Random | None = None) -> str:
    """
    Generate a new certificate code like ``AIQ-7K2QZ9LM``.

    Args:
        rng: Random source (defaults to the module-level generator)

    Returns:
        Code of the form AIQ- followed by 8 uppercase alphanumerics
    """
    source = rng or random
    body = "".join(source.choices(CERTIFICATE_ALPHABET, k=CERTIFICATE_BODY_LENGTH))
    return f"{CERTIFICATE_PREFIX}{body}"


def is_valid_certificate_format(code: str) -> bool:
    """Shape check only: AIQ- prefix and 11 characters in total."""
    return code.startswith(CERTIFICATE_PREFIX) and len(code) == CERTIFICATE_LENGTH


def normalize_certificate_code(code: str) -> str:
    """Trim and uppercase user input before verification."""
    return code.strip().upper()
