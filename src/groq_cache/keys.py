"""Cache key derivation.

Keys are the standard base64 encoding of the prompt's UTF-8 bytes behind the
fixed ``KEY_PREFIX`` namespace, truncated to ``MAX_KEY_LENGTH`` characters.
No normalization is applied, so only byte-identical prompts share a key.
Prompts that agree on their first ~145 bytes collide; that risk is accepted.
"""

import base64

KEY_PREFIX = "groq_"
MAX_KEY_LENGTH = 200


def derive_key(prompt: str) -> str:
    """Derive the cache key for a prompt.

    Args:
        prompt: Raw prompt text, any length (empty is allowed)

    Returns:
        A key of at most MAX_KEY_LENGTH characters
    """
    encoded = base64.b64encode(prompt.encode("utf-8")).decode("ascii")
    return (KEY_PREFIX + encoded)[:MAX_KEY_LENGTH]
