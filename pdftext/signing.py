"""HMAC-SHA512 signing utility."""

import hashlib
import hmac


def generate_hmac_sha512(data: str, secret: str) -> str:
    """Sign data with secret using HMAC-SHA512.

    Args:
        data: Message to sign, encoded as UTF-8.
        secret: Signing key, encoded as UTF-8.

    Returns:
        Lowercase hex digest.
    """
    return hmac.new(secret.encode("utf-8"), data.encode("utf-8"), hashlib.sha512).hexdigest()
