"""Hash capability used to derive WKD local part identifiers."""

from cryptography.hazmat.primitives import hashes

SHA1_DIGEST_SIZE = 20


def sha1(data: bytes) -> bytes:
    """Return the 20-byte SHA-1 digest of data."""
    digest = hashes.Hash(hashes.SHA1())
    digest.update(data)
    return digest.finalize()
