"""WKD URL construction per draft-koch-openpgp-webkey-service."""

from dataclasses import dataclass
from typing import Any, Callable, Tuple
from urllib.parse import quote

from . import zbase32
from .errors import InvalidArgumentError, InvalidEmailError
from .hashing import SHA1_DIGEST_SIZE, sha1

# Characters encodeURIComponent leaves unescaped besides alphanumerics
# and "-_.~", which quote() never escapes.
_COMPONENT_SAFE = "!*'()"


@dataclass(frozen=True)
class WKDUrls:
    """Candidate URLs for one email address."""

    domain: str
    encoded_local_part: str
    advanced: str
    direct: str


class WKDDiscovery:
    """Derives Web Key Directory lookup URLs from email addresses."""

    ADVANCED_URL_TEMPLATE = (
        "https://openpgpkey.{domain}/.well-known/openpgpkey/{domain}"
        "/hu/{encoded}?l={escaped}"
    )
    DIRECT_URL_TEMPLATE = (
        "https://{domain}/.well-known/openpgpkey/hu/{encoded}?l={escaped}"
    )

    @staticmethod
    def parse_email(email: Any) -> Tuple[str, str]:
        """
        Split an email address into local part and domain.

        Args:
            email: Email address

        Returns:
            Tuple of (local_part, domain), both in their original case

        Raises:
            InvalidArgumentError: If email is missing or not a string
            InvalidEmailError: If email does not contain exactly one "@"
        """
        if not email:
            raise InvalidArgumentError("You must provide an email parameter!")
        if not isinstance(email, str):
            raise InvalidArgumentError("Invalid e-mail address.")
        if email.count("@") != 1:
            raise InvalidEmailError("Invalid e-mail address.")
        local_part, _, domain = email.partition("@")
        return local_part, domain

    @staticmethod
    def normalize_local_part(local_part: str) -> bytes:
        """Return the bytes that get hashed: the lower-cased local part in UTF-8."""
        return local_part.lower().encode("utf-8")

    @staticmethod
    def escape_local_part(local_part: str) -> str:
        """Percent-encode the local part, keeping its case, for the l= parameter."""
        return quote(local_part, safe=_COMPONENT_SAFE)

    @staticmethod
    def encode_digest(digest: bytes) -> str:
        """
        Z-Base32 encode a SHA-1 digest of the local part.

        Raises:
            ValueError: If digest is not a 20-byte SHA-1 digest
        """
        if len(digest) != SHA1_DIGEST_SIZE:
            raise ValueError(
                f"Expected a {SHA1_DIGEST_SIZE}-byte SHA-1 digest, "
                f"got {len(digest)} bytes"
            )
        return zbase32.encode(digest)

    @classmethod
    def hash_local_part(
        cls, local_part: str, hasher: Callable[[bytes], bytes] = sha1
    ) -> str:
        """Hash and encode a local part with a synchronous hasher."""
        return cls.encode_digest(hasher(cls.normalize_local_part(local_part)))

    @classmethod
    def construct_urls(
        cls, local_part: str, domain: str, encoded_local_part: str
    ) -> WKDUrls:
        """
        Build the advanced and direct method URLs.

        Args:
            local_part: Local part in its original case
            domain: Domain, used verbatim
            encoded_local_part: Z-Base32 encoded hash of the local part

        Returns:
            WKDUrls holding both candidates
        """
        values = {
            "domain": domain,
            "encoded": encoded_local_part,
            "escaped": cls.escape_local_part(local_part),
        }
        return WKDUrls(
            domain=domain,
            encoded_local_part=encoded_local_part,
            advanced=cls.ADVANCED_URL_TEMPLATE.format(**values),
            direct=cls.DIRECT_URL_TEMPLATE.format(**values),
        )

    @classmethod
    def build_urls(
        cls, email: str, hasher: Callable[[bytes], bytes] = sha1
    ) -> WKDUrls:
        """Parse, hash and build both URLs for an email address."""
        local_part, domain = cls.parse_email(email)
        return cls.construct_urls(
            local_part, domain, cls.hash_local_part(local_part, hasher)
        )
