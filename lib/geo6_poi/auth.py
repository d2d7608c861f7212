"""
Geo-6 API request authentication

Two API generations use two mutually exclusive schemes:
- legacy: SHA-512 crypt signature over consumer id, timestamp, host, method and path,
  sent in three X-Geo6-* headers
- token: HS512 signed JWT sent as a bearer credential

Nothing is cached: every call produces a fresh signature or token.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

import crypt_r
import jwt

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SIGNING_SEPARATOR = "__"
SIGNING_METHOD = "GET"
# SHA-512 crypt reads the salt up to the first "$" and uses at most 16 characters of it
CRYPT_PREFIX = "$6$"
CRYPT_SALT_MAX_LENGTH = 16

TOKEN_ALGORITHM = "HS512"
TOKEN_AUDIENCE = "geo6-api"
TOKEN_ISSUER_TEMPLATE = "geocoder-python/{providerName}"

HEADER_CONSUMER = "X-Geo6-Consumer"
HEADER_TIMESTAMP = "X-Geo6-Timestamp"
HEADER_TOKEN = "X-Geo6-Token"
HEADER_AUTHORIZATION = "Authorization"


@dataclass(frozen=True)
class LegacyHmacAuth:
    """Credentials of the legacy API (getPOI)"""

    customerId: str
    privateKey: str = field(repr=False)


@dataclass(frozen=True)
class BearerTokenAuth:
    """Credentials of the newer API (getPOIList)"""

    clientId: str
    privateKey: str = field(repr=False)


AuthStrategy = Union[LegacyHmacAuth, BearerTokenAuth]


@dataclass(frozen=True)
class LegacySignature:
    """Timestamp and hash of one legacy signature.

    The hash is only valid together with this exact timestamp.
    """

    timestamp: int
    token: str


def buildSigningString(customerId: str, timestamp: int, host: str, path: str) -> str:
    """Build the string signed by the legacy scheme."""
    return SIGNING_SEPARATOR.join([customerId, str(timestamp), host, SIGNING_METHOD, path])


def cryptSha512(message: str, salt: str) -> str:
    """Hash message with SHA-512 crypt using given salt, dood!

    Args:
        message: Text to hash
        salt: Salt, read like crypt(3) does: up to the first ``$``,
            at most 16 characters, any other character allowed

    Returns:
        Hash in modular crypt format: ``$6$<salt>$<checksum>`` (5000 rounds)

    Raises:
        ConfigurationError: If the usable salt is empty or the system crypt refuses it
    """
    salt = salt.split("$", 1)[0][:CRYPT_SALT_MAX_LENGTH]
    if not salt:
        raise ConfigurationError("The private key cannot be empty.")

    try:
        result = crypt_r.crypt(message, f"{CRYPT_PREFIX}{salt}$")
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"The private key cannot be used for signing: {e}") from e

    if not result or not result.startswith(CRYPT_PREFIX):
        raise ConfigurationError("The private key cannot be used for signing.")
    return result


def signLegacy(auth: LegacyHmacAuth, host: str, path: str, timestamp: Optional[int] = None) -> LegacySignature:
    """Sign a legacy API request.

    Args:
        auth: Legacy credentials
        host: API host name (e.g. "api.geo6.be")
        path: API path (e.g. "/geocode/getPOI")
        timestamp: Unix timestamp to sign (default: now)

    Returns:
        LegacySignature with the timestamp used and the resulting hash
    """
    if timestamp is None:
        timestamp = int(time.time())

    signingString = buildSigningString(auth.customerId, timestamp, host, path)
    return LegacySignature(timestamp=timestamp, token=cryptSha512(signingString, auth.privateKey))


def buildBearerToken(
    auth: BearerTokenAuth,
    issuer: str,
    audience: str = TOKEN_AUDIENCE,
    issuedAt: Optional[int] = None,
) -> str:
    """Build a fresh signed JWT for the newer API.

    Args:
        auth: Bearer token credentials
        issuer: Value of the ``iss`` claim
        audience: Value of the ``aud`` claim
        issuedAt: Value of the ``iat`` claim (default: now)

    Returns:
        Compact JWT (``header.payload.signature``)

    Raises:
        ConfigurationError: If the private key is empty or rejected by the HMAC algorithm
    """
    if not auth.privateKey:
        raise ConfigurationError("The private key cannot be empty.")
    if issuedAt is None:
        issuedAt = int(time.time())

    claims = {
        "aud": audience,
        "iat": issuedAt,
        "iss": issuer,
        "sub": auth.clientId,
    }
    try:
        return jwt.encode(claims, auth.privateKey, algorithm=TOKEN_ALGORITHM)
    except (jwt.InvalidKeyError, TypeError, ValueError) as e:
        raise ConfigurationError(f"The private key cannot be used for signing: {e}") from e


class RequestSigner:
    """Produces authentication headers for one outbound API call.

    Args:
        auth: Authentication strategy (legacy or bearer token)
        providerName: Provider name, used in the token issuer
        apiHost: API host name, part of the legacy signature
        apiPath: API path, part of the legacy signature
    """

    def __init__(self, auth: AuthStrategy, providerName: str, apiHost: str, apiPath: str):
        self.auth = auth
        self.providerName = providerName
        self.apiHost = apiHost
        self.apiPath = apiPath

    def getHeaders(self) -> Dict[str, str]:
        """Compute auth headers for a new request."""
        match self.auth:
            case LegacyHmacAuth(customerId=customerId):
                signature = signLegacy(self.auth, self.apiHost, self.apiPath)
                logger.debug(f"Signed legacy request for {customerId} at {signature.timestamp}")
                return {
                    HEADER_CONSUMER: customerId,
                    HEADER_TIMESTAMP: str(signature.timestamp),
                    HEADER_TOKEN: signature.token,
                }
            case BearerTokenAuth():
                token = buildBearerToken(
                    self.auth,
                    issuer=TOKEN_ISSUER_TEMPLATE.format(providerName=self.providerName),
                )
                return {HEADER_AUTHORIZATION: f"Bearer {token}"}

        raise ConfigurationError(f"Unknown authentication strategy: {type(self.auth).__name__}")
