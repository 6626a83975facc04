################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
import base64
import hashlib
import hmac
import secrets

from rancher_bootstrap.common import constants
from rancher_bootstrap import exception


def hash_hex(data):
    """Function that returns the lowercase hex SHA-256 digest of data.
    This is the checksum callers use to detect a changed CA bundle.

    Parameters
    ----------
    data : bytes
        Bytes to hash

    Returns
    -------
    str
        Hex encoded digest
    """
    return hashlib.sha256(data).hexdigest()


def hash_base64(data):
    """Function that returns the base64 encoded SHA-256 digest of data.
    Used as the bearer value while bootstrapping, so the raw join token
    never leaves the node.

    Parameters
    ----------
    data : bytes
        Bytes to hash

    Returns
    -------
    str
        Standard base64 encoding of the raw digest
    """
    return base64.b64encode(hashlib.sha256(data).digest()).decode('ascii')


def response_hash(token, nonce, body):
    """Function that computes the integrity value the server sends back in
    the X-Cattle-Hash header.

    e.g.
        HMAC-SHA512(key=token, message=nonce + b'\\0' + body + b'\\0')

    Parameters
    ----------
    token : str
        Join token, used as the HMAC key
    nonce : str
        Nonce sent with the request
    body : bytes
        Response body

    Returns
    -------
    str
        Standard base64 encoding of the HMAC
    """
    digest = hmac.new(token.encode('utf-8'), digestmod=hashlib.sha512)
    digest.update(nonce.encode('utf-8'))
    digest.update(b'\x00')
    digest.update(body)
    digest.update(b'\x00')
    return base64.b64encode(digest.digest()).decode('ascii')


def generate_nonce():
    """Function that generates a fresh random nonce for a bootstrap attempt.

    Returns
    -------
    str
        Random string drawn from the server's token alphabet

    Raises
    ------
    ConfigurationError
        If the system cannot provide random data
    """
    try:
        return ''.join(secrets.choice(constants.NONCE_CHARACTERS)
                       for _ in range(constants.NONCE_LENGTH))
    except (NotImplementedError, OSError) as e:
        raise exception.ConfigurationError(
            reason="unable to generate nonce: %s" % e)


def mask_token(token):
    # Keep at most four characters so log lines can still be correlated
    if not token:
        return "<empty>"
    return "%s****" % token[:min(4, len(token) // 4)]
