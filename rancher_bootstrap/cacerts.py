################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
import base64
import contextlib
import hmac
import os
import tempfile

from oslo_log import log
import requests
import urllib3

from rancher_bootstrap.common import constants
from rancher_bootstrap.config import CONF
from rancher_bootstrap import exception
from rancher_bootstrap import hashing
from rancher_bootstrap import resolvers
from rancher_bootstrap import utils

LOG = log.getLogger(__name__)

# The bootstrap download is expected to go over an unverified connection
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


def _bearer(value):
    return "Bearer %s" % value


def _excerpt(body, limit):
    text = body[:limit].decode('utf-8', errors='replace')
    if len(body) > limit:
        text += '...'
    return text


@contextlib.contextmanager
def pinned_trust(cacert):
    """Yield the requests ``verify`` value for a CA bundle.

    A non empty bundle is written to a temporary PEM file which becomes the
    only trust root of the request, and is removed on exit. An empty bundle
    keeps the default trust store.
    """
    if not cacert:
        yield True
        return

    fd, path = tempfile.mkstemp(prefix='cacerts-', suffix='.pem')
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(cacert)
        yield path
    finally:
        os.unlink(path)


class CACertBootstrapper(object):
    """Obtain a verified CA bundle for a server using only the join token.

    The token authenticates the node to the server through its SHA-256
    hash, and authenticates the server response through an HMAC keyed by
    the raw token and a fresh nonce. Until that HMAC is verified the
    downloaded bytes are not trusted for anything.
    """

    def __init__(self, timeout=None, body_excerpt_length=None):
        self.timeout = timeout
        if timeout is None:
            self.timeout = CONF.cacerts.timeout
        if body_excerpt_length is None:
            body_excerpt_length = CONF.cacerts.body_excerpt_length
        self.body_excerpt_length = body_excerpt_length

    def _trusted_by_default(self, url):
        # Any response at all means the default trust store already
        # validates the server. Status and content are not inspected.
        try:
            with requests.Session() as session:
                with session.get(url, timeout=self.timeout) as response:
                    response.content
        except requests.exceptions.RequestException as e:
            LOG.debug("Trust check of %s through the default trust store failed: "
                      "%s" % (url, e))
            return False
        return True

    def _download(self, url, token, nonce):
        headers = {
            constants.NONCE_HEADER: nonce,
            constants.AUTHORIZATION_HEADER: _bearer(
                hashing.hash_base64(token.encode('utf-8'))),
        }
        try:
            with requests.Session() as session:
                # verify must be set per request, REQUESTS_CA_BUNDLE
                # overrides session.verify
                with session.get(url, headers=headers, verify=False,
                                 timeout=self.timeout) as response:
                    response.content
                    return response
        except requests.exceptions.RequestException as e:
            raise exception.TransportError(
                url=url, reason="insecure cacerts download: %s" % e) from e

    def ca_certs(self, server, token, cluster_token=True):
        """Return (bundle, checksum) for the server

        (None, "") means the default trust store is sufficient and no
        bundle override is needed.
        """
        nonce = hashing.generate_nonce()
        path = constants.CLUSTER_CACERTS_PATH
        if not cluster_token:
            path = constants.MACHINE_CACERTS_PATH
        url = utils.cacerts_url(server, path)

        if self._trusted_by_default(url):
            LOG.info("%s is trusted by the default CA store, no CA bundle "
                     "override needed" % url)
            return None, ""

        LOG.info("Downloading CA bundle from %s with token %s"
                 % (url, hashing.mask_token(token)))
        response = self._download(url, token, nonce)
        body = response.content

        if response.status_code != 200:
            raise exception.BadStatusError(
                status_code=response.status_code,
                reason=response.reason,
                url=url,
                body=_excerpt(body, self.body_excerpt_length))

        received = response.headers.get(constants.HASH_HEADER, '')
        expected = hashing.response_hash(token, nonce, body)
        if not hmac.compare_digest(received.encode('utf-8'),
                                   expected.encode('utf-8')):
            LOG.error("CA bundle from %s failed integrity verification, "
                      "discarding it" % url)
            raise exception.IntegrityError(received=received,
                                           expected=expected)

        if not body:
            LOG.info("Server %s returned an empty CA bundle" % url)
            return None, ""

        checksum = hashing.hash_hex(body)
        LOG.info("Verified CA bundle from %s, checksum %s" % (url, checksum))
        return body, checksum


class TrustedFetcher(object):
    """Fetch a protected resource after bootstrapping trust.

    Each call builds its own session pinned to the verified CA bundle and
    releases it before returning.
    """

    def __init__(self, bootstrapper=None, resolver=None, timeout=None):
        self.timeout = timeout
        if timeout is None:
            self.timeout = CONF.cacerts.timeout
        self.bootstrapper = bootstrapper or CACertBootstrapper(
            timeout=self.timeout)
        self._resolver = resolver

    @property
    def resolver(self):
        if self._resolver is None:
            self._resolver = resolvers.get_resolver()
        return self._resolver

    def _fetch(self, url, headers, verify):
        try:
            with requests.Session() as session:
                with session.get(url, headers=headers, verify=verify,
                                 timeout=self.timeout) as response:
                    body = response.content
        except requests.exceptions.RequestException as e:
            raise exception.TransportError(url=url, reason=e) from e

        if response.status_code != 200:
            raise exception.BadStatusError(
                status_code=response.status_code,
                reason=response.reason,
                url=url,
                body=body.decode('utf-8', errors='replace'))
        return body

    def get(self, server, token, path, cluster_token=True):
        """Return (body, checksum) of path on the server

        The checksum is the one of the CA bundle used, so callers can spot
        a changed bundle between calls.
        """
        url = utils.resource_url(server, path)

        is_hardware = False
        if not cluster_token:
            is_hardware, token = self.resolver.resolve_token(token)

        cacert, checksum = self.bootstrapper.ca_certs(server, token,
                                                      cluster_token)

        if is_hardware:
            LOG.info("Fetching %s with a hardware backed token" % url)
            return self.resolver.get(cacert, url), checksum

        headers = {}
        if not cluster_token:
            headers[constants.AUTHORIZATION_HEADER] = _bearer(
                base64.b64encode(token.encode('utf-8')).decode('ascii'))

        LOG.debug("Fetching %s (%s)" % (
            url, "pinned CA bundle" if cacert else "default trust store"))
        with pinned_trust(cacert) as verify:
            body = self._fetch(url, headers, verify)
        return body, checksum


def ca_certs(server, token, cluster_token=True):
    return CACertBootstrapper().ca_certs(server, token, cluster_token)


def get(server, token, path):
    """Fetch path using cluster token semantics"""
    return TrustedFetcher().get(server, token, path, cluster_token=True)


def machine_get(server, token, path):
    """Fetch path using machine token semantics, hardware tokens allowed"""
    return TrustedFetcher().get(server, token, path, cluster_token=False)
