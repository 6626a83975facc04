#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import abc

from oslo_log import log
from stevedore import driver
from stevedore import exception as stevedore_exception

from rancher_bootstrap.common import constants
from rancher_bootstrap.config import CONF
from rancher_bootstrap import exception

LOG = log.getLogger(__name__)


class TokenResolver(object, metaclass=abc.ABCMeta):
    """Base class for machine token resolution.

    A resolver turns the token given on the command line into the token
    used against the server, and tells the caller whether the token is
    backed by a hardware device.
    """

    @abc.abstractmethod
    def resolve_token(self, token):
        """Resolve a machine token

        :param token: token or hardware token reference
        :returns: tuple (is_hardware_backed, resolved_token)
        """


class PassthroughTokenResolver(TokenResolver):
    """Resolver for plain tokens, which are used as given."""

    def resolve_token(self, token):
        return False, token


class HardwareTokenResolver(TokenResolver):
    """Base class for hardware sealed tokens.

    Tokens carrying the ``tpm://`` prefix are references to a credential
    sealed in the device. Anything else is passed through unchanged.
    """

    prefix = constants.HARDWARE_TOKEN_PREFIX

    def resolve_token(self, token):
        if not token.startswith(self.prefix):
            return False, token
        LOG.debug("Unsealing hardware backed token")
        return True, self.unseal(token[len(self.prefix):])

    @abc.abstractmethod
    def unseal(self, reference):
        """Unseal the credential named by reference

        :param reference: token reference without the prefix
        :returns: resolved token
        """

    @abc.abstractmethod
    def get(self, cacert, url, headers=None):
        """Fetch url through the hardware device

        :param cacert: verified CA bundle bytes, or None for the default
                       trust store
        :param url: resource URL
        :param headers: optional extra request headers
        :returns: response body bytes
        """


def get_resolver(name=None):
    """Load a token resolver plugin by name

    Plugins register under the rancher_bootstrap.token_resolvers entry
    point namespace; hardware backed resolvers ship in their own packages.
    """
    name = name or CONF.cacerts.token_resolver
    LOG.debug("Loading token resolver %s" % name)
    try:
        manager = driver.DriverManager(
            namespace=constants.TOKEN_RESOLVER_NAMESPACE,
            name=name,
            invoke_on_load=True,
        )
    except stevedore_exception.NoMatches:
        raise exception.ConfigurationError(
            reason="unknown token resolver %r" % name)
    return manager.driver
