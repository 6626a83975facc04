#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

from urllib import parse

from rancher_bootstrap import exception


def parse_server(server):
    """ Helper to split a server URL, rejecting values without a host.

    parse_server('https://rancher.local:8443') -> SplitResult(...)
    parse_server('rancher.local')              -> ConfigurationError

    """
    try:
        parsed = parse.urlsplit(server)
    except (ValueError, TypeError, AttributeError) as e:
        raise exception.ConfigurationError(
            reason="invalid server URL %r: %s" % (server, e))
    if not parsed.netloc:
        raise exception.ConfigurationError(
            reason="server URL %r has no host" % server)
    return parsed


def cacerts_url(server, path):
    """ Helper to build the https URL of a CA bundle endpoint.

    Only the host and port of the server are kept.

    cacerts_url('http://rancher.local/v3', '/cacerts')
        -> https://rancher.local/cacerts

    """
    return "https://%s%s" % (parse_server(server).netloc, path)


def resource_url(server, path):
    """ Helper to replace the path of the server URL.

    resource_url('https://rancher.local/v3', '/ping')
        -> https://rancher.local/ping

    """
    parsed = parse_server(server)
    return parse.urlunsplit((parsed.scheme, parsed.netloc, path,
                             parsed.query, parsed.fragment))
