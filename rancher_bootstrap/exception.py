#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

"""Exceptions raised while bootstrapping trust with the server."""


class RancherBootstrapException(Exception):
    """Base exception.

    Subclasses define a ``message`` template that is formatted with the
    keyword arguments given to the constructor.
    """
    message = "An unknown exception occurred."

    def __init__(self, message=None, **kwargs):
        self.kwargs = kwargs
        if not message:
            try:
                message = self.message % kwargs
            except KeyError:
                message = self.message
        self.msg = message
        super(RancherBootstrapException, self).__init__(message)

    def __str__(self):
        return self.msg


class ConfigurationError(RancherBootstrapException):
    message = "Invalid configuration: %(reason)s"


class TransportError(RancherBootstrapException):
    message = "Request to %(url)s failed: %(reason)s"


class BadStatusError(RancherBootstrapException):
    message = "Response %(status_code)s %(reason)s from %(url)s: %(body)s"

    def __init__(self, message=None, **kwargs):
        self.status_code = kwargs.get('status_code')
        self.body = kwargs.get('body')
        super(BadStatusError, self).__init__(message, **kwargs)


class IntegrityError(RancherBootstrapException):
    message = "Response hash (%(received)s) does not match (%(expected)s)"
