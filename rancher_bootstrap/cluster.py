#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import base64
import os

from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from oslo_log import log

from rancher_bootstrap.common import constants
from rancher_bootstrap import exception

LOG = log.getLogger(__name__)


def get_kubeconfig(kubeconfig=None):
    """Return the kubeconfig path to use

    Args:
        kubeconfig(str): explicit path, takes precedence when given

    Returns: str path of the first kubeconfig found
    """
    if kubeconfig:
        return kubeconfig

    kubeconfig = os.environ.get("KUBECONFIG")
    if kubeconfig:
        return kubeconfig

    for candidate in constants.KUBECONFIG_CANDIDATES:
        if os.path.exists(candidate):
            return candidate

    raise exception.ConfigurationError(
        reason="no kubeconfig found in %s"
               % ", ".join(constants.KUBECONFIG_CANDIDATES))


def _get_setting(custom_api, name):
    setting = custom_api.get_cluster_custom_object(
        constants.SETTINGS_GROUP,
        constants.SETTINGS_VERSION,
        constants.SETTINGS_PLURAL,
        name)
    return setting.get('value') or ''


def _b64(value):
    return base64.b64encode(value.encode('utf-8')).decode('ascii')


def update_client_secret(kubeconfig=None):
    """ Update the fleet-local/local-kubeconfig cluster client secret

    Copies the Rancher settings internal-server-url and internal-cacerts
    into the apiServerURL and apiServerCA keys of the secret. Fleet needs
    both to provision the local cluster.

    Args:
        kubeconfig(str): optional kubeconfig path
    """
    kubeconfig = get_kubeconfig(kubeconfig)
    api_client = k8s_config.new_client_from_config(config_file=kubeconfig)

    custom_api = k8s_client.CustomObjectsApi(api_client)
    internal_server_url = _get_setting(
        custom_api, constants.INTERNAL_SERVER_URL_SETTING)
    LOG.info("internal-server-url is %r" % internal_server_url)
    internal_cacerts = _get_setting(
        custom_api, constants.INTERNAL_CACERTS_SETTING)
    LOG.info("internal-cacerts is %r" % internal_cacerts)

    if not internal_server_url or not internal_cacerts:
        raise exception.ConfigurationError(
            reason="both 'internal-server-url' and 'internal-cacerts' "
                   "settings must be configured")

    core_api = k8s_client.CoreV1Api(api_client)
    secret = core_api.read_namespaced_secret(
        constants.CLIENT_SECRET_NAME, constants.CLIENT_SECRET_NAMESPACE)
    data = dict(secret.data or {})
    data['apiServerURL'] = _b64(internal_server_url)
    data['apiServerCA'] = _b64(internal_cacerts)
    secret.data = data
    core_api.replace_namespaced_secret(
        constants.CLIENT_SECRET_NAME, constants.CLIENT_SECRET_NAMESPACE,
        secret)
    LOG.info("Cluster client secret %s/%s is updated"
             % (constants.CLIENT_SECRET_NAMESPACE,
                constants.CLIENT_SECRET_NAME))
