################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################

CLUSTER_CACERTS_PATH = "/cacerts"
MACHINE_CACERTS_PATH = "/v1-rancheros/cacerts"

NONCE_HEADER = "X-Cattle-Nonce"
HASH_HEADER = "X-Cattle-Hash"
AUTHORIZATION_HEADER = "Authorization"

# Same alphabet and length as the server side random tokens
NONCE_CHARACTERS = "bcdfghjklmnpqrstvwxz2456789"
NONCE_LENGTH = 54

HARDWARE_TOKEN_PREFIX = "tpm://"
TOKEN_RESOLVER_NAMESPACE = "rancher_bootstrap.token_resolvers"

DEFAULT_TIMEOUT = 5
DEFAULT_CA_FILE_PATH = "/etc/pki/trust/anchors/additional-ca.pem"
DEFAULT_CA_FILE_PERMISSIONS = "0644"
DEFAULT_UPDATE_COMMAND = "update-ca-certificates"

KUBECONFIG_CANDIDATES = [
    "/etc/rancher/rke2/rke2.yaml",
    "/etc/rancher/k3s/k3s.yaml",
]

SETTINGS_GROUP = "management.cattle.io"
SETTINGS_VERSION = "v3"
SETTINGS_PLURAL = "settings"
INTERNAL_SERVER_URL_SETTING = "internal-server-url"
INTERNAL_CACERTS_SETTING = "internal-cacerts"
CLIENT_SECRET_NAMESPACE = "fleet-local"
CLIENT_SECRET_NAME = "local-kubeconfig"
