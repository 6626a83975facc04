################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################

SERVER = "https://rancher.example.com:8443/v3"
SERVER_HOST = "rancher.example.com:8443"
CLUSTER_CACERTS_URL = "https://rancher.example.com:8443/cacerts"
MACHINE_CACERTS_URL = "https://rancher.example.com:8443/v1-rancheros/cacerts"

TOKEN = "k8stokenjoinsecret0123456789"
HARDWARE_TOKEN = "tpm://node-key"
UNSEALED_TOKEN = "unsealedtokenfromdevice"

RESOURCE_PATH = "/v1-rancheros/plan"
RESOURCE_URL = "https://rancher.example.com:8443/v1-rancheros/plan"
RESOURCE_BODY = b'{"instructions": []}'

# Content is never parsed, it only has to look like a bundle
CA_BUNDLE = b"""-----BEGIN CERTIFICATE-----
MIIBdzCCAR2gAwIBAgIBADAKBggqhkjOPQQDAjA7MRwwGgYDVQQKExNkeW5hbWlj
bGlzdGVuZXItb3JnMRswGQYDVQQDExJkeW5hbWljbGlzdGVuZXItY2EwHhcNMjYw
-----END CERTIFICATE-----
"""

# sha256 of b"" as a fixed reference
EMPTY_SHA256 = \
    "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

CERT_ERROR = "certificate verify failed: unable to get local issuer certificate"
