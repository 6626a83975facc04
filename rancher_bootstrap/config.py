#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

""" Define configuration info for rancher-bootstrap"""

from oslo_config import cfg

from rancher_bootstrap.common import constants

CONF = cfg.CONF

cacerts_opts = [
    cfg.IntOpt("timeout",
               default=constants.DEFAULT_TIMEOUT,
               min=1,
               help="Number of seconds to wait for each request to the server"),
    cfg.StrOpt("token_resolver",
               default="passthrough",
               help="Name of the token resolver plugin used for machine "
                    "tokens"),
    cfg.StrOpt("ca_file_path",
               default=constants.DEFAULT_CA_FILE_PATH,
               help="Path the CA bundle file instruction writes to"),
    cfg.StrOpt("ca_file_permissions",
               default=constants.DEFAULT_CA_FILE_PERMISSIONS,
               help="Permissions of the CA bundle file"),
    cfg.StrOpt("update_command",
               default=constants.DEFAULT_UPDATE_COMMAND,
               help="Command that refreshes the node trust store"),
    cfg.IntOpt("body_excerpt_length",
               default=1024,
               min=0,
               help="Maximum number of response bytes quoted in errors"),
]

CONF.register_opts(cacerts_opts, cfg.OptGroup("cacerts"))
