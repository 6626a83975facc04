################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
import sys

from oslo_config import cfg
from oslo_log import log

from rancher_bootstrap import cacerts
from rancher_bootstrap import cluster
from rancher_bootstrap.config import CONF
from rancher_bootstrap import exception

LOG = log.getLogger(__name__)

EXIT_CODES = [
    (exception.ConfigurationError, 2),
    (exception.TransportError, 3),
    (exception.BadStatusError, 4),
    (exception.IntegrityError, 5),
]


def do_cacerts():
    cacert, checksum = cacerts.ca_certs(
        CONF.command.server, CONF.command.token,
        cluster_token=not CONF.command.machine)
    if not cacert:
        LOG.info("Server is trusted by the default CA store")
        return
    LOG.info("CA bundle checksum: %s" % checksum)
    sys.stdout.buffer.write(cacert)


def do_get():
    fetch = cacerts.machine_get if CONF.command.machine else cacerts.get
    body, checksum = fetch(CONF.command.server, CONF.command.token,
                           CONF.command.path)
    if checksum:
        LOG.info("CA bundle checksum: %s" % checksum)
    sys.stdout.buffer.write(body)


def do_update_client_secret():
    cluster.update_client_secret(CONF.command.kubeconfig)
    print("Cluster client secret is updated.")


def _add_server_args(parser):
    parser.add_argument('--server', required=True,
                        help='URL of the cluster management server')
    parser.add_argument('--token', required=True,
                        help='Join token, or hardware token reference')
    parser.add_argument('--machine', action='store_true',
                        help='Use machine token semantics')


def add_command_parsers(subparsers):
    parser = subparsers.add_parser('cacerts',
                                   help='Download and verify the CA bundle')
    _add_server_args(parser)
    parser.set_defaults(func=do_cacerts)

    parser = subparsers.add_parser('get',
                                   help='Fetch a resource from the server')
    _add_server_args(parser)
    parser.add_argument('--path', required=True,
                        help='Path of the resource on the server')
    parser.set_defaults(func=do_get)

    parser = subparsers.add_parser('update-client-secret',
                                   help='Update the fleet local cluster '
                                        'client secret')
    parser.add_argument('--kubeconfig', default=None,
                        help='Path of the kubeconfig to use')
    parser.set_defaults(func=do_update_client_secret)


command_opt = cfg.SubCommandOpt('command',
                                title='Commands',
                                help='Available commands',
                                handler=add_command_parsers)

CONF.register_cli_opt(command_opt)
log.register_options(CONF)


def exit_code(error):
    for error_class, code in EXIT_CODES:
        if isinstance(error, error_class):
            return code
    return 1


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    CONF(argv, project='rancher-bootstrap')
    log.setup(CONF, 'rancher-bootstrap')

    try:
        CONF.command.func()
    except exception.RancherBootstrapException as e:
        LOG.error("%s failed: %s" % (CONF.command.name, e))
        return exit_code(e)
    return 0


if __name__ == "__main__":
    sys.exit(main())
