#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

"""Provisioning descriptors handed to the node execution agent.

Nothing here is executed locally; the agent runs the instructions and
writes the files.
"""

import base64

from rancher_bootstrap import cacerts
from rancher_bootstrap.config import CONF


class Instruction(object):
    """Command the agent runs"""

    def __init__(self, name, save_output, command, args=None, env=None):
        self.name = name
        self.save_output = save_output
        self.command = command
        self.args = list(args or [])
        self.env = list(env or [])

    def to_dict(self):
        data = {
            'name': self.name,
            'saveOutput': self.save_output,
            'command': self.command,
        }
        if self.args:
            data['args'] = self.args
        if self.env:
            data['env'] = self.env
        return data

    def __eq__(self, other):
        return isinstance(other, Instruction) and \
            self.to_dict() == other.to_dict()

    def __repr__(self):
        return "Instruction(%r)" % self.to_dict()


class File(object):
    """File the agent writes, content is base64 encoded"""

    def __init__(self, content, path, permissions):
        self.content = content
        self.path = path
        self.permissions = permissions

    def to_dict(self):
        return {
            'content': self.content,
            'path': self.path,
            'permissions': self.permissions,
        }

    def __eq__(self, other):
        return isinstance(other, File) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return "File(path=%r, permissions=%r)" % (self.path, self.permissions)


def to_update_ca_certificates_instruction():
    command = CONF.cacerts.update_command
    return Instruction(name="update-ca-certificates",
                       save_output=True,
                       command=command)


def to_file(server, token):
    """Build the CA bundle file from the cluster scoped bootstrap

    An empty bundle, meaning the default trust store is enough, gives a
    file with empty content.
    """
    cacert, _ = cacerts.ca_certs(server, token, cluster_token=True)
    return File(content=base64.b64encode(cacert or b'').decode('ascii'),
                path=CONF.cacerts.ca_file_path,
                permissions=CONF.cacerts.ca_file_permissions)
