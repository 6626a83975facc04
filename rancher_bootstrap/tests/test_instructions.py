#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import base64

import mock
from testtools import matchers
from testtools import TestCase

from rancher_bootstrap.config import CONF
from rancher_bootstrap import exception
from rancher_bootstrap import instructions
from rancher_bootstrap.tests import test_data


class TestInstructions(TestCase):

    def setUp(self):
        super(TestInstructions, self).setUp()
        self.addCleanup(CONF.reset)

    def test_update_ca_certificates_instruction(self):
        instruction = instructions.to_update_ca_certificates_instruction()

        self.assertEqual(
            {
                'name': 'update-ca-certificates',
                'saveOutput': True,
                'command': 'update-ca-certificates',
            },
            instruction.to_dict())

    def test_update_command_override(self):
        CONF.set_override("update_command", "update-ca-trust",
                          group="cacerts")

        instruction = instructions.to_update_ca_certificates_instruction()

        self.assertEqual("update-ca-trust", instruction.command)
        self.assertEqual("update-ca-certificates", instruction.name)

    def test_instruction_optional_fields(self):
        instruction = instructions.Instruction("x", False, "run",
                                               args=["-a"], env=["A=1"])
        self.assertThat(instruction.to_dict(),
                        matchers.KeysEqual('name', 'saveOutput', 'command',
                                           'args', 'env'))

    @mock.patch('rancher_bootstrap.instructions.cacerts.ca_certs')
    def test_to_file(self, mock_ca_certs):
        mock_ca_certs.return_value = (test_data.CA_BUNDLE, "checksum")

        ca_file = instructions.to_file(test_data.SERVER, test_data.TOKEN)

        mock_ca_certs.assert_called_once_with(test_data.SERVER,
                                              test_data.TOKEN,
                                              cluster_token=True)
        self.assertEqual(
            instructions.File(
                content=base64.b64encode(test_data.CA_BUNDLE).decode(),
                path="/etc/pki/trust/anchors/additional-ca.pem",
                permissions="0644"),
            ca_file)

    @mock.patch('rancher_bootstrap.instructions.cacerts.ca_certs')
    def test_to_file_without_bundle(self, mock_ca_certs):
        mock_ca_certs.return_value = (None, "")

        ca_file = instructions.to_file(test_data.SERVER, test_data.TOKEN)

        self.assertEqual("", ca_file.content)

    @mock.patch('rancher_bootstrap.instructions.cacerts.ca_certs')
    def test_to_file_configured_path(self, mock_ca_certs):
        mock_ca_certs.return_value = (test_data.CA_BUNDLE, "checksum")
        CONF.set_override("ca_file_path",
                          "/usr/local/share/ca-certificates/rancher.crt",
                          group="cacerts")
        CONF.set_override("ca_file_permissions", "0600", group="cacerts")

        ca_file = instructions.to_file(test_data.SERVER, test_data.TOKEN)

        self.assertEqual({
            'content': base64.b64encode(test_data.CA_BUNDLE).decode(),
            'path': "/usr/local/share/ca-certificates/rancher.crt",
            'permissions': "0600",
        }, ca_file.to_dict())

    @mock.patch('rancher_bootstrap.instructions.cacerts.ca_certs')
    def test_to_file_error(self, mock_ca_certs):
        mock_ca_certs.side_effect = exception.IntegrityError(
            received="a", expected="b")

        self.assertRaises(exception.IntegrityError, instructions.to_file,
                          test_data.SERVER, test_data.TOKEN)
