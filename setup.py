#!/usr/bin/env python
#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
import setuptools

setuptools.setup(
    name='rancher_bootstrap',
    version='1.0.0',
    description='Join token based CA bundle bootstrap for cluster nodes',
    license='Apache-2.0',
    platforms=['any'],
    python_requires='>=3.8',
    install_requires=[
        'requests',
        'urllib3',
        'oslo.config',
        'oslo.log',
        'stevedore',
        'kubernetes',
    ],
    extras_require={
        'test': ['testtools', 'fixtures', 'mock', 'pytest'],
    },
    packages=['rancher_bootstrap', 'rancher_bootstrap.common',
              'rancher_bootstrap.tests'],
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'rancher-bootstrap = rancher_bootstrap.__main__:main'
        ],
        'rancher_bootstrap.token_resolvers': [
            'passthrough = rancher_bootstrap.resolvers:PassthroughTokenResolver'
        ],
    }
)
