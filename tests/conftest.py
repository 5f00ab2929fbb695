"""Shared lockfile samples for the lockdiff tests.

Samples are already in the parser's input form: no quote characters and
``\\n`` line endings.
"""

import pytest

CLASSIC_HEADER = (
    "# THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY.\n"
    "# yarn lockfile v1\n"
    "\n"
    "\n"
)

BERRY_HEADER = (
    "# This file is generated by running yarn install inside your project.\n"
    "# Manual changes might be lost - proceed with caution!\n"
    "\n"
    "__metadata:\n"
    "  version: {version}\n"
    "  cacheKey: 8\n"
    "\n"
)

CLASSIC_LOCK = CLASSIC_HEADER + """\
@babel/code-frame@^7.0.0, @babel/code-frame@^7.10.4:
  version 7.12.13
  resolved https://registry.yarnpkg.com/@babel/code-frame/-/code-frame-7.12.13.tgz#dcfc826beef65e75c50e21d3837d7d95798dd658
  integrity sha512-HV1Cm0Q3ZrpCR93tkWOYiuYIgLxZXZFVG2VgK+MBWjUqZTundupbfx2aXarXuw5Ko5aMcjtJgbSs4vUGBS5v6g==
  dependencies:
    @babel/highlight ^7.12.13

@babel/highlight@^7.12.13:
  version 7.13.10
  resolved https://registry.yarnpkg.com/@babel/highlight/-/highlight-7.13.10.tgz#a8b2a66148f5b27d666b15d81774347a731d52d1
  integrity sha512-5aPpe5XQPzflQrFwL1/QoeHkP2MsA4JCntcXHRhEsdsfPVkvPi2w7Qix4iV7t5S/oC9OodGrggd8aco1g3SZFg==
  dependencies:
    @babel/helper-validator-identifier ^7.12.11
    chalk ^2.0.0
    js-tokens ^4.0.0

lodash@^4.17.19, lodash@^4.17.20:
  version 4.17.21
  resolved https://registry.yarnpkg.com/lodash/-/lodash-4.17.21.tgz#679591c564c3bffaae8454cf0b3df370c3d6911c
  integrity sha512-v2kDEe57lecTulaDIuNTPy3Ry4gLGJ6Z1O3vE1krgXZNrsQ+LFTGHVxVjcXPs17LhbZVGedAJv8XZ1tvj5FvSg==
"""

BERRY_LOCK_BODY = """\
@babel/code-frame@npm:^7.0.0, @babel/code-frame@npm:^7.10.4:
  version: 7.12.13
  resolution: @babel/code-frame@npm:7.12.13
  dependencies:
    @babel/highlight: ^7.12.13
  checksum: 471532bb7cb4a300bd1a3201e75e7c0c83ebfb4e0e6610fdb53270521505d7efe0961258de61e7b1970ef3092a97ed675248ee1a44597912a1f61f903d85ef41
  languageName: node
  linkType: hard

my-app@workspace:.:
  version: 0.0.0-use.local
  resolution: my-app@workspace:.
  dependencies:
    react: ^17.0.2
    react-dom: ^17.0.2
  languageName: unknown
  linkType: soft

react-dom@npm:^17.0.2:
  version: 17.0.2
  resolution: react-dom@npm:17.0.2
  dependencies:
    loose-envify: ^1.1.0
    object-assign: ^4.1.1
    scheduler: ^0.20.2
  peerDependencies:
    react: 17.0.2
  checksum: 1c1eaa3bca7c7228d24b70932e3d7c99e70d1d04e13bb0843bbf321582bc25d7961d6b8a6978a58a598af2af496d1cedcfb1bf65f6b0960a0a8161cb8dab743c
  languageName: node
  linkType: hard

use-sync-external-store@npm:^1.0.0:
  version: 1.2.0
  resolution: use-sync-external-store@npm:1.2.0
  peerDependencies:
    react: ^16.8.0 || ^17.0.0 || ^18.0.0
    react-dom: ^17.0.0
  peerDependenciesMeta:
    react-dom:
      optional: true
  checksum: 5c639e0f8da3521d605f59ce5be9e094ca772bd44a4ce7322b055a6f58eeed8dda3c94cabd90c7a41fb6fa852210092008afe48f7038792fd47501f33299116a
  languageName: node
  linkType: hard
"""


def classic_lock(entries):
    """Build a classic lockfile from ``{specifier: version}``."""
    blocks = []
    for key, version in entries.items():
        name = key[:key.rfind("@")]
        blocks.append(
            f"{key}:\n"
            f"  version {version}\n"
            f"  resolved https://registry.yarnpkg.com/{name}/-/{name}-{version}.tgz#0000\n"
            f"  integrity sha512-{name}{version}==\n"
        )
    return CLASSIC_HEADER + "\n".join(blocks)


@pytest.fixture
def classic_text():
    return CLASSIC_LOCK


@pytest.fixture
def berry_text():
    return BERRY_HEADER.format(version=6) + BERRY_LOCK_BODY


@pytest.fixture
def berry_v2_text():
    return BERRY_HEADER.format(version=4) + BERRY_LOCK_BODY


@pytest.fixture
def make_classic_lock():
    return classic_lock
