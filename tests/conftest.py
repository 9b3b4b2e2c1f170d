"""Shared `pacman -Qi` samples."""

from __future__ import annotations

import pytest

FULL_PACKAGE = """\
Name            : pkg
Version         : 2.2.1-1
Description     : Some package description
Architecture    : x86_64
URL             : https://example.com/pkg
Licenses        : Apache
Groups          : None
Provides        : None
Depends On      : otherdependency1
Optional Deps   : dep: my description [installed]
                : dep2: my other description
Required By     : otherdependency2
Optional For    : None
Conflicts With  : None
Replaces        : None
Installed Size  : 2137.69 KiB
Packager        : My Name <user@example.com>
Build Date      : Mon 01 Jan 1970 00:00:00 AM CET
Install Date    : Mon 01 Jan 1970 00:00:00 PM CET
Install Reason  : Installed as a dependency for another package
Install Script  : No
Validated By    : Signature"""

TWO_PACKAGES = """\
Name            : pkg
Version         : 2.2.1-1
Description     : Some package description
Architecture    : x86_64
URL             : https://example.com/pkg
Licenses        : Apache MIT
Groups          : None
Provides        : None
Depends On      : otherdependency1
Optional Deps   : None
Required By     : otherdependency2
Optional For    : None
Conflicts With  : None
Replaces        : None
Installed Size  : 2137.69 KiB
Packager        : My Name <user@example.com>
Build Date      : Mon 01 Jan 1970 00:00:00 AM CET
Install Date    : Mon 01 Jan 1970 00:00:00 PM CET
Install Reason  : Installed as a dependency for another package
Install Script  : No
Validated By    : Signature

Name            : pkg2
Version         : 2.2.1-1
Description     : Some package description
Architecture    : x86_64
URL             : https://example.com/pkg
Licenses        : GPL
Groups          : None
Provides        : None
Depends On      : otherdependency1
Optional Deps   : somedep1: somedep1 description [installed]
                  somedep2: somedep2 description
Required By     : otherdependency2
Optional For    : None
Conflicts With  : None
Replaces        : None
Installed Size  : 2137.69 KiB
Packager        : My Name <user@example.com>
Build Date      : Mon 01 Jan 1970 00:00:00 AM CET
Install Date    : Mon 01 Jan 1970 00:00:00 PM CET
Install Reason  : Installed as a dependency for another package
Install Script  : No
Validated By    : Signature"""


def make_block(**overrides: str | None) -> str:
    """Build a minimal valid block; pass a label=None override to drop a field."""
    fields = {
        "Name": "pkg",
        "Version": "1.0.0-1",
        "Description": "A package",
        "Architecture": "any",
        "Installed Size": "1.50 MiB",
        "Packager": "Someone <someone@example.com>",
        "Build Date": "Tue 02 Jan 2024 10:11:12 AM UTC",
        "Install Date": "Wed 03 Jan 2024 01:02:03 PM UTC",
        "Install Reason": "Explicitly installed",
        "Install Script": "No",
    }
    for label, value in overrides.items():
        fields[label.replace("_", " ")] = value
    return "\n".join(f"{label:<16}: {value}" for label, value in fields.items() if value is not None)


@pytest.fixture
def full_package() -> str:
    return FULL_PACKAGE


@pytest.fixture
def two_packages() -> str:
    return TWO_PACKAGES


@pytest.fixture
def block_factory():
    return make_block
