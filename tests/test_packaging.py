"""Tests for the installed distribution metadata."""

from importlib import metadata

import pytest


@pytest.fixture
def requirements():
    try:
        return metadata.requires("ad-description-sync") or []
    except metadata.PackageNotFoundError:
        pytest.skip("ad-description-sync is not installed")


def test_kerberos_support_is_required(requirements):
    """A blank credential falls back to Kerberos for both WinRM and LDAP."""
    normalized = [requirement.replace(" ", "").lower() for requirement in requirements]

    assert any(requirement.startswith("pywinrm[kerberos]") for requirement in normalized)
    assert any(requirement.startswith("gssapi") for requirement in normalized)
    assert any(requirement.startswith("winkerberos") for requirement in normalized)
