"""Tests for configuration module."""

import pytest
import tempfile
import json
import os

from ad_description_sync.config.loader import load_config, validate_config
from ad_description_sync.config.models import (
    Config,
    ActiveDirectoryConfig,
    HostQueryConfig,
    LoggingConfig,
)


def minimal_config(server="ldap://test.local:389", domain="test.local"):
    return {
        "active_directory": {
            "server": server,
            "domain": domain,
            "base_dn": "DC=test,DC=local",
        }
    }


def test_load_config_from_file():
    """Test loading configuration from JSON file."""
    config_data = minimal_config()
    config_data["active_directory"]["search_base"] = "OU=Workstations,DC=test,DC=local"
    config_data["sync"] = {"dry_run": True}

    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        json.dump(config_data, f)
        config_path = f.name

    try:
        config = load_config(config_path)
        assert isinstance(config, Config)
        assert config.active_directory.server == "ldap://test.local:389"
        assert config.active_directory.computer_search_base == "OU=Workstations,DC=test,DC=local"
        assert config.sync.dry_run is True
    finally:
        os.unlink(config_path)


def test_load_config_from_env(monkeypatch):
    """Test loading configuration from environment variable."""
    config_data = minimal_config(server="ldap://env-test.local:389", domain="env-test.local")

    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        json.dump(config_data, f)
        config_path = f.name

    try:
        monkeypatch.setenv('AD_DESC_SYNC_CONFIG', config_path)

        config = load_config()
        assert isinstance(config, Config)
        assert config.active_directory.domain == "env-test.local"
    finally:
        os.unlink(config_path)


def test_load_config_without_path(monkeypatch):
    """Test that a missing path and environment variable is rejected."""
    monkeypatch.delenv('AD_DESC_SYNC_CONFIG', raising=False)

    with pytest.raises(ValueError, match="AD_DESC_SYNC_CONFIG"):
        load_config()


def test_config_validation(caplog):
    """Test configuration validation warnings."""
    config_data = minimal_config()
    config_data["active_directory"]["search_base"] = "OU=Computers,DC=other,DC=local"

    config = Config(**config_data)
    validate_config(config)

    assert "is not under base DN" in caplog.text


def test_invalid_server_url():
    """Test validation of invalid server URL."""
    with pytest.raises(ValueError, match="Server must start with ldap:// or ldaps://"):
        ActiveDirectoryConfig(
            server="http://invalid.com",
            domain="test.local",
            base_dn="DC=test,DC=local"
        )


def test_bind_dn_requires_password():
    """Test that a service account needs both DN and password."""
    with pytest.raises(ValueError, match="provided together"):
        ActiveDirectoryConfig(
            server="ldap://test.local:389",
            domain="test.local",
            base_dn="DC=test,DC=local",
            bind_dn="CN=svc,DC=test,DC=local"
        )


def test_missing_config_file():
    """Test handling of missing configuration file."""
    with pytest.raises(FileNotFoundError):
        load_config("/nonexistent/path/config.json")


def test_invalid_json():
    """Test handling of invalid JSON."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        f.write("invalid json content")
        config_path = f.name

    try:
        with pytest.raises(json.JSONDecodeError):
            load_config(config_path)
    finally:
        os.unlink(config_path)


def test_missing_required_fields():
    """Test validation of missing required fields."""
    config_data = {
        "active_directory": {
            "server": "ldap://test.local:389",
            # Missing required fields
        }
    }

    with pytest.raises(ValueError):
        Config(**config_data)


def test_host_query_validation():
    """Test WinRM settings validation."""
    with pytest.raises(ValueError, match="Transport must be one of"):
        HostQueryConfig(transport="telnet")

    with pytest.raises(ValueError, match="read_timeout must be greater"):
        HostQueryConfig(operation_timeout=30, read_timeout=30)

    with pytest.raises(ValueError, match="Value must be positive"):
        HostQueryConfig(max_workers=0)

    assert HostQueryConfig(transport="NTLM").transport == "ntlm"
    assert HostQueryConfig().effective_port == 5985
    assert HostQueryConfig(use_https=True).effective_port == 5986
    assert HostQueryConfig(port=8080).effective_port == 8080


def test_logging_level_normalized():
    """Test logging level is upper-cased and validated."""
    assert LoggingConfig(level="debug").level == "DEBUG"

    with pytest.raises(ValueError, match="Level must be one of"):
        LoggingConfig(level="verbose")


def test_default_values():
    """Test default configuration values."""
    config = Config(**minimal_config())

    assert config.security.enable_tls == True
    assert config.logging.level == "INFO"
    assert config.logging.transcript_dir is None
    assert config.performance.max_retries == 3
    assert config.active_directory.use_ssl == True
    assert config.active_directory.computer_search_base == "DC=test,DC=local"
    assert config.host_query.max_workers == 1
    assert config.host_query.transport == "ntlm"
    assert config.host_query.ambient_transport == "kerberos"
    assert config.sync.dry_run == False
