"""Tests for the WinRM host description query."""

import pytest
from unittest.mock import Mock, patch

from ad_description_sync.config.models import HostQueryConfig, Credential
from ad_description_sync.sync.models import HostStatus
from ad_description_sync.tools.host import HostDescriptionQuery, DESCRIPTION_SCRIPT


def ps_response(status_code=0, std_out=b"", std_err=b""):
    response = Mock()
    response.status_code = status_code
    response.std_out = std_out
    response.std_err = std_err
    return response


@pytest.fixture
def host_config():
    return HostQueryConfig(dns_suffix="test.local")


class TestHostDescriptionQuery:
    """Test reading the local description."""

    @patch('ad_description_sync.tools.host.winrm.Session')
    def test_description_returned(self, mock_session, host_config):
        """Test a successful query."""
        mock_session.return_value.run_ps.return_value = ps_response(std_out=b"Front desk PC\r\n")

        result = HostDescriptionQuery(host_config).get_local_description("PC01")

        assert result.status is HostStatus.OK
        assert result.description == "Front desk PC"
        mock_session.return_value.run_ps.assert_called_once_with(DESCRIPTION_SCRIPT)

    @patch('ad_description_sync.tools.host.winrm.Session')
    def test_empty_description_is_reachable(self, mock_session, host_config):
        """Test that a host without a description is still reachable."""
        mock_session.return_value.run_ps.return_value = ps_response(std_out=b"\r\n")

        result = HostDescriptionQuery(host_config).get_local_description("PC01")

        assert result.reachable
        assert result.description == ""

    @patch('ad_description_sync.tools.host.winrm.Session')
    def test_failed_script_is_unreachable(self, mock_session, host_config):
        """Test that a non-zero exit status is reported as unreachable."""
        mock_session.return_value.run_ps.return_value = ps_response(status_code=1, std_err=b"Access denied")

        result = HostDescriptionQuery(host_config).get_local_description("PC01")

        assert not result.reachable
        assert result.error == "Access denied"

    @patch('ad_description_sync.tools.host.winrm.Session')
    def test_transport_error_is_unreachable(self, mock_session, host_config):
        """Test that connection errors never escape."""
        mock_session.return_value.run_ps.side_effect = ConnectionError("Connection refused")

        result = HostDescriptionQuery(host_config).get_local_description("PC01")

        assert result.status is HostStatus.UNREACHABLE
        assert "Connection refused" in result.error

    @patch('ad_description_sync.tools.host.winrm.Session')
    def test_session_uses_ambient_identity(self, mock_session, host_config):
        """Test the session settings without an entered credential."""
        mock_session.return_value.run_ps.return_value = ps_response(std_out=b"x")

        HostDescriptionQuery(host_config).get_local_description("PC01")

        args, kwargs = mock_session.call_args
        assert args[0] == "http://PC01.test.local:5985/wsman"
        assert kwargs['auth'] == (None, None)
        assert kwargs['transport'] == "kerberos"
        assert kwargs['operation_timeout_sec'] == host_config.operation_timeout
        assert kwargs['read_timeout_sec'] == host_config.read_timeout

    @patch('ad_description_sync.tools.host.winrm.Session')
    def test_session_uses_credential(self, mock_session, host_config):
        """Test the session settings with an entered credential."""
        mock_session.return_value.run_ps.return_value = ps_response(std_out=b"x")
        credential = Credential(username="TEST\\admin", password="secret")

        HostDescriptionQuery(host_config, credential).get_local_description("PC01")

        kwargs = mock_session.call_args.kwargs
        assert kwargs['auth'] == ("TEST\\admin", "secret")
        assert kwargs['transport'] == "ntlm"

    def test_endpoint(self):
        """Test endpoint URL building."""
        https = HostDescriptionQuery(HostQueryConfig(use_https=True, dns_suffix=".corp.example.com"))
        plain = HostDescriptionQuery(HostQueryConfig())

        assert https.endpoint("PC01") == "https://PC01.corp.example.com:5986/wsman"
        assert https.endpoint("pc01.other.example.com") == "https://pc01.other.example.com:5986/wsman"
        assert plain.endpoint("PC01") == "http://PC01:5985/wsman"
