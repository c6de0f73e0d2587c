"""Read the description stored on a computer over WinRM."""

from typing import Optional

import winrm

from ..config.models import HostQueryConfig, Credential
from ..core.logging import get_logger
from ..sync.models import HostDescriptionResult

DESCRIPTION_SCRIPT = "(Get-CimInstance -ClassName Win32_OperatingSystem).Description"


class HostDescriptionQuery:
    """
    Query a computer for its local (operating system) description.

    Every failure, whether refused connection, bad credentials, timeout or
    a failing script, is returned as an unreachable result and never raised.
    """

    def __init__(self, config: HostQueryConfig, credential: Optional[Credential] = None):
        """
        Initialize host query.

        Args:
            config: WinRM settings
            credential: Account to connect with instead of the ambient identity
        """
        self.config = config
        self.credential = credential
        self.logger = get_logger(self.__class__.__name__)

    def endpoint(self, host_name: str) -> str:
        """WinRM endpoint URL for a computer name."""
        host = host_name
        if self.config.dns_suffix and '.' not in host_name:
            host = f"{host_name}.{self.config.dns_suffix.lstrip('.')}"
        scheme = "https" if self.config.use_https else "http"
        return f"{scheme}://{host}:{self.config.effective_port}/wsman"

    def _session(self, host_name: str) -> winrm.Session:
        if self.credential:
            auth = (self.credential.username, self.credential.password)
            transport = self.config.transport
        else:
            auth = (None, None)
            transport = self.config.ambient_transport

        return winrm.Session(
            self.endpoint(host_name),
            auth=auth,
            transport=transport,
            server_cert_validation='validate' if self.config.validate_certificate else 'ignore',
            operation_timeout_sec=self.config.operation_timeout,
            read_timeout_sec=self.config.read_timeout,
        )

    def get_local_description(self, host_name: str) -> HostDescriptionResult:
        """
        Read ``Win32_OperatingSystem.Description`` from a computer.

        Args:
            host_name: Computer name

        Returns:
            ``ok`` with the description (possibly empty) or ``unreachable``
        """
        try:
            self.logger.debug(f"Querying local description of {host_name}")
            response = self._session(host_name).run_ps(DESCRIPTION_SCRIPT)

            if response.status_code != 0:
                error = response.std_err.decode('utf-8', errors='ignore').strip()
                self.logger.debug(f"Description query on {host_name} exited with {response.status_code}: {error}")
                return HostDescriptionResult.unreachable(error or f"exit status {response.status_code}")

            description = response.std_out.decode('utf-8', errors='ignore').rstrip('\r\n')
            return HostDescriptionResult.ok(description)

        except Exception as e:
            self.logger.debug(f"Description query on {host_name} failed: {e}")
            return HostDescriptionResult.unreachable(str(e) or type(e).__name__)
