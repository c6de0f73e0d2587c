"""Configuration models for AD Description Sync."""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class ActiveDirectoryConfig(BaseModel):
    """Active Directory connection configuration."""

    server: str = Field(..., description="Primary LDAP server URL")
    server_pool: Optional[List[str]] = Field(default=None, description="Additional LDAP servers for redundancy")
    use_ssl: bool = Field(default=True, description="Use SSL/TLS connection")
    domain: str = Field(..., description="Active Directory domain")
    base_dn: str = Field(..., description="Base Distinguished Name")
    search_base: Optional[str] = Field(default=None, description="DN to search for computers (defaults to base_dn)")
    bind_dn: Optional[str] = Field(default=None, description="Service account used when no credential is entered")
    password: Optional[str] = Field(default=None, description="Service account password")
    timeout: int = Field(default=30, description="Connection timeout in seconds")
    receive_timeout: int = Field(default=10, description="Receive timeout in seconds")

    @field_validator('server')
    @classmethod
    def validate_server(cls, v):
        """Validate server URL format."""
        if not v.startswith(('ldap://', 'ldaps://')):
            raise ValueError('Server must start with ldap:// or ldaps://')
        return v

    @model_validator(mode='after')
    def validate_bind_account(self):
        """bind_dn and password must be given together."""
        if bool(self.bind_dn) != bool(self.password):
            raise ValueError('bind_dn and password must be provided together')
        return self

    @property
    def computer_search_base(self) -> str:
        return self.search_base or self.base_dn


class SecurityConfig(BaseModel):
    """Security configuration for LDAP connections."""

    enable_tls: bool = Field(default=True, description="Enable TLS encryption")
    validate_certificate: bool = Field(default=True, description="Validate server certificate")
    ca_cert_file: Optional[str] = Field(default=None, description="CA certificate file path")


WINRM_TRANSPORTS = ['ntlm', 'kerberos', 'credssp', 'plaintext', 'ssl']


class HostQueryConfig(BaseModel):
    """WinRM settings used to read the description stored on each computer."""

    transport: str = Field(default="ntlm", description="WinRM transport when a credential is entered")
    ambient_transport: str = Field(default="kerberos", description="WinRM transport for the caller's own identity")
    use_https: bool = Field(default=False, description="Connect to the WinRM HTTPS listener")
    port: Optional[int] = Field(default=None, description="WinRM port (5985 for HTTP, 5986 for HTTPS)")
    dns_suffix: Optional[str] = Field(default=None, description="Suffix appended to computer names, e.g. corp.example.com")
    operation_timeout: int = Field(default=20, description="WinRM operation timeout in seconds")
    read_timeout: int = Field(default=30, description="HTTP read timeout in seconds")
    validate_certificate: bool = Field(default=True, description="Validate the WinRM HTTPS certificate")
    max_workers: int = Field(default=1, description="Hosts queried concurrently (1 = sequential)")

    @field_validator('transport', 'ambient_transport')
    @classmethod
    def validate_transport(cls, v):
        """Validate WinRM transport name."""
        if v.lower() not in WINRM_TRANSPORTS:
            raise ValueError(f'Transport must be one of: {WINRM_TRANSPORTS}')
        return v.lower()

    @field_validator('operation_timeout', 'read_timeout', 'max_workers')
    @classmethod
    def validate_positive_int(cls, v):
        """Validate positive integers."""
        if v <= 0:
            raise ValueError('Value must be positive')
        return v

    @model_validator(mode='after')
    def validate_timeouts(self):
        # requests must not give up before the WinRM operation does
        if self.read_timeout <= self.operation_timeout:
            raise ValueError('read_timeout must be greater than operation_timeout')
        return self

    @property
    def effective_port(self) -> int:
        if self.port:
            return self.port
        return 5986 if self.use_https else 5985


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Transcript line format"
    )
    console_format: str = Field(
        default="%(levelname)s: %(message)s",
        description="Console line format"
    )
    transcript_dir: Optional[str] = Field(default=None, description="Directory for per-run transcript files")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        """Validate logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Level must be one of: {valid_levels}')
        return v.upper()


class PerformanceConfig(BaseModel):
    """Performance configuration."""

    max_retries: int = Field(default=3, description="Maximum connection retries")
    retry_delay: float = Field(default=1.0, description="Retry delay in seconds")
    page_size: int = Field(default=1000, description="LDAP search page size")

    @field_validator('max_retries', 'page_size')
    @classmethod
    def validate_positive_int(cls, v):
        """Validate positive integers."""
        if v <= 0:
            raise ValueError('Value must be positive')
        return v

    @field_validator('retry_delay')
    @classmethod
    def validate_positive_float(cls, v):
        """Validate positive float."""
        if v <= 0:
            raise ValueError('Retry delay must be positive')
        return v


class SyncConfig(BaseModel):
    """Update behaviour."""

    dry_run: bool = Field(default=False, description="Simulate directory updates without applying them")


class Credential(BaseModel):
    """Operator-entered account used instead of the ambient identity."""

    username: str
    password: str = ""


class Config(BaseModel):
    """Main configuration class."""

    active_directory: ActiveDirectoryConfig
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    host_query: HostQueryConfig = Field(default_factory=HostQueryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    performance: PerformanceConfig = Field(default_factory=PerformanceConfig)
    sync: SyncConfig = Field(default_factory=SyncConfig)
