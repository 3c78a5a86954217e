import logging
import os
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()

logger = logging.getLogger(__name__)

VALID_TRANSPORTS = ('buffered', 'framed')
VALID_PROTOCOLS = ('binary', 'compact')
VALID_COMPAT = ('0.90', '0.92', '0.94', '0.96', '0.98')

# hbase-site style keys understood by the Thrift client, mapped to fields
SETTING_FIELDS = {
    'hbase.thrift.host': 'host',
    'hbase.thrift.port': 'port',
    'hbase.thrift.transport': 'transport',
    'hbase.thrift.protocol': 'protocol',
    'hbase.thrift.compat': 'compat',
    'hbase.client.operation.timeout': 'timeout_ms',
    'hbase.table.prefix': 'table_prefix',
    'hbase.shell.command': 'shell_command',
}


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return int(value)


class HBaseConfig(BaseModel):
    """Configuration for the HBase Thrift connection and admin shell."""

    host: str = Field(
        default_factory=lambda: os.getenv("HBASE_THRIFT_HOST", "localhost"),
        description="Host of the HBase Thrift server"
    )

    port: int = Field(
        default_factory=lambda: _env_int("HBASE_THRIFT_PORT", 9090),
        description="Port of the HBase Thrift server"
    )

    timeout_ms: Optional[int] = Field(
        default_factory=lambda: _env_int("HBASE_TIMEOUT_MS"),
        description="Socket timeout in milliseconds (None waits forever)"
    )

    transport: str = Field(
        default_factory=lambda: os.getenv("HBASE_THRIFT_TRANSPORT", "buffered"),
        description="Thrift transport mode: buffered or framed"
    )

    protocol: str = Field(
        default_factory=lambda: os.getenv("HBASE_THRIFT_PROTOCOL", "binary"),
        description="Thrift protocol: binary or compact"
    )

    compat: str = Field(
        default_factory=lambda: os.getenv("HBASE_COMPAT", "0.98"),
        description="HBase Thrift API compatibility level"
    )

    # Table configuration
    table_prefix: Optional[str] = Field(
        default_factory=lambda: os.getenv("HBASE_TABLE_PREFIX") or None,
        description="Prefix added to all table names (joined with '_')"
    )

    # Admin shell used for pre-split table creation
    shell_command: str = Field(
        default_factory=lambda: os.getenv("HBASE_SHELL", "hbase"),
        description="Path to the hbase launcher script"
    )

    shell_timeout_seconds: float = Field(
        default=120.0,
        description="Timeout for a single HBase shell invocation"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("HBASE_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for HBase operations"
    )

    # Raw hbase-site style settings as supplied by the caller
    settings: Dict[str, str] = Field(
        default_factory=dict,
        description="Arbitrary HBase configuration keys and values"
    )

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        """Validate Thrift port."""
        if not 0 < v < 65536:
            raise ValueError(f"Port must be between 1 and 65535, got {v}")
        return v

    @field_validator('transport')
    @classmethod
    def validate_transport(cls, v):
        if v not in VALID_TRANSPORTS:
            raise ValueError(f"Transport must be one of: {list(VALID_TRANSPORTS)}")
        return v

    @field_validator('protocol')
    @classmethod
    def validate_protocol(cls, v):
        if v not in VALID_PROTOCOLS:
            raise ValueError(f"Protocol must be one of: {list(VALID_PROTOCOLS)}")
        return v

    @field_validator('compat')
    @classmethod
    def validate_compat(cls, v):
        if v not in VALID_COMPAT:
            raise ValueError(f"Compat must be one of: {list(VALID_COMPAT)}")
        return v

    @field_validator('timeout_ms')
    @classmethod
    def validate_timeout(cls, v):
        if v is not None and v <= 0:
            raise ValueError("Timeout must be a positive number of milliseconds")
        return v

    def qualified_table_name(self, table_name: str) -> str:
        """Get the physical table name, as happybase builds it from the prefix.

        Args:
            table_name: Short table name used by callers

        Returns:
            Table name with prefix applied
        """
        if self.table_prefix:
            return f"{self.table_prefix}_{table_name}"
        return table_name

    def connection_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``happybase.Connection``."""
        kwargs: Dict[str, Any] = {
            'host': self.host,
            'port': self.port,
            'transport': self.transport,
            'protocol': self.protocol,
            'compat': self.compat,
        }
        if self.timeout_ms is not None:
            kwargs['timeout'] = self.timeout_ms
        if self.table_prefix:
            kwargs['table_prefix'] = self.table_prefix
        return kwargs

    def shell_overrides(self) -> List[str]:
        """Settings rendered as ``-Dkey=value`` arguments for the HBase shell."""
        return [f"-D{key}={value}" for key, value in sorted(self.settings.items())]

    @classmethod
    def from_settings(cls, settings: Mapping[str, str], **kwargs) -> 'HBaseConfig':
        """Create configuration from an arbitrary mapping of HBase settings.

        Keys listed in ``SETTING_FIELDS`` are applied onto the matching
        fields; every pair is kept in ``settings`` and forwarded to the
        HBase shell.

        Args:
            settings: Mapping such as ``{"hbase.zookeeper.quorum": "zk1,zk2"}``
            **kwargs: Explicit field values, which win over settings

        Returns:
            HBaseConfig instance
        """
        values: Dict[str, Any] = {}
        for key, value in settings.items():
            field_name = SETTING_FIELDS.get(key)
            if field_name is not None:
                values[field_name] = value
            else:
                logger.debug(f"Setting '{key}' is not used by the Thrift client, passing it to the shell only")
        values.update(kwargs)
        values['settings'] = {str(k): str(v) for k, v in settings.items()}
        return cls(**values)

    @classmethod
    def from_env(cls) -> 'HBaseConfig':
        """Create configuration from environment variables.

        Returns:
            HBaseConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls) -> 'HBaseConfig':
        """Create configuration for a local single-node HBase.

        Returns:
            HBaseConfig instance configured for local development
        """
        return cls(
            host="localhost",
            port=9090,
            transport="buffered",
            protocol="binary",
            enable_debug_logging=True,
            settings={'hbase.zookeeper.quorum': 'localhost'}
        )

    model_config = ConfigDict(
        validate_assignment=True
    )
