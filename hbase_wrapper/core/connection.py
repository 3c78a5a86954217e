"""
Owned HBase connection.

``HBaseConnection`` turns an ``HBaseConfig`` into one live happybase
connection. It is created once by the application, handed to the facade and
gateways, and closed explicitly (or by leaving a ``with`` block). There is no
module-level shared handle.
"""

import logging
from typing import Optional

import happybase

from ..config import HBaseConfig
from ..exceptions import ConnectionError
from .shell import HBaseShell

logger = logging.getLogger(__name__)


class HBaseConnection:
    """Lazily opened happybase connection plus the admin shell bound to the same config.

    happybase connections are not thread-safe; share one instance per thread.
    """

    def __init__(self, config: HBaseConfig):
        self.config = config
        self._connection: Optional[happybase.Connection] = None
        self._shell: Optional[HBaseShell] = None

    @property
    def connection(self) -> happybase.Connection:
        """Lazy initialization of the Thrift connection."""
        if self._connection is None:
            if self.config.enable_debug_logging:
                logging.getLogger('hbase_wrapper').setLevel(logging.DEBUG)
            try:
                connection = happybase.Connection(autoconnect=False, **self.config.connection_kwargs())
                connection.open()
            except Exception as e:
                logger.error(f"Failed to connect to HBase at {self.config.host}:{self.config.port}: {e}")
                raise ConnectionError(
                    f"Failed to connect to HBase: {e}",
                    e,
                    {'host': self.config.host, 'port': self.config.port}
                ) from e
            logger.debug(f"Opened HBase connection to {self.config.host}:{self.config.port}")
            self._connection = connection
        return self._connection

    @property
    def shell(self) -> HBaseShell:
        """Admin shell used for operations the Thrift API lacks."""
        if self._shell is None:
            self._shell = HBaseShell(self.config)
        return self._shell

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def table(self, table_name: str) -> happybase.Table:
        """Get a happybase table handle; the configured prefix is applied by happybase."""
        return self.connection.table(table_name)

    def close(self) -> None:
        """Close the Thrift connection. Safe to call more than once."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.debug(f"Closed HBase connection to {self.config.host}:{self.config.port}")

    def __enter__(self) -> 'HBaseConnection':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def create_connection(config: Optional[HBaseConfig] = None) -> HBaseConnection:
    """
    Factory function to create an HBaseConnection.

    Args:
        config: HBase configuration (read from the environment if omitted)

    Returns:
        HBaseConnection that opens on first use
    """
    return HBaseConnection(config or HBaseConfig.from_env())
