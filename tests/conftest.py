"""
Test configuration and fixtures for the HBase wrapper.

Provides a connection backed by the in-memory fake from ``tests.helpers`` so
the handlers and the service facade run end to end without a cluster.
"""

import sys
from pathlib import Path
from unittest.mock import patch

# Add parent directory to path so we can import hbase_wrapper
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from hbase_wrapper import (
    HBaseConfig,
    HBaseConnection,
    HBaseService,
    RowReadApi,
    RowWriteApi,
    TableReadApi,
    TableWriteApi,
)
from tests.helpers import FakeConnection, FakeShell


@pytest.fixture
def hbase_config():
    """HBase configuration for testing."""
    return HBaseConfig(
        host="hbase-thrift.test",
        port=9090,
        transport="buffered",
        protocol="binary",
        table_prefix=None,
        shell_command="hbase",
        settings={"hbase.zookeeper.quorum": "zk1,zk2,zk3"}
    )


@pytest.fixture
def fake_hbase():
    """In-memory happybase connection."""
    return FakeConnection()


@pytest.fixture
def fake_shell(fake_hbase):
    return FakeShell(fake_hbase)


@pytest.fixture
def connection(hbase_config, fake_hbase, fake_shell):
    """HBaseConnection whose happybase connection is the in-memory fake."""
    with patch('hbase_wrapper.core.connection.happybase.Connection', return_value=fake_hbase):
        conn = HBaseConnection(hbase_config)
        conn._shell = fake_shell
        yield conn
        conn.close()


# CQRS API Fixtures

@pytest.fixture
def table_read_api(connection):
    return TableReadApi(connection)


@pytest.fixture
def table_write_api(connection):
    return TableWriteApi(connection)


@pytest.fixture
def row_read_api(connection):
    return RowReadApi(connection)


@pytest.fixture
def row_write_api(connection):
    return RowWriteApi(connection)


@pytest.fixture
def service(connection):
    """Service facade over the fake connection."""
    return HBaseService(connection)


@pytest.fixture
def users_table(fake_hbase):
    """Create a 'users' table with families 'info' and 'stats'."""
    fake_hbase.create_table('users', {'info': {}, 'stats': {}})
    return 'users'
