"""
Tests for HBase error mapping.

Ensures Thrift exceptions raised through happybase and socket-level errors
are mapped to domain-specific exceptions with context preserved.
"""

import socket

import pytest
from thriftpy2.transport import TTransportException

from hbase_wrapper.core.table_gateway import map_hbase_error
from hbase_wrapper.exceptions import (
    ConflictError,
    ConnectionError,
    NotFoundError,
    RetryableError,
    StoreError,
    ValidationError,
)
from tests.helpers import thrift_error


class TestThriftExceptions:

    def test_already_exists(self):
        error = thrift_error('AlreadyExists', 'table name already in use')

        result = map_hbase_error(error, 'CreateTable', 't1')

        assert isinstance(result, ConflictError)
        assert result.table_name == 't1'
        assert result.operation == 'CreateTable'
        assert 'already in use' in str(result)
        assert result.original_error is error

    def test_illegal_argument(self):
        error = thrift_error('IllegalArgument', 'bad row')

        result = map_hbase_error(error, 'Put', 't1', 'r1')

        assert isinstance(result, ValidationError)
        assert result.original_error is error

    def test_table_not_found(self):
        error = thrift_error('IOError', 'org.apache.hadoop.hbase.TableNotFoundException: t1')

        result = map_hbase_error(error, 'Get', 't1', 'r1')

        assert isinstance(result, NotFoundError)
        assert result.table_name == 't1'

    @pytest.mark.parametrize('java_class', [
        'TableExistsException',
        'TableNotDisabledException',
        'TableNotEnabledException',
    ])
    def test_table_state_conflicts(self, java_class):
        error = thrift_error('IOError', f'org.apache.hadoop.hbase.{java_class}: t1')

        assert isinstance(map_hbase_error(error, 'DeleteTable', 't1'), ConflictError)

    def test_no_such_column_family(self):
        error = thrift_error(
            'IOError',
            'org.apache.hadoop.hbase.regionserver.NoSuchColumnFamilyException: cf9'
        )

        assert isinstance(map_hbase_error(error, 'Put', 't1', 'r1'), ValidationError)

    @pytest.mark.parametrize('java_class', [
        'NotServingRegionException',
        'RegionTooBusyException',
        'RetriesExhaustedException',
        'ServerNotRunningYetException',
    ])
    def test_retryable_region_conditions(self, java_class):
        error = thrift_error('IOError', f'org.apache.hadoop.hbase.{java_class}: region t1,,1')

        result = map_hbase_error(error, 'Put', 't1', 'r1')

        assert isinstance(result, RetryableError)
        assert result.context['row_key'] == 'r1'

    def test_other_io_error(self):
        error = thrift_error('IOError', 'java.io.IOException: something broke')

        result = map_hbase_error(error, 'Scan', 't1')

        assert isinstance(result, StoreError)
        assert 'something broke' in str(result)

    def test_unknown_thrift_exception(self):
        error = thrift_error('TApplicationException', 'unknown method')

        assert isinstance(map_hbase_error(error, 'Get', 't1'), StoreError)

    def test_bytes_message_decoded(self):
        error = thrift_error('IOError', '')
        error.message = b'org.apache.hadoop.hbase.TableNotFoundException: t1'

        assert isinstance(map_hbase_error(error, 'Get', 't1'), NotFoundError)


class TestTransportErrors:

    def test_transport_exception(self):
        error = TTransportException(message='Could not connect')

        result = map_hbase_error(error, 'Get', 't1')

        assert isinstance(result, ConnectionError)
        assert result.original_error is error

    def test_socket_timeout(self):
        error = socket.timeout('timed out')

        assert isinstance(map_hbase_error(error, 'Scan', 't1'), ConnectionError)

    def test_connection_refused(self):
        error = ConnectionRefusedError(111, 'Connection refused')

        assert isinstance(map_hbase_error(error, 'ListTables'), ConnectionError)


class TestContext:

    def test_domain_error_passes_through(self):
        error = ConflictError('already mapped', 't1', 'CreateTable')

        assert map_hbase_error(error, 'CreateTable', 't1') is error

    def test_context_omits_missing_values(self):
        result = map_hbase_error(thrift_error('IOError', 'boom'), 'ListTables')

        assert result.context == {'operation': 'ListTables'}
        assert str(result).startswith('HBase I/O error - ListTables: boom')
