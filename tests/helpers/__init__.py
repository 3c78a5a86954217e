"""
Test helpers for the HBase wrapper.

This module provides an in-memory stand-in for a happybase connection and
factories for the Thrift exceptions happybase raises.
"""

from .fake_happybase import (
    FakeBatch,
    FakeConnection,
    FakeShell,
    FakeTable,
    thrift_error,
)

__all__ = [
    'FakeBatch',
    'FakeConnection',
    'FakeShell',
    'FakeTable',
    'thrift_error',
]
