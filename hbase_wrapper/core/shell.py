"""
HBase shell runner for pre-split table creation.

The Thrift gateway behind happybase has no way to pass split keys to
``createTable``, so pre-split tables are created with the HBase shell in
non-interactive mode (``hbase shell -n``), exactly as an operator would:

    create "t1", {NAME => "cf1"}, SPLITS => ["10", "20", "30"]

Keys are rendered as double-quoted Ruby literals with every non-printable
byte escaped, so the shell receives the same bytes the Thrift client would
have sent.
"""

import logging
import subprocess
from typing import List, Sequence

from ..config import HBaseConfig
from ..exceptions import ConflictError, ConnectionError, StoreError

logger = logging.getLogger(__name__)

# Characters that have a meaning inside a double-quoted Ruby string
_RUBY_SPECIAL = '"\\#'


def ruby_literal(value: bytes) -> str:
    """Render bytes as a double-quoted Ruby string literal.

    Example:
        >>> ruby_literal(b'row"1\\x00')
        '"row\\\\x221\\\\x00"'
    """
    parts = ['"']
    for byte in value:
        char = chr(byte)
        if 0x20 <= byte < 0x7f and char not in _RUBY_SPECIAL:
            parts.append(char)
        else:
            parts.append(f"\\x{byte:02X}")
    parts.append('"')
    return "".join(parts)


def build_create_command(table_name: str, families: Sequence[str], split_keys: Sequence[bytes]) -> str:
    """Build the shell ``create`` statement for a pre-split table."""
    family_specs = [f"{{NAME => {ruby_literal(f.encode('utf-8'))}}}" for f in families]
    splits = ", ".join(ruby_literal(key) for key in split_keys)
    return (
        f"create {ruby_literal(table_name.encode('utf-8'))}, "
        f"{', '.join(family_specs)}, SPLITS => [{splits}]"
    )


class HBaseShell:
    """Runs statements through ``hbase shell -n``."""

    def __init__(self, config: HBaseConfig):
        self.config = config

    def command_line(self) -> List[str]:
        return [self.config.shell_command, 'shell', *self.config.shell_overrides(), '-n']

    def run(self, script: str, operation: str, table_name: str) -> str:
        """
        Execute a shell script and return its standard output.

        Raises:
            ConnectionError: The shell binary is missing or timed out
            ConflictError: The table already exists
            StoreError: Any other non-zero exit
        """
        context = {'operation': operation, 'table_name': table_name}
        logger.debug(f"Running HBase shell: {script}")
        try:
            completed = subprocess.run(
                self.command_line(),
                input=script + "\n",
                capture_output=True,
                text=True,
                timeout=self.config.shell_timeout_seconds,
            )
        except FileNotFoundError as e:
            logger.error(f"HBase shell '{self.config.shell_command}' not found")
            raise ConnectionError(f"HBase shell not found: {self.config.shell_command}", e, context) from e
        except subprocess.TimeoutExpired as e:
            logger.error(f"HBase shell timed out after {self.config.shell_timeout_seconds}s")
            raise ConnectionError(f"HBase shell timed out - {operation} on {table_name}", e, context) from e

        if completed.returncode != 0:
            output = f"{completed.stdout}\n{completed.stderr}".strip()
            if 'TableExistsException' in output or 'Table already exists' in output:
                raise ConflictError(f"Table already exists - {operation} on {table_name}", table_name, operation)
            logger.error(f"HBase shell exited with status {completed.returncode}: {output}")
            raise StoreError(
                f"HBase shell failed - {operation} on {table_name}: exit status {completed.returncode}",
                context={**context, 'output': output[-500:]}
            )
        return completed.stdout

    def create_presplit_table(self, table_name: str, families: Sequence[str], split_keys: Sequence[bytes]) -> None:
        """
        Create a table pre-split on ``split_keys``.

        Args:
            table_name: Short table name; the configured prefix is applied here
            families: Column family names
            split_keys: Sorted, unique boundary keys
        """
        physical_name = self.config.qualified_table_name(table_name)
        self.run(build_create_command(physical_name, families, split_keys), "CreateTable", table_name)
        logger.info(f"Created table {physical_name} with {len(split_keys) + 1} regions")
