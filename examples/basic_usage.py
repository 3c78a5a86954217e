#!/usr/bin/env python3
"""
Basic usage examples for the HBase wrapper library.

This example demonstrates:
1. Setting up configuration
2. Creating plain and pre-split tables through the service facade
3. Writing cells and reading rows back
4. Handling failures reported in OperationResult
5. Using the read/write APIs directly when exceptions are preferred
"""

import logging

from hbase_wrapper import (
    ConflictError,
    HBaseConfig,
    HBaseService,
    NotFoundError,
    RowReadApi,
    create_connection,
)


def main():
    """Demonstrate basic usage of the HBase wrapper."""
    logging.basicConfig(level=logging.INFO)

    # 1. Configure the Thrift gateway connection
    print("1. Setting up HBase configuration...")
    config = HBaseConfig.from_env()  # Uses HBASE_* environment variables

    # For a local standalone HBase, you might use:
    # config = HBaseConfig.for_local_development()

    connection = create_connection(config)

    with HBaseService(connection) as service:
        # 2. Create tables
        print("2. Creating tables...")
        created = service.create_table("user_profiles", ["info", "stats"])
        if not created and isinstance(created.error, ConflictError):
            print("user_profiles already exists, leaving it as is")

        # Pre-split on hex prefixes: 4 boundaries give 5 regions
        service.create_table("events", ["e"], ["4", "8", "c", "0"])
        regions = service.get_regions("events").unwrap_or([])
        print(f"events has {len(regions)} region(s)")
        for region in regions:
            print(f"  [{region.start_key!r}, {region.end_key!r}) on {region.server_name}")

        # 3. Write and read rows
        print("3. Writing rows...")
        service.put_value("user_profiles", "user-001", "info", "name", "Ada Lovelace")
        service.put_values("user_profiles", "user-001", "info", [
            ("email", "ada@example.com"),
            ("lang", "en"),
        ])
        service.put_values("user_profiles", "user-002", "stats", {"logins": "42"})

        row = service.get_row("user_profiles", "user-001").value
        print(f"user-001: {row}")

        email = service.get_cell("user_profiles", "user-001", "info", "email").value
        print(f"user-001 email: {email}")

        for item in service.get_all_rows("user_profiles").unwrap_or([]):
            print(f"  {item['row']}: {len(item) - 1} cell(s)")

        # 4. Failures come back as results
        print("4. Reading from a missing table...")
        result = service.get_row("no_such_table", "user-001")
        if not result:
            print(f"Lookup failed ({type(result.error).__name__}): {result.error}")

        # 5. Read API raises instead
        print("5. Using the read API directly...")
        try:
            RowReadApi(connection).get_row("no_such_table", "user-001")
        except NotFoundError as e:
            print(f"Caught NotFoundError for table {e.table_name}")

        # Cleanup
        service.delete_column("user_profiles", "user-001", "info", "lang")
        service.delete_family("user_profiles", "user-002", "stats")
        deleted = service.delete_rows("user_profiles", ["user-001", "user-002"]).value
        print(f"Deleted {deleted} row(s)")
        service.drop_table("events")


if __name__ == "__main__":
    main()
