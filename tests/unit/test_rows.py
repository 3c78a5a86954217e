"""
Tests for Row Data Domain (handlers/rows/queries.py and commands.py)
"""

import pytest

from hbase_wrapper.exceptions import NotFoundError, ValidationError


class TestRowWriteApi:
    """Test row mutations."""

    def test_put_value(self, row_write_api, fake_hbase, users_table):
        assert row_write_api.put_value(users_table, "r1", "info", "name", "ada") is True

        assert fake_hbase.table(users_table).row(b"r1") == {b"info:name": b"ada"}

    def test_put_values_pairs_in_one_mutation(self, row_write_api, fake_hbase, users_table):
        row_write_api.put_values(users_table, "r1", "info", [("name", "ada"), ("lang", "en")])

        assert fake_hbase.table(users_table).row(b"r1") == {
            b"info:name": b"ada",
            b"info:lang": b"en",
        }

    def test_put_values_mapping(self, row_write_api, fake_hbase, users_table):
        row_write_api.put_values(users_table, "r1", "stats", {"logins": "3"})

        assert fake_hbase.table(users_table).row(b"r1") == {b"stats:logins": b"3"}

    def test_put_values_requires_columns(self, row_write_api, users_table):
        with pytest.raises(ValidationError):
            row_write_api.put_values(users_table, "r1", "info", [])

    def test_put_unknown_family(self, row_write_api, users_table):
        with pytest.raises(ValidationError, match="NoSuchColumnFamilyException"):
            row_write_api.put_value(users_table, "r1", "nope", "c1", "v1")

    def test_put_missing_table(self, row_write_api):
        with pytest.raises(NotFoundError):
            row_write_api.put_value("missing", "r1", "cf1", "c1", "v1")

    def test_put_requires_row_key(self, row_write_api, users_table):
        with pytest.raises(ValidationError, match="row_key"):
            row_write_api.put_value(users_table, "", "info", "name", "ada")

    def test_delete_row(self, row_write_api, fake_hbase, users_table):
        row_write_api.put_values(users_table, "r1", "info", {"name": "ada"})

        assert row_write_api.delete_row(users_table, "r1") is True
        assert fake_hbase.table(users_table).row(b"r1") == {}

    def test_delete_family(self, row_write_api, fake_hbase, users_table):
        row_write_api.put_values(users_table, "r1", "info", {"name": "ada", "lang": "en"})
        row_write_api.put_values(users_table, "r1", "stats", {"logins": "3"})

        row_write_api.delete_family(users_table, "r1", "info")

        assert fake_hbase.table(users_table).row(b"r1") == {b"stats:logins": b"3"}

    def test_delete_column(self, row_write_api, fake_hbase, users_table):
        row_write_api.put_values(users_table, "r1", "info", {"name": "ada", "lang": "en"})

        row_write_api.delete_column(users_table, "r1", "info", "lang")

        assert fake_hbase.table(users_table).row(b"r1") == {b"info:name": b"ada"}

    def test_delete_rows(self, row_write_api, fake_hbase, users_table):
        for key in ("r1", "r2", "r3"):
            row_write_api.put_value(users_table, key, "info", "name", key)

        assert row_write_api.delete_rows(users_table, ["r1", "r3"]) == 2

        assert list(fake_hbase._tables[users_table].rows) == [b"r2"]

    def test_delete_rows_empty(self, row_write_api, users_table):
        assert row_write_api.delete_rows(users_table, []) == 0

    @pytest.mark.parametrize("row_keys", ["r1", b"r1"])
    def test_delete_rows_rejects_single_key(self, row_write_api, fake_hbase, users_table, row_keys):
        for key in ("r", "1", "r1"):
            row_write_api.put_value(users_table, key, "info", "name", key)

        with pytest.raises(ValidationError, match="row_keys"):
            row_write_api.delete_rows(users_table, row_keys)

        assert sorted(fake_hbase._tables[users_table].rows) == [b"1", b"r", b"r1"]

    def test_put_values_rejects_none(self, row_write_api, users_table):
        with pytest.raises(ValidationError):
            row_write_api.put_values(users_table, "r1", "info", None)

    def test_delete_rows_rejects_empty_key(self, row_write_api, users_table):
        with pytest.raises(ValidationError):
            row_write_api.delete_rows(users_table, ["r1", ""])


class TestRowReadApi:
    """Test scans and lookups."""

    @pytest.fixture
    def populated(self, row_write_api, users_table):
        row_write_api.put_values(users_table, "r2", "info", {"name": "grace"})
        row_write_api.put_values(users_table, "r1", "info", {"name": "ada", "lang": "en"})
        row_write_api.put_values(users_table, "r1", "stats", {"logins": "3"})
        row_write_api.put_values(users_table, "x9", "info", {"name": "linus"})
        return users_table

    def test_get_all_rows_in_row_key_order(self, row_read_api, populated):
        rows = row_read_api.get_all_rows(populated)

        assert rows == [
            {"row": "r1", "info:name": "ada", "info:lang": "en", "stats:logins": "3"},
            {"row": "r2", "info:name": "grace"},
            {"row": "x9", "info:name": "linus"},
        ]

    def test_get_all_rows_prefix_and_limit(self, row_read_api, populated):
        assert [r["row"] for r in row_read_api.get_all_rows(populated, row_prefix="r")] == ["r1", "r2"]
        assert [r["row"] for r in row_read_api.get_all_rows(populated, limit=1)] == ["r1"]

    def test_get_all_rows_empty_table(self, row_read_api, users_table):
        assert row_read_api.get_all_rows(users_table) == []

    def test_get_row(self, row_read_api, populated):
        assert row_read_api.get_row(populated, "r2") == {"row": "r2", "info:name": "grace"}

    def test_get_row_absent(self, row_read_api, populated):
        assert row_read_api.get_row(populated, "nope") == {}

    def test_get_cell(self, row_read_api, populated):
        assert row_read_api.get_cell(populated, "r1", "info", "lang") == "en"

    def test_get_cell_absent(self, row_read_api, populated):
        assert row_read_api.get_cell(populated, "r1", "info", "missing") == ""
        assert row_read_api.get_cell(populated, "nope", "info", "name") == ""

    def test_get_cell_utf8(self, row_write_api, row_read_api, users_table):
        row_write_api.put_value(users_table, "r1", "info", "name", "Zoë")

        assert row_read_api.get_cell(users_table, "r1", "info", "name") == "Zoë"

    def test_get_row_missing_table(self, row_read_api):
        with pytest.raises(NotFoundError):
            row_read_api.get_row("missing", "r1")
