"""Unit tests for index commands."""

import pytest

from orientql.commands import index
from orientql.formatters import EmbeddedRid, Regular
from orientql.types import RecordId, WhereCondition


class TestLookup:
    """Test SELECT over index entries."""

    @pytest.fixture
    def lookup(self):
        return index.Lookup("dictionary")

    def test_the_schema_is_valid(self, lookup):
        tokens = lookup.get_tokens()

        assert list(tokens) == ["Index", "Where"]
        assert tokens["Where"] == []

    def test_construction_of_an_object(self, lookup):
        assert lookup.get_raw() == "SELECT FROM index:dictionary"

    def test_setting_where_condition(self, lookup):
        lookup.where("key = ?", "luke")

        assert lookup.get_raw() == 'SELECT FROM index:dictionary WHERE key = "luke"'

    def test_and_where(self, lookup):
        lookup.where("key = ?", "luke").and_where("rid = ?", RecordId(12, 0))

        assert lookup.get_raw() == 'SELECT FROM index:dictionary WHERE key = "luke" AND rid = #12:0'

    def test_between(self, lookup):
        lookup.between("key", "a", "m")

        assert lookup.get_raw() == 'SELECT FROM index:dictionary WHERE key BETWEEN "a" AND "m"'


class TestIndexDefinition:
    """Test CREATE and DROP INDEX."""

    def test_create(self):
        assert index.Create("name").get_raw() == "CREATE INDEX name"

    def test_create_on_class_with_type(self):
        assert index.Create("name", "Account", "UNIQUE").get_raw() == "CREATE INDEX Account.name UNIQUE"

    def test_type_can_be_set_later(self):
        command = index.Create("name", "Account").type("NOTUNIQUE")

        assert command.get_raw() == "CREATE INDEX Account.name NOTUNIQUE"

    def test_drop(self):
        assert index.Drop("name").get_raw() == "DROP INDEX name"
        assert index.Drop("name", "Account").get_raw() == "DROP INDEX Account.name"


class TestIndexEntries:
    """Test statements manipulating index entries."""

    def test_count(self):
        assert index.Count("dictionary").get_raw() == "SELECT count(*) AS size FROM index:dictionary"

    def test_put(self):
        command = index.Put("dictionary", "luke", "#12:0")

        assert command.get_raw() == 'INSERT INTO index:dictionary (key, rid) VALUES ("luke", #12:0)'

    def test_put_filters_key(self):
        command = index.Put("dictionary", 'lu"ke', RecordId(12, 0))

        assert command.get_raw() == 'INSERT INTO index:dictionary (key, rid) VALUES ("luke", #12:0)'

    def test_put_with_invalid_rid_leaves_value_empty(self):
        command = index.Put("dictionary", "luke", "not-a-rid")

        assert command.get_raw() == 'INSERT INTO index:dictionary (key, rid) VALUES ("luke",)'

    def test_put_formatter_bindings(self):
        assert index.Put.formatter_for("Value") is EmbeddedRid
        assert index.Put.formatter_for("Key") is Regular

    def test_remove_key(self):
        command = index.Remove("dictionary", "luke")

        assert command.get_raw() == 'DELETE FROM index:dictionary WHERE key = "luke"'

    def test_remove_key_and_rid(self):
        command = index.Remove("dictionary", "luke", "#12:0")

        assert command.get_raw() == 'DELETE FROM index:dictionary WHERE key = "luke" AND rid = #12:0'
        assert command.get_tokens()["Where"][1] == WhereCondition("AND", "rid = ?", RecordId(12, 0))
