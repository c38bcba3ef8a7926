"""Unit tests for the command rendering and WHERE engine."""

import pytest

from orientql.commands.base import Command
from orientql.commands.select import Select
from orientql.formatters import Regular, Where
from orientql.types import RecordId, WhereCondition


class Traverse(Command):
    SCHEMA = "TRAVERSE :Class FROM :Class :Where"


class Purge(Command):
    SCHEMA = "DELETE FROM :Target WHERE :Condition"


class TestTokens:
    """Test the raw token store."""

    def test_tokens_are_seeded_from_schema(self):
        tokens = Select().get_tokens()

        assert list(tokens) == ["Projections", "Target", "Where", "OrderBy", "Skip", "Limit", "Range"]
        assert all(values == [] for values in tokens.values())

    def test_set_token_appends_by_default(self):
        command = Select()
        command.set_token("Projections", ["name"])
        command.set_token("Projections", "surname")

        assert command.get_tokens()["Projections"] == ["name", "surname"]

    def test_set_token_replaces_when_not_appending(self):
        command = Select()
        command.set_token("Projections", ["name"])
        command.set_token("Projections", ["age"], append=False)

        assert command.get_tokens()["Projections"] == ["age"]

    def test_get_tokens_returns_a_copy(self):
        command = Select("Account")
        command.get_tokens()["Target"].append("Profile")

        assert command.get_tokens()["Target"] == ["Account"]

    def test_unknown_token_is_recorded_but_not_rendered(self):
        command = Select("Account")
        command.set_token("Unknown", "value")

        assert command.get_tokens()["Unknown"] == ["value"]
        assert command.get_raw() == "SELECT FROM Account"


class TestRendering:
    """Test placeholder substitution and normalization."""

    def test_missing_tokens_render_empty(self):
        assert Select("Account").get_raw() == "SELECT FROM Account"

    def test_rendering_is_idempotent(self):
        command = Select("Account").where("name = ?", "luke").limit(10)

        assert command.get_raw() == command.get_raw()

    def test_repeated_placeholder_resolves_to_same_fragment(self):
        command = Traverse().set_token("Class", "V")

        assert command.get_raw() == "TRAVERSE V FROM V"

    def test_rendered_values_are_not_rescanned_for_placeholders(self):
        command = Select(":Where")

        assert command.get_raw() == "SELECT FROM :Where"

    def test_str_renders_statement(self):
        command = Select("Account")

        assert str(command) == command.get_raw()

    @pytest.mark.parametrize("statement, expected", [
        ("SELECT   FROM  Account ", "SELECT FROM Account"),
        ("SELECT FROM Account\n LIMIT 1", "SELECT FROM Account LIMIT 1"),
        ('INSERT INTO A ( a , b ) VALUES ("x" , 1 )', 'INSERT INTO A (a, b) VALUES ("x", 1)'),
        ('VALUES ("luke", )', 'VALUES ("luke",)'),
        ("SELECT count( * ) FROM Account", "SELECT count(*) FROM Account"),
        ("GRANT READ ON Account TO OR", "GRANT READ ON Account TO OR"),
    ])
    def test_canonicalize(self, statement, expected):
        assert Command.canonicalize(statement) == expected

    def test_schema_keyword_dropped_when_nothing_follows(self):
        assert Purge().from_("Account").get_raw() == "DELETE FROM Account"

    def test_schema_keyword_kept_when_clause_renders(self):
        command = Purge().from_("Account").set_token("Condition", "archived")

        assert command.get_raw() == "DELETE FROM Account WHERE archived"

    @pytest.mark.parametrize("value", ["OR", "AND", "WHERE"])
    def test_keyword_values_are_never_dropped(self, value):
        assert Traverse().set_token("Class", value).get_raw() == f"TRAVERSE {value} FROM {value}"

    def test_formatter_bindings_are_read_only(self):
        with pytest.raises(TypeError):
            Select.FORMATTERS["Where"] = Regular

    def test_unbound_tokens_use_regular_formatter(self):
        assert Select.formatter_for("Projections") is Regular
        assert Select.formatter_for("Where") is Where


class TestWhere:
    """Test the WHERE accumulator."""

    def test_where(self):
        command = Select("Account").where("name = ?", "luke")

        assert command.get_raw() == 'SELECT FROM Account WHERE name = "luke"'

    def test_and_where_preserves_call_order(self):
        command = Select("Account").where("name = ?", "luke").and_where("surname = ?", "skywalker")

        assert command.get_raw() == 'SELECT FROM Account WHERE name = "luke" AND surname = "skywalker"'

    def test_or_where(self):
        command = Select("Account").where("name = ?", "luke").or_where("name = ?", "leia")

        assert command.get_raw() == 'SELECT FROM Account WHERE name = "luke" OR name = "leia"'

    def test_and_where_without_where_starts_the_clause(self):
        command = Select("Account").or_where("age > ?", 18)

        assert command.get_raw() == "SELECT FROM Account WHERE age > 18"
        assert command.get_tokens()["Where"] == [WhereCondition(None, "age > ?", 18)]

    def test_where_starts_a_fresh_clause(self):
        command = Select("Account").where("a = ?", 1).and_where("b = ?", 2).where("c = ?", 3)

        assert command.get_raw() == "SELECT FROM Account WHERE c = 3"

    def test_reset_where(self):
        command = Select("Account").where("name = ?", "luke").reset_where()

        assert command.get_raw() == "SELECT FROM Account"
        assert command.get_tokens()["Where"] == []

    def test_record_id_values_render_bare(self):
        command = Select("Account").where("@rid = ?", RecordId(12, 0))

        assert command.get_raw() == "SELECT FROM Account WHERE @rid = #12:0"

    def test_where_tokens_hold_raw_conditions(self):
        command = Select("Account").where("name = ?", "luke").and_where("age > ?", 18)

        assert command.get_tokens()["Where"] == [
            WhereCondition(None, "name = ?", "luke"),
            WhereCondition("AND", "age > ?", 18),
        ]

    def test_between(self):
        command = Select("Account").between("age", 18, 30)

        assert command.get_raw() == "SELECT FROM Account WHERE age BETWEEN 18 AND 30"

    def test_between_after_where(self):
        command = Select("Account").where("name = ?", "luke").between("age", 18, 30)

        assert command.get_raw() == 'SELECT FROM Account WHERE name = "luke" AND age BETWEEN 18 AND 30'


class TestClauses:
    """Test ordering, paging and range clauses."""

    def test_order_skip_limit(self):
        command = Select("Account").order_by("name").order_by("age DESC").skip(10).limit(20)

        assert command.get_raw() == "SELECT FROM Account ORDER BY name, age DESC SKIP 10 LIMIT 20"

    def test_order_by_first(self):
        command = Select("Account").order_by("name").order_by("age", first=True)

        assert command.get_raw() == "SELECT FROM Account ORDER BY age, name"

    def test_order_by_replace(self):
        command = Select("Account").order_by("name").order_by("age", append=False)

        assert command.get_raw() == "SELECT FROM Account ORDER BY age"

    def test_limit_replaces_previous_limit(self):
        command = Select("Account").limit(20).limit(5)

        assert command.get_raw() == "SELECT FROM Account LIMIT 5"

    def test_range(self):
        assert Select("Account").range("12:0", "12:10").get_raw() == "SELECT FROM Account RANGE #12:0 #12:10"
        assert Select("Account").range("12:0").get_raw() == "SELECT FROM Account RANGE #12:0"

    def test_multiple_targets(self):
        command = Select(["#10:1", "#10:2"])

        assert command.get_raw() == "SELECT FROM [#10:1, #10:2]"

    def test_projections(self):
        command = Select(["Account"]).select(["name", "surname"]).select("count(*)")

        assert command.get_raw() == "SELECT name, surname, count(*) FROM Account"
