"""Tests for reading and validating creature exports."""

import json
from pathlib import Path

import pytest

from ii_statblock.errors import ParseError, ReadError, SchemaError, StatblockError
from ii_statblock.models import CreatureRecord
from ii_statblock.reader import parse_record, read_record

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def goblin_data() -> dict:
    """Load the minimal goblin export as a dict."""
    with open(FIXTURES / "goblin.json") as f:
        return json.load(f)


class TestParseRecord:
    """Test JSON decoding and schema validation."""

    def test_parse_minimal_record(self, goblin_data):
        """Parse a record with every list empty."""
        record = parse_record(json.dumps(goblin_data))

        assert isinstance(record, CreatureRecord)
        assert record.name == "Goblin"
        assert record.ac.value == 15
        assert record.hp.notes == "(2d6)"
        assert record.speed == ["30 ft."]
        assert record.abilities.as_list() == [8, 14, 10, 10, 8, 8]
        assert record.saves == []
        assert record.traits == []

    def test_parse_full_record(self):
        """Parse nested modifier and content entries."""
        record = parse_record((FIXTURES / "wererat.json").read_text(encoding="utf-8"))

        assert record.type == "Medium humanoid (any race), lawful evil"
        assert record.saves[0].name == "Dex"
        assert record.saves[0].modifier == 4
        assert [s.name for s in record.skills] == ["Perception", "Stealth"]
        assert record.actions[0].content.count("\n") == 1
        assert record.bonus_actions[0].name == "Scurry"

    def test_unknown_keys_are_ignored(self, goblin_data):
        """Extra keys from newer exports do not fail validation."""
        goblin_data["InitiativeModifier"] = 2
        goblin_data["Id"] = "goblin"

        record = parse_record(json.dumps(goblin_data))

        assert record.name == "Goblin"

    @pytest.mark.parametrize("key", [
        "Saves", "Skills", "Traits", "Actions", "BonusActions",
        "Reactions", "LegendaryActions", "MythicActions",
    ])
    def test_optional_lists_default_to_empty(self, goblin_data, key):
        """Modifier and content lists may be left out entirely."""
        del goblin_data[key]

        record = parse_record(json.dumps(goblin_data))

        assert record.model_dump()[_attr(key)] == []

    def test_invalid_json(self):
        """Malformed JSON raises ParseError with a location."""
        with pytest.raises(ParseError) as exc_info:
            parse_record('{"Name": "Goblin",')

        assert "Invalid JSON" in str(exc_info.value)
        assert exc_info.value.details["line"] == 1

    def test_deeply_nested_json(self):
        """Nesting past the decoder's recursion limit is a ParseError."""
        depth = 100_000

        with pytest.raises(ParseError) as exc_info:
            parse_record("[" * depth + "]" * depth)

        assert "too deep" in str(exc_info.value)

    def test_top_level_not_object(self):
        """A JSON array is valid JSON but not a creature."""
        with pytest.raises(SchemaError) as exc_info:
            parse_record("[]")

        assert "expected JSON object, got list" in str(exc_info.value)

    @pytest.mark.parametrize("key", ["Name", "Type", "AC", "HP", "Abilities", "Challenge", "Senses"])
    def test_missing_required_field(self, goblin_data, key):
        """A missing required key raises SchemaError naming the key."""
        del goblin_data[key]

        with pytest.raises(SchemaError) as exc_info:
            parse_record(json.dumps(goblin_data))

        assert any(e.startswith(f"{key}:") for e in exc_info.value.errors)

    def test_field_names_are_case_sensitive(self, goblin_data):
        """"name" is not accepted in place of "Name"."""
        goblin_data["name"] = goblin_data.pop("Name")

        with pytest.raises(SchemaError):
            parse_record(json.dumps(goblin_data))

    def test_string_where_list_expected(self, goblin_data):
        """A bare string is not a list of strings."""
        goblin_data["Speed"] = "30 ft."

        with pytest.raises(SchemaError) as exc_info:
            parse_record(json.dumps(goblin_data))

        assert any(e.startswith("Speed:") for e in exc_info.value.errors)

    def test_numeric_string_is_not_coerced(self, goblin_data):
        """"15" is rejected where an integer is required."""
        goblin_data["AC"]["Value"] = "15"

        with pytest.raises(SchemaError) as exc_info:
            parse_record(json.dumps(goblin_data))

        assert any(e.startswith("AC.Value:") for e in exc_info.value.errors)

    def test_negative_score_rejected(self, goblin_data):
        """Ability scores are unsigned."""
        goblin_data["Abilities"]["Str"] = -1

        with pytest.raises(SchemaError) as exc_info:
            parse_record(json.dumps(goblin_data))

        assert any(e.startswith("Abilities.Str:") for e in exc_info.value.errors)

    def test_bad_nested_entry(self, goblin_data):
        """A content entry missing its Content key is reported by index."""
        goblin_data["Traits"] = [{"Name": "Nimble Escape"}]

        with pytest.raises(SchemaError) as exc_info:
            parse_record(json.dumps(goblin_data))

        assert "Traits.0.Content: Field required" in exc_info.value.errors

    def test_schema_error_message_lists_problems(self, goblin_data):
        """str() of a SchemaError includes one line per problem."""
        del goblin_data["Name"]
        del goblin_data["Challenge"]

        with pytest.raises(SchemaError) as exc_info:
            parse_record(json.dumps(goblin_data))

        message = str(exc_info.value)
        assert "2 problem(s)" in message
        assert "  - Name: Field required" in message
        assert "  - Challenge: Field required" in message


class TestReadRecord:
    """Test reading creature files from disk."""

    def test_read_fixture(self):
        """Read and validate a file by path."""
        record = read_record(FIXTURES / "goblin.json")
        assert record.name == "Goblin"

    def test_read_relative_to_cwd(self, tmp_path, monkeypatch, goblin_data):
        """Relative paths resolve against the working directory."""
        (tmp_path / "goblin.json").write_text(json.dumps(goblin_data), encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        record = read_record("goblin.json")

        assert record.name == "Goblin"

    def test_file_not_found(self, tmp_path):
        """A missing file raises ReadError."""
        missing = tmp_path / "nope.json"

        with pytest.raises(ReadError) as exc_info:
            read_record(missing)

        assert "not found" in str(exc_info.value)

    def test_directory(self, tmp_path):
        """A directory is not a readable creature file."""
        with pytest.raises(ReadError):
            read_record(tmp_path)

    def test_not_utf8(self, tmp_path):
        """Undecodable bytes raise ReadError."""
        path = tmp_path / "bad.json"
        path.write_bytes(b'{"Name": "\xff\xfe"}')

        with pytest.raises(ReadError) as exc_info:
            read_record(path)

        assert "UTF-8" in str(exc_info.value)

    def test_invalid_json_file(self, tmp_path):
        """A file with broken JSON raises ParseError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json}", encoding="utf-8")

        with pytest.raises(ParseError):
            read_record(path)

    def test_all_errors_share_base(self):
        """Every fatal error is a StatblockError."""
        for exc in (ReadError, ParseError, SchemaError):
            assert issubclass(exc, StatblockError)


def _attr(key: str) -> str:
    """Convert a JSON key like "BonusActions" to "bonus_actions"."""
    out = ""
    for i, c in enumerate(key):
        if c.isupper() and i:
            out += "_"
        out += c.lower()
    return out
