# ABOUTME: Tests for the JSON dataset sink
# ABOUTME: Verifies wire keys, the pretty and minified files, and reading a dataset back

import json

from rocket_lineups.core.models import InvasionRecord, LineupSlotEntry
from rocket_lineups.persistence.json_sink import DATASET_NAME, JsonDatasetSink, dump_records, parse_records


def _record() -> InvasionRecord:
    return InvasionRecord(
        quote="Bug: “Go, my super bug Pokémon!”",
        original_quote="Go, my super bug Pokémon!",
        category="Bug-type Grunt",
        portrait_image_url="https://assets.example.com/grunt-male.png",
        is_special=False,
        lineup=[
            LineupSlotEntry(
                slot_number=1,
                species_id=15,
                display_name="Beedrill",
                original_name="Shadow Beedrill",
                types=["Bug", "Poison"],
                image_url="https://img.example.com/beedrill.png",
            )
        ],
    )


class TestDumpRecords:
    """Test dataset serialization."""

    def test_wire_keys(self):
        [payload] = json.loads(dump_records([_record()]))

        assert set(payload) == {
            "quote",
            "orignialQuote",
            "category",
            "characterImageUrl",
            "isSpecial",
            "lineupPokemons",
        }
        assert set(payload["lineupPokemons"][0]) == {
            "slotNo",
            "no",
            "name",
            "originalName",
            "types",
            "catchable",
            "shinyAvailable",
            "imageUrl",
        }
        assert payload["lineupPokemons"][0]["originalName"] == "Shadow Beedrill"

    def test_non_ascii_text_kept(self):
        assert "Pokémon" in dump_records([_record()])

    def test_parse_accepts_wire_keys(self):
        [record] = parse_records(dump_records([_record()]))
        assert record == _record()

    def test_empty_dataset(self):
        assert dump_records([]) == "[]"


class TestJsonDatasetSink:
    """Test writing and loading dataset files."""

    def test_writes_both_files(self, tmp_path):
        sink = JsonDatasetSink(tmp_path / "out")

        written = sink.write([_record()])

        assert written == [tmp_path / "out" / f"{DATASET_NAME}.json", tmp_path / "out" / f"{DATASET_NAME}.min.json"]
        assert all(path.exists() for path in written)

    def test_minified_file_is_single_line(self, tmp_path):
        sink = JsonDatasetSink(tmp_path)
        sink.write([_record(), _record()])

        pretty = sink.pretty_path.read_text(encoding="utf-8")
        minified = sink.minified_path.read_text(encoding="utf-8")

        assert "\n" in pretty
        assert "\n" not in minified
        assert json.loads(pretty) == json.loads(minified)

    def test_load(self, tmp_path):
        sink = JsonDatasetSink(tmp_path)
        sink.write([_record()])

        assert JsonDatasetSink.load(sink.minified_path) == [_record()]
