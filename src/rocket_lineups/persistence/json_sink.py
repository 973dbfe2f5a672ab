# ABOUTME: Output sink writing the invasion dataset as pretty and minified JSON
# ABOUTME: Also reads a dataset back into records for inspection and round-trip checks

from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter

from rocket_lineups.core.models import InvasionRecord
from rocket_lineups.utils.logging import get_logger

DATASET_NAME = "rocketInvasions"

_records_adapter = TypeAdapter(list[InvasionRecord])


def dump_records(records: Sequence[InvasionRecord], indent: int | None = None) -> str:
    """Serialize records with the wire keys the consuming app reads."""
    return _records_adapter.dump_json(list(records), by_alias=True, indent=indent).decode("utf-8")


def parse_records(payload: str | bytes) -> list[InvasionRecord]:
    return _records_adapter.validate_json(payload)


class JsonDatasetSink:
    """Writes ``rocketInvasions.json`` and ``rocketInvasions.min.json`` into one directory."""

    def __init__(self, output_dir: Path | str):
        self.output_dir = Path(output_dir)
        self.logger = get_logger(__name__)

    @property
    def pretty_path(self) -> Path:
        return self.output_dir / f"{DATASET_NAME}.json"

    @property
    def minified_path(self) -> Path:
        return self.output_dir / f"{DATASET_NAME}.min.json"

    def write(self, records: Sequence[InvasionRecord]) -> list[Path]:
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self.pretty_path.write_text(dump_records(records, indent=2), encoding="utf-8")
        self.minified_path.write_text(dump_records(records), encoding="utf-8")

        self.logger.info(
            "Wrote invasion dataset",
            record_count=len(records),
            pretty_path=str(self.pretty_path),
            minified_path=str(self.minified_path),
        )
        return [self.pretty_path, self.minified_path]

    @staticmethod
    def load(path: Path | str) -> list[InvasionRecord]:
        return parse_records(Path(path).read_bytes())
