# ABOUTME: Output layer for the finished invasion dataset
# ABOUTME: Pipeline Stage 3: ordered records → JSON files consumed by the app

from .json_sink import DATASET_NAME, JsonDatasetSink, dump_records, parse_records

__all__ = [
    "DATASET_NAME",
    "JsonDatasetSink",
    "dump_records",
    "parse_records",
]
