"""Result writers."""
from product_matcher.writers.jsonl_writer import (
    write_match_outputs,
    write_records,
    write_results,
    write_unmatched,
)

__all__ = [
    "write_match_outputs",
    "write_records",
    "write_results",
    "write_unmatched",
]
