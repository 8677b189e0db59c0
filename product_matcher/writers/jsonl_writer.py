"""JSON-lines writers for match results and unmatched listings."""
from pathlib import Path
from typing import Iterable, Tuple, Union

import structlog
from pydantic import BaseModel

from product_matcher.errors.exceptions import ResultWriteError
from product_matcher.models.catalog import Listing
from product_matcher.models.matching import ProductListings

logger = structlog.get_logger(__name__)


def write_records(path: Union[str, Path], records: Iterable[BaseModel], encoding: str = "utf-8") -> int:
    """Write one JSON object per line, replacing any existing file.

    Returns:
        Number of records written

    Raises:
        ResultWriteError: If the file cannot be written
    """
    file_path = Path(path)
    count = 0
    try:
        with file_path.open("w", encoding=encoding) as handle:
            for record in records:
                handle.write(record.model_dump_json(by_alias=True))
                handle.write("\n")
                count += 1
    except OSError as e:
        raise ResultWriteError(
            f"Cannot write {file_path}: {e}",
            details={"path": str(file_path), "written": count},
        ) from e

    logger.info("records_written", file_path=str(file_path), count=count)
    return count


def write_results(path: Union[str, Path], results: Iterable[ProductListings], encoding: str = "utf-8") -> int:
    """Write listings grouped by product model."""
    return write_records(path, results, encoding=encoding)


def write_unmatched(path: Union[str, Path], listings: Iterable[Listing], encoding: str = "utf-8") -> int:
    """Write listings that matched no product, as they were read."""
    return write_records(path, listings, encoding=encoding)


def write_match_outputs(
    results_path: Union[str, Path],
    results: Iterable[ProductListings],
    unmatched_path: Union[str, Path],
    unmatched: Iterable[Listing],
    encoding: str = "utf-8",
) -> Tuple[int, int]:
    """Write the results and unmatched files together, or neither.

    Both files are first written beside their targets with a ".tmp" suffix
    and only moved into place once both writes succeeded, so a failed run
    never leaves a new results file next to a stale unmatched file.

    Returns:
        (results written, unmatched listings written)

    Raises:
        ResultWriteError: If either file cannot be written or moved into place
    """
    targets = [Path(results_path), Path(unmatched_path)]
    staged = [target.with_name(target.name + ".tmp") for target in targets]

    try:
        counts = (
            write_records(staged[0], results, encoding=encoding),
            write_records(staged[1], unmatched, encoding=encoding),
        )
        for tmp_path, target in zip(staged, targets):
            try:
                tmp_path.replace(target)
            except OSError as e:
                raise ResultWriteError(
                    f"Cannot move {tmp_path} to {target}: {e}",
                    details={"path": str(target)},
                ) from e
    except ResultWriteError:
        for tmp_path in staged:
            tmp_path.unlink(missing_ok=True)
        raise

    return counts
