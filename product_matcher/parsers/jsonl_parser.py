"""JSON-lines record loader for catalog products and listings."""
import json
from decimal import Decimal
from pathlib import Path
from typing import List, Type, TypeVar, Union

import structlog
from pydantic import BaseModel, ValidationError

from product_matcher.errors.exceptions import RecordParseError
from product_matcher.models.catalog import Listing, Product

logger = structlog.get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def load_records(
    path: Union[str, Path],
    record_type: Type[RecordT],
    encoding: str = "utf-8",
    strict: bool = True,
) -> List[RecordT]:
    """Read one validated record per non-blank line of a JSON-lines file.

    Args:
        path: File to read
        record_type: Pydantic model each line is validated as
        encoding: File encoding
        strict: Raise on the first malformed line; otherwise log and skip it

    Returns:
        Records in file order

    Raises:
        RecordParseError: If the file cannot be read, or a line is malformed
            while strict is set
    """
    file_path = Path(path)
    log = logger.bind(file_path=str(file_path), record_type=record_type.__name__)

    try:
        with file_path.open("r", encoding=encoding) as handle:
            lines = handle.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise RecordParseError(
            f"Cannot read {file_path}: {e}",
            details={"path": str(file_path)},
        ) from e

    records: List[RecordT] = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        # parse_float keeps numeric prices exact; a float would round them
        try:
            records.append(record_type.model_validate(json.loads(line, parse_float=Decimal)))
        except (json.JSONDecodeError, ValidationError) as e:
            if isinstance(e, ValidationError):
                errors = e.errors()
            else:
                errors = [{"type": "json_invalid", "msg": e.msg, "pos": e.pos}]
            if strict:
                raise RecordParseError(
                    f"Invalid {record_type.__name__} record at {file_path}:{line_number}",
                    details={"path": str(file_path), "line": line_number, "errors": errors},
                ) from e
            skipped += 1
            log.warning("record_skipped", line=line_number, error_count=len(errors))

    log.info("records_loaded", count=len(records), skipped=skipped)
    return records


def load_products(path: Union[str, Path], encoding: str = "utf-8", strict: bool = True) -> List[Product]:
    """Load the product catalog."""
    return load_records(path, Product, encoding=encoding, strict=strict)


def load_listings(path: Union[str, Path], encoding: str = "utf-8", strict: bool = True) -> List[Listing]:
    """Load the listings to match."""
    return load_records(path, Listing, encoding=encoding, strict=strict)
