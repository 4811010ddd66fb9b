"""JSON serialisation of license records."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence

from pydantic import BaseModel

from rtuk_licenses.core.exceptions import RecordWriteError

logger = logging.getLogger(__name__)

#: Indentation of the written JSON documents.
JSON_INDENT: int = 4


def serialize_records(records: Sequence[BaseModel]) -> str:
    """Render ``records`` as an indented JSON array using the published keys.

    Raises:
        RecordWriteError: If a record cannot be encoded.
    """
    try:
        return json.dumps(
            [record.model_dump(mode="json", by_alias=True) for record in records],
            indent=JSON_INDENT,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as exc:
        raise RecordWriteError(f"cannot encode records to JSON: {exc}") from exc


def write_records(records: Sequence[BaseModel], path: str | os.PathLike[str]) -> int:
    """Write ``records`` to ``path`` as UTF-8 JSON, replacing any existing file.

    The output file is the only product of a pipeline step, so every failure
    is raised to the caller rather than leaving it to guess whether the file
    is usable.  A partially written file is not removed.

    Args:
        records: License records of either kind.
        path: Destination file.

    Returns:
        Number of records written.

    Raises:
        RecordWriteError: If encoding, creating or writing the file fails.
    """
    data = serialize_records(records)
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(data)
    except OSError as exc:
        raise RecordWriteError(
            f"failed to write {path}: {exc}", path=os.fspath(path)
        ) from exc

    logger.info("writer: %d licenses written to %s", len(records), path)
    return len(records)
