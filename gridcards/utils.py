"""JSON file helpers for the league data directory."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('gridcards.utils')


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load a JSON file, optionally validating it against a pydantic model.

    Args:
        path: Path to JSON file
        schema: Optional pydantic model to validate against

    Returns:
        Parsed JSON (validated model instance if schema provided)

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from gridcards.schemas import WeeksFile
        weeks = load_json('data/weeks.json', schema=WeeksFile)
    """
    path = Path(path)

    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema:
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.error(f'Schema validation failed for {path}: {e}')
            raise ValueError(f'Schema validation failed for {path}:\n{e}') from e

    return data


def load_json_safe(
    path: Path | str,
    default: Any = None,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Like load_json, but returns ``default`` when the file is missing.

    Malformed files still raise; only absence is treated as "no data yet".
    """
    if not Path(path).exists():
        return default
    return load_json(path, schema=schema)


def save_json(
    path: Path | str,
    data: Any,
    indent: int = 2,
    create_dirs: bool = True,
) -> None:
    """
    Save data (plain JSON or a pydantic model) to a file.

    The file is written to a sibling temp file and renamed into place so a
    failed write never leaves a truncated file behind.

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If file cannot be written
    """
    path = Path(path)

    logger.debug(f'Saving JSON to: {path}')

    if create_dirs:
        path.parent.mkdir(parents=True, exist_ok=True)

    json_data = data.model_dump(mode='json') if isinstance(data, BaseModel) else data

    tmp_path = path.with_suffix(path.suffix + '.tmp')
    try:
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(json_data, f, indent=indent, ensure_ascii=False)
        tmp_path.replace(path)
    except TypeError as e:
        tmp_path.unlink(missing_ok=True)
        logger.error(f'Data is not JSON-serializable: {e}')
        raise TypeError(f'Data is not JSON-serializable: {e}') from e
    except OSError as e:
        logger.error(f'Failed to write file {path}: {e}')
        raise
