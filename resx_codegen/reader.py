"""
Resource Source Reader

Reads a .resx document and yields its ``data`` entries as
(key, value) pairs in document order.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

from resx_codegen.exceptions import InputNotFoundError, MalformedInputError

logger = logging.getLogger(__name__)

ROOT_ELEMENT = "root"
DATA_ELEMENT = "data"
VALUE_ELEMENT = "value"
NAME_ATTRIBUTE = "name"


@dataclass(frozen=True)
class ResourceEntry:
    """One localizable string from the resource file."""

    key: str
    value: str


def read_resources(path: Union[str, Path]) -> Iterator[ResourceEntry]:
    """
    Yield every resource entry of a .resx file.

    The value text is returned exactly as stored, with no whitespace
    normalization. Duplicate keys are passed through; deduplication
    happens in the generator.

    Args:
        path: Path to the .resx file

    Raises:
        InputNotFoundError: The file does not exist
        MalformedInputError: The document is not well-formed, or an
            entry lacks its name or value
    """
    path = Path(path)

    if not path.is_file():
        raise InputNotFoundError(f"Resource file not found: {path}", path=str(path))

    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise MalformedInputError(
            f"Resource file is not well-formed XML: {e}", path=str(path)
        ) from e
    except OSError as e:
        raise InputNotFoundError(
            f"Cannot read resource file {path}: {e}", path=str(path)
        ) from e

    root = tree.getroot()
    if root.tag != ROOT_ELEMENT:
        raise MalformedInputError(
            f"Expected <{ROOT_ELEMENT}> as document element, found <{root.tag}>",
            path=str(path),
        )

    count = 0
    for data in root.findall(DATA_ELEMENT):
        name = data.get(NAME_ATTRIBUTE)
        if name is None:
            raise MalformedInputError(
                f"<{DATA_ELEMENT}> element without a '{NAME_ATTRIBUTE}' attribute",
                path=str(path),
            )

        value = data.find(VALUE_ELEMENT)
        if value is None:
            raise MalformedInputError(
                f"Resource '{name}' has no <{VALUE_ELEMENT}> element",
                path=str(path),
                entry_name=name,
            )

        count += 1
        yield ResourceEntry(key=name, value="".join(value.itertext()))

    logger.debug(f"Read {count} resource entries from {path}")
