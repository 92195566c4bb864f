"""
Resource Code Generator - Test Configuration

Shared fixtures for writing .resx inputs.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Tuple

import pytest


def build_resx(path: Path, entries: List[Tuple[str, str]]) -> Path:
    """Write a minimal .resx document with the given (name, value) pairs."""
    root = ET.Element("root")
    header = ET.SubElement(root, "resheader", name="resmimetype")
    ET.SubElement(header, "value").text = "text/microsoft-resx"

    for name, value in entries:
        data = ET.SubElement(root, "data", name=name)
        ET.SubElement(data, "value").text = value

    ET.ElementTree(root).write(path, encoding="utf-8", xml_declaration=True)
    return path


@pytest.fixture
def write_resx(tmp_path):
    """Factory writing a .resx file into the test directory."""

    def _write(entries, name="Strings.resx"):
        return build_resx(tmp_path / name, entries)

    return _write


@pytest.fixture
def sample_entries():
    """Entries with a duplicate key and an embedded quote."""
    return [("Hello", "World"), ("Quoted", 'a"b'), ("Hello", "Dup")]
