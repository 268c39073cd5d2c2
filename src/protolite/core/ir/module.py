"""
Per-file parse results.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .nodes import Block


class SchemaModule(BaseModel):
    """
    Parsed contents of a single schema file.

    Attributes:
        name: Module name (the file stem, e.g. "addressbook")
        file: Source file path
        block: Root block of the file
    """

    name: str
    file: Path
    block: Block

    model_config = ConfigDict(frozen=True)
