#!/usr/bin/env python3
"""
Purpose:
    Represents one product document: YAML front matter (product metadata
    and its ordered `releases`) followed by a free-text markdown body.
"""
from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from eoldata.core.constants import DEFAULT_TEXT_ENCODING, FRONT_MATTER_RE, SUPPORTED_DOCUMENT_EXT
from eoldata.core.formatting import format_pydantic_errors_simple
from eoldata.core.model.release import Release


class DocumentLoadError(ValueError):
    """A product document could not be read or parsed."""


class Product(BaseModel):
    """
    A lifecycle-tracked product.

    Typical use:
        >>> product = Product.from_file("products/python.md")
        >>> product.slug
        'python'
        >>> [r.cycle for r in product.releases][:1]
        ['3.13']
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: str = Field(..., description="Product name used in diagnostics (document file name).")
    data: Dict[str, Any] = Field(default_factory=dict, description="Front matter, defaults applied.")
    content: str = Field(default="", description="Markdown body following the front matter.")
    source: Optional[Path] = Field(default=None, description="Document path, when loaded from disk.")

    # --- IO --- #

    @classmethod
    def from_file(cls, path: Union[str, Path], defaults: Optional[Mapping[str, Any]] = None) -> "Product":
        """
        Load a product from a markdown document with YAML front matter.

        Raises:
            FileNotFoundError: if the file does not exist
            DocumentLoadError: if the extension is not supported or the document cannot be parsed
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"The file {str(p)!r} does not exist")
        if p.suffix.lower() not in SUPPORTED_DOCUMENT_EXT:
            raise DocumentLoadError(
                f"Invalid document file extension for {p.name!r}; expected one of {sorted(SUPPORTED_DOCUMENT_EXT)}"
            )
        text = p.read_text(encoding=DEFAULT_TEXT_ENCODING)
        return cls.from_text(text, name=p.name, defaults=defaults, source=p)

    @classmethod
    def from_text(
        cls,
        text: str,
        name: str,
        defaults: Optional[Mapping[str, Any]] = None,
        source: Optional[Path] = None,
    ) -> "Product":
        """
        Parse a front matter document. `defaults` are applied under the authored keys.

        Raises:
            DocumentLoadError: if the front matter is missing, is not valid YAML, is not a mapping
                or has non-string keys
        """
        match = FRONT_MATTER_RE.match(text)
        if not match:
            raise DocumentLoadError(f"{name}: missing YAML front matter")
        try:
            front_matter = yaml.safe_load(match.group(1)) or {}
        except yaml.YAMLError as e:
            raise DocumentLoadError(f"{name}: invalid YAML front matter ({e})") from e
        if not isinstance(front_matter, dict):
            raise DocumentLoadError(
                f"{name}: front matter must be a mapping, got {type(front_matter).__name__}"
            )

        data = copy.deepcopy(dict(defaults or {}))
        data.update(front_matter)
        try:
            return cls(name=name, data=data, content=text[match.end():], source=source)
        except ValidationError as e:
            raise DocumentLoadError(f"{name}: " + "; ".join(format_pydantic_errors_simple(e))) from e

    # --- Accessors --- #

    @property
    def permalink(self) -> Any:
        """The authored permalink, e.g. '/python' (raw, may be invalid)."""
        return self.data.get("permalink")

    @property
    def slug(self) -> str:
        """Permalink without its leading slash; used as the artifact name."""
        return str(self.permalink or "").replace("/", "", 1)

    @property
    def releases(self) -> List[Release]:
        """Release records in authored order; entries that are not mappings are skipped."""
        raw = self.data.get("releases")
        if not isinstance(raw, list):
            return []
        return [Release(data=entry) for entry in raw if isinstance(entry, dict)]

    def has(self, key: str) -> bool:
        return key in self.data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def is_enabled(self, flag: str) -> bool:
        """
        True if a column flag is set: present and neither None nor False.
        A string (custom column label) enables the column, even when empty.
        """
        value = self.data.get(flag)
        return value is not None and value is not False
