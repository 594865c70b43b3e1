"""Metadados de proveniencia do powerclima."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from datetime import datetime
from typing import Any


@dataclass
class MetaInfo:
    """Metadados de proveniencia e rastreabilidade de uma consulta."""

    source: str
    source_url: str
    source_method: str
    fetched_at: datetime
    timestamp: datetime = dataclass_field(default_factory=datetime.now)
    fetch_duration_ms: int = 0
    parse_duration_ms: int = 0
    records_count: int = 0
    parameters: list[str] = dataclass_field(default_factory=list)
    columns: list[str] = dataclass_field(default_factory=list)
    powerclima_version: str = ""
    schema_version: str = "1.0"
    parser_version: int = 1
    python_version: str = ""

    def __post_init__(self) -> None:
        """Preenche versoes automaticamente."""
        if not self.powerclima_version:
            from powerclima import __version__

            self.powerclima_version = __version__

        if not self.python_version:
            self.python_version = sys.version.split()[0]

    def to_dict(self) -> dict[str, Any]:
        """Converte para dicionario serializavel."""
        return {
            "source": self.source,
            "source_url": self.source_url,
            "source_method": self.source_method,
            "fetched_at": self.fetched_at.isoformat(),
            "timestamp": self.timestamp.isoformat(),
            "fetch_duration_ms": self.fetch_duration_ms,
            "parse_duration_ms": self.parse_duration_ms,
            "records_count": self.records_count,
            "parameters": self.parameters,
            "columns": self.columns,
            "powerclima_version": self.powerclima_version,
            "schema_version": self.schema_version,
            "parser_version": self.parser_version,
            "python_version": self.python_version,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serializa para JSON."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MetaInfo:
        """Reconstroi a partir de dicionario."""
        data = data.copy()

        for key in ["fetched_at", "timestamp"]:
            if data.get(key) and isinstance(data[key], str):
                data[key] = datetime.fromisoformat(data[key])

        return cls(**data)
