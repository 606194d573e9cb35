"""
Output formats for hostprobe reports.

A report is a mapping of section name ('os', 'cpu', 'gpu', 'public_ip')
to the record the probe produced for it. Formats render that mapping as:
- text: Rich tables for terminal display
- json: JSON for programmatic access
- yaml: YAML for humans and config tooling

Usage:
    from hostprobe.reporting import FormatRegistry

    fmt = FormatRegistry.get('json')()
    print(fmt.render({'os': detect_os()}))
"""

import dataclasses
import enum
import io
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.table import Table


def to_serializable(obj: Any) -> Any:
    """
    Convert report records into plain JSON/YAML types.

    - Enums become their member name ('Linux', 'X86_64')
    - Dataclasses become dictionaries
    - Containers are converted recursively
    """
    if isinstance(obj, enum.Enum):
        return obj.name
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_serializable(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, dict):
        return {str(k): to_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [to_serializable(v) for v in obj]
    return obj


class HostProbeJsonEncoder(json.JSONEncoder):
    """Custom JSON encoder for hostprobe types.

    Example:
        >>> json.dumps({'os': OperatingSystem.Linux}, cls=HostProbeJsonEncoder)
        '{"os": "Linux"}'
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, enum.Enum) or dataclasses.is_dataclass(obj):
            return to_serializable(obj)
        if isinstance(obj, set):
            return list(obj)
        return super().default(obj)


class ReportFormat(ABC):
    """Abstract base class for report formats."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the format name."""
        pass

    @abstractmethod
    def render(self, report: Dict[str, Any]) -> str:
        """
        Render a report.

        Args:
            report: Section name to record (dataclass, str or None).

        Returns:
            The rendered report, ending with a newline.
        """
        pass


class FormatRegistry:
    """Registry for available report formats."""

    _formats: Dict[str, type] = {}

    @classmethod
    def register(cls, format_class: type) -> type:
        """
        Register a format class.

        Can be used as a decorator:
            @FormatRegistry.register
            class MyFormat(ReportFormat):
                ...
        """
        instance = format_class()
        cls._formats[instance.name] = format_class
        return format_class

    @classmethod
    def get(cls, name: str) -> Optional[type]:
        return cls._formats.get(name)

    @classmethod
    def available_formats(cls) -> List[str]:
        return list(cls._formats.keys())


@FormatRegistry.register
class JSONFormat(ReportFormat):
    def __init__(self, indent: int = 2):
        self.indent = indent

    @property
    def name(self) -> str:
        return "json"

    def render(self, report: Dict[str, Any]) -> str:
        return json.dumps(report, cls=HostProbeJsonEncoder, indent=self.indent) + "\n"


@FormatRegistry.register
class YAMLFormat(ReportFormat):
    @property
    def name(self) -> str:
        return "yaml"

    def render(self, report: Dict[str, Any]) -> str:
        return yaml.safe_dump(to_serializable(report), sort_keys=False, default_flow_style=False)


@FormatRegistry.register
class TextFormat(ReportFormat):
    """One two-column table per section."""

    def __init__(self, width: int = 100):
        self.width = width

    @property
    def name(self) -> str:
        return "text"

    @staticmethod
    def _cell(value: Any) -> str:
        if value is None:
            return "-"
        if isinstance(value, bool):
            return "yes" if value else "no"
        return str(value)

    def _section_table(self, title: str, record: Any) -> Table:
        table = Table(title=title, show_header=False, title_justify="left")
        table.add_column("field", style="bold")
        table.add_column("value")

        data = to_serializable(record)
        if isinstance(data, dict):
            for key, value in data.items():
                table.add_row(key, self._cell(value))
        else:
            table.add_row(title, self._cell(data))
        return table

    def render(self, report: Dict[str, Any]) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, width=self.width, no_color=True, highlight=False)
        for title, record in report.items():
            console.print(self._section_table(title, record))
        return buffer.getvalue()
