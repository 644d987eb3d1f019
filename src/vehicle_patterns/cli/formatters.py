"""
CLI formatting functions for example output.

This module handles presentation of the lines an example produces:
- plain text, one line per step
- JSON and YAML documents
- Rich tables with numbered steps
"""

import json
from typing import List, Optional

import yaml


def format_output(lines: List[str], title: Optional[str] = None, format_type: str = "text") -> str:
    """Format example output according to the specified format type."""
    if format_type == "json":
        return json.dumps({"example": title, "output": lines}, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.dump(
            {"example": title, "output": lines},
            default_flow_style=False,
            sort_keys=False,
        )
    elif format_type == "table":
        return format_table_output(lines, title)
    else:
        return format_text_output(lines, title)


def format_text_output(lines: List[str], title: Optional[str] = None) -> str:
    """Format lines as plain text with an optional underlined title."""
    if not title:
        return "\n".join(lines)
    return "\n".join([title, "=" * len(title), *lines])


def format_table_output(lines: List[str], title: Optional[str] = None) -> str:
    """Format lines as a numbered table using the Rich library."""
    if not lines:
        return "No output."

    from rich.console import Console
    from rich.table import Table

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", justify="right", width=4)
    table.add_column("Output", style="green")

    for index, line in enumerate(lines, start=1):
        table.add_row(str(index), line)

    console = Console(width=120)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
