"""TOML serialization for prfix configuration."""

from __future__ import annotations

from typing import Any

from prfix.config.models import ANALYZER_KEY, NOTES_KEY, ReleaseConfig


def _toml_value(value: Any) -> str:
    """Format a scalar, array or inline table as a TOML value."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, dict):
        pairs = ", ".join(f"{k} = {_toml_value(v)}" for k, v in value.items())
        return f"{{ {pairs} }}" if pairs else "{}"
    if isinstance(value, (list, tuple)):
        return f"[{', '.join(_toml_value(v) for v in value)}]"
    msg = f"Cannot serialize {value!r} to TOML"
    raise TypeError(msg)


def _format_table(header: str, table: dict[str, Any]) -> str:
    """Format a table, with scalar keys first and arrays of tables last."""
    lines = [f"[{header}]"]
    nested: list[str] = []
    for key, value in table.items():
        if isinstance(value, list) and value and all(isinstance(v, dict) for v in value):
            for item in value:
                nested.append(f"\n[[{header}.{key}]]")
                nested.extend(f"{k} = {_toml_value(v)}" for k, v in item.items())
        else:
            lines.append(f"{key} = {_toml_value(value)}")
    return "\n".join(lines + nested) + "\n"


def generate_config_toml(config: ReleaseConfig) -> str:
    """Generate TOML string from config for writing to file."""
    repo_path = str(config.repository.path).replace("\\", "\\\\")
    plugin = config.plugin

    sections = [
        f"""[repository]
path = "{repo_path}"
tag_prefix = "{config.repository.tag_prefix}"
""",
    ]

    if plugin.notes_enabled:
        sections.append("[plugin]\n")
    else:
        sections.append(f"[plugin]\n{NOTES_KEY} = false\n")

    sections.append(_format_table(f"plugin.{ANALYZER_KEY}", plugin.commit_analyzer_config))
    if plugin.notes_enabled:
        sections.append(_format_table(f"plugin.{NOTES_KEY}", plugin.notes_generator_config))

    return "\n".join(sections)
