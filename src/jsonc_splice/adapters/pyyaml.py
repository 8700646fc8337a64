"""YamlAdapter: renders patched JSONC text as YAML via PyYAML.

Wraps ``yaml.safe_dump`` with a lazy import so that the base install (no
PyYAML) never triggers an ``ImportError`` at module level.  PyYAML is only
required when ``YamlAdapter`` is *instantiated*.

Install the optional dependency with::

    pip install jsonc-splice[yaml]

Example::

    from jsonc_splice.adapters.pyyaml import YamlAdapter

    YamlAdapter().to_formatted_text('{"name": "x", "tags": [1, 2]}', "yaml")
    # 'name: x\\ntags:\\n- 1\\n- 2\\n'
"""

from __future__ import annotations

from typing import Any

from jsonc_splice.adapters.passthrough import JSON_FORMATS
from jsonc_splice.errors import DocumentSyntaxError, SerializationError
from jsonc_splice.tree.locate import node_value
from jsonc_splice.tree.parser import parse_tree

YAML_FORMATS = frozenset({"yaml", "yml"})


class YamlAdapter:
    """YAML format adapter backed by PyYAML.

    JSON formats pass through unchanged; YAML formats are re-serialised from
    the parsed value with key order kept.  Comments cannot survive the
    conversion.

    Args:
        indent: Indentation width of the YAML output.  Defaults to 2.

    Raises:
        ImportError: If PyYAML is not installed.  The message includes the
            install command.
    """

    formats = JSON_FORMATS | YAML_FORMATS

    def __init__(self, indent: int = 2) -> None:
        try:
            import yaml
        except ImportError as exc:
            raise ImportError(
                "PyYAML is required for YamlAdapter. "
                "Install with: pip install jsonc-splice[yaml]"
            ) from exc

        # Any annotation: yaml is a lazy import.
        self._yaml: Any = yaml
        self._indent = indent

    def __repr__(self) -> str:
        return f"YamlAdapter(indent={self._indent})"

    def to_formatted_text(self, json_text: str, fmt: str) -> str:
        """Render ``json_text`` in ``fmt``.

        Raises:
            SerializationError: If ``fmt`` is not JSON or YAML, if the text
                does not parse, or if PyYAML cannot dump the value.
        """
        name = fmt.lower()
        if name in JSON_FORMATS:
            return json_text
        if name not in YAML_FORMATS:
            raise SerializationError(f"YamlAdapter cannot render format {fmt!r}", fmt=fmt)
        try:
            value = node_value(parse_tree(json_text))
            return str(
                self._yaml.safe_dump(
                    value,
                    sort_keys=False,
                    allow_unicode=True,
                    indent=self._indent,
                    default_flow_style=False,
                )
            )
        except (DocumentSyntaxError, self._yaml.YAMLError) as exc:
            raise SerializationError(f"cannot render document as {fmt}: {exc}", fmt=fmt) from exc
