"""Format adapters subpackage for jsonc-splice.

The base install provides only ``JsonAdapter``, which hands patched JSON
text back unchanged.  The YAML adapter is available via an extra:

    pip install jsonc-splice[yaml]   # PyYAML-backed YamlAdapter

All adapters satisfy the ``FormatAdapter`` Protocol structurally.
"""

from __future__ import annotations

from jsonc_splice.adapters.passthrough import JSON_FORMATS, JsonAdapter
from jsonc_splice.adapters.pyyaml import YAML_FORMATS, YamlAdapter
from jsonc_splice.errors import SerializationError
from jsonc_splice.protocols import FormatAdapter

__all__ = ["JsonAdapter", "YamlAdapter", "get_adapter"]


def get_adapter(fmt: str) -> FormatAdapter:
    """Return an adapter able to render ``fmt``.

    Raises:
        SerializationError: If no adapter handles ``fmt``, or if the one that
            does needs an optional dependency that is not installed.
    """
    name = fmt.lower()
    if name in JSON_FORMATS:
        return JsonAdapter()
    if name in YAML_FORMATS:
        try:
            return YamlAdapter()
        except ImportError as exc:
            raise SerializationError(str(exc), fmt=fmt) from exc
    raise SerializationError(f"no format adapter for {fmt!r}", fmt=fmt)
