"""Edit: a request to set the value at one path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jsonc_splice.errors import InvalidPathError
from jsonc_splice.paths import Path, Segment, validate_path

__all__ = ["Edit", "EditLike", "as_edit"]


@dataclass(frozen=True, slots=True)
class Edit:
    """Set ``path`` to ``value``.

    ``path`` is validated and frozen to a tuple on construction.
    """

    path: tuple[Segment, ...]
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", validate_path(self.path))


EditLike = Edit | tuple[Path, Any]


def as_edit(item: EditLike) -> Edit:
    """Accept either an ``Edit`` or a plain ``(path, value)`` pair.

    Raises:
        InvalidPathError: If ``item`` is neither an ``Edit`` nor a pair.
    """
    if isinstance(item, Edit):
        return item
    try:
        path, value = item
    except (TypeError, ValueError) as exc:
        msg = f"edit must be an Edit or a (path, value) pair, got {item!r}"
        raise InvalidPathError(msg) from exc
    return Edit(path, value)  # type: ignore[arg-type]
