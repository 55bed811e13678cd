from __future__ import annotations

import os
import warnings
from typing import Any

from .warnings import PyMatViewPerformanceWarning


_WARN_ENV_VAR = "PYMATVIEW_EXPORT_WARN_ELEMENTS"
_DEFAULT_WARN_ELEMENTS = 1_000_000


def _threshold_from_env(env_var: str, default: int | None) -> int | None:
    raw = os.environ.get(env_var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else None


_EXPORT_MAX_ELEMENTS: int | None = None
_EXPORT_WARN_ELEMENTS: int | None = _threshold_from_env(_WARN_ENV_VAR, _DEFAULT_WARN_ELEMENTS)


def set_max_elements(limit: int | None) -> None:
    """Set global export ceiling in elements (None disables size check)."""
    global _EXPORT_MAX_ELEMENTS
    _EXPORT_MAX_ELEMENTS = None if limit is None else int(limit)


def get_max_elements() -> int | None:
    return _EXPORT_MAX_ELEMENTS


def set_warn_elements(limit: int | None) -> None:
    """Set the element count above which a gathered export warns (None disables)."""
    global _EXPORT_WARN_ELEMENTS
    _EXPORT_WARN_ELEMENTS = None if limit is None else int(limit)


def get_warn_elements() -> int | None:
    return _EXPORT_WARN_ELEMENTS


def element_count(obj: Any) -> int:
    return int(obj.rows()) * int(obj.cols())


def ensure_export_allowed(obj: Any, *, allow_huge: bool) -> None:
    if allow_huge or _EXPORT_MAX_ELEMENTS is None:
        return
    count = element_count(obj)
    if count > _EXPORT_MAX_ELEMENTS:
        raise RuntimeError(
            f"Export to NumPy of {count} elements exceeds the configured limit of "
            f"{_EXPORT_MAX_ELEMENTS}; pass allow_huge=True to override."
        )


def warn_if_slow_export(obj: Any, *, stacklevel: int = 3) -> bool:
    """Warn when an export has to gather element by element through a view chain."""

    limit = _EXPORT_WARN_ELEMENTS
    if limit is None:
        return False
    count = element_count(obj)
    if count <= limit:
        return False
    warnings.warn(
        f"Exporting {type(obj).__name__} with {count} elements gathers every element "
        "through the view chain; copy it into a Matrix first if you export it repeatedly.",
        PyMatViewPerformanceWarning,
        stacklevel=stacklevel,
    )
    return True
