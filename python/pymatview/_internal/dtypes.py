from __future__ import annotations

import warnings
from typing import Any, Callable, Iterable

from .warnings import PyMatViewDTypeWarning


_INT_TOKENS = ("int8", "int16", "int32", "int64", "uint8", "uint16", "uint32", "uint64")
_FLOAT_TOKENS = ("float16", "float32", "float64")
_COMPLEX_TOKENS = ("complex_float32", "complex_float64")

DEFAULT_DTYPE = "float64"


def normalize_dtype(dtype: Any, *, np_module: Any | None) -> str | None:
    """Normalize user-provided dtype tokens into internal strings.

    Returns one of:
        {"int8", "int16", "int32", "int64", "uint8", "uint16", "uint32", "uint64",
         "float16", "float32", "float64", "bool",
         "complex_float32", "complex_float64", "str", "object"}
    or None.

    Accepted inputs include:
    - Case-insensitive strings: "int16", "INT16", "f32", "bool_", "string", ...
    - Python builtins: int, float, bool, complex, str, object
    - NumPy dtypes/scalars: np.int16, np.dtype("int16"), np.float32, ...
    """

    if dtype is None:
        return None

    if dtype is int:
        return "int64"
    if dtype is float:
        return "float64"
    if dtype is bool:
        return "bool"
    if dtype is complex:
        return "complex_float64"
    if dtype is str:
        return "str"
    if dtype is object:
        return "object"

    if isinstance(dtype, str):
        s = dtype.strip().lower()
        if s in ("int8", "i8"):
            return "int8"
        if s in ("int16", "i16"):
            return "int16"
        if s in ("int32", "i32"):
            return "int32"
        if s in ("int64", "i64", "int"):
            return "int64"
        if s in ("uint8", "u8"):
            return "uint8"
        if s in ("uint16", "u16"):
            return "uint16"
        if s in ("uint32", "u32", "uint"):
            return "uint32"
        if s in ("uint64", "u64"):
            return "uint64"
        if s in ("float16", "f16", "half"):
            return "float16"
        if s in ("float32", "f32", "single"):
            return "float32"
        if s in ("float", "float64", "f64", "double"):
            return "float64"
        if s in ("bool", "bool_", "bit"):
            return "bool"
        if s in ("complex_float32", "complex64"):
            return "complex_float32"
        if s in ("complex_float64", "complex128", "complex"):
            return "complex_float64"
        if s in ("str", "string", "unicode"):
            return "str"
        if s in ("object", "any"):
            return "object"
        return None

    if np_module is None:
        return None

    try:
        np_dtype = np_module.dtype(dtype)
    except Exception:
        return None

    kind = getattr(np_dtype, "kind", None)
    if kind in ("i", "u"):
        name = np_dtype.name
        return name if name in _INT_TOKENS else "int64"
    if kind == "f":
        name = np_dtype.name
        return name if name in _FLOAT_TOKENS else "float64"
    if kind == "c":
        if np_dtype == np_module.dtype("complex64"):
            return "complex_float32"
        return "complex_float64"
    if kind == "b":
        return "bool"
    if kind == "U":
        return "str"
    if kind == "O":
        return "object"
    return None


def default_value(dtype: str | None) -> Any:
    """The default-initialised ("zero") element for a dtype token."""

    if dtype is None:
        dtype = DEFAULT_DTYPE
    if dtype in _INT_TOKENS:
        return 0
    if dtype in _FLOAT_TOKENS:
        return 0.0
    if dtype == "bool":
        return False
    if dtype in _COMPLEX_TOKENS:
        return 0j
    if dtype == "str":
        return ""
    return None


def _unwrap_scalar(value: Any) -> Any:
    # NumPy scalars expose item(); plain Python values pass through.
    item = getattr(value, "item", None)
    if callable(item) and not isinstance(value, (int, float, complex, bool, str)):
        try:
            return item()
        except (TypeError, ValueError):
            return value
    return value


def _int_caster(dtype: str) -> Callable[[Any], Any]:
    import numpy as np

    info = np.iinfo(dtype)
    lo, hi = int(info.min), int(info.max)

    def cast(v: Any) -> int:
        raw = _unwrap_scalar(v)
        value = int(raw)
        if value < lo or value > hi:
            raise OverflowError(f"{value} is out of range for {dtype} [{lo}, {hi}]")
        if isinstance(raw, float) and value != raw:
            warnings.warn(
                f"{raw!r} truncated to {value} when stored as {dtype}",
                PyMatViewDTypeWarning,
                stacklevel=4,
            )
        return value

    return cast


def _cast_bool(v: Any) -> bool:
    raw = _unwrap_scalar(v)
    # bool("False") is True; text is never a truth value here.
    if isinstance(raw, (str, bytes)):
        raise TypeError(f"cannot store {type(raw).__name__} {raw!r} as bool")
    return bool(raw)


def scalar_caster(dtype: str | None) -> Callable[[Any], Any]:
    """Return a callable that coerces one written element to ``dtype``.

    Integer casts are range-checked against the fixed-width type and raise
    ``OverflowError`` instead of storing a value NumPy could not hold.
    """

    if dtype is None:
        dtype = DEFAULT_DTYPE
    if dtype in _INT_TOKENS:
        return _int_caster(dtype)
    if dtype in _FLOAT_TOKENS:
        return lambda v: float(_unwrap_scalar(v))
    if dtype == "bool":
        return _cast_bool
    if dtype in _COMPLEX_TOKENS:
        return lambda v: complex(_unwrap_scalar(v))
    if dtype == "str":
        return lambda v: str(_unwrap_scalar(v))
    return lambda v: v


def infer_dtype(values: Iterable[Any]) -> str:
    """Pick the narrowest token that holds every value (bool < int < float < complex)."""

    seen_any = False
    all_bool = all_int = all_real = all_num = all_str = True
    for raw in values:
        seen_any = True
        v = _unwrap_scalar(raw)
        is_bool = isinstance(v, bool)
        all_bool = all_bool and is_bool
        all_int = all_int and isinstance(v, int)
        all_real = all_real and isinstance(v, (int, float))
        all_num = all_num and isinstance(v, (int, float, complex))
        all_str = all_str and isinstance(v, str)

    if not seen_any:
        return DEFAULT_DTYPE
    if all_bool:
        return "bool"
    if all_int:
        return "int64"
    if all_real:
        return "float64"
    if all_num:
        return "complex_float64"
    if all_str:
        return "str"
    return "object"


def numpy_dtype(dtype: str | None, np_module: Any) -> Any:
    """Map a dtype token onto the NumPy dtype used for exports."""

    if dtype is None:
        dtype = DEFAULT_DTYPE
    mapping = {
        "complex_float32": "complex64",
        "complex_float64": "complex128",
        "str": "object",
    }
    return np_module.dtype(mapping.get(dtype, dtype))
