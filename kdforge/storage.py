"""Binary and text persistence of point sets and flat value vectors.

Files are named after the shape and element types of what they hold, so a
tree built once for a given size, dimension and type pair can be found and
reloaded later. Binary files hold the coordinates back to back in
little-endian order with no header; a tree is also written as a text file
with one point per line.
"""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

from .distance import dimension

Number = Union[int, float]
PathLike = Union[str, Path]

DEFAULT_DIRECTORY = "dat"

# Element type name -> (struct code, short tag used in file names).
_TYPES: Dict[str, Tuple[str, str]] = {
    "int8": ("b", "a"),
    "uint8": ("B", "h"),
    "int16": ("h", "s"),
    "uint16": ("H", "t"),
    "int32": ("i", "i"),
    "uint32": ("I", "j"),
    "int64": ("q", "l"),
    "uint64": ("Q", "m"),
    "float32": ("f", "f"),
    "float64": ("d", "d"),
}


def _lookup(type_name: str) -> Tuple[str, str]:
    try:
        return _TYPES[type_name]
    except KeyError:
        known = ", ".join(sorted(_TYPES))
        raise ValueError(
            f"unknown element type {type_name!r}; expected one of {known}"
        ) from None


def _code(type_name: str) -> str:
    return _lookup(type_name)[0]


def _tag(type_name: str) -> str:
    return _lookup(type_name)[1]


def _pack(values: Sequence[Number], type_name: str) -> bytes:
    code = _code(type_name)
    try:
        return struct.pack(f"<{len(values)}{code}", *values)
    except struct.error as exc:
        raise ValueError(f"values do not fit element type {type_name}: {exc}") from exc


def _unpack(data: bytes, count: int, type_name: str, source: Path) -> List[Number]:
    code = _code(type_name)
    size = struct.calcsize(f"<{code}") * count
    if len(data) < size:
        raise ValueError(
            f"failed to read data from {source}: "
            f"need {size} bytes, file holds {len(data)}"
        )
    return list(struct.unpack_from(f"<{count}{code}", data))


def _format_value(value: Number) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _check_points(points: Sequence[Sequence[Number]]) -> int:
    dim = dimension(points)
    for number, point in enumerate(points):
        if len(point) != dim:
            raise ValueError(
                f"point {number} has {len(point)} coordinates, expected {dim}"
            )
    return dim


def kdtree_key(
    points: Sequence[Sequence[Number]], index_type: str, value_type: str
) -> str:
    """Return the file name under which ``points`` are stored as a tree."""
    dim = dimension(points)
    return (
        f"kdtree__n{len(points)}_d{dim}"
        f"_I{_tag(index_type)}_T{_tag(value_type)}.dat"
    )


def vec_key(values: Sequence[Number], value_type: str) -> str:
    """Return the base file name under which a flat vector is stored."""
    return f"kdtree__n{len(values)}_T{_tag(value_type)}.dat"


def save_kdtree(
    points: Sequence[Sequence[Number]],
    index_type: str,
    value_type: str,
    directory: PathLike = DEFAULT_DIRECTORY,
) -> Path:
    """Write ``points`` in binary and text form and return the binary path.

    The directory is created if needed. The text file sits next to the
    binary one with ``.txt`` appended to its name.
    """
    _check_points(points)
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / kdtree_key(points, index_type, value_type)

    payload = b"".join(_pack(list(point), value_type) for point in points)
    path.write_bytes(payload)

    text_path = path.with_name(path.name + ".txt")
    with text_path.open("w", encoding="ascii") as handle:
        for point in points:
            handle.write("".join(f"{_format_value(v)} " for v in point))
            handle.write("\n")

    return path


def load_kdtree(
    path: PathLike, count: int, dim: int, value_type: str
) -> List[List[Number]]:
    """Read ``count`` points of ``dim`` coordinates from a binary tree file."""
    if count < 0 or dim < 0:
        raise ValueError(f"count and dim must be non-negative, got {count}, {dim}")
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"file {source} does not exist")
    flat = _unpack(source.read_bytes(), count * dim, value_type, source)
    return [flat[start:start + dim] for start in range(0, count * dim, dim)] if dim else [
        [] for _ in range(count)
    ]


def _vec_path(count: int, value_type: str, suffix: str, directory: PathLike) -> Path:
    name = f"kdtree__n{count}_T{_tag(value_type)}.dat-{suffix}"
    return Path(directory) / name


def save_vec(
    values: Sequence[Number],
    value_type: str,
    suffix: str,
    directory: PathLike = DEFAULT_DIRECTORY,
) -> Path:
    """Write a flat vector in binary form and return the file path.

    The directory must already exist.
    """
    path = Path(directory) / f"{vec_key(values, value_type)}-{suffix}"
    path.write_bytes(_pack(list(values), value_type))
    return path


def load_vec(
    count: int,
    value_type: str,
    suffix: str,
    directory: PathLike = DEFAULT_DIRECTORY,
) -> List[Number]:
    """Read a flat vector of ``count`` values written by :func:`save_vec`."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    path = _vec_path(count, value_type, suffix, directory)
    if not path.exists():
        raise FileNotFoundError(f"file {path} does not exist")
    return _unpack(path.read_bytes(), count, value_type, path)