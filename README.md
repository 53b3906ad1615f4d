# kdforge

Building blocks for k-d trees stored implicitly in a flat list of points.
Node `i` has its children at `2*i + 1` and `2*i + 2` and its parent at
`(i + 1) // 2 - 1`. The split axis of a node is its depth modulo the number
of coordinates.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `kdforge.bits`

- `bsr(n)` returns the index of the highest set bit of a positive integer.
  `bsr(node + 1)` is the depth of `node`. For `n < 1` it raises `ValueError`.
- `maximum(a, b)` returns the larger of two values. On a tie it returns `b`.

### `kdforge.distance`

- `dist2(x, y, n)` returns the squared Euclidean distance over the first `n`
  coordinates. It raises `ValueError` if `n` is negative or if either point
  is shorter than `n`.
- `dimension(points)` returns the length of the first point. It raises
  `ValueError` for an empty list.

### `kdforge.output`

`Output(idx=0, dst=math.inf)` is a dataclass that holds a point index and
its squared distance.

- `a + b` and `a - b` combine two records field by field.
- `s * a` scales both fields by a number.

### `kdforge.keyval`

`KeyVal(keys, values, axis)` pairs a list of integer keys (level tags) with
a list of points of the same length.

- `less(i, j)` orders positions by key first, then by the coordinate on
  `axis`.
- `swap(i, j)` and `swap_if(do_swap, i, j)` exchange a key and its point
  together.
- `sort()` reorders both lists in place so that they ascend under `less`.
- `len(kv)` and `kv[i]` give the number of entries and the `(key, point)`
  pair at a position.

The same module has the plain sequence helpers `default_less(seq, i, j)`,
`default_swap(seq, i, j)` and `default_swap_if(do_swap, seq, i, j)`.

### `kdforge.traverse`

- `traverse(points, n, query, out, r_min, r_max, process, split_dim=round_robin_split)`
  walks the first `n` nodes depth-first without a stack. It goes first into
  the child on the query's side of each splitting plane. It goes into the far
  child only when the squared distance from the query to the plane is at most
  `r_max`. Each time the walk enters a node from its parent, it calls
  `process(points, n, query, out, r_min, r_max, node)`.
- `round_robin_split(points, n, dim, node)` returns `bsr(node + 1) % dim`.

### `kdforge.dataset`

`generate_dataset(size, v_min, v_max, kind=Dataset.BASIC, rng=None)` returns
`size` random values in `[v_min, v_max]`.

- The values are integers when both bounds are integers.
- `Dataset.BASIC` draws the values uniformly.
- `Dataset.CLUSTERED` draws around `isqrt(size)` random centres (at least
  one) with normal noise, and clamps the values to the range.
- `rng` may be any `random.Random` instance.

### `kdforge.storage`

Files hold coordinates in raw little-endian binary, with no header. The
element types are named as strings: `"int8"` to `"int64"`, `"uint8"` to
`"uint64"`, `"float32"` and `"float64"`.

- `kdtree_key(points, index_type, value_type)` and `vec_key(values, value_type)`
  build the file names.
- `save_kdtree(points, index_type, value_type, directory="dat")` creates the
  directory if needed. It writes the binary file plus a `.txt` file with one
  point per line, and returns the binary path.
- `load_kdtree(path, count, dim, value_type)` reads `count` points back.
- `save_vec(values, value_type, suffix, directory="dat")` writes a flat vector
  into an existing directory.
- `load_vec(count, value_type, suffix, directory="dat")` reads it back.
- A missing file raises `FileNotFoundError`. A file that is too short raises
  `ValueError`.

## Example

A small tree already in kd-tree order, searched with a callback that keeps
the closest point:

```python
from kdforge.distance import dist2
from kdforge.output import Output
from kdforge.traverse import traverse

# root splits on x, its children on y
points = [[50, 50], [30, 40], [70, 60], [20, 30], [40, 45]]
query = [38, 44]

def closest(points, n, query, out, r_min, r_max, node):
    d = dist2(query, points[node], len(query))
    if r_min < d < out.dst:
        out.idx, out.dst = node, d

best = Output()
traverse(points, len(points), query, best, 0, 10_000, closest)
print(best.idx, best.dst)  # 4 5
```

## What this package does not do

- It has no function that arranges an arbitrary list of points into kd-tree
  order. `KeyVal` supplies the sort step for one level, but the level-by-level
  construction around it is not included.
- It has no ready-made nearest-neighbour or k-nearest-neighbour search. The
  search policy is the `process` callback that you pass to `traverse`.
- It has no command-line program.