# lkmath

Small, reusable mathematical tools for puzzles, games and simulations. The package
is plain Python and has no third-party dependencies.

## Installation

```
pip install lkmath
```

## Modules

- `lkmath.vector`: `Vector` is an immutable fixed-size vector. It supports `+`, `-`,
  scalar `*`, `inner`, `winding` and `perp` (2D only), `magn`, `normalized`,
  `elementwise_min`/`elementwise_max`, `manhattan_distance`,
  `euclidean_distance_squared` and `modular_decompose` (Euclidean division per
  component). You build one with `Vector(1, 2)`, `Vector.from_xy`, `from_xyz`,
  `from_xyzw`, `Vector.all(value, dimension)` or `Vector.parse("1, 2")`. A vector can
  also act as grid dimensions, through `index`, `unindex`, `is_in_bounds` and
  `cardinality`. `neighbours` returns the axis-aligned unit neighbours, which are
  kept within the signed 32-bit range. `step_right`, `step_up`, `step_left`,
  `step_down` and their `_n` forms move 2D vectors.
- `lkmath.linear_index`: `LinearIndex` is the abstract base for mapping positions to
  flat indices.
- `lkmath.geometric_traits`: `Movement4Directions` is the abstract base for four-way
  stepping.
- `lkmath.arraynd`: `ArrayNd` is a dense n-dimensional array in which the first axis
  varies fastest. You index it by flat integers, `Vector`s or tuples. It offers
  `get`/`set`, `find_item`, `find_last_item`, `find_all`, `find_all_items`,
  `replace_all`, `map`, `resized`, `padded`, `draw_line`, `draw_block`,
  `iter_values_in_line`, `shift_n_rows_down` and the `width`/`height`/`depth`
  properties. `char_array_from_str` and `char_array_from_lines` parse a character
  grid and skip empty lines. If the non-empty lines differ in width, they raise
  `CharArrayParseError`.
- `lkmath.line_iterator` and `lkmath.line`: `LineIterator` walks the integer points
  from a start to an end. The end point is included only when `inclusive=True`.
  `Line` has `delta`, `offset`, `scale` and `iter`.
- `lkmath.aabb`: `Aabb` is an axis-aligned bounding box with `cover`, `covering`
  and `dim`.
- `lkmath.interval`: `Interval` is a half-open interval `[start, end)` with
  `intersection`, `union`, `overlaps`, `touches`, `dominates` and
  `dominates_or_is_dominated_by`. `UniversalBounds` and the constants such as
  `I32_BOUNDS`, `USIZE_BOUNDS`, `ORD_F32_BOUNDS` and `ORD_F64_BOUNDS` give the
  extreme values of numeric types.
- `lkmath.interval_set`: `IntervalSet` is a sorted set of disjoint intervals. It has
  `union`, `intersect`, `retain_intersecting`, `measure`, `bounds`,
  `negation(universe)`, `negation_within_bounds`, `containing_interval` and
  `contains`.
- `lkmath.ord_float`: `OrdF32` and `OrdF64` are hashable floats that are ordered by
  their bit patterns. `OrdF32` rounds values to single precision.
- `lkmath.modular`: `modular_decompose`, `mod_n`, `add_n`, `sub_n` and `mul_n` work on
  integers and on vectors. `Modular(value, modulus)` is a reduced residue with
  `+`, `-` and `*`.
- `lkmath.numeric`: `gcd`, `lcm` and `triangle_numbers`.
- `lkmath.bijection`: `Bijection` is a permutation of `0..n` that keeps its inverse.
  It has `swap`, `swap_adj`, `swap_with_right`, `swap_with_left` and `valid`.
- `lkmath.symmetric_group`: `identity(size)` gives the identity permutation.
  `group_element(index, size)` gives the `index`-th permutation in lexicographic
  order.
- `lkmath.permutations`: `Perm` is a permutation with `chain` (also `*`) and
  `Perm.from_id(index, size)`.
- `lkmath.groups`: `Group` is the abstract base for small finite groups. The package
  provides `TrivialGroup`, `BoolGroup`, `ThreeGroup`, `KleinFourGroup` and
  `Int8Group` (signed bytes under wrapping addition).
- `lkmath.geometric_algebra`: `Multivector3` is a multivector of 3D geometric algebra
  with `+` and the geometric product `*`.
- `lkmath.expr`: `parse_expr` builds an expression tree from the node types `Add`,
  `Sub`, `Mul`, `Div`, `Eq`, `Ident`, `Const` and `Free`. `Expr.eval` evaluates a
  tree, and raises `EvalError` when it meets a `Free` value. `Expr.solve` finds the
  values that free identifiers must take.
- `lkmath.sketch`: `StackBag` hands items back last in, first out. `QueueBag` hands
  them back first in, first out.
- `lkmath.explore`: `Exploration` searches from a start point through each point's
  `neighbours(context)`. It has `explore`, `explore_avoid_identical`,
  `explore_avoid_worse` (for points implementing `PointKeyValue`) and
  `explore_advanced`. The goal callback returns an `ExploreSignal`. The bag class
  sets the search order: `QueueBag` gives breadth first, `StackBag` depth first.
- `lkmath.transformations`: `Translation` has `transform` and `inverse_transform`.
- `lkmath.cli`: `ProgressBar` draws a 20-character text bar, and `Duration` prints
  seconds in the largest fitting unit. `Progress.progress(current)` prints progress
  and an ETA at most once every ten seconds.

## Example

```python
from lkmath.vector import Vector
from lkmath.arraynd import char_array_from_str
from lkmath.interval import Interval, I32_BOUNDS
from lkmath.interval_set import IntervalSet

grid = char_array_from_str("ab\ncd\n")
print(grid.get(Vector.from_xy(1, 1)))  # 'd'

counts, residues = Vector.from_xy(1, -1).modular_decompose(Vector.from_xy(2, 2))
# counts == Vector(0, -1), residues == Vector(1, 1)

spans = IntervalSet()
spans.union(Interval(0, 2))
spans.union(Interval(1, 3))
print(spans.measure())            # 3
print(spans.negation(I32_BOUNDS).intervals)
```

## What it does not do

- The package is a library only. It installs no command-line program.
- The expression parser knows no parentheses or operator precedence. It splits at
  the first `=`, then `+`, `-`, `*` and `/`, in that order.
- `Perm` cannot be turned back into its lexicographic index.
- `ArrayNd` has no iterator over blocks. `draw_block` can only paint them.

## Running the tests

```
pip install -e .[test]
pytest
```