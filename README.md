# algokit

Classic algorithms and data structures in plain Python. The package needs
nothing outside the standard library.

- `algokit.bigint`: `BigInteger` is a signed integer stored in base 10⁹ limbs.
  It can be built from an `int`, a decimal string (an optional `+` or `-` sign
  is allowed) or another `BigInteger`. It supports `+`, `-`, `*`, unary `-`
  and `+`, comparisons and hashing, and it mixes with plain `int`s. When the
  two operands of a multiplication together need more than about 30,000
  digits, the multiplication raises `BigIntegerOverflow`.
- `algokit.rational`: `Rational` is an immutable fraction. It is always kept in
  lowest terms with a positive denominator. It supports `+`, `-`, `*`, `/` and
  comparisons. `Rational.parse("n/d")` reads a fraction from text. A zero
  denominator, or division by zero, raises `RationalDivisionByZero`, which is
  a subclass of `ZeroDivisionError`.
- `algokit.ranges`: `Range(end)`, `Range(begin, end)` or
  `Range(begin, end, step)` gives an integer range. It supports `len()`,
  iteration and `reversed()`. A zero step, or a step that points away from
  `end`, gives an empty range.
- `algokit.hashset`: `UnorderedSet` is a separate-chaining hash set whose
  buckets you can inspect. It provides `insert`, `erase`, `clear`, `in`,
  `len()`, `load_factor()`, `bucket_count()`, `bucket_size(i)`, `bucket(key)`,
  `rehash(n)`, `reserve(n)` and `UnorderedSet.with_buckets(n)`. The table
  doubles its bucket count when it would hold more keys than it has buckets.
  If you insert the same key twice, it is stored twice. `erase` removes one
  copy of the key and does nothing if the key is absent.
- `algokit.segment_tree`: `SegmentTree(values)` supports `add(left, right,
  value)` and `max(left, right)`. Positions start at 1 and both ends of a range
  are included. A range outside `1..len(tree)` raises `IndexError`.
  `run_queries(text)` runs a list of commands given as text (see below).
- `algokit.geometry`: integer plane geometry.
  - `Vector` supports `+`, `-`, `* int`, and `// int`, which rounds toward zero.
  - `Point` is also a shape.
  - The shapes `Line` (also `Line.through(p, q)`), `Segment`, `Ray` (also
    `Ray.through(begin, point)`), `Circle` and `Polygon` all implement the
    `Shape` interface: `move`, `contains_point`, `crosses_segment` and `clone`.
  - The helpers `cross_product` and `dot_product` work on vectors.
- `algokit.hull`: `graham_scan(points)` returns the convex hull in clockwise
  order. `drop_collinear(hull)`, `doubled_area(hull)`, `format_area(doubled)`
  and `solve(text)` help build the hull report (see below).
- `algokit.tokens`: `tokenize(text)` splits text on spaces into `Symbol`,
  `NumberToken` and `UnknownToken` values. A number must fit in a signed 32-bit
  integer, or `tokenize` raises `OverflowError`.
- `algokit.expressions`: expression trees. It provides `Constant`, `Sum`,
  `Subtract`, `Multiply`, `Divide`, `Residual`, `Minimum`, `Maximum`,
  `AbsoluteValue` and `Square`, each with a `calculate()` method. `Divide`
  rounds toward zero. The result of `Residual` takes the sign of the dividend.
  Dividing by zero raises `ZeroDivisionError`.
- `algokit.infix`: `calculate_expression(text)` and `parse_expression(tokens)`
  handle `+ - * / %` and brackets.
- `algokit.polish`: `calculate_polish_notation(text)` and `build_tree(tokens)`
  handle prefix notation. Prefix notation also supports `min`, `max`, `abs`
  and `sqr`.

## Installation

```
pip install .
```

## Library examples

```python
from algokit.bigint import BigInteger
from algokit.rational import Rational
from algokit.ranges import Range
from algokit.hashset import UnorderedSet
from algokit.infix import calculate_expression
from algokit.polish import calculate_polish_notation

print(BigInteger("123456789012345678901234567890") * BigInteger(2))
# 246913578024691357802469135780

print(Rational(1, 2) + Rational(1, 3))   # 5/6
print(list(Range(0, 10, 3)))             # [0, 3, 6, 9]
print(list(reversed(Range(0, 10, 3))))   # [9, 6, 3, 0]

s = UnorderedSet([1, 2, 3])
s.insert(4)
print(4 in s, len(s))                    # True 4

print(calculate_expression("2 + 3 * ( 4 - 1 )"))   # 11
print(calculate_polish_notation("+ 1 * 2 3"))      # 7
```

Tokens in an expression must be separated by spaces. A word that the
tokenizer does not recognise raises `UnknownSymbolError`. A malformed
expression raises `WrongExpressionError`. Both exception classes are defined
in `algokit.infix`.

## Command-line tools

### Convex hull

```
algokit-hull < points.txt
```

The input is the number of points followed by one `x y` pair per point. The
output has three parts:

1. the number of hull vertices;
2. one `x y` line per vertex, with vertices that lie on a straight edge
   removed;
3. the area of the hull, written with one decimal place.

### Segment tree

```
algokit-segment-tree < queries.txt
```

The input is `n`, then `n` values, then the number of commands, then the
commands themselves:

- `m l r` answers with the maximum over positions `l..r`, counting from 1.
- `a l r v` adds `v` to every position in `l..r`.

The answers to the `m` commands are printed on one line. Each answer is
followed by a space.

## What it does not do

- `BigInteger` has no division or remainder.
- The expression evaluators are library functions only. There is no
  interactive calculator command.

## Running the tests

```
pip install .[test]
pytest
```