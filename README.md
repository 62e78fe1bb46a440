# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a fixed set of operations. It prints to standard output, one per line,
the operations that sort stack `a` in ascending order (smallest on top).

## Operations

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` | swap the top two elements of `a` / `b` |
| `ss` | `sa` and `sb` together |
| `pa` / `pb` | move the top of `b` onto `a` / the top of `a` onto `b` |
| `ra` / `rb` | rotate `a` / `b` up: the top element goes to the bottom |
| `rr` | `ra` and `rb` together |
| `rra` / `rrb` | rotate `a` / `b` down: the bottom element goes to the top |
| `rrr` | `rra` and `rrb` together |

An operation that cannot act (for example `sa` with fewer than two elements
on `a`, or `ss` unless both stacks have two) changes nothing and is not
printed.

## Installation

```
pip install .
```

## Usage

Numbers can be given as separate arguments or as a single quoted string,
which is split on spaces:

```
pushswap 4 67 3 12 9
pushswap "4 67 3 12 9"
```

Options starting with `--` come before the numbers:

- `--simple` — bubble sort on `a` with `sa`, `ra` and `rra`
- `--medium` — chunk sort: ranges of ranks are moved to `b` (15 ranks per
  chunk up to 100 numbers, 35 above), then the largest is brought back each time
- `--complex` — binary radix sort on the ranks of the numbers
- `--adaptive` — the default: fixed routines for 2 to 5 numbers; otherwise
  the simple sort when the disorder is below 0.2, the medium sort below 0.5,
  and the complex sort above that
- `--bench` — after sorting, print the disorder, the strategy and the
  per-operation counts to standard error

```
pushswap --bench --complex 5 3 8 1 9 2
```

The benchmark report looks like this:

```
[bench] disorder: 60.0%
[bench] strategy: complex / O(n log n) 
[bench] total_ops: ...
[bench] sa: 0 sb: 0 ss: 0 pa: ... pb: ...
[bench] ra: ... rb: 0 rr: 0 rra: 0 rrb: 0 rrr: 0
```

Invalid input — a word that is not an integer, a value outside the 32-bit
signed range, a duplicate number or an unknown `--` option — prints `Error`
to standard error and exits with status 1. With no numbers, or with input
that is already sorted, no operations are printed.

## Library use

```python
from pushswap.machine import Machine
from pushswap.options import Options
from pushswap.cli import run

ops = []
run([3, 1, 2], Options(), ops.append)
print(ops)  # ['ra']

machine = Machine([2, 1], emit=print)
machine.sa()  # prints "sa"
print(machine.a.values())  # [1, 2]
print(machine.operations)  # ['sa']
```

Other modules:

- `pushswap.arguments` — `parse_int` and `parse_arguments`, raising
  `ArgumentError` on bad input
- `pushswap.options` — `parse_options`, returning an `Options` and the
  remaining words, raising `OptionError` on an unknown flag
- `pushswap.simple`, `pushswap.medium`, `pushswap.radix` — the sorting
  strategies, each acting on a `Machine`
- `pushswap.benchmark` — `OpCounter` and `format_benchmark`
- `pushswap.disorder` — `compute_disorder` gives the fraction of
  out-of-order pairs in a sequence, from 0.0 (sorted) to 1.0 (reversed)