# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small fixed set of operations. The program prints the operations it
performs, one per line, so that applying them in order leaves stack `a`
sorted in ascending order, smallest value on top, with `b` empty.

## Installation

```
pip install .
```

## Usage

Give the numbers as separate arguments:

```
push-swap 3 2 1
```

or as one argument with the numbers separated by spaces:

```
push-swap "3 2 1"
```

The same command can be started with `python -m pushswap.cli`.

The output is the list of operations, for example:

```
ra
sa
```

An input that is already sorted, no arguments, or a single empty
argument produces no output.

Three, four and five values are sorted by dedicated routines. Larger
inputs are moved onto `b` in bands of increasing rank (three bands below
150 values, nine from 150 on) and then brought back to `a`, largest
first.

### Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ra`  | rotate `a`: the top element goes to the bottom      |
| `rb`  | rotate `b`                                          |
| `rr`  | `ra` and `rb` together                              |
| `rra` | reverse-rotate `a`: the bottom element goes to top  |
| `rrb` | reverse-rotate `b`                                  |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |

### Errors

`Error` is written to standard error, and no operations are printed,
when:

- a number is anything other than an optional `-` followed by digits
  (a `+` sign or surrounding whitespace is rejected),
- a value falls outside the 32-bit signed range,
- one of several arguments is empty, or a single argument holds only
  spaces,
- a value appears twice.

The exit status is 0 in every case.

## Library use

```python
import io

from pushswap.stacks import Stacks
from pushswap.algorithm import assign_ranks, sort_stacks

out = io.StringIO()
stacks = Stacks([3, 1, 2], out)
assign_ranks(stacks)
moves = sort_stacks(stacks)
print(out.getvalue())     # "ra\n"
print(stacks.describe())  # both stacks, top first, with rank and decile
```

- `pushswap.stacks.Stacks` holds stacks `a` and `b` (deques of
  `Element`, top at index 0). Each operation method (`sa`, `sb`, `ra`,
  `rb`, `rr`, `rra`, `rrb`, `pa`, `pb`) writes its name to the given
  stream, or to standard output when none is given, and returns the
  number of moves it counts for: 0 when it cannot be applied.
- `pushswap.stacks.is_ascending` tells whether elements are in strictly
  increasing order.
- `pushswap.algorithm` provides `assign_ranks`, which must be called
  before `sort_stacks`, and the building blocks `sort_three`,
  `sort_four`, `sort_five`, `push_chunks` and `push_back_all`.
- `pushswap.parsing.parse_arguments` checks and converts command-line
  arguments and raises `pushswap.parsing.InputError` on bad input.

## Limitations

The package only produces a list of operations. It has no command that
reads a list of operations and checks whether it sorts a given input.

## Tests

```
pip install ".[test]"
pytest
```