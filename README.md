# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of instructions. The package provides two commands:

- `push-swap` prints, one per line, a sequence of instructions that sorts the
  given integers in stack `a`, smallest on top.
- `checker` reads instructions from standard input, applies them to the given
  integers and prints `OK` if stack `a` ends up sorted with stack `b` empty,
  `KO` otherwise.

## Installation

```
pip install .
```

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, `b`, or both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra` / `rrb` / `rrr` | reverse rotate `a`, `b`, or both: the bottom element goes to the top |

## Usage

Numbers may be given as separate arguments, in one quoted argument, or both.
The first number given is the top of stack `a`:

```
push-swap 3 2 1
push-swap "4 67 3" 87 23
```

Pipe the output into `checker` with the same numbers to verify it:

```
push-swap 4 67 3 87 23 | checker 4 67 3 87 23
```

Both commands write `Error` to standard error and exit with status 1 when an
argument is not an integer, is outside the 32-bit signed range, or is
repeated. With one number or none, nothing is printed and the status is 0.

`checker` expects each instruction on its own line, ending with a newline. An
empty line ends the input early. An unknown instruction, or a last line
without its newline, makes `checker` write `Error` to standard error; in that
case the exit status is still 0 and neither `OK` nor `KO` is printed.

## Library use

```python
from pushswap.stacks import Operation, Stacks
from pushswap.sorter import sort_stacks
from pushswap.checker import check

ops = sort_stacks([3, 2, 1])           # [Operation.RA, Operation.SA]
stacks = Stacks([3, 2, 1])
for op in ops:
    stacks.apply(op)
print(list(stacks.a))                  # [1, 2, 3]
print(stacks.is_solved())              # True

print(check([2, 1], ["sa\n"]))         # True
```

Modules:

- `pushswap.stacks`: `Operation` (the eleven instructions), `Stack` (with
  `swap`, `rotate`, `reverse_rotate`, `push_to` and `is_sorted`) and `Stacks`,
  which holds stacks `a` and `b`, applies operations given as `Operation`
  members or their names, and records them in `history`. An unknown name
  raises `ValueError`.
- `pushswap.parsing`: `split_arguments`, `parse_int` and `parse_arguments`,
  which turn command-line arguments into a list of integers and raise
  `ParseError` on bad input.
- `pushswap.quickselect`: `median_of_three` and `quickselect_median`, the
  lower median of distinct values.
- `pushswap.cost`: `find_cheapest`, which picks the value of one stack that
  is cheapest to insert into the other and returns it as a `MoveCost`.
- `pushswap.sorter`: `sort_small` for up to three values, `sort_stacks` for
  any list of distinct values, and `main` behind `push-swap`.
- `pushswap.checker`: `check`, which raises `CheckerError` on an unknown
  instruction, and `main` behind `checker`.

## Running the tests

```
pip install .[test]
pytest
```