# pushswap

Sorts a list of distinct integers with two stacks, `a` and `b`, using only
this instruction set. It prints the instructions it used, one per line:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both upward (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both downward (the bottom goes to the top) |

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

prints

```
sa
rra
```

You can pass the numbers as separate arguments, in one quoted string, or
both (`push-swap "4 67 3" 87 23`). The program prints nothing when the input
is already sorted or when it gets no arguments. The same entry point can be
run as `python -m pushswap.cli`.

The program writes `Error` to standard error and exits with status 1 when:

- an argument is empty or holds only spaces,
- a word holds any character other than a decimal digit (so signs such as
  `-5` or `+5` are rejected),
- a number appears more than once.

Numbers are read as 32-bit signed integers. Values outside that range wrap
around.

## Library use

```python
from pushswap.cli import solve

moves = solve(["2", "1", "3"])
print(moves)  # ['sa']
```

- `pushswap.cli.solve(args)` returns the list of moves and raises
  `ParseError` on invalid input. `pushswap.cli.main(argv=None)` is the
  command-line entry point and returns the exit status.
- `pushswap.parsing` has the parsing and validation steps: `is_blank`,
  `join_args`, `parse_int`, `parse_arguments`, `check_duplicates`,
  `is_sorted` and `index_values`. It raises `ParseError` (a subclass of
  `ValueError`) on bad input.
- `pushswap.stacks.PushSwap(values, indexes=None)` holds the two stacks
  (`a` and `b`, deques of `Node` with `val` and `index`) and the eleven
  instructions as methods. Each move that takes effect is recorded in
  `moves`. It also provides `find_min_position`, `search_max`, `values_a`
  and `values_b`.
- `pushswap.sorting.sort_stack(stacks)` picks a strategy from the size of
  stack `a`: `sort_two`, `sort_three`, `sort_five` (four or five elements),
  or, for larger inputs, `send_to_b` followed by `send_to_a`, which push
  elements to `b` in chunks by rank and then bring them back in order.

## Limitations

No checker is included. The package produces a sequence of instructions
but cannot read one and verify whether it sorts a given input.

## Tests

```
pip install ".[test]"
pytest
```