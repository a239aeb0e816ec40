# pushswap

Works on the push_swap puzzle. You give it a list of distinct integers. It
loads them onto stack `a` and reorders them with a small set of stack
operations, using stack `b` as scratch space. It prints each operation it
uses, one per line.

## Operations

`pushswap.operations.Machine` holds the two stacks (`a` and `b`). It logs
every instruction it carries out in `Machine.operations`.

| Method | Effect                                                     |
|--------|------------------------------------------------------------|
| `sa`   | swap the values of the two top elements of `a`             |
| `sb`   | swap the values of the two top elements of `b`             |
| `ss`   | `sa` then `sb`; logs `sa`, `sb` and then `ss`              |
| `pa`   | move the top of `b` onto `a`                               |
| `pb`   | move the top of `a` onto `b`                               |
| `ra`   | rotate `a` up: the top element becomes the bottom one      |
| `rra`  | rotate `a` down: the bottom element becomes the top one    |

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments, or as one string separated by spaces:

```
push-swap 2 1
push-swap "5 4 3 2 1"
```

Output for `push-swap 2 1`:

```
sa
```

Behaviour:

* With no arguments, the command exits with status 1.
* If the input is already in order, it prints nothing and exits with status 1.
* Otherwise it exits with status 0 after printing the moves.
* An argument that is not an optional `-` followed by digits prints
  `digit error`. A repeated value prints `dup error`. In both cases the exit
  status is the length of the message plus one: 12 for `digit error` and 10
  for `dup error`.
* A value outside the signed 32-bit range prints `max/min error` and exits
  with status 1.
* Messages are printed to standard output.

## Library use

```python
from pushswap.stack import Stack
from pushswap.operations import Machine
from pushswap.sort import sort_stacks
from pushswap.validation import parse_arguments

machine = Machine(parse_arguments(["4", "2", "3", "1"]), Stack([]))
sort_stacks(machine)
print(machine.a.contents())   # [1, 2, 3, 4]
print(machine.operations)     # ['rra', 'pb', 'ra', 'pa']
```

The main entry points are these:

* `pushswap.validation.parse_arguments` builds stack `a`. It raises
  `InputError` on invalid input, and `InputError.status` holds the exit status.
* `pushswap.cli.run(args)` returns the exit status and the list of operations.
* `pushswap.cli.main` is the function behind the `push-swap` command.

`pushswap.stack` provides `Stack` and `Node`, and also `merge`, `split`,
`merge_sort` and `bubble_sort`, which work on lists of nodes.

The package also has some smaller helper modules:

* `pushswap.chars`: ASCII character classes.
* `pushswap.strings`: string helpers.
* `pushswap.memory`: byte-buffer helpers.
* `pushswap.output`: stream writers and a small `printf` supporting
  `%c %s %d %i %p %u %x %X %%`.
* `pushswap.reader`: `LineReader`, which reads a stream line by line through
  a fixed-size buffer.

## Limits

* Only stacks of two to five elements are handled. Each size gets a fixed
  decision sequence of moves (`sort_three`, `sort_four`, `sort_five`).
  These sequences do not produce an ordered stack for every starting order of
  three or more elements. For example, `2 1 3` gives `sa`, `sa`, `ra`.
* A stack of more than five elements is left untouched. The command then
  prints nothing and exits with status 0.
* There is no checker command that reads moves and verifies them.

## Tests

```
pip install .[test]
pytest
```