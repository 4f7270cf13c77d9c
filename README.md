# labshell

A small interactive shell with a handful of built-in commands, together with a
library of classic algorithm and number exercises. It has no dependencies
beyond the Python standard library.

## Installing

    pip install .

## The shell

Start it with:

    labshell

The prompt shows the current directory. Lines are split on whitespace; when the
first argument opens with a quote, that quote and a closing quote at the end of
the last word are dropped. A command that is not built in is run as a program
found on `PATH`.

Built-in commands:

- `cd [path]`: change directory; a path starting with `~` goes to `/home`
- `touch [path]`: create an empty file (refuses if it already exists)
- `mkdir [path]`: create a directory
- `calc`: a simple calculator; enter `2 + 2`, `5 - 4`, `8 * 2` or `7 / 2`
  (division is shown with four decimals), `exit` to go back to the shell
- `mylogin`: print the current user name
- `history [lines]`: print up to that many earlier lines, newest first
  (the `history` line itself is not listed); the last 1024 lines are kept
- `help`: print a summary of the commands
- `exit`: leave the shell

Ctrl+C at the prompt leaves the shell; while a program is running it
interrupts that program and the shell carries on. The shell also stops at the
end of its input.

A shell can be driven from code:

```python
from labshell.shell import Shell, split_arguments, calculate

shell = Shell()
shell.run_line("mkdir build")          # returns False only for "exit"
shell.run(["cd build\n", "exit\n"])    # prompts, runs the lines, returns 0
print(split_arguments('echo "hello world"'))  # ['echo', 'hello', 'world']
print(calculate(7, "/", 2))            # 3.5000
```

`Shell` takes optional `out`, `err` and `stdin` streams and a `home`
directory for `cd ~`. `run_calculator(lines, out)` runs the calculator on any
iterable of lines.

### What the shell does not do

There are no pipes, no redirection, no background jobs, no variable or
wildcard expansion and no quoting beyond the rule above. History is held in
memory only and is not saved between sessions.

## The library

- `labshell.arith`: small number routines: `add`, `absolute`, `box_surface`,
  `power`, `factorial`, `step_product`, `recurrence`, `classify_prime`
  (`"PIERWSZA"`, `"ZLOZONA"` or `None`), `is_perfect`, `reversed_digits`,
  `gcd`, `gcd_sum`, `collatz`, `collatz_verdict`, `divisor_count`,
  `distance_to_range`, `earlier_date`, `big_boom`
- `labshell.sorting`: `bubble_sort`, `quicksort`, `count_inversions`,
  `binary_search` and `linear_search` (1-based positions or `None`), `tallest`
- `labshell.structures`: a bounded `Stack` (100 items by default) raising
  `StackError` on overflow and underflow, and `run_stack_commands` for
  `PUSH n` / `POP` command lists
- `labshell.text`: `add_binary`, `add_reversed_decimal`, `palindrome_line`,
  `count_posts`, `line_stats`
- `labshell.records`: the `Astronaut` and `Person` dataclasses,
  `rank_astronauts`, `filter_people`, `odd_cells`, `range_sum`,
  `mean_above_one`
- `labshell.history`: the bounded `History` used by the shell

```python
from labshell.sorting import count_inversions
from labshell.structures import Stack

print(count_inversions([3, 1, 2]))  # 2

stack = Stack()
stack.push(5)
print(stack.pop())  # 5
```

## Running the tests

    pip install .[test]
    pytest