# advent2016

Solutions to the 2016 Advent of Code puzzles. Each puzzle day has its own
module, `advent2016.dayNN`, with a `solve(text)` function. It takes the raw
puzzle input as a string and returns the answers to both parts as a pair.

The days covered are 1, 2, 3, 9, 10, 11, 12, 13 and 16 to 24.

## Installation

```
pip install .
```

The package needs nothing beyond the Python standard library. It requires
Python 3.10 or later.

## Library use

```python
from advent2016 import day01, day16

with open("input01.txt") as fh:
    part1, part2 = day01.solve(fh.read())

print(part1)
print(part2)

# Individual building blocks are exposed as well.
print(day16.fill_and_checksum("10000", 20))  # 01100
```

Most modules expose their intermediate steps as well as `solve`. Some examples:

- `day09.part1_length` and `day09.part2_length` compute decompressed lengths.
- `day10.solve(text, watched)` takes the pair of chip values to watch for;
  it defaults to `(17, 61)`.
- `day11.parse_floors` and `day11.min_steps` solve the elevator puzzle.
- `day12.run` and `day23.run` run the assembunny interpreters on a program
  from `parse_program`, starting from the registers you give.
- `day13.shortest_path` and `day13.reachable_within` explore the cubicle maze.
- `day17.shortest_path` and `day17.longest_path_length` search the MD5 vault.
- `day18.count_safe` counts safe tiles over any number of rows.
- `day19.winner_next` and `day19.winner_across` give the winning elf.
- `day20.merge_ranges` merges blocked IP ranges.
- `day21.parse_operation` and `day21.apply_operations` scramble passwords.
- `day22.parse_node`, `day22.count_viable_pairs` and `day22.min_moves` work
  on the storage grid.
- `day24.parse_map` and `day24.pairwise_distances` measure the duct map.

You can use these on other inputs or to check worked examples. Malformed
input raises `ValueError`.

Some days search a large space and take a while: the elevator search of
day 11, the hash-based paths of day 17, and the 400,000-row trap room of
day 18.

## What the package does not do

- There is no command-line program. Read your input yourself and pass it
  to the `solve` function of the day you want.
- Days 4, 5, 6, 7, 8, 14 and 15 have no module.

## Running the tests

```
pip install ".[test]"
pytest
```