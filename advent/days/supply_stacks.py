"""Day 5: Supply Stacks.

The input is a drawing of crate stacks followed, after a blank line, by the
rearrangement procedure::

        [D]
    [N] [C]
    [Z] [M] [P]
     1   2   3

    move 1 from 2 to 1
    move 3 from 1 to 3

The crane either moves crates one at a time (CrateMover 9000), which reverses
a moved block, or picks the whole block up at once (CrateMover 9001), which
keeps its order. The answer is the top crate of every stack.
"""

import copy
import logging
import re

from dataclasses import dataclass
from typing import Callable, List, Tuple

from tqdm.auto import tqdm

from ..args import DAY_SUPPLY_STACKS
from .puzzle import Puzzle, PuzzleInputError

LOGGER = logging.getLogger(__name__)

CRATE_MOVER_9000 = "CrateMover 9000"
CRATE_MOVER_9001 = "CrateMover 9001"

INSTRUCTION_PATTERN = re.compile(r"^move (\d+) from (\d+) to (\d+)$", re.ASCII)

EXAMPLE = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)

Stack = List[str]


class RearrangementError(PuzzleInputError):
    """Raised when an instruction cannot be applied to the stacks."""


@dataclass(frozen=True)
class Instruction:
    amount: int
    source: int
    destination: int

    @classmethod
    def from_str(cls, line: str) -> "Instruction":
        match = INSTRUCTION_PATTERN.match(line)
        if match is None:
            raise ValueError(f"Couldn't match instruction: {line!r}")

        amount, source, destination = map(int, match.groups())
        return cls(amount, source, destination)


def load_stacks(diagram: str) -> List[Stack]:
    """Reads the stacks from the drawing, bottom crate first.

    Crates sit at columns 1, 5, 9, ... The label row at the bottom has no
    brackets; it is dropped, but its labels give the number of stacks.
    """
    rows = diagram.splitlines(keepends=False)

    labels = []
    if rows and "[" not in rows[-1]:
        labels = rows.pop().split()

    if labels:
        count = len(labels)
    else:
        count = max([(len(row.rstrip()) + 2) // 4 for row in rows] + [0])
    stacks: List[Stack] = [[] for _ in range(count)]

    for row in reversed(rows):
        for i, stack in enumerate(stacks):
            offset = 1 + 4 * i
            if offset < len(row) and not row[offset].isspace():
                stack.append(row[offset])

    return stacks


def load_instructions(procedure: str) -> List[Instruction]:
    """Parses the procedure. Lines that are not instructions are skipped."""
    instructions = []
    for line in procedure.splitlines(keepends=False):
        try:
            instructions.append(Instruction.from_str(line))
        except ValueError:
            LOGGER.debug("Skipping instruction line %r", line)

    return instructions


def load_input(test: str) -> Tuple[List[Stack], List[Instruction]]:
    parts = test.split("\n\n", maxsplit=1)
    if len(parts) != 2:
        raise PuzzleInputError("There was no instructions input")

    diagram, procedure = parts
    return load_stacks(diagram), load_instructions(procedure)


def draw_stacks(stacks: List[Stack]) -> str:
    """Draws the stacks back in the format that `load_stacks` reads."""
    height = max([len(stack) for stack in stacks] + [0])

    rows = []
    for level in reversed(range(height)):
        cells = [f"[{stack[level]}]" if level < len(stack) else "   " for stack in stacks]
        rows.append(" ".join(cells).rstrip())

    rows.append(" ".join(f" {i} " for i in range(1, len(stacks) + 1)).rstrip())

    return "\n".join(rows)


def _get_stack(stacks: List[Stack], index: int) -> Stack:
    if not 1 <= index <= len(stacks):
        raise RearrangementError(
            f"There is no stack {index}, the stacks are numbered 1 to {len(stacks)}"
        )
    return stacks[index - 1]


def _pop_crate(stack: Stack, index: int) -> str:
    if not stack:
        raise RearrangementError(f"There was no crate left in stack {index}")
    return stack.pop()


def move_one_at_a_time(stacks: List[Stack], instruction: Instruction) -> None:
    source = _get_stack(stacks, instruction.source)
    destination = _get_stack(stacks, instruction.destination)

    for _ in range(instruction.amount):
        destination.append(_pop_crate(source, instruction.source))


def move_all_at_once(stacks: List[Stack], instruction: Instruction) -> None:
    source = _get_stack(stacks, instruction.source)
    destination = _get_stack(stacks, instruction.destination)

    buffer = []
    for _ in range(instruction.amount):
        buffer.append(_pop_crate(source, instruction.source))

    while buffer:
        destination.append(buffer.pop())


def make_mover(model: str) -> Callable[[List[Stack], Instruction], None]:
    if model == CRATE_MOVER_9000:
        return move_one_at_a_time

    if model == CRATE_MOVER_9001:
        return move_all_at_once

    raise ValueError(f"Unknown crane: {model}")


def rearrange(
    stacks: List[Stack],
    instructions: List[Instruction],
    model: str,
    progress: bool = False,
) -> List[Stack]:
    """Applies the instructions in order to a copy of the stacks."""
    mover = make_mover(model)
    stacks = copy.deepcopy(stacks)

    for instruction in tqdm(
        instructions, desc=f"Rearranging with the {model}", disable=not progress
    ):
        mover(stacks, instruction)

    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug("Stacks after the %s:\n%s", model, draw_stacks(stacks))

    return stacks


def top_crates(stacks: List[Stack]) -> str:
    return "".join(stack[-1] for stack in stacks if stack)


class SupplyStacks(Puzzle):
    day = DAY_SUPPLY_STACKS
    title = "Supply Stacks"
    labels = (
        "Completing the rearrangement procedure the crates on top of each stack are",
        "Completing the rearrangement procedure with the CrateMover 9001 instructions, the top crates are",
    )
    example = EXAMPLE
    tests = [(EXAMPLE, "CMZ", "MCD")]

    def solve(self, test: str, model: str) -> str:
        stacks, instructions = load_input(test)
        return top_crates(rearrange(stacks, instructions, model, self.progress))

    def part1(self, test: str) -> str:
        return self.solve(test, CRATE_MOVER_9000)

    def part2(self, test: str) -> str:
        return self.solve(test, CRATE_MOVER_9001)

    def __call__(self, test: str) -> Tuple[str, str]:
        stacks, instructions = load_input(test)
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug("Starting stacks:\n%s", draw_stacks(stacks))
        LOGGER.info("Loaded %d stacks and %d instructions", len(stacks), len(instructions))

        return (
            top_crates(rearrange(stacks, instructions, CRATE_MOVER_9000, self.progress)),
            top_crates(rearrange(stacks, instructions, CRATE_MOVER_9001, self.progress)),
        )
