# coursework

A few small, self-contained pieces:

- `coursework.chunked_deque`: `Deque`, a double-ended sequence stored in
  fixed-size blocks of `Deque.BLOCK_SIZE` (32) slots, with random-access
  iterators (`DequeIterator`) obtained from `begin()`, `end()`, `rbegin()`
  and `rend()`.
- `coursework.automata`: `make_nfa` builds an `NFA` from a small
  regular-expression syntax. `NFA.determinize` yields a deterministic
  automaton, and `DFA.accepts` tests a word.
- `coursework.game`: the building blocks of a text adventure set in
  underground caves. These are the game's messages and console input and
  output (`coursework.game.interface`), its characters
  (`coursework.game.npc`) and its artefacts (`coursework.game.items`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Deque

```python
from coursework.chunked_deque import Deque

d = Deque(3, 7)
d.push_front(1)
d.push_back(9)
print(list(d))          # [1, 7, 7, 7, 9]
print(d.at(0))          # 1
```

Operations:

- `Deque(size, value)` fills the deque with copies of `value`.
- `push_back`, `push_front`, `pop_back` and `pop_front` add or remove an
  element at either end. Popping from an empty deque does nothing.
- Indexing works through `len`, `[]` (negative indices allowed),
  iteration and `reversed`.
- `at(index)` is bounds-checked and raises `IndexError` for any index
  outside `0 .. len - 1`, negative ones included.
- `insert(position, value)` and `erase(position)` take an iterator or an
  index.
- `copy()` returns an independent deque.

Growing the deque never moves existing blocks. An iterator taken before
growth still reads and writes the same element through its `value`
property. Iterators support `+`, `-`, the distance between two iterators,
and ordering comparisons. Reverse iterators move backwards.

## Automata

The expression syntax has four forms:

- a single letter;
- `(X)(Y)` for concatenation;
- `(X)+(Y)` for union;
- `(X)*` for repetition.

A malformed expression raises `ValueError`.

```python
from coursework.automata import DFA, make_nfa

dfa = DFA(make_nfa("(a)+(b)"))
print(dfa.accepts("a"))    # True
print(dfa.accepts("ab"))   # False
```

The `NFA` class provides these operations:

- `NFA.from_edges(edges, finishes)` builds an automaton from `Edge` values.
- `one_letter()` reports whether every edge carries a single letter.
- `erase_extra()` removes unreachable states.
- `make_simpler()` and `delete_empties()` split long words and remove empty
  transitions. `normalize()` runs all three.
- `str(nfa)` lists the alphabet, the states and their edges.

The `DFA` class provides `make_full()`, which adds a sink state where a
letter is missing. `edge_lines()` gives one `source target letter` line per
edge, with `t` marking accepting states.

## Game pieces

`ConsoleInterface(stdin, stdout, save_path="save.txt", delay=0.015)` reads
whitespace-separated words and types text character by character, pausing
`delay` seconds between characters.

- The word `/exit`, or running out of input, raises `EndProcess`.
- An unrecognised command prints an error message and reads again.
- In-game commands and in-game messages (`Message` members marked as saved)
  are appended to the save file.
- `show(path)` prints a saved record with a leading `/` on every line.

```python
import io
from coursework.game.interface import ActCommand, ConsoleInterface, Message

ui = ConsoleInterface(stdin=io.StringIO("talk\n"), stdout=io.StringIO(),
                      save_path="record.txt", delay=0)
assert ui.get_command_act() is ActCommand.TALK
ui.tell(Message.END_GAME, exp=31)
```

The characters are all created by `Mobs.create(interface)`:

- `Goblin`, `Citizen`, `Prisoner`, `Vizier` and `Boss` each have a
  `disposition()`, `exp()`, `is_killed_by(damage)` and `kills(health)`.
- `talk()` says the character's message through the interface.

The artefacts in `coursework.game.items` are as follows:

- `RedSword` adds 5 experience for a fight.
- `FrostStick.skip()` is true two times out of three.
- `Quest(difficulty)` reports its `level()`.
- `Items` bundles one of each sword and stick with quests of difficulty 2
  and 4.
- `roll(rng)` draws a number in `range(60)`.

## What is not included

The package has no command that starts the game. It also has no player,
no map of rooms and no game loop, so the adventure cannot be played as it
stands. It provides only the interface, the characters and the items
described above.