"""Finite automata built from a small regular-expression syntax.

Expressions are a single letter, ``(X)(Y)`` for concatenation, ``(X)+(Y)``
for union and ``(X)*`` for repetition.  ``make_nfa`` builds an NFA with
empty-word transitions. ``NFA.determinize`` turns it into a deterministic
automaton by the subset construction, and ``DFA`` answers whether a word
is accepted.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Set


@dataclass
class Transition:
    """An edge labelled ``word`` leading to state number ``target``."""

    word: str
    target: int


@dataclass
class State:
    """A state with its outgoing transitions and whether it accepts."""

    transitions: List[Transition] = field(default_factory=list)
    is_end: bool = False

    def copy(self) -> "State":
        return State(
            [Transition(t.word, t.target) for t in self.transitions], self.is_end
        )


@dataclass(frozen=True)
class Edge:
    """An edge given by its endpoints, used to describe an automaton."""

    source: int
    target: int
    word: str


def _describe(states: List[State], alphabet: Iterable[str]) -> str:
    parts = ["alphabet:"]
    parts.extend(f" {letter}" for letter in sorted(alphabet))
    parts.append("\n\n")
    for number, state in enumerate(states):
        verdict = "yes." if state.is_end else "no."
        parts.append(f"vertex : {number}. is end - {verdict}\n")
        for transition in state.transitions:
            parts.append(
                f"    edge : to - {transition.target}. word - {transition.word}.\n"
            )
        parts.append("\n")
    return "".join(parts)


class NFA:
    """Nondeterministic automaton whose edges carry words (possibly empty).

    State 0 is the start state.
    """

    def __init__(
        self, states: Iterable[State] = (), alphabet: Iterable[str] = ()
    ) -> None:
        self.states: List[State] = [state.copy() for state in states]
        self.alphabet: Set[str] = set(alphabet)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], finishes: Iterable[int]) -> "NFA":
        """Build an automaton from edges and the numbers of accepting states."""
        edges = list(edges)
        if any(edge.source < 0 or edge.target < 0 for edge in edges):
            raise ValueError("state numbers must not be negative")
        size = max((max(edge.source, edge.target) for edge in edges), default=0)
        nfa = cls()
        nfa.states = [State() for _ in range(size + 1)]
        for edge in edges:
            nfa.alphabet.update(edge.word)
            nfa.states[edge.source].transitions.append(
                Transition(edge.word, edge.target)
            )
        for number in finishes:
            if not 0 <= number < len(nfa.states):
                raise IndexError(f"no state {number}")
            nfa.states[number].is_end = True
        return nfa

    def one_letter(self) -> bool:
        """Whether every transition is labelled by exactly one letter."""
        return all(
            len(transition.word) == 1
            for state in self.states
            for transition in state.transitions
        )

    def _reachable(self) -> Set[int]:
        seen = {0}
        stack = [0]
        while stack:
            for transition in self.states[stack.pop()].transitions:
                if transition.target not in seen:
                    seen.add(transition.target)
                    stack.append(transition.target)
        return seen

    def erase_extra(self) -> None:
        """Drop states unreachable from the start, keeping the others' order."""
        if not self.states:
            return
        reachable = self._reachable()
        if len(reachable) == len(self.states):
            return
        kept = sorted(reachable)
        renumber = {old: new for new, old in enumerate(kept)}
        states = [self.states[old] for old in kept]
        for state in states:
            for transition in state.transitions:
                transition.target = renumber[transition.target]
        self.states = states

    def make_simpler(self) -> None:
        """Split every transition with a longer word into one-letter steps."""
        # States appended while iterating are visited too, so their long
        # words are split in turn.
        for state in self.states:
            for transition in state.transitions:
                if len(transition.word) > 1:
                    self.states.append(
                        State([Transition(transition.word[1:], transition.target)])
                    )
                    transition.word = transition.word[0]
                    transition.target = len(self.states) - 1

    def delete_empties(self) -> None:
        """Remove empty-word transitions by copying the target's transitions.

        When either end of an empty transition accepts, both become accepting.
        """
        if not self.states:
            return
        queued = {0}
        queue = deque([0])
        while queue:
            number = queue.popleft()
            state = self.states[number]
            absorbed = {number}
            kept: List[Transition] = []
            position = 0
            while position < len(state.transitions):
                transition = state.transitions[position]
                position += 1
                if transition.target not in queued:
                    queued.add(transition.target)
                    queue.append(transition.target)
                if transition.word:
                    kept.append(transition)
                    continue
                if transition.target in absorbed:
                    continue
                absorbed.add(transition.target)
                target = self.states[transition.target]
                state.transitions.extend(
                    Transition(t.word, t.target) for t in list(target.transitions)
                )
                if target.is_end or state.is_end:
                    target.is_end = state.is_end = True
            state.transitions = kept
        self.erase_extra()

    def normalize(self) -> None:
        """Leave only reachable states and one-letter transitions."""
        self.erase_extra()
        self.make_simpler()
        self.delete_empties()

    def determinize(self) -> "NFA":
        """Return an equivalent automaton with at most one edge per letter."""
        self.normalize()
        if not self.states:
            raise ValueError("automaton has no states")
        start: FrozenSet[int] = frozenset({0})
        numbers: Dict[FrozenSet[int], int] = {start: 0}
        subsets = [start]
        result = NFA(alphabet=self.alphabet)
        result.states = [State(is_end=self.states[0].is_end)]
        queue = deque([0])
        letters = sorted(self.alphabet)
        while queue:
            number = queue.popleft()
            for letter in letters:
                reachable = frozenset(
                    transition.target
                    for member in subsets[number]
                    for transition in self.states[member].transitions
                    if transition.word == letter
                )
                if not reachable:
                    continue
                if reachable not in numbers:
                    numbers[reachable] = len(result.states)
                    subsets.append(reachable)
                    result.states.append(
                        State(is_end=any(self.states[n].is_end for n in reachable))
                    )
                    queue.append(numbers[reachable])
                result.states[number].transitions.append(
                    Transition(letter, numbers[reachable])
                )
        return result

    def __str__(self) -> str:
        return _describe(self.states, self.alphabet)


def _append_shifted(nfa: NFA, states: List[State], offset: int) -> None:
    for state in states:
        for transition in state.transitions:
            if transition.word:
                nfa.alphabet.add(transition.word[0])
            transition.target += offset
        nfa.states.append(state)


def _concatenate(first: NFA, second: NFA) -> NFA:
    offset = len(first.states)
    first.states[-1].is_end = False
    first.states[-1].transitions.append(Transition("", offset))
    _append_shifted(first, second.states, offset)
    return first


def _union(first: NFA, second: NFA) -> NFA:
    result = NFA()
    result.states = [State([Transition("", 1)])]
    _append_shifted(result, first.states, 1)
    result.states[-1].is_end = False
    second_start = len(result.states)
    result.states[0].transitions.append(Transition("", second_start))
    _append_shifted(result, second.states, second_start)
    result.states[-1].is_end = False
    result.states.append(State(is_end=True))
    final = len(result.states) - 1
    result.states[second_start - 1].transitions.append(Transition("", final))
    result.states[final - 1].transitions.append(Transition("", final))
    return result


def make_nfa(regular_expression: str) -> NFA:
    """Build an NFA for ``regular_expression``; the last state accepts."""
    expression = regular_expression
    if not expression:
        raise ValueError("bad regular expression representation")
    if len(expression) == 1:
        return NFA(
            [State([Transition(expression, 1)]), State(is_end=True)], {expression}
        )
    if expression.endswith("*"):
        inner = make_nfa(expression[1:-2])
        inner.states[-1].transitions.append(Transition("", 0))
        return inner
    depth = 0
    for position, char in enumerate(expression):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if depth:
            continue
        following = expression[position + 1:position + 2]
        if following == "(":
            return _concatenate(
                make_nfa(expression[1:position]),
                make_nfa(expression[position + 2:-1]),
            )
        if following == "+":
            return _union(
                make_nfa(expression[1:position]),
                make_nfa(expression[position + 3:-1]),
            )
    raise ValueError("bad regular expression representation")


class DFA:
    """Deterministic automaton obtained from an NFA."""

    def __init__(self, nfa: NFA) -> None:
        self.states: List[State] = nfa.determinize().states
        self.alphabet: Set[str] = set(nfa.alphabet)

    def make_full(self) -> None:
        """Give every state an edge for every letter, adding a sink if needed."""
        sink = len(self.states)
        letters = sorted(self.alphabet)
        added = False
        for state in self.states:
            present = {t.word[0] for t in state.transitions if t.word}
            for letter in letters:
                if letter not in present:
                    state.transitions.append(Transition(letter, sink))
                    added = True
        if added:
            self.states.append(
                State([Transition(letter, sink) for letter in letters])
            )

    def accepts(self, word: str) -> bool:
        """Whether the automaton reads ``word`` into an accepting state."""
        self.make_full()
        number = 0
        for letter in word:
            following: Optional[int] = next(
                (
                    t.target
                    for t in self.states[number].transitions
                    if t.word[:1] == letter
                ),
                None,
            )
            if following is None:
                return False
            number = following
        return self.states[number].is_end

    def edge_lines(self) -> List[str]:
        """One line per edge: source, target and letter; ``t`` marks accepting."""
        def label(number: int) -> str:
            return ("t" if self.states[number].is_end else "") + str(number)

        return [
            f"{label(number)} {label(transition.target)} {transition.word}"
            for number, state in enumerate(self.states)
            for transition in state.transitions
        ]

    def __str__(self) -> str:
        return _describe(self.states, self.alphabet)