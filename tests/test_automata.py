import pytest

from coursework.automata import DFA, NFA, Edge, State, Transition, make_nfa


def dfa_for(expression):
    return DFA(make_nfa(expression))


def test_single_letter_nfa_shape():
    nfa = make_nfa("a")
    assert len(nfa.states) == 2
    assert nfa.states[0].transitions == [Transition("a", 1)]
    assert nfa.states[1].is_end
    assert nfa.alphabet == {"a"}


@pytest.mark.parametrize(
    "word, accepted",
    [("ab", True), ("a", False), ("b", False), ("ba", False), ("", False)],
)
def test_concatenation(word, accepted):
    assert dfa_for("(a)(b)").accepts(word) is accepted


@pytest.mark.parametrize(
    "word, accepted", [("a", True), ("b", True), ("ab", False), ("", False)]
)
def test_union(word, accepted):
    assert dfa_for("(a)+(b)").accepts(word) is accepted


@pytest.mark.parametrize("word, accepted", [("", True), ("a", True), ("aaaa", True)])
def test_star_of_letter(word, accepted):
    assert dfa_for("(a)*").accepts(word) is accepted


@pytest.mark.parametrize(
    "word, accepted",
    [("", True), ("ab", True), ("abab", True), ("aba", False), ("ba", False)],
)
def test_star_of_concatenation(word, accepted):
    assert dfa_for("((a)(b))*").accepts(word) is accepted


@pytest.mark.parametrize(
    "word, accepted", [("", True), ("ab", True), ("bba", True), ("c", False)]
)
def test_star_of_union(word, accepted):
    dfa = dfa_for("((a)+(b))*")
    assert dfa.accepts(word) is accepted


def test_letter_outside_alphabet_is_rejected():
    assert dfa_for("(a)(b)").accepts("z") is False


@pytest.mark.parametrize("expression", ["", "(a)", "a*", "ab"])
def test_bad_expression(expression):
    with pytest.raises(ValueError):
        make_nfa(expression)


def sample_edges():
    return [Edge(0, 1, "ab"), Edge(1, 2, ""), Edge(3, 0, "c")]


def test_from_edges_builds_states_and_alphabet():
    nfa = NFA.from_edges(sample_edges(), [2])
    assert len(nfa.states) == 4
    assert nfa.alphabet == {"a", "b", "c"}
    assert nfa.states[2].is_end
    assert not nfa.states[0].is_end


def test_from_edges_rejects_missing_finish():
    with pytest.raises(IndexError):
        NFA.from_edges([Edge(0, 1, "a")], [5])


def test_erase_extra_drops_unreachable_states():
    nfa = NFA.from_edges(sample_edges(), [2])
    nfa.erase_extra()
    assert len(nfa.states) == 3
    targets = {t.target for s in nfa.states for t in s.transitions}
    assert targets <= set(range(len(nfa.states)))


def test_one_letter_and_normalize():
    nfa = NFA.from_edges(sample_edges(), [2])
    assert not nfa.one_letter()
    nfa.make_simpler()
    assert not nfa.one_letter()
    nfa.normalize()
    assert nfa.one_letter()


def test_make_simpler_splits_long_words():
    nfa = NFA.from_edges([Edge(0, 1, "abc")], [1])
    nfa.make_simpler()
    assert nfa.one_letter()
    assert len(nfa.states) == 4


def test_dfa_from_edges_language():
    dfa = DFA(NFA.from_edges(sample_edges(), [2]))
    assert dfa.accepts("ab")
    assert not dfa.accepts("a")
    assert not dfa.accepts("c")


def test_determinize_is_deterministic():
    result = make_nfa("((a)+(b))*").determinize()
    for state in result.states:
        letters = [t.word for t in state.transitions]
        assert len(letters) == len(set(letters))
        assert all(len(letter) == 1 for letter in letters)


def test_make_full_gives_every_letter_and_is_idempotent():
    dfa = dfa_for("(a)(b)")
    dfa.make_full()
    count = len(dfa.states)
    for state in dfa.states:
        assert sorted(t.word for t in state.transitions) == sorted(dfa.alphabet)
    dfa.make_full()
    assert len(dfa.states) == count


def test_edge_lines_mark_accepting_states():
    dfa = dfa_for("(a)(b)")
    dfa.make_full()
    lines = dfa.edge_lines()
    assert len(lines) == sum(len(s.transitions) for s in dfa.states)
    accepting = [n for n, s in enumerate(dfa.states) if s.is_end]
    assert any(f"t{accepting[0]} " in line for line in lines)


def test_nfa_str_format():
    nfa = NFA([State([Transition("a", 1)]), State(is_end=True)], {"a"})
    text = str(nfa)
    assert text.startswith("alphabet: a\n\n")
    assert "vertex : 0. is end - no.\n" in text
    assert "    edge : to - 1. word - a.\n" in text
    assert "vertex : 1. is end - yes.\n" in text


def test_nfa_copies_given_states():
    original = [State([Transition("a", 0)], True)]
    nfa = NFA(original, {"a"})
    nfa.states[0].transitions[0].target = 7
    assert original[0].transitions[0].target == 0