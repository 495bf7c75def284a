"""
Tests for chat.ledger module.
"""

import random
import threading

import pytest

from chat import ChatConfig, Reaction, ReactionLedger
from rejections import Rejection

THUMBS_UP = "\U0001F44D"


def test_submit_trims_text(ledger):
    index = ledger.submit_message("  hi  ")

    assert index == 0
    assert ledger.list_messages()[0].text == "hi"


def test_blank_message_is_ignored(ledger):
    ledger.submit_message("first")

    assert ledger.submit_message("   ") is None
    assert ledger.submit_message("") is None
    assert ledger.submit_message("\t\n") is None

    assert len(ledger) == 1
    assert ledger.last_rejection is Rejection.INVALID_MESSAGE


def test_message_length_limit(ledger):
    longest = "a" * ChatConfig.MAX_MESSAGE_LENGTH

    assert ledger.submit_message(longest) == 0
    assert ledger.submit_message(longest + "a") is None
    # Trimming happens before the length check
    assert ledger.submit_message("  " + longest + "  ") == 1
    assert len(ledger) == 2


def test_custom_length_limit():
    ledger = ReactionLedger(max_message_length=5)

    assert ledger.submit_message("hello") == 0
    assert ledger.submit_message("hello!") is None


def test_invalid_length_limit():
    with pytest.raises(ValueError):
        ReactionLedger(max_message_length=0)


def test_messages_keep_submission_order(ledger):
    for text in ("one", "two", "three"):
        ledger.submit_message(text)

    messages = ledger.list_messages()
    assert [m.text for m in messages] == ["one", "two", "three"]
    assert [m.index for m in messages] == [0, 1, 2]


def test_new_message_has_zero_counts(ledger):
    ledger.submit_message("hello")

    message = ledger.get_message(0)
    assert message.highlight_count == 0
    assert list(message.reactions) == list(Reaction)
    assert all(count == 0 for count in message.reactions.values())
    assert message.total_reactions == 0


def test_two_thumbs_up(ledger):
    ledger.submit_message("gg")

    assert ledger.add_reaction(0, THUMBS_UP)
    assert ledger.add_reaction(0, THUMBS_UP)

    message = ledger.get_message(0)
    assert message.count(THUMBS_UP) == 2
    assert message.reactions[Reaction.THUMBS_UP] == 2
    for reaction in Reaction:
        if reaction is not Reaction.THUMBS_UP:
            assert message.count(reaction) == 0


def test_reaction_by_enum(ledger):
    ledger.submit_message("nice")

    assert ledger.add_reaction(0, Reaction.HEART)
    assert ledger.get_message(0).count("❤️") == 1


def test_reactions_are_per_message(ledger):
    ledger.submit_message("a")
    ledger.submit_message("b")

    ledger.add_reaction(1, Reaction.PARTY)

    assert ledger.get_message(0).count(Reaction.PARTY) == 0
    assert ledger.get_message(1).count(Reaction.PARTY) == 1


@pytest.mark.parametrize("index", [-1, 1, 5, "0", None, True])
def test_reaction_on_unknown_message_is_ignored(ledger, index):
    ledger.submit_message("only one")

    assert not ledger.add_reaction(index, THUMBS_UP)
    assert not ledger.add_highlight(index)

    assert ledger.get_message(0).total_reactions == 0
    assert ledger.get_message(0).highlight_count == 0
    assert ledger.last_rejection is Rejection.INVALID_TARGET


@pytest.mark.parametrize("symbol", ["\U0001F44E", "x", "", ChatConfig.HIGHLIGHT_SYMBOL, None])
def test_unknown_symbol_is_ignored(ledger, symbol):
    ledger.submit_message("hello")

    assert not ledger.add_reaction(0, symbol)

    message = ledger.get_message(0)
    assert message.total_reactions == 0
    assert message.highlight_count == 0
    assert ledger.last_rejection is Rejection.INVALID_TARGET


def test_reaction_on_empty_ledger_is_ignored(ledger):
    assert not ledger.add_reaction(0, THUMBS_UP)
    assert not ledger.add_highlight(0)
    assert ledger.list_messages() == []


def test_highlight_is_separate_from_reactions(ledger):
    ledger.submit_message("great move")

    assert ledger.add_highlight(0)
    assert ledger.add_highlight(0)

    message = ledger.get_message(0)
    assert message.highlight_count == 2
    assert message.total_reactions == 0


def test_snapshots_do_not_change(ledger):
    ledger.submit_message("hello")
    before = ledger.get_message(0)

    ledger.add_reaction(0, Reaction.GRIN)
    ledger.add_highlight(0)

    assert before.count(Reaction.GRIN) == 0
    assert before.highlight_count == 0
    assert ledger.get_message(0).count(Reaction.GRIN) == 1


def test_get_message_out_of_range(ledger):
    assert ledger.get_message(0) is None
    ledger.submit_message("x")
    assert ledger.get_message(1) is None
    assert ledger.get_message(-1) is None


def test_list_messages_is_restartable(ledger):
    ledger.submit_message("a")
    ledger.submit_message("b")

    assert ledger.list_messages() == ledger.list_messages()


def test_clear(ledger):
    ledger.submit_message("a")
    ledger.add_reaction(0, Reaction.GRIN)

    ledger.clear()

    assert len(ledger) == 0
    assert ledger.submit_message("b") == 0
    assert ledger.get_message(0).total_reactions == 0


def test_counts_never_decrease():
    rng = random.Random(7)
    ledger = ReactionLedger()
    symbols = [r.symbol for r in Reaction] + ["?", ChatConfig.HIGHLIGHT_SYMBOL]
    previous = []

    for _ in range(1000):
        action = rng.random()
        if action < 0.1:
            ledger.submit_message(rng.choice(["hi", "  ", "gg", ""]))
        elif action < 0.6:
            ledger.add_reaction(rng.randrange(-1, 6), rng.choice(symbols))
        else:
            ledger.add_highlight(rng.randrange(-1, 6))

        current = ledger.list_messages()
        for old, new in zip(previous, current):
            assert new.highlight_count >= old.highlight_count >= 0
            for reaction in Reaction:
                assert new.reactions[reaction] >= old.reactions[reaction] >= 0
        previous = current


def test_concurrent_reactions_are_not_lost(ledger):
    ledger.submit_message("race")
    ledger.submit_message("other")
    threads_count = 8
    per_thread = 500
    barrier = threading.Barrier(threads_count)

    def worker(n):
        barrier.wait()
        for _ in range(per_thread):
            ledger.add_reaction(0, THUMBS_UP)
            ledger.add_highlight(n % 2)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    first, second = ledger.list_messages()
    assert first.count(THUMBS_UP) == threads_count * per_thread
    assert first.highlight_count + second.highlight_count == threads_count * per_thread
    assert first.highlight_count == second.highlight_count


def test_success_clears_last_rejection(ledger):
    ledger.submit_message("   ")
    assert ledger.last_rejection is Rejection.INVALID_MESSAGE

    assert ledger.submit_message("ok") == 0
    assert ledger.last_rejection is None

    ledger.add_reaction(5, THUMBS_UP)
    assert ledger.add_reaction(0, THUMBS_UP)
    assert ledger.last_rejection is None

    ledger.add_highlight(5)
    assert ledger.add_highlight(0)
    assert ledger.last_rejection is None


@pytest.mark.parametrize("text", [None, 42, b"hi"])
def test_non_str_message_is_ignored(ledger, text):
    assert ledger.submit_message(text) is None

    assert len(ledger) == 0
    assert ledger.last_rejection is Rejection.INVALID_MESSAGE
