# ===============================================
# Local responder: rule order and literal replies
# ===============================================

from datetime import datetime

import pytest

from chatbot.responder import CLARIFY, GREETING, HELP, JOKE, LocalResponder, normalize, reply

FIXED = datetime(2024, 3, 5, 14, 30, 15)
bot = LocalResponder(clock=lambda: FIXED)


def test_normalize_strips_punctuation_and_case():
    assert normalize("  Hello, World!  ") == "hello world"


@pytest.mark.parametrize("text", ["", "   ", "?!...", "\n\t"])
def test_empty_input_asks_for_clarification(text):
    assert reply(text) == "Could you clarify that?"
    assert bot.reply(text) == CLARIFY


@pytest.mark.parametrize("text", ["hi", "Hello there", "hey!", "Hola amigo"])
def test_greeting(text):
    assert bot.reply(text) == GREETING


def test_greeting_needs_word_start():
    # "hi" inside "this" is not a greeting
    assert bot.classify("this is it") == "fallback"


@pytest.mark.parametrize("text", ["I need help", "support please", "can you assist"])
def test_help(text):
    assert bot.reply(text) == HELP


def test_greeting_wins_over_help():
    assert bot.reply("hello, I need help") == GREETING


def test_time_uses_clock():
    assert bot.classify("What time is it?") == "time"
    assert bot.reply("What time is it?") == f"The current time is {FIXED.strftime('%X')}."


@pytest.mark.parametrize("text", ["what's the date", "which day is it"])
def test_date_uses_clock(text):
    assert bot.classify(text) == "date"
    assert bot.reply(text) == f"Today is {FIXED.strftime('%x')}."


def test_time_before_date():
    assert bot.classify("time and date") == "time"


@pytest.mark.parametrize("text", ["tell me a joke", "something funny"])
def test_joke(text):
    assert bot.reply(text) == JOKE


def test_echo_returns_normalized_capture():
    assert reply("echo hello world!") == "hello world"
    assert bot.reply("Echo This, Please.") == "this please"


def test_echo_mid_sentence():
    assert bot.reply("please echo Foo-Bar") == "foobar"


def test_fallback_restates_original_input():
    assert bot.reply("Quantum Stuff?") == 'You said: "Quantum Stuff?". I\'m a simple demo bot.'


def test_branch_selection_is_deterministic():
    for text in ["hi", "help", "time", "date", "joke", "echo x", "whatever"]:
        assert bot.classify(text) == bot.classify(text)
        if bot.classify(text) not in ("time", "date"):
            assert bot.reply(text) == bot.reply(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("echo what time is it", "what time is it"),
        ("echo hello world!", "hello world"),
        ("echo I need help", "i need help"),
        ("echo tell me a joke", "tell me a joke"),
    ],
)
def test_leading_echo_command_skips_keyword_rules(text, expected):
    assert bot.classify(text) == "echo"
    assert bot.reply(text) == expected


def test_keyword_rules_still_win_over_mid_sentence_echo():
    assert bot.classify("what time is it, echo it") == "time"
    assert bot.classify("hello, echo this") == "greeting"
