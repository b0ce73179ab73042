import dataclasses

import pytest

from bufficast.action import (
    FALLBACK_MESSAGES,
    STATE_KEY,
    GeneratePodcastAction,
    bufficast_plugin,
    message_text,
)
from bufficast.application.pipeline import MISSING_CONFIG_MESSAGE

from conftest import IP_ID, TX_HASH

REQUEST = {
    "content": {
        "text": 'use Chainlink to create me a speech "eth denver is awesome", '
                '"bufficast project is the best"',
    }
}


@pytest.fixture
def action(settings, stubs):
    return GeneratePodcastAction(settings, adapters_factory=lambda _settings: stubs)


def test_validate_stores_messages_in_state(action):
    state = {}
    assert action.validate(REQUEST, state) is True
    assert state[STATE_KEY] == ["eth denver is awesome", "bufficast project is the best"]


def test_validate_without_quotes(action):
    state = {}
    assert action.validate({"content": {"text": "make me a podcast"}}, state) is False
    assert state == {}


def test_validate_needs_state(action):
    assert action.validate(REQUEST, None) is False


def test_handler_requires_callback(action):
    with pytest.raises(ValueError, match="Callback is required"):
        action.handler(REQUEST, {})


def test_handler_runs_pipeline_with_state_messages(action, stubs):
    replies = []
    state = {}
    action.validate(REQUEST, state)

    assert action.handler(REQUEST, state, callback=replies.append) is True

    assert stubs["language_model"].prompts[0]["daily_messages"] == state[STATE_KEY]
    assert len(stubs["language_model"].prompts[0]["daily_messages"]) == 2
    assert all(set(reply) == {"text"} for reply in replies)
    assert TX_HASH in replies[-1]["text"]
    assert IP_ID in replies[-1]["text"]


def test_handler_re_extracts_without_state(action, stubs):
    assert action.handler(REQUEST, None, callback=lambda _: None) is True
    assert stubs["language_model"].prompts[0]["daily_messages"] == [
        "eth denver is awesome",
        "bufficast project is the best",
    ]


def test_handler_falls_back_to_default_messages(action, stubs):
    action.handler({"content": {"text": "no quotes"}}, {}, callback=lambda _: None)
    assert stubs["language_model"].prompts[0]["daily_messages"] == FALLBACK_MESSAGES


def test_handler_missing_config(settings, stubs, calls):
    settings = dataclasses.replace(settings, pinata_jwt=None)
    action = GeneratePodcastAction(settings, adapters_factory=lambda _settings: stubs)
    replies = []
    state = {}
    action.validate(REQUEST, state)

    assert action.handler(REQUEST, state, callback=replies.append) is False
    assert replies == [{"text": MISSING_CONFIG_MESSAGE}]
    assert calls == []


def test_examples_are_valid_requests(action):
    for conversation in action.examples:
        state = {}
        assert action.validate(conversation[0], state)
        assert conversation[1]["content"]["action"] == action.name


def test_plugin_exposes_action():
    assert [a.name for a in bufficast_plugin.actions] == ["RANDOMIZE_SPEECH"]


@pytest.mark.parametrize("message, expected", [
    ('"gm"', '"gm"'),
    ({"content": {"text": "hi"}}, "hi"),
    ({"content": None}, None),
    ({}, None),
])
def test_message_text(message, expected):
    assert message_text(message) == expected
