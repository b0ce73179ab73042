import json

import pytest

from bufficast.application.prompt import (
    PODCAST_DURATION,
    PODCAST_INSTRUCTION,
    PODCAST_LANGUAGE,
    PODCAST_TOPIC,
    build_podcast_metadata,
    build_podcast_prompt,
)


def test_prompt_has_fixed_fields_and_inputs():
    params = {"tone": "calm", "seed": "7"}
    prompt = build_podcast_prompt(("gm", "wagmi"), params)

    assert prompt == {
        "instruction": PODCAST_INSTRUCTION,
        "topic": PODCAST_TOPIC,
        "daily_messages": ["gm", "wagmi"],
        "random_parameters": params,
        "duration": PODCAST_DURATION,
        "language": PODCAST_LANGUAGE,
    }
    assert prompt["duration"] == "20 Seconds"
    assert prompt["language"] == "English"


def test_prompt_is_json_serializable():
    prompt = build_podcast_prompt(["gm"], {"seed": "1"})
    assert json.loads(json.dumps(prompt))["daily_messages"] == ["gm"]


def test_prompt_rejects_empty_messages():
    with pytest.raises(ValueError):
        build_podcast_prompt([], {"seed": "1"})


def test_metadata_embeds_params_and_audio_url():
    metadata = build_podcast_metadata(
        {"tone": "calm"},
        audio_url="https://ipfs.io/ipfs/QmAudio",
        cover_image="https://ipfs.io/ipfs/cover",
    )
    assert metadata["name"] == "BuffiCast Podcast"
    assert metadata["description"].startswith("Podcast generated by BuffiCast with parameters: ")
    assert '{"tone":"calm"}' in metadata["description"]
    assert metadata["image"] == "https://ipfs.io/ipfs/cover"
    assert metadata["external_url"] == "https://ipfs.io/ipfs/QmAudio"
