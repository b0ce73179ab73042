import pytest

from bufficast.adapters.sink import RecordingSink
from bufficast.config import Settings
from bufficast.ports.interfaces import (
    IBlockchain,
    IContentStorage,
    ILanguageModel,
    IRandomnessOracle,
    ISpeechSynthesizer,
)

RANDOM_PARAMS = {"request_id": "42", "tone": "calm", "seed": "7"}
TX_HASH = "0xabc123"
IP_ID = "0x00000000000000000000000000000000000000ip"


class StubOracle(IRandomnessOracle):
    def __init__(self, calls):
        self.calls = calls

    def request_random_parameters(self):
        self.calls.append(("oracle",))
        return dict(RANDOM_PARAMS)


class StubLanguageModel(ILanguageModel):
    def __init__(self, calls):
        self.calls = calls
        self.prompts = []

    def complete(self, prompt):
        self.calls.append(("llm",))
        self.prompts.append(prompt)
        return "Welcome to BuffiCast!\nGM everyone."


class StubSpeech(ISpeechSynthesizer):
    def __init__(self, calls, error=None, path="temp/podcast.mp3"):
        self.calls = calls
        self.error = error
        self.path = path

    def synthesize(self, text):
        self.calls.append(("speech", text))
        if self.error:
            raise self.error
        return self.path


class StubStorage(IContentStorage):
    def __init__(self, calls, error=None):
        self.calls = calls
        self.error = error
        self.uploaded_json = []

    def upload_file(self, path):
        self.calls.append(("upload_file", path))
        if self.error:
            raise self.error
        return "QmAudio"

    def upload_json(self, metadata):
        self.calls.append(("upload_json",))
        self.uploaded_json.append(metadata)
        return "QmMeta"


class StubBlockchain(IBlockchain):
    def __init__(self, calls):
        self.calls = calls

    def update_token_uri(self, uri):
        self.calls.append(("update_token_uri", uri))

    def register_ip(self, audio_cid, metadata_cid):
        self.calls.append(("register_ip", audio_cid, metadata_cid))
        return {"txHash": TX_HASH, "ipId": IP_ID}


@pytest.fixture
def settings(tmp_path):
    return Settings(
        private_key="0x" + "11" * 32,
        contract_address="0x" + "22" * 20,
        contract_address_flow="0x" + "33" * 20,
        anthropic_api_key="sk-ant-test",
        elevenlabs_api_key="xi-test",
        pinata_jwt="jwt-test",
        temp_dir=str(tmp_path),
    )


@pytest.fixture
def calls():
    return []


@pytest.fixture
def stubs(calls):
    return {
        "oracle": StubOracle(calls),
        "language_model": StubLanguageModel(calls),
        "speech": StubSpeech(calls),
        "storage": StubStorage(calls),
        "blockchain": StubBlockchain(calls),
    }


@pytest.fixture
def sink():
    return RecordingSink()
