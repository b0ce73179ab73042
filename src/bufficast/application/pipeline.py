"""
Podcast pipeline – single responsibility: orchestrate
randomness → script → speech → IPFS → NFT metadata → IP registration.
Depends only on port interfaces (SOLID – Dependency Inversion).
"""

import os

from bufficast.application.prompt import build_podcast_metadata, build_podcast_prompt
from bufficast.config import Settings
from bufficast.domain.models import ErrorKind, PipelineResult
from bufficast.logging_utils import get_logger
from bufficast.ports.interfaces import (
    IProgressSink,
    IRandomnessOracle,
    ILanguageModel,
    ISpeechSynthesizer,
    IContentStorage,
    IBlockchain,
)

logger = get_logger(__name__)

MISSING_CONFIG_MESSAGE = "⚠️ Missing environment variables. Please check the configuration."
FAILURE_MESSAGE = "❌ An error occurred while generating the podcast."

STATUS_RANDOMNESS = "🎲 Requesting random parameters from Chainlink VRF ..."
STATUS_CONTENT = "✍️ Generating podcast content..."
STATUS_SPEECH = "🎙️ Converting text to speech..."
STATUS_UPLOAD = "📤 Uploading to IPFS..."
STATUS_TOKEN_URI = "🔄 Updating NFT metadata for Tokenized Podcast ..."
STATUS_MINT = "🔗 Minting NFT in Story ..."


class PodcastPipeline:
    """
    Runs one podcast generation end to end.
    All collaborators are injected (ports); no concrete implementations here.
    One instance per invocation; nothing is shared between runs except `settings`.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        sink: IProgressSink,
        oracle: IRandomnessOracle,
        language_model: ILanguageModel,
        speech: ISpeechSynthesizer,
        storage: IContentStorage,
        blockchain: IBlockchain,
    ):
        self._settings = settings
        self._sink = sink
        self._oracle = oracle
        self._llm = language_model
        self._speech = speech
        self._storage = storage
        self._chain = blockchain
        self._step = "startup"

    def execute(self, messages) -> PipelineResult:
        """Generate, pin and mint a podcast for `messages`. Never raises."""
        missing = self._settings.missing()
        if missing:
            logger.warning("Not starting podcast pipeline, missing: %s", ", ".join(missing))
            self._sink.notify(MISSING_CONFIG_MESSAGE)
            return PipelineResult.failure(ErrorKind.CONFIGURATION_MISSING)

        try:
            return self._run(list(messages))
        except Exception:
            logger.exception("Podcast generation failed during step '%s'", self._step)
            self._sink.notify(FAILURE_MESSAGE)
            return PipelineResult.failure(ErrorKind.STEP_FAILURE, failed_step=self._step)

    def _run(self, messages) -> PipelineResult:
        logger.info("Starting podcast pipeline with %d message(s)", len(messages))

        self._enter("randomness", "[1/6] Requesting VRF randomness", STATUS_RANDOMNESS)
        random_params = self._oracle.request_random_parameters()
        logger.debug("Random parameters: %s", random_params)

        self._enter("content", "[2/6] Generating podcast script", STATUS_CONTENT)
        prompt = build_podcast_prompt(messages, random_params)
        script = self._llm.complete(prompt)
        logger.info("Script length: %d characters", len(script))

        self._enter("speech", "[3/6] Converting text to speech", STATUS_SPEECH)
        audio_path = self._speech.synthesize(script)

        self._enter("upload", "[4/6] Uploading audio and metadata to IPFS", STATUS_UPLOAD)
        try:
            audio_cid = self._storage.upload_file(audio_path)
        finally:
            self._discard(audio_path)
        metadata = build_podcast_metadata(
            random_params,
            audio_url=self._settings.gateway_url(audio_cid),
            cover_image=self._settings.cover_image,
        )
        metadata_cid = self._storage.upload_json(metadata)
        logger.info("Pinned audio %s and metadata %s", audio_cid, metadata_cid)

        self._enter("token_uri", "[5/6] Updating NFT token URI", STATUS_TOKEN_URI)
        self._chain.update_token_uri(self._settings.gateway_url(metadata_cid))

        self._enter("mint", "[6/6] Registering IP on Story", STATUS_MINT)
        mint = self._chain.register_ip(audio_cid, metadata_cid)

        self._step = "done"
        logger.info("✅ Podcast minted: tx=%s ipId=%s", mint["txHash"], mint["ipId"])
        self._sink.notify(self._success_message(mint))
        return PipelineResult.success(mint)

    def _enter(self, step: str, log_line: str, status: str) -> None:
        self._step = step
        logger.info(log_line)
        self._sink.notify(status)

    def _discard(self, audio_path: str) -> None:
        """The local audio is only needed until it is pinned."""
        if not os.path.exists(audio_path):
            return
        try:
            os.remove(audio_path)
        except OSError as e:
            logger.warning("Could not remove %s: %s", audio_path, e)

    def _success_message(self, mint) -> str:
        message = (
            f"✨ Podcast secured on story protocol 🎉 Hash: {mint['txHash']} "
            f"- Ip Id : {mint['ipId']}"
        )
        if self._settings.opensea_collection_url:
            message += (
                "\nCheck OpenSea to view your NFT 🎉: "
                f"{self._settings.opensea_collection_url}"
            )
        return message
