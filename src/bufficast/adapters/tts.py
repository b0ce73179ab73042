"""ISpeechSynthesizer adapter using ElevenLabs."""

import os
from datetime import datetime
from typing import Optional

from elevenlabs.client import ElevenLabs

from bufficast.config import Settings
from bufficast.logging_utils import get_logger
from bufficast.ports.interfaces import ISpeechSynthesizer

logger = get_logger(__name__)


class ElevenLabsSpeech(ISpeechSynthesizer):
    """Writes the synthesized mp3 into the temp dir and returns its path."""

    def __init__(self, settings: Settings, client: Optional[ElevenLabs] = None):
        self._settings = settings
        self._client = client

    @property
    def client(self) -> ElevenLabs:
        if self._client is None:
            self._client = ElevenLabs(api_key=self._settings.elevenlabs_api_key)
        return self._client

    def synthesize(self, text: str) -> str:
        os.makedirs(self._settings.temp_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filepath = os.path.join(self._settings.temp_dir, f"podcast_{timestamp}.mp3")

        logger.info(
            "🔊 Using ElevenLabs voice %s, model %s",
            self._settings.elevenlabs_voice_id,
            self._settings.elevenlabs_model_id,
        )
        # convert() streams the audio back in chunks
        response = self.client.text_to_speech.convert(
            text=text,
            voice_id=self._settings.elevenlabs_voice_id,
            model_id=self._settings.elevenlabs_model_id,
            output_format="mp3_44100_128",
        )

        size = 0
        try:
            with open(filepath, "wb") as f:
                for chunk in response:
                    if chunk:
                        f.write(chunk)
                        size += len(chunk)
        except Exception:
            # no truncated mp3 left behind
            if os.path.exists(filepath):
                os.remove(filepath)
            raise

        logger.info("Generated audio: %s (%d bytes)", filepath, size)
        return filepath
