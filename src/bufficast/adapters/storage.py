"""IContentStorage adapter pinning to IPFS through Pinata."""

import json
import os
from typing import Any, Dict, Optional

import requests

from bufficast.config import Settings
from bufficast.domain.models import ContentIdentifier, PodcastMetadata
from bufficast.errors import StorageUploadError
from bufficast.logging_utils import get_logger
from bufficast.ports.interfaces import IContentStorage

logger = get_logger(__name__)

PINATA_API_URL = "https://api.pinata.cloud"


class PinataStorage(IContentStorage):
    """pinFileToIPFS for audio, pinJSONToIPFS for metadata."""

    def __init__(
        self,
        settings: Settings,
        session: Optional[requests.Session] = None,
        base_url: str = PINATA_API_URL,
    ):
        self._settings = settings
        self._session = session or requests.Session()
        self._base_url = base_url.rstrip("/")

    @property
    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._settings.pinata_jwt}"}

    def upload_file(self, path: str) -> ContentIdentifier:
        name = os.path.basename(path)
        with open(path, "rb") as f:
            response = self._session.post(
                f"{self._base_url}/pinning/pinFileToIPFS",
                headers=self._headers,
                files={"file": (name, f, "audio/mpeg")},
                data={"pinataMetadata": json.dumps({"name": name})},
                timeout=self._settings.http_timeout,
            )
        return self._cid(response, name)

    def upload_json(self, metadata: PodcastMetadata) -> ContentIdentifier:
        name = metadata.get("name", "metadata")
        response = self._session.post(
            f"{self._base_url}/pinning/pinJSONToIPFS",
            headers={**self._headers, "Content-Type": "application/json"},
            json={"pinataContent": metadata, "pinataMetadata": {"name": f"{name} metadata"}},
            timeout=self._settings.http_timeout,
        )
        return self._cid(response, name)

    def _cid(self, response: requests.Response, name: str) -> ContentIdentifier:
        response.raise_for_status()
        body: Dict[str, Any] = response.json()
        cid = body.get("IpfsHash")
        if not cid:
            raise StorageUploadError(f"Pinata response for {name} has no IpfsHash: {body}")
        logger.info("📌 Pinned %s -> %s", name, cid)
        return cid
