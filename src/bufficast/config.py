import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

# Chain endpoints
EVM_RPC_URL = "https://ethereum-sepolia-rpc.publicnode.com"
STORY_RPC_URL = "https://aeneid.storyrpc.io"
# Story Protocol RegistrationWorkflows on the Aeneid testnet
STORY_REGISTRATION_WORKFLOWS = "0xbe39E1C756e921BD25DF86e7AAa31106d1eb0424"

# Anthropic
ANTHROPIC_MODEL = "claude-3-haiku-20240307"
ANTHROPIC_MAX_TOKENS = 1024

# ElevenLabs
# - "21m00Tcm4TlvDq8ikWAM" (Rachel) - Female, professional, clear
# - "pNInz6obpgDQGcFmaJgB" (Adam) - Male, deep
ELEVENLABS_VOICE_ID = "21m00Tcm4TlvDq8ikWAM"
ELEVENLABS_MODEL_ID = "eleven_multilingual_v2"

# IPFS
IPFS_GATEWAY = "https://ipfs.io/ipfs"
PODCAST_COVER_IMAGE = "https://ipfs.io/ipfs/bafkreifqzkq7tzppc22fa2f52sg2cruvomne2tp34yhdnx3ub2xw24b52m"
OPENSEA_COLLECTION_URL = "https://testnets.opensea.io/collection/podcast-chapter-1"

# Timeouts (seconds)
VRF_TIMEOUT = 300
VRF_POLL_INTERVAL = 5
TX_TIMEOUT = 180
HTTP_TIMEOUT = 120

TEMP_DIR = "temp"

# Env var name -> Settings attribute, for everything the pipeline cannot run without
REQUIRED_ENV = {
    "EVM_PRIVATE_KEY": "private_key",
    "CONTRACT_ADDRESS": "contract_address",
    "CONTRACT_ADDRESS_FLOW": "contract_address_flow",
    "ANTHROPIC_API_KEY": "anthropic_api_key",
    "ELEVENLABS_XI_API_KEY": "elevenlabs_api_key",
    "PINATA_JWT": "pinata_jwt",
}


def _env(key: str) -> Optional[str]:
    """Blank values count as missing."""
    value = os.getenv(key, "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, read once at startup and shared read-only
    by every pipeline run.
    """

    private_key: Optional[str] = None
    contract_address: Optional[str] = None
    contract_address_flow: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    elevenlabs_api_key: Optional[str] = None
    pinata_jwt: Optional[str] = None

    evm_rpc_url: str = EVM_RPC_URL
    story_rpc_url: str = STORY_RPC_URL
    story_registration_workflows: str = STORY_REGISTRATION_WORKFLOWS
    anthropic_model: str = ANTHROPIC_MODEL
    anthropic_max_tokens: int = ANTHROPIC_MAX_TOKENS
    elevenlabs_voice_id: str = ELEVENLABS_VOICE_ID
    elevenlabs_model_id: str = ELEVENLABS_MODEL_ID
    ipfs_gateway: str = IPFS_GATEWAY
    cover_image: str = PODCAST_COVER_IMAGE
    opensea_collection_url: str = OPENSEA_COLLECTION_URL
    vrf_timeout: float = VRF_TIMEOUT
    vrf_poll_interval: float = VRF_POLL_INTERVAL
    tx_timeout: float = TX_TIMEOUT
    http_timeout: float = HTTP_TIMEOUT
    temp_dir: str = TEMP_DIR
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment (and `.env`, loaded at import)."""
        required = {attr: _env(key) for key, attr in REQUIRED_ENV.items()}
        return cls(
            **required,
            evm_rpc_url=os.getenv("EVM_RPC_URL", EVM_RPC_URL),
            story_rpc_url=os.getenv("STORY_RPC_URL", STORY_RPC_URL),
            story_registration_workflows=os.getenv(
                "STORY_REGISTRATION_WORKFLOWS", STORY_REGISTRATION_WORKFLOWS
            ),
            anthropic_model=os.getenv("ANTHROPIC_MODEL", ANTHROPIC_MODEL),
            anthropic_max_tokens=int(os.getenv("ANTHROPIC_MAX_TOKENS", ANTHROPIC_MAX_TOKENS)),
            elevenlabs_voice_id=os.getenv("ELEVENLABS_VOICE_ID", ELEVENLABS_VOICE_ID),
            elevenlabs_model_id=os.getenv("ELEVENLABS_MODEL_ID", ELEVENLABS_MODEL_ID),
            ipfs_gateway=os.getenv("IPFS_GATEWAY", IPFS_GATEWAY).rstrip("/"),
            cover_image=os.getenv("PODCAST_COVER_IMAGE", PODCAST_COVER_IMAGE),
            opensea_collection_url=os.getenv("OPENSEA_COLLECTION_URL", OPENSEA_COLLECTION_URL),
            vrf_timeout=float(os.getenv("VRF_TIMEOUT", VRF_TIMEOUT)),
            vrf_poll_interval=float(os.getenv("VRF_POLL_INTERVAL", VRF_POLL_INTERVAL)),
            tx_timeout=float(os.getenv("TX_TIMEOUT", TX_TIMEOUT)),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", HTTP_TIMEOUT)),
            temp_dir=os.getenv("TEMP_DIR", TEMP_DIR),
            debug=os.getenv("DEBUG", "0") == "1",
        )

    def missing(self) -> List[str]:
        """Names of required env vars that are not set (empty list = good to go)."""
        return [key for key, attr in REQUIRED_ENV.items() if not getattr(self, attr)]

    def gateway_url(self, cid: str) -> str:
        return f"{self.ipfs_gateway}/{cid}"
