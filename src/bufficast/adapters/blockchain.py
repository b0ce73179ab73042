"""IBlockchain adapter: podcast NFT on the EVM chain, IP registration on Story."""

from typing import Optional

from web3 import Web3

from bufficast.adapters.chain import ChainClient
from bufficast.config import Settings
from bufficast.domain.models import ContentIdentifier, MintResult
from bufficast.logging_utils import get_logger
from bufficast.ports.interfaces import IBlockchain

logger = get_logger(__name__)

PODCAST_NFT_ABI = [
    {
        "type": "function",
        "name": "updateTokenURI",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "newUri", "type": "string"}],
        "outputs": [],
    },
]

# RegistrationWorkflows.mintAndRegisterIp from Story Protocol periphery
REGISTRATION_WORKFLOWS_ABI = [
    {
        "type": "function",
        "name": "mintAndRegisterIp",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "spgNftContract", "type": "address"},
            {"name": "recipient", "type": "address"},
            {
                "name": "ipMetadata",
                "type": "tuple",
                "components": [
                    {"name": "ipMetadataURI", "type": "string"},
                    {"name": "ipMetadataHash", "type": "bytes32"},
                    {"name": "nftMetadataURI", "type": "string"},
                    {"name": "nftMetadataHash", "type": "bytes32"},
                ],
            },
            {"name": "allowDuplicates", "type": "bool"},
        ],
        "outputs": [
            {"name": "ipId", "type": "address"},
            {"name": "tokenId", "type": "uint256"},
        ],
    },
]


class StoryBlockchain(IBlockchain):
    """
    updateTokenURI goes to CONTRACT_ADDRESS on the EVM RPC; the IP asset is
    minted into the SPG collection at CONTRACT_ADDRESS_FLOW on Story.
    """

    def __init__(
        self,
        settings: Settings,
        nft_chain: Optional[ChainClient] = None,
        story_chain: Optional[ChainClient] = None,
    ):
        self._settings = settings
        self._nft_chain = nft_chain
        self._story_chain = story_chain

    @property
    def nft_chain(self) -> ChainClient:
        if self._nft_chain is None:
            self._nft_chain = ChainClient(
                self._settings.evm_rpc_url,
                self._settings.private_key,
                tx_timeout=self._settings.tx_timeout,
            )
        return self._nft_chain

    @property
    def story_chain(self) -> ChainClient:
        if self._story_chain is None:
            self._story_chain = ChainClient(
                self._settings.story_rpc_url,
                self._settings.private_key,
                tx_timeout=self._settings.tx_timeout,
            )
        return self._story_chain

    def update_token_uri(self, uri: str) -> None:
        nft = self.nft_chain.contract(self._settings.contract_address, PODCAST_NFT_ABI)
        logger.info("🔄 Setting token URI to %s", uri)
        self.nft_chain.send(nft.functions.updateTokenURI(uri), label="updateTokenURI")

    def register_ip(
        self,
        audio_cid: ContentIdentifier,
        metadata_cid: ContentIdentifier,
    ) -> MintResult:
        audio_url = self._settings.gateway_url(audio_cid)
        metadata_url = self._settings.gateway_url(metadata_cid)
        ip_metadata = (
            audio_url,
            Web3.keccak(text=audio_url),
            metadata_url,
            Web3.keccak(text=metadata_url),
        )

        workflows = self.story_chain.contract(
            self._settings.story_registration_workflows, REGISTRATION_WORKFLOWS_ABI
        )
        fn = workflows.functions.mintAndRegisterIp(
            Web3.to_checksum_address(self._settings.contract_address_flow),
            self.story_chain.address,
            ip_metadata,
            True,
        )
        # The IP id is only in the return value, so read it from a dry run first
        ip_id, token_id = self.story_chain.simulate(fn)
        tx_hash = self.story_chain.send(fn, label="mintAndRegisterIp")
        logger.info("🔗 Registered IP %s (token %s)", ip_id, token_id)
        return MintResult(txHash=tx_hash, ipId=ip_id)
