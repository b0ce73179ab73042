"""IRandomnessOracle adapter backed by a Chainlink VRF consumer contract."""

import time
from typing import Callable, List, Optional, Sequence

from web3 import Web3
from web3.logs import DISCARD

from bufficast.adapters.chain import ChainClient
from bufficast.config import Settings
from bufficast.domain.models import RandomParameters
from bufficast.errors import OracleTimeoutError, TransactionFailedError
from bufficast.logging_utils import get_logger
from bufficast.ports.interfaces import IRandomnessOracle

logger = get_logger(__name__)

VRF_CONSUMER_ABI = [
    {
        "type": "function",
        "name": "requestRandomWords",
        "stateMutability": "nonpayable",
        "inputs": [],
        "outputs": [{"name": "requestId", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "getRequestStatus",
        "stateMutability": "view",
        "inputs": [{"name": "_requestId", "type": "uint256"}],
        "outputs": [
            {"name": "fulfilled", "type": "bool"},
            {"name": "randomWords", "type": "uint256[]"},
        ],
    },
    {
        "type": "event",
        "name": "RequestSent",
        "anonymous": False,
        "inputs": [
            {"name": "requestId", "type": "uint256", "indexed": False},
            {"name": "numWords", "type": "uint32", "indexed": False},
        ],
    },
]

TONES = ["enthusiastic", "calm", "humorous", "dramatic", "analytical", "optimistic"]
PACES = ["slow", "moderate", "fast"]
HOST_PERSONAS = [
    "seasoned crypto journalist",
    "excited hackathon builder",
    "skeptical economist",
    "friendly community manager",
    "late-night radio DJ",
]
HOOKS = ["question", "bold statement", "statistic", "anecdote"]


def random_words_to_parameters(request_id: int, words: Sequence[int]) -> RandomParameters:
    """Map VRF words onto podcast knobs. Short word lists wrap around."""
    if not words:
        raise ValueError(f"VRF request {request_id} returned no random words")

    def pick(index: int, options: List[str]) -> str:
        return options[words[index % len(words)] % len(options)]

    return {
        "request_id": str(request_id),
        "tone": pick(0, TONES),
        "pace": pick(1, PACES),
        "host_persona": pick(2, HOST_PERSONAS),
        "hook": pick(3, HOOKS),
        "seed": str(words[0]),
    }


def request_id_from_receipt(consumer, receipt) -> int:
    """The id the coordinator assigned, taken from our own RequestSent log."""
    events = consumer.events.RequestSent().process_receipt(receipt, errors=DISCARD)
    if not events:
        raise TransactionFailedError(
            Web3.to_hex(receipt["transactionHash"]), "no RequestSent event in receipt"
        )
    return events[0]["args"]["requestId"]


class ChainlinkVRFOracle(IRandomnessOracle):
    """Sends requestRandomWords() and polls getRequestStatus() until fulfilled."""

    def __init__(
        self,
        settings: Settings,
        chain: Optional[ChainClient] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._settings = settings
        self._chain = chain
        self._sleep = sleep
        self._clock = clock

    @property
    def chain(self) -> ChainClient:
        if self._chain is None:
            self._chain = ChainClient(
                self._settings.evm_rpc_url,
                self._settings.private_key,
                tx_timeout=self._settings.tx_timeout,
            )
        return self._chain

    def request_random_parameters(self) -> RandomParameters:
        consumer = self.chain.contract(self._settings.contract_address, VRF_CONSUMER_ABI)

        receipt = self.chain.transact(consumer.functions.requestRandomWords(), label="VRF request")
        request_id = request_id_from_receipt(consumer, receipt)
        logger.info("🎲 VRF request %s submitted, waiting for fulfillment", request_id)

        words = self._wait_for_words(consumer, request_id)
        return random_words_to_parameters(request_id, words)

    def _wait_for_words(self, consumer, request_id: int) -> List[int]:
        started = self._clock()
        while True:
            fulfilled, words = consumer.functions.getRequestStatus(request_id).call()
            if fulfilled:
                logger.info("VRF request %s fulfilled with %d word(s)", request_id, len(words))
                return list(words)
            waited = self._clock() - started
            if waited >= self._settings.vrf_timeout:
                raise OracleTimeoutError(request_id, waited)
            self._sleep(self._settings.vrf_poll_interval)
