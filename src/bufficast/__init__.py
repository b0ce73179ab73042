"""
BuffiCast – chat messages in, Chainlink-randomized podcast minted on Story out.

  from bufficast.action import GeneratePodcastAction
  action = GeneratePodcastAction()          # Settings.from_env()
  state = {}
  if action.validate(message, state):
      action.handler(message, state, callback=send_reply)

For other vendors: implement the ports in bufficast.ports and pass them via
GeneratePodcastAction(adapters_factory=...).
"""

__version__ = "0.1.0"
