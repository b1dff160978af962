"""
Core Package

Exchange-agnostic logic:
- ExchangeDescriptor: Abstract contract every exchange implements
- ExchangeManager: Registry of exchange descriptors
- normalize: Converts decimal-looking strings to floats
- RequestBuilder / ResponseDispatcher: Request and response sides of a call
- TickerClient: Async orchestrator tying them together
"""
