"""
Test Suite

Structure:
- tests/unit/: Tests for individual components (normalizer, descriptors,
  registry, request builder, dispatcher, ticker client, configuration)

Uses pytest with pytest-asyncio for testing async functionality. HTTP is
mocked; no test touches the network.
"""
