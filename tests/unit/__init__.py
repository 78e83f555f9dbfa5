"""
Unit tests for the Chaindoc SDK.

Test individual components in isolation, with httpx.MockTransport in place
of the network:
- Retry policy, classification and attempt bookkeeping
- HTTP executor (retry loop, timeouts, response decoding, uploads)
- Configuration, exceptions and logging
- Resource bindings and payload models
"""
