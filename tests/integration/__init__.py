"""
Integration tests for the Chaindoc SDK.

Run against the real Chaindoc API (staging by default). Skipped unless
CHAINDOC_LIVE_SECRET_KEY is set.
"""
