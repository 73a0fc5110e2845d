"""Unit tests for the football translation engine.

Tests use pytest with asyncio support; provider HTTP calls are replaced with mocks via monkeypatch.
"""
