"""Tests - ntt_fps test suite, run via pytest."""
