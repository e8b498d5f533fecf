"""Unit tests for safemove.

This directory contains isolated unit tests for individual functions:
path classification, name generation, the move primitive and config.

For integration tests that run the CLI, see tests/integration/.
"""
