"""Integration tests for safemove CLI commands.

These tests use Click's CliRunner and pytest's tmp_path fixture to run
commands against a real filesystem.
"""
