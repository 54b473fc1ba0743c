"""Test suite for Convergent.

This package contains unit and integration tests for JSON extraction, the git
helpers, configuration and the CLI. Git tests run against throwaway
repositories created in temporary directories.
"""
