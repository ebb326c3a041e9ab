"""Test package for llming-envelope."""
