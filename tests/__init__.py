"""Test suite for the marketing dashboard core."""
