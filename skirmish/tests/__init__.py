"""Tests for the Skirmish engine."""
