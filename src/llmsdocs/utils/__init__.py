"""Utility helpers for llmsdocs."""
