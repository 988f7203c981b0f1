"""Shared test utilities for bktreex."""

from .datasets import perturb_word, random_words

__all__ = ["random_words", "perturb_word"]
