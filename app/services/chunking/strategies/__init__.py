"""Chunking strategy implementations and the name → function registry."""

from typing import Callable

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.strategies.fixed_window import fixed_window_chunks
from app.services.chunking.strategies.paragraph import paragraph_chunks
from app.services.chunking.strategies.sentence_boundary import sentence_chunks

StrategyFn = Callable[[str, ChunkingConfig], list[str]]

DEFAULT_STRATEGY = "sentence"

STRATEGY_REGISTRY: dict[str, StrategyFn] = {
    "sentence": sentence_chunks,
    "paragraph": paragraph_chunks,
    "fixed": fixed_window_chunks,
}


def resolve_strategy_name(strategy_name: str | None) -> str:
    """Return strategy_name if registered, else the default ('sentence')."""
    if strategy_name in STRATEGY_REGISTRY:
        return strategy_name
    return DEFAULT_STRATEGY


def get_strategy_fn(strategy_name: str | None) -> StrategyFn:
    """Return the chunking function for the given strategy name. Unknown names fall back to sentence."""
    return STRATEGY_REGISTRY[resolve_strategy_name(strategy_name)]
