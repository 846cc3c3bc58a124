"""Reaction use cases."""

from .apply_reaction import (
    ApplyReactionRequest,
    ApplyReactionResponse,
    ApplyReactionUseCase,
)

__all__ = ["ApplyReactionRequest", "ApplyReactionResponse", "ApplyReactionUseCase"]
