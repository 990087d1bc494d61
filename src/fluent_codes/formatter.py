"""
Render accumulated tokens into the final code string.
"""

from typing import Sequence


def render(tokens: Sequence[str], joiner: str) -> str:
    """
    Join tokens in order with the joiner between consecutive tokens.

    No tokens renders to "", a single token renders to itself.
    """
    return joiner.join(tokens)
