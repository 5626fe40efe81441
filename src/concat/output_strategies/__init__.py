"""Output strategies for the concatenated document."""

from .base_strategy import OutputStrategy
from .text_strategy import TextOutputStrategy
from .xml_strategy import XMLOutputStrategy

__all__ = ["OutputStrategy", "TextOutputStrategy", "XMLOutputStrategy", "create_strategy"]


def create_strategy(plain_text: bool) -> OutputStrategy:
    """Create the strategy for the requested output mode.

    Args:
        plain_text: True for plain-text output, False for the default XML output.

    Returns:
        A fresh output strategy instance.
    """
    return TextOutputStrategy() if plain_text else XMLOutputStrategy()
