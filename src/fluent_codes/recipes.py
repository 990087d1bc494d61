"""
Preset recipes: named, fixed sequences of builder calls.

Built-in recipes live in RECIPES. More can be declared under `recipes:` in
the settings file; a settings recipe with a built-in name replaces it.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .builder import FluentCodes
from .config import FluentCodesSettings, get_settings
from .connection import StoreFactory
from .digits import SIX_DIGITS_STEP
from .models import WordCategory

logger = logging.getLogger(__name__)

RecipeStep = Union[WordCategory, str]

# Recipe registry - add new presets here
RECIPES: Dict[str, Tuple[RecipeStep, ...]] = {
    "four_words": (
        WordCategory.ADJECTIVE,
        WordCategory.VERB,
        WordCategory.NOUN,
        WordCategory.ADJECTIVE,
    ),
    "three_words_and_six_digits": (
        WordCategory.ADJECTIVE,
        WordCategory.VERB,
        WordCategory.NOUN,
        SIX_DIGITS_STEP,
    ),
}


def _parse_steps(steps: Sequence[str]) -> Tuple[RecipeStep, ...]:
    return tuple(
        step if step == SIX_DIGITS_STEP else WordCategory.parse(step)
        for step in steps
    )


def _all_recipes(settings: Optional[FluentCodesSettings]) -> Dict[str, Tuple[RecipeStep, ...]]:
    recipes = dict(RECIPES)
    if settings is not None:
        for name, steps in settings.recipes.items():
            recipes[name] = _parse_steps(steps)
    return recipes


def get_recipe(
    name: str,
    settings: Optional[FluentCodesSettings] = None,
) -> Tuple[RecipeStep, ...]:
    """Get the steps of a recipe by name."""
    recipes = _all_recipes(settings)
    if name not in recipes:
        available = ", ".join(sorted(recipes.keys()))
        raise ValueError(f"Unknown recipe: {name}. Available: {available}")
    return recipes[name]


def list_recipes(settings: Optional[FluentCodesSettings] = None) -> List[str]:
    """List available recipe names."""
    return sorted(_all_recipes(settings).keys())


def apply_step(codes: FluentCodes, step: RecipeStep) -> FluentCodes:
    """Run one recipe step on a builder."""
    if step == SIX_DIGITS_STEP:
        return codes.six_digits()
    return codes.word(step)


def generate(
    name: str,
    store_factory: Optional[StoreFactory] = None,
    settings: Optional[FluentCodesSettings] = None,
    random_seed: Optional[int] = None,
) -> str:
    """
    Build a code from a named recipe.

    The builder starts from the settings' defaults and is closed before
    returning.

    Args:
        name: Recipe name (see list_recipes())
        store_factory: Passed to FluentCodes
        settings: Settings to use (uses get_settings() if None)
        random_seed: Seed for reproducibility

    Returns:
        The rendered code

    Raises:
        ValueError: If the recipe is unknown
        NoMatchingWord, StoreUnavailable: From the underlying word calls
    """
    if settings is None:
        settings = get_settings()
    steps = get_recipe(name, settings)

    with FluentCodes(
        store_factory=store_factory,
        settings=settings,
        random_seed=random_seed,
    ) as codes:
        for step in steps:
            apply_step(codes, step)
        code = codes.to_string()

    logger.debug("Generated %s code with %d tokens", name, len(steps))
    return code


def four_words(**kwargs) -> str:
    """adjective-verb-noun-adjective, e.g. fluffy-vacuum-misuse-deadly"""
    return generate("four_words", **kwargs)


def three_words_and_six_digits(**kwargs) -> str:
    """adjective-verb-noun-NNNNNN, e.g. calmer-taints-fourty-887709"""
    return generate("three_words_and_six_digits", **kwargs)
