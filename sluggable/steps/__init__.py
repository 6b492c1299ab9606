"""Slug resolution steps, in the order the service runs them."""

from sluggable.steps.generate import generate_slug
from sluggable.steps.reserved import validate_slug
from sluggable.steps.source import get_slug_source
from sluggable.steps.trigger import needs_slugging
from sluggable.steps.unique import generate_suffix, get_existing_slugs, make_slug_unique

__all__ = [
    "needs_slugging",
    "get_slug_source",
    "generate_slug",
    "validate_slug",
    "get_existing_slugs",
    "make_slug_unique",
    "generate_suffix",
]
