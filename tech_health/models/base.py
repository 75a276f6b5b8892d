"""
Shared Pydantic base classes.

JSON documents use camelCase field names (``teamInfo``, ``pulseScores``,
``averageScore`` ...) while Python code uses snake_case attributes.
Both spellings are accepted on input; dumps use the camelCase aliases
when called with ``by_alias=True``.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Mutable model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FrozenCamelModel(BaseModel):
    """Immutable model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
