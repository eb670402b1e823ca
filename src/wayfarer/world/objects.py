from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from ..utils.text import normalize

if TYPE_CHECKING:
    from .interaction import InteractionContext

logger = logging.getLogger(__name__)


class Behavior(Protocol):
    """Anything callable with an InteractionContext.

    Plain functions and the declarative effects in ``wayfarer.world.effects``
    both satisfy this protocol, so objects never need subclassing.
    """

    def __call__(self, ctx: "InteractionContext") -> None:  # pragma: no cover - type contract
        ...


@dataclass
class AreaObject:
    """A named, described thing in a room that does something when used.

    Attributes:
        name: Display name. Lookups use its normalized form (trimmed, lowercased).
        description: Free text shown by ``examine``.
        behavior: Effect run on interaction.
    """

    name: str
    description: str
    behavior: Behavior = field(repr=False)

    def __post_init__(self) -> None:
        if not normalize(self.name):
            raise ValueError("AreaObject.name must be a non-empty string")

    def __str__(self) -> str:
        return f"{self.name}\n\n{self.description}"

    @property
    def key(self) -> str:
        return normalize(self.name)

    def interact(self, ctx: "InteractionContext") -> None:
        logger.debug("Interacting with %r (room id=%d)", self.name, ctx.room_id)
        self.behavior(ctx)
