"""Cats, owners, and the two ways of deciding who gets purred at.

Runtime polymorphism: ``Cat.purr_for_any`` accepts any owner value and
decides by inspecting it.  The shared default carries a copy-paste defect
(``"hisspu"``) and ``FeralCat`` overrides it to hiss unconditionally, so
three of the four pairs produce an unwanted answer.

Compile-time polymorphism: every cat is generic over the one owner type it
accepts.  ``purr_static`` is bound to ``Human`` owners, so a type checker
rejects every pair except ``(SpoiledIndoorCat, Human)``.  ``Pairing``
repeats that restriction for unchecked callers: an invalid pair cannot be
constructed, and a constructed pair cannot fail to purr.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import ClassVar, Literal

from designdemos.domain.types import CatVariant, DispatchResult, OwnerVariant


@dataclass(frozen=True)
class Human:
    """The only valid cat owner."""


@dataclass(frozen=True)
class NoOwner:
    """Unit type: a single value meaning "nobody"."""


NO_OWNER = NoOwner()


class UnrepresentablePairingError(ValueError):
    """Raised when a cat is paired with an owner type it does not declare."""


class Cat[O]:
    """A cat parameterized by the owner type it accepts."""

    owner_type: ClassVar[type]
    name: ClassVar[str]

    def purr_for_any(self, other: object) -> str:
        """Default runtime rule, inherited unless overridden.

        The owner's type is erased here, so the decision inspects the value.
        """
        return DispatchResult.PURR if isinstance(other, Human) else DispatchResult.HISSPU

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))


class SpoiledIndoorCat(Cat[Human]):
    """Keeps the inherited runtime rule; owned by a ``Human``."""

    owner_type = Human
    name = "Spoiled"


class FeralCat(Cat[NoOwner]):
    """Overrides the runtime rule; has no owner at all."""

    owner_type = NoOwner
    name = "Feral"

    def purr_for_any(self, other: object) -> str:
        return DispatchResult.HISS


CAT_TYPES: dict[CatVariant, type[Cat[Human]] | type[Cat[NoOwner]]] = {
    CatVariant.SPOILED_INDOOR: SpoiledIndoorCat,
    CatVariant.FERAL: FeralCat,
}

OWNERS: dict[OwnerVariant, Human | NoOwner] = {
    OwnerVariant.HUMAN: Human(),
    OwnerVariant.NO_OWNER: NO_OWNER,
}

OWNER_LABELS: dict[OwnerVariant, str] = {
    OwnerVariant.HUMAN: "with Human",
    OwnerVariant.NO_OWNER: "with no owner",
}


def make_cat(variant: CatVariant) -> Cat[Human] | Cat[NoOwner]:
    """Instantiate the cat class for *variant*."""
    return CAT_TYPES[variant]()


def make_owner(variant: OwnerVariant) -> Human | NoOwner:
    """Return the owner value for *variant*."""
    return OWNERS[variant]


# --- Runtime strategy ---


def purr_runtime(cat: CatVariant, owner: OwnerVariant) -> DispatchResult:
    """Ask the cat to purr for any owner and report what it actually did.

    Total over all four pairs; never raises.
    """
    return DispatchResult(make_cat(cat).purr_for_any(make_owner(owner)))


# --- Compile-time strategy ---


@dataclass(frozen=True)
class Pairing[H: Human]:
    """A cat together with an owner of exactly the type the cat declares.

    Only ``Human``-owned cats can be paired.
    """

    cat: Cat[H]
    owner: H

    def __post_init__(self) -> None:
        declared = type(self.cat).owner_type
        if type(self.owner) is not declared:
            msg = (
                f"{type(self.cat).__name__} accepts {declared.__name__} owners, "
                f"not {type(self.owner).__name__}"
            )
            raise UnrepresentablePairingError(msg)
        if not issubclass(declared, Human):
            msg = f"{type(self.cat).__name__} has no owner to purr for"
            raise UnrepresentablePairingError(msg)

    def purr(self) -> Literal[DispatchResult.PURR]:
        return DispatchResult.PURR


def purr_static[H: Human](cat: Cat[H], owner: H) -> Literal[DispatchResult.PURR]:
    """Purr for the cat's declared owner.  There is no hissing branch."""
    return Pairing(cat, owner).purr()


def pair(cat: CatVariant, owner: OwnerVariant) -> Pairing[Human]:
    """Build a ``Pairing`` from variant names.

    Raises:
        UnrepresentablePairingError: For every pair a type checker would reject.
    """
    return Pairing(make_cat(cat), make_owner(owner))  # type: ignore[arg-type]


def accepted_pairings() -> list[tuple[CatVariant, OwnerVariant]]:
    """Every ``(cat, owner)`` combination that can be constructed."""
    accepted: list[tuple[CatVariant, OwnerVariant]] = []
    for cat, owner in itertools.product(CatVariant, OwnerVariant):
        try:
            pair(cat, owner)
        except UnrepresentablePairingError:
            continue
        accepted.append((cat, owner))
    return accepted
