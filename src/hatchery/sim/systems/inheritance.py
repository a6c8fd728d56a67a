"""Fixed cross-breeding table for offspring traits.

Mixing a primary trait with ``C`` reverts to the primary trait instead of
producing ``C``; only ``A`` with ``B`` yields ``C``.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..core.organism import Trait

_A, _B, _C = Trait.A, Trait.B, Trait.C

INHERITANCE_TABLE: Dict[Tuple[Trait, Trait], Trait] = {
    (_A, _A): _A,
    (_A, _B): _C,
    (_A, _C): _A,
    (_B, _A): _C,
    (_B, _B): _B,
    (_B, _C): _B,
    (_C, _A): _A,
    (_C, _B): _B,
    (_C, _C): _C,
}


def inherit_trait(trait_a: object, trait_b: object) -> Trait:
    try:
        return INHERITANCE_TABLE.get((trait_a, trait_b), Trait.NONE)
    except TypeError:
        # Unhashable input is just another unrecognised trait.
        return Trait.NONE
