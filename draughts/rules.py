from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rules:
    # A side with any capture available may not make a simple move.
    mandatory_capture: bool = True
    # A man crossing its promotion row mid-chain is crowned on the spot and
    # finishes the chain with king range.
    promote_mid_chain: bool = False


DEFAULT_RULES = Rules()
