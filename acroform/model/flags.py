"""Field flag ("Ff") bit positions from the PDF interactive form tables."""

from __future__ import annotations

FLAG_MASK = 0xFFFFFFFF

# Button fields
NO_TOGGLE_TO_OFF = 1 << 14
RADIO = 1 << 15
PUSHBUTTON = 1 << 16
RADIOS_IN_UNISON = 1 << 25

# Choice fields
COMBO = 1 << 17
EDIT = 1 << 18
SORT = 1 << 19
MULTI_SELECT = 1 << 21
DO_NOT_SPELL_CHECK = 1 << 22
COMMIT_ON_SEL_CHANGE = 1 << 26


def to_flags(value: int) -> int:
    # Negative values come from writers that store the mask as a signed int.
    return value & FLAG_MASK


def is_radio(flags: int) -> bool:
    return bool(flags & (RADIO | NO_TOGGLE_TO_OFF))


def is_pushbutton(flags: int) -> bool:
    return bool(flags & PUSHBUTTON)


def is_combo(flags: int) -> bool:
    return bool(flags & COMBO)


def is_editable(flags: int) -> bool:
    return bool(flags & EDIT)


def is_multiselect(flags: int) -> bool:
    return bool(flags & MULTI_SELECT)
