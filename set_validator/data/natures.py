"""Built-in nature table."""

from typing import Dict, Optional, Tuple

from .ids import to_id
from .schemas import Nature

NATURE_EFFECTS: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    "Adamant": ("atk", "spa"),
    "Bashful": (None, None),
    "Bold": ("def", "atk"),
    "Brave": ("atk", "spe"),
    "Calm": ("spd", "atk"),
    "Careful": ("spd", "spa"),
    "Docile": (None, None),
    "Gentle": ("spd", "def"),
    "Hardy": (None, None),
    "Hasty": ("spe", "def"),
    "Impish": ("def", "spa"),
    "Jolly": ("spe", "spa"),
    "Lax": ("def", "spd"),
    "Lonely": ("atk", "def"),
    "Mild": ("spa", "def"),
    "Modest": ("spa", "atk"),
    "Naive": ("spe", "spd"),
    "Naughty": ("atk", "spd"),
    "Quiet": ("spa", "spe"),
    "Quirky": (None, None),
    "Rash": ("spa", "spd"),
    "Relaxed": ("def", "spe"),
    "Sassy": ("spd", "spe"),
    "Serious": (None, None),
    "Timid": ("spe", "atk"),
}


class NatureTable:
    """Nature lookup; natures do not vary by generation."""

    def __init__(self, natures: Optional[Dict[str, Nature]] = None):
        if natures is None:
            natures = {
                to_id(name): Nature(name=name, plus=plus, minus=minus)
                for name, (plus, minus) in NATURE_EFFECTS.items()
            }
        self._natures = natures

    def get(self, name: Optional[str]) -> Optional[Nature]:
        if not name:
            return None
        return self._natures.get(to_id(name))

    def __len__(self) -> int:
        return len(self._natures)

    def __contains__(self, name: str) -> bool:
        return to_id(name) in self._natures
