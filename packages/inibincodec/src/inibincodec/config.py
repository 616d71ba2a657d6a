# packages/inibincodec/src/inibincodec/config.py
from __future__ import annotations
from dataclasses import dataclass
import math

__all__ = ["ParseConfig", "SCALED_FLOAT_FACTOR", "DEFAULT_CONFIG"]

#: Multiplier applied to each byte of the "scaled" sections (bits 2, 6, 8, 10).
#: decoded = float32(byte) * float32(SCALED_FLOAT_FACTOR)
SCALED_FLOAT_FACTOR: float = 0.1


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """
    Configuration publique du décodeur de format inibin.

    Champs
    ------
    scale : float, default=SCALED_FLOAT_FACTOR
        Facteur appliqué à chaque octet des sections "scaled" (float et
        vecteurs 2/3/4). Doit être fini et > 0.
    strict_utf8 : bool, default=True
        Si True, une chaîne non UTF-8 lève `InvalidStringError` et la totalité
        du parse échoue. Si False, les octets invalides sont remplacés (U+FFFD).

    Notes
    -----
    - Dataclass **immuable** : une même config peut être partagée entre
      plusieurs appels à `parse`.
    - Aucune conversion n'est appliquée : les validations lèvent `ValueError`.
    """

    scale: float = SCALED_FLOAT_FACTOR
    strict_utf8: bool = True

    def __post_init__(self) -> None:
        if not (math.isfinite(self.scale) and self.scale > 0):
            raise ValueError("ParseConfig.scale must be a finite value > 0")


DEFAULT_CONFIG = ParseConfig()
