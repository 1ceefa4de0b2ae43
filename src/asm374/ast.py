'''
dataclases del modelo (Instruction, Field, Address)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .diagnostics import FieldWidthInvariantViolation

# ---- Línea fuente ----

@dataclass(frozen=True)
class Instruction:
    """Instrucción ya separada: mnemónico y operandos crudos (aún sin tipar).

    Una línea vacía o sólo con comentario/etiqueta produce mnemónico "" (ver is_blank).
    """
    mnemonic: str
    operands: Tuple[str, ...] = ()
    line: Optional[int] = None
    text: str = ""

    @property
    def is_blank(self) -> bool:
        return self.mnemonic == ""

BLANK = Instruction(mnemonic="")

# ---- Campos y operandos ----

@dataclass(frozen=True)
class Field:
    """Grupo de bits de ancho fijo dentro de la palabra de 32 bits."""
    width: int
    value: int

    def __post_init__(self):
        if self.width <= 0:
            raise FieldWidthInvariantViolation(f"Ancho de campo inválido: {self.width}")

@dataclass(frozen=True)
class Address:
    """Dirección base+desplazamiento: offset(Rn). Sin registro, base es el campo 0."""
    base: Field
    offset: int
