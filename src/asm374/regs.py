'''
registros R0..R15: validación y campo de 4 bits
'''

from __future__ import annotations
import re

from .ast import Field
from .isa import REG_BITS
from .diagnostics import MalformedRegister

NUM_REGS = 1 << REG_BITS

REG_RE = re.compile(r"^[Rr]([0-9]+)$")

# Campo de base "sin registro" para direcciones sin paréntesis
NO_BASE = Field(REG_BITS, 0)

def reg_num(token: str) -> int:
    """Devuelve el índice numérico 0..15 del registro o lanza MalformedRegister."""
    t = token.strip()
    m = REG_RE.match(t)
    if not m:
        raise MalformedRegister(f"Registro inválido: '{token}' (se esperaba R0..R15)")
    n = int(m.group(1))
    if not 0 <= n < NUM_REGS:
        raise MalformedRegister(f"Registro fuera de rango: '{token}' (sólo R0..R15)")
    return n

def register_field(token: str) -> Field:
    """Campo de 4 bits con el índice del registro."""
    return Field(REG_BITS, reg_num(token))
