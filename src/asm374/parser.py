# src/asm374/parser.py
from __future__ import annotations
import re
from dataclasses import replace
from typing import List, Optional

from .lexer import (
    strip_comment,
    split_label,
    split_mnemonic_operands,
    split_operands,
)
from .ast import Instruction, Address, BLANK
from .regs import register_field, NO_BASE
from .diagnostics import MalformedImmediate, MalformedRegister

HEX_PREFIX = "$"
HEX_DIGITS_RE = re.compile(r"^[0-9a-fA-F]+$")
DEC_IMM_RE    = re.compile(r"^-?[0-9]+$")
ADDR_RE       = re.compile(r"^(?P<off>[^(]*)\(\s*(?P<base>[^)]*?)\s*\)$")

def immediate(token: str) -> int:
    """Valor con signo de un literal decimal ('-2', '17') o hexadecimal ('$FF').

    El hex es siempre una magnitud sin signo; el signo sólo viene del '-' decimal.
    """
    t = token.strip()
    if t.startswith(HEX_PREFIX):
        digits = t[len(HEX_PREFIX):]
        if not HEX_DIGITS_RE.match(digits):
            raise MalformedImmediate(f"Inmediato hexadecimal inválido: '{token}'",
                                     hint="dígitos 0-9, A-F tras '$'")
        return int(digits, 16)
    if not DEC_IMM_RE.match(t):
        raise MalformedImmediate(f"Inmediato inválido: '{token}'", hint="decimal (p.ej. -2) o $hex (p.ej. $FF)")
    return int(t, 10)

def address_operand(token: str) -> Address:
    """Resuelve 'offset(Rn)' o un 'offset' sin base (base = campo 0)."""
    t = token.strip()
    if "(" not in t:
        return Address(base=NO_BASE, offset=immediate(t))
    m = ADDR_RE.match(t)
    if not m:
        raise MalformedRegister(f"Operando de dirección inválido: '{token}' (esperado offset(Rn))")
    off_raw = m.group("off").strip()
    base = register_field(m.group("base"))
    # '(Rn)' sin desplazamiento equivale a '0(Rn)'
    offset = immediate(off_raw) if off_raw else 0
    return Address(base=base, offset=offset)

def parse_line(raw: str, *, line: Optional[int] = None) -> Instruction:
    """Separa una línea en mnemónico y operandos crudos.

    Nunca falla: una línea vacía, sólo comentario o sólo etiqueta da BLANK
    (con su número de línea y texto).
    """
    text = raw.rstrip("\r\n")
    core = strip_comment(text)
    _label, core = split_label(core)
    mnemonic, op_str = split_mnemonic_operands(core)
    if not mnemonic:
        return replace(BLANK, line=line, text=text)
    return Instruction(mnemonic=mnemonic, operands=tuple(split_operands(op_str)),
                       line=line, text=text)

def parse(text: str) -> List[Instruction]:
    """
    Devuelve una Instruction por línea del texto (numeradas desde 1), incluidas
    las líneas en blanco, para que el listado conserve las posiciones.

    Reglas:
      - Comentarios: ';' hasta fin de línea.
      - Etiquetas: todo hasta el primer ':' se descarta (no hay símbolos).
      - Instrucciones: mnemónico + operandos separados por ','.
      - Líneas: sólo el salto de línea LF separa líneas; el CR final lo quita parse_line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [parse_line(raw, line=lineno) for lineno, raw in enumerate(lines, start=1)]
