# src/asm374/encoding.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .ast import Instruction, Field
from .isa import spec as isa_spec, FORMATS, WORD_BITS, ISpec
from .parser import immediate, address_operand
from .regs import register_field
from .utils import field_bits, is_signed_nbit, to_hex32
from .diagnostics import (
    Diagnostic,
    AsmError,
    ImmediateOutOfRange,
    OperandCountMismatch,
    FieldWidthInvariantViolation,
    from_exception,
)

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    word: int     # u32
    line: Optional[int]
    text: str
    mnemonic: str
    fields: Tuple[Field, ...]

@dataclass(frozen=True)
class EncodeResult:
    words: List[Encoded]
    diagnostics: List[Diagnostic]

# ---------------- Empaquetado de bits ----------------

def pack_fields(fields: Iterable[Field]) -> int:
    """Concatena los campos (el primero es el más significativo) en una palabra u32.

    Cada valor se guarda como value mod 2^width, así que los negativos quedan en
    complemento a dos dentro de su campo.
    """
    fields = list(fields)
    total = sum(f.width for f in fields)
    if total != WORD_BITS:
        raise FieldWidthInvariantViolation(
            f"Los campos suman {total} bits, se esperaban {WORD_BITS}: {fields!r}")
    word = 0
    offset = 0
    for f in reversed(fields):
        word |= field_bits(f.value, f.width) << offset
        offset += f.width
    return word

# ---------------- Resolución de operandos ----------------

def _bind_operands(ins: Instruction, sp: ISpec) -> Dict[str, int]:
    """Asigna cada operando del fuente a su rol (ra, rb, rc, imm) según la forma."""
    if len(ins.operands) != len(sp.form):
        expected = ", ".join(sp.form) if sp.form else "ninguno"
        raise OperandCountMismatch(
            f"{ins.mnemonic} espera {len(sp.form)} operando(s), recibió {len(ins.operands)}",
            hint=f"forma: {ins.mnemonic} {expected}")

    values: Dict[str, int] = {"opcode": sp.opcode}
    if sp.cond is not None:
        values["cond"] = sp.cond
    for role, tok in zip(sp.form, ins.operands):
        if role == "addr":
            addr = address_operand(tok)
            values["rb"] = addr.base.value
            values["imm"] = addr.offset
        elif role == "imm":
            values["imm"] = immediate(tok)
        else:
            values[role] = register_field(tok).value
    return values

def fields_for(ins: Instruction) -> List[Field]:
    """Lista de campos (más significativo primero) para una instrucción."""
    sp = isa_spec(ins.mnemonic)
    values = _bind_operands(ins, sp)
    fields: List[Field] = []
    for role, width in FORMATS[sp.layout]:
        value = 0 if role == "reserved" else values.get(role, 0)
        if role == "imm" and not is_signed_nbit(value, width):
            lo, hi = -(1 << (width - 1)), (1 << (width - 1)) - 1
            raise ImmediateOutOfRange(
                f"Inmediato de {width} bits con signo fuera de rango ({lo}..{hi}): {value}")
        fields.append(Field(width, value))
    return fields

# ---------------- Codificador principal ----------------

def encode_instruction(ins: Instruction) -> Encoded:
    """Codifica una instrucción; lanza AsmError si la línea es inválida."""
    fields = fields_for(ins)
    word = pack_fields(fields)
    log.debug("line %s: fields %s", ins.line, [(f.width, f.value) for f in fields])
    return Encoded(word=word, line=ins.line, text=ins.text, mnemonic=ins.mnemonic,
                   fields=tuple(fields))

def encode(
    program: Iterable[Instruction],
    *,
    filename: Optional[str] = None,
) -> EncodeResult:
    """Codifica todas las líneas; los errores de cada línea se acumulan sin detener el resto."""
    diags: List[Diagnostic] = []
    words: List[Encoded] = []

    for ins in program:
        if ins.is_blank:
            continue
        try:
            enc = encode_instruction(ins)
        except AsmError as ex:
            diags.append(from_exception(ex, line=ins.line, file=filename, text=ins.text))
            continue
        log.info('line %s: "%s" -> %s', ins.line, ins.text.strip(), to_hex32(enc.word))
        words.append(enc)

    return EncodeResult(words=words, diagnostics=diags)
