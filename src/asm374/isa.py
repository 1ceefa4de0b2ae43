'''
tabla formal del ISA (opcodes, subcódigos de condición, formatos de campos)
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .utils import is_unsigned_nbit
from .diagnostics import UnknownMnemonic

WORD_BITS   = 32
OPCODE_BITS = 5
REG_BITS    = 4
COND_BITS   = 2
IMM_BITS    = 19

class Layout(Enum):
    """Familias de formato de instrucción."""
    LOAD_STORE  = "LoadStore"
    ALU_REG3    = "AluReg3"
    ALU_REG_IMM = "AluRegImm"
    ALU_REG2    = "AluReg2"
    BRANCH      = "Branch"
    ONE_REG     = "OneReg"
    NO_OPERAND  = "NoOperand"

# Campos de cada formato, del más significativo al menos significativo.
# Roles: opcode, ra, rb, rc, cond, imm; 'reserved' siempre vale 0.
FORMATS: Dict[Layout, Tuple[Tuple[str, int], ...]] = {
    Layout.LOAD_STORE:  (("opcode", OPCODE_BITS), ("ra", REG_BITS), ("rb", REG_BITS), ("imm", IMM_BITS)),
    Layout.ALU_REG3:    (("opcode", OPCODE_BITS), ("ra", REG_BITS), ("rb", REG_BITS), ("rc", REG_BITS),
                         ("reserved", 15)),
    Layout.ALU_REG_IMM: (("opcode", OPCODE_BITS), ("ra", REG_BITS), ("rb", REG_BITS), ("imm", IMM_BITS)),
    Layout.ALU_REG2:    (("opcode", OPCODE_BITS), ("ra", REG_BITS), ("rb", REG_BITS), ("reserved", 19)),
    Layout.BRANCH:      (("opcode", OPCODE_BITS), ("ra", REG_BITS), ("cond", COND_BITS), ("reserved", 2),
                         ("imm", IMM_BITS)),
    Layout.ONE_REG:     (("opcode", OPCODE_BITS), ("ra", REG_BITS), ("reserved", 23)),
    Layout.NO_OPERAND:  (("opcode", OPCODE_BITS), ("reserved", 27)),
}

@dataclass(frozen=True)
class ISpec:
    """Especificación de una instrucción.

    - layout: familia de formato (ver FORMATS)
    - opcode: campo de 5 bits
    - cond: subcódigo de 2 bits; sólo (y siempre) en Layout.BRANCH
    - form: operandos en el orden del fuente ('ra','rb','rc','imm','addr')
    """
    layout: Layout
    opcode: int
    cond: Optional[int] = None
    form: Tuple[str, ...] = ()

    def __post_init__(self):
        if not is_unsigned_nbit(self.opcode, OPCODE_BITS):
            raise ValueError(f"opcode fuera de rango: {self.opcode}")
        if (self.layout is Layout.BRANCH) != (self.cond is not None):
            raise ValueError("cond es obligatorio en Branch y sólo en Branch")
        if self.cond is not None and not is_unsigned_nbit(self.cond, COND_BITS):
            raise ValueError(f"cond fuera de rango: {self.cond}")

# Formas de operandos por familia
_FORMS: Dict[Layout, Tuple[str, ...]] = {
    Layout.LOAD_STORE:  ("ra", "addr"),
    Layout.ALU_REG3:    ("ra", "rb", "rc"),
    Layout.ALU_REG_IMM: ("ra", "rb", "imm"),
    Layout.ALU_REG2:    ("ra", "rb"),
    Layout.BRANCH:      ("ra", "imm"),
    Layout.ONE_REG:     ("ra",),
    Layout.NO_OPERAND:  (),
}

# Subcódigos de condición de los saltos (comparten opcode)
OP_BRANCH = 18
BRANCH_CONDS: Dict[str, int] = {
    "brzr": 0b00,
    "brnz": 0b01,
    "brpl": 0b10,
    "brmi": 0b11,
}

SPEC: Dict[str, ISpec] = {}

def _add(name: str, layout: Layout, opcode: int, *, cond: Optional[int] = None,
         form: Optional[Tuple[str, ...]] = None):
    SPEC[name] = ISpec(layout, opcode, cond=cond, form=_FORMS[layout] if form is None else form)

# Carga / almacenamiento
_add("ld",  Layout.LOAD_STORE, 0)
_add("ldi", Layout.LOAD_STORE, 1)
_add("st",  Layout.LOAD_STORE, 2, form=("addr", "ra"))   # st addr, Ra

# ALU de tres registros
_add("add", Layout.ALU_REG3, 3)
_add("sub", Layout.ALU_REG3, 4)
_add("shr", Layout.ALU_REG3, 5)
_add("shl", Layout.ALU_REG3, 6)
_add("ror", Layout.ALU_REG3, 7)
_add("rol", Layout.ALU_REG3, 8)
_add("and", Layout.ALU_REG3, 9)
_add("or",  Layout.ALU_REG3, 10)

# ALU con inmediato
_add("addi", Layout.ALU_REG_IMM, 11)
_add("andi", Layout.ALU_REG_IMM, 12)
_add("ori",  Layout.ALU_REG_IMM, 13)

# ALU de dos registros
_add("mul", Layout.ALU_REG2, 14)
_add("div", Layout.ALU_REG2, 15)
_add("neg", Layout.ALU_REG2, 16)
_add("not", Layout.ALU_REG2, 17)

# Saltos condicionales: mismo opcode, distinto subcódigo
for _name, _cond in BRANCH_CONDS.items():
    _add(_name, Layout.BRANCH, OP_BRANCH, cond=_cond)

# Un registro
_add("jr",   Layout.ONE_REG, 19)
_add("jal",  Layout.ONE_REG, 20)
_add("in",   Layout.ONE_REG, 21)
_add("out",  Layout.ONE_REG, 22)
_add("mfhi", Layout.ONE_REG, 23)
_add("mflo", Layout.ONE_REG, 24)

# Sin operandos
_add("nop",  Layout.NO_OPERAND, 25)
_add("halt", Layout.NO_OPERAND, 26)

def spec(mnemonic: str) -> ISpec:
    """Devuelve la especificación de una instrucción por mnemónico."""
    m = mnemonic.lower()
    if m not in SPEC:
        raise UnknownMnemonic(f"Instrucción desconocida: {mnemonic!r}")
    return SPEC[m]
