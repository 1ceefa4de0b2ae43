'''
clase Diagnostic, helpers (línea, tipos de error) y excepciones del ensamblador
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Todo diagnóstico por línea es un error: no hay advertencias en este ISA
Severity = Literal["error"]

# ---------------- Tipos de error ----------------

class AsmError(ValueError):
    """Error recuperable de una sola línea: se reporta y se sigue con la siguiente.

    'hint' es una pista opcional para corregir la línea (p.ej. la forma esperada).
    """
    kind = "AsmError"

    def __init__(self, message: str, *, hint: str | None = None):
        super().__init__(message)
        self.hint = hint

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.kind = cls.__name__

class UnknownMnemonic(AsmError):
    """El mnemónico no está en la tabla de formatos."""

class MalformedRegister(AsmError):
    """Token que no es R<dígitos> o índice fuera de [0, 15]."""

class MalformedImmediate(AsmError):
    """Literal decimal o $hex mal formado."""

class ImmediateOutOfRange(AsmError):
    """El valor no cabe en el ancho del campo destino."""

class OperandCountMismatch(AsmError):
    """Número de operandos distinto al que exige la forma del mnemónico."""

class FieldWidthInvariantViolation(AssertionError):
    """Los campos no suman 32 bits o un ancho no es positivo: defecto de la tabla, nunca de la entrada."""

# ---------------- Diagnósticos ----------------

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Lleva ubicación opcional (archivo y línea), el tipo de error (kind), el texto
    fuente de la línea y un mensaje de ayuda (pista).
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None
    kind: Optional[str] = None
    text: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
        if loc:
            loc += ": "
        core = self.severity.upper()
        if self.kind:
            core += f" [{self.kind}]"
        core += f": {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        if self.text:
            core += f"  (en: {self.text.strip()})"
        return loc + core

def error(message: str, *, line: int | None = None, file: str | None = None,
          hint: str | None = None, kind: str | None = None,
          text: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, hint, file, kind, text)

def from_exception(ex: AsmError, *, line: int | None = None, file: str | None = None,
                   text: str | None = None) -> Diagnostic:
    """Convierte una excepción AsmError en un diagnóstico de error con su ubicación y pista."""
    return error(str(ex), line=line, file=file, hint=ex.hint, kind=ex.kind, text=text)
