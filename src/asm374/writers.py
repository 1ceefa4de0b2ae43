from __future__ import annotations
from typing import Dict, Iterable, List, Optional
from .utils import to_hex32, to_bin32, group_bits
from .ast import Instruction
from .encoding import Encoded
from .diagnostics import Diagnostic

def to_hex_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_hex32(w.word) for w in words]

def to_bin_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_bin32(w.word) for w in words]

def format_fields(enc: Encoded, *, sep: str = " ") -> str:
    """Binario de la palabra agrupado por los campos de su formato (opcode | Ra | Rb | ...)."""
    return group_bits(to_bin32(enc.word), (f.width for f in enc.fields), sep=sep)

def format_word(enc: Encoded) -> str:
    return f"{to_hex32(enc.word)}  {format_fields(enc)}"

def format_report(program: Iterable[Instruction], words: Iterable[Encoded],
                  diagnostics: Iterable[Diagnostic] = ()) -> List[str]:
    """Listado: cada línea fuente seguida de su codificación o de sus errores.

    Las líneas en blanco o de sólo comentario se repiten tal cual, sin palabra.
    """
    by_line: Dict[Optional[int], Encoded] = {w.line: w for w in words}
    errs: Dict[Optional[int], List[Diagnostic]] = {}
    for d in diagnostics:
        errs.setdefault(d.line, []).append(d)

    out: List[str] = []
    for ins in program:
        out.append(ins.text)
        if ins.is_blank:
            continue
        enc = by_line.get(ins.line)
        if enc is not None:
            out.append(f"    -> {format_word(enc)}")
        for d in errs.get(ins.line, []):
            out.append(f"    !! {d.kind or d.severity}: {d.message}")
    return out

def _write_lines(lines: Iterable[str], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

def write_hex(words: Iterable[Encoded], path: str) -> None:
    _write_lines(to_hex_lines(words), path)

def write_bin(words: Iterable[Encoded], path: str) -> None:
    _write_lines(to_bin_lines(words), path)
