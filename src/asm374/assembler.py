from __future__ import annotations
import argparse, logging, sys
from typing import List, Tuple

from .ast import Instruction
from .diagnostics import Diagnostic
from .parser import parse
from .encoding import encode, EncodeResult
from .writers import format_report, write_hex, write_bin

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

def assemble_text(text: str, *, filename: str | None = None) -> Tuple[List[Instruction], List[Diagnostic], EncodeResult]:
    """Separa las líneas y codifica cada una.
    Devuelve (program, diagnostics_totales, enc_result)."""
    program = parse(text)
    enc = encode(program, filename=filename)
    return program, list(enc.diagnostics), enc

def assemble_file(path: str) -> Tuple[List[Instruction], List[Diagnostic], EncodeResult]:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return assemble_text(text, filename=path)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Ensamblador de 32 bits para la CPU 374")
    ap.add_argument("source", help="archivo .asm de entrada")
    ap.add_argument("-o", "--out-hex", help="archivo de salida con palabras en hexadecimal")
    ap.add_argument("-b", "--out-bin", help="archivo de salida con palabras en binario ASCII")
    ap.add_argument("-q", "--quiet", action="store_true", help="no imprimir el listado")
    ap.add_argument("-v", "--verbose", action="store_true", help="traza de la codificación por stderr")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(format="%(name)s: %(message)s", level=logging.INFO, stream=sys.stderr)

    try:
        program, diags, enc = assemble_file(args.source)
    except (OSError, UnicodeDecodeError) as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    if not args.quiet:
        for line in format_report(program, enc.words, diags):
            print(line)

    had_error = False
    for d in diags:
        # imprimimos todo; si hay error, devolvemos código 1
        print(d, file=sys.stderr)
        if d.severity == "error":
            had_error = True

    if had_error:
        return 1

    try:
        if args.out_hex:
            write_hex(enc.words, args.out_hex)
        if args.out_bin:
            write_bin(enc.words, args.out_bin)
    except OSError as ex:
        print(f"ERROR al escribir salidas: {ex}", file=sys.stderr)
        return 3

    log.info("%d instrucciones ensambladas desde %s", len(enc.words), args.source)
    print(f"OK: {len(enc.words)} instrucciones", file=sys.stderr)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
