from asm374.diagnostics import error, from_exception, MalformedRegister, OperandCountMismatch, AsmError

def test_error_str():
    d = error("inmediato fuera de rango", line=12, file="prog.asm", hint="use 19 bits con signo")
    s = str(d)
    assert "prog.asm:12:" in s
    assert "ERROR: inmediato fuera de rango" in s
    assert "(pista: use 19 bits con signo)" in s

def test_from_exception_keeps_kind_and_source():
    ex = MalformedRegister("Registro fuera de rango: 'R16'")
    d = from_exception(ex, line=3, file="p.asm", text="    ldi R16, 2 ; x")
    assert d.severity == "error" and d.kind == "MalformedRegister"
    assert d.hint is None
    s = str(d)
    assert s.startswith("p.asm:3: ERROR [MalformedRegister]:")
    assert "(en: ldi R16, 2 ; x)" in s

def test_from_exception_carries_hint():
    ex = OperandCountMismatch("add espera 3 operando(s), recibió 2", hint="forma: add ra, rb, rc")
    d = from_exception(ex, line=7)
    assert d.hint == "forma: add ra, rb, rc"
    assert "(pista: forma: add ra, rb, rc)" in str(d)

def test_error_kinds_are_value_errors():
    assert issubclass(MalformedRegister, AsmError)
    assert issubclass(MalformedRegister, ValueError)
    assert MalformedRegister.kind == "MalformedRegister"
