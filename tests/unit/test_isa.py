import pytest
from asm374.isa import spec, SPEC, FORMATS, Layout, ISpec, BRANCH_CONDS, WORD_BITS
from asm374.diagnostics import UnknownMnemonic

def test_core_instructions_present():
    assert spec("ld").opcode == 0
    assert spec("ldi").opcode == 1
    assert spec("st").opcode == 2
    assert spec("add").opcode == 3
    assert spec("addi").opcode == 11
    assert spec("neg").opcode == 16
    assert spec("jal").opcode == 20
    assert spec("nop").opcode == 25
    assert spec("halt").opcode == 26
    assert len(SPEC) == 30

def test_branch_variants_share_opcode():
    ops = {spec(m).opcode for m in BRANCH_CONDS}
    assert ops == {18}
    assert [spec(m).cond for m in ("brzr", "brnz", "brpl", "brmi")] == [0, 1, 2, 3]
    assert all(spec(m).layout is Layout.BRANCH for m in BRANCH_CONDS)

def test_only_branches_have_cond():
    for name, sp in SPEC.items():
        assert (sp.cond is not None) == (name in BRANCH_CONDS)

@pytest.mark.parametrize("layout", list(Layout))
def test_every_format_is_32_bits(layout):
    widths = [w for _, w in FORMATS[layout]]
    assert sum(widths) == WORD_BITS
    assert FORMATS[layout][0] == ("opcode", 5)

def test_forms():
    assert spec("ld").form == ("ra", "addr")
    assert spec("st").form == ("addr", "ra")
    assert spec("brmi").form == ("ra", "imm")
    assert spec("halt").form == ()

def test_case_insensitive_and_unknown():
    assert spec("ADD") is spec("add")
    with pytest.raises(UnknownMnemonic):
        spec("mov")

def test_ispec_validation():
    with pytest.raises(ValueError):
        ISpec(Layout.BRANCH, 18)
    with pytest.raises(ValueError):
        ISpec(Layout.ONE_REG, 19, cond=1)
    with pytest.raises(ValueError):
        ISpec(Layout.NO_OPERAND, 32)
