from asm374.assembler import assemble_text
from asm374.encoding import encode_instruction
from asm374.parser import parse_line
from asm374.writers import to_hex_lines, to_bin_lines, format_fields, format_report, write_hex, write_bin

def test_format_fields_groups_by_layout():
    enc = encode_instruction(parse_line("ldi R3, $87"))
    assert format_fields(enc) == "00001 0011 0000 0000000000010000111"
    enc = encode_instruction(parse_line("add R3, R2, R3"))
    assert format_fields(enc, sep="|") == "00011|0011|0010|0011|000000000000000"
    enc = encode_instruction(parse_line("brmi R3, 3"))
    assert format_fields(enc) == "10010 0011 11 00 0000000000000000011"

def test_report_lists_every_line():
    src = "ldi R3, $87 ; R3 = $87\n\n    ; nota\nldi R16, 1\nhalt"
    program, diags, enc = assemble_text(src)
    report = format_report(program, enc.words, diags)
    assert report[0] == "ldi R3, $87 ; R3 = $87"
    assert report[1].startswith("    -> 0x09800087  00001 0011")
    assert report[2] == ""
    assert report[3] == "    ; nota"
    assert report[4] == "ldi R16, 1"
    assert report[5].startswith("    !! MalformedRegister:")
    assert report[6] == "halt"
    assert report[7] == "    -> 0xd0000000  11010 000000000000000000000000000"

def test_write_hex_and_bin(tmp_path):
    _, diags, enc = assemble_text("ldi R3, $87\nnop\n")
    assert not diags
    assert to_hex_lines(enc.words) == ["0x09800087", "0xc8000000"]
    assert to_bin_lines(enc.words)[1] == "11001" + "0" * 27
    hx, bn = tmp_path / "out.hex", tmp_path / "out.bin"
    write_hex(enc.words, str(hx))
    write_bin(enc.words, str(bn))
    assert hx.read_text(encoding="utf-8") == "0x09800087\n0xc8000000\n"
    assert bn.read_text(encoding="utf-8").splitlines()[0] == "00001001100000000000000010000111"
