from __future__ import annotations

COMMENT_CHAR = ";"
LABEL_CHAR = ":"

def strip_comment(line: str) -> str:
    """Remove the ';' comment and line-ending artifacts, then trim."""
    core = line.split(COMMENT_CHAR, 1)[0]
    return core.replace("\r", "").strip()

def split_label(line: str):
    """Return (label, rest) if line has 'label:', else (None, line).

    Everything up to and including the first ':' is the label.
    """
    if LABEL_CHAR not in line:
        return None, line
    label, _, rest = line.partition(LABEL_CHAR)
    return label.strip(), rest.strip()

def split_mnemonic_operands(line: str):
    s = line.strip()
    if not s:
        return "", ""
    parts = s.split(None, 1)
    if len(parts) == 1:
        return parts[0].lower(), ""
    return parts[0].lower(), parts[1].strip()

def split_operands(op_str: str):
    """Split on ',' and trim every token; empty tokens are kept so they can be reported."""
    if not op_str.strip():
        return []
    return [tok.strip() for tok in op_str.split(",")]
