"""Display masks for digit fields.

A pattern uses ``0`` for a digit slot; every other character is a literal
that is emitted only while digits remain to fill later slots.
"""
from fleet.domain.rules import only_digits

CPF_MASK = "000.000.000-00"
CNH_MASK = "00000000000"
PHONE_MASK_10 = "(00) 0000-0000"
PHONE_MASK_11 = "(00) 00000-0000"


def apply_mask(value: str | None, pattern: str) -> str:
    digits = only_digits(value)
    out = []
    i = 0
    for ch in pattern:
        if i >= len(digits):
            break
        if ch == "0":
            out.append(digits[i])
            i += 1
        else:
            out.append(ch)
    return "".join(out)


def mask_cpf(value: str | None) -> str:
    return apply_mask(value, CPF_MASK)


def mask_cnh(value: str | None) -> str:
    return apply_mask(value, CNH_MASK)


def mask_phone(value: str | None) -> str:
    pattern = PHONE_MASK_10 if len(only_digits(value)) <= 10 else PHONE_MASK_11
    return apply_mask(value, pattern)
