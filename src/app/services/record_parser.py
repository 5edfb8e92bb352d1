"""Parser de corpos CSV (file,text,number,hex) para Records validados.

A primeira linha e sempre descartada (header). Linhas invalidas sao
ignoradas sem erro; a ordem das linhas validas e preservada.
"""

from __future__ import annotations

import re

from pydantic import ValidationError

from app.domain.file_records import Record

FIELD_SEPARATOR = ","
EXPECTED_FIELD_COUNT = 4

# Prefixo inteiro permissivo: "12abc" -> 12, " -7" -> -7, "abc" -> None
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_leading_int(raw: str) -> int | None:
    """Extrai o inteiro base 10 no inicio do campo, ignorando o resto."""
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def parse_line(line: str) -> Record | None:
    """Converte uma linha de dados em Record, ou None se invalida."""
    fields = line.removesuffix("\r").split(FIELD_SEPARATOR)
    if len(fields) != EXPECTED_FIELD_COUNT:
        return None

    _file, text, raw_number, hex_value = fields
    number = parse_leading_int(raw_number)
    if not text or number is None or not hex_value:
        return None

    try:
        return Record(text=text, number=number, hex=hex_value)
    except ValidationError:
        return None


def parse_records(body: str) -> list[Record]:
    """Converte o corpo completo de um arquivo em Records validos."""
    lines = body.split("\n")[1:]
    records: list[Record] = []
    for line in lines:
        record = parse_line(line)
        if record is not None:
            records.append(record)
    return records
