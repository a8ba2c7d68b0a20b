"""CSV reading and writing for circuit import/export.

decode_rows() is a lazy generator: each row yields either a CsvRow or a
RowError, and a bad row never stops the rows after it.
"""
import csv
import io
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from tracker.models.circuit import CIRCUIT_FIELDS

_BOM = b"\xef\xbb\xbf"


@dataclass(frozen=True)
class CsvRow:
    line: int
    values: dict[str, str]


@dataclass(frozen=True)
class RowError:
    line: int
    message: str

    def __str__(self) -> str:
        return f"Line {self.line}: {self.message}"


def decode_payload(raw: bytes) -> str:
    """Strip a UTF-8 BOM and decode. Raises UnicodeDecodeError on bad bytes."""
    if raw.startswith(_BOM):
        raw = raw[len(_BOM):]
    return raw.decode("utf-8")


class _Lines:
    """Physical-line iterator that remembers the lines of the current record."""

    def __init__(self, text: str):
        self._lines = iter(io.StringIO(text, newline=""))
        self.line_num = 0
        self.record: list[str] = []

    def __iter__(self):
        return self

    def __next__(self) -> str:
        line = next(self._lines)
        self.line_num += 1
        self.record.append(line)
        return line

    def skip_open_quote(self) -> None:
        # An odd quote count means the failed record stopped inside a quoted
        # field; drop lines until that field closes.
        quotes = sum(line.count('"') for line in self.record)
        while quotes % 2:
            try:
                quotes += next(self).count('"')
            except StopIteration:
                return


def decode_rows(text: str) -> Iterator[CsvRow | RowError]:
    lines = _Lines(text)
    reader = csv.reader(lines)
    header: list[str] | None = None

    while True:
        lines.record = []
        try:
            record = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            if header is None:
                yield RowError(line=lines.line_num, message=f"Unreadable header: {exc}")
                return
            yield RowError(line=lines.line_num, message=str(exc))
            lines.skip_open_quote()
            continue

        if not record:
            continue

        if header is None:
            header = [h.strip() for h in record]
            continue

        if len(record) != len(header):
            yield RowError(
                line=lines.line_num,
                message=f"expected {len(header)} fields, found {len(record)}",
            )
            continue

        by_name = dict(zip(header, record))
        values = {f: (by_name.get(f) or "").strip() for f in CIRCUIT_FIELDS}
        yield CsvRow(line=lines.line_num, values=values)


def encode_circuits(circuits: Iterable) -> str:
    """Serialize records (anything with the circuit attributes) to CSV text."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CIRCUIT_FIELDS)
    for circuit in circuits:
        writer.writerow([getattr(circuit, f) for f in CIRCUIT_FIELDS])
    return buf.getvalue()
