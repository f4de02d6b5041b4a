"""Table – column list + configuration, and the export operation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Sequence, TypeVar

from csvtable.config.encoder import DEFAULT_CONFIGURATION, EncoderConfiguration
from csvtable.encoding import EncodableValue, encode_value, escape_field
from csvtable.kernel.errors import EmptyTableError
from csvtable.table.column import Column

__all__ = ["FIELD_SEPARATOR", "ROW_SEPARATOR", "UTF8_BOM", "Table"]

R = TypeVar("R")

FIELD_SEPARATOR = ","
ROW_SEPARATOR = "\r\n"
UTF8_BOM = "\ufeff"


@dataclass(frozen=True)
class Table(Generic[R]):
    """Ordered columns and the configuration used to render them.

    A table keeps no reference to the records it exports; :meth:`export` is
    pure and may be called concurrently from several threads.

    Raises:
        EmptyTableError: *columns* is empty.
    """

    columns: Sequence[Column[R]]
    configuration: EncoderConfiguration = field(default=DEFAULT_CONFIGURATION)

    def __post_init__(self) -> None:
        columns = tuple(self.columns)
        if not columns:
            raise EmptyTableError()
        object.__setattr__(self, "columns", columns)

    @property
    def headers(self) -> tuple[str, ...]:
        return tuple(column.header for column in self.columns)

    @property
    def header(self) -> str:
        """The escaped, comma-joined header row."""
        return FIELD_SEPARATOR.join(self._escape(h) for h in self.headers)

    def row(self, record: R) -> str:
        """Render a single data row for *record*."""
        return FIELD_SEPARATOR.join(
            self._cell(column.value_for(record)) for column in self.columns
        )

    def rows(self, records: Iterable[R]) -> Iterator[str]:
        """Lazily yield the header row, then one row per record."""
        yield self.header
        for record in records:
            yield self.row(record)

    def export(self, records: Iterable[R]) -> str:
        """Render the whole document: rows joined by CRLF, no trailing separator."""
        return ROW_SEPARATOR.join(self.rows(records))

    def export_bytes(self, records: Iterable[R], *, bom: bool = False) -> bytes:
        """UTF-8 encoded :meth:`export`, optionally prefixed with a BOM."""
        text = self.export(records)
        if bom:
            text = UTF8_BOM + text
        return text.encode("utf-8")

    def _cell(self, value: EncodableValue) -> str:
        return self._escape(encode_value(value, self.configuration))

    def _escape(self, raw: str) -> str:
        return escape_field(raw, quote_line_breaks=self.configuration.quote_line_breaks)
