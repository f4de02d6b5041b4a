"""Table – declarative column model and CSV export."""
from csvtable.table.column import Column
from csvtable.table.table import FIELD_SEPARATOR, ROW_SEPARATOR, UTF8_BOM, Table

__all__ = ["FIELD_SEPARATOR", "ROW_SEPARATOR", "UTF8_BOM", "Column", "Table"]
