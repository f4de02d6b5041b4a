"""Encoding – value rendering and field escaping."""
from csvtable.encoding.encodable import CsvEncodable, EncodableValue, encode_value
from csvtable.encoding.escaping import escape_field, needs_quoting

__all__ = [
    "CsvEncodable",
    "EncodableValue",
    "encode_value",
    "escape_field",
    "needs_quoting",
]
