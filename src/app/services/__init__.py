"""Serviços de aplicação.

Pipeline de arquivos: parse, recuperação individual e agregação.
IO concreto fica atrás de UpstreamClientProtocol.
"""

from app.services.aggregator import aggregate_files
from app.services.file_retriever import retrieve_file, to_file_result
from app.services.record_parser import parse_records

__all__ = [
    "aggregate_files",
    "parse_records",
    "retrieve_file",
    "to_file_result",
]
