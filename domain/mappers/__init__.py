"""
Domain mappers package.
Handles transformation between raw MongoDB values and API payloads.
"""

from domain.mappers.document_mapper import DocumentMapper
from domain.mappers.result_mapper import ResultMapper

__all__ = ["DocumentMapper", "ResultMapper"]
