"""
Document mappers.
Turns raw MongoDB documents into JSON-encodable payloads.
"""

from typing import Any, Dict, List

from bson import ObjectId


class DocumentMapper:
    """Mapper for stored documents. Contents pass through untouched except ObjectIds."""

    @staticmethod
    def make_serializable(value: Any) -> Any:
        """Replace ObjectId values (at any depth) with their hex strings"""
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, dict):
            return {k: DocumentMapper.make_serializable(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [DocumentMapper.make_serializable(item) for item in value]
        return value

    @staticmethod
    def to_response(document: Dict[str, Any]) -> Dict[str, Any]:
        """Single document; ``_id`` keeps its key and becomes a hex string"""
        return DocumentMapper.make_serializable(document)

    @staticmethod
    def to_response_list(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [DocumentMapper.to_response(doc) for doc in documents]
