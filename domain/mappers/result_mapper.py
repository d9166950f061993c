"""
Result mappers.
Converts pymongo write results into response DTOs.
"""

from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from domain.schemas.result_schemas import (
    InsertResultResponse,
    UpdateResultResponse,
    DeleteResultResponse,
)


class ResultMapper:
    """Mapper for write operation outcomes."""

    @staticmethod
    def insert_to_response(result: InsertOneResult) -> InsertResultResponse:
        return InsertResultResponse(
            acknowledged=result.acknowledged,
            inserted_id=str(result.inserted_id),
        )

    @staticmethod
    def update_to_response(result: UpdateResult) -> UpdateResultResponse:
        """
        Convert UpdateResult to UpdateResultResponse.

        Counts are only readable on acknowledged writes; unacknowledged
        results report zeros.
        """
        if not result.acknowledged:
            return UpdateResultResponse(
                acknowledged=False, matched_count=0, modified_count=0
            )
        upserted_id = result.upserted_id
        return UpdateResultResponse(
            acknowledged=True,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=0 if upserted_id is None else 1,
            upserted_id=None if upserted_id is None else str(upserted_id),
        )

    @staticmethod
    def delete_to_response(result: DeleteResult) -> DeleteResultResponse:
        if not result.acknowledged:
            return DeleteResultResponse(acknowledged=False, deleted_count=0)
        return DeleteResultResponse(acknowledged=True, deleted_count=result.deleted_count)
