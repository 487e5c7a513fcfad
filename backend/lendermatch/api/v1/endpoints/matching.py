"""Matching endpoints for ranking lenders against an applicant profile."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from lendermatch.deps import get_matching_service
from lendermatch.models.schemas.match import LenderEvaluationResponse, MatchResponse
from lendermatch.models.schemas.profile import ApplicantProfile
from lendermatch.services.matching_service import MatchingService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/lenders",
    response_model=MatchResponse,
    summary="Match an applicant to panel lenders",
    description="Rank the panel lenders an applicant is eligible to be introduced to",
)
async def match_lenders(
    profile: ApplicantProfile,
    service: Annotated[MatchingService, Depends(get_matching_service)],
) -> MatchResponse:
    """
    Match an applicant profile against the panel lender catalog.

    Returns eligible lenders with at least one satisfied criterion, highest
    score first. If the catalog cannot be read the list is empty.
    """
    matches = await service.find_matches(profile)
    return MatchResponse(matches=matches, total=len(matches))


@router.post(
    "/lenders/{lender_id}/evaluate",
    response_model=LenderEvaluationResponse,
    summary="Evaluate one panel lender",
    description="Full evaluation of a single lender, including failed criteria",
)
async def evaluate_lender(
    lender_id: UUID,
    profile: ApplicantProfile,
    service: Annotated[MatchingService, Depends(get_matching_service)],
) -> LenderEvaluationResponse:
    """
    Evaluate an applicant profile against one panel lender.

    Unlike the match endpoint, ineligible and zero-score outcomes are
    returned, with the reasons for any disqualification.
    """
    try:
        evaluation = await service.evaluate_lender(lender_id, profile)
    except Exception as e:
        logger.error(f"Error evaluating lender {lender_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to evaluate lender",
        )

    if evaluation is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Panel lender with ID {lender_id} not found",
        )

    criteria, result = evaluation
    return LenderEvaluationResponse(
        lender_id=criteria.id,
        lender_name=criteria.name,
        eligible=result.eligible,
        score=result.score,
        reasons=list(result.reasons),
        disqualifications=list(result.disqualifications),
    )
