"""
API Routes: Analyze Statement
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.v1.dependencies import get_analyze_use_case
from api.v1.schemas import AnalyzeRequest, AnalyzeResponse, ParseResponse
from application.use_cases.analyze_statement import AnalyzeStatementUseCase
from domain.exceptions import StatementParseError

logger = logging.getLogger(__name__)


router = APIRouter()


def _statement_input(request: AnalyzeRequest):
    if isinstance(request.input, str):
        return request.input
    return [t.model_dump() for t in request.input]


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    response_model_by_alias=True
)
async def analyze_statement(
    request: AnalyzeRequest,
    use_case: AnalyzeStatementUseCase = Depends(get_analyze_use_case)
):
    """
    Analyze a bank statement

    Accepts a list of transactions, a JSON array as text, the simple
    ``YYYY-MM-DD: Category - Description, ₦Amount`` format, or bank
    statement text (single-line CR/DR formats and multi-column ledgers).
    """
    try:
        result = use_case.execute_with_trend(_statement_input(request), top_n=request.top_n)
    except StatementParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("[analyze] unexpected failure")
        raise HTTPException(status_code=500, detail=f"Analysis failed: {str(e)}")

    return AnalyzeResponse(
        **result.to_dict(),
        spendingTrend=result.spending_trend.value if result.spending_trend else None
    )


@router.post("/parse", response_model=ParseResponse)
async def parse_statement(
    request: AnalyzeRequest,
    use_case: AnalyzeStatementUseCase = Depends(get_analyze_use_case)
):
    """Parse a bank statement into normalized transactions without analyzing it"""
    try:
        transactions = use_case.parse(_statement_input(request))
    except StatementParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ParseResponse(
        transactions=[t.to_dict() for t in transactions],
        count=len(transactions)
    )
