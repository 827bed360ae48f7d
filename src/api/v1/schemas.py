"""
API Schemas: Pydantic models for request/response validation
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TransactionSchema(BaseModel):
    """Transaction schema"""

    amount: float = Field(..., description="Positive for credits, negative for debits")
    category: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None


class AnalyzeRequest(BaseModel):
    """Request schema for analyze and parse endpoints"""

    input: Union[List[TransactionSchema], str] = Field(
        ...,
        description="Transaction records, JSON text, or bank statement text"
    )
    top_n: Optional[int] = Field(None, ge=0, le=50, description="Number of top expense categories")


class CategoryTotalSchema(BaseModel):
    """Expense total for one category"""

    category: str
    total: float


class AnalyzeResponse(BaseModel):
    """Response schema for analyze endpoint"""

    model_config = ConfigDict(populate_by_name=True)

    total_income: float = Field(..., alias="totalIncome")
    total_expenses: float = Field(..., alias="totalExpenses")
    net_balance: float = Field(..., alias="netBalance")
    top_categories: List[CategoryTotalSchema] = Field(..., alias="topCategories")
    summary: str
    spending_trend: Optional[str] = Field(None, alias="spendingTrend")


class ParseResponse(BaseModel):
    """Response schema for parse endpoint"""

    transactions: List[TransactionSchema]
    count: int


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    service: str
    version: str
    supported_banks: Dict[str, List[str]]


# ---------- JSON-RPC envelope ----------

class MessagePart(BaseModel):
    """One part of an envelope message"""

    kind: str
    text: Optional[str] = None
    data: Optional[Any] = None


class IncomingMessage(BaseModel):
    """Message as sent by the envelope client"""

    model_config = ConfigDict(populate_by_name=True)

    role: str
    parts: Optional[List[MessagePart]] = None
    message_id: Optional[str] = Field(None, alias="messageId")
    task_id: Optional[str] = Field(None, alias="taskId")


class JsonRpcParams(BaseModel):
    """Envelope params"""

    model_config = ConfigDict(populate_by_name=True)

    message: Optional[IncomingMessage] = None
    messages: Optional[List[IncomingMessage]] = None
    context_id: Optional[str] = Field(None, alias="contextId")
    task_id: Optional[str] = Field(None, alias="taskId")
    metadata: Optional[Any] = None


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request envelope"""

    jsonrpc: Optional[str] = None
    id: Optional[Union[str, int]] = None
    method: Optional[str] = None
    params: Optional[JsonRpcParams] = None
