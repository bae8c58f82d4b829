"""
Router: POST /evaluate, POST /validate

/evaluate runs the whole pipeline and returns the value with its steps.
/validate only reports what is wrong with an expression (every rule, not
just the first one).
"""
from __future__ import annotations

import logging
import math

from fastapi import APIRouter, Depends, HTTPException

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.span_split_parser import SpanSplitParser
from api.dependencies import get_evaluator, get_parser, get_settings
from api.schemas import EvaluateRequest, EvaluateResponse, ValidateRequest, ValidateResponse
from config import Settings
from contracts import ExpressionError, LexicalError
from expression_evaluator import format_value

logger = logging.getLogger("expr_calc.api")

router = APIRouter(tags=["evaluate"])


def _check_length(expression: str, settings: Settings) -> None:
    if len(expression) > settings.max_expression_length:
        raise HTTPException(
            status_code=413,
            detail=f"Expression longer than {settings.max_expression_length} characters.",
        )


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate_expression(
    body: EvaluateRequest,
    parser: SpanSplitParser = Depends(get_parser),
    evaluator: ASTEvaluator = Depends(get_evaluator),
    settings: Settings = Depends(get_settings),
) -> EvaluateResponse:
    _check_length(body.expression, settings)
    try:
        result = evaluator.eval_expr(parser.parse(body.expression))
    except ExpressionError as exc:
        logger.info("Rejected expression %r: %s", body.expression, exc.code.value)
        raise HTTPException(status_code=422, detail=exc.to_issue().model_dump(mode="json"))
    except RecursionError:
        raise HTTPException(
            status_code=422,
            detail={"code": "NESTING_TOO_DEEP", "message": "Expression is nested too deeply."},
        )

    finite = math.isfinite(result.value)
    return EvaluateResponse(
        expression=body.expression,
        value=result.value if finite else None,
        display=format_value(result.value),
        is_finite=finite,
        steps=result.steps,
    )


@router.post("/validate", response_model=ValidateResponse)
def validate_expression(
    body: ValidateRequest,
    parser: SpanSplitParser = Depends(get_parser),
    settings: Settings = Depends(get_settings),
) -> ValidateResponse:
    _check_length(body.expression, settings)
    try:
        tokens = parser.tokens(body.expression)
    except LexicalError as exc:
        return ValidateResponse(
            expression=body.expression,
            valid=False,
            tokens=[],
            issues=[exc.to_issue()],
        )

    issues = parser.validator.find_issues(tokens)
    return ValidateResponse(
        expression=body.expression,
        valid=not issues,
        tokens=tokens,
        issues=issues,
    )
