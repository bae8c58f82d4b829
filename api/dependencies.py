"""
dependencies.py — FastAPI Dependency Injection.
Every dependency returns its adapter from Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.span_split_parser import SpanSplitParser
from config import Settings


def get_parser(request: Request) -> SpanSplitParser:
    return request.app.state.parser


def get_evaluator(request: Request) -> ASTEvaluator:
    return request.app.state.evaluator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
