"""
Quiz input handling.

This package contains:
- Payload validation (presence and shape of tag-specific fields)
- Prompt templates for each quiz type
"""

from app.core.quiz.validator import validate_quiz_data
from app.core.quiz.prompts import build_prompt

__all__ = ['validate_quiz_data', 'build_prompt']
