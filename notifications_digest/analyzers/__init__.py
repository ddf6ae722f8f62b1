"""Digest formatting and LLM summarization."""

from .digest import NO_NOTIFICATIONS, format_notifications
from .llm_summarizer import FORMAT_INSTRUCTIONS, LLMSummarizer
from .prompt import PromptMessage, PromptTemplate, StaticTemplateProvider, YamlTemplateProvider

__all__ = [
    "FORMAT_INSTRUCTIONS",
    "LLMSummarizer",
    "NO_NOTIFICATIONS",
    "PromptMessage",
    "PromptTemplate",
    "StaticTemplateProvider",
    "YamlTemplateProvider",
    "format_notifications",
]
