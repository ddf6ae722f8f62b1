"""Prompt template loading and rendering."""

import re
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PROMPT_PATH = Path(__file__).parent / "prompts" / "summary.prompt.yml"

FORMAT_INSTRUCTION = "formatInstruction"
NOTIFICATIONS = "notifications"

_PLACEHOLDER = re.compile(r"\{\{(" + FORMAT_INSTRUCTION + "|" + NOTIFICATIONS + r")\}\}")


class PromptMessage(BaseModel):
    """One chat message in a prompt template."""

    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class PromptTemplate(BaseModel):
    """Chat prompt plus the model it targets."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    model: str = Field(..., min_length=1)
    messages: list[PromptMessage] = Field(..., min_length=1)

    def render(self, format_instruction: str, notifications: str) -> list[dict[str, str]]:
        """Fill in the placeholders of every message.

        Each placeholder is replaced at its first occurrence in a message.
        Substituted text is never rescanned, so braces inside the digest
        are left alone.
        """
        values = {FORMAT_INSTRUCTION: format_instruction, NOTIFICATIONS: notifications}
        rendered = []
        for message in self.messages:
            seen: set[str] = set()

            def _substitute(match: re.Match) -> str:
                name = match.group(1)
                if name in seen:
                    return match.group(0)
                seen.add(name)
                return values[name]

            rendered.append(
                {"role": message.role, "content": _PLACEHOLDER.sub(_substitute, message.content)}
            )
        return rendered


class TemplateProvider(Protocol):
    """Anything that can hand out the summary prompt template."""

    def load(self) -> PromptTemplate: ...


class YamlTemplateProvider:
    """Load the prompt template from a ``.prompt.yml`` file."""

    def __init__(self, path: Path | str = DEFAULT_PROMPT_PATH):
        self.path = Path(path)

    def load(self) -> PromptTemplate:
        with self.path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return PromptTemplate.model_validate(data)


class StaticTemplateProvider:
    """Serve an in-memory template."""

    def __init__(self, template: PromptTemplate):
        self.template = template

    def load(self) -> PromptTemplate:
        return self.template
