"""Declarative prompts and flows.

A prompt is a template plus the input and output models it is bound to. A flow
wraps a prompt with the request cycle every AI feature shares:

    validate input -> render prompt -> one Gemini call -> parse JSON -> validate output

Any step can fail. Each failure surfaces as a distinct FlowError subclass so
callers can tell bad input from a provider outage or a malformed answer.
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ValidationError

from styleai import gemini
from styleai.errors import FlowError, InputValidationError, OutputShapeError, summarize_validation_errors
from styleai.media import DataUri, parse_data_uri

logger = logging.getLogger(__name__)

OUTPUT_INSTRUCTIONS = """

Return a JSON object that matches this JSON schema:
{schema}
Only return valid JSON, no other text."""


def _default_context(data: BaseModel) -> dict[str, Any]:
    return data.model_dump()


def _no_media(data: BaseModel) -> list[str]:
    return []


@dataclass(frozen=True)
class Prompt:
    name: str
    template: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]
    context: Callable[[BaseModel], dict[str, Any]] = _default_context
    media: Callable[[BaseModel], list[str]] = _no_media

    def output_schema(self) -> str:
        return json.dumps(self.output_model.model_json_schema(by_alias=True), indent=2)

    def render(self, data: BaseModel) -> list[str | DataUri]:
        """Rendered text first, then the attached photos in "image 1", "image 2", ... order."""
        text = self.template.format(**self.context(data))
        text += OUTPUT_INSTRUCTIONS.format(schema=self.output_schema())
        return [text, *(parse_data_uri(uri) for uri in self.media(data))]


def define_prompt(
    name: str,
    template: str,
    input_model: type[BaseModel],
    output_model: type[BaseModel],
    context: Callable[[BaseModel], dict[str, Any]] | None = None,
    media: Callable[[BaseModel], list[str]] | None = None,
) -> Prompt:
    return Prompt(
        name=name,
        template=template,
        input_model=input_model,
        output_model=output_model,
        context=context or _default_context,
        media=media or _no_media,
    )


def _extract_json(text: str) -> Any:
    """Strip markdown code fences if present, then parse JSON."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1].rsplit("```", 1)[0]
    return json.loads(text)


def validate_input(prompt: Prompt, payload: Any) -> BaseModel:
    if isinstance(payload, prompt.input_model):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    try:
        return prompt.input_model.model_validate(payload)
    except ValidationError as e:
        raise InputValidationError(
            f"Invalid input for {prompt.name}",
            details=summarize_validation_errors(e.errors()),
        ) from e


def parse_output(prompt: Prompt, text: str) -> BaseModel:
    try:
        parsed = _extract_json(text)
    except (json.JSONDecodeError, IndexError) as e:
        raise OutputShapeError(f"{prompt.name} returned invalid JSON: {e}") from e
    try:
        return prompt.output_model.model_validate(parsed)
    except ValidationError as e:
        raise OutputShapeError(
            f"{prompt.name} returned JSON that does not match {prompt.output_model.__name__}",
            details=summarize_validation_errors(e.errors()),
        ) from e


def define_flow(name: str, prompt: Prompt) -> Callable[[Any], Awaitable[BaseModel]]:
    """Bind a prompt to the validate -> generate -> validate cycle."""

    async def flow(payload: Any) -> BaseModel:
        try:
            data = validate_input(prompt, payload)
        except InputValidationError as e:
            logger.info("%s rejected invalid input", name)
            e.flow = name
            raise

        started = time.perf_counter()
        logger.info("%s started", name)
        try:
            text = await gemini.generate(prompt.render(data))
            result = parse_output(prompt, text)
        except FlowError as e:
            logger.warning("%s failed after %.2fs: %s", name, time.perf_counter() - started, e)
            e.flow = name
            raise

        logger.info("%s finished in %.2fs", name, time.perf_counter() - started)
        return result

    flow.__name__ = name
    flow.__qualname__ = name
    return flow
