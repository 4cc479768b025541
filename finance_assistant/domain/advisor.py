"""Narrative analysis flow - prompt, model call, and rendering"""

import logging
from typing import Protocol, Sequence
from finance_assistant.domain.exceptions import LLMAPIError
from finance_assistant.domain.markdown import render_markdown
from finance_assistant.domain.models import AnalysisResult, Debt, Transaction
from finance_assistant.domain.prompting import build_analysis_prompt

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = (
    "Tidak ada data untuk dianalisis. Silakan tambahkan beberapa transaksi "
    "atau data hutang terlebih dahulu."
)
ERROR_MESSAGE = (
    "Maaf, terjadi kesalahan saat mencoba menganalisis data Anda. "
    "Silakan coba lagi nanti."
)


class TextGenerator(Protocol):
    """Anything that turns a prompt into model-generated text"""

    async def generate_text(self, prompt: str) -> str: ...


async def analyze_financials(
    transactions: Sequence[Transaction],
    debts: Sequence[Debt],
    generator: TextGenerator,
) -> AnalysisResult:
    """
    Produce a narrative analysis of the user's records.

    Flow:
    1. Short-circuit with a guidance message when there is nothing to analyze
    2. Build the prompt and call the model once (no retry)
    3. Render the Markdown answer to HTML

    Model failures are logged and replaced by a static apology.
    """
    if not transactions and not debts:
        return AnalysisResult(status="no_data", markdown=NO_DATA_MESSAGE, html=render_markdown(NO_DATA_MESSAGE))

    prompt = build_analysis_prompt(transactions, debts)

    try:
        text = await generator.generate_text(prompt)
    except LLMAPIError as e:
        logger.error(f"LLM API error: {e}")
        return AnalysisResult(status="error", markdown=ERROR_MESSAGE, html=render_markdown(ERROR_MESSAGE))

    return AnalysisResult(status="ok", markdown=text, html=render_markdown(text))
