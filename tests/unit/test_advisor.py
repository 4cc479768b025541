"""Unit tests for the narrative analysis flow"""

import pytest
from finance_assistant.domain.advisor import ERROR_MESSAGE, NO_DATA_MESSAGE, analyze_financials
from finance_assistant.domain.exceptions import LLMAPIError


async def test_analyze_without_records_skips_model(fake_llm):
    """Test empty collections return guidance without calling the model"""
    result = await analyze_financials([], [], fake_llm)

    assert result.status == "no_data"
    assert result.markdown == NO_DATA_MESSAGE
    assert fake_llm.prompts == []


async def test_analyze_renders_model_answer(fake_llm, sample_transactions, sample_debt):
    result = await analyze_financials(sample_transactions, [sample_debt], fake_llm)

    assert result.status == "ok"
    assert result.markdown == fake_llm.reply
    assert result.html == (
        "<h2>Ringkasan</h2>\n<strong>Sehat</strong> secara umum\n"
        "<ul><li>Tambah dana darurat</li>\n<li>Kurangi makan di luar</li></ul>"
    )
    assert len(fake_llm.prompts) == 1
    assert "Sisa Hutang: Rp 270.000.000" in fake_llm.prompts[0]


async def test_analyze_with_only_debts_calls_model(fake_llm, sample_debt):
    result = await analyze_financials([], [sample_debt], fake_llm)

    assert result.status == "ok"
    assert "Tidak ada data transaksi." in fake_llm.prompts[0]


async def test_analyze_model_failure_returns_apology(fake_llm, sample_transactions, caplog):
    """Test LLM errors are logged and replaced by the static apology"""
    fake_llm.error = LLMAPIError("LLM API error: 503")

    result = await analyze_financials(sample_transactions, [], fake_llm)

    assert result.status == "error"
    assert result.markdown == ERROR_MESSAGE
    assert result.html == ERROR_MESSAGE
    assert "LLM API error: 503" in caplog.text


async def test_analyze_unexpected_error_propagates(fake_llm, sample_transactions):
    fake_llm.error = RuntimeError("bug")

    with pytest.raises(RuntimeError):
        await analyze_financials(sample_transactions, [], fake_llm)
