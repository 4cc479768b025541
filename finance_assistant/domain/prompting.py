"""Prompt construction for the narrative financial analysis"""

from textwrap import dedent
from typing import List, Sequence
from finance_assistant.domain.dashboard import summarize_debt
from finance_assistant.domain.models import Debt, Transaction, TransactionType
from finance_assistant.utils.formatting import format_rupiah

TYPE_LABELS = {
    TransactionType.INCOME: "Pemasukan",
    TransactionType.EXPENSE: "Pengeluaran",
}

ANALYSIS_TEMPLATE = dedent(
    """\
    Anda adalah seorang penasihat keuangan pribadi berbasis AI yang canggih dan ramah.
    Tugas Anda adalah menganalisis data keuangan pengguna dan memberikan wawasan yang jelas, dapat ditindaklanjuti, dan memotivasi.

    Berdasarkan data berikut:
    {data}

    Berikan analisis keuangan yang komprehensif dalam format Markdown. Analisis harus mencakup bagian-bagian berikut:

    1.  **Ringkasan Kesehatan Keuangan:** Berikan gambaran umum tentang kondisi keuangan pengguna saat ini. Apakah sehat, perlu perbaikan, atau dalam kondisi kritis?
    2.  **Analisis Arus Kas (Cash Flow):** Hitung dan jelaskan total pemasukan, total pengeluaran, dan sisa uang (surplus/defisit). Berikan komentar tentang pola arus kas.
    3.  **Pola Pengeluaran:** Identifikasi 3 kategori pengeluaran terbesar. Berikan wawasan tentang kebiasaan belanja pengguna. Apakah ada pengeluaran yang bisa dikurangi?
    4.  **Strategi Manajemen Hutang:** Tinjau data hutang. Berdasarkan cicilan bulanan dan sisa hutang, berikan saran konkret tentang cara melunasi hutang lebih cepat. Mungkin sarankan metode "bola salju" atau "longsoran hutang" jika relevan.
    5.  **Rekomendasi & Langkah Selanjutnya:** Berikan 3-5 langkah praktis dan dapat ditindaklanjuti yang bisa diambil pengguna untuk meningkatkan kesehatan keuangan mereka.

    Gunakan bahasa yang positif dan memberdayakan. Hindari jargon yang rumit. Buat respons Anda terstruktur dengan baik menggunakan heading, bold, dan bullet points agar mudah dibaca.
    """
)


def format_transaction_line(txn: Transaction) -> str:
    return (
        f"- Tanggal: {txn.date.isoformat()}, Deskripsi: {txn.description}, "
        f"Tipe: {TYPE_LABELS[txn.type]}, Kategori: {txn.category}, "
        f"Jumlah: {format_rupiah(txn.amount)}"
    )


def format_debt_line(debt: Debt) -> str:
    progress = summarize_debt(debt)
    return (
        f"- Pemberi Hutang: {debt.creditor}, Total Hutang: {format_rupiah(debt.total_amount)}, "
        f"Cicilan/Bulan: {format_rupiah(debt.monthly_installment)}, "
        f"Durasi: {debt.total_installment_months} bulan, Sudah Dibayar: {debt.months_paid} bulan, "
        f"Sisa Hutang: {format_rupiah(progress.remaining_debt)}, Mulai: {debt.start_date.isoformat()}"
    )


def format_records_for_prompt(transactions: Sequence[Transaction], debts: Sequence[Debt]) -> str:
    """
    Serialize records into the data block embedded in the prompt.

    Output is deterministic: records appear in input order, one line each,
    followed by a newline.
    """
    lines: List[str] = ["DATA TRANSAKSI:"]
    if transactions:
        lines.extend(format_transaction_line(t) for t in transactions)
    else:
        lines.append("Tidak ada data transaksi.")

    lines.append("")
    lines.append("DATA HUTANG:")
    if debts:
        lines.extend(format_debt_line(d) for d in debts)
    else:
        lines.append("Tidak ada data hutang.")

    return "\n".join(lines) + "\n"


def build_analysis_prompt(transactions: Sequence[Transaction], debts: Sequence[Debt]) -> str:
    """Embed the serialized records into the fixed advisor instructions"""
    return ANALYSIS_TEMPLATE.format(data=format_records_for_prompt(transactions, debts))
