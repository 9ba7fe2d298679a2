from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from ..common.formatting import format_hours, format_signed_hours
from .model import DailyBucket, HoursSummary


def build_hours_workbook(summary: HoursSummary, buckets: Sequence[DailyBucket]) -> bytes:
    """Excel export of a balance and its daily series (sheets "Resumo" and "Série")."""
    summary_df = pd.DataFrame(
        [
            {"Indicador": "Horas extras", "Horas": summary.positive, "Formatado": format_hours(summary.positive)},
            {"Indicador": "Horas devidas", "Horas": summary.negative, "Formatado": format_hours(summary.negative)},
            {"Indicador": "Saldo", "Horas": summary.total, "Formatado": format_signed_hours(summary.total)},
        ]
    )

    series_df = pd.DataFrame(
        [
            {
                "Data": b.day.isoformat(),
                "Dia": b.label,
                "Horas extras": b.positive,
                "Horas devidas": b.negative,
                "Saldo do dia": b.positive - b.negative,
            }
            for b in buckets
        ],
        columns=["Data", "Dia", "Horas extras", "Horas devidas", "Saldo do dia"],
    )

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        summary_df.to_excel(writer, sheet_name="Resumo", index=False)
        series_df.to_excel(writer, sheet_name="Série", index=False)
    return out.getvalue()
