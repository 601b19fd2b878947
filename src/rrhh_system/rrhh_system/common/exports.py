from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

import pandas as pd


def rows_to_csv(rows: Iterable[dict], fieldnames: Sequence[str]) -> bytes:
    """Serialize dict rows to CSV bytes (utf-8-sig so Excel opens accents)."""

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(fieldnames), extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")


def rows_to_xlsx(rows: Sequence[dict], *, sheet_name: str) -> bytes:
    df = pd.DataFrame(list(rows))
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
