# career_quiz/services/export.py
# CSV bulk export of stored sessions.

import csv
import io
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from fastapi.responses import StreamingResponse

from ..db.models import QuizSession
from ..riasec.definitions import RIASEC_ORDER

CSV_FIELDNAMES: List[str] = [
    "ID", "Full Name", "Email", "Phone", "Age", "Gender", "Education", "Occupation", "Location",
    "Holland Code",
    *[f"{code} Score" for code in RIASEC_ORDER],
    "Status", "Time Taken (seconds)", "Started At", "Completed At",
]


def _iso(value: Optional[datetime]) -> str:
    return value.isoformat() if value else ""


def session_to_row(record: QuizSession) -> Dict[str, Any]:
    scores = record.scores or {}
    row: Dict[str, Any] = {
        "ID": record.id,
        "Full Name": record.full_name or "",
        "Email": record.email or "",
        "Phone": record.phone or "",
        "Age": record.age if record.age is not None else "",
        "Gender": record.gender or "",
        "Education": record.education or "",
        "Occupation": record.occupation or "",
        "Location": record.location or "",
        "Holland Code": record.top_three_code or "",
        "Status": record.status,
        "Time Taken (seconds)": record.time_taken if record.time_taken is not None else "",
        "Started At": _iso(record.started_at),
        "Completed At": _iso(record.completed_at),
    }
    for code in RIASEC_ORDER:
        row[f"{code} Score"] = scores.get(code) or 0
    return row


def build_csv_bytes(records: Iterable[QuizSession]) -> bytes:
    """One header row plus one row per session, in the order given."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_FIELDNAMES, extrasaction="ignore")
    writer.writeheader()
    for record in records:
        writer.writerow(session_to_row(record))
    return buffer.getvalue().encode("utf-8")


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"riasec_quiz_data_{today.isoformat()}.csv"


def csv_download_response(records: Iterable[QuizSession], today: Optional[date] = None) -> StreamingResponse:
    content = build_csv_bytes(records)
    return StreamingResponse(
        io.BytesIO(content),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(today)}"'},
    )
