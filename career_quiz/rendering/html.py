# career_quiz/rendering/html.py
import re
from pathlib import Path

from fastapi.templating import Jinja2Templates

from ..synthesis.report import ReportDocument

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
REPORT_TEMPLATE = "report.html"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_report_html(document: ReportDocument) -> str:
    """Renders the document as a standalone, printable HTML page. Values are autoescaped."""
    template = templates.get_template(REPORT_TEMPLATE)
    return template.render(report=document, sections=document.sections)


def report_filename(full_name: str | None) -> str:
    safe_name = re.sub(r"\s+", "_", (full_name or "").strip())
    # Header values must stay latin-1 encodable
    safe_name = re.sub(r"[^A-Za-z0-9_.-]", "", safe_name) or "User"
    return f"RIASEC_Report_{safe_name}.html"
