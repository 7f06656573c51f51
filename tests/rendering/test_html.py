from datetime import date

from career_quiz.rendering.html import render_report_html, report_filename
from career_quiz.synthesis.report import build_report


def test_html_contains_every_section(make_session):
    document = build_report(make_session(full_name="Ram Thapa"), "You are a helper.", 7, date(2026, 10, 18))
    html = render_report_html(document)
    assert html.startswith("<!DOCTYPE html>")
    assert "Ram Thapa" in html
    assert "You are a helper." in html
    assert "Your #1 Interest Type: Social" in html
    assert "Your #3 Interest Type: Investigative" in html
    assert "Recommended Next Steps" in html
    assert "October 18, 2026" in html


def test_html_escapes_user_values(make_session):
    document = build_report(make_session(full_name="<script>alert(1)</script>"), "s", 7, date(2026, 10, 18))
    html = render_report_html(document)
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_report_filename():
    assert report_filename("Ram Thapa") == "RIASEC_Report_Ram_Thapa.html"
    assert report_filename(None) == "RIASEC_Report_User.html"
    assert report_filename("राम") == "RIASEC_Report_User.html"
