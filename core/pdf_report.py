from datetime import datetime, timezone
from io import BytesIO
from textwrap import wrap
from typing import List, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from core.report_data import NEXT_STEPS_RESOURCES
from core.scoring import MAX_SCORE, explain_scores
from models import Report, Startup


PAGE_WIDTH, PAGE_HEIGHT = A4

MARGIN_X = 24 * mm
MARGIN_Y = 28 * mm
CONTENT_WIDTH = PAGE_WIDTH - (2 * MARGIN_X)

GRID = 16  # baseline spacing

COLOR_PRIMARY = colors.HexColor("#322459")
COLOR_ACCENT = colors.HexColor("#F28705")
COLOR_HEADING = colors.HexColor("#3D1667")
COLOR_TEXT = colors.HexColor("#1E293B")
COLOR_MUTED = colors.HexColor("#64748B")
COLOR_BORDER = colors.HexColor("#CBD5E1")
COLOR_EMPTY_DOT = colors.HexColor("#D1D5DB")

BULLET_GLYPH = "•"
DOT_RADIUS = 5
DOT_GAP = 14


class PdfReportBuilder:
    """Lightweight helper that keeps a single canvas instance alive."""

    def __init__(self, report: Report, startup: Startup):
        self.report = report
        self.startup = startup
        self.buffer = BytesIO()
        self.pdf = canvas.Canvas(self.buffer, pagesize=A4)
        self.pdf.setTitle(f"{startup.startup_name} - Insight Report")

    # -- spacing helpers -------------------------------------------------
    def _ensure_space(self, y: float, needed: float) -> float:
        if y - needed <= MARGIN_Y:
            self._draw_footer()
            self.pdf.showPage()
            self.pdf.setFont("Helvetica", 10)
            return PAGE_HEIGHT - MARGIN_Y
        return y

    def _wrap_lines(self, text: str, width: float, size: int) -> list[str]:
        if not text:
            return []
        max_chars = max(8, int(width // (size * 0.51)))
        return wrap(text, max_chars)

    def _wrap_text(self, text: str, x: float, y: float, width: float, size: int = 10, line_height: int = GRID) -> float:
        if not text:
            return y

        lines = self._wrap_lines(text, width, size)
        self.pdf.setFont("Helvetica", size)
        self.pdf.setFillColor(COLOR_TEXT)

        for line in lines:
            y = self._ensure_space(y, line_height)
            y -= line_height
            self.pdf.drawString(x, y, line)

        return y

    def _section(self, title: str, y: float) -> float:
        y -= GRID
        y = self._ensure_space(y, GRID * 3)

        self.pdf.setFont("Helvetica-Bold", 13)
        self.pdf.setFillColor(COLOR_HEADING)
        self.pdf.drawString(MARGIN_X, y, title.upper())

        self.pdf.setStrokeColor(COLOR_BORDER)
        self.pdf.setLineWidth(0.7)
        self.pdf.line(MARGIN_X, y - 4, PAGE_WIDTH - MARGIN_X, y - 4)

        return y - (GRID + 4)

    def _subheading(self, title: str, y: float) -> float:
        y = self._ensure_space(y, GRID * 2)
        y -= GRID
        self.pdf.setFont("Helvetica-Bold", 11)
        self.pdf.setFillColor(COLOR_PRIMARY)
        self.pdf.drawString(MARGIN_X, y, title)
        return y - 2

    def _bullet_list(self, items, x: float, y: float, width: float) -> float:
        bullet_indent = 12

        for item in items:
            y = self._ensure_space(y, GRID)
            self.pdf.setFont("Helvetica", 10)
            self.pdf.setFillColor(COLOR_TEXT)
            self.pdf.drawString(x, y - GRID, BULLET_GLYPH)
            y = self._wrap_text(item, x + bullet_indent, y, width - bullet_indent, size=10, line_height=GRID)
            y -= 4

        return y

    # -- tables ----------------------------------------------------------
    def _table(self, headers: Sequence[str], rows: List[Sequence[str]], ratios: Sequence[float], y: float) -> float:
        widths = [CONTENT_WIDTH * r for r in ratios]
        line_h = 12
        pad = 6

        def _draw_row(cells: Sequence[str], top: float, bold: bool) -> float:
            font = "Helvetica-Bold" if bold else "Helvetica"
            size = 9
            wrapped = [self._wrap_lines(str(c), w - 2 * pad, size) or [""] for c, w in zip(cells, widths)]
            row_h = max(len(lines) for lines in wrapped) * line_h + pad
            top = self._ensure_space(top, row_h)

            self.pdf.setStrokeColor(COLOR_BORDER)
            self.pdf.setLineWidth(0.6)
            self.pdf.rect(MARGIN_X, top - row_h, CONTENT_WIDTH, row_h, fill=0)

            self.pdf.setFont(font, size)
            self.pdf.setFillColor(COLOR_MUTED if bold else COLOR_TEXT)
            x = MARGIN_X
            for lines, w in zip(wrapped, widths):
                text_y = top - line_h
                for line in lines:
                    self.pdf.drawString(x + pad, text_y, line)
                    text_y -= line_h
                x += w
            return top - row_h

        y = _draw_row(headers, y, bold=True)
        for row in rows:
            y = _draw_row(row, y, bold=False)
        return y - 6

    def _score_dots(self, x: float, y: float, label: str, value: int, color) -> None:
        self.pdf.setFont("Helvetica-Bold", 11)
        self.pdf.setFillColor(COLOR_PRIMARY)
        self.pdf.drawString(x, y, label)

        dots_y = y - GRID
        for index in range(MAX_SCORE):
            self.pdf.setFillColor(color if index < value else COLOR_EMPTY_DOT)
            self.pdf.circle(x + DOT_RADIUS + index * DOT_GAP, dots_y + DOT_RADIUS, DOT_RADIUS, stroke=0, fill=1)

        self.pdf.setFont("Helvetica", 9)
        self.pdf.setFillColor(COLOR_MUTED)
        self.pdf.drawString(x + MAX_SCORE * DOT_GAP + 6, dots_y + 2, f"{value} out of {MAX_SCORE}")

    def _score_breakdown(self, y: float) -> float:
        y -= 4
        lines = self._wrap_lines(f"Score breakdown: {explain_scores(self.startup)}", CONTENT_WIDTH, 9)
        for line in lines:
            y = self._ensure_space(y, 12)
            self.pdf.setFont("Helvetica-Oblique", 9)
            self.pdf.setFillColor(COLOR_MUTED)
            y -= 12
            self.pdf.drawString(MARGIN_X, y, line)
        return y

    def _draw_header(self) -> None:
        self.pdf.setFont("Helvetica-Bold", 24)
        self.pdf.setFillColor(COLOR_PRIMARY)
        self.pdf.drawString(MARGIN_X, PAGE_HEIGHT - 48, f"{self.startup.startup_name} Insight Report")

        self.pdf.setFont("Helvetica", 11)
        self.pdf.setFillColor(COLOR_MUTED)
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
        submitter = f"{self.startup.first_name} {self.startup.last_name}"
        subtitle = f"Submitted by {submitter} {BULLET_GLYPH} Generated {timestamp}"
        self.pdf.drawString(MARGIN_X, PAGE_HEIGHT - 70, subtitle)

    def _draw_footer(self) -> None:
        self.pdf.setStrokeColor(COLOR_BORDER)
        self.pdf.line(MARGIN_X, MARGIN_Y - 6, PAGE_WIDTH - MARGIN_X, MARGIN_Y - 6)

        self.pdf.setFont("Helvetica", 8)
        self.pdf.setFillColor(COLOR_MUTED)
        footer = f"COMPASS Insight Report {BULLET_GLYPH} Report #{self.report.id}"
        self.pdf.drawCentredString(PAGE_WIDTH / 2, MARGIN_Y - 18, footer)

    # -- public API ------------------------------------------------------
    def build(self) -> bytes:
        report = self.report
        y = PAGE_HEIGHT - 100

        self._draw_header()

        y = self._section("Innovation Objective", y)
        y = self._wrap_text(report.innovation_objective, MARGIN_X, y, CONTENT_WIDTH, size=11)

        y = self._section("Section 1: Insights from Patients", y)
        y = self._wrap_text(report.patient_insights_summary, MARGIN_X, y, CONTENT_WIDTH)
        y = self._subheading("Theme Table", y - 4)
        y = self._table(
            ["Theme", "Supporting Quote", "Summary Insight"],
            [[t.theme, f'"{t.quote}"', t.insight] for t in report.patient_themes],
            [0.24, 0.38, 0.38],
            y,
        )

        y = self._section("Section 2: Startup Failure Insights", y)
        y = self._wrap_text(report.failure_insights_summary, MARGIN_X, y, CONTENT_WIDTH)
        y = self._subheading("Failure Table", y - 4)
        y = self._table(
            ["Failed Startup", "Year", "Sector", "Reason for Failure", "Theme"],
            [[f.startup, str(f.year), f.sector, f.reason, f.theme] for f in report.failure_data],
            [0.2, 0.1, 0.22, 0.28, 0.2],
            y,
        )
        y = self._subheading("Takeaway", y)
        y = self._wrap_text(report.failure_takeaway, MARGIN_X, y, CONTENT_WIDTH)

        y = self._section("Section 3: Patient Sentiment Patterns", y)
        y = self._wrap_text(report.sentiment_summary, MARGIN_X, y, CONTENT_WIDTH)
        y = self._subheading("Sentiment Table", y - 4)
        y = self._table(
            ["Theme", "Example Quote", "Design Implication"],
            [[s.theme, f'"{s.quote}"', s.implication] for s in report.sentiment_themes],
            [0.24, 0.38, 0.38],
            y,
        )

        y = self._section("Section 4: Human-Centered Design Recommendations", y)
        y = self._bullet_list(report.design_recommendations, MARGIN_X, y, CONTENT_WIDTH)

        y = self._section("Section 5: Feasibility & Usefulness Assessment", y)
        y = self._ensure_space(y, GRID * 3)
        self._score_dots(MARGIN_X, y - GRID, "Feasibility Score", report.feasibility_score, COLOR_PRIMARY)
        self._score_dots(
            MARGIN_X + CONTENT_WIDTH / 2,
            y - GRID,
            "Usefulness / Impact Score",
            report.usefulness_score,
            COLOR_ACCENT,
        )
        y -= GRID * 3
        y = self._wrap_text(report.assessment_summary, MARGIN_X, y, CONTENT_WIDTH)
        y = self._score_breakdown(y)

        y = self._section("Section 6: Resources and Next Steps", y)
        y = self._bullet_list(NEXT_STEPS_RESOURCES, MARGIN_X, y, CONTENT_WIDTH)

        self._draw_footer()

        self.pdf.save()
        self.buffer.seek(0)
        return self.buffer.getvalue()


def build_pdf_report(report: Report, startup: Startup) -> bytes:
    return PdfReportBuilder(report, startup).build()
