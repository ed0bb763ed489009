from __future__ import annotations

import io
import re
from xml.sax.saxutils import escape
from datetime import datetime, timezone
from typing import List, Mapping

from reportlab.lib import colors  # type: ignore[import]
from reportlab.lib.pagesizes import A4  # type: ignore[import]
from reportlab.lib.styles import getSampleStyleSheet  # type: ignore[import]
from reportlab.pdfgen import canvas  # type: ignore[import]
from reportlab.platypus import (  # type: ignore[import]
    ListFlowable,
    ListItem,
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from src.config.version import APP_VERSION
from src.core.business_models import BusinessInputs, CalculatedResults, Scenario
from src.core.risk_classifier import RiskFinding
from src.core.verdict import build_verdict, recommendations
from src.ui.assumptions import BulletItem, get_assumptions_sections
from src.ui.formatting import (
    format_break_even,
    format_currency,
    format_number,
    format_payback,
    format_percentage,
)

Styles = getSampleStyleSheet()

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")


def _markdown_to_markup(text: str) -> str:
    """Turn the **bold** / *italic* used in the UI copy into reportlab markup."""
    cleaned = escape(text.replace("`", ""))
    cleaned = _BOLD_RE.sub(r"<b>\1</b>", cleaned)
    return _ITALIC_RE.sub(r"<i>\1</i>", cleaned)


def _paragraph(text: str, style: str = "Normal") -> Paragraph:
    return Paragraph(_markdown_to_markup(text), Styles[style])


def build_pdf_report(
    inputs: BusinessInputs,
    results: CalculatedResults,
    scenario_results: Mapping[Scenario, CalculatedResults],
    risks: List[RiskFinding],
) -> bytes:
    """Generate a PDF snapshot of the executive analysis for sharing."""

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        title="Business Viability Analysis",
        topMargin=60,
        bottomMargin=60,
    )
    story = []

    now = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

    header_text = "Business Viability Analysis"
    footer_text = f"Generated {now} • Version {APP_VERSION}"

    verdict = build_verdict(results, inputs)
    story.append(Paragraph(verdict.headline, Styles["Heading1"]))
    story.append(_paragraph(f"{results.scenario.label} scenario", "Italic"))
    story.append(Spacer(1, 6))
    story.append(_paragraph(verdict.summary))
    story.append(Spacer(1, 12))

    story.append(Paragraph("Business inputs", Styles["Heading2"]))
    inputs_table = Table(
        [
            ["Initial investment", format_currency(inputs.initial_investment)],
            ["Monthly fixed cost", format_currency(inputs.monthly_fixed_cost)],
            ["Variable cost per unit", format_currency(inputs.variable_cost_per_unit)],
            ["Selling price per unit", format_currency(inputs.selling_price_per_unit)],
            [
                "Monthly sales volume",
                f"{format_number(inputs.monthly_sales_volume)} units",
            ],
            ["Tax rate", format_percentage(inputs.tax_rate)],
        ],
        hAlign="LEFT",
    )
    inputs_table.setStyle(_table_style())
    story.append(inputs_table)
    story.append(Spacer(1, 12))

    story.append(Paragraph("Monthly results", Styles["Heading2"]))
    results_table = Table(
        [
            ["Revenue", format_currency(results.monthly_revenue)],
            ["Total cost", format_currency(results.total_monthly_cost)],
            ["Operating profit", format_currency(results.operating_profit)],
            ["Net profit", format_currency(results.net_profit)],
            ["Net margin", format_percentage(results.margin_percent)],
            ["Payback period", format_payback(results.payback_months)],
            ["Break-even point", format_break_even(results.break_even_units)],
        ],
        hAlign="LEFT",
    )
    results_table.setStyle(_table_style())
    story.append(results_table)
    story.append(Spacer(1, 12))

    if scenario_results:
        story.append(Paragraph("Scenario summary", Styles["Heading2"]))
        scenario_rows = [
            ["Scenario", "Net profit", "Margin", "Payback", "Break-even", "Status"]
        ]
        for scenario in Scenario:
            result = scenario_results.get(scenario)
            if result is None:
                continue
            scenario_rows.append(
                [
                    scenario.label,
                    format_currency(result.net_profit),
                    format_percentage(result.margin_percent),
                    format_payback(result.payback_months),
                    format_break_even(result.break_even_units),
                    "Viable" if result.is_viable else "Not viable",
                ]
            )
        scenario_table = Table(scenario_rows, repeatRows=1, hAlign="LEFT")
        scenario_table.setStyle(_table_style(header=True))
        scenario_table.setStyle(
            TableStyle(
                [
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    ("ALIGN", (0, 1), (0, -1), "LEFT"),
                ]
            )
        )
        story.append(scenario_table)
        story.append(Spacer(1, 12))

    story.append(Paragraph("Risk assessment", Styles["Heading2"]))
    if risks:
        risk_rows = [["Severity", "Risk", "Details"]]
        risk_rows.extend(
            [
                risk.severity.label,
                _paragraph(risk.title),
                _paragraph(risk.description),
            ]
            for risk in risks
        )
        risk_table = Table(
            risk_rows, repeatRows=1, hAlign="LEFT", colWidths=[60, 130, 280]
        )
        risk_table.setStyle(_table_style(header=True))
        story.append(risk_table)
    else:
        story.append(_paragraph("No risks identified."))

    advice = recommendations(results)
    if advice:
        story.append(Spacer(1, 12))
        story.append(Paragraph("Recommendations", Styles["Heading2"]))
        story.append(_build_pdf_bullets([BulletItem(text=item) for item in advice]))

    story.append(PageBreak())
    story.append(
        Paragraph("Appendix: Assumptions &amp; Methodology", Styles["Heading1"])
    )
    story.append(
        Paragraph(
            "This appendix mirrors the in-app Assumptions &amp; Methodology section.",
            Styles["Normal"],
        )
    )
    for section in get_assumptions_sections():
        story.append(Spacer(1, 12))
        story.append(Paragraph(section.title, Styles["Heading2"]))
        for paragraph in section.paragraphs:
            story.append(_paragraph(paragraph))
        if section.bullets:
            story.append(_build_pdf_bullets(section.bullets))
        if section.table:
            appendix_table = Table(section.table, repeatRows=1, hAlign="LEFT")
            appendix_table.setStyle(_table_style(header=True))
            story.append(appendix_table)

    doc.build(
        story,
        onFirstPage=lambda canv, doc: _draw_header_footer(
            canv, doc, header_text, footer_text
        ),
        onLaterPages=lambda canv, doc: _draw_header_footer(
            canv, doc, header_text, footer_text
        ),
        canvasmaker=NumberedCanvas,
    )
    buffer.seek(0)
    return buffer.read()


def _table_style(header: bool = False) -> TableStyle:
    style_commands = [
        ("BOX", (0, 0), (-1, -1), 0.25, colors.black),
        ("INNERGRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    if header:
        style_commands.extend(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.black),
            ]
        )
    return TableStyle(style_commands)


def _draw_header_footer(canvas_obj, doc, header_text: str, footer_text: str) -> None:
    canvas_obj.saveState()
    width, height = A4
    canvas_obj.setFont("Helvetica-Bold", 12)
    canvas_obj.drawString(doc.leftMargin, height - 40, header_text)
    canvas_obj.setFont("Helvetica", 8)
    canvas_obj.drawString(doc.leftMargin, 40, footer_text)
    canvas_obj.restoreState()


class NumberedCanvas(canvas.Canvas):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_page_states = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        page_count = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self.draw_page_number(page_count)
            super().showPage()
        super().save()

    def draw_page_number(self, page_count: int) -> None:
        self.setFont("Helvetica", 8)
        self.drawRightString(
            self._pagesize[0] - 40,
            40,
            f"Page {self._pageNumber} of {page_count}",
        )


def _build_pdf_bullets(bullets: list[BulletItem]) -> ListFlowable:
    items = []
    for bullet in bullets:
        content: list = [_paragraph(bullet.text)]
        if bullet.subitems:
            sub_flow = ListFlowable(
                [ListItem(_paragraph(sub), leftIndent=20) for sub in bullet.subitems],
                bulletType="bullet",
            )
            content.append(sub_flow)
        items.append(ListItem(content, leftIndent=0))
    return ListFlowable(items, bulletType="bullet")
