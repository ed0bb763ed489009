from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd
import streamlit as st

from src.config import settings
from src.core.business_models import Scenario
from src.core.scenario_config import build_default_scenarios, default_scenario


@dataclass
class BulletItem:
    text: str
    subitems: List[str] = field(default_factory=list)


@dataclass
class AssumptionSection:
    title: str
    paragraphs: List[str]
    bullets: List[BulletItem] = field(default_factory=list)
    table: Optional[List[List[str]]] = None


def _multiplier_text(value: float) -> str:
    return f"×{value:g}"


def _scenario_table() -> List[List[str]]:
    rows = [["Scenario", "Sales volume", "Fixed cost", "Variable cost"]]
    for scenario, adj in build_default_scenarios().items():
        rows.append(
            [
                scenario.label,
                _multiplier_text(adj.volume_multiplier),
                _multiplier_text(adj.fixed_cost_multiplier),
                _multiplier_text(adj.variable_cost_multiplier),
            ]
        )
    return rows


def get_assumptions_sections() -> list[AssumptionSection]:
    """Return shared assumptions/methodology text for UI and PDF."""
    return [
        AssumptionSection(
            title="Monthly profit",
            paragraphs=[
                "All figures are monthly and use the values you entered, adjusted "
                "for the selected scenario.",
            ],
            bullets=[
                BulletItem(text="**Revenue** = selling price × sales volume"),
                BulletItem(
                    text="**Total cost** = fixed cost + variable cost per unit × "
                    "sales volume"
                ),
                BulletItem(text="**Operating profit** = revenue - total cost"),
                BulletItem(
                    text="**Net profit** = operating profit × (1 - tax rate)",
                    subitems=[
                        "Tax is only charged on a positive operating profit; a loss "
                        "is shown as-is.",
                    ],
                ),
                BulletItem(text="**Net margin** = net profit ÷ revenue × 100"),
            ],
        ),
        AssumptionSection(
            title="Payback and break-even",
            paragraphs=[
                "**Payback period** is the initial investment divided by monthly "
                "net profit. When net profit is zero or negative the investment is "
                "never recovered and the payback shows as "
                f"*{settings.NOT_RECOVERABLE_LABEL}*.",
                "**Break-even point** is the fixed cost divided by the contribution "
                "margin (selling price - variable cost per unit). When the price "
                "does not exceed the variable cost no volume breaks even and the "
                f"value shows as *{settings.NOT_APPLICABLE_LABEL}*.",
            ],
        ),
        AssumptionSection(
            title="Scenarios",
            paragraphs=[
                "Scenarios stress-test your own assumptions. They change sales "
                "volume, fixed cost and variable cost; the selling price, tax "
                "rate and investment stay as entered.",
                f"A new session starts on the **{default_scenario().label}** "
                f"scenario. **{Scenario.REALISTIC.label}** uses your figures "
                "unchanged.",
            ],
            table=_scenario_table(),
        ),
        AssumptionSection(
            title="Other modelling notes",
            paragraphs=[
                f"The cumulative cash flow is a straight-line "
                f"{settings.CASHFLOW_PROJECTION_MONTHS}-month projection: the "
                "investment goes out in month 0 and the same net profit comes in "
                "every month after.",
                "No seasonality, growth, financing costs or inflation are modelled.",
                "Risk flags use fixed thresholds on margin, payback, fixed-cost "
                "share of revenue and distance from break-even.",
            ],
        ),
    ]


def render_assumptions_and_methodology() -> None:
    """Render the Assumptions & Methodology content."""

    for section in get_assumptions_sections():
        st.markdown(f"#### {section.title}")
        for paragraph in section.paragraphs:
            st.markdown(paragraph)
        for bullet in section.bullets:
            lines = [f"- {bullet.text}"]
            for sub in bullet.subitems:
                lines.append(f"  - {sub}")
            st.markdown("\n".join(lines))
        if section.table:
            df = pd.DataFrame(section.table[1:], columns=section.table[0])
            st.dataframe(df, hide_index=True, width="stretch")
