# src/ui/layout.py
from __future__ import annotations

import logging

import streamlit as st

from src.config.version import APP_VERSION
from src.core.business_models import BusinessInputs, CalculatedResults
from src.core.risk_classifier import identify_risks
from src.core.scenario_config import default_scenario
from src.core.viability_engine import compute, compute_all_scenarios
from src.ui.analysis import render_analysis_step
from src.ui.assumptions import render_assumptions_and_methodology
from src.ui.business_inputs import (
    get_business_inputs,
    render_business_inputs,
    reset_business_inputs,
    submit_business_inputs,
    validate_business_inputs,
)
from src.ui.pdf_export import build_pdf_report
from src.ui.results import render_results_step
from src.ui.scenarios import (
    get_active_scenario,
    render_scenarios_step,
    set_active_scenario,
)
from src.ui.style import inject_metric_styles

logger = logging.getLogger(__name__)

STEP_KEY = "wizard_step"

STEP_INTRO = 0
STEP_INPUTS = 1
STEP_RESULTS = 2
STEP_SCENARIOS = 3
STEP_ANALYSIS = 4

STEP_TITLES = [
    "Start",
    "Business data",
    "Financial results",
    "Scenario analysis",
    "Executive analysis",
]


def _go_to(step: int) -> None:
    logger.info("Wizard step -> %s", STEP_TITLES[step])
    st.session_state[STEP_KEY] = step


def _submit_inputs() -> None:
    if not submit_business_inputs():
        _go_to(STEP_RESULTS)


def _restart() -> None:
    reset_business_inputs()
    set_active_scenario(default_scenario())
    _go_to(STEP_INTRO)


def _nav_buttons(
    back_step: int,
    next_step: int | None = None,
    next_label: str = "Next",
) -> None:
    col_back, _, col_next = st.columns([1, 2, 1])
    with col_back:
        st.button(
            "← Back",
            key=f"back_{back_step}",
            on_click=_go_to,
            args=(back_step,),
        )
    if next_step is not None:
        with col_next:
            st.button(
                f"{next_label} →",
                key=f"next_{next_step}",
                type="primary",
                on_click=_go_to,
                args=(next_step,),
            )


def _render_methodology() -> None:
    with st.expander("📋 Assumptions & Methodology", expanded=False):
        render_assumptions_and_methodology()


def _render_intro() -> None:
    st.markdown("#### Financial planning tool")
    st.header("Find out whether your business idea is viable")
    st.markdown(
        "Simulate revenue and costs, and see how long it takes to recover your "
        "investment."
    )

    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown("**🧮 Enter your figures**")
        st.caption("Costs, prices and sales volume in a simple form.")
    with col2:
        st.markdown("**📈 See the results**")
        st.caption("Profitability, margins and payback calculated automatically.")
    with col3:
        st.markdown("**🎯 Compare scenarios**")
        st.caption("Optimistic, realistic and pessimistic side by side.")

    st.button(
        "Start simulation →",
        type="primary",
        on_click=_go_to,
        args=(STEP_INPUTS,),
    )


def _render_inputs_step() -> None:
    st.header("Business data")
    inputs = render_business_inputs()

    errors = validate_business_inputs(inputs)
    for error in errors:
        st.error(error)
    if errors:
        logger.warning("Inputs rejected: %s", "; ".join(errors))

    col_back, _, col_next = st.columns([1, 2, 1])
    with col_back:
        st.button("← Back", on_click=_go_to, args=(STEP_INTRO,))
    with col_next:
        st.button(
            "Calculate viability →",
            type="primary",
            disabled=bool(errors),
            on_click=_submit_inputs,
        )


def _render_pdf_download(inputs: BusinessInputs, results: CalculatedResults) -> None:
    pdf_bytes = build_pdf_report(
        inputs=inputs,
        results=results,
        scenario_results=compute_all_scenarios(inputs),
        risks=identify_risks(results, inputs),
    )
    st.download_button(
        "Download PDF report",
        data=pdf_bytes,
        file_name=f"viability_{results.scenario.value}.pdf",
        mime="application/pdf",
    )


def _render_analysis_actions(
    inputs: BusinessInputs,
    results: CalculatedResults,
) -> None:
    col_restart, col_pdf, col_adjust = st.columns(3)
    with col_restart:
        st.button("↺ Start again", on_click=_restart)
    with col_pdf:
        _render_pdf_download(inputs, results)
    with col_adjust:
        st.button(
            "Adjust scenarios",
            type="primary",
            on_click=_go_to,
            args=(STEP_SCENARIOS,),
        )


def render_footer() -> None:
    st.markdown("---")
    st.markdown(
        f"<p style='text-align: center;'>Version {APP_VERSION}</p>",
        unsafe_allow_html=True,
    )


def render_simulator() -> None:
    inject_metric_styles()

    step = st.session_state.setdefault(STEP_KEY, STEP_INTRO)
    st.progress(
        (step + 1) / len(STEP_TITLES),
        text=f"Step {step + 1} of {len(STEP_TITLES)} · {STEP_TITLES[step]}",
    )

    if step == STEP_INTRO:
        _render_intro()
        render_footer()
        return

    if step == STEP_INPUTS:
        _render_inputs_step()
        render_footer()
        return

    # Later steps always work from the last submitted (validated) inputs
    inputs = get_business_inputs()
    scenario = get_active_scenario()

    if step == STEP_RESULTS:
        render_results_step(compute(inputs, scenario), inputs)
        _render_methodology()
        _nav_buttons(STEP_INPUTS, STEP_SCENARIOS, "Scenario analysis")
    elif step == STEP_SCENARIOS:
        render_scenarios_step(inputs, compute_all_scenarios(inputs))
        _render_methodology()
        _nav_buttons(STEP_RESULTS, STEP_ANALYSIS, "Executive analysis")
    elif step == STEP_ANALYSIS:
        results = compute(inputs, scenario)
        render_analysis_step(
            results=results,
            inputs=inputs,
            scenario=scenario,
            risks=identify_risks(results, inputs),
        )
        _render_analysis_actions(inputs, results)
        _render_methodology()
    else:
        logger.warning("Unknown wizard step %r, restarting", step)
        _restart()
        st.rerun()

    render_footer()
