# src/config/settings.py

import os

from src.config.env import APP_ENV, ENV_DEV

# --- Logging ---

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if APP_ENV == ENV_DEV else "INFO").upper()

# --- Default business assumptions (wizard starting point) ---

DEFAULT_INITIAL_INVESTMENT = 50_000.0
DEFAULT_MONTHLY_FIXED_COST = 5_000.0
DEFAULT_VARIABLE_COST_PER_UNIT = 15.0
DEFAULT_SELLING_PRICE_PER_UNIT = 50.0
DEFAULT_MONTHLY_SALES_VOLUME = 200.0
DEFAULT_TAX_RATE_PCT = 15.0

# Upper bound accepted by the inputs form (tax is a percentage of operating profit)
MAX_TAX_RATE_PCT = 100.0

# --- Scenario modelling ---

# Scenario a new (or restarted) session starts on
DEFAULT_SCENARIO = os.getenv("DEFAULT_SCENARIO", "realistic")

# Multipliers applied to the seller's own assumptions. Selling price is never shocked.
# e.g. 0.8 = 20% fewer units sold, 1.1 = costs 10% higher
SCENARIO_PESSIMISTIC_VOLUME_MULT = 0.8
SCENARIO_PESSIMISTIC_FIXED_COST_MULT = 1.1
SCENARIO_PESSIMISTIC_VARIABLE_COST_MULT = 1.1

SCENARIO_REALISTIC_VOLUME_MULT = 1.0
SCENARIO_REALISTIC_FIXED_COST_MULT = 1.0
SCENARIO_REALISTIC_VARIABLE_COST_MULT = 1.0

SCENARIO_OPTIMISTIC_VOLUME_MULT = 1.2
SCENARIO_OPTIMISTIC_FIXED_COST_MULT = 0.9
SCENARIO_OPTIMISTIC_VARIABLE_COST_MULT = 0.9

# --- Risk thresholds (all in %, payback in months) ---

RISK_LOW_MARGIN_PCT = 10.0
RISK_MODERATE_MARGIN_PCT = 20.0
RISK_LONG_PAYBACK_MONTHS = 24.0
RISK_MODERATE_PAYBACK_MONTHS = 12.0
RISK_HIGH_FIXED_COST_RATIO_PCT = 50.0
RISK_SIGNIFICANT_FIXED_COST_RATIO_PCT = 30.0
# Break-even above this fraction of expected volume counts as "close to break-even"
RISK_NEAR_BREAK_EVEN_FRACTION = 0.9

# --- KPI signal thresholds ---

KPI_HEALTHY_MARGIN_PCT = 20.0
KPI_FAST_PAYBACK_MONTHS = 12.0
KPI_MODERATE_PAYBACK_MONTHS = 24.0

# --- Projection ---

CASHFLOW_PROJECTION_MONTHS = 24
CASHFLOW_TICK_EVERY_MONTHS = 4

# --- Display ---

CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")
NOT_RECOVERABLE_LABEL = "Not recoverable"
NOT_APPLICABLE_LABEL = "N/A"

# Scenario line colours (Plotly-compatible)
SCENARIO_PESSIMISTIC_COLOR = "#d62728"
SCENARIO_REALISTIC_COLOR = "#1f77b4"
SCENARIO_OPTIMISTIC_COLOR = "#2ca02c"
SCENARIO_SELECTED_LINE_WIDTH = 3
SCENARIO_OTHER_LINE_WIDTH = 1.5

# Streamlit metric styling (default theme)
METRIC_FONT_FAMILY = "Source Sans Pro, sans-serif"
METRIC_FONT_WEIGHT = 700
METRIC_FONT_SIZE_REM = 1.4
