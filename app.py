import logging

import streamlit as st

from src.config import settings
from src.ui.layout import render_simulator


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    configure_logging()
    st.set_page_config(
        page_title="Business Viability Simulator",
        layout="wide",
    )
    render_simulator()


if __name__ == "__main__":
    main()
