import os
import logging

try:
    import streamlit as st  # type: ignore
    _HAS_STREAMLIT = True
except Exception:
    _HAS_STREAMLIT = False

logger = logging.getLogger(__name__)


def get_secret(name: str, default: str | None = None) -> str | None:
    # Prefer Streamlit secrets if available
    if _HAS_STREAMLIT:
        try:
            if name in st.secrets:
                return str(st.secrets.get(name))
        except Exception:
            # No secrets.toml configured
            logger.debug("Streamlit secrets unavailable for %s", name)
    return os.environ.get(name, default)


class Settings:
    @property
    def log_level(self) -> str:
        return (get_secret("LOG_LEVEL", "INFO") or "INFO").upper()

    @property
    def app_title(self) -> str:
        return get_secret("APP_TITLE", "Seizure Insight Advisor") or "Seizure Insight Advisor"

    @property
    def emergency_number(self) -> str:
        return get_secret("EMERGENCY_NUMBER", "911") or "911"

    @property
    def probability_decimals(self) -> int:
        raw = get_secret("PROBABILITY_DECIMALS", "1")
        try:
            return max(0, int(raw))
        except (TypeError, ValueError):
            logger.warning("Invalid PROBABILITY_DECIMALS %r; using 1", raw)
            return 1
