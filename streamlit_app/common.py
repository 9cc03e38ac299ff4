"""Shared wiring for the Streamlit work entry app."""

from datetime import datetime

import streamlit as st
from sqlalchemy.engine import Engine

from workhours.core.config import settings
from workhours.core.logging import configure_logging
from workhours.db.session import get_engine
from workhours.services.order_store import OrderStore


@st.cache_resource
def get_order_store() -> OrderStore:
    configure_logging(settings.log_level)
    store = OrderStore(get_engine())
    store.ensure_schema()
    return store


def get_store_engine() -> Engine:
    return get_order_store().engine


def now_string() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M")
