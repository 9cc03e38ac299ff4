"""Streamlit work entry app: Work and Settings tabs."""

from datetime import date

import streamlit as st

from workhours.core.config import settings
from workhours.schemas.preferences import ColorScheme, Preferences
from workhours.services.order_form import OrderFormController
from workhours.services.preferences_service import load_preferences, try_save_preferences
from workhours.services.work_timer import WorkTimer, format_elapsed
from streamlit_app.common import get_order_store, get_store_engine, now_string

st.set_page_config(page_title=settings.app_name, layout="centered")

store = get_order_store()

if "preferences" not in st.session_state:
    st.session_state.preferences = load_preferences(get_store_engine())
if "controller" not in st.session_state:
    st.session_state.controller = OrderFormController(store, st.session_state.preferences)
if "timer" not in st.session_state:
    st.session_state.timer = WorkTimer()

controller: OrderFormController = st.session_state.controller
preferences: Preferences = st.session_state.preferences
timer: WorkTimer = st.session_state.timer

work_tab, settings_tab = st.tabs(["Work", "Settings"])

with work_tab:
    st.title("Workhours Booker")
    st.caption(f"Last refresh: {now_string()}")

    timer_col, start_col, stop_col = st.columns([2, 1, 1])
    timer_col.metric("Timer", format_elapsed(timer.elapsed()))
    if start_col.button("Start", disabled=timer.is_running):
        timer.start()
        st.rerun()
    if stop_col.button("Stop", disabled=not timer.is_running):
        timer.stop()
        st.rerun()

    draft = controller.draft
    entry_date: date = st.date_input("Date", value=draft.date)
    customer: str = st.text_input("Customer", value=draft.customer)
    is_external: bool = st.toggle(controller.toggle_label, value=draft.is_external)
    controller.update(date=entry_date, customer=customer, is_external=is_external)

    if is_external:
        customer_order: str = st.text_input("Customer Order", value=draft.customer_order)
        customer_amount: str = st.text_input("Customer Amount", value=draft.customer_amount)
        spirit_order: str = st.text_input("Spirit Order", value=draft.spirit_order)
        description: str = st.text_area("Description", value=draft.description)
        controller.update(
            customer_order=customer_order,
            customer_amount=customer_amount,
            spirit_order=spirit_order,
            description=description,
        )
        hours_text = controller.hours_preview()
        if hours_text is not None:
            st.markdown(f"**{hours_text}**")
    else:
        hours_booked: str = st.text_input("Hours Booked", value=draft.hours_booked)
        spirit_order = st.text_input("Spirit Order", value=draft.spirit_order)
        description = st.text_area("Description", value=draft.description)
        controller.update(hours_booked=hours_booked, spirit_order=spirit_order, description=description)
        cost_text = controller.cost_preview()
        if cost_text is not None:
            st.markdown(f":red[**{cost_text}**]")

    if st.button(controller.save_label, type="primary"):
        result = controller.save()
        if result.ok:
            st.success(f"Order #{result.order_id} saved.")
        else:
            st.error(result.error or "Failed to save order.")

with settings_tab:
    st.title("Settings")

    st.subheader("Color Settings")
    schemes: list[ColorScheme] = list(ColorScheme)
    scheme: ColorScheme = st.radio(
        "Appearance",
        schemes,
        index=schemes.index(preferences.color_scheme),
        format_func=lambda option: option.value.capitalize(),
        horizontal=True,
    )

    st.subheader("Rates")
    net_percentage: str = st.text_input("Net percentage (%)", value=preferences.net_percentage)
    hour_rate: str = st.text_input(f"Hour rate ({settings.currency_symbol})", value=preferences.hour_rate)

    updated = Preferences(color_scheme=scheme, net_percentage=net_percentage, hour_rate=hour_rate)
    if updated != preferences:
        if not try_save_preferences(get_store_engine(), updated):
            st.error("Could not save settings. Please try again.")
        else:
            st.session_state.preferences = updated
            controller.set_preferences(updated)
            st.rerun()
