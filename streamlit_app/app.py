import streamlit as st
import pandas as pd

from data_analysis.build_state_rollup import ALL_YEARS, ranked_to_frame
from streamlit_app.controller import load_dashboard, on_filter_change, year_options
from utils import settings
from utils.formatting import format_count, format_currency, format_percentage

settings.configure_logging()

st.set_page_config(page_title="Revenue by State", layout="wide")

# =============================
# DATA LOADING
# =============================
@st.cache_data(show_spinner="Loading orders...")
def load_state(source, timeout):
    return load_dashboard(source, timeout)

state = load_state(settings.orders_source(), settings.fetch_timeout())

# =============================
# SIDEBAR CONTROLS
# =============================
st.sidebar.title("Revenue by State")
st.sidebar.markdown("---")
st.sidebar.markdown("## Data Controls")
selected_year = st.sidebar.selectbox(
    "Year",
    year_options(state),
    index=0,
    format_func=lambda y: "All years" if y == ALL_YEARS else str(y),
    key="year_select",
)
top_n = st.sidebar.slider("Show top N states", 1, 50, min(settings.top_n(), 50), key="top_n_slider")
st.sidebar.markdown("---")
st.sidebar.caption(f"Source: {settings.orders_source()}")

view = on_filter_change(state, selected_year, top_n)

# =============================
# DASHBOARD
# =============================
period = "All years" if view.year_filter == ALL_YEARS else str(view.year_filter)
st.title(f"Top States by Revenue: {period}")

if view.error_message:
    st.error(view.error_message)

# --- KPIs ---
kpi_cols = st.columns(5)
kpi_cols[0].metric("Total Revenue", format_currency(view.overall.total_revenue))
kpi_cols[1].metric("Total Orders", format_count(view.overall.total_orders))
kpi_cols[2].metric("States", format_count(view.overall.total_states))
kpi_cols[3].metric("Avg Order Value", format_currency(view.overall.avg_order_value))
kpi_cols[4].metric("Avg Revenue per State", format_currency(view.overall.avg_state_revenue))

st.markdown("---")
st.subheader(f"Top {top_n} States")

if not view.ranked:
    st.info("No data to display.")
else:
    table = pd.DataFrame([
        {
            "Rank": row.rank,
            "State": row.state,
            "Orders": format_count(row.order_count),
            "Revenue": format_currency(row.revenue),
            "Share": format_percentage(row.percentage),
        }
        for row in view.ranked
    ])
    st.dataframe(table, use_container_width=True, hide_index=True)

    st.caption(f"Showing {view.shown_states} states, {format_currency(view.shown_revenue)} in revenue.")

    raw = ranked_to_frame(view.ranked)
    st.download_button("Download Table", raw.to_csv(index=False), file_name=f"top_states_{view.year_filter}.csv")
