import streamlit as st
import matplotlib.pyplot as plt

from pizza_sales.kpis import build_figures
from pizza_sales.report_text import REPORT_TEXT, SECTIONS
from pizza_sales.reports import run_all
from pizza_sales.storage import load_dataset


st.title(" Pizza Sales Analysis ")

ds = load_dataset()
if ds.orders.empty:
    st.error("No stored tables found. Run first: python -m pizza_sales.run_demo")
    st.stop()

results = run_all(ds)
figs = build_figures(results)

# --- headline cards ---
col1, col2, col3, col4 = st.columns(4)
col1.metric("Orders", int(results["total_orders"].iloc[0, 0]))
col2.metric("Revenue", f"${results['total_revenue'].iloc[0, 0]:,.2f}")
col3.metric("Pizzas / day", int(results["average_pizzas_per_day"].iloc[0, 0]))
size = results["most_common_size"]
col4.metric("Top size", size["size"].iloc[0] if not size.empty else "-")

with st.expander("About the data"):
    st.write(REPORT_TEXT)

st.divider()

tabs = st.tabs([f" {name}" for name in SECTIONS])

for tab, (section, items) in zip(tabs, SECTIONS.items()):
    with tab:
        for name, title in items:
            st.subheader(title)
            st.dataframe(results[name], use_container_width=True, hide_index=True)

# ================== CHARTS ==================
st.subheader(" Dashboard")

r1c1, r1c2 = st.columns(2)
with r1c1:
    st.caption("Orders by hour")
    st.pyplot(figs["kpi_orders_by_hour"], use_container_width=True)
with r1c2:
    st.caption("Top pizzas (quantity)")
    st.pyplot(figs["kpi_top_quantity"], use_container_width=True)

r2c1, r2c2 = st.columns(2)
with r2c1:
    st.caption("Quantity by category")
    st.pyplot(figs["kpi_quantity_by_category"], use_container_width=True)
with r2c2:
    st.caption("Cumulative revenue")
    st.pyplot(figs["kpi_cumulative_revenue"], use_container_width=True)

plt.close("all")
