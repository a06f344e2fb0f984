import streamlit as st
import numpy as np
import matplotlib.pyplot as plt

from classical.errors import MaxCalorieError
from classical.food import filter_catalog
from classical.knapsack_dp import build_dp_table, solve_dp
from classical.knapsack_exhaustive import solve_exhaustive
from classical.dispatch import solve_max_calories
from data.sample_catalogs import capacity_for, pantry_catalog, random_catalog, textbook_catalog
from utils.benchmark import sweep_solvers
from utils.config import MAX_EXHAUSTIVE_ITEMS
from utils.report import catalog_frame, format_solution, solution_frame, solution_summary

st.set_page_config(page_title="MaxCalorie — Food Knapsack Explorer", layout="wide")

st.title("MaxCalorie — Food Knapsack Explorer")
st.caption("Most calories under a weight limit • Exhaustive search vs dynamic programming")


def init_state():
    if "generated" not in st.session_state:
        st.session_state.generated = False
        st.session_state.catalog = None
        st.session_state.capacity = None


init_state()


def generate_instance(source, seed, **kwargs):
    """Create and store the catalog in session_state. Only called when user clicks Generate."""
    if source == "Textbook":
        catalog = textbook_catalog()
    elif source == "Pantry":
        catalog = pantry_catalog()
    else:
        catalog = random_catalog(
            kwargs["n"], seed=int(seed),
            value_range=(kwargs["val_min"], kwargs["val_max"]),
            weight_range=(kwargs["wt_min"], kwargs["wt_max"]),
        )
    if kwargs.get("max_size"):
        catalog = filter_catalog(catalog, kwargs["cal_min"], kwargs["cal_max"], kwargs["max_size"])
    st.session_state.catalog = catalog
    st.session_state.capacity = capacity_for(catalog, kwargs["cap_ratio"])
    st.session_state.generated = True


with st.sidebar:
    st.header("Catalog")
    source = st.selectbox("Source", ["Textbook", "Pantry", "Random"], index=0)
    seed = st.number_input("Random seed", value=42, step=1)

    if source == "Random":
        n = st.slider("Items (n)", 4, 40, 12)
        val_min, val_max = st.slider("Calorie range", 0, 500, (5, 200))
        wt_min, wt_max = st.slider("Weight range", 1, 50, (3, 15))
    else:
        n, val_min, val_max, wt_min, wt_max = None, None, None, None, None

    st.header("Filter")
    use_filter = st.checkbox("Keep only foods within a calorie range", value=False)
    cal_min, cal_max = st.slider("Keep calories in", 0, 1000, (1, 1000), disabled=not use_filter)
    max_size = st.slider("Keep at most", 1, 40, MAX_EXHAUSTIVE_ITEMS, disabled=not use_filter)

    st.header("Knapsack")
    cap_ratio = st.slider("Capacity ratio (vs total weight)", 0.0, 1.0, 0.5)
    method = st.selectbox("Method", ["auto", "exhaustive", "dp"], index=0)

    run_btn = st.button("Generate & Solve", use_container_width=True)

if run_btn:
    generate_instance(
        source, seed,
        n=n, val_min=val_min, val_max=val_max, wt_min=wt_min, wt_max=wt_max,
        cal_min=cal_min, cal_max=cal_max, max_size=max_size if use_filter else None,
        cap_ratio=cap_ratio,
    )

if not st.session_state.generated:
    st.info("Configure the catalog in the sidebar, then click **Generate & Solve**.")
    st.stop()

catalog = st.session_state.catalog
capacity = st.session_state.capacity

tab_solve, tab_table, tab_bench = st.tabs(["Solve", "DP table", "Benchmark"])

with tab_solve:
    st.subheader("Catalog")
    st.write(f"Items: {len(catalog)}, capacity: {capacity} ounces")
    st.dataframe(catalog_frame(catalog), use_container_width=True)

    try:
        chosen = solve_max_calories(catalog, capacity, method=method)
    except MaxCalorieError as e:
        st.error(str(e))
    else:
        st.subheader(f"Best selection ({chosen.method})")
        st.dataframe(solution_frame(catalog, chosen), use_container_width=True)
        st.code(format_solution(catalog, chosen))

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Exhaustive search")
        if len(catalog) > MAX_EXHAUSTIVE_ITEMS:
            st.warning(f"Skipped: more than {MAX_EXHAUSTIVE_ITEMS} items. Use the filter to shrink the catalog.")
            ex = None
        else:
            ex = solve_exhaustive(catalog, capacity)
            st.json(solution_summary(catalog, ex, capacity=capacity))
    with col2:
        st.subheader("Dynamic programming")
        dp = solve_dp(catalog, capacity)
        st.json(solution_summary(catalog, dp, capacity=capacity))

    if ex is not None:
        if np.isclose(ex.total_value, dp.total_value):
            st.success("Both solvers reach the same calorie total.")
        else:
            st.warning(
                f"Solvers disagree: exhaustive {ex.total_value:g} vs DP {dp.total_value:g} "
                "(DP truncates fractional weights)."
            )

with tab_table:
    st.subheader("T[i][c]: best calories with the first i items and budget c")
    if len(catalog) * (capacity + 1) > 200_000:
        st.info("Table too large to draw.")
    else:
        T = build_dp_table(catalog, capacity)
        fig, ax = plt.subplots(figsize=(7.0, 4.0))
        im = ax.imshow(T, aspect="auto", origin="upper", interpolation="nearest")
        ax.set_xlabel("capacity budget c")
        ax.set_ylabel("items considered i")
        ax.set_title(f"DP table ({T.shape[0]} x {T.shape[1]})")
        fig.colorbar(im, ax=ax, shrink=0.85)
        st.pyplot(fig)

with tab_bench:
    st.subheader("Exhaustive vs DP: agreement and run time")
    n_range = st.slider("n range", 2, 30, (4, 16))
    trials = st.slider("Trials per n", 1, 5, 3)
    bench_ratio = st.slider("Capacity ratio (benchmark)", 0.1, 1.0, 0.5)
    run_bench = st.button("Run Benchmark", type="primary", key="run_bench")

    if run_bench:
        sizes = list(range(n_range[0], n_range[1] + 1, 2))
        with st.spinner("Solving random catalogs…"):
            df = sweep_solvers(sizes, trials=trials, seed=int(seed), cap_ratio=bench_ratio)
        st.dataframe(df, use_container_width=True)
        timing = df.groupby("n")[["dp_time_s", "exhaustive_time_s"]].mean().reset_index()
        st.markdown("**Mean run time vs n** (seconds)")
        st.line_chart(timing, x="n", y=["dp_time_s", "exhaustive_time_s"], height=240)
        checked = df.dropna(subset=["agree"])
        if not checked.empty:
            st.caption(f"Agreement: {int(checked['agree'].sum())}/{len(checked)} runs")
        else:
            st.caption("No run was small enough for exhaustive search.")
