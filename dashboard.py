import streamlit as st
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from phone_book.benchmark import run_benchmark, summarize_runs
from phone_book.data_loader import generate_directory, generate_queries, read_lines
from phone_book.strategies import BUBBLE_SORT_MAX_ENTRIES, STRATEGIES, create_strategy, default_strategies
from phone_book.timing import format_duration
from phone_book.utils import MalformedEntryError

st.set_page_config(page_title="Phone Book Search Benchmark", layout="wide")

st.title("Phone Book Search Benchmark")
st.markdown("Compare linear search, bubble sort + jump search, quick sort + binary search and hash table lookups on a phone directory.")

st.sidebar.header("Configuration")

# Input Selection
st.sidebar.subheader("Input")
input_type = st.sidebar.radio(
    "Select Input",
    options=["Generated Directory", "Directory Files"],
    help="Generate a synthetic directory or read directory.txt / find.txt style files"
)

if input_type == "Generated Directory":
    num_entries = st.sidebar.number_input(
        "Directory Size",
        min_value=10,
        max_value=200000,
        value=2000,
        step=500,
        help="Number of generated '<number> <name>' entries. Bubble sort is O(n^2), keep this small when it is selected."
    )
    num_queries = st.sidebar.number_input(
        "Names to Find",
        min_value=1,
        max_value=10000,
        value=200,
        step=50,
    )
    miss_ratio = st.sidebar.slider(
        "Miss Ratio",
        min_value=0.0,
        max_value=1.0,
        value=0.1,
        step=0.05,
        help="Share of names to find that are absent from the directory"
    )
    seed = st.sidebar.number_input("Seed", min_value=0, max_value=2**31 - 1, value=42)
else:
    directory_path = st.sidebar.text_input("Directory File", value="directory.txt")
    find_path = st.sidebar.text_input("Find File", value="find.txt")

num_runs = st.sidebar.number_input(
    "Number of Benchmark Runs",
    min_value=1,
    max_value=20,
    value=3,
    help="Number of full passes to average the timings over"
)

st.sidebar.subheader("Strategies to Benchmark")
directory_size = int(num_entries) if input_type == "Generated Directory" else None
default_selection = default_strategies(directory_size)
# Keyed on the default so the box resets when the size crosses the bubble sort limit
selected_strategies = [
    key for key, strategy_cls in STRATEGIES.items()
    if st.sidebar.checkbox(strategy_cls.name.title(), value=key in default_selection,
                           key=f"run_{key}_{key in default_selection}")
]
if "jump" in selected_strategies and directory_size is not None and directory_size > BUBBLE_SORT_MAX_ENTRIES:
    st.sidebar.warning(f"Bubble sort is O(n^2) and will take very long above {BUBBLE_SORT_MAX_ENTRIES:,} entries.")

col1, col2 = st.columns([1, 3])

with col1:
    run_button = st.button("Run Benchmark", type="primary", use_container_width=True)

with col2:
    if input_type == "Generated Directory":
        st.info(f"Configuration: {num_entries:,} entries, {num_queries:,} names ({miss_ratio:.0%} misses), {num_runs} runs")
    else:
        st.info(f"Configuration: {directory_path} / {find_path}, {num_runs} runs")

if 'results' not in st.session_state:
    st.session_state.results = None


def load_dashboard_inputs():
    """Reads or generates the directory and names to find for the current configuration."""
    if input_type == "Generated Directory":
        directory = generate_directory(int(num_entries), seed=int(seed))
        queries = generate_queries(directory, int(num_queries), miss_ratio=miss_ratio, seed=int(seed))
    else:
        directory = read_lines(directory_path)
        queries = read_lines(find_path)
    return directory, queries


def results_to_frame(results):
    """Flattens strategy results into one row per strategy."""
    rows = []
    for result in results:
        search_ms = result.phase_ms("searching")
        rows.append({
            "Strategy": result.strategy_name,
            "Found": result.matches_found,
            "Total Queries": result.total_queries,
            "Build (ms)": round(result.total_ms - search_ms, 3),
            "Search (ms)": round(search_ms, 3),
            "Total (ms)": round(result.total_ms, 3),
            "Time Taken": format_duration(result.total_ms),
        })
    return pd.DataFrame(rows)


def run_benchmark_pipeline():
    """Run the complete benchmark pipeline"""
    progress_bar = st.progress(0)
    status_text = st.empty()

    status_text.text("Loading input data...")
    try:
        directory, queries = load_dashboard_inputs()
    except FileNotFoundError as e:
        status_text.empty()
        st.error(f"Input file not found: {e.filename}")
        return

    total_steps = num_runs * len(selected_strategies)

    runs = []
    for run in range(num_runs):
        def on_progress(name, index, total, run=run):
            step = run * total + index
            progress_bar.progress(int(100 * step / total_steps))
            status_text.text(f"Run {run+1}/{num_runs}: {name}...")

        try:
            runs.append(run_benchmark(directory, queries, strategies=selected_strategies,
                                      progress_callback=on_progress))
        except MalformedEntryError as e:
            status_text.empty()
            st.error(str(e))
            return

    progress_bar.progress(100)
    status_text.text("Benchmark complete.")

    summary = summarize_runs(runs)
    st.session_state.results = results_to_frame(summary)
    st.session_state.phase_data = {r.strategy_name: r.phase_timings for r in summary}
    st.session_state.total_spread = {
        create_strategy(key).name: float(np.std([run[i].total_ms for run in runs]))
        for i, key in enumerate(selected_strategies)
    }
    st.session_state.data_size = len(directory)
    st.session_state.query_count = len(queries)


if run_button:
    if not selected_strategies:
        st.warning("Select at least one strategy.")
    else:
        run_benchmark_pipeline()

if st.session_state.results is not None:
    st.markdown("---")
    st.subheader("Results")

    metric_cols = st.columns(3)
    with metric_cols[0]:
        st.metric("Directory Size", f"{st.session_state.data_size:,} entries")
    with metric_cols[1]:
        st.metric("Names to Find", f"{st.session_state.query_count:,}")
    with metric_cols[2]:
        fastest = st.session_state.results.sort_values("Total (ms)").iloc[0]
        st.metric("Fastest Strategy", fastest["Strategy"], f"{fastest['Total (ms)']:.2f} ms", delta_color="off")

    st.dataframe(st.session_state.results, use_container_width=True, hide_index=True)

    found_counts = set(st.session_state.results["Found"])
    if len(found_counts) > 1:
        st.caption("Linear search matches substrings of whole entries, the other strategies only match exact names, so counts can differ.")

    # Stacked phase timings
    phase_fig = go.Figure()
    phase_names = []
    for timings in st.session_state.phase_data.values():
        for phase, _ in timings:
            if phase not in phase_names:
                phase_names.append(phase)

    strategies_shown = list(st.session_state.phase_data.keys())
    for phase in phase_names:
        phase_fig.add_trace(go.Bar(
            name=phase.capitalize(),
            x=strategies_shown,
            y=[dict(st.session_state.phase_data[s]).get(phase, 0.0) for s in strategies_shown],
        ))

    phase_fig.update_layout(
        barmode="stack",
        title="Average Phase Timings",
        xaxis_title="Strategy",
        yaxis_title="Time (ms)",
        height=450,
    )
    st.plotly_chart(phase_fig, use_container_width=True, key="phase_chart")

    with st.expander("Run-to-run spread"):
        for name, spread in st.session_state.total_spread.items():
            st.caption(f"{name}: ±{spread:.3f} ms (std. dev. of total time)")
