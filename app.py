import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px

from merge_trie.config import DotConfig
from merge_trie.dot import RANKDIRS, SentinelPolicy, to_dot
from merge_trie.trie import Trie
from samples.work_load import WorkLoad

# Configure page
st.set_page_config(
    page_title="Merge Trie Explorer",
    page_icon="🌳",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Main title
st.title("🌳 Merge Trie Explorer")
st.markdown("---")


def load_lines(source):
    """Return the raw input lines for the selected source, or None."""
    if source == "Paste Text":
        text = st.text_area("One word per line", value="win\nwon\nwind\nwonder", height=200)
        return text.splitlines()

    if source == "Upload File":
        uploaded_file = st.file_uploader(
            "Choose a text file",
            type=['txt'],
            help="Upload a text file with one word per line"
        )
        if uploaded_file is None:
            st.info("👆 Please upload a text file to begin")
            return None
        try:
            return uploaded_file.getvalue().decode("utf-8").splitlines()
        except UnicodeDecodeError as e:
            st.error(f"❌ Error reading file: {str(e)}")
            return None

    col1, col2 = st.columns(2)
    with col1:
        count = st.number_input("How many", min_value=1, max_value=500, value=25)
    with col2:
        seed = st.number_input("Seed", min_value=0, value=42)
    work_load = WorkLoad(seed=int(seed))

    if source == "Sample Words":
        p_freq = st.slider("Prefix frequency", min_value=0.0, max_value=1.0, value=0.5)
        return work_load.words(int(count), p_freq=p_freq)
    kind = "ipv4" if source == "Sample IPv4" else "domain"
    return work_load.hosts(int(count), kind=kind)


# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Graph", "Statistics", "Paths"]
    )

    st.markdown("---")
    st.subheader("Input")
    source = st.selectbox(
        "Source",
        ["Paste Text", "Upload File", "Sample Words", "Sample IPv4", "Sample Domains"]
    )

    st.subheader("Rendering")
    rankdir = st.selectbox("Layout direction", RANKDIRS)
    policy = st.radio(
        "At an end-of-word child",
        [p.value for p in SentinelPolicy],
        format_func=lambda v: "stop listing siblings" if v == "stop" else "skip it and continue",
    )
    keep_case = st.checkbox("Keep case", value=False)

config = DotConfig(rankdir=rankdir, sentinel_policy=policy, uppercase=not keep_case)

st.header("📝 Input")
lines = load_lines(source)
if lines is None:
    st.stop()

trie = Trie()
trie.batch_insert(lines, normalize=config.normalize)
st.session_state['dot'] = to_dot(trie, rankdir=config.rankdir, policy=config.sentinel_policy)

# Main content area
if page == "Graph":
    st.header("🌳 Trie Graph")

    if trie.count_nodes() == 0:
        st.warning("⚠️ No words to draw")
    else:
        st.graphviz_chart(st.session_state['dot'], use_container_width=True)

    with st.expander("DOT source"):
        st.code(st.session_state['dot'], language="dot")
    st.download_button("Download DOT", st.session_state['dot'], file_name="trie.dot")

elif page == "Statistics":
    st.header("📊 Trie Statistics")

    profile = np.array(trie.depth_profile(), dtype=int)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Input Lines", len(lines))
    with col2:
        st.metric("Roots", len(trie))
    with col3:
        st.metric("Nodes", trie.count_nodes())
    with col4:
        st.metric("Avg Branch Factor", f"{trie.count_nodes(get_avg_branch_factor=True):.2f}")

    if profile.size:
        depth_df = pd.DataFrame({
            'Depth': np.arange(profile.size),
            'Nodes': profile,
            'Cumulative': np.cumsum(profile),
        })
        fig = px.bar(depth_df, x='Depth', y='Nodes', title="Nodes per Depth")
        st.plotly_chart(fig, use_container_width=True)

        chars_in = sum(len(config.normalize(w)) for w in lines)
        if chars_in:
            st.write(f"**Sharing ratio:** {trie.count_nodes() / chars_in:.2%} of input characters became nodes")
        st.dataframe(depth_df, use_container_width=True)
    else:
        st.info("📁 Add some input to see statistics")

elif page == "Paths":
    st.header("🔍 Symbol Paths")

    paths = trie.symbol_paths()
    if paths:
        paths_df = pd.DataFrame(
            sorted(paths.items()), columns=['Path', 'Count']
        )
        paths_df['Length'] = paths_df['Path'].str.len()
        st.dataframe(paths_df, use_container_width=True)

        fig_len = px.histogram(paths_df, x='Length', title="Distribution of Path Lengths")
        st.plotly_chart(fig_len, use_container_width=True)
    else:
        st.info("📁 Add some input to see paths")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Merge Trie Explorer
    </div>
    """,
    unsafe_allow_html=True
)
