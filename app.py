import streamlit as st
import os
import sys
import json
import tempfile
from collections import Counter

import pandas as pd
import plotly.graph_objects as go

# Добавляем путь к src, чтобы Python видел пакет borkopt
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

from borkopt.engine import optimize, optimize_batch
from borkopt.errors import OptimizationError
from borkopt.factory import OrganismFactory
from borkopt.sequence import detect
from borkopt.utils.genbank_export import GenBankExporter
from borkopt.utils.reporting import ReportGenerator

# --- Конфигурация страницы ---
st.set_page_config(
    page_title="Codon Optimizer",
    page_icon="🧬",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
    <style>
    .stApp { background-color: #f8f9fa; }
    .stButton > button {
        width: 100%;
        border-radius: 8px !important;
        height: 3.5em !important;
        font-weight: 600 !important;
    }
    code { font-family: 'Courier New', monospace; }
    </style>
""", unsafe_allow_html=True)

# --- Визуализация (Plotly) ---

def get_codon_plot(seq):
    """Частоты кодонов в результате (один кодон на аминокислоту - видно сразу)"""
    counts = Counter(seq[i:i+3] for i in range(0, len(seq) - 2, 3))
    codons = sorted(counts)
    fig = go.Figure()
    fig.add_trace(go.Bar(x=codons, y=[counts[c] for c in codons], marker_color='#2ecc71'))
    fig.update_layout(
        height=350,
        margin=dict(l=10, r=10, t=40, b=10),
        xaxis_title="Codon",
        yaxis_title="Count",
    )
    return fig

def load_profile(organism, usage_file):
    factory = OrganismFactory()
    if usage_file is None:
        return factory.create(organism)
    # DataLoader читает с диска, поэтому сохраняем загруженный JSON во временный файл
    with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False) as tmp:
        json.dump(json.load(usage_file), tmp)
    try:
        return factory.from_usage_file(tmp.name, name=usage_file.name)
    finally:
        os.remove(tmp.name)

# --- Боковая панель ---

with st.sidebar:
    st.title("🧬 Codon Optimizer")
    st.caption("Greedy substitution: one preferred codon per amino acid")
    st.divider()

    st.markdown("#### 🏥 Host Organism")
    organism = st.selectbox("Preset:", OrganismFactory.presets())
    usage_upload = st.file_uploader("Or custom codon usage (JSON)", type=["json"])

    st.markdown("#### ⚙️ Options")
    mode = st.radio("Input type:", ["auto", "protein", "nucleotide"], horizontal=True)
    alphabet = st.radio("Output alphabet:", ["dna", "rna"], horizontal=True)
    st.caption("Auto-detect treats pure ACGT text as protein. Pick 'nucleotide' for DNA/RNA input.")

try:
    profile = load_profile(organism, usage_upload)
except (OSError, ValueError) as e:
    st.sidebar.error(f"Invalid codon usage file: {e}")
    profile = OrganismFactory.create(organism)

st.title("🧬 Codon Optimizer")
st.caption(f"Target host: {profile.name}")
st.markdown("---")

t1, t2 = st.tabs(["🎯 Single Sequence", "📦 Batch Processing (FASTA)"])

# --- ВКЛАДКА 1: одна последовательность ---
with t1:
    col_input, col_info = st.columns([2, 1])

    with col_input:
        uploaded = st.file_uploader("Load FASTA / text file", type=["fasta", "fa", "txt"], key="single_file")
        default_text = uploaded.getvalue().decode("utf-8") if uploaded else ""
        raw_input = st.text_area("Input sequence (protein or DNA/RNA, FASTA allowed):", value=default_text, height=200)

    with col_info:
        record_name = st.text_input("Record name", "optimized")
        detected = detect(raw_input)
        st.info(f"Detected: **{detected.value if detected else 'none'}**")
        run_btn = st.button("🚀 Optimize", type="primary", use_container_width=True)

    if run_btn:
        try:
            result = optimize(raw_input, mode=mode, output_alphabet=alphabet,
                              record_name=record_name, profile=profile)
        except OptimizationError as e:
            # Только сообщение об ошибке, без старого результата
            st.error(f"❌ {e.message}")
        else:
            st.success(f"✨ Optimized {len(result.protein)} codons ({result.mode.value} input)")
            st.code(result.fasta, language="text")

            dl1, dl2, dl3 = st.columns(3)
            with dl1:
                st.download_button("📥 Download FASTA", result.fasta, result.filename, use_container_width=True)
            with dl2:
                gb_data = GenBankExporter.create_record(result, profile)
                st.download_button("📥 Download GenBank (.gb)", gb_data, f"{result.name}.gb", use_container_width=True)
            with dl3:
                pdf_rep = ReportGenerator.create_pdf(result, profile)
                st.download_button("📄 Download PDF Report", data=pdf_rep, file_name=f"Report_{result.name}.pdf", use_container_width=True)

            st.plotly_chart(get_codon_plot(result.sequence), use_container_width=True)

# --- ВКЛАДКА 2: пакетная обработка ---
with t2:
    st.markdown("### 📦 Bulk Sequence Optimization")
    st.write("Upload a multi-FASTA file. Every record is optimized with the current sidebar settings.")

    batch_file = st.file_uploader("Upload FASTA file", type=["fasta", "fa", "txt"], key="batch_file")

    if batch_file and st.button("🛠️ Execute Batch Process", type="primary"):
        items = optimize_batch(batch_file.getvalue().decode("utf-8"), mode=mode,
                               output_alphabet=alphabet, profile=profile)
        if not items:
            st.error("No sequences found in the uploaded file.")
        else:
            rows = []
            for item in items:
                rows.append({
                    "ID": item.record.name,
                    "Input Length": len(item.record.residues),
                    "Type": item.result.mode.value if item.ok else "",
                    "Status": "OK" if item.ok else item.error.message,
                    "Optimized": item.result.sequence if item.ok else "",
                })
            df_results = pd.DataFrame(rows)
            st.dataframe(df_results.drop(columns=["Optimized"]), use_container_width=True)

            fasta_out = "".join(i.result.fasta for i in items if i.ok)
            c1, c2 = st.columns(2)
            with c1:
                st.download_button("📥 Download All (FASTA)", fasta_out, "batch_optimized.fasta", use_container_width=True)
            with c2:
                csv_out = df_results.to_csv(index=False).encode('utf-8')
                st.download_button("📥 Download Results (CSV)", csv_out, "batch_results.csv", "text/csv", use_container_width=True)
