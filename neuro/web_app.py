# ===============================================================
#  web_app.py — XOR Lab
#  Petit labo Streamlit autour du réseau paresseux (neuro)
#  Lancer avec : streamlit run neuro/web_app.py
# ===============================================================

from datetime import datetime

import numpy as np
import streamlit as st

from neuro.neural_network import LEARNING_RATE, Network, TrainingData
from neuro.nmath import make_weight_source


# ===============================================================
#    CONFIG STREAMLIT
# ===============================================================

st.set_page_config(
    page_title="XOR Lab – Neuro Playground",
    layout="wide"
)

st.title("🧠 XOR Lab")
st.caption("Réseau feed-forward sigmoïde, entraîné exemple par exemple.")


# ===============================================================
#    DONNÉES XOR
# ===============================================================

XOR_DATA = [
    TrainingData([1.0, 1.0], [0.0]),
    TrainingData([1.0, 0.0], [1.0]),
    TrainingData([0.0, 1.0], [1.0]),
    TrainingData([0.0, 0.0], [0.0]),
]


# ===============================================================
#    ÉTAT GLOBAL STREAMLIT
# ===============================================================

if "log_text" not in st.session_state:
    st.session_state.log_text = ""

if "metrics_history" not in st.session_state:
    st.session_state.metrics_history = []

if "current_run" not in st.session_state:
    st.session_state.current_run = None


def append_log(msg: str):
    st.session_state.log_text += msg + "\n"


def clear_log():
    st.session_state.log_text = ""


def results_table(net: Network):
    """Sorties du réseau sur les 4 entrées XOR."""
    rows = []
    for inputs, targets in XOR_DATA:
        output = net.run(inputs)[0]
        rows.append({
            "x1": inputs[0],
            "x2": inputs[1],
            "target": targets[0],
            "output": round(output, 4),
            "error": round(abs(output - targets[0]), 4),
        })
    return rows


# ===============================================================
#    SIDEBAR — HYPERPARAMÈTRES
# ===============================================================

st.sidebar.header("🎛️ Hyperparamètres")

epochs = st.sidebar.number_input("Epochs", min_value=1, max_value=200000, value=10000, step=1000)
learning_rate = st.sidebar.slider("Learning rate (η)", 0.01, 5.0, LEARNING_RATE, step=0.01)
hidden_size = st.sidebar.slider("Taille couche cachée", 1, 16, 3)
seed = st.sidebar.number_input("Seed des poids", min_value=0, value=0, step=1)
log_interval = st.sidebar.number_input("Log toutes les N epochs", min_value=1, value=1000, step=100)


# ===============================================================
#   CALLBACK D’ENTRAÎNEMENT (Epoch → Metrics)
# ===============================================================

def make_epoch_callback(run_id):
    def epoch_callback(epoch, metrics, network: Network):
        # Seules les epochs loggées portent le score test_mse
        if "test_mse" in metrics:
            entry = {"run_id": run_id}
            entry.update(metrics)
            st.session_state.metrics_history.append(entry)

    return epoch_callback


def run_single_training():
    clear_log()
    st.session_state.metrics_history = []

    sizes = [2, int(hidden_size), 1]
    net = Network(sizes, learning_rate=learning_rate, weight_source=make_weight_source(int(seed)))
    run_id = f"XOR_{datetime.now().strftime('%y%m%d_%H%M%S')}"

    before = results_table(net)

    append_log(f"=== NEW RUN {run_id} ===")
    append_log(f"Architecture: {sizes}")
    append_log(f"Epochs={epochs}, eta={learning_rate}, seed={seed}")

    net.train(
        XOR_DATA,
        int(epochs),
        test_data=XOR_DATA,
        log_fn=append_log,
        epoch_callback=make_epoch_callback(run_id),
        log_interval=int(log_interval),
    )

    final_mse = net.mean_squared_error(XOR_DATA)
    append_log(f"Final mse: {final_mse:.6f}")

    st.session_state.current_run = {
        "run_id": run_id,
        "sizes": sizes,
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "final_mse": final_mse,
        "before": before,
        "after": results_table(net),
    }


# ===============================================================
#   ONGLET TRAINING
# ===============================================================

col_left, col_right = st.columns([2, 1])

with col_left:
    st.subheader("🚀 Lancer un entraînement")

    if st.button("🔥 Start Training"):
        with st.spinner("Entraînement en cours..."):
            run_single_training()

    st.markdown("### 📡 Terminal")
    st.text_area("Output", value=st.session_state.log_text, height=300)

with col_right:
    st.subheader("📝 Dernier run")

    run = st.session_state.current_run
    if run is None:
        st.info("Aucun run pour le moment.")
    else:
        st.write(f"**Run ID :** `{run['run_id']}`")
        st.write(f"**Date :** `{run['timestamp']}`")
        st.write(f"**Architecture :** `{run['sizes']}`")
        st.metric("MSE finale", f"{run['final_mse']:.6f}")


# ===============================================================
#   COURBE D’ERREUR + RÉSULTATS
# ===============================================================

history = st.session_state.metrics_history
if history:
    st.markdown("### 📉 Erreur quadratique moyenne")
    mse_curve = np.array([h["test_mse"] for h in history])
    st.line_chart({"mse": mse_curve})

run = st.session_state.current_run
if run is not None:
    col_before, col_after = st.columns(2)
    with col_before:
        st.markdown("#### Avant entraînement")
        st.table(run["before"])
    with col_after:
        st.markdown("#### Après entraînement")
        st.table(run["after"])
