"""
Diabetes Risk Decision Support.
Main Streamlit interface: Risk Prediction form and Model Performance page.
"""
import sys
import logging
from pathlib import Path

# Ensure project root is on PYTHONPATH when launched with `streamlit run ui/streamlit_app.py`
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from pydantic import ValidationError

from core.config import AppConfig, load_config
from core.clinical_codes import CLINICAL_CODES
from core.schema import PatientInput
from pipeline.ml_pipeline import ModelTrainingError, run_ml_pipeline
from pipeline.evaluation import build_confusion_figure, build_roc_figure
from pipeline.predictor import predict_risk

logger = logging.getLogger(__name__)


def get_config() -> AppConfig:
    """Session-cached config."""
    if "config" not in st.session_state:
        st.session_state.config = load_config()
    return st.session_state.config


def get_pipeline_results(config: AppConfig) -> dict:
    """Train once per session; the fitted model is reused for every prediction."""
    if "pipeline_results" not in st.session_state:
        with st.spinner("Training logistic regression on synthetic data..."):
            st.session_state.pipeline_results = run_ml_pipeline(config)
    return st.session_state.pipeline_results


# --- Sidebar ---
def render_sidebar(config: AppConfig) -> str:
    """Render sidebar and return selected page: 'predict' or 'performance'."""
    st.sidebar.title(config.ui.title)
    st.sidebar.caption("Logistic regression on a synthetic health-indicator sample")
    st.sidebar.divider()
    page = st.sidebar.radio(
        "Page",
        ["Risk Prediction", "Model Performance"],
        key="main_page_radio",
    )
    return "performance" if page == "Model Performance" else "predict"


def render_input_form() -> PatientInput | None:
    """Medical history form. Returns validated input when the button is pressed, else None."""
    defaults = PatientInput()
    with st.form("medical_history"):
        st.subheader("Enter Your Medical History")
        glucose = st.number_input("Glucose Level", value=float(defaults.glucose), min_value=0.0)
        bp = st.number_input("Blood Pressure", value=float(defaults.blood_pressure), min_value=0.0)
        bmi = st.number_input("BMI", value=float(defaults.bmi), min_value=0.0)
        age = st.number_input("Age", value=float(defaults.age), min_value=0.0)
        family_history = st.checkbox("Family History of Diabetes", value=defaults.family_history)
        submitted = st.form_submit_button("Predict Diabetes Risk", width="stretch")
    if not submitted:
        return None
    try:
        return PatientInput(
            glucose=glucose,
            blood_pressure=bp,
            bmi=bmi,
            age=age,
            family_history=family_history,
        )
    except ValidationError as e:
        st.error(f"Invalid input: {e}")
        return None


def render_prediction_page(config: AppConfig, out: dict) -> None:
    st.title(config.ui.title)
    st.warning(
        "**Synthetic data demonstration.** The model is fitted on a 23-row sample repeated to "
        f"{len(out['df'])} rows; probabilities are illustrative, not clinical advice.",
        icon="🧪",
    )

    col_form, col_results = st.columns([1, 2])
    with col_form:
        patient = render_input_form()

    with col_results:
        st.subheader("Prediction Results")
        if patient is None:
            st.info("Fill in the form and press **Predict Diabetes Risk**.")
            return
        result = predict_risk(out["model"], patient, threshold=config.model.decision_threshold)
        st.code(result.probability_text, language=None)
        st.plotly_chart(build_roc_figure(out["evaluation"]), width="stretch")
        st.caption("ROC curve of the held-out test split (not of your record).")
        st.code(result.recommendation, language=None)
        st.code(result.clinical_codes, language=None)


def render_model_performance(out: dict) -> None:
    """Held-out evaluation, coefficients, and data-quality flags."""
    st.title("Model Performance")
    report = out["evaluation"]

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("AUC", f"{report.auc:.3f}")
    c2.metric("Accuracy", f"{report.accuracy:.3f}")
    c3.metric("Sensitivity", f"{report.sensitivity:.3f}")
    c4.metric("Specificity", f"{report.specificity:.3f}")
    st.caption(f"Train rows: {out['n_train']} · Test rows: {out['n_test']} · Positive class: Outcome = 1")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("ROC Curve")
        st.plotly_chart(build_roc_figure(report), width="stretch")
    with col2:
        st.subheader("Confusion Matrix")
        st.plotly_chart(build_confusion_figure(report), width="stretch")

    st.subheader("Coefficients (log-odds per unit)")
    coef_df = pd.DataFrame({
        "Feature": list(out["coefficients"].keys()),
        "Coef": list(out["coefficients"].values()),
    })
    features_only = coef_df[coef_df["Feature"] != "(Intercept)"]
    fig = go.Figure(
        go.Bar(
            x=features_only["Coef"],
            y=features_only["Feature"],
            orientation="h",
            marker_color=["#2E86AB" if c > 0 else "#A23B72" for c in features_only["Coef"]],
        )
    )
    fig.update_layout(height=300, yaxis=dict(autorange="reversed"))
    st.plotly_chart(fig, width="stretch")
    st.dataframe(coef_df, width="stretch", hide_index=True)

    st.subheader("Clinical Codes (ICD-10)")
    st.dataframe(
        pd.DataFrame({"Symptom": list(CLINICAL_CODES.keys()), "ICD10": list(CLINICAL_CODES.values())}),
        width="stretch",
        hide_index=True,
    )

    st.subheader("Data Quality")
    zeros = out["zero_report"]
    st.markdown(
        "Literal `0` values below may mean *not measured* rather than a true zero. "
        "They are reported, not imputed."
    )
    st.dataframe(
        pd.DataFrame({"Column": list(zeros.keys()), "Zero count": list(zeros.values())}),
        width="stretch",
        hide_index=True,
    )
    with st.expander("Synthetic dataset"):
        st.dataframe(out["df"], width="stretch")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    st.set_page_config(
        page_title="Diabetes Risk Prediction",
        page_icon="🩺",
        layout="wide",
    )
    config = get_config()
    page = render_sidebar(config)
    try:
        out = get_pipeline_results(config)
    except ModelTrainingError as e:
        logger.error("Training failed: %s", e)
        st.error(f"Model training failed: {e}")
        st.stop()
    if page == "performance":
        render_model_performance(out)
    else:
        render_prediction_page(config, out)


if __name__ == "__main__":
    main()
